import pytest

from package_kit.models import Branch, Package, ResolvedDependency, Unresolved, Version


def test_package_has_license_with_url():
    """Test that has_license is True when a license URL is set."""
    package = Package(
        name="Foo",
        location="https://github.com/acme/foo.git",
        license_url="https://raw.githubusercontent.com/acme/foo/1.2.0/LICENSE",
    )
    assert package.has_license is True


def test_package_has_license_without_url():
    """Test that has_license is False when no license was found."""
    package = Package(name="Foo", location="https://github.com/acme/foo.git")
    assert package.license_url is None
    assert package.has_license is False


def test_resolution_states_compare_by_value():
    """Test that resolution states are plain value objects."""
    assert Branch("main") == Branch("main")
    assert Version("1.0.0") != Version("1.0.1")
    assert Unresolved() == Unresolved()
    assert Branch("1.0.0") != Version("1.0.0")


def test_resolved_dependency_is_frozen(versioned_dependency: ResolvedDependency):
    """Test that dependency records cannot be mutated."""
    with pytest.raises(AttributeError):
        versioned_dependency.identity = "bar"  # type: ignore

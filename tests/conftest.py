"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from package_kit.models import Branch, ResolvedDependency, Unresolved, Version

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the directory holding test manifests."""
    return FIXTURES_DIR


@pytest.fixture
def resolved_path() -> Path:
    """Return path to the version 3 Package.resolved fixture."""
    return FIXTURES_DIR / "Package.resolved"


@pytest.fixture
def versioned_dependency() -> ResolvedDependency:
    """Return a dependency pinned to a version tag."""
    return ResolvedDependency(
        identity="foo",
        location="https://github.com/acme/foo.git",
        state=Version("1.2.0"),
        revision="3f1c0de8b6a4e7d2c9f05a1b8e6d4c2a0f9e8d7c",
        kind="remoteSourceControl",
    )


@pytest.fixture
def branch_dependency() -> ResolvedDependency:
    """Return a dependency pinned to a branch."""
    return ResolvedDependency(
        identity="swiftLint",
        location="https://github.com/realm/SwiftLint.git",
        state=Branch("main"),
        revision="f17a4f9dfb6a6afb0408426354e4180daaf49cee",
    )


@pytest.fixture
def unresolved_dependency() -> ResolvedDependency:
    """Return a dependency pinned to a revision only."""
    return ResolvedDependency(
        identity="local-tools",
        location="https://github.com/acme/local-tools.git",
        state=Unresolved(),
        revision="0a1b2c3d4e5f60718293a4b5c6d7e8f901234567",
    )

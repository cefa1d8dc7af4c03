"""Core data models for package_kit.

This module defines the data structures shared across the package: the
resolution state of a pinned dependency, the dependency record read from a
``Package.resolved`` manifest, and the public ``Package`` result.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Branch:
    """Dependency pinned to a branch.

    Attributes:
        name: Branch name (e.g., "main").
    """

    name: str


@dataclass(frozen=True)
class Version:
    """Dependency pinned to a version tag.

    Attributes:
        tag: Version tag exactly as written in the manifest (e.g., "1.2.0").
    """

    tag: str


@dataclass(frozen=True)
class Unresolved:
    """Dependency pinned to neither a branch nor a version (revision only)."""


ResolutionState = Union[Branch, Version, Unresolved]


@dataclass(frozen=True)
class ResolvedDependency:
    """Immutable record of a single pin from a dependency manifest.

    Records are created once per pin and never modified.

    Attributes:
        identity: Unique human-readable name (e.g., "swift-log").
        location: Repository URL as written in the manifest
            (e.g., "https://github.com/apple/swift-log.git").
        state: Branch, Version or Unresolved.
        revision: Commit identifier. Carried through, not used for lookups.
        kind: Optional pin kind (e.g., "remoteSourceControl").
    """

    identity: str
    location: str
    state: ResolutionState
    revision: str
    kind: Optional[str] = None


@dataclass(frozen=True)
class Package:
    """A dependency with its discovered license file.

    Attributes:
        name: Display name derived from the dependency identity.
        location: Repository location, unmodified.
        license_url: URL of the license file, or None if none was found.
    """

    name: str
    location: str
    license_url: Optional[str] = None

    @property
    def has_license(self) -> bool:
        """Return True if a license file was found for this package."""
        return self.license_url is not None

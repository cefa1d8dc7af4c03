"""License resolvers for locating license files of pinned dependencies."""

from package_kit.resolvers.base import BaseResolver
from package_kit.resolvers.http import RemoteFileProbe
from package_kit.resolvers.raw_github import RawGitHubResolver

__all__ = [
    "BaseResolver",
    "RawGitHubResolver",
    "RemoteFileProbe",
]

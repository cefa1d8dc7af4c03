"""Base interface for license resolvers.

Resolvers turn a pinned dependency into the URL of its license file.
"""

from abc import ABC, abstractmethod
from typing import Optional

from package_kit.models import ResolvedDependency


class BaseResolver(ABC):
    """Abstract base class for license resolvers.

    Resolvers are async so that many dependencies can be resolved
    concurrently on one event loop.
    """

    @abstractmethod
    async def resolve(self, dependency: ResolvedDependency) -> Optional[str]:
        """Resolve the license file URL for a dependency.

        Args:
            dependency: Dependency record to resolve.

        Returns:
            URL of the license file, or None if none was found.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resolver name for logging/debugging.

        Returns:
            Name like "RawGitHub".
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the resolver."""

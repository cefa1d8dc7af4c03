"""Package catalog assembling license information for a whole manifest.

The catalog resolves every dependency concurrently, bounded by a semaphore,
and returns one Package per dependency in manifest order.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional

from package_kit.models import Package, ResolvedDependency
from package_kit.resolvers import BaseResolver, RawGitHubResolver, RemoteFileProbe
from package_kit.scanners import get_scanner

logger = logging.getLogger(__name__)


def display_name(identity: str) -> str:
    """Format a dependency identity for display.

    The identity is capitalized as a single token: the first character is
    upper-cased and the rest lower-cased, so "swiftLint" becomes "Swiftlint"
    and "swift-log" becomes "Swift-log".
    """
    return identity.capitalize()


class PackageCatalog:
    """Maps dependency records to Package values with discovered licenses.

    Attributes:
        dependencies: Dependency records in manifest order.
        resolver: License resolver used for every dependency.
        concurrency: Maximum number of dependencies probed at once.
    """

    DEFAULT_CONCURRENCY = 8

    def __init__(
        self,
        dependencies: list[ResolvedDependency],
        resolver: Optional[BaseResolver] = None,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> None:
        """Initialize the catalog.

        Args:
            dependencies: Dependency records to resolve.
            resolver: Optional custom resolver. Defaults to RawGitHubResolver.
            concurrency: Maximum number of dependencies probed concurrently.

        Raises:
            ValueError: If concurrency is less than 1.
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")

        self.dependencies = list(dependencies)
        self.resolver = resolver or RawGitHubResolver()
        self.concurrency = concurrency

    @classmethod
    def from_manifest(cls, path: Path, **kwargs: Any) -> "PackageCatalog":
        """Build a catalog from a manifest file.

        A manifest that is missing, unsupported or unreadable yields an
        empty catalog; the error is logged rather than raised.

        Args:
            path: Path to the manifest (e.g., Package.resolved).
            **kwargs: Passed through to the constructor.

        Returns:
            PackageCatalog over the manifest's dependencies.
        """
        try:
            dependencies = get_scanner(path).scan()
        except (FileNotFoundError, ValueError) as e:
            logger.error("Could not read manifest %s: %s", path, e)
            dependencies = []

        return cls(dependencies, **kwargs)

    async def _build_package(
        self, dependency: ResolvedDependency, semaphore: asyncio.Semaphore
    ) -> Package:
        async with semaphore:
            license_url = await self.resolver.resolve(dependency)

        return Package(
            name=display_name(dependency.identity),
            location=dependency.location,
            license_url=license_url,
        )

    async def get_packages(self) -> list[Package]:
        """Resolve licenses for all dependencies.

        Dependencies are probed concurrently; the result keeps manifest order
        and always holds one Package per dependency. A dependency whose
        resolution fails unexpectedly is kept with license_url=None.

        Returns:
            List of Package objects in manifest order.
        """
        logger.info("Resolving licenses for %d packages", len(self.dependencies))

        semaphore = asyncio.Semaphore(self.concurrency)
        tasks = [self._build_package(dep, semaphore) for dep in self.dependencies]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        packages: list[Package] = []
        for dependency, result in zip(self.dependencies, results):
            if isinstance(result, BaseException):
                logger.error(
                    "Exception resolving license for %s: %s",
                    dependency.identity,
                    result,
                )
                result = Package(
                    name=display_name(dependency.identity),
                    location=dependency.location,
                )
            packages.append(result)

        found = sum(1 for package in packages if package.has_license)
        logger.info("License resolution complete: %d/%d found", found, len(packages))

        return packages

    async def close(self) -> None:
        """Close the resolver's resources (like HTTP sessions)."""
        await self.resolver.close()

    async def __aenter__(self) -> "PackageCatalog":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()


def get_packages(
    manifest_path: Path,
    *,
    timeout: float = RemoteFileProbe.DEFAULT_TIMEOUT,
    concurrency: int = PackageCatalog.DEFAULT_CONCURRENCY,
    github_token: Optional[str] = None,
) -> list[Package]:
    """Read a manifest and return its packages with license URLs.

    Blocks until every dependency has been probed.

    Args:
        manifest_path: Path to Package.resolved.
        timeout: Per-request timeout in seconds.
        concurrency: Maximum number of dependencies probed concurrently.
        github_token: Optional GitHub token for private repositories.

    Returns:
        List of Package objects in manifest order. Empty if the manifest
        cannot be read.
    """

    async def _run() -> list[Package]:
        resolver = RawGitHubResolver(timeout=timeout, github_token=github_token)
        catalog = PackageCatalog.from_manifest(
            manifest_path, resolver=resolver, concurrency=concurrency
        )
        async with catalog:
            return await catalog.get_packages()

    return asyncio.run(_run())

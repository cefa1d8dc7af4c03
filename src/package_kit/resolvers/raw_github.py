"""License resolver probing raw.githubusercontent.com.

Derives raw-content URLs from a dependency's repository location and pinned
branch or version, then probes a fixed list of license file names.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

from package_kit.models import Branch, ResolvedDependency, Version
from package_kit.resolvers.base import BaseResolver
from package_kit.resolvers.http import RemoteFileProbe

logger = logging.getLogger(__name__)

# Probed in this order, most common first
LICENSE_FILE_NAMES = ("LICENSE", "LICENSE.md", "LICENSE.txt")


def normalize_base_url(location: str) -> str:
    """Turn a repository location into a raw-content base URL.

    Plain substring replacement: every ``.git`` is removed, wherever it
    appears, and ``github.com/`` becomes ``raw.githubusercontent.com/``.
    Locations such as ``https://github.com/acme/foo.github.io.git`` are
    therefore mangled to ``https://raw.githubusercontent.com/acme/foohub.io``.
    Existing manifests depend on this exact behavior.

    Args:
        location: Repository location from the manifest.

    Returns:
        Base URL string without the ref component.
    """
    return location.replace(".git", "").replace(
        "github.com/", "raw.githubusercontent.com/"
    )


def candidate_base(dependency: ResolvedDependency) -> Optional[str]:
    """Return the base URL to probe for a dependency.

    Args:
        dependency: Dependency record.

    Returns:
        "{base}/{branch}" or "{base}/{tag}", or None for unresolved pins.
    """
    state = dependency.state
    base_url = normalize_base_url(dependency.location)

    if isinstance(state, Branch):
        return f"{base_url}/{state.name}"
    if isinstance(state, Version):
        return f"{base_url}/{state.tag}"
    return None


def candidate_urls(base: str) -> list[str]:
    """Return the license file URLs to probe under a base, in probe order."""
    return [f"{base}/{file_name}" for file_name in LICENSE_FILE_NAMES]


def is_well_formed(url: str) -> bool:
    """Check that a string is an absolute URL with a scheme and host.

    Args:
        url: Candidate URL string.

    Returns:
        False for strings with whitespace, no scheme or no host, or that the
        URL splitter rejects.
    """
    if any(ch.isspace() for ch in url):
        return False

    try:
        parsed = urlsplit(url)
    except ValueError:
        return False

    return bool(parsed.scheme and parsed.netloc)


class RawGitHubResolver(BaseResolver):
    """Resolver that finds license files by probing raw-content URLs.

    For a dependency pinned to a branch or version, probes
    ``{base}/{ref}/LICENSE``, ``LICENSE.md`` and ``LICENSE.txt`` in that order
    and returns the first that exists. Unresolved dependencies are skipped
    without any network call.

    Attributes:
        probe: Existence checker used for every candidate URL.
    """

    def __init__(
        self,
        probe: Optional[RemoteFileProbe] = None,
        timeout: float = RemoteFileProbe.DEFAULT_TIMEOUT,
        github_token: Optional[str] = None,
    ) -> None:
        """Initialize RawGitHubResolver.

        Args:
            probe: Optional custom probe. If not provided, creates one with
                the given timeout and token.
            timeout: Per-request timeout in seconds for the default probe.
            github_token: Optional GitHub token for the default probe.
        """
        self.probe = probe or RemoteFileProbe(timeout=timeout, github_token=github_token)

    @property
    def name(self) -> str:
        """Return the resolver name.

        Returns:
            "RawGitHub"
        """
        return "RawGitHub"

    async def resolve(self, dependency: ResolvedDependency) -> Optional[str]:
        """Find the license file URL for a dependency.

        Args:
            dependency: Dependency record to resolve.

        Returns:
            First candidate URL that exists, or None.
        """
        base = candidate_base(dependency)
        if base is None:
            logger.debug("%s has no branch or version, skipping", dependency.identity)
            return None

        for url in candidate_urls(base):
            if not is_well_formed(url):
                logger.debug("Skipping malformed candidate URL %r", url)
                continue

            if await self.probe.remote_file_exists(url):
                logger.debug("Found license for %s at %s", dependency.identity, url)
                return url

        logger.debug("No license file found for %s under %s", dependency.identity, base)
        return None

    async def close(self) -> None:
        """Close the probe's HTTP session."""
        await self.probe.close()

    async def __aenter__(self) -> "RawGitHubResolver":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

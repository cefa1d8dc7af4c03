"""HTTP existence checks for remote files."""

import asyncio
import logging
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)


class RemoteFileProbe:
    """Checks whether remote files exist using HEAD requests.

    Manages a shared aiohttp.ClientSession for connection pooling and reuse.
    Every request is bounded by a total timeout.

    Attributes:
        timeout: Total per-request timeout in seconds.
        github_token: Optional token sent as a bearer Authorization header.
    """

    DEFAULT_TIMEOUT = 5.0

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        github_token: Optional[str] = None,
    ) -> None:
        """Initialize the probe.

        Args:
            timeout: Total per-request timeout in seconds.
            github_token: Optional GitHub token, needed for private repositories.
        """
        self.timeout = timeout
        self.github_token = github_token
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session.

        Returns:
            The shared aiohttp ClientSession.
        """
        if self._session is None or self._session.closed:
            self._session = self._create_session()
        return self._session

    def _create_session(self) -> aiohttp.ClientSession:
        """Create a new aiohttp.ClientSession.

        Returns:
            A new aiohttp.ClientSession instance.
        """
        headers = {}
        if self.github_token:
            headers["Authorization"] = f"Bearer {self.github_token}"

        connector = aiohttp.TCPConnector(ttl_dns_cache=300)
        return aiohttp.ClientSession(
            connector=connector,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )

    async def remote_file_exists(self, url: str) -> bool:
        """Check if a remote file exists.

        Issues a single HEAD request. Only a final status of exactly 200
        counts as existing; other statuses, transport errors and timeouts
        all count as missing.

        Args:
            url: Absolute URL of the file.

        Returns:
            True if the server answered 200, False otherwise.
        """
        session = await self._get_session()

        try:
            async with session.head(url, allow_redirects=True) as response:
                logger.debug("HEAD %s -> %d", url, response.status)
                return response.status == 200
        except asyncio.TimeoutError:
            logger.debug("HEAD %s timed out after %ss", url, self.timeout)
            return False
        except aiohttp.ClientError as e:
            logger.debug("HEAD %s failed: %s", url, e)
            return False

    async def close(self) -> None:
        """Close the aiohttp session.

        Should be called when done using the probe to release resources.
        """
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "RemoteFileProbe":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

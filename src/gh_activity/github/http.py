"""GitHub HTTP client.

Async HTTP client for the public GitHub REST API. Every request is a single
best-effort attempt: there is no retry, rate limit or pagination handling.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from gh_activity import __version__
from gh_activity.config import ApiConfig

logger = logging.getLogger(__name__)


@dataclass
class GitHubResponse:
    """GitHub API response with parsed data and metadata."""

    status_code: int
    data: Any
    headers: httpx.Headers
    url: str = ""

    @property
    def is_success(self) -> bool:
        """Check if response was successful (2xx status code)."""
        return 200 <= self.status_code < 300

    @property
    def is_not_found(self) -> bool:
        """Check if the remote resource does not exist."""
        return self.status_code == 404


class GitHubHTTPError(Exception):
    """Raised when a request cannot be completed at the transport level."""


class GitHubClient:
    """Async HTTP client for the GitHub REST API.

    Sends the versioned JSON ``Accept`` header on every request. Paths may be
    relative to ``base_url`` or absolute URLs, such as the ``repos_url``
    locator embedded in a user record.
    """

    BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        accept: str = "application/vnd.github.v3+json",
    ) -> None:
        """Initialize GitHub HTTP client.

        Args:
            base_url: Base URL for GitHub API.
            timeout: Request timeout in seconds.
            accept: Value of the Accept header.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._accept = accept

        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: ApiConfig) -> "GitHubClient":
        """Create a client from the ``api`` config section."""
        return cls(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            accept=config.accept,
        )

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests.

        Returns:
            Dictionary of HTTP headers.
        """
        return {
            "Accept": self._accept,
            "User-Agent": f"gh-activity/{__version__}",
        }

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure async client is initialized.

        Returns:
            Active httpx.AsyncClient instance.
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._get_headers(),
                follow_redirects=True,
            )
        return self._client

    async def get(self, path: str, **kwargs: Any) -> GitHubResponse:
        """Make a GET request.

        Args:
            path: API path (e.g., "/users/octocat") or absolute URL.
            **kwargs: Additional arguments passed to httpx (params, etc.).

        Returns:
            GitHubResponse with parsed data. Non-2xx responses are returned,
            not raised; callers decide how to treat them.

        Raises:
            GitHubHTTPError: On timeout, network failure, redirect loops,
                undecodable bodies or invalid URLs.
        """
        client = await self._ensure_client()

        logger.debug("GET %s", path)

        try:
            response = await client.get(path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("Timeout for GET %s", path)
            raise GitHubHTTPError(f"Request timeout: {e}") from e
        except httpx.TransportError as e:
            logger.warning("Network error for GET %s: %s", path, e)
            raise GitHubHTTPError(f"Network error: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request failed for GET %s: %s", path, e)
            raise GitHubHTTPError(f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.debug("GET %s returned %d", path, response.status_code)

        data = None
        if response.content:
            try:
                data = response.json()
            except ValueError as e:
                logger.warning("Failed to parse JSON response from %s: %s", path, e)
                data = response.text

        return GitHubResponse(
            status_code=response.status_code,
            data=data,
            headers=response.headers,
            url=str(response.url),
        )

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubClient":
        """Async context manager entry."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

"""GitHub REST API endpoints used by the profile analyzer.

Each method issues exactly one GET and returns the decoded body, or None when
the remote reports absence, fails, or returns a body of the wrong shape.
Transport failures propagate as GitHubHTTPError.
"""

import logging
from typing import Any, cast
from urllib.parse import quote

from gh_activity.github.http import GitHubClient, GitHubResponse

logger = logging.getLogger(__name__)


class RestClient:
    """High-level wrapper around GitHubClient for the three profile endpoints."""

    def __init__(self, http_client: GitHubClient) -> None:
        """Initialize REST API client.

        Args:
            http_client: GitHubClient instance for HTTP requests.
        """
        self._http = http_client

    @staticmethod
    def user_path(handle: str) -> str:
        """Path of the user record for ``handle``."""
        return f"/users/{quote(handle, safe='')}"

    @staticmethod
    def events_path(handle: str) -> str:
        """Path of the public events feed for ``handle``."""
        return f"/users/{quote(handle, safe='')}/events/public"

    def _unwrap(self, response: GitHubResponse, what: str, expected: type) -> Any | None:
        if response.is_not_found:
            logger.debug("%s not found (404): %s", what, response.url)
            return None

        if not response.is_success:
            logger.warning("Failed to fetch %s: status %d", what, response.status_code)
            return None

        if not isinstance(response.data, expected):
            logger.warning(
                "Unexpected %s body: expected %s, got %s",
                what,
                expected.__name__,
                type(response.data).__name__,
            )
            return None

        return response.data

    async def get_user(self, handle: str) -> dict[str, Any] | None:
        """Get a user's public profile.

        Args:
            handle: GitHub login.

        Returns:
            User record dict, or None if not found or unusable.
        """
        logger.info("Fetching profile for %s", handle)
        response = await self._http.get(self.user_path(handle))
        data = self._unwrap(response, "user", dict)
        if not data:
            return None
        return cast("dict[str, Any]", data)

    async def list_repos(self, repos_url: str) -> list[Any] | None:
        """List repositories from the locator embedded in a user record.

        Args:
            repos_url: Absolute ``repos_url`` of the user record.

        Returns:
            Raw repository records in API order, or None on failure.
        """
        logger.info("Fetching repositories from %s", repos_url)
        response = await self._http.get(repos_url)
        return cast("list[Any] | None", self._unwrap(response, "repositories", list))

    async def list_public_events(self, handle: str) -> list[Any] | None:
        """List the first page of a user's public events.

        Args:
            handle: GitHub login.

        Returns:
            Raw event records, newest first as served, or None on failure.
        """
        logger.info("Fetching public events for %s", handle)
        response = await self._http.get(self.events_path(handle))
        return cast("list[Any] | None", self._unwrap(response, "events", list))

"""Tests for identity lookup and the fail-soft repository/event fetchers."""

import logging
from typing import Any

import httpx
import pytest
import respx

from gh_activity.events import fetch_events
from gh_activity.github.http import GitHubClient
from gh_activity.github.rest import RestClient
from gh_activity.lookup import NotFound, lookup
from gh_activity.models import Identity
from gh_activity.repos import fetch_collections

API = "https://api.github.com"
REPOS_URL = f"{API}/users/octocat/repos"
EVENTS_URL = f"{API}/users/octocat/events/public"


class TestLookup:
    """Tests for lookup()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_found(self, user_record: dict[str, Any]) -> None:
        """Test that an existing user resolves to an Identity."""
        respx.get(f"{API}/users/octocat").mock(return_value=httpx.Response(200, json=user_record))

        async with GitHubClient() as http:
            result = await lookup(RestClient(http), "octocat")

        assert isinstance(result, Identity)
        assert result.login == "octocat"
        assert result.repos_url == REPOS_URL

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(404, json={"message": "Not Found"}),
            httpx.Response(403, json={"message": "API rate limit exceeded"}),
            httpx.Response(502, text="Bad Gateway"),
            httpx.Response(200),
            httpx.Response(200, json={}),
            httpx.Response(200, json={"name": "no login"}),
            httpx.Response(200, json={"login": "octocat", "followers": "many"}),
        ],
    )
    async def test_unusable_response_is_not_found(self, response: httpx.Response) -> None:
        """Test that absent, failed and malformed lookups all give NotFound."""
        with respx.mock:
            respx.get(f"{API}/users/ghost").mock(return_value=response)

            async with GitHubClient() as http:
                result = await lookup(RestClient(http), "ghost")

        assert result == NotFound("ghost")

    @pytest.mark.asyncio
    @respx.mock
    async def test_unreachable_is_not_found(self) -> None:
        """Test that an unreachable API is indistinguishable from a missing user."""
        respx.get(f"{API}/users/octocat").mock(side_effect=httpx.ConnectError)

        async with GitHubClient() as http:
            result = await lookup(RestClient(http), "octocat")

        assert result == NotFound("octocat")

    @pytest.mark.asyncio
    @respx.mock
    async def test_handle_used_verbatim(self, user_record: dict[str, Any]) -> None:
        """Test that lookup does not normalize the handle."""
        route = respx.get(f"{API}/users/OctoCat").mock(
            return_value=httpx.Response(200, json=user_record)
        )

        async with GitHubClient() as http:
            await lookup(RestClient(http), "OctoCat")

        assert route.call_count == 1


class TestFetchCollections:
    """Tests for fetch_collections()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_preserves_order(self, repo_records: list[dict[str, Any]]) -> None:
        """Test that repositories come back in API order, unfiltered."""
        respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=repo_records))

        async with GitHubClient() as http:
            items = await fetch_collections(RestClient(http), REPOS_URL)

        assert [item.name for item in items] == ["Hello-World", "boysenberry-repo-1"]
        assert items[1].language == "Python"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(404),
            httpx.Response(500),
            httpx.Response(200),
            httpx.Response(200, json={"message": "oops"}),
            httpx.Response(200, json=[]),
        ],
    )
    async def test_failure_gives_empty(self, response: httpx.Response) -> None:
        """Test the fail-soft policy for HTTP-level failures."""
        with respx.mock:
            respx.get(REPOS_URL).mock(return_value=response)

            async with GitHubClient() as http:
                assert await fetch_collections(RestClient(http), REPOS_URL) == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_error_gives_empty(self) -> None:
        """Test the fail-soft policy for transport failures."""
        respx.get(REPOS_URL).mock(side_effect=httpx.ConnectError)

        async with GitHubClient() as http:
            assert await fetch_collections(RestClient(http), REPOS_URL) == []

    @pytest.mark.asyncio
    async def test_missing_locator_gives_empty(self) -> None:
        """Test that no request is made without a locator."""
        async with GitHubClient() as http:
            assert await fetch_collections(RestClient(http), "") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_items_skipped(
        self, repo_records: list[dict[str, Any]], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a bad record is dropped and the rest kept."""
        records = [{"name": "no-id"}, *repo_records]
        respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=records))

        with caplog.at_level(logging.WARNING, logger="gh_activity.repos"):
            async with GitHubClient() as http:
                items = await fetch_collections(RestClient(http), REPOS_URL)

        assert len(items) == 2
        assert "Skipping malformed repository record" in caplog.text


class TestFetchEvents:
    """Tests for fetch_events()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_all_event_types_returned(self, event_records: list[dict[str, Any]]) -> None:
        """Test that the fetcher keeps every event type for the aggregator."""
        respx.get(EVENTS_URL).mock(return_value=httpx.Response(200, json=event_records))

        async with GitHubClient() as http:
            events = await fetch_events(RestClient(http), "octocat")

        assert [event.type for event in events] == ["PushEvent", "WatchEvent", "PushEvent"]
        assert events[0].change_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_failure_gives_empty(self) -> None:
        """Test the fail-soft policy."""
        respx.get(EVENTS_URL).mock(return_value=httpx.Response(500))

        async with GitHubClient() as http:
            assert await fetch_events(RestClient(http), "octocat") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_gives_empty(self) -> None:
        """Test that a timeout is absorbed."""
        respx.get(EVENTS_URL).mock(side_effect=httpx.ReadTimeout)

        async with GitHubClient() as http:
            assert await fetch_events(RestClient(http), "octocat") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_records_skipped(self, event_records: list[dict[str, Any]]) -> None:
        """Test that records that are not events are dropped."""
        records = ["not-an-event", {"created_at": "2024-01-01T00:00:00Z"}, *event_records]
        respx.get(EVENTS_URL).mock(return_value=httpx.Response(200, json=records))

        async with GitHubClient() as http:
            events = await fetch_events(RestClient(http), "octocat")

        assert len(events) == 3


def redirect_loop(url: str) -> httpx.Response:
    """A redirect that points back at the same URL."""
    return httpx.Response(302, headers={"location": url})


class TestRequestErrors:
    """Tests for request errors other than timeouts and connection failures."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_redirect_loop_lookup_is_not_found(self) -> None:
        """Test that a redirect loop on the user record gives NotFound."""
        url = f"{API}/users/octocat"
        respx.get(url).mock(return_value=redirect_loop(url))

        async with GitHubClient() as http:
            result = await lookup(RestClient(http), "octocat")

        assert result == NotFound("octocat")

    @pytest.mark.asyncio
    @respx.mock
    async def test_redirect_loop_repos_gives_empty(self) -> None:
        """Test that a redirect loop on the listing gives no repositories."""
        respx.get(REPOS_URL).mock(return_value=redirect_loop(REPOS_URL))

        async with GitHubClient() as http:
            assert await fetch_collections(RestClient(http), REPOS_URL) == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_redirect_loop_events_gives_empty(self) -> None:
        """Test that a redirect loop on the event feed gives no events."""
        respx.get(EVENTS_URL).mock(return_value=redirect_loop(EVENTS_URL))

        async with GitHubClient() as http:
            assert await fetch_events(RestClient(http), "octocat") == []

    @pytest.mark.asyncio
    async def test_invalid_locator_gives_empty(self) -> None:
        """Test that an unusable repos_url gives no repositories."""
        async with GitHubClient() as http:
            assert await fetch_collections(RestClient(http), "http://[invalid") == []

"""Shared fixtures for gh-activity tests."""

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from gh_activity.models import RawEvent

API = "https://api.github.com"


def _make_push(
    created_at: str,
    commits: int | None = 1,
    event_type: str = "PushEvent",
) -> RawEvent:
    """Build a push-like event carrying ``commits`` change records.

    ``commits=None`` builds a payload without a commits list.
    """
    payload: dict[str, Any] = {"ref": "refs/heads/main"}
    if commits is not None:
        payload["commits"] = [
            {
                "sha": f"{i:040x}",
                "message": f"commit {i}",
                "author": {"name": "The Octocat", "email": "octocat@github.com"},
            }
            for i in range(commits)
        ]
    return RawEvent(type=event_type, created_at=created_at, payload=payload)


@pytest.fixture
def make_push() -> Callable[..., RawEvent]:
    """Factory for push-like events."""
    return _make_push


@pytest.fixture
def user_record() -> dict[str, Any]:
    """User record as served by GET /users/octocat."""
    return {
        "login": "octocat",
        "id": 583231,
        "name": "The Octocat",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "public_repos": 2,
        "followers": 9000,
        "following": 9,
        "repos_url": f"{API}/users/octocat/repos",
        "type": "User",
    }


@pytest.fixture
def repo_records() -> list[dict[str, Any]]:
    """Repository listing as served by the user's repos_url."""
    return [
        {
            "id": 1296269,
            "name": "Hello-World",
            "stargazers_count": 80,
            "forks_count": 9,
            "language": None,
            "private": False,
        },
        {
            "id": 132935648,
            "name": "boysenberry-repo-1",
            "stargazers_count": 12,
            "forks_count": 3,
            "language": "Python",
        },
    ]


@pytest.fixture
def event_records() -> list[dict[str, Any]]:
    """Public events feed with a mix of event types, newest first."""
    return [
        {
            "id": "3",
            "type": "PushEvent",
            "created_at": "2024-01-02T00:01:00Z",
            "payload": {
                "commits": [
                    {"sha": "c", "message": "third", "author": {"name": "o", "email": "o@x"}},
                    {"sha": "d", "message": "fourth", "author": {"name": "o", "email": "o@x"}},
                ]
            },
        },
        {
            "id": "2",
            "type": "WatchEvent",
            "created_at": "2024-01-01T12:00:00Z",
            "payload": {"action": "started"},
        },
        {
            "id": "1",
            "type": "PushEvent",
            "created_at": "2024-01-01T23:59:00Z",
            "payload": {
                "commits": [
                    {"sha": "a", "message": "first", "author": {"name": "o", "email": "o@x"}},
                ]
            },
        },
    ]


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo setup_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

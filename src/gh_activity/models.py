"""Records exchanged between the fetchers, the aggregator and the report.

Remote records are validated with pydantic and frozen once built. Unknown
fields sent by the API are ignored.
"""

import datetime
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Identity(_Record):
    """Public profile of a GitHub user."""

    login: str = Field(min_length=1)
    name: str | None = None
    avatar_url: str = ""
    public_repos: int = Field(default=0, ge=0)
    followers: int = Field(default=0, ge=0)
    following: int = Field(default=0, ge=0)
    repos_url: str = ""

    @property
    def display_name(self) -> str:
        """Name to show for the user, falling back to the login."""
        return self.name or self.login


class CollectionItem(_Record):
    """One repository from a user's repository listing."""

    id: int
    name: str
    stargazers_count: int = 0
    forks_count: int = 0
    language: str | None = None


class CommitAuthor(_Record):
    """Author descriptor attached to a pushed commit."""

    name: str | None = None
    email: str | None = None


class ChangeRecord(_Record):
    """One commit carried in a push event payload."""

    sha: str = ""
    message: str = ""
    author: CommitAuthor = Field(default_factory=CommitAuthor)

    @field_validator("author", mode="before")
    @classmethod
    def default_missing_author(cls, v: Any) -> Any:
        """Treat a null author as an empty descriptor."""
        return {} if v is None else v


class RawEvent(_Record):
    """Event from the public events feed.

    ``created_at`` is kept as the raw ISO-8601 string; turning it into a day
    key is the aggregator's job so that one bad timestamp only drops one
    event.
    """

    type: str
    created_at: str
    payload: dict[str, Any] = Field(default_factory=dict)

    @field_validator("payload", mode="before")
    @classmethod
    def default_missing_payload(cls, v: Any) -> Any:
        """Treat a null payload as empty."""
        return {} if v is None else v

    @property
    def change_records(self) -> list[ChangeRecord]:
        """Commits in the payload.

        Empty unless the payload carries a list. Entries that are not commit
        objects are left out.
        """
        commits = self.payload.get("commits")
        if not isinstance(commits, list):
            return []

        records = []
        for commit in commits:
            if not isinstance(commit, dict):
                continue
            try:
                records.append(ChangeRecord.model_validate(commit))
            except ValidationError:
                continue
        return records

    @property
    def change_count(self) -> int:
        """Number of commits carried by the event."""
        return len(self.change_records)

    def is_push_like(self, push_types: Sequence[str]) -> bool:
        """Check whether the event tag is one of ``push_types``."""
        return self.type in push_types


class ActivityPoint(_Record):
    """Commit count for one UTC calendar day."""

    date: datetime.date
    count: int = Field(ge=0)

    @property
    def day_key(self) -> str:
        """Day as ``YYYY-MM-DD``."""
        return self.date.isoformat()

    def as_dict(self) -> dict[str, Any]:
        """Chart-ready representation."""
        return {"date": self.day_key, "count": self.count}

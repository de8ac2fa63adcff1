"""Exceptions raised by gh-activity."""


class GhActivityError(Exception):
    """Base exception for gh-activity errors."""


class NotFoundError(GhActivityError):
    """Raised when a handle cannot be resolved to a GitHub profile.

    A missing user and an unreachable API are reported the same way.
    """

    def __init__(self, handle: str) -> None:
        self.handle = handle
        super().__init__("User not found on GitHub. Please check the username and try again.")


class MalformedEventError(GhActivityError):
    """Raised when an event timestamp cannot be turned into a day key."""

    def __init__(self, created_at: object, reason: str) -> None:
        self.created_at = created_at
        super().__init__(f"Malformed event timestamp {created_at!r}: {reason}")

"""GitHub API clients."""

from gh_activity.github.http import (
    GitHubClient,
    GitHubHTTPError,
    GitHubResponse,
)
from gh_activity.github.rest import RestClient

__all__ = [
    # HTTP Client
    "GitHubClient",
    "GitHubHTTPError",
    "GitHubResponse",
    # REST API Client
    "RestClient",
]

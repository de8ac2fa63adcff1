"""Identity lookup.

Resolves a handle to an Identity. Every failure mode collapses into a single
NotFound result so that callers cannot tell a missing user from an
unreachable API.
"""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from gh_activity.github.http import GitHubHTTPError
from gh_activity.github.rest import RestClient
from gh_activity.models import Identity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotFound:
    """Lookup result for a handle that could not be resolved."""

    handle: str


LookupResult = Identity | NotFound


async def lookup(client: RestClient, handle: str) -> LookupResult:
    """Look up a GitHub profile.

    The handle is used as given; trimming is the caller's job.

    Args:
        client: REST client.
        handle: GitHub login.

    Returns:
        The Identity as served by the API, or NotFound.
    """
    try:
        record = await client.get_user(handle)
    except GitHubHTTPError as e:
        logger.warning("Lookup of %s failed: %s", handle, e)
        return NotFound(handle)

    if record is None:
        return NotFound(handle)

    try:
        return Identity.model_validate(record)
    except ValidationError as e:
        logger.warning("Unusable profile record for %s: %s", handle, e)
        return NotFound(handle)

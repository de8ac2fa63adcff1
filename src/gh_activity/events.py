"""Public event feed fetcher.

Same fail-soft policy as the repository fetcher: failures become an empty
feed, which renders as "no commit history".
"""

import logging

from pydantic import ValidationError

from gh_activity.github.http import GitHubHTTPError
from gh_activity.github.rest import RestClient
from gh_activity.models import RawEvent

logger = logging.getLogger(__name__)


async def fetch_events(client: RestClient, handle: str) -> list[RawEvent]:
    """Fetch the first page of a user's public events.

    Args:
        client: REST client.
        handle: GitHub login.

    Returns:
        Events of every type, in the order served. Empty on any failure.
    """
    try:
        records = await client.list_public_events(handle)
    except GitHubHTTPError as e:
        logger.warning("Event fetch failed for %s, continuing without activity: %s", handle, e)
        return []

    if not records:
        return []

    events: list[RawEvent] = []
    skipped = 0
    for record in records:
        try:
            events.append(RawEvent.model_validate(record))
        except ValidationError:
            skipped += 1

    if skipped:
        logger.warning("Skipped %d malformed event records for %s", skipped, handle)

    return events

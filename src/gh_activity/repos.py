"""Repository listing fetcher.

Fail-soft: a missing repository list degrades the report instead of
aborting it.
"""

import logging

from pydantic import ValidationError

from gh_activity.github.http import GitHubHTTPError
from gh_activity.github.rest import RestClient
from gh_activity.models import CollectionItem

logger = logging.getLogger(__name__)


async def fetch_collections(client: RestClient, locator: str) -> list[CollectionItem]:
    """Fetch the repositories behind a ``repos_url`` locator.

    Args:
        client: REST client.
        locator: Opaque listing URL taken from the Identity.

    Returns:
        Repositories in the order served. Empty on any failure.
    """
    if not locator:
        logger.warning("Profile has no repository locator")
        return []

    try:
        records = await client.list_repos(locator)
    except GitHubHTTPError as e:
        logger.warning("Repository fetch failed, continuing without repositories: %s", e)
        return []

    if not records:
        return []

    items: list[CollectionItem] = []
    for record in records:
        try:
            items.append(CollectionItem.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping malformed repository record: %s", e.errors()[0]["msg"])

    logger.debug("Fetched %d repositories", len(items))
    return items

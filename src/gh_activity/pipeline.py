"""Profile analysis pipeline.

analyze() resolves the handle, then fetches the repository list and the
public event feed concurrently and aggregates the events into daily commit
counts. Only a failed lookup is reported as an error; the two feeds degrade
to empty lists.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from gh_activity.config import Config
from gh_activity.errors import NotFoundError
from gh_activity.events import fetch_events
from gh_activity.github.http import GitHubClient
from gh_activity.github.rest import RestClient
from gh_activity.lookup import NotFound, lookup
from gh_activity.metrics.activity import aggregate, fill_gaps
from gh_activity.models import ActivityPoint, CollectionItem, Identity
from gh_activity.repos import fetch_collections

logger = logging.getLogger(__name__)


@dataclass
class ProfileReport:
    """Everything shown for one analyzed handle."""

    identity: Identity
    repositories: list[CollectionItem] = field(default_factory=list)
    activity: list[ActivityPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable representation."""
        return {
            "profile": self.identity.model_dump(),
            "repositories": [repo.model_dump() for repo in self.repositories],
            "activity": [point.as_dict() for point in self.activity],
        }


async def analyze(
    handle: str,
    config: Config | None = None,
    client: GitHubClient | None = None,
) -> ProfileReport:
    """Analyze a GitHub handle.

    Args:
        handle: Trimmed, non-empty GitHub login.
        config: Application configuration. Defaults apply when None.
        client: HTTP client to use. A client is created from config and
            closed afterwards when None; a passed client is left open.

    Returns:
        ProfileReport with the profile, repositories and daily activity.

    Raises:
        NotFoundError: If the handle cannot be resolved. Nothing else is
            fetched in that case.
    """
    cfg = config or Config()

    if client is None:
        async with GitHubClient.from_config(cfg.api) as owned_client:
            return await _analyze(handle, cfg, owned_client)

    return await _analyze(handle, cfg, client)


async def _analyze(handle: str, cfg: Config, http_client: GitHubClient) -> ProfileReport:
    rest = RestClient(http_client)

    result = await lookup(rest, handle)
    if isinstance(result, NotFound):
        logger.info("Handle %s could not be resolved", handle)
        raise NotFoundError(result.handle)

    identity = result
    repositories, events = await asyncio.gather(
        fetch_collections(rest, identity.repos_url),
        fetch_events(rest, identity.login),
    )

    activity = aggregate(events, push_types=cfg.activity.push_event_types)
    if cfg.activity.fill_gaps:
        activity = fill_gaps(activity)

    logger.info(
        "Analyzed %s: %d repositories, %d events, %d activity days",
        identity.login,
        len(repositories),
        len(events),
        len(activity),
    )

    return ProfileReport(identity=identity, repositories=repositories, activity=activity)


def analyze_sync(handle: str, config: Config | None = None) -> ProfileReport:
    """Blocking wrapper around analyze() for the CLI."""
    return asyncio.run(analyze(handle, config))

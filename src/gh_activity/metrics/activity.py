"""Daily commit activity from the public event feed.

Turns an unordered mix of events into a date-ordered series of
(UTC day, commit count) points:

    - Only push-like events (PushEvent by default) are counted.
    - Timestamps are truncated to the UTC calendar day, never local time.
    - Each push contributes the number of commits in its payload; a push
      with no commits still makes its day appear, with 0.
    - Days without any push are absent; see fill_gaps() for a dense series.
    - Events with unparseable timestamps are skipped with a warning.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from gh_activity.errors import MalformedEventError
from gh_activity.models import ActivityPoint, RawEvent

logger = logging.getLogger(__name__)

PUSH_EVENT_TYPES: tuple[str, ...] = ("PushEvent",)


def day_key_for(created_at: str) -> date:
    """Truncate an ISO 8601 timestamp to its UTC calendar day.

    Handles GitHub's "2024-01-15T10:30:00Z" form as well as explicit
    offsets, which are converted to UTC before truncating. Naive timestamps
    are taken to be UTC.

    Args:
        created_at: ISO 8601 timestamp string.

    Returns:
        The UTC calendar day.

    Raises:
        MalformedEventError: If the timestamp cannot be parsed.
    """
    if not isinstance(created_at, str) or not created_at.strip():
        raise MalformedEventError(created_at, "empty timestamp")

    try:
        dt = datetime.fromisoformat(created_at.strip().replace("Z", "+00:00"))
    except ValueError as e:
        raise MalformedEventError(created_at, str(e)) from e

    dt = dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)
    return dt.date()


def aggregate(
    events: Iterable[RawEvent],
    push_types: Sequence[str] = PUSH_EVENT_TYPES,
) -> list[ActivityPoint]:
    """Count commits per UTC day across push-like events.

    Args:
        events: Events of any type, in any order.
        push_types: Event types that carry commits.

    Returns:
        One point per day that had at least one push-like event, sorted by
        date ascending. Empty if there were none.
    """
    commits_by_day: defaultdict[date, int] = defaultdict(int)
    skipped = 0

    for event in events:
        if not event.is_push_like(push_types):
            continue

        try:
            day = day_key_for(event.created_at)
        except MalformedEventError as e:
            logger.warning("Skipping push event: %s", e)
            skipped += 1
            continue

        commits_by_day[day] += event.change_count

    if skipped:
        logger.debug("Skipped %d push events with malformed timestamps", skipped)

    return [
        ActivityPoint(date=day, count=count) for day, count in sorted(commits_by_day.items())
    ]


def fill_gaps(points: Sequence[ActivityPoint]) -> list[ActivityPoint]:
    """Insert zero-count points for missing days between the first and last day.

    Args:
        points: Output of aggregate(), sorted ascending.

    Returns:
        A dense daily series over the same range.
    """
    if not points:
        return []

    by_day = {point.date: point for point in points}
    first, last = points[0].date, points[-1].date

    filled = []
    day = first
    while day <= last:
        point = by_day.get(day)
        filled.append(point if point is not None else ActivityPoint(date=day, count=0))
        day += timedelta(days=1)
    return filled


@dataclass(frozen=True)
class ActivitySummary:
    """Headline numbers for a daily activity series."""

    total: int
    active_days: int
    first_day: date | None
    last_day: date | None
    busiest: ActivityPoint | None


def summarize(points: Sequence[ActivityPoint]) -> ActivitySummary:
    """Summarize a daily activity series.

    Args:
        points: Daily points sorted by date.

    Returns:
        Totals and extremes. The busiest day is the earliest one on a tie.
    """
    if not points:
        return ActivitySummary(total=0, active_days=0, first_day=None, last_day=None, busiest=None)

    busiest = points[0]
    for point in points[1:]:
        if point.count > busiest.count:
            busiest = point

    return ActivitySummary(
        total=sum(point.count for point in points),
        active_days=sum(1 for point in points if point.count > 0),
        first_day=points[0].date,
        last_day=points[-1].date,
        busiest=busiest,
    )

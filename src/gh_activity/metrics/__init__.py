"""Metrics derived from fetched GitHub data."""

from gh_activity.metrics.activity import (
    PUSH_EVENT_TYPES,
    ActivitySummary,
    aggregate,
    day_key_for,
    fill_gaps,
    summarize,
)

__all__ = [
    "PUSH_EVENT_TYPES",
    "ActivitySummary",
    "aggregate",
    "day_key_for",
    "fill_gaps",
    "summarize",
]

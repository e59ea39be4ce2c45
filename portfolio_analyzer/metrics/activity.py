"""Activity consistency metric."""

from datetime import datetime, timedelta

from portfolio_analyzer.metrics.base import (
    Ladder,
    Metric,
    MetricContext,
    MetricSpec,
    clamp_score,
    ladder_points,
)
from portfolio_analyzer.models import Event, Repository, ensure_utc

MAX_SCORE = 20

RECENT_WINDOW = timedelta(days=30)
MEDIUM_WINDOW = timedelta(days=90)

RECENT_LADDER: Ladder = ((20, 10), (10, 7), (5, 5), (1, 3))
MEDIUM_LADDER: Ladder = ((40, 10), (20, 7), (10, 5), (5, 3))


def count_events_since(events: list[Event], since: datetime) -> int:
    """Count events created strictly after `since`. Undated events never count."""
    since = ensure_utc(since)
    return sum(
        1
        for event in events
        if event.created_at is not None and ensure_utc(event.created_at) > since
    )


def check_activity(
    events: list[Event], repos: list[Repository], now: datetime
) -> Metric:
    """
    Evaluates how recent and consistent the account's public activity is.

    Uses every event returned for the account (forks included). `repos` is
    accepted for parity with the other scorers but does not affect the score.

    Scoring:
    - Last 30 days: 20+ events 10, 10+ 7, 5+ 5, 1+ 3
    - Last 90 days: 40+ events 10, 20+ 7, 10+ 5, 5+ 3
    """
    now = ensure_utc(now)
    recent = count_events_since(events, now - RECENT_WINDOW)
    medium = count_events_since(events, now - MEDIUM_WINDOW)

    score = ladder_points(recent, RECENT_LADDER) + ladder_points(medium, MEDIUM_LADDER)

    return Metric(
        "activity",
        "Activity Consistency",
        clamp_score(score, MAX_SCORE),
        MAX_SCORE,
        f"{recent} events in last 30 days, {medium} in last 90 days",
    )


def _check(context: MetricContext) -> Metric:
    return check_activity(context.events, context.repositories, context.now)


METRIC = MetricSpec(
    key="activity",
    name="Activity Consistency",
    max_score=MAX_SCORE,
    checker=_check,
)

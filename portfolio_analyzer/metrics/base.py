"""
Shared metric types and context helpers.
"""

import math
from datetime import datetime
from typing import Callable, NamedTuple

from portfolio_analyzer.models import Event, Profile, Repository

# (threshold, points) pairs, highest threshold first
Ladder = tuple[tuple[int, int], ...]


class Metric(NamedTuple):
    """A single portfolio sub-score."""

    key: str
    name: str
    score: float
    max_score: int
    details: str


class MetricContext(NamedTuple):
    """Context provided to metric checks."""

    profile: Profile
    repositories: list[Repository]
    original_repositories: list[Repository]
    events: list[Event]
    now: datetime


class MetricSpec(NamedTuple):
    """Specification for a metric check."""

    key: str
    name: str
    max_score: int
    checker: Callable[[MetricContext], Metric]


def ladder_points(value: float, ladder: Ladder) -> int:
    """Award the points of the first rung whose threshold `value` reaches."""
    for threshold, points in ladder:
        if value >= threshold:
            return points
    return 0


def clamp_score(score: float, max_score: float) -> float:
    """Clamp a score into [0, max_score]."""
    return max(0, min(max_score, score))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() uses banker's rounding (round(0.5) == 0); scores use the
    conventional rule so that 2.5 becomes 3.
    """
    return int(math.floor(value + 0.5))

"""
Display-only summaries: language mix, top repositories, activity timeline.

None of these feed into the score.
"""

from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import NamedTuple

from portfolio_analyzer.metrics.base import Ladder, ladder_points
from portfolio_analyzer.models import Event, Repository, ensure_utc

MAX_LANGUAGES = 6
MAX_TOP_REPOSITORIES = 5
TIMELINE_DAYS = 90

LANGUAGE_COLORS = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#2b7489",
    "Python": "#3572A5",
    "Java": "#b07219",
    "C++": "#f34b7d",
    "C": "#555555",
    "C#": "#178600",
    "Ruby": "#701516",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "PHP": "#4F5D95",
    "Swift": "#ffac45",
    "Kotlin": "#F18E33",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Shell": "#89e051",
    "Jupyter Notebook": "#DA5B0B",
}
DEFAULT_LANGUAGE_COLOR = "#8b8b8b"

ACTIVITY_LEVEL_LADDER: Ladder = ((8, 4), (5, 3), (3, 2), (1, 1))


class LanguageShare(NamedTuple):
    """How many original repositories use a language as their primary one."""

    name: str
    count: int
    percentage: float
    color: str


class ActivityDay(NamedTuple):
    """Event count for one UTC calendar day."""

    date: date
    count: int
    level: int


def get_language_color(language: str) -> str:
    return LANGUAGE_COLORS.get(language, DEFAULT_LANGUAGE_COLOR)


def language_distribution(repos: list[Repository]) -> list[LanguageShare]:
    """
    Summarizes primary languages across original repositories.

    Repositories without a detected language are left out. Percentages are
    of the repositories that have one, rounded to one decimal place.
    Ties keep first-seen order.
    """
    counts = Counter(repo.language for repo in repos if not repo.fork and repo.language)
    total = sum(counts.values())
    shares = [
        LanguageShare(
            name=name,
            count=count,
            percentage=round(count / total * 100, 1),
            color=get_language_color(name),
        )
        for name, count in counts.items()
    ]
    shares.sort(key=lambda share: share.count, reverse=True)
    return shares[:MAX_LANGUAGES]


def repository_rank_score(repo: Repository) -> int:
    """Stars weigh 3, forks 2, watchers 1."""
    return repo.stargazers_count * 3 + repo.forks_count * 2 + repo.watchers_count


def top_repositories(repos: list[Repository]) -> list[Repository]:
    """Return the five highest-ranked original repositories (stable on ties)."""
    originals = [repo for repo in repos if not repo.fork]
    ranked = sorted(originals, key=repository_rank_score, reverse=True)
    return ranked[:MAX_TOP_REPOSITORIES]


def activity_level(count: int) -> int:
    """Map a daily event count to a heat level 0-4."""
    return ladder_points(count, ACTIVITY_LEVEL_LADDER)


def activity_timeline(events: list[Event], now: datetime) -> list[ActivityDay]:
    """
    Buckets events by UTC day over the trailing 90 days, today included.

    Returns:
        90 ActivityDay entries, oldest first.
    """
    per_day: Counter[date] = Counter(
        ensure_utc(event.created_at).astimezone(timezone.utc).date()
        for event in events
        if event.created_at is not None
    )
    today = ensure_utc(now).astimezone(timezone.utc).date()

    timeline = []
    for offset in range(TIMELINE_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        count = per_day.get(day, 0)
        timeline.append(ActivityDay(date=day, count=count, level=activity_level(count)))
    return timeline

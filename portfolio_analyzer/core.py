"""
Core analysis logic for GitHub Portfolio Analyzer.
"""

import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, NamedTuple
from urllib.parse import urlsplit

from rich.console import Console

from portfolio_analyzer.errors import InvalidInputError
from portfolio_analyzer.github_client import GitHubClient
from portfolio_analyzer.insights import (
    Recommendation,
    generate_recommendations,
    identify_red_flags,
    identify_strengths,
)
from portfolio_analyzer.metrics import compute_metrics
from portfolio_analyzer.metrics.base import Metric, MetricContext
from portfolio_analyzer.models import (
    Event,
    Profile,
    Repository,
    ensure_utc,
    original_repositories,
)
from portfolio_analyzer.scoring import ScoreTier, classify_score, compute_overall_score
from portfolio_analyzer.summaries import (
    ActivityDay,
    LanguageShare,
    activity_timeline,
    language_distribution,
    top_repositories,
)

# Progress goes to stderr so that JSON output on stdout stays parseable
console = Console(stderr=True)

# GitHub logins: alphanumerics and single hyphens, at most 39 characters
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9-]{0,38}$")


class AnalysisResult(NamedTuple):
    """The result of a portfolio analysis."""

    username: str
    analyzed_at: datetime
    profile: Profile
    repositories: list[Repository]
    events: list[Event]
    metrics: dict[str, Metric]
    overall_score: int
    tier: ScoreTier
    strengths: list[str]
    red_flags: list[str]
    recommendations: list[Recommendation]
    languages: list[LanguageShare]
    top_repositories: list[Repository]
    activity_timeline: list[ActivityDay]


# --- Input Handling ---


def extract_username(value: str) -> str:
    """
    Extracts a GitHub username from a bare handle or a profile URL.

    Accepts "octocat", "@octocat", "github.com/octocat",
    "https://www.github.com/octocat/" or "https://github.com/octocat/repo";
    only the first path segment after the host is used.

    Raises:
        InvalidInputError: If no valid username can be extracted.
    """
    text = (value or "").strip()
    if not text:
        raise InvalidInputError("Please enter a GitHub username")

    if "://" in text:
        path = urlsplit(text).path
    else:
        path = text.split("?", 1)[0].split("#", 1)[0]
        first = path.split("/", 1)[0]
        # Usernames never contain dots, so a dotted first segment is a host
        if "." in first:
            path = path[len(first) :]

    segments = [segment for segment in path.split("/") if segment]
    username = segments[0].lstrip("@") if segments else ""

    if not USERNAME_PATTERN.match(username):
        raise InvalidInputError("Please enter a valid GitHub username")
    return username


# --- Analysis ---


def _normalize_now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return ensure_utc(now)


def analyze_profile_data(
    profile: Profile,
    repositories: list[Repository],
    events: list[Event],
    now: datetime | None = None,
) -> AnalysisResult:
    """
    Scores already-fetched profile data.

    This is the pure part of the pipeline: the same inputs and `now` always
    produce the same result, and nothing here raises for missing fields.

    Args:
        profile: The account profile
        repositories: Every repository returned for the account (forks included)
        events: Recent public events
        now: Reference time for the 30/90-day and 6-month windows.
             Defaults to the current UTC time.

    Returns:
        AnalysisResult with metrics, overall score, insights and summaries
    """
    now = _normalize_now(now)
    originals = original_repositories(repositories)

    context = MetricContext(
        profile=profile,
        repositories=repositories,
        original_repositories=originals,
        events=events,
        now=now,
    )
    metrics = compute_metrics(context)
    overall_score = compute_overall_score(metrics)

    return AnalysisResult(
        username=profile.login,
        analyzed_at=now,
        profile=profile,
        repositories=repositories,
        events=events,
        metrics=metrics,
        overall_score=overall_score,
        tier=classify_score(overall_score),
        strengths=identify_strengths(metrics, profile, repositories),
        red_flags=identify_red_flags(metrics, profile, repositories, now),
        recommendations=generate_recommendations(metrics, profile, repositories),
        languages=language_distribution(originals),
        top_repositories=top_repositories(originals),
        activity_timeline=activity_timeline(events, now),
    )


def analyze_profile(
    identifier: str,
    token: str | None = None,
    now: datetime | None = None,
    client: GitHubClient | None = None,
    verbose: bool = False,
) -> AnalysisResult:
    """
    Performs a full portfolio analysis for a GitHub account.

    Args:
        identifier: Username or profile URL
        token: Optional GitHub token (falls back to configuration)
        now: Reference time for time windows (default: current UTC time)
        client: Pre-built client, mainly for tests
        verbose: Print progress for each fetch step

    Returns:
        AnalysisResult for the account

    Raises:
        InvalidInputError: If the identifier is empty or malformed
        NotFoundError: If the user does not exist
        RateLimitedError: If GitHub rate limits the request
        TransportFailureError: On any other fetch failure
    """
    username = extract_username(identifier)
    client = client or GitHubClient(token=token)

    console.print(f"Analyzing [bold cyan]{username}[/bold cyan]...")

    def _step(message: str) -> None:
        if verbose:
            console.print(f"[dim]{message}[/dim]")

    snapshot = client.fetch_all(username, on_step=_step)

    _step("Generating insights...")
    return analyze_profile_data(
        snapshot.profile, snapshot.repositories, snapshot.events, now=now
    )


# --- Serialization ---


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if hasattr(value, "_asdict"):
        return {key: _to_jsonable(item) for key, item in value._asdict().items()}
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    """Convert an AnalysisResult into JSON-compatible primitives."""
    return _to_jsonable(result)

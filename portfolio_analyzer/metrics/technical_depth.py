"""Technical depth metric."""

from portfolio_analyzer.metrics.base import (
    Ladder,
    Metric,
    MetricContext,
    MetricSpec,
    clamp_score,
    ladder_points,
)
from portfolio_analyzer.models import Repository

MAX_SCORE = 10

LANGUAGE_LADDER: Ladder = ((5, 5), (3, 3), (2, 2), (1, 1))
REPO_COUNT_LADDER: Ladder = ((20, 5), (10, 4), (5, 3), (3, 2), (1, 1))


def check_technical_depth(repos: list[Repository]) -> Metric:
    """
    Evaluates breadth of languages and size of the original portfolio.

    Scoring:
    - Distinct primary languages: 5+ 5, 3+ 3, 2 2, 1 1
    - Repositories: 20+ 5, 10+ 4, 5+ 3, 3+ 2, 1+ 1
    """
    languages = {repo.language for repo in repos if repo.language}

    score = ladder_points(len(languages), LANGUAGE_LADDER) + ladder_points(
        len(repos), REPO_COUNT_LADDER
    )

    return Metric(
        "technicalDepth",
        "Technical Depth",
        clamp_score(score, MAX_SCORE),
        MAX_SCORE,
        f"{len(languages)} different languages, {len(repos)} repositories",
    )


def _check(context: MetricContext) -> Metric:
    return check_technical_depth(context.original_repositories)


METRIC = MetricSpec(
    key="technicalDepth",
    name="Technical Depth",
    max_score=MAX_SCORE,
    checker=_check,
)

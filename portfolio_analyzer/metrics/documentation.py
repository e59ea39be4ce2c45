"""Documentation quality metric."""

from portfolio_analyzer.metrics.base import (
    Metric,
    MetricContext,
    MetricSpec,
    clamp_score,
)
from portfolio_analyzer.models import Repository

MAX_SCORE = 20
# Highest raw score a single repository can earn
MAX_REPO_POINTS = 10


def score_repository_documentation(repo: Repository) -> int:
    """
    Scores one repository's documentation signals (0-10 raw points).

    - Description longer than 20 characters: 4 (shorter: 2)
    - Non-empty repository (README implied by size): 3
    - Homepage/website: 2
    - Topics: 1
    """
    points = 0
    if repo.description and len(repo.description) > 20:
        points += 4
    elif repo.description:
        points += 2

    if repo.size > 0:
        points += 3

    if repo.homepage:
        points += 2

    if repo.topics:
        points += 1

    return points


def check_documentation(repos: list[Repository]) -> Metric:
    """
    Evaluates documentation quality across original repositories.

    The average raw score (0-10) is rescaled to the 0-20 range. The result
    is not rounded: an average of 9 raw points scores 18.0.
    """
    count = len(repos)
    if count == 0:
        score = 0.0
    else:
        total = sum(score_repository_documentation(repo) for repo in repos)
        score = total * MAX_SCORE / (count * MAX_REPO_POINTS)

    return Metric(
        "documentation",
        "Documentation Quality",
        clamp_score(score, MAX_SCORE),
        MAX_SCORE,
        f"{count} repositories analyzed for documentation quality",
    )


def _check(context: MetricContext) -> Metric:
    return check_documentation(context.original_repositories)


METRIC = MetricSpec(
    key="documentation",
    name="Documentation Quality",
    max_score=MAX_SCORE,
    checker=_check,
)

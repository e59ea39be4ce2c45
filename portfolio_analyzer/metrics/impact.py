"""Project impact metric."""

from portfolio_analyzer.metrics.base import (
    Ladder,
    Metric,
    MetricContext,
    MetricSpec,
    clamp_score,
    ladder_points,
)
from portfolio_analyzer.models import Repository

MAX_SCORE = 15

STARS_LADDER: Ladder = ((100, 7), (50, 5), (20, 4), (10, 3), (5, 2), (1, 1))
FORKS_LADDER: Ladder = ((20, 4), (10, 3), (5, 2), (1, 1))
WATCHERS_LADDER: Ladder = ((20, 4), (10, 3), (5, 2), (1, 1))


def check_impact(repos: list[Repository]) -> Metric:
    """
    Evaluates community engagement with the account's original work.

    Stars (up to 7), forks (up to 4) and watchers (up to 4) are summed
    across repositories and each total is scored on its own ladder.
    """
    total_stars = sum(repo.stargazers_count for repo in repos)
    total_forks = sum(repo.forks_count for repo in repos)
    total_watchers = sum(repo.watchers_count for repo in repos)

    score = (
        ladder_points(total_stars, STARS_LADDER)
        + ladder_points(total_forks, FORKS_LADDER)
        + ladder_points(total_watchers, WATCHERS_LADDER)
    )

    return Metric(
        "impact",
        "Project Impact",
        clamp_score(score, MAX_SCORE),
        MAX_SCORE,
        f"{total_stars} stars, {total_forks} forks across all repositories",
    )


def _check(context: MetricContext) -> Metric:
    return check_impact(context.original_repositories)


METRIC = MetricSpec(
    key="impact",
    name="Project Impact",
    max_score=MAX_SCORE,
    checker=_check,
)

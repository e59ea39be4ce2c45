"""Code structure metric."""

from portfolio_analyzer.metrics.base import (
    Metric,
    MetricContext,
    MetricSpec,
    clamp_score,
    round_half_up,
)
from portfolio_analyzer.models import Repository

MAX_SCORE = 20


def has_structure(repo: Repository) -> bool:
    """A repository looks structured if it is non-trivial, well-tagged or starred."""
    return repo.size > 100 or len(repo.topics) >= 2 or repo.stargazers_count > 0


def check_structure(repos: list[Repository]) -> Metric:
    """
    Scores the share of original repositories that show good structure.

    Scoring: round(structured / total * 20), 0 when there are no repositories.
    """
    structured = sum(1 for repo in repos if has_structure(repo))
    score = round_half_up(structured / len(repos) * MAX_SCORE) if repos else 0

    return Metric(
        "structure",
        "Code Structure",
        clamp_score(score, MAX_SCORE),
        MAX_SCORE,
        f"{structured} out of {len(repos)} repos show good structure",
    )


def _check(context: MetricContext) -> Metric:
    return check_structure(context.original_repositories)


METRIC = MetricSpec(
    key="structure",
    name="Code Structure",
    max_score=MAX_SCORE,
    checker=_check,
)

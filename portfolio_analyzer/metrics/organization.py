"""Profile and repository organization metric."""

from portfolio_analyzer.metrics.base import (
    Ladder,
    Metric,
    MetricContext,
    MetricSpec,
    clamp_score,
    ladder_points,
)
from portfolio_analyzer.models import Profile, Repository

MAX_SCORE = 15

QUALITY_REPO_LADDER: Ladder = ((6, 5), (3, 3), (1, 1))
NAMING_CONSISTENCY_RATIO = 0.6


def profile_completeness(profile: Profile) -> int:
    """Bio 2, location 1, blog 1, company 1 (max 5)."""
    points = 0
    if profile.bio:
        points += 2
    if profile.location:
        points += 1
    if profile.blog:
        points += 1
    if profile.company:
        points += 1
    return points


def is_quality_repository(repo: Repository) -> bool:
    return repo.stargazers_count > 0 or bool(
        repo.description and len(repo.description) > 30
    )


def has_consistent_naming(repos: list[Repository]) -> bool:
    """
    Checks whether most repository names follow kebab-case or snake_case.

    An empty collection is not considered consistent.
    """
    total = len(repos)
    if total == 0:
        return False
    kebab_case = sum(1 for repo in repos if "-" in repo.name)
    snake_case = sum(1 for repo in repos if "_" in repo.name)
    return (
        kebab_case / total > NAMING_CONSISTENCY_RATIO
        or snake_case / total > NAMING_CONSISTENCY_RATIO
    )


def check_organization(profile: Profile, repos: list[Repository]) -> Metric:
    """
    Evaluates profile completeness and how tidy the repository list looks.

    Scoring (max 15):
    - Profile completeness: up to 5
    - Quality repositories (starred or described in 30+ chars): 6+ 5, 3+ 3, 1+ 1
    - Naming consistency: 5 when consistent, otherwise 2
    """
    score = profile_completeness(profile)

    quality_repos = sum(1 for repo in repos if is_quality_repository(repo))
    score += ladder_points(quality_repos, QUALITY_REPO_LADDER)

    score += 5 if has_consistent_naming(repos) else 2

    return Metric(
        "organization",
        "Organization",
        clamp_score(score, MAX_SCORE),
        MAX_SCORE,
        "Profile completeness and repository organization",
    )


def _check(context: MetricContext) -> Metric:
    return check_organization(context.profile, context.original_repositories)


METRIC = MetricSpec(
    key="organization",
    name="Organization",
    max_score=MAX_SCORE,
    checker=_check,
)

"""
Qualitative feedback derived from the computed metrics.

Three independent rule sets read the metrics plus the raw profile and
repository list: strengths, red flags and prioritized recommendations.
"""

import calendar
from datetime import datetime
from enum import Enum
from typing import Mapping, NamedTuple

from portfolio_analyzer.metrics.base import Metric
from portfolio_analyzer.models import Profile, Repository, ensure_utc

MAX_RECOMMENDATIONS = 6
RECENT_REPOSITORY_MONTHS = 6
FORK_RATIO_THRESHOLD = 0.7
FORK_RATIO_MIN_REPOS = 5

NO_STRENGTHS = "Active GitHub presence with room for improvement"
NO_RED_FLAGS = "No major red flags identified"


class Priority(str, Enum):
    """Recommendation priority, most urgent first."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class Recommendation(NamedTuple):
    """An actionable suggestion for improving the portfolio."""

    title: str
    description: str
    priority: Priority
    impact: str


IMPROVE_DOCUMENTATION = Recommendation(
    title="Improve Repository Documentation",
    description=(
        "Add comprehensive README files with project descriptions, setup "
        "instructions, usage examples, and screenshots. Include badges for build "
        "status, license, and code coverage."
    ),
    priority=Priority.HIGH,
    impact="High - Documentation is the first thing recruiters check",
)
INCREASE_CONSISTENCY = Recommendation(
    title="Increase Commit Consistency",
    description=(
        "Maintain regular commits even if small. Aim for consistent activity "
        "rather than irregular bursts. Use GitHub contribution calendar to track "
        "your streak."
    ),
    priority=Priority.HIGH,
    impact="High - Shows dedication and active skill development",
)
COMPLETE_PROFILE = Recommendation(
    title="Complete Your Profile",
    description=(
        "Add a professional bio, location, personal website/portfolio, and "
        "relevant social links. Consider adding a profile README "
        "(username/username repository)."
    ),
    priority=Priority.MEDIUM,
    impact="Medium - First impression matters",
)
BUILD_IMPACT = Recommendation(
    title="Build Projects with Real-World Impact",
    description=(
        "Create projects that solve real problems, contribute to open source, or "
        "showcase practical applications. Add project demos and deployment links."
    ),
    priority=Priority.HIGH,
    impact="High - Demonstrates practical problem-solving ability",
)
PIN_REPOSITORIES = Recommendation(
    title="Pin Your Best Repositories",
    description=(
        "Use GitHub's pin feature to showcase your top 6 projects. Choose diverse "
        "projects that demonstrate different skills and technologies."
    ),
    priority=Priority.MEDIUM,
    impact="Medium - Controls recruiter's first impression",
)
DIVERSIFY_STACK = Recommendation(
    title="Diversify Your Technical Stack",
    description=(
        "Explore additional programming languages and frameworks. Build projects "
        "using different technologies to show versatility and learning ability."
    ),
    priority=Priority.LOW,
    impact="Medium - Shows adaptability and continuous learning",
)
ORGANIZE_REPOSITORIES = Recommendation(
    title="Organize Your Repositories",
    description=(
        "Archive or delete old/incomplete projects. Use consistent naming "
        "conventions (kebab-case recommended). Add topics/tags to all repositories "
        "for discoverability."
    ),
    priority=Priority.MEDIUM,
    impact="Medium - Shows attention to detail",
)
ADD_TESTING_CI = Recommendation(
    title="Add Automated Testing & CI/CD",
    description=(
        "Implement unit tests and set up GitHub Actions for continuous integration. "
        "Add test coverage badges to READMEs to demonstrate code quality."
    ),
    priority=Priority.LOW,
    impact="High - Signals professional development practices",
)


def _score(metrics: Mapping[str, Metric], key: str) -> float:
    metric = metrics.get(key)
    return metric.score if metric is not None else 0


def months_before(moment: datetime, months: int) -> datetime:
    """Step back whole calendar months, clamping the day to the target month."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def identify_strengths(
    metrics: Mapping[str, Metric], profile: Profile, repos: list[Repository]
) -> list[str]:
    """List what the portfolio already does well, in a fixed order."""
    strengths = []

    if _score(metrics, "documentation") >= 15:
        strengths.append(
            "Excellent documentation across repositories with clear descriptions "
            "and README files"
        )

    if _score(metrics, "activity") >= 15:
        strengths.append(
            "Consistent and recent commit activity showing active development"
        )

    if _score(metrics, "impact") >= 10:
        strengths.append(
            "Strong community engagement with stars and forks on repositories"
        )

    if _score(metrics, "technicalDepth") >= 7:
        strengths.append(
            "Diverse technical skill set demonstrated across multiple programming "
            "languages"
        )

    if profile.bio and profile.location and (profile.blog or profile.company):
        strengths.append(
            "Complete and professional GitHub profile with detailed information"
        )

    if sum(1 for repo in repos if not repo.fork) >= 10:
        strengths.append("Substantial portfolio with multiple original projects")

    return strengths or [NO_STRENGTHS]


def identify_red_flags(
    metrics: Mapping[str, Metric],
    profile: Profile,
    repos: list[Repository],
    now: datetime,
) -> list[str]:
    """List what a reviewer would likely hold against the portfolio."""
    red_flags = []

    if _score(metrics, "documentation") < 10:
        red_flags.append("Many repositories lack proper documentation and descriptions")

    if _score(metrics, "activity") < 8:
        red_flags.append(
            "Limited recent activity - recruiters look for consistent contributions"
        )

    if _score(metrics, "impact") < 5:
        red_flags.append("Repositories have minimal community engagement (stars/forks)")

    if not profile.bio or not profile.location:
        red_flags.append("Incomplete profile information - missing bio or location")

    if len(repos) > FORK_RATIO_MIN_REPOS:
        fork_ratio = sum(1 for repo in repos if repo.fork) / len(repos)
        if fork_ratio > FORK_RATIO_THRESHOLD:
            red_flags.append(
                "High proportion of forked repositories - showcase more original work"
            )

    if _score(metrics, "technicalDepth") < 4:
        red_flags.append(
            "Limited language diversity - consider exploring different technologies"
        )

    cutoff = months_before(ensure_utc(now), RECENT_REPOSITORY_MONTHS)
    recent_repos = [
        repo
        for repo in repos
        if repo.created_at is not None and ensure_utc(repo.created_at) > cutoff
    ]
    if repos and not recent_repos:
        red_flags.append("No new repositories in the past 6 months")

    return red_flags or [NO_RED_FLAGS]


def generate_recommendations(
    metrics: Mapping[str, Metric], profile: Profile, repos: list[Repository]
) -> list[Recommendation]:
    """
    Builds prioritized recommendations.

    Conditional suggestions are emitted alongside two that always apply
    (pinning repositories, testing and CI). The list is stable-sorted by
    priority, high first, and cut to the six most urgent.
    """
    recommendations = []

    if _score(metrics, "documentation") < 15:
        recommendations.append(IMPROVE_DOCUMENTATION)

    if _score(metrics, "activity") < 12:
        recommendations.append(INCREASE_CONSISTENCY)

    if not profile.bio or not profile.location or not profile.blog:
        recommendations.append(COMPLETE_PROFILE)

    if _score(metrics, "impact") < 8:
        recommendations.append(BUILD_IMPACT)

    recommendations.append(PIN_REPOSITORIES)

    if _score(metrics, "technicalDepth") < 6:
        recommendations.append(DIVERSIFY_STACK)

    if _score(metrics, "organization") < 10:
        recommendations.append(ORGANIZE_REPOSITORIES)

    recommendations.append(ADD_TESTING_CI)

    recommendations.sort(key=lambda rec: PRIORITY_ORDER[rec.priority])
    return recommendations[:MAX_RECOMMENDATIONS]

"""
Tests for strengths, red flags and recommendations.
"""

from datetime import datetime, timezone

from portfolio_analyzer.insights import (
    ADD_TESTING_CI,
    BUILD_IMPACT,
    COMPLETE_PROFILE,
    IMPROVE_DOCUMENTATION,
    INCREASE_CONSISTENCY,
    NO_RED_FLAGS,
    NO_STRENGTHS,
    ORGANIZE_REPOSITORIES,
    PIN_REPOSITORIES,
    PRIORITY_ORDER,
    Priority,
    generate_recommendations,
    identify_red_flags,
    identify_strengths,
    months_before,
)
from portfolio_analyzer.metrics.base import Metric
from portfolio_analyzer.models import Profile, Repository

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
RECENT = datetime(2024, 5, 1, tzinfo=timezone.utc)
OLD = datetime(2020, 1, 1, tzinfo=timezone.utc)

MAX_SCORES = {
    "documentation": 20,
    "structure": 20,
    "activity": 20,
    "organization": 15,
    "impact": 15,
    "technicalDepth": 10,
}

COMPLETE_PROFILE_DATA = Profile(
    login="octocat",
    bio="Backend developer",
    location="Berlin",
    blog="https://octocat.dev",
)
EMPTY_PROFILE = Profile(login="octocat")


def make_metrics(**scores: float) -> dict[str, Metric]:
    """Build a synthetic metrics mapping; unspecified dimensions score zero."""
    return {
        key: Metric(key, key, scores.get(key, 0), max_score, "")
        for key, max_score in MAX_SCORES.items()
    }


def full_metrics() -> dict[str, Metric]:
    return make_metrics(**MAX_SCORES)


class TestStrengths:
    def test_all_strengths(self):
        repos = [Repository(name=f"r{i}") for i in range(10)]
        strengths = identify_strengths(full_metrics(), COMPLETE_PROFILE_DATA, repos)
        assert strengths == [
            "Excellent documentation across repositories with clear descriptions "
            "and README files",
            "Consistent and recent commit activity showing active development",
            "Strong community engagement with stars and forks on repositories",
            "Diverse technical skill set demonstrated across multiple programming "
            "languages",
            "Complete and professional GitHub profile with detailed information",
            "Substantial portfolio with multiple original projects",
        ]

    def test_fallback_strength(self):
        assert identify_strengths(make_metrics(), EMPTY_PROFILE, []) == [NO_STRENGTHS]

    def test_thresholds_are_inclusive(self):
        metrics = make_metrics(documentation=15, activity=14.9)
        strengths = identify_strengths(metrics, EMPTY_PROFILE, [])
        assert len(strengths) == 1
        assert strengths[0].startswith("Excellent documentation")

    def test_profile_strength_accepts_company_instead_of_blog(self):
        profile = Profile(login="a", bio="Hi", location="Oslo", company="Acme")
        strengths = identify_strengths(make_metrics(), profile, [])
        assert strengths == [
            "Complete and professional GitHub profile with detailed information"
        ]

    def test_forks_do_not_count_towards_portfolio_size(self):
        repos = [Repository(name=f"r{i}") for i in range(9)] + [
            Repository(name="fork", fork=True)
        ]
        assert identify_strengths(make_metrics(), EMPTY_PROFILE, repos) == [
            NO_STRENGTHS
        ]


class TestRedFlags:
    def test_no_red_flags(self):
        repos = [Repository(name="fresh", created_at=RECENT)]
        flags = identify_red_flags(full_metrics(), COMPLETE_PROFILE_DATA, repos, NOW)
        assert flags == [NO_RED_FLAGS]

    def test_empty_account(self):
        flags = identify_red_flags(make_metrics(), EMPTY_PROFILE, [], NOW)
        assert flags == [
            "Many repositories lack proper documentation and descriptions",
            "Limited recent activity - recruiters look for consistent contributions",
            "Repositories have minimal community engagement (stars/forks)",
            "Incomplete profile information - missing bio or location",
            "Limited language diversity - consider exploring different technologies",
        ]

    def test_fork_heavy_account(self):
        repos = [Repository(name=f"f{i}", fork=True, created_at=RECENT) for i in range(6)]
        flags = identify_red_flags(full_metrics(), COMPLETE_PROFILE_DATA, repos, NOW)
        assert flags == [
            "High proportion of forked repositories - showcase more original work"
        ]

    def test_fork_ratio_needs_more_than_five_repositories(self):
        repos = [Repository(name=f"f{i}", fork=True, created_at=RECENT) for i in range(5)]
        flags = identify_red_flags(full_metrics(), COMPLETE_PROFILE_DATA, repos, NOW)
        assert flags == [NO_RED_FLAGS]

    def test_no_new_repositories(self):
        repos = [Repository(name="old", created_at=OLD)]
        flags = identify_red_flags(full_metrics(), COMPLETE_PROFILE_DATA, repos, NOW)
        assert flags == ["No new repositories in the past 6 months"]

    def test_recent_fork_counts_as_new_repository(self):
        repos = [
            Repository(name="old", created_at=OLD),
            Repository(name="fork", fork=True, created_at=RECENT),
        ]
        flags = identify_red_flags(full_metrics(), COMPLETE_PROFILE_DATA, repos, NOW)
        assert flags == [NO_RED_FLAGS]

    def test_boundaries(self):
        metrics = make_metrics(
            documentation=10, activity=8, impact=5, technicalDepth=4
        )
        repos = [Repository(name="fresh", created_at=RECENT)]
        flags = identify_red_flags(metrics, COMPLETE_PROFILE_DATA, repos, NOW)
        assert flags == [NO_RED_FLAGS]


class TestMonthsBefore:
    def test_simple(self):
        assert months_before(NOW, 6) == datetime(2023, 12, 15, 12, 0, tzinfo=timezone.utc)

    def test_clamps_day_to_month_length(self):
        moment = datetime(2024, 8, 31, tzinfo=timezone.utc)
        assert months_before(moment, 6) == datetime(2024, 2, 29, tzinfo=timezone.utc)


class TestRecommendations:
    def test_empty_account_keeps_six_most_urgent(self):
        recommendations = generate_recommendations(make_metrics(), EMPTY_PROFILE, [])
        assert recommendations == [
            IMPROVE_DOCUMENTATION,
            INCREASE_CONSISTENCY,
            BUILD_IMPACT,
            COMPLETE_PROFILE,
            PIN_REPOSITORIES,
            ORGANIZE_REPOSITORIES,
        ]

    def test_strong_account_gets_only_standing_recommendations(self):
        recommendations = generate_recommendations(
            full_metrics(), COMPLETE_PROFILE_DATA, []
        )
        assert recommendations == [PIN_REPOSITORIES, ADD_TESTING_CI]

    def test_profile_recommendation_requires_blog(self):
        profile = Profile(login="a", bio="Hi", location="Oslo", company="Acme")
        recommendations = generate_recommendations(full_metrics(), profile, [])
        assert recommendations == [COMPLETE_PROFILE, PIN_REPOSITORIES, ADD_TESTING_CI]

    def test_sorted_and_bounded(self):
        for metrics in (make_metrics(), full_metrics(), make_metrics(activity=12)):
            for profile in (EMPTY_PROFILE, COMPLETE_PROFILE_DATA):
                recommendations = generate_recommendations(metrics, profile, [])
                assert len(recommendations) <= 6
                orders = [PRIORITY_ORDER[rec.priority] for rec in recommendations]
                assert orders == sorted(orders)

    def test_priority_values(self):
        assert IMPROVE_DOCUMENTATION.priority == Priority.HIGH
        assert IMPROVE_DOCUMENTATION.priority.value == "high"
        assert ADD_TESTING_CI.priority is Priority.LOW


class TestNaiveReferenceTime:
    def test_red_flags_accept_naive_now(self):
        repos = [Repository(name="fresh", created_at=RECENT)]
        naive_now = NOW.replace(tzinfo=None)
        flags = identify_red_flags(full_metrics(), COMPLETE_PROFILE_DATA, repos, naive_now)
        assert flags == [NO_RED_FLAGS]

    def test_red_flags_with_naive_repository_dates(self):
        repos = [Repository(name="old", created_at=datetime(2020, 1, 1))]
        flags = identify_red_flags(full_metrics(), COMPLETE_PROFILE_DATA, repos, NOW)
        assert flags == ["No new repositories in the past 6 months"]

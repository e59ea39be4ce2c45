"""
Tests for overall score aggregation and tiers.
"""

import pytest

from portfolio_analyzer.metrics.base import Metric
from portfolio_analyzer.scoring import (
    SCORE_TIERS,
    classify_score,
    compute_overall_score,
)


def _metrics(*scores: float) -> dict[str, Metric]:
    keys = ["documentation", "structure", "activity", "organization", "impact"]
    return {key: Metric(key, key, score, 20, "") for key, score in zip(keys, scores)}


def test_overall_score_is_rounded_sum():
    assert compute_overall_score(_metrics(14.5, 10, 0, 2, 0)) == 27
    assert compute_overall_score(_metrics(14.4, 10, 0, 2, 0)) == 26


def test_overall_score_empty():
    assert compute_overall_score({}) == 0


def test_overall_score_is_clamped():
    assert compute_overall_score(_metrics(20, 20, 20, 20, 20)) == 100
    assert compute_overall_score(_metrics(30, 30, 30, 30, 30)) == 100


@pytest.mark.parametrize(
    "score, key, badge",
    [
        (100, "excellent", "Recruiter Ready"),
        (80, "excellent", "Recruiter Ready"),
        (79, "good", "Above Average"),
        (60, "good", "Above Average"),
        (59, "average", "Needs Work"),
        (40, "average", "Needs Work"),
        (39, "needs-improvement", "Work in Progress"),
        (0, "needs-improvement", "Work in Progress"),
    ],
)
def test_classify_score(score, key, badge):
    tier = classify_score(score)
    assert tier.key == key
    assert tier.badge == badge


def test_tiers_are_ordered_high_to_low():
    minimums = [tier.min_score for tier in SCORE_TIERS]
    assert minimums == sorted(minimums, reverse=True)
    assert SCORE_TIERS[-1].min_score == 0

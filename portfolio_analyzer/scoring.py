"""
Overall score aggregation and tier classification.
"""

from typing import Mapping, NamedTuple

from portfolio_analyzer.metrics.base import Metric, round_half_up

MAX_OVERALL_SCORE = 100


class ScoreTier(NamedTuple):
    """A band of overall scores with its display copy."""

    key: str
    min_score: int
    title: str
    description: str
    badge: str


# Evaluated high to low; the last tier catches everything else
SCORE_TIERS: tuple[ScoreTier, ...] = (
    ScoreTier(
        key="excellent",
        min_score=80,
        title="Excellent Profile!",
        description=(
            "Your GitHub profile is impressive and recruiter-ready. "
            "Keep up the great work!"
        ),
        badge="Recruiter Ready",
    ),
    ScoreTier(
        key="good",
        min_score=60,
        title="Good Profile!",
        description=(
            "Your profile is solid with room for improvement. "
            "Follow the recommendations to stand out more."
        ),
        badge="Above Average",
    ),
    ScoreTier(
        key="average",
        min_score=40,
        title="Average Profile",
        description=(
            "Your profile needs attention. "
            "Focus on the high-priority recommendations below."
        ),
        badge="Needs Work",
    ),
    ScoreTier(
        key="needs-improvement",
        min_score=0,
        title="Profile Needs Improvement",
        description=(
            "Significant improvements needed to be competitive. "
            "Start with the recommendations below."
        ),
        badge="Work in Progress",
    ),
)


def compute_overall_score(metrics: Mapping[str, Metric]) -> int:
    """
    Computes the overall portfolio score.

    The six sub-score ceilings add up to exactly 100, so the rounded sum
    already lies in [0, 100]; the clamp keeps that true if a ceiling changes.

    Args:
        metrics: Computed metrics keyed by metric key

    Returns:
        Overall score on 0-100 scale
    """
    total = round_half_up(sum(metric.score for metric in metrics.values()))
    return max(0, min(MAX_OVERALL_SCORE, total))


def classify_score(score: int) -> ScoreTier:
    """Return the tier an overall score falls into."""
    for tier in SCORE_TIERS:
        if score >= tier.min_score:
            return tier
    return SCORE_TIERS[-1]

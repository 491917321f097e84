"""Score badge mapping for display."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreBadge:
    """Display label and visual tier derived from a score."""

    label: str
    tier: str


# (inclusive lower bound, badge), checked top-down
BADGE_TIERS = (
    (85, ScoreBadge(label="Excellent", tier="default")),
    (70, ScoreBadge(label="Good", tier="default")),
    (50, ScoreBadge(label="Fair", tier="secondary")),
)

NEEDS_WORK = ScoreBadge(label="Needs Work", tier="destructive")


def get_score_badge(score: float) -> ScoreBadge:
    """
    Map a score to its display badge.

    Example:
        >>> get_score_badge(85)
        ScoreBadge(label='Excellent', tier='default')
        >>> get_score_badge(49)
        ScoreBadge(label='Needs Work', tier='destructive')
    """
    for lower_bound, badge in BADGE_TIERS:
        if score >= lower_bound:
            return badge
    return NEEDS_WORK

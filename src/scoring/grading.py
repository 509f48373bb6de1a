"""Score → percentage → grade, as shown on the results screens."""

from __future__ import annotations

from dataclasses import dataclass


PERFECT_THRESHOLD = 0.95
EXCELLENT_THRESHOLD = 0.80
GOOD_THRESHOLD = 0.60
HEARTS_THRESHOLD = 0.50
STARS_THRESHOLD = 1.00


@dataclass(frozen=True)
class Grade:
    percentage: float
    label: str
    hearts: bool
    stars: bool


def percentage(points: int, max_points: int) -> float:
    """Fraction of *max_points* earned; 0.0 when there is nothing to earn."""
    if max_points <= 0:
        return 0.0
    return points / max_points


def grade_for(points: int, max_points: int) -> Grade:
    pct = percentage(points, max_points)
    if pct >= PERFECT_THRESHOLD:
        label = "PERFECT!"
    elif pct >= EXCELLENT_THRESHOLD:
        label = "EXCELLENT!"
    elif pct >= GOOD_THRESHOLD:
        label = "GOOD!"
    else:
        label = "KEEP TRYING!"
    return Grade(
        percentage=pct,
        label=label,
        hearts=pct >= HEARTS_THRESHOLD,
        stars=pct >= STARS_THRESHOLD,
    )

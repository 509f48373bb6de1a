"""Shared scoring constants for the decorating game.

Every bonus the aggregator hands out is described here.  Both the
day-end aggregation and the bonus helpers read from a single
:class:`ScoringRules` instance, so a tuned value changes every stage at
once.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.catalog.themes import KNOWN_THEMES


@dataclass(frozen=True)
class ThemeBonus:
    """Bonus for a group of tracked items sharing a theme tag."""

    theme_name: str
    bonus_points: int = 15
    """Awarded once the theme has at least two members."""

    additional_per_item: int = 5
    """Added for every member beyond the first."""


@dataclass(frozen=True)
class ScoringRules:
    """Bonus and aggregation rules.

    All values are in points unless noted.
    """

    perfect_placement_bonus: int = 5
    """Per item scored at its theoretical maximum."""

    daily_completion_bonus: int = 20
    """Once per day, when every tracked item is a perfect placement."""

    adjacent_item_bonus: int = 5
    """Per neighbouring item within ``adjacency_radius``."""

    adjacency_radius: float = 1.0
    """World units between item geometries to count as adjacent."""

    preferred_theme_bonus: int = 25
    """Per item matching the hermit's preferred theme of the day."""

    daily_preferred_themes: tuple[str, ...] = ()
    """Cycled by day number; empty means no daily preference."""

    theme_bonuses: tuple[ThemeBonus, ...] = tuple(ThemeBonus(t) for t in KNOWN_THEMES)

    def __post_init__(self) -> None:
        if self.adjacency_radius < 0:
            raise ValueError(f"adjacency_radius must be >= 0, got {self.adjacency_radius}")

    def theme_bonus_for(self, theme: str) -> ThemeBonus | None:
        return next((b for b in self.theme_bonuses if b.theme_name == theme), None)


# Module-level default, importable everywhere.
SCORING_RULES = ScoringRules()

"""End-of-day bonuses: theme groups, neighbouring items, the daily preferred theme."""

from __future__ import annotations

from typing import Iterable

from src.geometry import to_shapely

from .config import ScoringRules
from .models import PlacedItem


def group_by_theme(items: Iterable[PlacedItem]) -> dict[str, list[PlacedItem]]:
    """Theme tag → member items, skipping items without a definition."""
    groups: dict[str, list[PlacedItem]] = {}
    for item in items:
        if item.definition is None:
            continue
        for theme in sorted(item.definition.theme_tags):
            groups.setdefault(theme, []).append(item)
    return groups


def theme_bonuses(items: Iterable[PlacedItem], rules: ScoringRules) -> dict[str, int]:
    """Bonus per theme shared by at least two items.

    A theme earns ``bonus_points + (n - 1) * additional_per_item`` for n
    members.  Themes without a configured ThemeBonus, or with fewer than
    two members, are left out.
    """
    result: dict[str, int] = {}
    for theme, members in group_by_theme(items).items():
        if len(members) < 2:
            continue
        bonus = rules.theme_bonus_for(theme)
        if bonus is None:
            continue
        result[theme] = bonus.bonus_points + (len(members) - 1) * bonus.additional_per_item
    return result


def adjacency_bonuses(items: Iterable[PlacedItem], rules: ScoringRules) -> dict[PlacedItem, int]:
    """Bonus per item for each other item within ``adjacency_radius``.

    Distances are between footprints (shape, or the bare position), so
    two touching boxes are adjacent however far apart their centres are.
    Items without neighbours are omitted.
    """
    placed = list(items)
    geoms = [to_shapely(item.footprint) for item in placed]
    result: dict[PlacedItem, int] = {}
    for i, item in enumerate(placed):
        neighbours = sum(
            1 for j, other in enumerate(geoms)
            if j != i and geoms[i].distance(other) <= rules.adjacency_radius
        )
        if neighbours:
            result[item] = neighbours * rules.adjacent_item_bonus
    return result


def preferred_theme(day: int, rules: ScoringRules) -> str | None:
    """The hermit's theme for *day*, cycling through the configured list."""
    if not rules.daily_preferred_themes:
        return None
    return rules.daily_preferred_themes[day % len(rules.daily_preferred_themes)]


def preferred_theme_bonus(items: Iterable[PlacedItem], day: int, rules: ScoringRules) -> int:
    theme = preferred_theme(day, rules)
    if theme is None:
        return 0
    matches = sum(
        1 for item in items
        if item.definition is not None and theme in item.definition.theme_tags
    )
    return matches * rules.preferred_theme_bonus

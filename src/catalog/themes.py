"""Theme vocabulary and the name-based theme heuristic.

Items carry explicit ``theme_tags``; when a catalog entry does not list
any, they are seeded from the item name: every known theme that appears
as a case-sensitive substring of the name ("Plant_Tropical" → Plant,
Tropical).  This is a naming convention, not a structural property, so
"Lightship" also matches "Light".
"""

from __future__ import annotations

KNOWN_THEMES: tuple[str, ...] = (
    "Tropical", "Modern", "Vintage", "Cozy", "Beach", "Nautical",
    "Rustic", "Minimalist", "Plant", "Light", "Dark", "Bright",
)


def derive_themes(name: str, known_themes: tuple[str, ...] = KNOWN_THEMES) -> list[str]:
    """Known themes contained in *name*, in vocabulary order."""
    if not name:
        return []
    return [theme for theme in known_themes if theme in name]

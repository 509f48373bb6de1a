"""Scoring — turns item positions into placement scores and day/game totals.

Submodules:
  config        ScoringRules / ThemeBonus and the SCORING_RULES default.
  models        PlacementScore, PlacedItem, day counters and breakdowns.
  placement     Per-item scoring against every registered area.
  bonuses       Theme-group, adjacency and daily-preferred-theme bonuses.
  aggregator    ScoreAggregator: roster, day lifecycle, totals.
  grading       Percentage and grade thresholds for results screens.
  serialization JSON conversion (score_to_dict, breakdown_to_dict).
"""

from .config import ScoringRules, ThemeBonus, SCORING_RULES
from .models import (
    PlacementScore, PlacedItem, DayPhase, DayCounters, ItemScore, ScoreBreakdown,
)
from .placement import score_placement, score_in_area, PlacementScorer
from .bonuses import theme_bonuses, adjacency_bonuses, preferred_theme, preferred_theme_bonus
from .aggregator import ScoreAggregator
from .grading import Grade, percentage, grade_for
from .serialization import score_to_dict, item_score_to_dict, breakdown_to_dict

__all__ = [
    # Config
    "ScoringRules", "ThemeBonus", "SCORING_RULES",
    # Models
    "PlacementScore", "PlacedItem", "DayPhase", "DayCounters", "ItemScore", "ScoreBreakdown",
    # Placement
    "score_placement", "score_in_area", "PlacementScorer",
    # Bonuses
    "theme_bonuses", "adjacency_bonuses", "preferred_theme", "preferred_theme_bonus",
    # Aggregation
    "ScoreAggregator",
    # Grading
    "Grade", "percentage", "grade_for",
    # Serialization
    "score_to_dict", "item_score_to_dict", "breakdown_to_dict",
]

"""Scoring result dataclasses and placed-item state."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.catalog.models import ItemDefinition
from src.geometry import Point2D, PointShape


UNKNOWN_ITEM_NAME = "Unknown Item"

_instance_ids = itertools.count(1)


@dataclass(frozen=True)
class PlacementScore:
    """Outcome of evaluating one item position against every area."""

    world_position: Point2D
    placed_in_valid_area: bool
    points_awarded: int
    reason: str
    zone_name: str | None = None
    area_identifier: str | None = None


@dataclass(eq=False)
class PlacedItem:
    """A live instance of a catalog item on the decorating surface.

    ``shape`` is an optional rough world-space footprint (see
    :mod:`src.geometry.shapes`).  Instances compare and hash by identity.
    """

    definition: ItemDefinition | None
    position: Point2D
    shape: Any = None
    instance_id: str = ""
    scored: bool = False
    current_score: PlacementScore | None = None

    def __post_init__(self) -> None:
        if not self.instance_id:
            self.instance_id = f"{self.name}#{next(_instance_ids)}"

    @property
    def name(self) -> str:
        return self.definition.name if self.definition else UNKNOWN_ITEM_NAME

    @property
    def footprint(self) -> Any:
        """Shape if known, otherwise the bare position as a point."""
        if self.shape is not None:
            return self.shape
        return PointShape(*self.position)

    def reset_score(self) -> None:
        self.scored = False
        self.current_score = None


class DayPhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    FINALIZING = "finalizing"
    FINALIZED = "finalized"


@dataclass
class DayCounters:
    """Per-day bonus tallies, reset when a day is finalized."""

    chore_points: int = 0
    decoration_points: int = 0      # sum of cached placement points
    theme_bonus: int = 0            # theme groups + daily preferred theme
    adjacency_bonus: int = 0
    daily_bonus: int = 0            # perfect placements + completion


@dataclass(frozen=True)
class ItemScore:
    item_name: str
    points_awarded: int
    reason: str
    is_optimal: bool
    max_points: int = 0


@dataclass(frozen=True)
class ScoreBreakdown:
    """Read-only snapshot for results screens."""

    day: int
    current_day_score: int
    total_game_score: int
    item_scores: tuple[ItemScore, ...]
    counters: DayCounters = field(default_factory=DayCounters)

"""Day and game score aggregation over the roster of placed items.

One :class:`ScoreAggregator` owns the roster and every cached score.
It is handed the area registry and the item catalog explicitly; there is
no global score manager.

Day lifecycle::

    IDLE ──start_day──▶ ACTIVE ──end_day──▶ FINALIZING ──finalize_day──▶ FINALIZED
                          ▲                                                  │
                          └────────────────────── start_day ─────────────────┘

Scores computed while items are still being dragged are previews only.
``end_day`` re-scores everything from final positions before any total
is taken, and ``finalize_day`` runs ``end_day`` itself if the caller
skipped it.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from src.areas.registry import AreaRegistry
from src.catalog.models import ItemCatalog, ItemDefinition
from src.geometry import Point2D

from .bonuses import adjacency_bonuses, preferred_theme, preferred_theme_bonus, theme_bonuses
from .config import SCORING_RULES, ScoringRules
from .grading import Grade, grade_for
from .models import (
    DayCounters, DayPhase, ItemScore, PlacedItem, PlacementScore, ScoreBreakdown,
)
from .placement import score_placement


log = logging.getLogger("hermitHome.scoring")

_KEEP = object()


class ScoreAggregator:
    """Tracks placed items and turns their placements into day/game totals."""

    def __init__(
        self,
        areas: AreaRegistry,
        catalog: ItemCatalog,
        rules: ScoringRules = SCORING_RULES,
    ) -> None:
        self.areas = areas
        self.catalog = catalog
        self.rules = rules
        self._items: list[PlacedItem] = []
        self._scores: dict[PlacedItem, PlacementScore] = {}
        self._current_day_score = 0
        self._total_game_score = 0
        self._day = 0
        self._phase = DayPhase.IDLE
        self._counters = DayCounters()

    # ── Roster ─────────────────────────────────────────────────────

    def track(self, item: PlacedItem) -> None:
        if item in self._items:
            return
        self._items.append(item)
        log.debug("Tracking '%s' (%d items)", item.instance_id, len(self._items))

    def untrack(self, item: PlacedItem) -> None:
        if item not in self._items:
            return
        self._items.remove(item)
        self._scores.pop(item, None)
        log.debug("Untracked '%s'", item.instance_id)

    def place(self, item_name: str, position: Point2D, shape: Any = None) -> PlacedItem:
        """Create and track an instance of a catalog item.

        An unknown name still yields a tracked item; it scores zero with
        "No item definition" as the reason.
        """
        definition = self.catalog.get(item_name)
        if definition is None:
            log.warning("No catalog entry for '%s'; it will score 0", item_name)
        item = PlacedItem(definition=definition, position=position, shape=shape)
        self.track(item)
        return item

    def move(self, item: PlacedItem, position: Point2D, shape: Any = _KEEP) -> None:
        """Record a new position (and optionally shape); drops the stale score."""
        item.position = position
        if shape is not _KEEP:
            item.shape = shape
        item.reset_score()
        self._scores.pop(item, None)

    # ── Scoring ────────────────────────────────────────────────────

    def preview(
        self,
        item: PlacedItem | ItemDefinition | None,
        position: Point2D,
        shape: Any = _KEEP,
    ) -> PlacementScore:
        """Score a hypothetical position without caching anything."""
        if isinstance(item, PlacedItem):
            definition = item.definition
            if shape is _KEEP:
                shape = item.shape
        else:
            definition = item
        if shape is _KEEP:
            shape = None
        return score_placement(definition, position, self.areas, shape)

    def score_item(self, item: PlacedItem) -> PlacementScore:
        """Re-score *item* from its current position and shape and cache the result."""
        score = score_placement(item.definition, item.position, self.areas, item.shape)
        item.current_score = score
        item.scored = True
        if item in self._items:
            self._scores[item] = score
        log.debug("Scored '%s': %d points - %s (position %s)",
                  item.name, score.points_awarded, score.reason, item.position)
        return score

    def score_all(self) -> int:
        """Discard every cached score, re-score the roster, and total the day."""
        self._scores.clear()
        for item in self._items:
            self.score_item(item)
        return self.compute_day_score()

    def is_optimal(self, item: PlacedItem, score: PlacementScore | None = None) -> bool:
        """True if the item scored its theoretical maximum."""
        if item.definition is None:
            return False
        if score is None:
            score = self._scores.get(item)
            if score is None:
                return False
        return score.points_awarded >= item.definition.max_points

    def compute_day_score(self) -> int:
        """Sum of cached points plus perfect-placement and completion bonuses."""
        points = 0
        perfect = 0
        for item in self._items:
            score = self._scores.get(item)
            if score is None:
                continue
            points += score.points_awarded
            if self.is_optimal(item, score):
                perfect += 1

        daily_bonus = perfect * self.rules.perfect_placement_bonus
        if self._items and perfect == len(self._items):
            daily_bonus += self.rules.daily_completion_bonus
            log.info("Perfect day! Added %d completion bonus", self.rules.daily_completion_bonus)

        self._counters.decoration_points = points
        self._counters.daily_bonus = daily_bonus
        self._current_day_score = points + daily_bonus
        log.info("Day score: %d (perfect placements: %d/%d)",
                 self._current_day_score, perfect, len(self._items))
        return self._current_day_score

    # ── Bonuses ────────────────────────────────────────────────────

    def theme_bonuses(self) -> dict[str, int]:
        return theme_bonuses(self._items, self.rules)

    def adjacency_bonuses(self) -> dict[PlacedItem, int]:
        return adjacency_bonuses(self._items, self.rules)

    def preferred_theme(self) -> str | None:
        return preferred_theme(self._day, self.rules)

    def preferred_theme_bonus(self) -> int:
        return preferred_theme_bonus(self._items, self._day, self.rules)

    def add_chore_points(self, points: int) -> None:
        self._counters.chore_points += points

    # ── Day lifecycle ──────────────────────────────────────────────

    def start_day(self) -> int:
        """Open the next day; returns the new day number."""
        if self._phase in (DayPhase.ACTIVE, DayPhase.FINALIZING):
            log.warning("start_day ignored: day %d is still %s", self._day, self._phase.value)
            return self._day
        self._day += 1
        self._current_day_score = 0
        self._scores.clear()
        self._counters = DayCounters()
        for item in self._items:
            item.reset_score()
        self._phase = DayPhase.ACTIVE
        log.info("Day %d started", self._day)
        return self._day

    def end_day(self) -> int:
        """Score final positions and compute the day's bonuses; returns the day total."""
        self.score_all()
        themes = self.theme_bonuses()
        self._counters.theme_bonus = sum(themes.values()) + self.preferred_theme_bonus()
        self._counters.adjacency_bonus = sum(self.adjacency_bonuses().values())
        self._phase = DayPhase.FINALIZING
        for theme, bonus in themes.items():
            log.info("Theme bonus for %s: +%d", theme, bonus)
        return self.day_total

    def finalize_day(self) -> int:
        """Bank the day total into the game total; returns the banked amount."""
        if self._phase == DayPhase.FINALIZED:
            log.warning("finalize_day ignored: day %d is already finalized", self._day)
            return 0
        if self._phase != DayPhase.FINALIZING:
            self.end_day()
        banked = self.day_total
        self._total_game_score += banked
        self._counters = DayCounters()
        self._phase = DayPhase.FINALIZED
        log.info("Day %d finalized: +%d, total %d", self._day, banked, self._total_game_score)
        return banked

    def reset(self) -> None:
        """Start a new game: zero all totals and empty the roster."""
        self._items.clear()
        self._scores.clear()
        self._current_day_score = 0
        self._total_game_score = 0
        self._day = 0
        self._counters = DayCounters()
        self._phase = DayPhase.IDLE
        log.info("Game reset")

    # ── Accessors ──────────────────────────────────────────────────

    @property
    def current_day_score(self) -> int:
        return self._current_day_score

    @property
    def total_game_score(self) -> int:
        return self._total_game_score

    @property
    def day_total(self) -> int:
        """Day score plus the bonus counters banked by finalize_day."""
        c = self._counters
        return self._current_day_score + c.theme_bonus + c.adjacency_bonus + c.chore_points

    @property
    def day(self) -> int:
        return self._day

    @property
    def phase(self) -> DayPhase:
        return self._phase

    @property
    def counters(self) -> DayCounters:
        return replace(self._counters)

    def tracked_items(self) -> tuple[PlacedItem, ...]:
        return tuple(self._items)

    def scores(self) -> dict[PlacedItem, PlacementScore]:
        return dict(self._scores)

    def max_possible_day_score(self) -> int:
        return sum(i.definition.max_points for i in self._items if i.definition is not None)

    def breakdown(self) -> ScoreBreakdown:
        item_scores = tuple(
            ItemScore(
                item_name=item.name,
                points_awarded=score.points_awarded,
                reason=score.reason,
                is_optimal=self.is_optimal(item, score),
                max_points=item.definition.max_points if item.definition else 0,
            )
            for item in self._items
            if (score := self._scores.get(item)) is not None
        )
        return ScoreBreakdown(
            day=self._day,
            current_day_score=self._current_day_score,
            total_game_score=self._total_game_score,
            item_scores=item_scores,
            counters=self.counters,
        )

    def grade(self) -> Grade:
        return grade_for(self._current_day_score, self.max_possible_day_score())

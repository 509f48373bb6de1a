"""Tests for the score aggregator: roster, day lifecycle, bonuses, totals."""

from __future__ import annotations

import unittest

from src.geometry import BoxShape
from src.scoring import (
    DayPhase, PlacedItem, ScoreAggregator, ScoringRules, ThemeBonus,
    breakdown_to_dict, score_to_dict,
)
from tests.room_fixture import make_catalog, make_plant, make_registry


def make_aggregator(with_floor: bool = False, rules: ScoringRules | None = None) -> ScoreAggregator:
    if rules is None:
        return ScoreAggregator(make_registry(with_floor), make_catalog())
    return ScoreAggregator(make_registry(with_floor), make_catalog(), rules)


class TestPerfectDay(unittest.TestCase):

    def test_single_perfect_item(self):
        agg = make_aggregator()
        agg.start_day()
        agg.place("Plant_Tropical", (0.0, 0.0))
        banked = agg.finalize_day()

        # 25 placement + 5 perfect placement + 20 completion
        self.assertEqual(banked, 50)
        self.assertEqual(agg.current_day_score, 50)
        self.assertEqual(agg.total_game_score, 50)
        self.assertEqual(agg.phase, DayPhase.FINALIZED)

    def test_empty_roster_gets_no_completion_bonus(self):
        agg = make_aggregator()
        agg.start_day()
        self.assertEqual(agg.finalize_day(), 0)

    def test_one_imperfect_item_blocks_completion(self):
        agg = make_aggregator()
        agg.start_day()
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.place("Lamp_Tropical", (5.0, 5.0))
        agg.score_all()
        # 25 - 4 + one perfect placement
        self.assertEqual(agg.current_day_score, 26)
        self.assertEqual(agg.counters.daily_bonus, 5)
        self.assertEqual(agg.counters.decoration_points, 21)


class TestLifecycle(unittest.TestCase):

    def setUp(self):
        self.agg = make_aggregator()

    def test_starts_idle(self):
        self.assertEqual(self.agg.phase, DayPhase.IDLE)
        self.assertEqual(self.agg.day, 0)

    def test_end_then_finalize(self):
        agg = self.agg
        self.assertEqual(agg.start_day(), 1)
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.place("Lamp_Tropical", (5.0, 5.0))

        total = agg.end_day()
        self.assertEqual(agg.phase, DayPhase.FINALIZING)
        # 26 day score + 20 for the two Tropical items
        self.assertEqual(agg.counters.theme_bonus, 20)
        self.assertEqual(total, 46)

        self.assertEqual(agg.finalize_day(), 46)
        self.assertEqual(agg.total_game_score, 46)
        self.assertEqual(agg.counters.theme_bonus, 0)

    def test_second_finalize_is_ignored(self):
        agg = self.agg
        agg.start_day()
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.finalize_day()
        with self.assertLogs("hermitHome.scoring", level="WARNING"):
            self.assertEqual(agg.finalize_day(), 0)
        self.assertEqual(agg.total_game_score, 50)

    def test_finalize_rescores_final_positions(self):
        agg = self.agg
        agg.start_day()
        plant = agg.place("Plant_Tropical", (5.0, 5.0))
        self.assertEqual(agg.score_all(), -5)

        agg.move(plant, (0.0, 0.0))
        self.assertFalse(plant.scored)
        self.assertEqual(agg.finalize_day(), 50)

    def test_start_day_ignored_while_active(self):
        agg = self.agg
        agg.start_day()
        with self.assertLogs("hermitHome.scoring", level="WARNING"):
            self.assertEqual(agg.start_day(), 1)
        self.assertEqual(agg.phase, DayPhase.ACTIVE)

    def test_next_day_clears_day_state(self):
        agg = self.agg
        agg.start_day()
        plant = agg.place("Plant_Tropical", (0.0, 0.0))
        agg.finalize_day()

        self.assertEqual(agg.start_day(), 2)
        self.assertEqual(agg.current_day_score, 0)
        self.assertEqual(agg.scores(), {})
        self.assertFalse(plant.scored)
        self.assertIsNone(plant.current_score)
        self.assertEqual(agg.total_game_score, 50)
        self.assertEqual(agg.tracked_items(), (plant,))

    def test_reset(self):
        agg = self.agg
        agg.start_day()
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.finalize_day()
        agg.reset()
        self.assertEqual(agg.total_game_score, 0)
        self.assertEqual(agg.day, 0)
        self.assertEqual(agg.tracked_items(), ())
        self.assertEqual(agg.phase, DayPhase.IDLE)

    def test_chore_points_are_banked(self):
        agg = self.agg
        agg.start_day()
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.add_chore_points(7)
        self.assertEqual(agg.finalize_day(), 57)


class TestRoster(unittest.TestCase):

    def setUp(self):
        self.agg = make_aggregator()
        self.agg.start_day()

    def test_unknown_item_scores_zero(self):
        with self.assertLogs("hermitHome.scoring", level="WARNING"):
            ghost = self.agg.place("Ghost_Vintage", (0.0, 0.0))
        score = self.agg.score_item(ghost)
        self.assertEqual(score.points_awarded, 0)
        self.assertEqual(ghost.name, "Unknown Item")
        self.assertFalse(self.agg.is_optimal(ghost))
        # Present but never perfect, so no completion bonus.
        self.assertEqual(self.agg.compute_day_score(), 0)

    def test_track_is_idempotent(self):
        item = PlacedItem(definition=make_plant(), position=(0.0, 0.0))
        self.agg.track(item)
        self.agg.track(item)
        self.assertEqual(len(self.agg.tracked_items()), 1)

    def test_untrack_drops_score(self):
        plant = self.agg.place("Plant_Tropical", (0.0, 0.0))
        self.agg.score_all()
        self.agg.untrack(plant)
        self.assertEqual(self.agg.scores(), {})
        self.assertEqual(self.agg.compute_day_score(), 0)

    def test_untracked_item_is_not_cached(self):
        stray = PlacedItem(definition=make_plant(), position=(0.0, 0.0))
        score = self.agg.score_item(stray)
        self.assertEqual(score.points_awarded, 25)
        self.assertIs(stray.current_score, score)
        self.assertEqual(self.agg.scores(), {})

    def test_preview_does_not_cache(self):
        plant = self.agg.place("Plant_Tropical", (0.0, 0.0))
        self.assertEqual(self.agg.preview(plant, (0.9, 0.9)).points_awarded, 15)
        self.assertEqual(self.agg.preview(make_plant(), (0.0, 0.0)).points_awarded, 25)
        self.assertFalse(plant.scored)
        self.assertEqual(self.agg.scores(), {})

    def test_move_with_shape(self):
        plant = self.agg.place("Plant_Tropical", (0.0, 0.0))
        self.agg.move(plant, (0.8, 0.0), shape=BoxShape((0.8, 0.0), (0.5, 0.5)))
        self.assertEqual(self.agg.score_item(plant).points_awarded, -5)

        # Shape is world-space and kept unless replaced.
        box = plant.shape
        self.agg.move(plant, (0.1, 0.0))
        self.assertIs(plant.shape, box)
        self.assertEqual(self.agg.score_item(plant).points_awarded, -5)

        self.agg.move(plant, (0.0, 0.0), shape=None)
        self.assertEqual(self.agg.score_item(plant).points_awarded, 25)

    def test_accessors_return_copies(self):
        plant = self.agg.place("Plant_Tropical", (0.0, 0.0))
        self.agg.score_all()
        self.agg.scores().clear()
        self.agg.counters.chore_points = 999
        self.assertIn(plant, self.agg.scores())
        self.assertEqual(self.agg.counters.chore_points, 0)


class TestBonuses(unittest.TestCase):

    def test_theme_group(self):
        agg = make_aggregator()
        agg.place("Plant_Tropical", (0.0, 0.0))
        self.assertEqual(agg.theme_bonuses(), {})
        agg.place("Lamp_Tropical", (5.0, 5.0))
        self.assertEqual(agg.theme_bonuses(), {"Tropical": 20})
        agg.place("Lamp_Tropical", (6.0, 5.0))
        self.assertEqual(agg.theme_bonuses(), {"Tropical": 25})

    def test_unconfigured_theme_earns_nothing(self):
        rules = ScoringRules(theme_bonuses=(ThemeBonus("Modern", 40, 10),))
        agg = make_aggregator(rules=rules)
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.place("Lamp_Tropical", (5.0, 5.0))
        self.assertEqual(agg.theme_bonuses(), {})

    def test_adjacency(self):
        agg = make_aggregator()
        plant = agg.place("Plant_Tropical", (0.0, 0.0))
        lamp = agg.place("Lamp_Tropical", (0.5, 0.0))
        vase = agg.place("Vase_Modern", (8.0, 8.0))
        bonuses = agg.adjacency_bonuses()
        self.assertEqual(bonuses, {plant: 5, lamp: 5})
        self.assertNotIn(vase, bonuses)

    def test_adjacency_measures_footprints(self):
        agg = make_aggregator()
        a = agg.place("Plant_Tropical", (0.0, 0.0), shape=BoxShape((0.0, 0.0), (2.0, 0.5)))
        b = agg.place("Lamp_Tropical", (5.0, 0.0), shape=BoxShape((5.0, 0.0), (2.5, 0.5)))
        self.assertEqual(agg.adjacency_bonuses(), {a: 5, b: 5})

    def test_adjacency_counts_towards_day_total(self):
        agg = make_aggregator(with_floor=True)
        agg.start_day()
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.place("Lamp_Tropical", (0.5, 0.0))
        agg.end_day()
        self.assertEqual(agg.counters.adjacency_bonus, 10)

    def test_preferred_theme(self):
        rules = ScoringRules(daily_preferred_themes=("Modern", "Tropical"))
        agg = make_aggregator(rules=rules)
        agg.start_day()
        self.assertEqual(agg.preferred_theme(), "Tropical")
        agg.place("Plant_Tropical", (0.0, 0.0))
        agg.place("Vase_Modern", (8.0, 8.0))
        self.assertEqual(agg.preferred_theme_bonus(), 25)

    def test_no_preferred_theme_by_default(self):
        agg = make_aggregator()
        agg.start_day()
        self.assertIsNone(agg.preferred_theme())
        self.assertEqual(agg.preferred_theme_bonus(), 0)

    def test_negative_radius_rejected(self):
        with self.assertRaises(ValueError):
            ScoringRules(adjacency_radius=-1.0)


class TestResults(unittest.TestCase):

    def setUp(self):
        self.agg = make_aggregator()
        self.agg.start_day()
        self.agg.place("Plant_Tropical", (0.0, 0.0))
        self.agg.place("Vase_Modern", (0.0, 0.0))
        self.agg.score_all()

    def test_breakdown(self):
        bd = self.agg.breakdown()
        self.assertEqual(bd.day, 1)
        self.assertEqual([s.item_name for s in bd.item_scores], ["Plant_Tropical", "Vase_Modern"])
        self.assertTrue(bd.item_scores[0].is_optimal)
        self.assertFalse(bd.item_scores[1].is_optimal)
        # 25 - 3 + 5 perfect
        self.assertEqual(bd.current_day_score, 27)

    def test_breakdown_to_dict(self):
        d = breakdown_to_dict(self.agg.breakdown())
        self.assertEqual(d["day"], 1)
        self.assertEqual(d["item_scores"][1]["points_awarded"], -3)
        self.assertEqual(d["counters"]["daily_bonus"], 5)

    def test_score_to_dict(self):
        plant = self.agg.tracked_items()[0]
        d = score_to_dict(plant.current_score)
        self.assertEqual(d["world_position"], [0.0, 0.0])
        self.assertEqual(d["zone_name"], "Center")
        self.assertEqual(d["area_identifier"], "Table")

        outside = score_to_dict(self.agg.preview(plant, (9.0, 9.0)))
        self.assertNotIn("zone_name", outside)
        self.assertNotIn("area_identifier", outside)

    def test_grade(self):
        # 27 of a possible 25 + 10
        self.assertEqual(self.agg.max_possible_day_score(), 35)
        grade = self.agg.grade()
        self.assertAlmostEqual(grade.percentage, 27 / 35)
        self.assertEqual(grade.label, "GOOD!")
        self.assertTrue(grade.hearts)
        self.assertFalse(grade.stars)


if __name__ == "__main__":
    unittest.main()

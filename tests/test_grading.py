"""Tests for results-screen grading."""

from __future__ import annotations

import unittest

from src.scoring import grade_for, percentage


class TestGrading(unittest.TestCase):

    def test_percentage(self):
        self.assertAlmostEqual(percentage(30, 40), 0.75)
        self.assertEqual(percentage(10, 0), 0.0)
        self.assertEqual(percentage(-5, -1), 0.0)

    def test_labels_at_thresholds(self):
        cases = [
            (95, "PERFECT!"), (94, "EXCELLENT!"), (80, "EXCELLENT!"),
            (79, "GOOD!"), (60, "GOOD!"), (59, "KEEP TRYING!"), (-10, "KEEP TRYING!"),
        ]
        for points, label in cases:
            self.assertEqual(grade_for(points, 100).label, label, points)

    def test_hearts_and_stars(self):
        self.assertFalse(grade_for(49, 100).hearts)
        self.assertTrue(grade_for(50, 100).hearts)
        self.assertFalse(grade_for(99, 100).stars)
        self.assertTrue(grade_for(100, 100).stars)
        self.assertTrue(grade_for(130, 100).stars)

    def test_nothing_to_earn(self):
        grade = grade_for(0, 0)
        self.assertEqual(grade.label, "KEEP TRYING!")
        self.assertFalse(grade.hearts)


if __name__ == "__main__":
    unittest.main()

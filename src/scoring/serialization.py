"""Score serialization — convert results to JSON-safe dicts for debug overlays."""

from __future__ import annotations

from dataclasses import asdict

from .models import ItemScore, PlacementScore, ScoreBreakdown


def score_to_dict(score: PlacementScore) -> dict:
    """Serialize a PlacementScore to a JSON-safe dict."""
    return {
        "world_position": list(score.world_position),
        "placed_in_valid_area": score.placed_in_valid_area,
        "points_awarded": score.points_awarded,
        "reason": score.reason,
        **({"zone_name": score.zone_name} if score.zone_name else {}),
        **({"area_identifier": score.area_identifier} if score.area_identifier else {}),
    }


def item_score_to_dict(item_score: ItemScore) -> dict:
    return {
        "item_name": item_score.item_name,
        "points_awarded": item_score.points_awarded,
        "reason": item_score.reason,
        "is_optimal": item_score.is_optimal,
        "max_points": item_score.max_points,
    }


def breakdown_to_dict(breakdown: ScoreBreakdown) -> dict:
    """Serialize a ScoreBreakdown for the results panel."""
    return {
        "day": breakdown.day,
        "current_day_score": breakdown.current_day_score,
        "total_game_score": breakdown.total_game_score,
        "item_scores": [item_score_to_dict(s) for s in breakdown.item_scores],
        "counters": asdict(breakdown.counters),
    }

"""Placeable areas — polygon surfaces with scoring zones, and the session registry."""

from .models import ScoringZone, PlaceableArea
from .registry import AreaRegistry
from .parsing import parse_area, parse_areas, validate_area

__all__ = [
    "ScoringZone", "PlaceableArea",
    "AreaRegistry",
    "parse_area", "parse_areas", "validate_area",
]

"""Room test fixture — hardcoded areas and items for scoring tests.

The room is the smallest layout that exercises every scoring rule:

  - Table: 2 × 2 square centred on the origin, with a 1 × 1 "Center"
    scoring zone worth 25.
  - Floor: 20 × 20 square centred on the origin (optional), underneath
    the table.

Items:
  - Plant_Tropical:  prefers Table (default 15, Center zone 25) and
                     Floor (default 12); penalty -5.
  - Lamp_Tropical:   prefers Floor only (default 10); penalty -4.
  - Vase_Modern:     no preferences; restricted from Table; penalty -3.
"""

from __future__ import annotations

from src.areas import AreaRegistry, PlaceableArea, ScoringZone
from src.catalog import ItemCatalog, ItemDefinition, PlacementPreference, PlacementZone

UNIT_SQUARE = ((-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0))
HALF_SQUARE = ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5))
FLOOR_SQUARE = ((-10.0, -10.0), (10.0, -10.0), (10.0, 10.0), (-10.0, 10.0))


def make_table() -> PlaceableArea:
    return PlaceableArea(
        identifier="Table",
        vertices=UNIT_SQUARE,
        zones=(ScoringZone(name="Center", vertices=HALF_SQUARE, point_value=25),),
    )


def make_floor() -> PlaceableArea:
    return PlaceableArea(identifier="Floor", vertices=FLOOR_SQUARE)


def make_registry(with_floor: bool = False) -> AreaRegistry:
    areas = [make_table()]
    if with_floor:
        areas.append(make_floor())
    return AreaRegistry(areas)


def make_plant() -> ItemDefinition:
    return ItemDefinition(
        name="Plant_Tropical",
        base_points=10,
        wrong_placement_penalty=-5,
        preferences=(
            PlacementPreference(
                area_identifier="Table",
                default_area_points=15,
                zones=(PlacementZone(name="Center", vertices=HALF_SQUARE, point_value=25),),
            ),
            PlacementPreference(area_identifier="Floor", default_area_points=12),
        ),
    )


def make_lamp() -> ItemDefinition:
    return ItemDefinition(
        name="Lamp_Tropical",
        base_points=10,
        wrong_placement_penalty=-4,
        preferences=(PlacementPreference(area_identifier="Floor", default_area_points=10),),
    )


def make_vase() -> ItemDefinition:
    return ItemDefinition(
        name="Vase_Modern",
        wrong_placement_penalty=-3,
        restricted_areas=frozenset({"Table"}),
    )


def make_catalog() -> ItemCatalog:
    return ItemCatalog([make_plant(), make_lamp(), make_vase()])

"""Per-item placement scoring against every registered area."""

from __future__ import annotations

from typing import Any, Iterable

from src.areas.models import PlaceableArea
from src.catalog.models import ItemDefinition
from src.geometry import Point2D

from .models import PlacementScore


def _outside(item: ItemDefinition, world_position: Point2D) -> PlacementScore:
    return PlacementScore(
        world_position=world_position,
        placed_in_valid_area=False,
        points_awarded=item.wrong_placement_penalty,
        reason="Placed outside valid area",
    )


def score_in_area(
    item: ItemDefinition,
    world_position: Point2D,
    area: PlaceableArea,
    shape: Any = None,
) -> tuple[PlacementScore, bool]:
    """Score *item* against a single area.

    Returns ``(score, contained)``; ``contained`` says whether the area
    physically holds the item, which breaks ties between equal scores.
    When *shape* is given, containment requires the whole shape inside
    the area; zones are always looked up at the position point.
    """
    aid = area.identifier
    contained = area.contains_shape(shape) if shape is not None else area.contains_point(world_position)
    if not contained:
        return _outside(item, world_position), False

    # Restriction overrides every preference and zone.
    if item.is_restricted_from(aid):
        return PlacementScore(
            world_position=world_position,
            placed_in_valid_area=False,
            points_awarded=item.wrong_placement_penalty,
            reason=f"Item cannot be placed in {aid} area (restricted)",
            area_identifier=aid,
        ), True

    pref = item.preference_for(aid)
    if pref is None:
        return PlacementScore(
            world_position=world_position,
            placed_in_valid_area=True,
            points_awarded=item.wrong_placement_penalty,
            reason=f"Item doesn't prefer this area ({aid}) - penalty applied",
            area_identifier=aid,
        ), True

    local = area.to_local(world_position)
    zone = pref.best_zone_for(local) if local is not None else None
    if zone is not None:
        return PlacementScore(
            world_position=world_position,
            placed_in_valid_area=True,
            points_awarded=zone.point_value,
            reason=f"Placed in {zone.name} zone",
            zone_name=zone.name,
            area_identifier=aid,
        ), True

    return PlacementScore(
        world_position=world_position,
        placed_in_valid_area=True,
        points_awarded=pref.default_area_points,
        reason=f"Placed in preferred area ({aid})",
        area_identifier=aid,
    ), True


def score_placement(
    item: ItemDefinition | None,
    world_position: Point2D,
    areas: Iterable[PlaceableArea],
    shape: Any = None,
) -> PlacementScore:
    """Best PlacementScore for *item* at *world_position* over all areas.

    The candidate with the most points wins.  On equal points a candidate
    from an area that actually contains the item beats an "outside" one,
    then registry order decides.  No areas at all means the item is
    outside, scored at its own penalty.  Pure: depends only on the
    arguments.
    """
    if item is None:
        return PlacementScore(
            world_position=world_position,
            placed_in_valid_area=False,
            points_awarded=0,
            reason="No item definition",
        )

    best: PlacementScore | None = None
    best_key: tuple[int, bool] | None = None
    for area in areas:
        candidate, contained = score_in_area(item, world_position, area, shape)
        key = (candidate.points_awarded, contained)
        if best_key is None or key > best_key:
            best, best_key = candidate, key

    if best is None:
        return _outside(item, world_position)
    return best


class PlacementScorer:
    """Preview scoring bound to an area registry.

    Collaborators (drag previews, hint bubbles) call :meth:`score` freely;
    nothing is cached or committed.
    """

    def __init__(self, areas: Iterable[PlaceableArea]) -> None:
        self._areas = areas

    def score(self, item: ItemDefinition | None, world_position: Point2D,
              shape: Any = None) -> PlacementScore:
        return score_placement(item, world_position, self._areas, shape)

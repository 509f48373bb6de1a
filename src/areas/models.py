"""Placeable areas and their scoring zones."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.geometry import (
    IDENTITY, Point2D, Transform2D,
    best_zone, point_in_polygon, shape_contained, shape_to_local,
)


@dataclass(frozen=True)
class ScoringZone:
    """Named sub-polygon of an area, in the area's local frame."""
    name: str
    vertices: tuple[Point2D, ...]
    point_value: int = 20


@dataclass(frozen=True)
class PlaceableArea:
    """A named surface region items can be dropped on.

    ``vertices`` and every zone are in the area's local frame;
    ``transform`` maps local → world.  The boundary is fixed once the
    area is registered.
    """

    identifier: str
    vertices: tuple[Point2D, ...]
    transform: Transform2D = IDENTITY
    zones: tuple[ScoringZone, ...] = field(default_factory=tuple)

    def to_local(self, world_point: Point2D) -> Point2D | None:
        return self.transform.inverse_apply(world_point)

    def contains_point(self, world_point: Point2D) -> bool:
        local = self.to_local(world_point)
        if local is None:
            return False
        return point_in_polygon(local[0], local[1], self.vertices)

    def contains_shape(self, world_shape: Any) -> bool:
        """Approximate full containment of a world-space shape."""
        local = shape_to_local(world_shape, self.transform)
        if local is None:
            return False
        return shape_contained(local, self.vertices)

    def best_zone_for(self, world_point: Point2D) -> ScoringZone | None:
        """Highest-valued zone containing the point; ties go to the first declared."""
        local = self.to_local(world_point)
        if local is None:
            return None
        return best_zone(self.zones, local)

    def zone(self, name: str) -> ScoringZone | None:
        return next((z for z in self.zones if z.name == name), None)

    def world_vertices(self) -> list[Point2D]:
        """Boundary mapped to world space (for debug overlays)."""
        return [self.transform.apply(v) for v in self.vertices]

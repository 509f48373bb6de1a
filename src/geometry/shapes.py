"""Rough item shapes and polygon-containment approximations.

Containment here is sampling, not clipping: a circle is tested at its
centre plus ``CIRCLE_SAMPLES`` perimeter points, a box at its corners, a
polygon at its vertices.  A sufficiently pointy concave polygon can report
containment between samples.  Zone point values have been tuned against
exactly this behaviour, so it must stay an approximation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from shapely.geometry import Point, Polygon as ShapelyPolygon, box as shapely_box
from shapely.geometry.base import BaseGeometry

from .polygon import Point2D, Polygon, point_in_polygon, polygon_bounds
from .transform import Transform2D

CIRCLE_SAMPLES = 8


# ── Shape descriptors (world space) ────────────────────────────────


@dataclass(frozen=True)
class PointShape:
    x: float
    y: float

    @property
    def center(self) -> Point2D:
        return (self.x, self.y)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x, self.y)


@dataclass(frozen=True)
class CircleShape:
    center: Point2D
    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        cx, cy = self.center
        r = self.radius
        return (cx - r, cy - r, cx + r, cy + r)

    def perimeter_samples(self, n: int = CIRCLE_SAMPLES) -> list[Point2D]:
        """*n* evenly spaced points on the circumference, starting at +x."""
        cx, cy = self.center
        return [
            (cx + math.cos(2 * math.pi * i / n) * self.radius,
             cy + math.sin(2 * math.pi * i / n) * self.radius)
            for i in range(n)
        ]


@dataclass(frozen=True)
class BoxShape:
    """Axis-aligned box given by centre and half extents."""

    center: Point2D
    half_extents: Point2D

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        cx, cy = self.center
        hw, hh = self.half_extents
        return (cx - hw, cy - hh, cx + hw, cy + hh)

    def corners(self) -> list[Point2D]:
        min_x, min_y, max_x, max_y = self.bounds
        return [(min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y)]

    @classmethod
    def from_bounds(cls, bounds: Sequence[float]) -> BoxShape:
        min_x, min_y, max_x, max_y = bounds
        return cls(
            center=((min_x + max_x) / 2, (min_y + max_y) / 2),
            half_extents=((max_x - min_x) / 2, (max_y - min_y) / 2),
        )


@dataclass(frozen=True)
class PolygonShape:
    vertices: tuple[Point2D, ...]

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        if not self.vertices:
            return (0.0, 0.0, 0.0, 0.0)
        return polygon_bounds(self.vertices)

    @property
    def center(self) -> Point2D:
        min_x, min_y, max_x, max_y = self.bounds
        return ((min_x + max_x) / 2, (min_y + max_y) / 2)


Shape = PointShape | CircleShape | BoxShape | PolygonShape


# ── Containment ────────────────────────────────────────────────────


def _all_inside(points: Sequence[Point2D], polygon: Polygon) -> bool:
    return all(point_in_polygon(x, y, polygon) for x, y in points)


def shape_contained(shape: Any, polygon: Polygon) -> bool:
    """Approximate test that *shape* lies entirely inside *polygon*.

    Both must be in the same frame.  Anything that is not one of the
    known shapes falls back to its ``bounds`` box (shapely geometries
    work out of the box).
    """
    if isinstance(shape, PointShape):
        return point_in_polygon(shape.x, shape.y, polygon)
    if isinstance(shape, CircleShape):
        cx, cy = shape.center
        if not point_in_polygon(cx, cy, polygon):
            return False
        return _all_inside(shape.perimeter_samples(), polygon)
    if isinstance(shape, BoxShape):
        return _all_inside(shape.corners(), polygon)
    if isinstance(shape, PolygonShape):
        # Vertices only; edge midpoints are not sampled.
        if not shape.vertices:
            return False
        return _all_inside(shape.vertices, polygon)
    return _all_inside(BoxShape.from_bounds(shape.bounds).corners(), polygon)


def shape_to_local(shape: Any, transform: Transform2D) -> Shape | None:
    """Map a world-space shape into an area's local frame.

    Circles keep their mapped centre and have their radius divided by the
    larger axis scale.  Boxes become the polygon of their mapped corners,
    which keeps the corner rule under rotation.  Returns None when the
    transform is degenerate or the polygon has no vertices.
    """
    if transform.is_degenerate:
        return None

    if isinstance(shape, PointShape):
        x, y = transform.inverse_apply(shape.center)
        return PointShape(x, y)
    if isinstance(shape, CircleShape):
        return CircleShape(
            center=transform.inverse_apply(shape.center),
            radius=shape.radius / transform.max_scale,
        )
    if isinstance(shape, PolygonShape):
        if not shape.vertices:
            return None
        return PolygonShape(tuple(transform.inverse_apply(v) for v in shape.vertices))
    if not isinstance(shape, BoxShape):
        shape = BoxShape.from_bounds(shape.bounds)
    return PolygonShape(tuple(transform.inverse_apply(c) for c in shape.corners()))


# ── Shapely interop ────────────────────────────────────────────────


def to_shapely(shape: Any) -> BaseGeometry:
    """Convert a shape descriptor to a Shapely geometry (for distances)."""
    if isinstance(shape, BaseGeometry):
        return shape
    if isinstance(shape, PointShape):
        return Point(shape.x, shape.y)
    if isinstance(shape, CircleShape):
        centre = Point(*shape.center)
        return centre.buffer(shape.radius) if shape.radius > 0 else centre
    if isinstance(shape, PolygonShape) and len(shape.vertices) >= 3:
        return ShapelyPolygon(shape.vertices)
    return shapely_box(*shape.bounds)

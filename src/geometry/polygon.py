"""
Pure-Python polygon geometry utilities.

All coordinates are world units of the decorating surface; Y grows upward.
Polygons are plain sequences of (x, y) pairs in whatever frame the caller
works in (area-local or world).
"""

from __future__ import annotations
from typing import Any, Iterable, Sequence

Point2D = tuple[float, float]
Polygon = Sequence[Sequence[float]]  # [(x, y), ...]


# ── core primitives ─────────────────────────────────────────────────


def polygon_area(polygon: Polygon) -> float:
    """Signed area via shoelace formula (positive = CCW)."""
    n = len(polygon)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x0, y0 = polygon[i]
        x1, y1 = polygon[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2.0


def point_in_polygon(x: float, y: float, polygon: Polygon) -> bool:
    """Even-odd ray-casting point-in-polygon test.

    A horizontal ray is cast from (x, y) toward +x; an odd number of edge
    crossings means inside.  Fewer than 3 vertices never contains anything.

    Ties on the boundary follow the half-open rule of the edge test:
    ``yi > y`` is strict, so for an axis-aligned square the bottom and
    left edges count as inside while the top and right edges do not.
    """
    n = len(polygon)
    if n < 3:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def polygon_bounds(polygon: Polygon) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y)."""
    xs = [v[0] for v in polygon]
    ys = [v[1] for v in polygon]
    return min(xs), min(ys), max(xs), max(ys)


# ── segment intersection ───────────────────────────────────────────


def _cross(o: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _on_segment(p: Sequence[float], q: Sequence[float], r: Sequence[float]) -> bool:
    return (min(p[0], r[0]) <= q[0] <= max(p[0], r[0]) and
            min(p[1], r[1]) <= q[1] <= max(p[1], r[1]))


def segments_intersect(
    a1: Sequence[float], a2: Sequence[float],
    b1: Sequence[float], b2: Sequence[float],
) -> bool:
    """Check if segments (a1-a2) and (b1-b2) properly intersect."""
    d1 = _cross(b1, b2, a1)
    d2 = _cross(b1, b2, a2)
    d3 = _cross(a1, a2, b1)
    d4 = _cross(a1, a2, b2)
    if ((d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)) and \
       ((d3 > 0 and d4 < 0) or (d3 < 0 and d4 > 0)):
        return True
    if d1 == 0 and _on_segment(b1, a1, b2):
        return True
    if d2 == 0 and _on_segment(b1, a2, b2):
        return True
    if d3 == 0 and _on_segment(a1, b1, a2):
        return True
    if d4 == 0 and _on_segment(a1, b2, a2):
        return True
    return False


def _is_self_intersecting(polygon: Polygon) -> bool:
    """O(n²) edge-crossing check."""
    n = len(polygon)
    for i in range(n):
        a1, a2 = polygon[i], polygon[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue  # adjacent edges
            b1, b2 = polygon[j], polygon[(j + 1) % n]
            if segments_intersect(a1, a2, b1, b2):
                return True
    return False


# ── polygon validation ──────────────────────────────────────────────


def validate_polygon(polygon: Polygon, label: str = "polygon") -> list[str]:
    """
    Check an area or zone outline for shapes that can never score.

    Returns a list of warning strings (empty = usable).  Nothing here is
    fatal: a degenerate polygon simply contains no points at scoring time.
    """
    warnings: list[str] = []

    if len(polygon) < 3:
        warnings.append(
            f"{label} has only {len(polygon)} vertices, need at least 3; "
            f"it will never contain a point."
        )
        return warnings

    if abs(polygon_area(polygon)) < 1e-12:
        warnings.append(f"{label} has zero area.")

    if _is_self_intersecting(polygon):
        warnings.append(f"{label} has self-intersecting edges.")

    return warnings


# ── zone selection ──────────────────────────────────────────────────


def best_zone(zones: Iterable[Any], local_point: Sequence[float]) -> Any | None:
    """Highest ``point_value`` zone whose ``vertices`` contain *local_point*.

    Zones are scanned in declaration order and only a strictly higher
    value replaces the current pick, so equal values go to the first one
    declared.  Returns None when no zone contains the point.
    """
    best = None
    for zone in zones:
        if not point_in_polygon(local_point[0], local_point[1], zone.vertices):
            continue
        if best is None or zone.point_value > best.point_value:
            best = zone
    return best

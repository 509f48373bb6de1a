"""Area layout parsing and validation from JSON-compatible dicts.

Expected shape::

    {
      "identifier": "Table",
      "vertices": [[-1, -1], [1, -1], [1, 1], [-1, 1]],
      "transform": {"position": [0, 0], "rotation_deg": 0, "scale": [1, 1]},
      "zones": [{"name": "Center", "vertices": [...], "point_value": 25}]
    }
"""

from __future__ import annotations

from src.catalog.models import ValidationError
from src.geometry import Transform2D, validate_polygon

from .models import PlaceableArea, ScoringZone


def _parse_vertices(data: list) -> tuple[tuple[float, float], ...]:
    return tuple((float(v[0]), float(v[1])) for v in data)


def _parse_transform(data: dict | None) -> Transform2D:
    if not data:
        return Transform2D()
    pos = data.get("position", [0.0, 0.0])
    scale = data.get("scale", [1.0, 1.0])
    if isinstance(scale, (int, float)):
        scale = [scale, scale]
    return Transform2D(
        position=(float(pos[0]), float(pos[1])),
        rotation_deg=float(data.get("rotation_deg", 0.0)),
        scale=(float(scale[0]), float(scale[1])),
    )


def _parse_zone(data: dict) -> ScoringZone:
    return ScoringZone(
        name=data["name"],
        vertices=_parse_vertices(data.get("vertices", [])),
        point_value=int(data.get("point_value", 20)),
    )


def parse_area(data: dict) -> PlaceableArea:
    return PlaceableArea(
        identifier=data["identifier"],
        vertices=_parse_vertices(data.get("vertices", [])),
        transform=_parse_transform(data.get("transform")),
        zones=tuple(_parse_zone(z) for z in data.get("zones", [])),
    )


def parse_areas(data: list[dict]) -> list[PlaceableArea]:
    return [parse_area(a) for a in data]


def validate_area(area: PlaceableArea) -> list[ValidationError]:
    """Editor-time checks; none of these stop the area from being scored."""
    errs: list[ValidationError] = []
    aid = area.identifier

    for warning in validate_polygon(area.vertices, label=f"Area '{aid}'"):
        errs.append(ValidationError(aid, "vertices", warning))

    if area.transform.is_degenerate:
        errs.append(ValidationError(aid, "transform.scale",
                                    f"Zero scale {area.transform.scale}; area contains nothing"))

    seen: set[str] = set()
    for zone in area.zones:
        if zone.name in seen:
            errs.append(ValidationError(aid, f"zones.{zone.name}", "Duplicate zone name"))
        seen.add(zone.name)
        for warning in validate_polygon(zone.vertices, label=f"Zone '{zone.name}'"):
            errs.append(ValidationError(aid, f"zones.{zone.name}", warning))

    return errs

"""Session registry of placeable areas."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from src.geometry import Point2D

from .models import PlaceableArea


log = logging.getLogger("hermitHome.areas")


class AreaRegistry:
    """Ordered set of the areas active in the current session.

    Registration order is the evaluation order used by the scorer, so it
    also decides ties between equally scored areas.
    """

    def __init__(self, areas: Iterable[PlaceableArea] = ()) -> None:
        self._areas: dict[str, PlaceableArea] = {}
        for area in areas:
            self.add(area)

    def add(self, area: PlaceableArea) -> None:
        if area.identifier in self._areas:
            raise ValueError(f"Area '{area.identifier}' is already registered")
        self._areas[area.identifier] = area
        log.debug("Registered area '%s' (%d zones)", area.identifier, len(area.zones))

    def get(self, identifier: str) -> PlaceableArea | None:
        return self._areas.get(identifier)

    def identifiers(self) -> list[str]:
        return list(self._areas)

    def areas_containing(self, world_point: Point2D) -> list[PlaceableArea]:
        return [a for a in self._areas.values() if a.contains_point(world_point)]

    def can_place(self, world_shape: Any) -> bool:
        """True if some area fully contains the shape (drop validation)."""
        return any(a.contains_shape(world_shape) for a in self._areas.values())

    def __iter__(self) -> Iterator[PlaceableArea]:
        return iter(list(self._areas.values()))

    def __len__(self) -> int:
        return len(self._areas)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._areas

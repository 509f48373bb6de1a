"""Catalog dataclasses — typed representations of catalog/*.json item entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from src.geometry import Point2D, best_zone

from .themes import derive_themes


log = logging.getLogger("hermitHome.catalog")


@dataclass(frozen=True)
class PlacementZone:
    """A sub-polygon of a preferred area (area-local frame) with its own value."""
    name: str
    vertices: tuple[Point2D, ...]
    point_value: int = 20


@dataclass(frozen=True)
class PlacementPreference:
    area_identifier: str
    default_area_points: int = 15
    zones: tuple[PlacementZone, ...] = ()

    def best_zone_for(self, local_point: Point2D) -> PlacementZone | None:
        """Highest-valued zone containing *local_point*; ties go to the first declared."""
        return best_zone(self.zones, local_point)


@dataclass(frozen=True)
class ItemDefinition:
    """Static catalog entry shared by every placed instance of an item type.

    ``theme_tags`` defaults to the themes found in ``name`` (see
    :func:`src.catalog.themes.derive_themes`); pass an explicit set to
    override the name heuristic.
    """
    name: str
    base_points: int = 10
    wrong_placement_penalty: int = -5
    preferences: tuple[PlacementPreference, ...] = ()
    restricted_areas: frozenset[str] = frozenset()
    theme_tags: frozenset[str] | None = None
    description: str = ""
    source_file: str = ""               # path of the JSON file (for error reporting)

    def __post_init__(self) -> None:
        if self.theme_tags is None:
            object.__setattr__(self, "theme_tags", frozenset(derive_themes(self.name)))

    def preference_for(self, area_identifier: str) -> PlacementPreference | None:
        """First preference whose area identifier matches exactly."""
        for pref in self.preferences:
            if pref.area_identifier == area_identifier:
                return pref
        return None

    def is_restricted_from(self, area_identifier: str) -> bool:
        return area_identifier in self.restricted_areas

    @property
    def max_points(self) -> int:
        """Theoretical best score: base points or any preference/zone value."""
        best = self.base_points
        for pref in self.preferences:
            best = max(best, pref.default_area_points)
            for zone in pref.zones:
                best = max(best, zone.point_value)
        return best


@dataclass
class ValidationError:
    item_name: str
    field: str
    message: str

    def __str__(self) -> str:
        return f"[{self.item_name}] {self.field}: {self.message}"


@dataclass
class CatalogResult:
    """Result of loading the catalog — items + any validation errors."""
    items: list[ItemDefinition]
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0


class ItemCatalog:
    """Read-only lookup of item definitions by name.

    Names are matched exactly.  If two definitions share a name the first
    one wins and the duplicate is logged.
    """

    def __init__(self, items: list[ItemDefinition] | tuple[ItemDefinition, ...] = ()) -> None:
        self._items: dict[str, ItemDefinition] = {}
        for item in items:
            if item.name in self._items:
                log.warning("Duplicate item definition '%s' ignored", item.name)
                continue
            self._items[item.name] = item

    @classmethod
    def from_result(cls, result: CatalogResult) -> ItemCatalog:
        return cls(result.items)

    def get(self, name: str) -> ItemDefinition | None:
        return self._items.get(name)

    def names(self) -> list[str]:
        return list(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[ItemDefinition]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

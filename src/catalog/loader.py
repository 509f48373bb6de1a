"""Catalog loader — reads catalog/*.json files, parses and validates them."""

from __future__ import annotations

import json
from pathlib import Path

from src.geometry import validate_polygon

from .models import (
    PlacementZone, PlacementPreference, ItemDefinition,
    ValidationError, CatalogResult,
)


CATALOG_DIR = Path(__file__).resolve().parent.parent.parent / "catalog"


# ── Validation ─────────────────────────────────────────────────────

def validate_item(item: ItemDefinition) -> list[ValidationError]:
    """Run all validation checks on a single item definition."""
    errs: list[ValidationError] = []
    name = item.name or "<unnamed>"

    if not item.name.strip():
        errs.append(ValidationError(name, "name", "Must not be empty"))

    # Preference areas unique
    seen: set[str] = set()
    for pref in item.preferences:
        if pref.area_identifier in seen:
            errs.append(ValidationError(
                name, f"placement_preferences.{pref.area_identifier}",
                "Duplicate preference for area (only the first is used)"))
        seen.add(pref.area_identifier)

        if pref.area_identifier in item.restricted_areas:
            errs.append(ValidationError(
                name, f"placement_preferences.{pref.area_identifier}",
                "Area is both preferred and restricted (restriction wins)"))

        zone_names: set[str] = set()
        for zone in pref.zones:
            if zone.name in zone_names:
                errs.append(ValidationError(
                    name, f"placement_preferences.{pref.area_identifier}.zones.{zone.name}",
                    "Duplicate zone name"))
            zone_names.add(zone.name)
            for warning in validate_polygon(zone.vertices, label=f"Zone '{zone.name}'"):
                errs.append(ValidationError(
                    name, f"placement_preferences.{pref.area_identifier}.zones.{zone.name}",
                    warning))

    return errs


# ── Parsing ────────────────────────────────────────────────────────

def _parse_vertices(data: list) -> tuple[tuple[float, float], ...]:
    return tuple((float(v[0]), float(v[1])) for v in data)


def _parse_zone(data: dict) -> PlacementZone:
    return PlacementZone(
        name=data["name"],
        vertices=_parse_vertices(data.get("vertices", [])),
        point_value=int(data.get("point_value", 20)),
    )


def _parse_preference(data: dict) -> PlacementPreference:
    return PlacementPreference(
        area_identifier=data["area_identifier"],
        default_area_points=int(data.get("default_area_points", 15)),
        zones=tuple(_parse_zone(z) for z in data.get("zones", [])),
    )


def parse_item(data: dict, source_file: str = "") -> ItemDefinition:
    """Build an ItemDefinition from its JSON dict.

    ``theme_tags`` is optional; when absent the tags are derived from the
    item name.
    """
    tags = data.get("theme_tags")
    return ItemDefinition(
        name=data["name"],
        description=data.get("description", ""),
        base_points=int(data.get("base_points", 10)),
        wrong_placement_penalty=int(data.get("wrong_placement_penalty", -5)),
        preferences=tuple(_parse_preference(p) for p in data.get("placement_preferences", [])),
        restricted_areas=frozenset(data.get("restricted_areas", [])),
        theme_tags=frozenset(tags) if tags is not None else None,
        source_file=source_file,
    )


# ── Public API ─────────────────────────────────────────────────────

def load_catalog(catalog_dir: Path | None = None) -> CatalogResult:
    """Load all catalog/*.json files, parse and validate.

    Each file holds one item dict or a list of them.  Returns a
    CatalogResult with items and any validation errors.  Items that fail
    to parse are skipped (error recorded).  Items that parse but have
    validation issues are still included.
    """
    d = catalog_dir or CATALOG_DIR
    items: list[ItemDefinition] = []
    errors: list[ValidationError] = []

    json_files = sorted(d.glob("*.json"))
    if not json_files:
        errors.append(ValidationError("_catalog", "files", f"No .json files found in {d}"))
        return CatalogResult(items=items, errors=errors)

    for path in json_files:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            errors.append(ValidationError(
                path.stem, "json", f"Parse error: {exc}"))
            continue
        except OSError as exc:
            errors.append(ValidationError(
                path.stem, "file", f"Read error: {exc}"))
            continue

        entries = raw if isinstance(raw, list) else [raw]
        for entry in entries:
            try:
                item = parse_item(entry, source_file=str(path))
            except (KeyError, TypeError, ValueError, IndexError, AttributeError) as exc:
                label = entry.get("name", path.stem) if isinstance(entry, dict) else path.stem
                errors.append(ValidationError(
                    label, "parse", f"Missing/invalid field: {exc}"))
                continue

            errors.extend(validate_item(item))
            items.append(item)

    # Check for duplicate names across files
    name_counts: dict[str, int] = {}
    for item in items:
        name_counts[item.name] = name_counts.get(item.name, 0) + 1
    for name, count in name_counts.items():
        if count > 1:
            errors.append(ValidationError(name, "name", f"Duplicate item name (appears {count} times)"))

    return CatalogResult(items=items, errors=errors)


def get_item(catalog: list[ItemDefinition] | CatalogResult, name: str) -> ItemDefinition | None:
    """Look up an item definition by name. Returns None if not found."""
    items = catalog.items if isinstance(catalog, CatalogResult) else catalog
    for item in items:
        if item.name == name:
            return item
    return None

"""Item catalog — decoration definitions, preferences, themes, and catalog/*.json loading."""

from .models import (
    PlacementZone, PlacementPreference, ItemDefinition,
    ValidationError, CatalogResult, ItemCatalog,
)
from .themes import KNOWN_THEMES, derive_themes
from .loader import load_catalog, parse_item, validate_item, get_item, CATALOG_DIR

__all__ = [
    # Models
    "PlacementZone", "PlacementPreference", "ItemDefinition",
    "ValidationError", "CatalogResult", "ItemCatalog",
    # Themes
    "KNOWN_THEMES", "derive_themes",
    # Loader
    "load_catalog", "parse_item", "validate_item", "get_item", "CATALOG_DIR",
]

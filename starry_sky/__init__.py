from .catalog import CatalogHeader, RawStarRecord, read_catalog, load_catalog
from .config import StarFieldConfig
from .exceptions import (
    StarrySkyError,
    ConfigurationError,
    MalformedCatalogError,
    StarLookupError,
)
from .stars import Star, StarField, build_star, build_stars

__version__ = "0.1.0"

__all__ = [
    "CatalogHeader",
    "RawStarRecord",
    "read_catalog",
    "load_catalog",
    "StarFieldConfig",
    "StarrySkyError",
    "ConfigurationError",
    "MalformedCatalogError",
    "StarLookupError",
    "Star",
    "StarField",
    "build_star",
    "build_stars",
]

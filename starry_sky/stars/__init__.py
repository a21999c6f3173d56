from .star_builder import (
    Star,
    SPECTRAL_COLOURS,
    base_position,
    spectral_colour,
    inverse_lerp,
    magnitude_size,
    build_star,
    build_stars,
)
from .star_field import StarField
from .constellations import (
    Constellation,
    CONSTELLATIONS,
    get_constellation,
    constellation_stars,
    constellation_segments,
)

__all__ = [
    "Star",
    "SPECTRAL_COLOURS",
    "base_position",
    "spectral_colour",
    "inverse_lerp",
    "magnitude_size",
    "build_star",
    "build_stars",
    "StarField",
    "Constellation",
    "CONSTELLATIONS",
    "get_constellation",
    "constellation_stars",
    "constellation_segments",
]

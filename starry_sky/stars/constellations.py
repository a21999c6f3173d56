"""Constellation table keyed by Harvard Revised (BSC5 catalog) numbers."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Union

from starry_sky.stars.star_builder import Star
from starry_sky.stars.star_field import StarField


@dataclass(frozen=True)
class Constellation:
    name: str
    stars: Tuple[int, ...]
    lines: Tuple[Tuple[int, int], ...]


def _pairs(flat: Tuple[int, ...]) -> Tuple[Tuple[int, int], ...]:
    return tuple(zip(flat[0::2], flat[1::2]))


CONSTELLATIONS: Tuple[Constellation, ...] = (
    Constellation(
        "Orion",
        (1948, 1903, 1852, 2004, 1713, 2061, 1790, 1907, 2124,
         2199, 2135, 2047, 2159, 1543, 1544, 1570, 1552, 1567),
        _pairs((1713, 2004, 1713, 1852, 1852, 1790, 1852, 1903, 1903, 1948,
                1948, 2061, 1948, 2004, 1790, 1907, 1907, 2061, 2061, 2124,
                2124, 2199, 2199, 2135, 2199, 2159, 2159, 2047, 1790, 1543,
                1543, 1544, 1544, 1570, 1543, 1552, 1552, 1567, 2135, 2047)),
    ),
    Constellation(
        "Monoceros",
        (2970, 3188, 2714, 2356, 2227, 2506, 2298, 2385, 2456, 2479),
        _pairs((2970, 3188, 3188, 2714, 2714, 2356, 2356, 2227, 2714, 2506,
                2506, 2298, 2298, 2385, 2385, 2456, 2479, 2506, 2479, 2385)),
    ),
    Constellation(
        "Gemini",
        (2890, 2891, 2990, 2421, 2777, 2473, 2650, 2216, 2895,
         2343, 2484, 2286, 2134, 2763, 2697, 2540, 2821, 2905, 2985),
        _pairs((2890, 2697, 2990, 2905, 2697, 2473, 2905, 2777, 2777, 2650,
                2650, 2421, 2473, 2286, 2286, 2216, 2473, 2343, 2216, 2134,
                2763, 2484, 2763, 2777, 2697, 2540, 2697, 2821, 2821, 2905,
                2905, 2985)),
    ),
    Constellation(
        "Cancer",
        (3475, 3449, 3461, 3572, 3249),
        _pairs((3475, 3449, 3449, 3461, 3461, 3572, 3461, 3249)),
    ),
    Constellation(
        "Leo",
        (3982, 4534, 4057, 4357, 3873, 4031, 4359, 3975, 4399, 4386, 3905, 3773, 3731),
        _pairs((4534, 4357, 4534, 4359, 4357, 4359, 4357, 4057, 4057, 4031,
                4057, 3975, 3975, 3982, 3975, 4359, 4359, 4399, 4399, 4386,
                4031, 3905, 3905, 3873, 3873, 3975, 3873, 3773, 3773, 3731,
                3731, 3905)),
    ),
    Constellation(
        "Leo Minor",
        (3800, 3974, 4100, 4247, 4090),
        _pairs((3800, 3974, 3974, 4100, 4100, 4247, 4247, 4090, 4090, 3974)),
    ),
    Constellation(
        "Lynx",
        (3705, 3690, 3612, 3579, 3275, 2818, 2560, 2238),
        _pairs((3705, 3690, 3690, 3612, 3612, 3579, 3579, 3275, 3275, 2818,
                2818, 2560, 2560, 2238)),
    ),
    Constellation(
        "Ursa Major",
        (3569, 3594, 3775, 3888, 3323, 3757, 4301, 4295, 4554, 4660,
         4905, 5054, 5191, 4518, 4335, 4069, 4033, 4377, 4375),
        _pairs((3569, 3594, 3594, 3775, 3775, 3888, 3888, 3323, 3323, 3757,
                3757, 3888, 3757, 4301, 4301, 4295, 4295, 3888, 4295, 4554,
                4554, 4660, 4660, 4301, 4660, 4905, 4905, 5054, 5054, 5191,
                4554, 4518, 4518, 4335, 4335, 4069, 4069, 4033, 4518, 4377,
                4377, 4375)),
    ),
)


def get_constellation(key: Union[str, int]) -> Constellation:
    """
    Look up a constellation by 0-based index or case-insensitive name.

    Raises:
        IndexError: Index outside the table.
        KeyError: Unknown name.
    """
    if isinstance(key, int):
        if key < 0 or key >= len(CONSTELLATIONS):
            raise IndexError(f"No constellation at index {key}")
        return CONSTELLATIONS[key]

    wanted = key.strip().lower()
    for c in CONSTELLATIONS:
        if c.name.lower() == wanted:
            return c
    raise KeyError(key)


def constellation_stars(field: StarField, constellation: Constellation) -> List[Star]:
    return [field.by_catalog_number(n) for n in constellation.stars]


def constellation_segments(
    field: StarField, constellation: Constellation
) -> List[Tuple[Star, Star]]:
    """
    Resolve the constellation's line segments to star pairs, in table order.

    Raises:
        StarLookupError: If a catalog number is not in the field.
    """
    return [
        (field.by_catalog_number(a), field.by_catalog_number(b))
        for a, b in constellation.lines
    ]

"""
Derivation of display attributes for catalog stars.

Each raw catalog record becomes a Star with:
- a position on the unit sphere (float32)
- an RGB colour interpolated from its spectral class
- a size in [0, 1] derived from its apparent magnitude
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np

from starry_sky.catalog.bsc5_reader import RawStarRecord


def _int_colour(r: int, g: int, b: int) -> np.ndarray:
    return np.array([r, g, b], dtype=np.float64) / 255.0


# OBAFGKM colours from https://arxiv.org/pdf/2101.06254.pdf
# Eight entries for seven classes: M interpolates towards M9.5.
SPECTRAL_COLOURS = np.stack(
    [
        _int_colour(0x5C, 0x7C, 0xFF),  # O1
        _int_colour(0x5D, 0x7E, 0xFF),  # B0.5
        _int_colour(0x79, 0x96, 0xFF),  # A0
        _int_colour(0xB8, 0xC5, 0xFF),  # F0
        _int_colour(0xFF, 0xEF, 0xED),  # G1
        _int_colour(0xFF, 0xDE, 0xC0),  # K0
        _int_colour(0xFF, 0xA2, 0x5A),  # M0
        _int_colour(0xFF, 0x7D, 0x24),  # M9.5
    ]
)

SPECTRAL_CLASSES = b"OBAFGKM"

WHITE = np.ones(3, dtype=np.float32)

BRIGHTEST_MAGNITUDE = -146
FAINTEST_MAGNITUDE = 796


@dataclass(frozen=True, eq=False)
class Star:
    catalog_number: float
    position: np.ndarray
    colour: np.ndarray
    size: float

    right_ascension: float = field(default=0.0, repr=False)
    declination: float = field(default=0.0, repr=False)
    ra_proper_motion: float = field(default=0.0, repr=False)
    dec_proper_motion: float = field(default=0.0, repr=False)

    def __post_init__(self):
        self.position.flags.writeable = False
        self.colour.flags.writeable = False

    @property
    def hr_number(self) -> int:
        """Harvard Revised number, the integer value of catalog_number."""
        return int(round(self.catalog_number))


def base_position(right_ascension: float, declination: float) -> np.ndarray:
    """
    Place a star on the unit sphere.

    Args:
        right_ascension (float): Right ascension [rad].
        declination (float): Declination [rad].

    Returns:
        np.ndarray: (x, y, z) as float32, y towards the celestial pole.
    """
    # Cylinder first, then scale x and z by cos(dec) to pull the ends in.
    x = math.cos(right_ascension)
    y = math.sin(declination)
    z = math.sin(right_ascension)

    y_cos = math.cos(declination)
    x *= y_cos
    z *= y_cos

    return np.array([x, y, z], dtype=np.float32)


def spectral_colour(spectral_type: int, spectral_index: int) -> np.ndarray:
    """
    Colour of a star from its spectral class.

    Unknown classes are white. Otherwise the colour is interpolated between
    the class's reference colour and the next one by the sub-type digit.
    Non-digit sub-types are not validated and extrapolate.

    Args:
        spectral_type (int): ASCII code of the class letter.
        spectral_index (int): ASCII code of the sub-type digit.

    Returns:
        np.ndarray: RGB as float32.
    """
    col_idx = SPECTRAL_CLASSES.find(bytes([spectral_type & 0xFF]))
    if col_idx == -1:
        return WHITE.copy()

    percent = (spectral_index - ord("0")) / 10.0
    start = SPECTRAL_COLOURS[col_idx]
    end = SPECTRAL_COLOURS[col_idx + 1]

    return (start + (end - start) * percent).astype(np.float32)


def inverse_lerp(lo: float, hi: float, value: float) -> float:
    """Fraction of the way value lies from lo to hi, clamped to [0, 1]."""
    if lo == hi:
        return 0.0
    return min(max((value - lo) / (hi - lo), 0.0), 1.0)


def magnitude_size(magnitude: int) -> float:
    """
    Display size from magnitude * 100.

    Linear in magnitude, 1.0 at -1.46 and 0.0 at 7.96, clamped outside.
    """
    return 1.0 - inverse_lerp(BRIGHTEST_MAGNITUDE, FAINTEST_MAGNITUDE, magnitude)


def build_star(record: RawStarRecord) -> Star:
    return Star(
        catalog_number=record.catalog_number,
        position=base_position(record.right_ascension, record.declination),
        colour=spectral_colour(record.spectral_type, record.spectral_index),
        size=magnitude_size(record.magnitude),
        right_ascension=record.right_ascension,
        declination=record.declination,
        ra_proper_motion=record.ra_proper_motion,
        dec_proper_motion=record.dec_proper_motion,
    )


def build_stars(records: Iterable[RawStarRecord]) -> List[Star]:
    """Build one Star per record, preserving order."""
    return [build_star(r) for r in records]

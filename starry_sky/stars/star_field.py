"""
Ordered collection of derived stars.

Provides:
- Building the field from a BSC5 catalog
- Lookup by catalog (HR) number
- numpy / pandas views of positions, colours and sizes
- Display size and scene scaling helpers
"""

from __future__ import annotations
import logging
from typing import BinaryIO, Iterator, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from starry_sky.catalog.bsc5_reader import CatalogSource, load_catalog, read_catalog
from starry_sky.exceptions import StarLookupError
from starry_sky.stars.star_builder import Star, build_stars

logger = logging.getLogger(__name__)


class StarField:
    def __init__(self, stars: Sequence[Star]):
        """Wrap stars in file order. Index i holds catalog number i + 1."""
        self._stars: Tuple[Star, ...] = tuple(stars)
        self._vectors: Optional[np.ndarray] = None
        self._df: Optional[pd.DataFrame] = None

    @classmethod
    def from_catalog(cls, source: Union[CatalogSource, BinaryIO]) -> "StarField":
        """Load a BSC5 catalog from a path, raw bytes or open binary stream."""
        if hasattr(source, "read"):
            records = read_catalog(source)
        else:
            records = load_catalog(source)

        stars = build_stars(records)
        logger.info("Built star field with %d stars", len(stars))

        return cls(stars)

    def __len__(self) -> int:
        return len(self._stars)

    def __iter__(self) -> Iterator[Star]:
        return iter(self._stars)

    def __getitem__(self, index: int) -> Star:
        return self._stars[index]

    @property
    def stars(self) -> Tuple[Star, ...]:
        return self._stars

    def by_catalog_number(self, catalog_number: float) -> Star:
        """
        Return the star with the given catalog number.

        Catalog numbers are 1-up, the field is 0-up.

        Raises:
            StarLookupError: If the number falls outside the field.
        """
        idx = int(catalog_number) - 1
        if idx < 0 or idx >= len(self._stars):
            raise StarLookupError(f"No star with catalog number {catalog_number}")
        return self._stars[idx]

    @property
    def vectors(self) -> np.ndarray:
        """Return Nx3 float32 array of unit-sphere positions."""
        if self._vectors is None:
            if self._stars:
                self._vectors = np.stack([s.position for s in self._stars])
            else:
                self._vectors = np.empty((0, 3), dtype=np.float32)
            self._vectors.flags.writeable = False
        return self._vectors

    @property
    def colours(self) -> np.ndarray:
        """Return Nx3 float32 array of RGB colours."""
        if not self._stars:
            return np.empty((0, 3), dtype=np.float32)
        return np.stack([s.colour for s in self._stars])

    @property
    def sizes(self) -> np.ndarray:
        return np.array([s.size for s in self._stars], dtype=float)

    @property
    def df(self) -> pd.DataFrame:
        """Tabular view, one row per star in file order."""
        if self._df is None:
            vecs = self.vectors
            cols = self.colours
            self._df = pd.DataFrame(
                {
                    "catalog_number": [s.catalog_number for s in self._stars],
                    "ra": [s.right_ascension for s in self._stars],
                    "dec": [s.declination for s in self._stars],
                    "x": vecs[:, 0],
                    "y": vecs[:, 1],
                    "z": vecs[:, 2],
                    "r": cols[:, 0],
                    "g": cols[:, 1],
                    "b": cols[:, 2],
                    "size": self.sizes,
                }
            )
        return self._df

    def display_sizes(self, size_min: float, size_max: float) -> np.ndarray:
        """Map each star's size in [0, 1] linearly onto [size_min, size_max]."""
        return size_min + (size_max - size_min) * self.sizes

    def scaled_positions(self, scale: float) -> np.ndarray:
        """Positions pushed out onto a sphere of radius scale."""
        return self.vectors * np.float32(scale)

    def filtered(self, min_size: float = 0.5) -> Tuple[np.ndarray, np.ndarray]:
        """Return vectors and sizes for stars at least as large as min_size."""
        sizes = self.sizes
        mask = sizes >= min_size
        return self.vectors[mask], sizes[mask]

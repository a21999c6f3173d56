"""
Binary reader for the Yale Bright Star Catalog (BSC5 format).

Provides:
- Decoding of the 28-byte little-endian header
- Decoding of the fixed 32-byte star records that follow it
- Loading from a path, raw bytes or an open binary stream
"""

from __future__ import annotations
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Tuple, Union

import numpy as np

from starry_sky.exceptions import MalformedCatalogError

logger = logging.getLogger(__name__)


HEADER_DTYPE = np.dtype(
    [
        ("sequence_offset", "<i4"),
        ("start_index", "<i4"),
        ("num_stars", "<i4"),
        ("star_number_settings", "<i4"),
        ("proper_motion_included", "<i4"),
        ("num_magnitudes", "<i4"),
        ("star_data_size", "<i4"),
    ]
)

# Packed: 4 + 8 + 8 + 1 + 1 + 2 + 4 + 4 bytes, no alignment padding.
RECORD_DTYPE = np.dtype(
    [
        ("catalog_number", "<f4"),
        ("right_ascension", "<f8"),
        ("declination", "<f8"),
        ("spectral_type", "u1"),
        ("spectral_index", "u1"),
        ("magnitude", "<i2"),
        ("ra_proper_motion", "<f4"),
        ("dec_proper_motion", "<f4"),
    ]
)

HEADER_SIZE = HEADER_DTYPE.itemsize
RECORD_SIZE = RECORD_DTYPE.itemsize

# Upper bound on a single read; buffers are never sized from the header count.
READ_CHUNK_SIZE = 4096 * RECORD_SIZE

CatalogSource = Union[str, Path, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class CatalogHeader:
    sequence_offset: int
    start_index: int
    num_stars: int
    star_number_settings: int
    proper_motion_included: int
    num_magnitudes: int
    star_data_size: int

    @property
    def star_count(self) -> int:
        """Number of records in the file; the header stores it negated."""
        return -self.num_stars


@dataclass(frozen=True)
class RawStarRecord:
    catalog_number: float
    right_ascension: float    # [rad]
    declination: float        # [rad]
    spectral_type: int        # ASCII letter, e.g. ord("G")
    spectral_index: int       # ASCII digit, e.g. ord("2")
    magnitude: int            # magnitude * 100
    ra_proper_motion: float
    dec_proper_motion: float


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(min(remaining, READ_CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_header(stream: BinaryIO) -> CatalogHeader:
    """
    Read and validate the catalog header.

    Args:
        stream (BinaryIO): Binary stream positioned at the start of the catalog.

    Returns:
        CatalogHeader: Decoded header.

    Raises:
        MalformedCatalogError: If the stream ends inside the header or the
            derived star count is negative.
    """
    data = _read_exact(stream, HEADER_SIZE)
    if len(data) < HEADER_SIZE:
        raise MalformedCatalogError("header")

    raw = np.frombuffer(data, dtype=HEADER_DTYPE, count=1)[0]
    header = CatalogHeader(*(int(v) for v in raw.item()))

    if header.star_count < 0:
        raise MalformedCatalogError("count")

    if header.star_data_size != RECORD_SIZE:
        logger.warning(
            "Header declares %d-byte records, decoding with the %d-byte layout",
            header.star_data_size,
            RECORD_SIZE,
        )

    logger.debug("Catalog header: %s", header)

    return header


def read_record_array(stream: BinaryIO) -> Tuple[CatalogHeader, np.ndarray]:
    """
    Read the header and the whole record region as a structured array.

    Args:
        stream (BinaryIO): Binary stream positioned at the start of the catalog.

    Returns:
        tuple[CatalogHeader, np.ndarray]: Header and array of RECORD_DTYPE, file order.

    Raises:
        MalformedCatalogError: On a truncated header or record region, or a bad count.
    """
    header = read_header(stream)
    count = header.star_count

    expected = count * RECORD_SIZE
    data = _read_exact(stream, expected)
    if len(data) < expected:
        raise MalformedCatalogError("record", len(data) // RECORD_SIZE)

    records = np.frombuffer(data, dtype=RECORD_DTYPE, count=count)
    logger.debug("Decoded %d star records", count)

    return header, records


def _to_record(row: np.void) -> RawStarRecord:
    return RawStarRecord(
        catalog_number=float(row["catalog_number"]),
        right_ascension=float(row["right_ascension"]),
        declination=float(row["declination"]),
        spectral_type=int(row["spectral_type"]),
        spectral_index=int(row["spectral_index"]),
        magnitude=int(row["magnitude"]),
        ra_proper_motion=float(row["ra_proper_motion"]),
        dec_proper_motion=float(row["dec_proper_motion"]),
    )


def read_catalog(stream: BinaryIO) -> List[RawStarRecord]:
    """
    Decode a catalog from an open binary stream. The stream is not closed.

    Returns:
        List[RawStarRecord]: One record per star, in file order.
    """
    _, records = read_record_array(stream)
    return [_to_record(row) for row in records]


def load_catalog(source: CatalogSource) -> List[RawStarRecord]:
    """
    Decode a catalog from a file path or an in-memory byte blob.

    The underlying stream is opened here and closed on every exit path.

    Args:
        source (str | Path | bytes): Path to a BSC5 file, or its contents.

    Returns:
        List[RawStarRecord]: One record per star, in file order.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        stream = io.BytesIO(bytes(source))
    else:
        logger.info("Loading star catalog from %s", source)
        stream = open(source, "rb")

    with stream:
        return read_catalog(stream)

import numpy as np

from starry_sky.catalog.bsc5_reader import HEADER_DTYPE, RECORD_DTYPE


def make_record(
    catalog_number=1.0,
    ra=0.0,
    dec=0.0,
    spectral=b"G2",
    magnitude=500,
    ra_pm=0.0,
    dec_pm=0.0,
) -> tuple:
    return (catalog_number, ra, dec, spectral[0], spectral[1], magnitude, ra_pm, dec_pm)


def make_catalog_bytes(records, num_stars=None, star_data_size=32) -> bytes:
    """
    Build a BSC5 blob: header followed by packed records.
    """
    if num_stars is None:
        num_stars = -len(records)

    header = np.array([(0, 1, num_stars, 1, 1, -1, star_data_size)], dtype=HEADER_DTYPE)
    body = np.array(list(records), dtype=RECORD_DTYPE)

    return header.tobytes() + body.tobytes()

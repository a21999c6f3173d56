import math

import pytest

from bsc5_builders import make_catalog_bytes, make_record


@pytest.fixture
def small_catalog_records():
    return [
        make_record(1.0, 0.0, 0.0, b"O5", -146),
        make_record(2.0, math.pi / 2, 0.0, b"G1", 325),
        make_record(3.0, math.pi, math.pi / 4, b"M9", 796, 0.01, -0.02),
        make_record(4.0, 3 * math.pi / 2, -math.pi / 4, b"Z0", 1200),
    ]


@pytest.fixture
def small_catalog_bytes(small_catalog_records) -> bytes:
    return make_catalog_bytes(small_catalog_records)


@pytest.fixture
def small_catalog_file(tmp_path, small_catalog_bytes):
    path = tmp_path / "BSC5"
    path.write_bytes(small_catalog_bytes)
    return path

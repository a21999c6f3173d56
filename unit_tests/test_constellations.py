import numpy as np
import pytest

from starry_sky.exceptions import StarLookupError
from starry_sky.stars.constellations import (
    CONSTELLATIONS,
    constellation_segments,
    constellation_stars,
    get_constellation,
)
from starry_sky.stars.star_field import StarField

from bsc5_builders import make_catalog_bytes, make_record


@pytest.fixture(scope="module")
def cancer_sized_field() -> StarField:
    """
    Field with catalog numbers 1..3600, covering Cancer.
    """
    rng = np.random.default_rng(7)
    ra = rng.uniform(0.0, 2 * np.pi, size=3600)
    dec = rng.uniform(-np.pi / 2, np.pi / 2, size=3600)
    records = [make_record(float(i + 1), ra[i], dec[i]) for i in range(3600)]

    return StarField.from_catalog(make_catalog_bytes(records))


def test_table_order():
    names = [c.name for c in CONSTELLATIONS]

    assert names == [
        "Orion",
        "Monoceros",
        "Gemini",
        "Cancer",
        "Leo",
        "Leo Minor",
        "Lynx",
        "Ursa Major",
    ]


def test_lines_are_pairs():
    orion = CONSTELLATIONS[0]

    assert len(orion.lines) == 20
    assert orion.lines[0] == (1713, 2004)
    assert orion.lines[-1] == (2135, 2047)
    assert all(len(pair) == 2 for c in CONSTELLATIONS for pair in c.lines)


def test_get_constellation_by_name_and_index():
    assert get_constellation("leo minor").name == "Leo Minor"
    assert get_constellation("  ORION ").name == "Orion"
    assert get_constellation(3).name == "Cancer"


def test_get_constellation_unknown():
    with pytest.raises(KeyError):
        get_constellation("Draco")

    with pytest.raises(IndexError):
        get_constellation(8)

    with pytest.raises(IndexError):
        get_constellation(-1)


def test_constellation_stars_resolve_by_catalog_number(cancer_sized_field):
    cancer = get_constellation("Cancer")
    stars = constellation_stars(cancer_sized_field, cancer)

    assert [s.hr_number for s in stars] == list(cancer.stars)


def test_constellation_segments(cancer_sized_field):
    cancer = get_constellation("Cancer")
    segments = constellation_segments(cancer_sized_field, cancer)

    assert len(segments) == 4
    assert [(a.hr_number, b.hr_number) for a, b in segments] == [
        (3475, 3449),
        (3449, 3461),
        (3461, 3572),
        (3461, 3249),
    ]


def test_constellation_outside_field(cancer_sized_field):
    with pytest.raises(StarLookupError):
        constellation_segments(cancer_sized_field, get_constellation("Ursa Major"))

import csv

import matplotlib

matplotlib.use("Agg")

import pytest

from starry_sky.config import StarFieldConfig
from starry_sky.exceptions import ConfigurationError
from starry_sky.pipeline.pipeline import main, save_csv, star_field_pipeline
from starry_sky.stars.star_field import StarField


def test_config_defaults():
    config = StarFieldConfig()

    assert config.size_min == 0.0
    assert config.size_max == 5.0
    assert config.field_scale == 400.0
    assert config.catalog_path.name == "BSC5"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size_min": -1.0},
        {"size_max": 101.0},
        {"size_min": 4.0, "size_max": 2.0},
        {"field_scale": 0.0},
    ],
)
def test_config_validation(kwargs):
    with pytest.raises(ConfigurationError):
        StarFieldConfig(**kwargs)


def test_save_csv(tmp_path, small_catalog_bytes):
    field = StarField.from_catalog(small_catalog_bytes)
    path = tmp_path / "stars.csv"

    save_csv(field, path, size_min=0.0, size_max=2.0)

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 4
    assert [int(r["catalog_number"]) for r in rows] == [1, 2, 3, 4]
    assert float(rows[0]["display_size"]) == pytest.approx(2.0)
    assert float(rows[1]["size"]) == pytest.approx(0.5)


def test_pipeline_writes_outputs(tmp_path, small_catalog_file, capsys):
    out_dir = tmp_path / "out"
    config = StarFieldConfig(catalog_path=small_catalog_file, out_dir=out_dir)

    field = star_field_pipeline(config)

    assert len(field) == 4
    assert (out_dir / "BSC5_stars.csv").exists()
    assert (out_dir / "BSC5_star_chart.png").stat().st_size > 0
    assert "[INFO] Stars loaded: 4" in capsys.readouterr().out


def test_main_runs(tmp_path, small_catalog_file):
    out_dir = tmp_path / "cli"

    main(["--catalog", str(small_catalog_file), "--out-dir", str(out_dir), "--size-max", "3"])

    assert (out_dir / "BSC5_stars.csv").exists()


def test_main_malformed_catalog(tmp_path, small_catalog_bytes):
    path = tmp_path / "BSC5"
    path.write_bytes(small_catalog_bytes[:40])

    with pytest.raises(SystemExit) as exc:
        main(["--catalog", str(path), "--out-dir", str(tmp_path / "out")])

    assert "malformed catalog" in str(exc.value)


def test_main_missing_catalog(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--catalog", str(tmp_path / "nope"), "--out-dir", str(tmp_path / "out")])

    assert "not found" in str(exc.value)


def test_main_unknown_constellation(tmp_path, small_catalog_file):
    with pytest.raises(SystemExit):
        main(["--catalog", str(small_catalog_file), "--constellation", "Draco"])


def test_main_constellation_outside_catalog(tmp_path, small_catalog_file):
    with pytest.raises(SystemExit) as exc:
        main([
            "--catalog", str(small_catalog_file),
            "--out-dir", str(tmp_path / "out"),
            "--constellation", "Orion",
        ])

    assert "Constellation" in str(exc.value)


def test_main_catalog_is_directory(tmp_path):
    catalog_dir = tmp_path / "BSC5"
    catalog_dir.mkdir()

    with pytest.raises(SystemExit) as exc:
        main(["--catalog", str(catalog_dir), "--out-dir", str(tmp_path / "out")])

    assert "Cannot open catalog" in str(exc.value)

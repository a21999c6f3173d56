import argparse
import csv
import math
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from starry_sky.config import StarFieldConfig
from starry_sky.exceptions import MalformedCatalogError, StarLookupError, StarrySkyError
from starry_sky.stars.constellations import (
    Constellation,
    constellation_segments,
    get_constellation,
)
from starry_sky.stars.star_field import StarField


def save_csv(field: StarField, csv_path: Path, size_min: float = 0.0, size_max: float = 5.0) -> None:
    """
    Write one row per star, in catalog order.

    Args:
        field (StarField): Loaded star field.
        csv_path (Path): Output CSV path.
        size_min (float): Display size of the faintest star.
        size_max (float): Display size of the brightest star.
    """
    display = field.display_sizes(size_min, size_max)

    with open(csv_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(
            [
                "catalog_number",
                "ra",
                "dec",
                "x",
                "y",
                "z",
                "r",
                "g",
                "b",
                "size",
                "display_size",
            ]
        )
        for star, d in zip(field, display):
            x, y, z = star.position.tolist()
            r, g, b = star.colour.tolist()
            w.writerow(
                [
                    star.hr_number,
                    star.right_ascension,
                    star.declination,
                    x,
                    y,
                    z,
                    r,
                    g,
                    b,
                    star.size,
                    float(d),
                ]
            )


def draw_star_chart(
    field: StarField,
    out_path: Path,
    size_min: float = 0.0,
    size_max: float = 5.0,
    constellations: Sequence[Constellation] = (),
) -> None:
    """
    Save an RA/Dec preview chart of the field.

    Args:
        field (StarField): Loaded star field.
        out_path (Path): Output image path.
        size_min (float): Display size of the faintest star.
        size_max (float): Display size of the brightest star.
        constellations (Sequence[Constellation]): Constellations to overlay.
    """
    ra_deg = np.degrees([s.right_ascension for s in field]) % 360.0
    dec_deg = np.degrees([s.declination for s in field])
    colours = np.clip(field.colours, 0.0, 1.0)
    marker = field.display_sizes(size_min, size_max) ** 2

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.set_facecolor("black")
    ax.scatter(ra_deg, dec_deg, s=marker, c=colours, linewidths=0)

    for c in constellations:
        for a, b in constellation_segments(field, c):
            ra0 = math.degrees(a.right_ascension) % 360.0
            ra1 = math.degrees(b.right_ascension) % 360.0
            # Segments crossing RA 0h would span the whole chart.
            if abs(ra1 - ra0) > 180.0:
                continue
            ax.plot(
                [ra0, ra1],
                [math.degrees(a.declination), math.degrees(b.declination)],
                c="white",
                lw=0.6,
            )

    ax.set_xlim(360.0, 0.0)
    ax.set_ylim(-90.0, 90.0)
    ax.set_xlabel("Right ascension [deg]")
    ax.set_ylabel("Declination [deg]")
    ax.set_title(f"Star field: {len(field)} stars")
    plt.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def star_field_pipeline(
    config: StarFieldConfig,
    constellations: Sequence[Constellation] = (),
) -> StarField:
    """
    Load a catalog, then export CSV and chart. Results saved in config.out_dir.

    Args:
        config (StarFieldConfig): Input path, size range and output directory.
        constellations (Sequence[Constellation]): Constellations to overlay on the chart.

    Returns:
        StarField: The loaded field.
    """
    out_path = config.out_dir
    out_path.mkdir(parents=True, exist_ok=True)

    print(f"[INFO] Input catalog: {config.catalog_path}")

    field = StarField.from_catalog(config.catalog_path)

    print(f"[INFO] Stars loaded: {len(field)}")

    name = config.catalog_path.stem
    csv_path = out_path / f"{name}_stars.csv"
    img_path = out_path / f"{name}_star_chart.png"

    save_csv(field, csv_path, config.size_min, config.size_max)
    draw_star_chart(field, img_path, config.size_min, config.size_max, constellations)

    scaled = field.scaled_positions(config.field_scale)
    if len(scaled):
        radius = float(np.linalg.norm(scaled, axis=1).max())
        print(f"[INFO] Field radius at scale {config.field_scale:g}: {radius:.1f}")

    print(f"[INFO] Saved results to: {out_path}")
    print(f"         CSV: {csv_path.name}")
    print(f"         Image: {img_path.name}")

    return field


def _constellation_key(value: str):
    return int(value) if value.isdigit() else value


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Starry sky: BSC5 catalog to coloured, sized star field")
    ap.add_argument("--catalog", type=Path, default=Path("data") / "BSC5", help="Path to the binary BSC5 catalog.")
    ap.add_argument("--out-dir", type=Path, default=Path("out"), help="Output directory for CSV and chart.")
    ap.add_argument("--size-min", type=float, default=0.0, help="Display size of the faintest stars.")
    ap.add_argument("--size-max", type=float, default=5.0, help="Display size of the brightest stars.")
    ap.add_argument("--scale", type=float, default=400.0, help="Radius of the star sphere.")
    ap.add_argument(
        "--constellation",
        action="append",
        default=[],
        help="Constellation name or 0-based index to overlay. Repeatable.",
    )
    args = ap.parse_args(argv)

    try:
        config = StarFieldConfig(
            catalog_path=args.catalog,
            size_min=args.size_min,
            size_max=args.size_max,
            field_scale=args.scale,
            out_dir=args.out_dir,
        )
        constellations = [get_constellation(_constellation_key(c)) for c in args.constellation]
    except (StarrySkyError, KeyError, IndexError) as e:
        raise SystemExit(f"Invalid arguments: {e}")

    try:
        star_field_pipeline(config, constellations)
    except MalformedCatalogError as e:
        raise SystemExit(f"Cannot read catalog {config.catalog_path}: {e}")
    except StarLookupError as e:
        raise SystemExit(f"Constellation not covered by catalog: {e}")
    except FileNotFoundError:
        raise SystemExit(f"Catalog not found: {config.catalog_path}")
    except OSError as e:
        raise SystemExit(f"Cannot open catalog {config.catalog_path}: {e}")


if __name__ == "__main__":
    main()

"""
starry_sky/config.py - Configuration settings for loading and exporting a star field.
"""
from pathlib import Path
from dataclasses import dataclass, field

from starry_sky.exceptions import ConfigurationError


SIZE_LIMIT = 100.0


@dataclass
class StarFieldConfig:
    """Star field configuration parameters."""
    # Input
    catalog_path: Path = field(default_factory=lambda: Path("data") / "BSC5")

    # Display size range, star.size in [0, 1] is mapped onto it
    size_min: float = 0.0
    size_max: float = 5.0

    # Radius of the sphere stars are placed on
    field_scale: float = 400.0

    # Output
    out_dir: Path = field(default_factory=lambda: Path("out"))

    def __post_init__(self):
        """Validate star field configuration."""
        self.catalog_path = Path(self.catalog_path)
        self.out_dir = Path(self.out_dir)

        for name in ("size_min", "size_max"):
            value = getattr(self, name)
            if value < 0 or value > SIZE_LIMIT:
                raise ConfigurationError(f"{name} must be between 0 and {SIZE_LIMIT:g}")

        if self.size_min > self.size_max:
            raise ConfigurationError("size_min cannot be greater than size_max")

        if self.field_scale <= 0:
            raise ConfigurationError("field_scale must be positive")

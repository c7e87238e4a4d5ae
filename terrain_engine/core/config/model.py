# ========================
# file: terrain_engine/core/config/model.py
# ========================
from __future__ import annotations
import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable parameters of one terrain build.

    Build through `load_config` so values are validated; the dataclass
    itself does no checking.
    """

    # Sizing
    grid_extent: int
    tile_size: float
    samples_per_tile: int

    # Variation
    octaves: int
    persistence: float
    lacunarity: float
    height_multiplier: float

    # Config
    islands: bool = False
    seed: Optional[int] = None
    noise_scale: float = 1.0
    water_floor: float = 0.45
    normalization: str = "running"
    wireframe: bool = False

    def __post_init__(self) -> None:
        # Canonical types, so equal configs serialize to equal fingerprints
        # (32 and 32.0 must not differ).
        for name in ("grid_extent", "samples_per_tile", "octaves"):
            object.__setattr__(self, name, int(getattr(self, name)))
        for name in ("tile_size", "persistence", "lacunarity", "height_multiplier",
                     "noise_scale", "water_floor"):
            object.__setattr__(self, name, float(getattr(self, name)))
        for name in ("islands", "wireframe"):
            object.__setattr__(self, name, bool(getattr(self, name)))
        if self.seed is not None:
            object.__setattr__(self, "seed", int(self.seed))
        object.__setattr__(self, "normalization", str(self.normalization))

    @property
    def terrain_width(self) -> float:
        return self.grid_extent * self.tile_size

    @property
    def cell_spacing(self) -> float:
        # First and last samples sit on the tile borders, so neighbouring
        # tiles share their edge coordinates.
        if self.samples_per_tile <= 1:
            return float(self.tile_size)
        return self.tile_size / (self.samples_per_tile - 1)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    def fingerprint(self) -> str:
        """Canonical serialization used to detect when a rebuild is required."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))

    @classmethod
    def from_fingerprint(cls, text: str) -> "GenerationConfig":
        from .loader import load_config

        return load_config(json.loads(text))

    def replace(self, **changes: Any) -> "GenerationConfig":
        from .loader import load_config

        return load_config(self, overrides=changes)

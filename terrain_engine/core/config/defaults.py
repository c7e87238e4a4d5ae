# ========================
# file: terrain_engine/core/config/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

# 3x3 tiles of 256 units, 32 samples per edge.
DEFAULT_CONFIG: Dict[str, Any] = {
    "grid_extent": 3,
    "tile_size": 256.0,
    "samples_per_tile": 32,
    "octaves": 8,
    "persistence": 0.5,
    "lacunarity": 2.0,
    "height_multiplier": 50.0,
    "islands": False,
    "seed": None,
    "noise_scale": 1.0,
    "water_floor": 0.45,
    "normalization": "running",
    "wireframe": False,
}

NORMALIZATION_MODES = ("running", "global")

# ==============================================================================
# File: terrain_engine/core/constants.py
# Purpose: Material bands of the height field (ids, thresholds, palette).
# ==============================================================================
from __future__ import annotations
from typing import Dict, Tuple

# =======================================================================
# MATERIAL BANDS
# =======================================================================

BAND_WATER = "water"
BAND_SAND = "sand"
BAND_GRASS = "grass"
BAND_ROCK = "rock"
BAND_SNOW = "snow"

# Ordered from the lowest band to the highest.
BAND_KINDS: Tuple[str, ...] = (BAND_WATER, BAND_SAND, BAND_GRASS, BAND_ROCK, BAND_SNOW)

BAND_KIND_TO_ID: Dict[str, int] = {kind: i for i, kind in enumerate(BAND_KINDS)}
BAND_ID_TO_KIND: Dict[int, str] = {v: k for k, v in BAND_KIND_TO_ID.items()}

# Upper (exclusive) bound of every band except the last one.
# height < 0.45 -> water, < 0.5 -> sand, < 0.7 -> grass, < 0.9 -> rock, else snow
BAND_THRESHOLDS: Tuple[float, ...] = (0.45, 0.5, 0.7, 0.9)

# Normalized height that submerged samples are lifted to.
WATER_LEVEL_FLOOR = 0.45

BAND_PALETTE: Dict[str, str] = {
    BAND_WATER: "#4169E1",
    BAND_SAND: "#EEE8AA",
    BAND_GRASS: "#2E8B57",
    BAND_ROCK: "#696969",
    BAND_SNOW: "#FFFAFA",
}

# =======================================================================
# FALLOFF (island mask) curve shape
# =======================================================================

FALLOFF_A = 3.0
FALLOFF_B = 2.2


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """'#RRGGBB' (or '#AARRGGBB') -> (r, g, b)."""
    s = color.lstrip("#")
    if len(s) == 8:
        s = s[2:]
    return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)

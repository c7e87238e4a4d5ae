# ==============================================================================
# File: terrain_engine/algorithms/surfaces.py
# Purpose: Material band classification of normalized heights.
# ==============================================================================
from __future__ import annotations
from typing import Tuple

import numpy as np

from ..core import constants as const


def classify(height: float, water_floor: float = const.WATER_LEVEL_FLOOR) -> Tuple[str, float]:
    """
    Maps a normalized height to (band, clamped height).

    Bands are closed on their lower edge: 0.45 is sand, not water.
    Water samples are lifted to `water_floor`.
    """
    for kind, upper in zip(const.BAND_KINDS, const.BAND_THRESHOLDS):
        if height < upper:
            if kind == const.BAND_WATER:
                return kind, float(water_floor)
            return kind, float(height)
    return const.BAND_SNOW, float(height)


def classify_grid(
    heights: np.ndarray, water_floor: float = const.WATER_LEVEL_FLOOR
) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorized `classify`: (band id grid as uint8, clamped heights)."""
    h = np.asarray(heights, dtype=np.float64)
    ids = np.searchsorted(np.asarray(const.BAND_THRESHOLDS), h, side="right").astype(np.uint8)
    water = ids == const.BAND_KIND_TO_ID[const.BAND_WATER]
    clamped = np.where(water, float(water_floor), h)
    return ids, clamped


def elevation(clamped_height, height_multiplier: float):
    """World-space elevation handed to the mesh builder."""
    return clamped_height * height_multiplier


def band_color(band: str) -> Tuple[int, int, int]:
    return const.hex_to_rgb(const.BAND_PALETTE[band])


def band_histogram(heights: np.ndarray) -> dict:
    """Sample count per band name."""
    ids, _ = classify_grid(heights)
    counts = np.bincount(ids.ravel(), minlength=len(const.BAND_KINDS))
    return {const.BAND_ID_TO_KIND[i]: int(c) for i, c in enumerate(counts)}

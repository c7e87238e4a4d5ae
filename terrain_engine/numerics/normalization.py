# ======================================================================
# File: terrain_engine/numerics/normalization.py
# Purpose: Rescaling of raw fractal heights into [0..1].
# ======================================================================
from __future__ import annotations
import numpy as np
from numba import njit, prange


def inverse_lerp(lo: float, hi: float, value: float) -> float:
    """
    Position of `value` inside [lo, hi], clamped to [0, 1].
    A zero-width (or not yet initialised) range yields 0.
    """
    den = hi - lo
    if not den > 0.0:
        return 0.0
    value = max(lo, min(hi, value))
    return (value - lo) / den


@njit(cache=True, fastmath=True, parallel=True)
def _minmax_inplace(a: np.ndarray, lo: float, hi: float) -> None:
    den = hi - lo
    # A zero-width range maps everything to 0.
    inv = 1.0 / den if den > 0.0 else 0.0
    H, W = a.shape
    for j in prange(H):
        for i in range(W):
            v = (a[j, i] - lo) * inv
            if v < 0.0:
                v = 0.0
            elif v > 1.0:
                v = 1.0
            a[j, i] = v


def normalize_minmax(arr: np.ndarray, lo: float, hi: float) -> np.ndarray:
    """Returns a float64 copy of `arr` mapped from [lo, hi] to [0, 1]."""
    a = np.array(arr, dtype=np.float64, copy=True)
    if a.ndim != 2:
        raise ValueError(f"expected a 2D grid, got shape {a.shape}")
    _minmax_inplace(a, float(lo), float(hi))
    return a

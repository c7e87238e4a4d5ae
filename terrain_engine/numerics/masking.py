# ==============================================================================
# File: terrain_engine/numerics/masking.py
# Purpose: Island falloff mask (square silhouette, 0 at the centre, 1 at edges).
# ==============================================================================
from __future__ import annotations
import numpy as np
from numba import njit, prange

from ..core.constants import FALLOFF_A, FALLOFF_B


@njit(cache=True, fastmath=True)
def falloff_curve(d: float, a: float, b: float) -> float:
    """d^a / (d^a + (b - b*d)^a). Increases from 0 at d=0 to 1 at d=1."""
    da = d ** a
    return da / (da + (b - b * d) ** a)


@njit(cache=True, fastmath=True, parallel=True)
def _falloff_kernel(out: np.ndarray, a: float, b: float) -> None:
    n = out.shape[0]
    last = n - 1
    for i in prange(n):
        # Map the cell index to [-1, 1] with an integer numerator, so mirrored
        # cells get exactly opposite coordinates; a 1x1 grid is its own centre.
        y = (2 * i - last) / last if n > 1 else 0.0
        for j in range(n):
            x = (2 * j - last) / last if n > 1 else 0.0
            d = max(abs(x), abs(y))
            out[i, j] = falloff_curve(d, a, b)


def generate_falloff_map(size: int, a: float = FALLOFF_A, b: float = FALLOFF_B) -> np.ndarray:
    """
    Builds a size x size attenuation grid in [0,1] from the Chebyshev distance
    to the centre. Subtracted from heights in island mode.
    """
    if size < 1:
        raise ValueError(f"falloff size must be >= 1, got {size}")
    out = np.empty((size, size), dtype=np.float64)
    _falloff_kernel(out, float(a), float(b))
    out.flags.writeable = False
    return out


class FalloffMask:
    """Precomputed falloff grid for one tile resolution."""

    def __init__(self, size: int, a: float = FALLOFF_A, b: float = FALLOFF_B):
        self.size = int(size)
        self.values = generate_falloff_map(self.size, a, b)

    def apply(self, heights: np.ndarray) -> np.ndarray:
        """Subtract the mask from a tile grid, keeping the result in [0,1]."""
        if heights.shape != self.values.shape:
            raise ValueError(
                f"falloff grid {self.values.shape} does not match heights {heights.shape}"
            )
        return np.clip(heights - self.values, 0.0, 1.0)

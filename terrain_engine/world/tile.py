# ==============================================================================
# File: terrain_engine/world/tile.py
# Purpose: One square patch of the terrain and the sampling of its grid.
# ==============================================================================
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from ..core.config import GenerationConfig
from ..numerics.height_sampler import HeightSampler
from ..numerics.masking import FalloffMask

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Tile:
    """
    Grid of normalized heights for tile (row, col).

    heights[i, j] is the sample at world
    x = col * tile_size + j * cell_spacing, z = row * tile_size + i * cell_spacing.
    The array is read-only.
    """

    row: int
    col: int
    tile_size: float
    cell_spacing: float
    heights: np.ndarray

    @property
    def coords(self) -> Tuple[int, int]:
        return self.row, self.col

    @property
    def offset(self) -> Tuple[float, float]:
        """World offset as (z, x) = (row * tile_size, col * tile_size)."""
        return self.row * self.tile_size, self.col * self.tile_size

    @property
    def resolution(self) -> int:
        return int(self.heights.shape[0])

    def world_coords(self, i: int, j: int) -> Tuple[float, float]:
        """World (x, z) of local cell (i, j)."""
        oz, ox = self.offset
        return ox + j * self.cell_spacing, oz + i * self.cell_spacing


def sample_grid(
    coords: Tuple[int, int],
    config: GenerationConfig,
    sample: Callable[[float, float], float],
) -> np.ndarray:
    """Evaluate `sample(world_x, world_z)` over the tile grid in row-major order."""
    row, col = coords
    n = config.samples_per_tile
    spacing = config.cell_spacing
    oz = row * config.tile_size
    ox = col * config.tile_size

    grid = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        wz = oz + i * spacing
        for j in range(n):
            grid[i, j] = sample(ox + j * spacing, wz)
    return grid


def make_tile(
    coords: Tuple[int, int],
    config: GenerationConfig,
    heights: np.ndarray,
    falloff: Optional[FalloffMask] = None,
) -> Tile:
    """Wrap an already normalized grid, applying the island mask if given."""
    if falloff is not None:
        heights = falloff.apply(heights)
    heights = np.array(heights, dtype=np.float64, copy=True)
    heights.flags.writeable = False
    row, col = coords
    return Tile(
        row=int(row),
        col=int(col),
        tile_size=float(config.tile_size),
        cell_spacing=float(config.cell_spacing),
        heights=heights,
    )


def build_tile(
    coords: Tuple[int, int],
    config: GenerationConfig,
    sampler: HeightSampler,
    falloff: Optional[FalloffMask] = None,
) -> Tile:
    """
    Samples one tile through the shared sampler. Normalization happens inside
    the sampler; the falloff (island mode) is subtracted afterwards.
    """
    if falloff is not None and falloff.size != config.samples_per_tile:
        raise ValueError(
            f"falloff size {falloff.size} != samples_per_tile {config.samples_per_tile}"
        )
    grid = sample_grid(coords, config, sampler.height_at)
    tile = make_tile(coords, config, grid, falloff)
    logger.debug(
        "Tile %s built, range so far [%.4f, %.4f]",
        coords, sampler.observed_min, sampler.observed_max,
    )
    return tile

# ==============================================================================
# File: terrain_engine/world/terrain_field.py
# Purpose: The whole terrain: gridExtent x gridExtent tiles built in row-major
#          order through one shared noise source and height sampler.
# ==============================================================================
from __future__ import annotations
import logging
import time
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from ..core.config import GenerationConfig
from ..numerics.height_sampler import HeightSampler
from ..numerics.masking import FalloffMask
from ..numerics.noise_source import NoiseSource
from ..numerics.normalization import normalize_minmax
from .tile import Tile, build_tile, make_tile, sample_grid

logger = logging.getLogger(__name__)


class TerrainField:
    """
    Owns the tiles and the sampler of one build.

    A field is either built (tiles present, fingerprint set) or empty after
    `teardown()`. There is no incremental update: any config change means a
    new field.
    """

    def __init__(self) -> None:
        self.config: Optional[GenerationConfig] = None
        self.seed: Optional[int] = None
        self.noise: Optional[NoiseSource] = None
        self.sampler: Optional[HeightSampler] = None
        self.falloff: Optional[FalloffMask] = None
        self.tiles: List[Tile] = []
        self._index: Dict[Tuple[int, int], Tile] = {}

    # --- construction ---

    @classmethod
    def build(cls, config: GenerationConfig, seed: Optional[int] = None) -> "TerrainField":
        """
        Build a terrain for `config`.

        The noise seed is `config.seed`, else `seed`, else random.
        """
        field = cls()
        field._create(config, seed)
        return field

    def _create(self, config: GenerationConfig, seed: Optional[int]) -> None:
        t_start = time.perf_counter()
        resolved = config.seed if config.seed is not None else seed

        noise = NoiseSource(resolved)
        sampler = HeightSampler.from_config(noise, config)
        falloff = FalloffMask(config.samples_per_tile) if config.islands else None

        extent = config.grid_extent
        order = [(row, col) for row in range(extent) for col in range(extent)]

        if config.normalization == "global":
            tiles = self._create_global(config, sampler, falloff, order)
        else:
            tiles = [build_tile(rc, config, sampler, falloff) for rc in order]

        # Publish only once every tile succeeded.
        self.config = config
        self.seed = noise.current_seed
        self.noise = noise
        self.sampler = sampler
        self.falloff = falloff
        self.tiles = tiles
        self._index = {t.coords: t for t in tiles}

        logger.info(
            "Terrain %dx%d (%d samples/tile, seed %d, %s) built in %.1f ms.",
            extent, extent, config.samples_per_tile, self.seed,
            config.normalization, (time.perf_counter() - t_start) * 1000,
        )
        logger.debug("Observed raw range [%.5f, %.5f]", *sampler.observed_range)

    @staticmethod
    def _create_global(
        config: GenerationConfig,
        sampler: HeightSampler,
        falloff: Optional[FalloffMask],
        order: List[Tuple[int, int]],
    ) -> List[Tile]:
        # Pass 1: raw sums, recording the full range.
        raw: List[np.ndarray] = []
        for rc in order:
            grid = sample_grid(rc, config, sampler.raw_height)
            sampler.observe_grid(grid)
            raw.append(grid)

        # Pass 2: one range for every tile.
        lo, hi = sampler.observed_range
        return [
            make_tile(rc, config, normalize_minmax(grid, lo, hi), falloff)
            for rc, grid in zip(order, raw)
        ]

    # --- lifecycle ---

    def teardown(self) -> None:
        """Release every tile and the sampler. Safe on an empty field."""
        if self.tiles:
            logger.debug("Tearing down %d tiles", len(self.tiles))
        self.tiles = []
        self._index = {}
        self.sampler = None
        self.noise = None
        self.falloff = None
        self.config = None
        self.seed = None

    def fingerprint(self) -> Optional[str]:
        """Serialized config of the current structure, None when empty."""
        return self.config.fingerprint() if self.config is not None else None

    @property
    def is_empty(self) -> bool:
        return not self.tiles

    # --- access ---

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def tile(self, row: int, col: int) -> Tile:
        try:
            return self._index[(row, col)]
        except KeyError:
            raise KeyError(f"No tile at ({row}, {col})") from None

    def height_grids(self) -> Dict[Tuple[int, int], np.ndarray]:
        return {t.coords: t.heights for t in self.tiles}

    def stitched_heights(self) -> np.ndarray:
        """
        All tiles as one array. Border rows/columns shared by neighbouring
        tiles appear once (the value of the tile built first is kept).
        """
        if self.is_empty:
            return np.zeros((0, 0), dtype=np.float64)
        n = self.config.samples_per_tile
        extent = self.config.grid_extent
        step = n - 1 if n > 1 else 1
        size = step * extent + (1 if n > 1 else 0)
        out = np.zeros((size, size), dtype=np.float64)
        # Reverse build order so earlier tiles overwrite shared borders.
        for t in reversed(self.tiles):
            r0, c0 = t.row * step, t.col * step
            out[r0:r0 + n, c0:c0 + n] = t.heights
        return out


def generate_height_grids(
    config: GenerationConfig, seed: Optional[int] = None
) -> Tuple[Dict[Tuple[int, int], np.ndarray], str]:
    """One-shot build: per-tile height grids plus the config fingerprint."""
    field = TerrainField.build(config, seed=seed)
    return field.height_grids(), field.fingerprint()

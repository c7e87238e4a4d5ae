# ==============================================================================
# File: terrain_engine/numerics/noise_source.py
# Purpose: Seeded continuous 2D simplex noise (one independent field per seed).
# ==============================================================================
from __future__ import annotations
import logging
import random
from typing import Optional

from opensimplex import OpenSimplex

logger = logging.getLogger(__name__)

# Random seeds are drawn from [0, MAX_RANDOM_SEED).
MAX_RANDOM_SEED = 100000


def random_seed() -> int:
    return random.randrange(MAX_RANDOM_SEED)


class NoiseSource:
    """
    Deterministic 2D noise for a fixed seed.

    `sample` returns raw simplex values in [-1, 1], `sample01` the same
    value remapped to [0, 1]. Re-seeding replaces the generator outright,
    nothing of the previous field survives.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = 0
        self._gen: OpenSimplex | None = None
        self.seed(seed)

    @property
    def current_seed(self) -> int:
        return self._seed

    def seed(self, value: Optional[int] = None) -> int:
        """Select a new seed (random when None) and reset the noise state."""
        self._seed = random_seed() if value is None else int(value)
        self._gen = OpenSimplex(seed=self._seed)
        logger.debug("Noise seeded with %d", self._seed)
        return self._seed

    def sample(self, x: float, z: float) -> float:
        return float(self._gen.noise2(x, z))

    def sample01(self, x: float, z: float) -> float:
        return (self.sample(x, z) + 1.0) / 2.0

# ==============================================================================
# File: terrain_engine/world/driver.py
# Purpose: Keeps the live terrain in sync with a desired config (full
#          teardown + rebuild whenever the fingerprint changes).
# ==============================================================================
from __future__ import annotations
import logging
from typing import Callable, Optional

from ..core.config import GenerationConfig
from ..numerics.noise_source import random_seed
from .terrain_field import TerrainField

logger = logging.getLogger(__name__)


class TerrainDriver:
    """
    Polled once per frame/step by the owner of the render loop.

    Configs without an explicit seed keep the driver's current seed across
    rebuilds; `reseed()` draws a new one.
    """

    def __init__(
        self,
        on_rebuild: Optional[Callable[[TerrainField], None]] = None,
        seed: Optional[int] = None,
    ):
        self.field = TerrainField()
        self.on_rebuild = on_rebuild
        self.seed = seed if seed is not None else random_seed()
        self.rebuilds = 0

    def needs_rebuild(self, desired: GenerationConfig) -> bool:
        return self.field.fingerprint() != desired.fingerprint()

    def tick(self, desired: GenerationConfig) -> bool:
        """Rebuild when `desired` differs from the applied config. True if rebuilt."""
        if not self.needs_rebuild(desired):
            return False
        logger.info("Config changed, rebuilding terrain.")
        self._rebuild(desired)
        return True

    def reseed(self, desired: Optional[GenerationConfig] = None, seed: Optional[int] = None) -> None:
        """Force a rebuild with a new seed (random when not given)."""
        config = desired if desired is not None else self.field.config
        if config is None:
            raise ValueError("reseed() needs a config before the first build")
        self.seed = seed if seed is not None else random_seed()
        logger.info("Reseeding terrain with %d.", self.seed)
        self._rebuild(config)

    def _rebuild(self, config: GenerationConfig) -> None:
        # The old field stays live until the new one is complete.
        try:
            new_field = TerrainField.build(config, seed=self.seed)
        except Exception:
            logger.exception("Terrain build failed, keeping previous terrain.")
            raise
        self.field.teardown()
        self.field = new_field
        self.rebuilds += 1
        if self.on_rebuild is not None:
            self.on_rebuild(new_field)

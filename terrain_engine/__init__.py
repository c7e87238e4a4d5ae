"""
Procedural height-field engine: seeded simplex fBm sampled over a grid of
tiles, running min/max normalization, optional island falloff and material
band classification.
"""

from .core.config import (
    GenerationConfig,
    load_config,
    TerrainError,
    ConfigurationError,
    NotFoundError,
)
from .numerics import NoiseSource, FalloffMask, HeightSampler
from .world import Tile, TerrainField, TerrainDriver, generate_height_grids
from .algorithms import classify, classify_grid, elevation

__all__ = [
    "GenerationConfig",
    "load_config",
    "TerrainError",
    "ConfigurationError",
    "NotFoundError",
    "NoiseSource",
    "FalloffMask",
    "HeightSampler",
    "Tile",
    "TerrainField",
    "TerrainDriver",
    "generate_height_grids",
    "classify",
    "classify_grid",
    "elevation",
]

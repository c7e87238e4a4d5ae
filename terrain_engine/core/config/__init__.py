# ========================
# file: terrain_engine/core/config/__init__.py
# ========================
from .errors import TerrainError, ConfigurationError, NotFoundError
from .model import GenerationConfig
from .loader import load_config, deep_merge
from .defaults import DEFAULT_CONFIG
from .registry import available_presets

__all__ = [
    "TerrainError",
    "ConfigurationError",
    "NotFoundError",
    "GenerationConfig",
    "load_config",
    "deep_merge",
    "DEFAULT_CONFIG",
    "available_presets",
]

# ========================
# file: terrain_engine/core/config/errors.py
# ========================
class TerrainError(Exception):
    """Base error for the terrain engine."""


class ConfigurationError(TerrainError):
    """Raised when a generation config fails validation."""


class NotFoundError(TerrainError):
    """Raised when a preset id or path cannot be resolved."""

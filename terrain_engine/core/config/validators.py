# ========================
# file: terrain_engine/core/config/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Dict
from .defaults import DEFAULT_CONFIG, NORMALIZATION_MODES
from .errors import ConfigurationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigurationError(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_number(v: Any) -> bool:
    return (
        isinstance(v, (int, float))
        and not isinstance(v, bool)
        and math.isfinite(float(v))
    )


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validate a fully merged config dict.

    Raises ConfigurationError on the first failing check.
    """
    unknown = sorted(set(cfg) - set(DEFAULT_CONFIG))
    _require(not unknown, f"Unknown config keys: {', '.join(unknown)}")

    # Sizing
    for key in ("grid_extent", "samples_per_tile", "octaves"):
        v = cfg.get(key)
        _require(_is_int(v), f"{key} must be an integer")
        _require(v >= 1, f"{key} must be >= 1")

    _require(_is_number(cfg.get("tile_size")), "tile_size must be a finite number")
    _require(float(cfg["tile_size"]) > 0.0, "tile_size must be > 0")

    # Variation
    for key in ("persistence", "lacunarity", "noise_scale"):
        v = cfg.get(key)
        _require(_is_number(v), f"{key} must be a finite number")
        _require(float(v) > 0.0, f"{key} must be > 0")

    v = cfg.get("height_multiplier")
    _require(_is_number(v), "height_multiplier must be a finite number")
    _require(float(v) >= 0.0, "height_multiplier must be >= 0")

    v = cfg.get("water_floor")
    _require(_is_number(v), "water_floor must be a finite number")
    _require(0.0 <= float(v) <= 1.0, "water_floor must be in [0,1]")

    # Flags
    for key in ("islands", "wireframe"):
        _require(isinstance(cfg.get(key), bool), f"{key} must be a bool")

    _require(
        cfg.get("normalization") in NORMALIZATION_MODES,
        f"normalization must be one of {', '.join(NORMALIZATION_MODES)}",
    )

    seed = cfg.get("seed")
    if seed is not None:
        _require(_is_int(seed), "seed must be an integer or null")
        _require(seed >= 0, "seed must be >= 0")

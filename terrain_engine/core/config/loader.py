# ========================
# file: terrain_engine/core/config/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
from typing import Any, Dict, Union, Mapping

from .defaults import DEFAULT_CONFIG
from .errors import ConfigurationError
from .model import GenerationConfig
from .registry import resolve_preset_path
from .validators import validate_dict


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data


def load_config(
    source: Union[str, Dict[str, Any], GenerationConfig, None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> GenerationConfig:
    """Load a config from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g., 'islands'), file path to JSON, raw dict,
            an existing GenerationConfig, or None for the defaults
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        GenerationConfig (immutable dataclass) ready for use
    Raises:
        ConfigurationError: if the merged values are invalid
        NotFoundError: if a preset id cannot be resolved
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, GenerationConfig):
        data = source.to_dict()
    elif isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            data = _load_json_file(resolve_preset_path(source))
    elif isinstance(source, Mapping):
        data = dict(source)
    else:
        raise TypeError("source must be str path/id, dict or GenerationConfig")

    merged = deep_merge(DEFAULT_CONFIG, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    return GenerationConfig(
        grid_extent=int(merged["grid_extent"]),
        tile_size=float(merged["tile_size"]),
        samples_per_tile=int(merged["samples_per_tile"]),
        octaves=int(merged["octaves"]),
        persistence=float(merged["persistence"]),
        lacunarity=float(merged["lacunarity"]),
        height_multiplier=float(merged["height_multiplier"]),
        islands=bool(merged["islands"]),
        seed=merged["seed"],
        noise_scale=float(merged["noise_scale"]),
        water_floor=float(merged["water_floor"]),
        normalization=str(merged["normalization"]),
        wireframe=bool(merged["wireframe"]),
    )

# ==============================================================================
# File: terrain_engine/core/export/numpy_exporters.py
# Purpose: Save/load per-tile height grids (NPZ) with the build fingerprint.
# ==============================================================================
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _tile_key(row: int, col: int) -> str:
    return f"tile_{row}_{col}"


def write_height_grids_npz(path: str, field) -> None:
    """Write every tile grid plus `fingerprint` and `seed` to one NPZ file."""
    if field.is_empty:
        raise ValueError("cannot export an empty terrain")
    _ensure_path_exists(path)

    arrays: Dict[str, Any] = {
        _tile_key(t.row, t.col): np.asarray(t.heights) for t in field.tiles
    }
    arrays["fingerprint"] = np.array(field.fingerprint())
    arrays["seed"] = np.array(field.seed, dtype=np.int64)

    # np.savez appends .npz to names without it, so the temp name keeps the suffix.
    tmp_path = path + ".tmp.npz"
    np.savez_compressed(tmp_path, **arrays)
    os.replace(tmp_path, path)
    logger.info("Height grids saved: %s (%d tiles)", path, len(field.tiles))


def read_height_grids_npz(path: str) -> Dict[str, Any]:
    """
    Returns {"fingerprint": str, "seed": int, "tiles": {(row, col): ndarray}}.
    """
    tiles: Dict[Tuple[int, int], np.ndarray] = {}
    with np.load(path, allow_pickle=False) as data:
        fingerprint = str(data["fingerprint"].item())
        seed = int(data["seed"].item())
        for key in data.files:
            if not key.startswith("tile_"):
                continue
            _, row, col = key.split("_")
            tiles[(int(row), int(col))] = data[key]
    return {"fingerprint": fingerprint, "seed": seed, "tiles": tiles}

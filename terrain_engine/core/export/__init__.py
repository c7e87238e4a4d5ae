# ==============================================================================
# File: terrain_engine/core/export/__init__.py
# Purpose: Entry point of the export package.
# ==============================================================================
from __future__ import annotations

from .image_exporters import render_band_image, write_terrain_preview
from .numpy_exporters import read_height_grids_npz, write_height_grids_npz

__all__ = [
    "render_band_image",
    "write_terrain_preview",
    "read_height_grids_npz",
    "write_height_grids_npz",
]

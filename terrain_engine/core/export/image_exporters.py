# ==============================================================================
# File: terrain_engine/core/export/image_exporters.py
# Purpose: PNG previews of a built terrain, coloured by material band.
# ==============================================================================
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Dict, Optional

import numpy as np
from PIL import Image

from ..constants import BAND_ID_TO_KIND, BAND_PALETTE, hex_to_rgb
from ...algorithms.surfaces import classify_grid

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def render_band_image(
    heights: np.ndarray,
    palette: Optional[Dict[str, str]] = None,
    water_floor: float = 0.45,
    shade: bool = False,
) -> Image.Image:
    """Band colours per sample; `shade` darkens lower samples for relief."""
    colors = dict(BAND_PALETTE)
    if palette:
        colors.update(palette)

    ids, clamped = classify_grid(heights, water_floor)
    lut = np.zeros((len(BAND_ID_TO_KIND), 3), dtype=np.float64)
    for band_id, kind in BAND_ID_TO_KIND.items():
        lut[band_id] = hex_to_rgb(colors[kind])

    rgb = lut[ids]
    if shade:
        rgb = rgb * (0.55 + 0.45 * clamped)[..., None]
    return Image.fromarray(np.clip(rgb, 0, 255).astype(np.uint8))


def write_terrain_preview(
    path: str,
    field,
    palette: Optional[Dict[str, str]] = None,
    shade: bool = True,
    scale: int = 1,
) -> None:
    """Stitches the field's tiles and saves a band-coloured PNG."""
    if field.is_empty:
        raise ValueError("cannot preview an empty terrain")
    img = render_band_image(
        field.stitched_heights(), palette, field.config.water_floor, shade
    )
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    img.save(tmp_path, format="PNG")
    os.replace(tmp_path, path)
    logger.info("Preview saved: %s (%dx%d)", path, img.width, img.height)

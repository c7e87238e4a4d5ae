# file: run_terrain.py
from __future__ import annotations
import argparse
import logging
import sys

from terrain_engine.core.config import load_config, TerrainError
from terrain_engine.core.export import write_height_grids_npz, write_terrain_preview
from terrain_engine.algorithms.surfaces import band_histogram
from terrain_engine.world import TerrainField

logger = logging.getLogger("run_terrain")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a tiled terrain height field")
    parser.add_argument("--preset", default="default", help="Preset id or JSON path")
    parser.add_argument("--seed", type=int, help="Noise seed (random if omitted)")
    parser.add_argument("--grid-extent", type=int)
    parser.add_argument("--tile-size", type=float)
    parser.add_argument("--samples", type=int, dest="samples_per_tile")
    parser.add_argument("--octaves", type=int)
    parser.add_argument("--persistence", type=float)
    parser.add_argument("--lacunarity", type=float)
    parser.add_argument("--noise-scale", type=float)
    parser.add_argument("--islands", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--normalization", choices=["running", "global"])
    parser.add_argument("--preview", help="Write a PNG preview to this path")
    parser.add_argument("--npz", help="Write per-tile height grids to this NPZ path")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="  -> [%(levelname)s] %(message)s",
    )

    keys = (
        "seed", "grid_extent", "tile_size", "samples_per_tile", "octaves",
        "persistence", "lacunarity", "noise_scale", "islands", "normalization",
    )
    overrides = {k: getattr(args, k) for k in keys if getattr(args, k) is not None}

    try:
        config = load_config(args.preset, overrides=overrides)
    except TerrainError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    field = TerrainField.build(config)
    logger.info("Fingerprint: %s", field.fingerprint())

    hist = band_histogram(field.stitched_heights())
    total = sum(hist.values()) or 1
    for band, count in hist.items():
        logger.info("%-6s %6d (%.1f%%)", band, count, 100.0 * count / total)

    if args.preview:
        write_terrain_preview(args.preview, field)
    if args.npz:
        write_height_grids_npz(args.npz, field)
    return 0


if __name__ == "__main__":
    sys.exit(main())

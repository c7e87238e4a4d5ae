# ==============================================================================
# File: tests/test_config.py
# Purpose: Loading, validation and fingerprints of GenerationConfig.
# ==============================================================================
import json
import os
import tempfile
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine.core.config import (
    ConfigurationError,
    DEFAULT_CONFIG,
    GenerationConfig,
    NotFoundError,
    available_presets,
    load_config,
)
from terrain_engine.core.config import registry
from terrain_engine.core.config.registry import add_search_folder
from terrain_engine.world.driver import TerrainDriver


class TestLoadConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = load_config()
        self.assertEqual(cfg.grid_extent, 3)
        self.assertEqual(cfg.tile_size, 256.0)
        self.assertEqual(cfg.samples_per_tile, 32)
        self.assertEqual(cfg.octaves, 8)
        self.assertIsNone(cfg.seed)
        self.assertEqual(cfg.normalization, "running")
        self.assertEqual(cfg.terrain_width, 768.0)

    def test_presets_resolve_by_id(self):
        self.assertIn("default", available_presets())
        self.assertIn("islands", available_presets())
        cfg = load_config("islands")
        self.assertTrue(cfg.islands)
        self.assertEqual(cfg.grid_extent, 1)

    def test_unknown_preset(self):
        with self.assertRaises(NotFoundError):
            load_config("no/such/preset")

    def test_extra_search_folder(self):
        folders = list(registry._DEFAULT_PRESET_FOLDERS)
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, "tiny_test_world.json"), "w", encoding="utf-8") as f:
                json.dump({"grid_extent": 1, "samples_per_tile": 4}, f)
            add_search_folder(tmp)
            self.addCleanup(registry._DEFAULT_PRESET_FOLDERS.remove, os.path.abspath(tmp))
            self.assertIn("tiny_test_world", available_presets())
            cfg = load_config("tiny_test_world")
        self.assertEqual(cfg.samples_per_tile, 4)
        self.doCleanups()
        self.assertEqual(registry._DEFAULT_PRESET_FOLDERS, folders)
        self.assertNotIn("tiny_test_world", available_presets())

    def test_json_file_and_overrides(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "cfg.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"octaves": 3, "seed": 7}, f)
            cfg = load_config(path, overrides={"seed": 9})
        self.assertEqual(cfg.octaves, 3)
        self.assertEqual(cfg.seed, 9)

    def test_replace_validates(self):
        cfg = load_config({"seed": 1})
        self.assertEqual(cfg.replace(octaves=2).octaves, 2)
        with self.assertRaises(ConfigurationError):
            cfg.replace(octaves=0)

    def test_cell_spacing_shares_tile_borders(self):
        cfg = load_config({"tile_size": 100.0, "samples_per_tile": 11})
        self.assertAlmostEqual(cfg.cell_spacing, 10.0)
        self.assertAlmostEqual((cfg.samples_per_tile - 1) * cfg.cell_spacing, cfg.tile_size)
        single = load_config({"tile_size": 100.0, "samples_per_tile": 1})
        self.assertEqual(single.cell_spacing, 100.0)


class TestValidation(unittest.TestCase):

    def assertRejected(self, **values):
        with self.assertRaises(ConfigurationError):
            load_config(values)

    def test_out_of_range_values(self):
        self.assertRejected(grid_extent=0)
        self.assertRejected(samples_per_tile=0)
        self.assertRejected(octaves=0)
        self.assertRejected(persistence=0.0)
        self.assertRejected(lacunarity=-1.0)
        self.assertRejected(tile_size=0)
        self.assertRejected(height_multiplier=-1.0)
        self.assertRejected(water_floor=1.5)
        self.assertRejected(noise_scale=0.0)
        self.assertRejected(seed=-3)

    def test_wrong_types(self):
        self.assertRejected(octaves=2.5)
        self.assertRejected(grid_extent=True)
        self.assertRejected(islands="yes")
        self.assertRejected(persistence=float("nan"))
        self.assertRejected(normalization="two-pass")

    def test_unknown_keys(self):
        self.assertRejected(persistance=0.5)

    def test_error_message_names_field(self):
        with self.assertRaises(ConfigurationError) as ctx:
            load_config({"octaves": 0})
        self.assertIn("octaves", str(ctx.exception))


class TestFingerprint(unittest.TestCase):

    def test_direct_construction_matches_loaded_config(self):
        direct = GenerationConfig(
            grid_extent=1, tile_size=32, samples_per_tile=4, octaves=2,
            persistence=1, lacunarity=2, height_multiplier=10, seed=5,
            noise_scale=1, water_floor=0,
        )
        loaded = load_config(direct.to_dict())
        self.assertEqual(direct, loaded)
        self.assertEqual(direct.fingerprint(), loaded.fingerprint())
        self.assertIsInstance(direct.tile_size, float)
        self.assertIsInstance(direct.lacunarity, float)

        driver = TerrainDriver(seed=1)
        self.assertTrue(driver.tick(loaded))
        self.assertFalse(driver.tick(direct))

    def test_round_trip(self):
        cfg = load_config({"seed": 42, "islands": True})
        again = GenerationConfig.from_fingerprint(cfg.fingerprint())
        self.assertEqual(cfg, again)
        self.assertEqual(cfg.fingerprint(), again.fingerprint())

    def test_field_order_does_not_matter(self):
        a = load_config({"octaves": 4, "seed": 3, "lacunarity": 3.0})
        b = load_config({"lacunarity": 3.0, "seed": 3, "octaves": 4})
        self.assertEqual(a.fingerprint(), b.fingerprint())

        reordered = dict(reversed(list(json.loads(a.fingerprint()).items())))
        self.assertEqual(
            GenerationConfig.from_fingerprint(json.dumps(reordered)).fingerprint(),
            a.fingerprint(),
        )

    def test_any_field_change_changes_fingerprint(self):
        base = load_config({"seed": 1})
        for key, value in (("octaves", 2), ("islands", True), ("wireframe", True),
                           ("water_floor", 0.49), ("tile_size", 64.0)):
            self.assertNotEqual(base.fingerprint(), base.replace(**{key: value}).fingerprint(), key)

    def test_fingerprint_covers_every_field(self):
        cfg = load_config()
        self.assertEqual(set(json.loads(cfg.fingerprint())), set(DEFAULT_CONFIG))


if __name__ == "__main__":
    unittest.main()

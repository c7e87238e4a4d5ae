# ==============================================================================
# File: tests/test_driver.py
# Purpose: Config-diff rebuild loop.
# ==============================================================================
import unittest
from unittest import mock

import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine.core.config import load_config
from terrain_engine.world import terrain_field
from terrain_engine.world.driver import TerrainDriver

SMALL = {"grid_extent": 1, "tile_size": 32.0, "samples_per_tile": 6, "octaves": 3}


class TestTerrainDriver(unittest.TestCase):

    def test_builds_once_per_config(self):
        rebuilt = []
        driver = TerrainDriver(on_rebuild=rebuilt.append, seed=10)
        cfg = load_config(SMALL)
        self.assertTrue(driver.tick(cfg))
        self.assertFalse(driver.tick(cfg))
        self.assertFalse(driver.tick(load_config(dict(reversed(list(SMALL.items()))))))
        self.assertEqual(driver.rebuilds, 1)
        self.assertEqual(rebuilt, [driver.field])
        self.assertEqual(driver.field.fingerprint(), cfg.fingerprint())

    def test_change_triggers_full_rebuild(self):
        driver = TerrainDriver(seed=10)
        cfg = load_config(SMALL)
        driver.tick(cfg)
        old = driver.field
        self.assertTrue(driver.tick(cfg.replace(octaves=5)))
        self.assertIsNot(driver.field, old)
        self.assertTrue(old.is_empty)
        self.assertEqual(driver.field.config.octaves, 5)

    def test_seed_kept_across_parameter_edits(self):
        driver = TerrainDriver(seed=31)
        cfg = load_config(SMALL)
        driver.tick(cfg)
        driver.tick(cfg.replace(height_multiplier=80.0))
        self.assertEqual(driver.field.seed, 31)

    def test_reseed(self):
        driver = TerrainDriver(seed=1)
        cfg = load_config(SMALL)
        driver.tick(cfg)
        before = driver.field.stitched_heights()
        driver.reseed(seed=2)
        self.assertEqual(driver.field.seed, 2)
        self.assertEqual(driver.rebuilds, 2)
        self.assertFalse(np.array_equal(before, driver.field.stitched_heights()))
        self.assertFalse(driver.tick(cfg))

    def test_reseed_without_config(self):
        with self.assertRaises(ValueError):
            TerrainDriver().reseed()

    def test_failed_build_keeps_previous_field(self):
        driver = TerrainDriver(seed=4)
        cfg = load_config(SMALL)
        driver.tick(cfg)
        live = driver.field
        with mock.patch.object(
            terrain_field.TerrainField, "_create", side_effect=RuntimeError("boom")
        ):
            with self.assertLogs("terrain_engine.world.driver", level="ERROR"):
                with self.assertRaises(RuntimeError):
                    driver.tick(cfg.replace(octaves=6))
        self.assertIs(driver.field, live)
        self.assertFalse(live.is_empty)
        self.assertEqual(driver.field.fingerprint(), cfg.fingerprint())
        self.assertEqual(driver.rebuilds, 1)


if __name__ == "__main__":
    unittest.main()

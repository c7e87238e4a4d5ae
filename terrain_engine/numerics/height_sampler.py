# ==============================================================================
# File: terrain_engine/numerics/height_sampler.py
# Purpose: Fractal (fBm) summation of noise octaves with running min/max
#          normalization shared by every tile of one build.
# ==============================================================================
from __future__ import annotations
import math

from .noise_source import NoiseSource
from .normalization import inverse_lerp


class HeightSampler:
    """
    Turns world coordinates into normalized heights.

    The observed range is updated by every `height_at` call before the
    value is normalized against it, so heights sampled early in a build see
    a narrower range than later ones. The result therefore depends on the
    order samples are taken in. One sampler belongs to exactly one build.
    """

    def __init__(
        self,
        noise: NoiseSource,
        octaves: int,
        persistence: float,
        lacunarity: float,
        terrain_width: float,
        noise_scale: float = 1.0,
    ):
        self.noise = noise
        self.octaves = int(octaves)
        self.persistence = float(persistence)
        self.lacunarity = float(lacunarity)
        self.terrain_width = float(terrain_width)
        self.noise_scale = float(noise_scale)

        self.observed_min = math.inf
        self.observed_max = -math.inf
        self.samples_taken = 0

    @classmethod
    def from_config(cls, noise: NoiseSource, config) -> "HeightSampler":
        return cls(
            noise,
            octaves=config.octaves,
            persistence=config.persistence,
            lacunarity=config.lacunarity,
            terrain_width=config.terrain_width,
            noise_scale=config.noise_scale,
        )

    def raw_height(self, world_x: float, world_z: float) -> float:
        """Fractal sum at a world coordinate. Pure: no range bookkeeping."""
        amplitude = 1.0
        frequency = 1.0
        accum = 0.0

        # Normalize by the terrain width so octave frequencies do not depend
        # on how many tiles the terrain has.
        nx = world_x / self.terrain_width * self.noise_scale
        nz = world_z / self.terrain_width * self.noise_scale

        for _ in range(self.octaves):
            value = self.noise.sample01(nx * frequency, nz * frequency)
            accum += value * amplitude
            amplitude *= self.persistence
            frequency *= self.lacunarity

        return accum

    def observe(self, value: float) -> None:
        if value < self.observed_min:
            self.observed_min = value
        if value > self.observed_max:
            self.observed_max = value
        self.samples_taken += 1

    def observe_grid(self, grid) -> None:
        """Record the range of a whole grid of raw sums at once."""
        lo, hi = float(grid.min()), float(grid.max())
        if lo < self.observed_min:
            self.observed_min = lo
        if hi > self.observed_max:
            self.observed_max = hi
        self.samples_taken += int(grid.size)

    def normalize(self, value: float) -> float:
        return inverse_lerp(self.observed_min, self.observed_max, value)

    def height_at(self, world_x: float, world_z: float) -> float:
        accum = self.raw_height(world_x, world_z)
        self.observe(accum)
        return self.normalize(accum)

    @property
    def observed_range(self) -> tuple[float, float]:
        return self.observed_min, self.observed_max

    def reset(self) -> None:
        self.observed_min = math.inf
        self.observed_max = -math.inf
        self.samples_taken = 0

from .noise_source import NoiseSource
from .masking import FalloffMask, generate_falloff_map
from .height_sampler import HeightSampler
from .normalization import inverse_lerp, normalize_minmax

__all__ = [
    "NoiseSource",
    "FalloffMask",
    "generate_falloff_map",
    "HeightSampler",
    "inverse_lerp",
    "normalize_minmax",
]

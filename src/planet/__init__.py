"""Seeded procedural planet terrain.

Gradient noise, fractal layers and height compositing that displace a
unit sphere into deterministic planetary terrain.
"""

from .config import Config, HeightmapSettings, PlanetSettings, find_config, load_config
from .exceptions import PlanetError, PlanetNotConfiguredError
from .noise import PermutationTable, build_permutation, fbm, perlin, ridged_fbm, smoothstep
from .params import NoiseParams, generate_noise_params, hash01, hash32, random_range
from .sphere import HeightmapSummary, displace_vertices, generate_heightmap, sample_sphere
from .terrain import Planet, PlanetConfig, get_final_position, get_height, init_planet

__all__ = [
    # Noise
    "PermutationTable",
    "build_permutation",
    "perlin",
    "fbm",
    "ridged_fbm",
    "smoothstep",
    # Parameters
    "NoiseParams",
    "generate_noise_params",
    "hash32",
    "hash01",
    "random_range",
    # Terrain
    "PlanetConfig",
    "Planet",
    "init_planet",
    "get_height",
    "get_final_position",
    # Sphere sampling
    "HeightmapSummary",
    "sample_sphere",
    "generate_heightmap",
    "displace_vertices",
    # Config
    "Config",
    "PlanetSettings",
    "HeightmapSettings",
    "load_config",
    "find_config",
    # Exceptions
    "PlanetError",
    "PlanetNotConfiguredError",
]

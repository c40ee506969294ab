"""Height compositing and surface mapping for a seeded planet."""

import threading
from dataclasses import dataclass

import numpy as np
import structlog
from numpy.typing import ArrayLike, NDArray

from .exceptions import PlanetNotConfiguredError
from .noise import PermutationTable, build_permutation, fbm, ridged_fbm, smoothstep
from .params import NoiseParams, generate_noise_params

logger = structlog.get_logger()

# Blend weights of the height signature
MACRO_WEIGHT = 0.65
MICRO_WEIGHT = 0.30
RIDGE_WEIGHT = 0.6
POLAR_BOOST = 0.08
SEA_LEVEL = 0.45

CONTINENT_EDGES = (0.35, 0.65)
POLAR_EDGES = (0.6, 0.95)


@dataclass(frozen=True)
class PlanetConfig:
    """Complete deterministic configuration for one terrain instance."""

    seed: int
    scale: float
    radius: float
    permutation: PermutationTable
    params: NoiseParams


def init_planet(seed: int, scale: float = 1.0, radius: float = 1.0) -> PlanetConfig:
    """Build the planet configuration for a seed.

    Args:
        seed: Terrain seed. Negative or wider ints are reduced mod 2**32.
        scale: Height multiplier applied to the composited elevation.
        radius: Base sphere radius.

    Returns:
        Immutable PlanetConfig.
    """
    seed = seed & 0xFFFFFFFF
    return PlanetConfig(
        seed=seed,
        scale=float(scale),
        radius=float(radius),
        permutation=build_permutation(seed),
        params=generate_noise_params(seed),
    )


def normalize(direction: ArrayLike) -> NDArray[np.float64]:
    """Normalize vectors along the last axis.

    Zero-length vectors map to the zero vector.
    """
    d = np.asarray(direction, dtype=np.float64)
    length = np.linalg.norm(d, axis=-1, keepdims=True)
    return np.divide(d, length, out=np.zeros_like(d), where=length > 1e-9)


def get_height(direction: ArrayLike, config: PlanetConfig) -> NDArray[np.float64]:
    """Compute signed elevation for directions on the sphere.

    Sea level is 0. Combines continent-scale fBm, detail fBm and ridged
    mountains masked to land, plus a small boost toward the poles
    (y is the polar axis).

    Args:
        direction: Direction vector(s), shape (..., 3). Need not be unit length.
        config: Planet configuration.

    Returns:
        Elevation per direction, shape (...), already multiplied by scale.
    """
    n = normalize(direction)
    x, y, z = n[..., 0], n[..., 1], n[..., 2]
    params = config.params
    perm = config.permutation

    macro = fbm(
        x * params.macro_freq,
        y * params.macro_freq,
        z * params.macro_freq,
        perm,
        octaves=params.macro_octaves,
        lacunarity=params.lacunarity,
        gain=params.gain,
    ) * params.macro_amp

    micro = fbm(
        x * params.micro_freq,
        y * params.micro_freq,
        z * params.micro_freq,
        perm,
        octaves=params.micro_octaves,
        lacunarity=params.lacunarity,
        gain=params.gain,
    ) * params.micro_amp

    ridge = ridged_fbm(
        x * params.ridge_freq,
        y * params.ridge_freq,
        z * params.ridge_freq,
        perm,
        octaves=params.ridge_octaves,
        lacunarity=params.lacunarity,
        gain=params.gain,
    ) * params.ridge_amp

    # Ridges only rise on continents
    continent_mask = smoothstep(*CONTINENT_EDGES, macro)
    polar_boost = smoothstep(*POLAR_EDGES, np.abs(y)) * POLAR_BOOST

    height = (
        macro * MACRO_WEIGHT
        + micro * MICRO_WEIGHT
        + ridge * continent_mask * RIDGE_WEIGHT
        + polar_boost
    )
    height -= SEA_LEVEL
    height *= config.scale

    return height


def get_final_position(direction: ArrayLike, config: PlanetConfig) -> NDArray[np.float64]:
    """Displace directions onto the terrain surface.

    Args:
        direction: Direction vector(s), shape (..., 3).
        config: Planet configuration.

    Returns:
        Surface points, shape (..., 3), at distance ``radius + height``.
    """
    n = normalize(direction)
    height = get_height(n, config)
    final_radius = config.radius + height
    return n * final_radius[..., np.newaxis]


class Planet:
    """Renderer-facing planet with init/height/position entry points.

    Holds the current PlanetConfig and replaces it wholesale on ``init``.
    Queries before the first ``init`` raise PlanetNotConfiguredError.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._config: PlanetConfig | None = None

    @property
    def configured(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> PlanetConfig:
        """Current configuration.

        Raises:
            PlanetNotConfiguredError: If ``init`` has not been called.
        """
        config = self._config
        if config is None:
            raise PlanetNotConfiguredError("Planet queried before init()")
        return config

    def init(self, seed: int, scale: float, radius: float) -> None:
        """Configure (or reconfigure) the planet.

        The new configuration is fully built before it is published, so
        concurrent readers see either the old or the new planet.
        """
        config = init_planet(seed, scale, radius)
        with self._lock:
            self._config = config
        logger.info("planet_configured", seed=config.seed, scale=config.scale, radius=config.radius)

    def height(self, x: float, y: float, z: float) -> np.float32:
        """Elevation at a direction as float32."""
        return np.float32(get_height((x, y, z), self.config))

    def surface_position(self, x: float, y: float, z: float) -> tuple[np.float32, np.float32, np.float32]:
        """Displaced surface point for a direction as float32 components."""
        px, py, pz = get_final_position((x, y, z), self.config).astype(np.float32)
        return px, py, pz

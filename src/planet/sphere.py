"""Batch sampling of the planet over the sphere.

Equirectangular heightmaps and per-vertex displacement of a base
sphere mesh, the two ways a renderer consumes the terrain.
"""

from dataclasses import dataclass

import numpy as np
import structlog
from numpy.typing import ArrayLike, NDArray

from .terrain import PlanetConfig, get_final_position, get_height

logger = structlog.get_logger()


def sample_sphere(x: ArrayLike, y: ArrayLike, width: int, height: int) -> NDArray[np.float64]:
    """Convert equirectangular pixel coordinates to unit directions.

    Column ``x`` spans longitude [0, 2pi) and row ``y`` spans colatitude
    [0, pi) measured from the +Y pole.

    Args:
        x: Column index (or indices).
        y: Row index (or indices).
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Unit vectors, shape (..., 3).
    """
    u = np.asarray(x, dtype=np.float64) / width
    v = np.asarray(y, dtype=np.float64) / height

    lon = u * 2.0 * np.pi
    lat = v * np.pi

    return np.stack(
        [np.cos(lon) * np.sin(lat), np.cos(lat), np.sin(lon) * np.sin(lat)],
        axis=-1,
    )


def generate_heightmap(config: PlanetConfig, width: int, height: int) -> NDArray[np.float32]:
    """Sample planet elevation on an equirectangular grid.

    Args:
        config: Planet configuration.
        width: Samples along longitude.
        height: Samples along latitude.

    Returns:
        2D float32 elevation array of shape (height, width).
    """
    ys, xs = np.meshgrid(np.arange(height), np.arange(width), indexing="ij")
    directions = sample_sphere(xs, ys, width, height)
    heightmap = get_height(directions, config).astype(np.float32)

    logger.info(
        "heightmap_generated",
        seed=config.seed,
        width=width,
        height=height,
    )
    return heightmap


def displace_vertices(config: PlanetConfig, vertices: ArrayLike) -> NDArray[np.float32]:
    """Displace base-sphere vertices onto the terrain surface.

    Args:
        config: Planet configuration.
        vertices: Vertex positions of shape (N, 3); only their direction is used.

    Returns:
        Displaced float32 positions of shape (N, 3).
    """
    vertices = np.asarray(vertices, dtype=np.float64)
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(f"Expected vertices of shape (N, 3), got {vertices.shape}")
    return get_final_position(vertices, config).astype(np.float32)


@dataclass(frozen=True)
class HeightmapSummary:
    """Elevation statistics of a heightmap."""

    min_height: float
    max_height: float
    mean_height: float
    land_fraction: float

    @classmethod
    def from_heightmap(cls, heightmap: NDArray[np.float32]) -> "HeightmapSummary":
        return cls(
            min_height=float(heightmap.min()),
            max_height=float(heightmap.max()),
            mean_height=float(heightmap.mean()),
            land_fraction=float(np.mean(heightmap > 0.0)),
        )

"""Shared test fixtures for planet tests."""

import tempfile
from pathlib import Path

import numpy as np
import pytest

from planet.noise import PermutationTable, build_permutation
from planet.terrain import PlanetConfig, init_planet


@pytest.fixture
def perm() -> PermutationTable:
    """Permutation table for seed 42."""
    return build_permutation(42)


@pytest.fixture
def planet_config() -> PlanetConfig:
    """Unit-radius planet for seed 42."""
    return init_planet(42, 1.0, 1.0)


@pytest.fixture
def random_directions() -> np.ndarray:
    """1000 random unit directions."""
    rng = np.random.default_rng(7)
    d = rng.standard_normal((1000, 3))
    return d / np.linalg.norm(d, axis=1, keepdims=True)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_toml():
    """Sample planet config as TOML string."""
    return """
[planet]
seed = 7
scale = 0.5
radius = 2.0

[heightmap]
width = 32
height = 16
"""


@pytest.fixture
def config_file(temp_dir, sample_config_toml):
    """Create a temporary config file."""
    config_path = temp_dir / "test_config.toml"
    config_path.write_text(sample_config_toml)
    return config_path

"""Tests for planet configuration."""

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

import planet.config
from planet.config import (
    CONFIGS_DIR,
    Config,
    HeightmapSettings,
    PlanetSettings,
    find_config,
    list_configs,
    load_config,
)


class TestPlanetSettings:
    """Tests for PlanetSettings."""

    def test_defaults(self):
        """Test default values."""
        settings = PlanetSettings()
        assert settings.seed == 42
        assert settings.scale == 1.0
        assert settings.radius == 1.0

    def test_radius_must_be_positive(self):
        """Non-positive radius is rejected."""
        with pytest.raises(ValidationError):
            PlanetSettings(radius=0.0)


class TestHeightmapSettings:
    """Tests for HeightmapSettings."""

    def test_defaults(self):
        """Test default values."""
        settings = HeightmapSettings()
        assert settings.width == 256
        assert settings.height == 128

    def test_size_must_be_positive(self):
        """Zero-sized heightmaps are rejected."""
        with pytest.raises(ValidationError):
            HeightmapSettings(width=0)


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        """Test default values."""
        config = Config()
        assert config.planet.seed == 42
        assert config.heightmap.width == 256

    def test_build(self):
        """build initializes the described planet."""
        config = Config(planet=PlanetSettings(seed=9, scale=2.0, radius=5.0))
        planet = config.build()
        assert planet.seed == 9
        assert planet.scale == 2.0
        assert planet.radius == 5.0


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_valid_config(self, config_file):
        """Test loading a valid config file."""
        config = load_config(config_file)
        assert config.planet.seed == 7
        assert config.planet.scale == 0.5
        assert config.planet.radius == 2.0
        assert config.heightmap.width == 32
        assert config.heightmap.height == 16

    def test_load_partial_config(self, temp_dir):
        """Missing sections fall back to defaults."""
        path = temp_dir / "partial.toml"
        path.write_text("[planet]\nseed = 5\n")
        config = load_config(path)
        assert config.planet.seed == 5
        assert config.planet.radius == 1.0
        assert config.heightmap.height == 128

    def test_load_missing_file(self, temp_dir):
        """Test loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "nonexistent.toml")

    def test_load_malformed_toml(self, temp_dir):
        """Malformed TOML raises a decode error."""
        path = temp_dir / "bad.toml"
        path.write_text("[planet\nseed = ")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)

    def test_load_invalid_values(self, temp_dir):
        """Out-of-range values fail validation."""
        path = temp_dir / "invalid.toml"
        path.write_text("[planet]\nradius = -1.0\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestFindConfig:
    """Tests for find_config."""

    def test_find_by_path(self, config_file):
        """Test finding config by direct path."""
        assert find_config(str(config_file)) == config_file

    def test_find_missing_path(self, temp_dir):
        """Missing explicit path raises."""
        with pytest.raises(FileNotFoundError):
            find_config(str(temp_dir / "missing.toml"))

    def test_find_by_name(self):
        """Bundled configs resolve by name."""
        assert find_config("default") == CONFIGS_DIR / "default.toml"

    def test_configs_ship_inside_package(self):
        """Bundled configs live in the package so installed wheels find them."""
        package_dir = Path(planet.config.__file__).parent
        assert CONFIGS_DIR.parent == package_dir
        assert (package_dir / "configs" / "default.toml").is_file()

    def test_find_unknown_name(self):
        """Unknown names raise with the available list."""
        with pytest.raises(FileNotFoundError, match="Available configs"):
            find_config("no_such_planet")

    def test_list_configs(self):
        """Bundled configs are listed."""
        assert "default" in list_configs()
        assert "rugged" in list_configs()

    def test_bundled_configs_valid(self):
        """Every bundled config loads."""
        for name in list_configs():
            load_config(find_config(name))

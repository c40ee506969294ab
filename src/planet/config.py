"""Planet configuration loading from TOML files."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from .terrain import PlanetConfig, init_planet

CONFIGS_DIR = Path(__file__).parent / "configs"


class PlanetSettings(BaseModel):
    """Seed and shape of the planet."""

    seed: int = Field(default=42, description="Terrain seed (reduced to 32 bits)")
    scale: float = Field(default=1.0, description="Height multiplier")
    radius: float = Field(default=1.0, gt=0, description="Base sphere radius")


class HeightmapSettings(BaseModel):
    """Equirectangular heightmap resolution."""

    width: int = Field(default=256, gt=0, description="Samples along longitude")
    height: int = Field(default=128, gt=0, description="Samples along latitude")


class Config(BaseModel):
    """Complete planet generator configuration."""

    planet: PlanetSettings = Field(default_factory=PlanetSettings)
    heightmap: HeightmapSettings = Field(default_factory=HeightmapSettings)

    def build(self) -> PlanetConfig:
        """Initialize the planet described by these settings."""
        return init_planet(self.planet.seed, self.planet.scale, self.planet.radius)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return Config.model_validate(data)


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    config_path = CONFIGS_DIR / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = CONFIGS_DIR / name
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {CONFIGS_DIR}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    if not CONFIGS_DIR.exists():
        return []
    return sorted(p.stem for p in CONFIGS_DIR.glob("*.toml"))

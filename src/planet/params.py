"""Deterministic seed to noise-parameter derivation.

Each parameter is drawn from its own salted hash of the seed, so fields
derived from one seed stay decorrelated. Nothing here touches the noise
permutation table.
"""

from pydantic import BaseModel, Field

MASK_32 = 0xFFFFFFFF


def hash32(x: int) -> int:
    """32-bit integer avalanche hash (wraps mod 2**32)."""
    x &= MASK_32
    x = (x ^ 61) ^ (x >> 16)
    x = (x + (x << 3)) & MASK_32
    x ^= x >> 4
    x = (x * 0x27D4EB2D) & MASK_32
    x ^= x >> 15
    return x


def hash01(seed: int, salt: int = 0) -> float:
    """Map a salted seed to a float in [0, 1) using the low 24 bits of its hash."""
    return (hash32(seed + salt) & 0xFFFFFF) / float(1 << 24)


def random_range(seed: int, salt: int, a: float, b: float) -> float:
    """Map a salted seed into [a, b)."""
    return a + (b - a) * hash01(seed, salt)


class NoiseParams(BaseModel, frozen=True):
    """Noise layer parameters for one planet."""

    macro_freq: float = Field(description="Continent-scale noise frequency")
    macro_octaves: int = Field(ge=0, description="Continent noise octaves")
    macro_amp: float = Field(description="Continent height strength")

    micro_freq: float = Field(description="Small hill/valley noise frequency")
    micro_octaves: int = Field(ge=0, description="Detail noise octaves")
    micro_amp: float = Field(description="Detail height strength")

    ridge_freq: float = Field(description="Mountain ridge noise frequency")
    ridge_octaves: int = Field(ge=0, description="Ridge noise octaves")
    ridge_amp: float = Field(description="Mountain ridge strength")

    lacunarity: float = Field(description="Frequency multiplier per octave")
    gain: float = Field(description="Amplitude multiplier per octave")


def generate_noise_params(seed: int) -> NoiseParams:
    """Derive noise parameters from a seed.

    Args:
        seed: 32-bit unsigned seed.

    Returns:
        NoiseParams, identical for identical seeds.
    """
    seed &= MASK_32
    return NoiseParams(
        macro_freq=random_range(seed, 11, 0.03, 0.18),
        macro_octaves=int(random_range(seed, 12, 2.0, 5.0)),
        macro_amp=random_range(seed, 13, 0.6, 1.6),
        micro_freq=random_range(seed, 21, 0.8, 3.0),
        micro_octaves=int(random_range(seed, 22, 2.0, 6.0)),
        micro_amp=random_range(seed, 23, 0.05, 0.5),
        ridge_freq=random_range(seed, 31, 0.6, 2.5),
        ridge_octaves=int(random_range(seed, 32, 1.0, 4.0)),
        ridge_amp=random_range(seed, 33, 0.2, 1.2),
        lacunarity=random_range(seed, 41, 1.8, 2.2),
        gain=random_range(seed, 42, 0.35, 0.6),
    )

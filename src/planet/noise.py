"""Noise generation functions for planet terrain.

Provides a seeded permutation table, 3D gradient (Perlin) noise,
fBm (fractal Brownian motion) and ridged multifractal implementations.

All samplers are vectorized: coordinates may be Python floats or numpy
arrays of matching shape, and the result has the broadcast shape of the
inputs (0-d for scalars).
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

PERMUTATION_SIZE = 256


@dataclass(frozen=True, eq=False)
class PermutationTable:
    """Shuffled lattice hash table, mirrored to 512 entries.

    Entries 0..255 are a permutation of 0..255 and entries 256..511 repeat
    them, so chained lookups like ``p[p[X] + Y] + Z`` never need to wrap.
    """

    seed: int
    values: NDArray[np.int64]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return self.seed == other.seed and np.array_equal(self.values, other.values)

    def __hash__(self) -> int:
        # The seed determines the values
        return hash(self.seed)


def build_permutation(seed: int) -> PermutationTable:
    """Build the permutation table for a seed.

    Runs a Fisher-Yates shuffle over 0..255 driven by numpy's default
    generator (PCG64) seeded with ``seed``, then mirrors the result.

    Args:
        seed: 32-bit unsigned seed. Wider or negative ints are reduced mod 2**32.

    Returns:
        Read-only PermutationTable of 512 entries.
    """
    seed = seed & 0xFFFFFFFF
    rng = np.random.default_rng(seed)

    table = np.arange(PERMUTATION_SIZE, dtype=np.int64)
    for i in range(PERMUTATION_SIZE - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        table[i], table[j] = table[j], table[i]

    values = np.concatenate([table, table])
    values.flags.writeable = False
    return PermutationTable(seed=seed, values=values)


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: NDArray[np.float64], b: NDArray[np.float64], t: NDArray[np.float64]) -> NDArray[np.float64]:
    return a + t * (b - a)


def _grad(
    hash_value: NDArray[np.int64],
    x: NDArray[np.float64],
    y: NDArray[np.float64],
    z: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Dot product of the hashed corner gradient with the offset vector.

    The low 4 bits pick one of 12 edge directions of a cube (with 4
    repeats to fill 16 slots).
    """
    h = hash_value & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where(h & 1, -u, u) + np.where(h & 2, -v, v)


def perlin(x: ArrayLike, y: ArrayLike, z: ArrayLike, perm: PermutationTable) -> NDArray[np.float64]:
    """Sample 3D gradient noise.

    Args:
        x: X coordinates.
        y: Y coordinates.
        z: Z coordinates.
        perm: Permutation table selecting lattice gradients.

    Returns:
        Noise values, nominally in [-1, 1]. Exactly 0 at integer lattice points.
    """
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64),
        np.asarray(y, dtype=np.float64),
        np.asarray(z, dtype=np.float64),
    )
    p = perm.values

    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)

    # Lattice cell, wrapped to the table size
    xi = fx.astype(np.int64) & 255
    yi = fy.astype(np.int64) & 255
    zi = fz.astype(np.int64) & 255

    # Offset inside the cell
    x = x - fx
    y = y - fy
    z = z - fz

    u = _fade(x)
    v = _fade(y)
    w = _fade(z)

    a = p[xi] + yi
    aa = p[a] + zi
    ab = p[a + 1] + zi
    b = p[xi + 1] + yi
    ba = p[b] + zi
    bb = p[b + 1] + zi

    near = _lerp(
        _lerp(_grad(p[aa], x, y, z), _grad(p[ba], x - 1.0, y, z), u),
        _lerp(_grad(p[ab], x, y - 1.0, z), _grad(p[bb], x - 1.0, y - 1.0, z), u),
        v,
    )
    far = _lerp(
        _lerp(_grad(p[aa + 1], x, y, z - 1.0), _grad(p[ba + 1], x - 1.0, y, z - 1.0), u),
        _lerp(
            _grad(p[ab + 1], x, y - 1.0, z - 1.0),
            _grad(p[bb + 1], x - 1.0, y - 1.0, z - 1.0),
            u,
        ),
        v,
    )
    return _lerp(near, far, w)


def fbm(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
    perm: PermutationTable,
    octaves: int = 4,
    lacunarity: float = 2.0,
    gain: float = 0.5,
) -> NDArray[np.float64]:
    """Generate fractal Brownian motion noise.

    Sums octaves of gradient noise remapped to [0, 1] at increasing
    frequencies and decreasing amplitudes, then divides by the total
    amplitude so the result stays in [0, 1] for any gain.

    Args:
        x: X coordinates.
        y: Y coordinates.
        z: Z coordinates.
        perm: Permutation table.
        octaves: Number of noise layers to sum.
        lacunarity: Frequency multiplier between octaves.
        gain: Amplitude multiplier between octaves.

    Returns:
        Noise values in [0, 1]; all zeros when no octaves are summed.
    """
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64),
        np.asarray(y, dtype=np.float64),
        np.asarray(z, dtype=np.float64),
    )
    result = np.zeros(x.shape, dtype=np.float64)

    frequency = 1.0
    amplitude = 1.0
    max_amplitude = 0.0

    for _ in range(octaves):
        n = perlin(x * frequency, y * frequency, z * frequency, perm)
        result += (n * 0.5 + 0.5) * amplitude
        max_amplitude += amplitude
        amplitude *= gain
        frequency *= lacunarity

    if max_amplitude == 0.0:
        return result

    return result / max_amplitude


def ridged_fbm(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
    perm: PermutationTable,
    octaves: int = 4,
    lacunarity: float = 2.0,
    gain: float = 0.5,
) -> NDArray[np.float64]:
    """Generate ridged multifractal noise.

    Folds each octave around its zero crossings with ``(1 - |n|)^2`` to
    produce sharp ridges, and weights each octave by the previous one so
    detail concentrates along ridge lines. Amplitude halves every octave
    regardless of ``gain``, which only feeds the weight.

    Args:
        x: X coordinates.
        y: Y coordinates.
        z: Z coordinates.
        perm: Permutation table.
        octaves: Number of noise layers.
        lacunarity: Frequency multiplier between octaves.
        gain: Weight multiplier carried between octaves.

    Returns:
        Unnormalized noise values, >= 0 and typically below about 1.2.
    """
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64),
        np.asarray(y, dtype=np.float64),
        np.asarray(z, dtype=np.float64),
    )
    result = np.zeros(x.shape, dtype=np.float64)
    weight = np.ones(x.shape, dtype=np.float64)

    frequency = 1.0
    amplitude = 1.0

    for _ in range(octaves):
        n = perlin(x * frequency, y * frequency, z * frequency, perm)

        signal = 1.0 - np.abs(n)
        signal = signal * signal
        signal *= weight

        result += signal * amplitude

        weight = np.clip(signal * gain, 0.0, 1.0)
        frequency *= lacunarity
        amplitude *= 0.5

    return result


def smoothstep(edge0: float, edge1: float, x: ArrayLike) -> NDArray[np.float64]:
    """Smooth Hermite interpolation between 0 and 1.

    Args:
        edge0: Lower edge of transition.
        edge1: Upper edge of transition.
        x: Input values.

    Returns:
        Smoothly interpolated values in [0, 1].
    """
    t = np.clip((np.asarray(x, dtype=np.float64) - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)

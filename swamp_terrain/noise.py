# swamp_terrain/noise.py

"""
================================================================================
NOISE GENERATION UTILITIES
================================================================================
This module provides functions for generating seeded 2D gradient noise and its
fractal (multi-octave) sum. It is designed to be a pure, stateless utility.

Data Contract:
---------------
- Inputs:
    - p: A pre-shuffled 512-entry NumPy permutation table (int array).
    - x, y: Scalar coordinates, or NumPy arrays of coordinates for the grid
      variant.
    - octaves, persistence, lacunarity: Standard noise parameters.
- Outputs:
    - Noise values, approximately in the range [-1, 1]. The range is not
      strictly bounded; callers clip after normalization.
- Side Effects: None.
- Invariants:
    - The output is a deterministic function of p and the inputs.
    - Integer lattice points evaluate to exactly 0.
    - The shape of the grid output matches the shape of input x and y.
================================================================================
"""

import numpy as np
from numba import njit

from . import config as DEFAULTS

PERMUTATION_SIZE = 256

# Eight evenly spread gradient directions: four axis-aligned, four diagonal.
# The low three bits of a lattice hash select one of them.
_GRADIENT_VECTORS = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],
    [1, 0], [-1, 0], [0, 1], [0, -1],
])

def create_permutation_table(seed: int) -> np.ndarray:
    """
    Builds the shuffled permutation table for a seed.

    The identity table 0..255 is shuffled with a generator seeded from `seed`
    and then duplicated to 512 entries so corner lookups never need to wrap.
    """
    p = np.arange(PERMUTATION_SIZE, dtype=np.int64)
    rng = np.random.default_rng(seed)
    rng.shuffle(p)
    return np.stack([p, p]).flatten()

@njit
def _lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)

@njit
def _fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

@njit
def _gradient(h, x, y):
    """Calculates the dot product between a gradient vector and coordinates."""
    g = _GRADIENT_VECTORS[h & 7]
    return g[0] * x + g[1] * y

@njit
def noise_2d(p, x, y):
    """Single-octave gradient noise at (x, y)."""
    xi = int(np.floor(x))
    yi = int(np.floor(y))

    xf = x - xi
    yf = y - yi

    u = _fade(xf)
    v = _fade(yf)

    px0 = xi % PERMUTATION_SIZE
    px1 = (px0 + 1) % PERMUTATION_SIZE
    py0 = yi % PERMUTATION_SIZE
    py1 = (py0 + 1) % PERMUTATION_SIZE

    idx00 = p[p[px0] + py0]
    idx01 = p[p[px0] + py1]
    idx10 = p[p[px1] + py0]
    idx11 = p[p[px1] + py1]

    g00 = _gradient(idx00, xf, yf)
    g01 = _gradient(idx01, xf, yf - 1)
    g10 = _gradient(idx10, xf - 1, yf)
    g11 = _gradient(idx11, xf - 1, yf - 1)

    x1 = _lerp(g00, g10, u)
    x2 = _lerp(g01, g11, u)
    return _lerp(x1, x2, v)

@njit
def _octave_noise(p, x, y, octaves, persistence, lacunarity):
    total = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0

    for _ in range(octaves):
        total += noise_2d(p, x * frequency, y * frequency) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= lacunarity

    # Renormalize by the total amplitude mass so the result stays near [-1, 1].
    return total / max_value

@njit
def _octave_noise_grid(p, x, y, octaves, persistence, lacunarity):
    rows, cols = x.shape
    total_noise = np.zeros((rows, cols))

    for i in range(rows):
        for j in range(cols):
            total_noise[i, j] = _octave_noise(p, x[i, j], y[i, j], octaves, persistence, lacunarity)

    return total_noise

def _check_octaves(octaves: int):
    if octaves < 1:
        raise ValueError(f"octaves must be at least 1, got {octaves}")

def octave_noise(
    p: np.ndarray, x: float, y: float,
    octaves: int = DEFAULTS.NOISE_OCTAVES,
    persistence: float = DEFAULTS.NOISE_PERSISTENCE,
    lacunarity: float = DEFAULTS.NOISE_LACUNARITY
) -> float:
    """
    Fractal noise at a single point. Each octave doubles the frequency (for the
    default lacunarity) and scales the amplitude by `persistence`.
    """
    _check_octaves(octaves)
    return _octave_noise(p, float(x), float(y), int(octaves), float(persistence), float(lacunarity))

def octave_noise_grid(
    p: np.ndarray, x: np.ndarray, y: np.ndarray,
    octaves: int = DEFAULTS.NOISE_OCTAVES,
    persistence: float = DEFAULTS.NOISE_PERSISTENCE,
    lacunarity: float = DEFAULTS.NOISE_LACUNARITY
) -> np.ndarray:
    """
    Fractal noise for 2D arrays of coordinates.
    The loops run inside a Numba-compiled kernel.
    """
    _check_octaves(octaves)
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.shape != y.shape or x.ndim != 2:
        raise ValueError(f"x and y must be 2D arrays of the same shape, got {x.shape} and {y.shape}")
    return _octave_noise_grid(p, x, y, int(octaves), float(persistence), float(lacunarity))

# texture_generator/noise.py

"""
================================================================================
NOISE GENERATION
================================================================================
Gradient noise (Perlin and simplex) with fractal Brownian motion, the plain
hash noise variants, and the `Noise` node that wraps any of them as a
strategy. All randomness comes from `stable_hash`; there is no permutation
table, so every lattice gradient is a pure function of (cell, seed).

Data Contract:
---------------
- Inputs:
    - x, y: Integer pixel coordinates (floats for `perlin2`/`simplex2`).
    - seed, frequency, octaves, persistence, lacunarity: fBm parameters.
    - frequency_x, frequency_y: optional per-axis overrides of frequency.
- Outputs:
    - `value(x, y)`: a float in [0, 1].
    - `sample(x, y)`: an opaque gray Color, int(value * 255).
- Side Effects: None.
- Invariants:
    - Octave i uses seed + i, frequency * lacunarity**i and amplitude
      persistence**i; the sum is divided by the total amplitude, mapped by
      (v + 1) / 2 and clamped, so the presented value is always in [0, 1].
    - Float kernels run in IEEE double precision; quantization is last.
================================================================================
"""

import hashlib
import logging
import math

from numba import njit

from . import config as DEFAULTS
from .core import BLACK, ColorModel, Null, gray8_color
from .hashing import stable_hash, to_seed

logger = logging.getLogger(__name__)

_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
_G2 = (3.0 - math.sqrt(3.0)) / 6.0


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
    """Dot product between one of 8 lattice directions and the offset."""
    h = h & 7
    if h == 0:
        return x + y
    if h == 1:
        return -x + y
    if h == 2:
        return x - y
    if h == 3:
        return -x - y
    if h == 4:
        return x
    if h == 5:
        return -x
    if h == 6:
        return y
    return -y

@njit
def _perlin_cell(g00, g10, g01, g11, fx, fy):
    """Blends the four corner contributions of one lattice cell."""
    u = _fade(fx)
    v = _fade(fy)
    n00 = _gradient(g00, fx, fy)
    n10 = _gradient(g10, fx - 1.0, fy)
    n01 = _gradient(g01, fx, fy - 1.0)
    n11 = _gradient(g11, fx - 1.0, fy - 1.0)
    return _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v)

@njit
def _simplex_corner(g, x, y):
    t = 0.5 - x * x - y * y
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * _gradient(g, x, y)


def perlin2(x: float, y: float, seed: int) -> float:
    """
    Single-band 2D gradient noise, roughly in [-1, 1]. Zero on every
    integer lattice point.
    """
    x0 = math.floor(x)
    y0 = math.floor(y)
    return _perlin_cell(
        stable_hash(x0, y0, seed) & 7,
        stable_hash(x0 + 1, y0, seed) & 7,
        stable_hash(x0, y0 + 1, seed) & 7,
        stable_hash(x0 + 1, y0 + 1, seed) & 7,
        x - x0,
        y - y0,
    )


def simplex2(x: float, y: float, seed: int) -> float:
    """Single-band 2D simplex noise, roughly in [-1, 1]."""
    s = (x + y) * _F2
    i = math.floor(x + s)
    j = math.floor(y + s)
    t = (i + j) * _G2
    x0 = x - (i - t)
    y0 = y - (j - t)
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1
    x1 = x0 - i1 + _G2
    y1 = y0 - j1 + _G2
    x2 = x0 - 1.0 + 2.0 * _G2
    y2 = y0 - 1.0 + 2.0 * _G2
    n0 = _simplex_corner(stable_hash(i, j, seed) & 7, x0, y0)
    n1 = _simplex_corner(stable_hash(i + i1, j + j1, seed) & 7, x1, y1)
    n2 = _simplex_corner(stable_hash(i + 1, j + 1, seed) & 7, x2, y2)
    return DEFAULTS.SIMPLEX_OUTPUT_SCALE * (n0 + n1 + n2)


class FractalNoise(Null):
    """
    Shared fBm driver. Subclasses provide `band(x, y, seed)` returning a
    single octave roughly in [-1, 1].
    """
    model = ColorModel.GRAY

    def __init__(self, *options, seed: int = DEFAULTS.DEFAULT_SEED,
                 frequency: float = DEFAULTS.PERLIN_FREQUENCY,
                 octaves: int = DEFAULTS.PERLIN_OCTAVES,
                 persistence: float = DEFAULTS.PERLIN_PERSISTENCE,
                 lacunarity: float = DEFAULTS.PERLIN_LACUNARITY):
        self.seed = int(seed)
        self.frequency = float(frequency)
        self.octaves = int(octaves)
        self.persistence = float(persistence)
        self.lacunarity = float(lacunarity)
        self.frequency_x = None
        self.frequency_y = None
        super().__init__(*options)

    # --- Capabilities ---
    def set_seed(self, value: int):
        self.seed = int(value)

    def set_frequency(self, value: float):
        self.frequency = float(value)

    def set_frequency_x(self, value: float):
        self.frequency_x = float(value)

    def set_frequency_y(self, value: float):
        self.frequency_y = float(value)

    def set_octaves(self, value: int):
        self.octaves = int(value)

    def set_persistence(self, value: float):
        self.persistence = float(value)

    def set_lacunarity(self, value: float):
        self.lacunarity = float(value)

    def band(self, x: float, y: float, seed: int) -> float:
        raise NotImplementedError

    def value(self, x, y) -> float:
        frequency = self.frequency or DEFAULTS.PERLIN_FREQUENCY
        freq_x = self.frequency_x or frequency
        freq_y = self.frequency_y or frequency
        octaves = self.octaves if self.octaves > 0 else DEFAULTS.PERLIN_OCTAVES
        # Zero persistence is a single-band sum.
        persistence = self.persistence if self.persistence >= 0.0 else DEFAULTS.PERLIN_PERSISTENCE
        lacunarity = self.lacunarity or DEFAULTS.PERLIN_LACUNARITY

        total = 0.0
        max_amplitude = 0.0
        amplitude = 1.0
        for i in range(octaves):
            total += self.band(x * freq_x, y * freq_y, to_seed(self.seed + i)) * amplitude
            max_amplitude += amplitude
            amplitude *= persistence
            freq_x *= lacunarity
            freq_y *= lacunarity

        normalized = (total / max_amplitude + 1.0) / 2.0
        if normalized < 0.0:
            return 0.0
        if normalized > 1.0:
            return 1.0
        return normalized

    def sample(self, x: int, y: int):
        return gray8_color(int(self.value(x, y) * 255))


class PerlinNoise(FractalNoise):
    def band(self, x, y, seed):
        return perlin2(x, y, seed)


class SimplexNoise(FractalNoise):
    def band(self, x, y, seed):
        return simplex2(x, y, seed)


class HashNoise(Null):
    """White noise: the low byte of the coordinate hash."""
    model = ColorModel.GRAY

    def __init__(self, seed: int = DEFAULTS.DEFAULT_SEED, *options):
        self.seed = int(seed)
        super().__init__(*options)

    def set_seed(self, value: int):
        self.seed = int(value)

    def value(self, x: int, y: int) -> float:
        return (stable_hash(x, y, self.seed) & 0xFF) / 255.0

    def sample(self, x: int, y: int):
        return gray8_color(stable_hash(x, y, self.seed))


class CryptoNoise(Null):
    """
    White noise from a keyed BLAKE2b digest of the coordinate. Deterministic
    for a given key, but with no exploitable structure between neighbors.
    """
    model = ColorModel.GRAY

    def __init__(self, key: bytes = b"", *options):
        self.key = bytes(key)
        super().__init__(*options)

    def _byte(self, x: int, y: int) -> int:
        digest = hashlib.blake2b(
            x.to_bytes(8, "little", signed=True) + y.to_bytes(8, "little", signed=True),
            digest_size=1,
            key=self.key,
        ).digest()
        return digest[0]

    def value(self, x: int, y: int) -> float:
        return self._byte(x, y) / 255.0

    def sample(self, x: int, y: int):
        return gray8_color(self._byte(x, y))


class Noise(Null):
    """
    A node delegating to a noise algorithm handle. Defaults to CryptoNoise;
    seeding it switches to HashNoise, and a seed given before the algorithm
    is forwarded once the algorithm is set.
    """
    model = ColorModel.GRAY

    def __init__(self, *options):
        self.algorithm = CryptoNoise()
        self._seed = None
        super().__init__(*options)

    def set_noise_algorithm(self, algorithm):
        self.algorithm = algorithm
        if self._seed is not None:
            self._forward_seed()

    def set_seed(self, value: int):
        self._seed = int(value)
        self._forward_seed()

    def set_frequency(self, value: float):
        self._forward("set_frequency", value)

    def set_frequency_x(self, value: float):
        self._forward("set_frequency_x", value)

    def set_frequency_y(self, value: float):
        self._forward("set_frequency_y", value)

    def _forward(self, name: str, value):
        setter = getattr(self.algorithm, name, None)
        if callable(setter):
            setter(value)

    def _forward_seed(self):
        if isinstance(self.algorithm, CryptoNoise):
            logger.debug(f"Seed {self._seed} given to crypto noise; switching to hash noise.")
            self.algorithm = HashNoise(self._seed)
            return
        setter = getattr(self.algorithm, "set_seed", None)
        if callable(setter):
            setter(self._seed)

    def value(self, x: int, y: int) -> float:
        if self.algorithm is None:
            return 0.0
        fn = getattr(self.algorithm, "value", None)
        if callable(fn):
            return fn(x, y)
        return self.algorithm.sample(x, y).gray8() / 255.0

    def sample(self, x: int, y: int):
        if self.algorithm is None:
            return BLACK
        return self.algorithm.sample(x, y)

# texture_generator/patterns/filters.py

"""
================================================================================
IMAGE FILTERS & DITHERING
================================================================================
Neighborhood filters over a source node (Sobel normal map and edge detect) and
palette reduction by ordered (Bayer, halftone) or hashed random thresholds.

Data Contract:
---------------
- Inputs:
    - source: Any node. A missing source yields black and 100x100 bounds.
    - Dithers: a palette (default black and white) and a spread.
- Outputs:
    - NormalMap: tangent-space normals packed as RGB = (n + 1) / 2.
    - EdgeDetect: Sobel magnitude / 4 (times sensitivity), clamped, gray.
    - Dithers: the nearest palette entry to the shifted source color.
- Side Effects: None.
- Invariants:
    - Threshold matrices are normalized to [0, 1) and built at construction.
    - The dither shift is (m - 0.5) * spread, applied to every RGB channel.
================================================================================
"""

import math

import numpy as np

from .. import config as DEFAULTS
from ..core import BLACK, WHITE, Color, ColorModel, Null, Rect, as_color, gray8_color
from ..hashing import stable_hash


def _source_bounds(source) -> Rect:
    if source is None:
        return Rect(*DEFAULTS.ORPHAN_FILTER_BOUNDS)
    return source.bounds()


def sobel(source, x: int, y: int) -> tuple:
    """Returns (gx, gy) of the luminance around (x, y)."""
    g = [[source.sample(x + i, y + j).luminance() for i in (-1, 0, 1)] for j in (-1, 0, 1)]
    gx = (g[0][2] + 2.0 * g[1][2] + g[2][2]) - (g[0][0] + 2.0 * g[1][0] + g[2][0])
    gy = (g[2][0] + 2.0 * g[2][1] + g[2][2]) - (g[0][0] + 2.0 * g[0][1] + g[0][2])
    return gx, gy


class NormalMap(Null):
    def __init__(self, source, *options):
        self.source = source
        self.strength = DEFAULTS.NORMAL_MAP_STRENGTH
        super().__init__(*options, default_bounds=_source_bounds(source))

    def set_normal_map_strength(self, value: float):
        self.strength = float(value)

    def sample(self, x: int, y: int) -> Color:
        if self.source is None:
            return BLACK
        gx, gy = sobel(self.source, x, y)
        dx, dy, dz = -gx * self.strength, -gy * self.strength, 1.0
        length = math.sqrt(dx * dx + dy * dy + dz * dz)
        return Color(
            int((dx / length + 1.0) * 0.5 * 255.0 + 0.5),
            int((dy / length + 1.0) * 0.5 * 255.0 + 0.5),
            int((dz / length + 1.0) * 0.5 * 255.0 + 0.5),
            255,
        )


class EdgeDetect(Null):
    model = ColorModel.GRAY

    def __init__(self, source, *options):
        self.source = source
        self.sensitivity = DEFAULTS.EDGE_SENSITIVITY
        super().__init__(*options, default_bounds=_source_bounds(source))

    def set_edge_sensitivity(self, value: float):
        self.sensitivity = float(value)

    def sample(self, x: int, y: int) -> Color:
        if self.source is None:
            return BLACK
        gx, gy = sobel(self.source, x, y)
        v = min(math.hypot(gx, gy) / 4.0 * self.sensitivity, 1.0)
        return gray8_color(int(v * 255))


# --- Threshold Matrices ---

def bayer_indices(n: int) -> np.ndarray:
    """The recursive n x n Bayer index matrix; n must be a power of two."""
    if n <= 1:
        return np.zeros((1, 1), dtype=np.int64)
    prev = bayer_indices(n // 2)
    return np.block([[4 * prev, 4 * prev + 2], [4 * prev + 3, 4 * prev + 1]])


def bayer_matrix(n: int) -> np.ndarray:
    indices = bayer_indices(n)
    return indices / float(indices.size)


def halftone_matrix(n: int) -> np.ndarray:
    """Clustered-dot thresholds: 1 at the cell center falling to 0 at the corners."""
    c = (n - 1) / 2.0
    max_dist = math.hypot(c, c)
    if max_dist == 0:
        return np.full((1, 1), 0.5)
    ys, xs = np.mgrid[0:n, 0:n]
    dist = np.minimum(np.hypot(xs - c, ys - c) / max_dist, 1.0)
    return 1.0 - dist


# --- Palette Reduction ---

def nearest_color(palette, c: Color) -> Color:
    best = palette[0]
    best_dist = None
    for p in palette:
        d = (p.r - c.r) ** 2 + (p.g - c.g) ** 2 + (p.b - c.b) ** 2 + (p.a - c.a) ** 2
        if best_dist is None or d < best_dist:
            best, best_dist = p, d
    return best


def _default_spread(palette) -> float:
    if len(palette) <= 2:
        return 255.0
    return 255.0 / len(palette)


def _clamp_byte(v: float) -> int:
    return int(min(max(v, 0.0), 255.0))


class _Dither(Null):
    def __init__(self, source, palette=None, spread: float = 0.0, *options):
        self.source = source
        self.palette = [as_color(c) for c in palette] if palette else [BLACK, WHITE]
        self.spread = float(spread) if spread else _default_spread(self.palette)
        super().__init__(*options, default_bounds=_source_bounds(source))

    def threshold(self, x: int, y: int) -> float:
        raise NotImplementedError

    def sample(self, x: int, y: int) -> Color:
        if self.source is None:
            return BLACK
        c = self.source.sample(x, y)
        r, g, b, _ = c.rgba16()
        shift = (self.threshold(x, y) - 0.5) * self.spread
        target = Color(
            _clamp_byte(r / 257.0 + shift),
            _clamp_byte(g / 257.0 + shift),
            _clamp_byte(b / 257.0 + shift),
            c.a,
        )
        return nearest_color(self.palette, target)


class OrderedDither(_Dither):
    def __init__(self, source, matrix, palette=None, spread: float = 0.0, *options):
        self.matrix = np.asarray(matrix, dtype=np.float64)
        super().__init__(source, palette, spread, *options)

    def threshold(self, x: int, y: int) -> float:
        h, w = self.matrix.shape
        return float(self.matrix[y % h, x % w])


def bayer_dither(source, n: int = 4, palette=None, *options) -> OrderedDither:
    return OrderedDither(source, bayer_matrix(n), palette, 0.0, *options)


def halftone_dither(source, size: int = DEFAULTS.HALFTONE_SIZE, palette=None, *options) -> OrderedDither:
    if size < 2:
        size = DEFAULTS.HALFTONE_SIZE
    return OrderedDither(source, halftone_matrix(size), palette, 0.0, *options)


class RandomDither(_Dither):
    """White-noise thresholds from the coordinate hash."""

    def __init__(self, source, palette=None, seed: int = DEFAULTS.DEFAULT_SEED, *options):
        self.seed = int(seed)
        super().__init__(source, palette, 0.0, *options)

    def set_seed(self, value: int):
        self.seed = int(value)

    def threshold(self, x: int, y: int) -> float:
        return (stable_hash(x, y, self.seed) & 0xFFFF) / 65535.0

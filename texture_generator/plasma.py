# texture_generator/plasma.py

"""
================================================================================
PLASMA (DIAMOND-SQUARE)
================================================================================
Fractal plasma built by recursive midpoint displacement on a square grid of
side N + 1, where N is the next power of two covering the node's bounds.

Data Contract:
---------------
- Inputs:
    - seed, roughness, color (three independent channels or one gray).
- Outputs:
    - Opaque colors; out-of-grid coordinates wrap modulo N.
- Side Effects:
    - The grid is generated on first sample, exactly once, under a lock.
- Invariants:
    - Channels R, G, B use seeds S, S + 1, S + 2.
    - Jitter amplitude at a level of side `size` is roughness * size / N,
      and the roughness halves on each level.
    - Once generated, the grids are read-only.
================================================================================
"""

import logging
import threading

import numpy as np

from . import config as DEFAULTS
from .core import Color, ColorModel, Null, Rect
from .hashing import to_seed

logger = logging.getLogger(__name__)


def diamond_square(n: int, roughness: float, seed: int) -> np.ndarray:
    """
    Returns an (n + 1, n + 1) float grid indexed [x, y]. Levels are processed
    breadth first and vectorized per level.
    """
    rng = np.random.default_rng(to_seed(seed))
    grid = np.zeros((n + 1, n + 1), dtype=np.float64)
    grid[0, 0], grid[0, n], grid[n, 0], grid[n, n] = rng.random(4)

    size = n
    rough = roughness
    while size > 1:
        half = size // 2
        amplitude = rough * size / n

        c00 = grid[0:n:size, 0:n:size]
        c10 = grid[size::size, 0:n:size]
        c01 = grid[0:n:size, size::size]
        c11 = grid[size::size, size::size]

        # Diamond step: square centers.
        centers = (c00 + c10 + c01 + c11) / 4.0
        centers += rng.uniform(-1.0, 1.0, centers.shape) * amplitude
        grid[half::size, half::size] = centers

        # Square step: each edge midpoint from its two corners and the center.
        top = (c00 + c10 + centers) / 3.0 + rng.uniform(-1.0, 1.0, centers.shape) * amplitude
        bottom = (c01 + c11 + centers) / 3.0 + rng.uniform(-1.0, 1.0, centers.shape) * amplitude
        left = (c00 + c01 + centers) / 3.0 + rng.uniform(-1.0, 1.0, centers.shape) * amplitude
        right = (c10 + c11 + centers) / 3.0 + rng.uniform(-1.0, 1.0, centers.shape) * amplitude
        grid[half::size, 0:n:size] = top
        grid[half::size, size::size] = bottom
        grid[0:n:size, half::size] = left
        grid[size::size, half::size] = right

        size = half
        rough /= 2.0

    return np.clip(grid, 0.0, 1.0)


class Plasma(Null):
    def __init__(self, *options):
        self.seed = DEFAULTS.PLASMA_SEED
        self.roughness = DEFAULTS.PLASMA_ROUGHNESS
        self.color = True
        self._grids = None
        self._lock = threading.Lock()
        super().__init__(*options, default_bounds=Rect(*DEFAULTS.PLASMA_BOUNDS))

    def set_seed(self, value: int):
        self.seed = int(value)

    def set_roughness(self, value: float):
        self.roughness = float(value)

    def set_color(self, enabled: bool):
        self.color = bool(enabled)

    def color_model(self) -> ColorModel:
        return ColorModel.RGBA if self.color else ColorModel.GRAY

    def _generate(self):
        if self._grids is not None:
            return self._grids
        with self._lock:
            if self._grids is None:
                b = self.bounds()
                side = max(b.width, b.height, 1)
                n = 1
                while n < side:
                    n *= 2
                logger.debug(f"Generating {n + 1}x{n + 1} plasma grid (seed {self.seed}).")
                channels = 3 if self.color else 1
                self._grids = tuple(
                    diamond_square(n, self.roughness, self.seed + c) for c in range(channels)
                )
        return self._grids

    def sample(self, x: int, y: int) -> Color:
        grids = self._generate()
        n = grids[0].shape[0] - 1
        gx, gy = x % n, y % n
        levels = [int(g[gx, gy] * 255) for g in grids]
        if len(levels) == 1:
            v = levels[0]
            return Color(v, v, v, 255)
        return Color(levels[0], levels[1], levels[2], 255)

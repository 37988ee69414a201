# texture_generator/bluenoise.py

"""
================================================================================
BLUE NOISE
================================================================================
A tileable high-frequency noise grid: white noise minus its own wrapped 3x3
box blur, re-centered on mid gray. Useful as a dither threshold source.

Data Contract:
---------------
- Inputs: seed, bounds (the grid size).
- Outputs: Opaque gray colors; coordinates wrap modulo the grid size.
- Side Effects: The grid is built on first sample, once, under a lock.
- Invariants: Identical seeds and bounds give identical grids.
================================================================================
"""

import logging
import threading

import numpy as np
from scipy.ndimage import uniform_filter

from . import config as DEFAULTS
from .core import ColorModel, Null, Rect, gray8_color
from .hashing import to_seed

logger = logging.getLogger(__name__)


def high_pass_grid(width: int, height: int, seed: int) -> np.ndarray:
    """Returns a (height, width) uint8 grid."""
    rng = np.random.default_rng(to_seed(seed))
    values = rng.integers(0, 256, size=(height, width)).astype(np.float64)
    blurred = uniform_filter(values, size=3, mode="wrap")
    return np.clip(values - blurred + 128.0, 0, 255).astype(np.uint8)


class BlueNoise(Null):
    model = ColorModel.GRAY

    def __init__(self, *options):
        self.seed = DEFAULTS.BLUE_NOISE_SEED
        self._grid = None
        self._lock = threading.Lock()
        super().__init__(*options, default_bounds=Rect(*DEFAULTS.BLUE_NOISE_BOUNDS))

    def set_seed(self, value: int):
        self.seed = int(value)

    def _generate(self) -> np.ndarray:
        if self._grid is not None:
            return self._grid
        with self._lock:
            if self._grid is None:
                b = self.bounds()
                logger.debug(f"Generating {b.width}x{b.height} blue noise grid (seed {self.seed}).")
                self._grid = high_pass_grid(b.width, b.height, self.seed)
        return self._grid

    def sample(self, x: int, y: int):
        grid = self._generate()
        h, w = grid.shape
        return gray8_color(int(grid[y % h, x % w]))

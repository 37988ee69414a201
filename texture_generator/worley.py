# texture_generator/worley.py

"""
================================================================================
CELLULAR (WORLEY) NOISE
================================================================================
Distances to jittered feature points, one per integer cell of the scaled
domain. The 3x3 neighborhood around the sample's cell is scanned and the two
smallest distances (F1, F2) plus the nearest cell's hash are kept.

Data Contract:
---------------
- Inputs:
    - seed, frequency, jitter in [0, 1], metric, output mode.
- Outputs:
    - `distances(x, y)`: (F1, F2, nearest_hash), unclamped.
    - `value(x, y)`: the selected output clamped to [0, 1]; CellID is the low
      byte of the nearest hash over 255.
    - `sample(x, y)`: the value as an opaque gray.
- Side Effects: None.
- Invariants:
    - F1 <= F2 for every pixel, so F2 - F1 >= 0.
    - Zero frequency falls back to the default.
================================================================================
"""

import enum
import math

from . import config as DEFAULTS
from .core import ColorModel, Null, gray8_color
from .hashing import stable_hash
from .options import Frequency, Seeded


class Metric(enum.Enum):
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"


class WorleyOutput(enum.Enum):
    F1 = "f1"
    F2 = "f2"
    F2_MINUS_F1 = "f2-f1"
    CELL_ID = "cell_id"


def _distance(metric: Metric, dx: float, dy: float) -> float:
    if metric is Metric.MANHATTAN:
        return dx + dy
    if metric is Metric.CHEBYSHEV:
        return max(dx, dy)
    return math.sqrt(dx * dx + dy * dy)


class WorleyNoise(Seeded, Frequency, Null):
    model = ColorModel.GRAY

    def __init__(self, *options):
        self.seed = DEFAULTS.DEFAULT_SEED
        self.frequency = DEFAULTS.WORLEY_FREQUENCY
        self.jitter = DEFAULTS.WORLEY_JITTER
        self.metric = Metric.EUCLIDEAN
        self.output = WorleyOutput.F1
        super().__init__(*options)

    def set_worley_metric(self, metric: Metric):
        self.metric = Metric(metric)

    def set_worley_output(self, output: WorleyOutput):
        self.output = WorleyOutput(output)

    def set_worley_jitter(self, value: float):
        self.jitter = float(value)

    def distances(self, x: int, y: int) -> tuple:
        freq = self.frequency or DEFAULTS.WORLEY_FREQUENCY
        nx, ny = x * freq, y * freq
        ix, iy = math.floor(nx), math.floor(ny)
        fx, fy = nx - ix, ny - iy

        f1 = math.inf
        f2 = math.inf
        nearest = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                h = stable_hash(ix + dx, iy + dy, self.seed)
                px = dx + (h & 0xFFFF) / 65535.0 * self.jitter
                py = dy + ((h >> 16) & 0xFFFF) / 65535.0 * self.jitter
                d = _distance(self.metric, abs(px - fx), abs(py - fy))
                if d < f1:
                    f2 = f1
                    f1 = d
                    nearest = h
                elif d < f2:
                    f2 = d
        return f1, f2, nearest

    def value(self, x: int, y: int) -> float:
        f1, f2, nearest = self.distances(x, y)
        if self.output is WorleyOutput.CELL_ID:
            return (nearest & 0xFF) / 255.0
        if self.output is WorleyOutput.F2:
            v = f2
        elif self.output is WorleyOutput.F2_MINUS_F1:
            v = f2 - f1
        else:
            v = f1
        return min(max(v, 0.0), 1.0)

    def sample(self, x: int, y: int):
        if self.output is WorleyOutput.CELL_ID:
            return gray8_color(self.distances(x, y)[2])
        return gray8_color(int(self.value(x, y) * 255))

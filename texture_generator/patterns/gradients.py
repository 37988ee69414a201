# texture_generator/patterns/gradients.py

"""
================================================================================
GRADIENTS, RINGS, VORONOI & HEATMAPS
================================================================================
Nodes whose color is a smooth or piecewise function of position.

Data Contract:
---------------
- Inputs:
    - Gradients: start_color (default white), end_color (default black).
    - ConcentricRings: a color list, center and frequency.
    - Voronoi: seed points and their colors.
    - Heatmap: fn(u, v) -> z over x/y ranges, mapped through a z range.
- Outputs:
    - Colors; gradients interpolate in premultiplied RGBA.
- Side Effects: None.
- Invariants:
    - Linear t runs 0 -> 1 from the first to the last pixel of the bounds.
    - Radial t is 0 at min_radius and 1 at max_radius (default half the
      bounds' diagonal) from the center.
    - Voronoi resolves the nearest seed with a k-d tree built at construction.
================================================================================
"""

import math

import numpy as np
from scipy.spatial import cKDTree

from .. import config as DEFAULTS
from ..core import BLACK, TRANSPARENT, WHITE, Null, as_color, lerp_color
from ..options import Center, Frequency, StartEndColor


class _Gradient(StartEndColor, Null):
    def __init__(self, *options):
        self.start_color = WHITE
        self.end_color = BLACK
        super().__init__(*options)

    def t(self, x: int, y: int) -> float:
        raise NotImplementedError

    def sample(self, x: int, y: int):
        return lerp_color(self.start_color, self.end_color, self.t(x, y))


class LinearGradient(_Gradient):
    def __init__(self, *options):
        self.vertical = False
        super().__init__(*options)

    def set_vertical(self, enabled: bool):
        self.vertical = bool(enabled)

    def t(self, x: int, y: int) -> float:
        b = self.bounds()
        if self.vertical:
            return 0.0 if b.height <= 1 else (y - b.min_y) / (b.height - 1)
        return 0.0 if b.width <= 1 else (x - b.min_x) / (b.width - 1)


class RadialGradient(_Gradient):
    """t runs 0 -> 1 from min_radius (default 0) to max_radius (default half the diagonal)."""

    def __init__(self, *options):
        self.min_radius = 0.0
        self.max_radius = None
        super().__init__(*options)

    def set_min_radius(self, value: float):
        self.min_radius = float(value)

    def set_max_radius(self, value: float):
        self.max_radius = float(value)

    def t(self, x: int, y: int) -> float:
        b = self.bounds()
        cx = b.min_x + b.width // 2
        cy = b.min_y + b.height // 2
        outer = self.max_radius if self.max_radius is not None else math.hypot(b.width, b.height) / 2.0
        dist = math.hypot(x - cx, y - cy)
        span = outer - self.min_radius
        if span <= 0:
            return 0.0 if dist < self.min_radius else 1.0
        return (dist - self.min_radius) / span


class ConicGradient(_Gradient):
    """Sweeps once around the center, starting and ending at the -x axis."""

    def t(self, x: int, y: int) -> float:
        b = self.bounds()
        cx = b.min_x + b.width // 2
        cy = b.min_y + b.height // 2
        return (math.atan2(y - cy, x - cx) + math.pi) / (2.0 * math.pi)


class ConcentricRings(Center, Frequency, Null):
    def __init__(self, colors=None, *options):
        self.colors = [as_color(c) for c in colors] if colors else [BLACK, WHITE]
        self.frequency = DEFAULTS.RINGS_FREQUENCY
        super().__init__(*options)

    def sample(self, x: int, y: int):
        dist = math.hypot(x - self.center_x, y - self.center_y)
        if self.frequency != 0:
            dist *= self.frequency
        return self.colors[math.floor(dist) % len(self.colors)]


class Voronoi(Null):
    def __init__(self, points, colors, *options):
        self.points = [(int(px), int(py)) for px, py in (points or [])]
        self.colors = [as_color(c) for c in (colors or [])]
        self._tree = cKDTree(np.asarray(self.points, dtype=np.float64)) if self.points else None
        super().__init__(*options)

    def nearest(self, x: int, y: int) -> int:
        _, index = self._tree.query((x, y))
        return int(index)

    def sample(self, x: int, y: int):
        if self._tree is None:
            return TRANSPARENT
        if not self.colors:
            return BLACK
        return self.colors[self.nearest(x, y) % len(self.colors)]


class Heatmap(StartEndColor, Null):
    """Colors a scalar field: fn(u, v) evaluated over the x/y ranges."""

    def __init__(self, fn, *options):
        self.fn = fn
        self.x_range = (-1.0, 1.0)
        self.y_range = (-1.0, 1.0)
        self.z_range = (-1.0, 1.0)
        self.start_color = BLACK
        self.end_color = WHITE
        super().__init__(*options)

    def set_x_range(self, low: float, high: float):
        self.x_range = (float(low), float(high))

    def set_y_range(self, low: float, high: float):
        self.y_range = (float(low), float(high))

    def set_z_range(self, low: float, high: float):
        self.z_range = (float(low), float(high))

    def sample(self, x: int, y: int):
        if self.fn is None:
            return TRANSPARENT
        b = self.bounds()
        u = self.x_range[0] + (x - b.min_x) / b.width * (self.x_range[1] - self.x_range[0])
        v = self.y_range[0] + (y - b.min_y) / b.height * (self.y_range[1] - self.y_range[0])
        z0, z1 = self.z_range
        t = 0.5 if z1 == z0 else (self.fn(u, v) - z0) / (z1 - z0)
        return lerp_color(self.start_color, self.end_color, t)

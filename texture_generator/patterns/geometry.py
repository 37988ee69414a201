# texture_generator/patterns/geometry.py

"""
================================================================================
GEOMETRIC PRIMITIVES & LAYOUT
================================================================================
Shapes, stripes and repeating dot screens, plus the Grid layout composer.

Data Contract:
---------------
- Inputs:
    - Options only (see texture_generator.options); Checker additionally takes
      its two colors and Grid its rows of child nodes.
- Outputs:
    - Colors per pixel. Line and fill image sources, when set, take priority
      over the matching plain colors.
- Side Effects: None.
- Invariants:
    - Periodic patterns use floor modulo, so negative coordinates continue
      the pattern seamlessly.
    - A zero period never divides; the pattern degrades to its line color.
================================================================================
"""

import math

from .. import config as DEFAULTS
from ..core import BLACK, TRANSPARENT, WHITE, Null, Rect, as_color
from ..options import (
    Angle, FillColor, FillImageSource, LineColor, LineImageSource, LineSize, Phase, Radius,
    SpaceColor, SpaceSize, Spacing,
)


def _line(node, x: int, y: int):
    if node.line_image_source is not None:
        return node.line_image_source.sample(x, y)
    return as_color(node.line_color)


def _fill(node, x: int, y: int):
    if node.fill_image_source is not None:
        return node.fill_image_source.sample(x, y)
    return as_color(node.fill_color)


# --- Shapes ---

class Rectangle(FillColor, LineSize, LineColor, LineImageSource, Null):
    """A filled rectangle with an optional inset border; transparent outside."""

    def __init__(self, *options):
        self.fill_color = BLACK
        self.line_color = BLACK
        super().__init__(*options)

    def sample(self, x: int, y: int):
        b = self.bounds()
        if not b.contains(x, y):
            return TRANSPARENT
        ls = self.line_size
        if ls > 0:
            if y < b.min_y + ls or y >= b.max_y - ls or x < b.min_x + ls or x >= b.max_x - ls:
                if self.line_image_source is not None:
                    return self.line_image_source.sample(x, y)
                return as_color(self.line_color) if self.line_color is not None else BLACK
        return as_color(self.fill_color)


class Circle(LineSize, LineColor, LineImageSource, FillColor, FillImageSource, SpaceColor, Null):
    """
    The largest circle inscribed in the bounds. Geometry uses doubled integer
    coordinates so even and odd sizes center exactly on pixel centers.
    """

    def __init__(self, *options):
        self.line_color = BLACK
        super().__init__(*options)

    def sample(self, x: int, y: int):
        b = self.bounds()
        dx2 = (2 * x + 1) - (b.min_x + b.max_x)
        dy2 = (2 * y + 1) - (b.min_y + b.max_y)
        dist_sq = dx2 * dx2 + dy2 * dy2
        diameter = min(b.width, b.height)

        if dist_sq > diameter * diameter:
            return as_color(self.space_color)

        ls = self.line_size
        if ls > 0:
            inner = max(diameter - 2 * ls, 0)
            if dist_sq > inner * inner:
                return _line(self, x, y)
            return _fill(self, x, y)

        if self.fill_image_source is not None or self.fill_color is not None:
            return _fill(self, x, y)
        return _line(self, x, y)


# --- Stripes ---

class _Stripes(SpaceSize, LineSize, LineColor, SpaceColor, LineImageSource, Phase, Null):
    def __init__(self, *options):
        self.line_size = DEFAULTS.LINE_SIZE
        self.space_size = DEFAULTS.LINE_SPACE
        self.line_color = BLACK
        super().__init__(*options)

    def _stripe(self, coord: int, x: int, y: int):
        period = self.line_size + self.space_size
        if period <= 0:
            return as_color(self.line_color)
        if (coord - int(self.phase)) % period < self.line_size:
            return _line(self, x, y)
        return as_color(self.space_color)


class HorizontalLine(_Stripes):
    def sample(self, x: int, y: int):
        return self._stripe(y, x, y)


class VerticalLine(_Stripes):
    def sample(self, x: int, y: int):
        return self._stripe(x, x, y)


class Checker(SpaceSize, Null):
    """Alternating squares of side `space_size`, color1 at the origin."""

    def __init__(self, color1=BLACK, color2=WHITE, *options):
        self.color1 = as_color(color1)
        self.color2 = as_color(color2)
        self.space_size = DEFAULTS.CHECKER_SIZE
        super().__init__(*options)

    def sample(self, x: int, y: int):
        size = self.space_size if self.space_size > 0 else 1
        if (x // size + y // size) % 2 == 0:
            return self.color1
        return self.color2


class CrossHatch(SpaceSize, LineSize, LineColor, SpaceColor, LineImageSource, Null):
    """Parallel line families, one per angle; a pixel on any family is line."""

    def __init__(self, *options):
        self.line_size = DEFAULTS.LINE_SIZE
        self.space_size = DEFAULTS.CROSSHATCH_SPACE
        self.line_color = BLACK
        self.angles = list(DEFAULTS.CROSSHATCH_ANGLES)
        super().__init__(*options)

    def set_angles(self, values):
        self.angles = [float(v) for v in values]

    def set_angle(self, value: float):
        self.angles = [float(value)]

    def sample(self, x: int, y: int):
        period = float(self.line_size + self.space_size)
        if period <= 0:
            return as_color(self.line_color)
        for degrees in self.angles:
            theta = math.radians(degrees)
            d = x * math.cos(theta) + y * math.sin(theta)
            if d - period * math.floor(d / period) < self.line_size:
                return _line(self, x, y)
        return as_color(self.space_color)


# --- Dot Screens ---

class Polka(Radius, Spacing, FillColor, SpaceColor, Null):
    def __init__(self, *options):
        self.radius = DEFAULTS.POLKA_RADIUS
        self.spacing = DEFAULTS.POLKA_SPACING
        self.fill_color = BLACK
        self.space_color = WHITE
        super().__init__(*options)

    def sample(self, x: int, y: int):
        s = self.spacing
        if s <= 0:
            return as_color(self.space_color)
        dx = x % s - s // 2
        dy = y % s - s // 2
        if dx * dx + dy * dy < self.radius * self.radius:
            return as_color(self.fill_color)
        return as_color(self.space_color)


class ScreenTone(Radius, Spacing, Angle, FillColor, SpaceColor, Null):
    """A halftone dot screen on a grid rotated by `angle` degrees."""

    def __init__(self, *options):
        self.angle = DEFAULTS.SCREENTONE_ANGLE
        self.radius = DEFAULTS.SCREENTONE_RADIUS
        self.spacing = DEFAULTS.SCREENTONE_SPACING
        self.fill_color = BLACK
        self.space_color = WHITE
        super().__init__(*options)

    def sample(self, x: int, y: int):
        s = float(self.spacing)
        if s <= 0:
            return as_color(self.space_color)
        theta = math.radians(self.angle)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        u = x * cos_t + y * sin_t
        v = -x * sin_t + y * cos_t
        du = u % s - s / 2.0
        dv = v % s - s / 2.0
        if du * du + dv * dv < float(self.radius) ** 2:
            return as_color(self.fill_color)
        return as_color(self.space_color)


# --- Layout ---

class Grid(Null):
    """
    Lays child nodes out in rows and columns. Each column is as wide as its
    widest child and each row as tall as its tallest; children are sampled in
    their own coordinate frame. Empty cells and gaps are transparent.
    """

    def __init__(self, rows, fixed_size=None, *options):
        self.cells = {}
        for r, row in enumerate(rows or []):
            for c, node in enumerate(row or []):
                if node is not None:
                    self.cells[(r, c)] = node
        n_rows = max((r for r, _ in self.cells), default=-1) + 1
        n_cols = max((c for _, c in self.cells), default=-1) + 1
        self.col_widths = [0] * n_cols
        self.row_heights = [0] * n_rows
        for (r, c), node in self.cells.items():
            b = node.bounds()
            self.col_widths[c] = max(self.col_widths[c], b.width)
            self.row_heights[r] = max(self.row_heights[r], b.height)

        if fixed_size is not None:
            layout = Rect(0, 0, int(fixed_size[0]), int(fixed_size[1]))
        else:
            layout = Rect(0, 0, sum(self.col_widths), sum(self.row_heights))
        if layout.empty:
            layout = Rect(*DEFAULTS.DEFAULT_BOUNDS)
        super().__init__(*options, default_bounds=layout)

    @staticmethod
    def _locate(sizes, offset: int):
        start = 0
        for i, size in enumerate(sizes):
            if start <= offset < start + size:
                return i, start
            start += size
        return -1, 0

    def sample(self, x: int, y: int):
        b = self.bounds()
        col, cell_x = self._locate(self.col_widths, x - b.min_x)
        row, cell_y = self._locate(self.row_heights, y - b.min_y)
        node = self.cells.get((row, col))
        if node is None:
            return TRANSPARENT
        nb = node.bounds()
        lx = nb.min_x + (x - b.min_x - cell_x)
        ly = nb.min_y + (y - b.min_y - cell_y)
        if not nb.contains(lx, ly):
            return TRANSPARENT
        return node.sample(lx, ly)

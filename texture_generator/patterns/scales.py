# texture_generator/patterns/scales.py

"""
================================================================================
FISH SCALES
================================================================================
Overlapping discs on a staggered lattice. Where discs overlap, the one on the
highest row wins, so each row tucks under the next. Output is a height-like
gray: 1 at a disc center falling to 0 at its rim, black between discs.

Data Contract:
---------------
- Inputs: scale_radius, scale_x_spacing, scale_y_spacing.
- Outputs: Opaque grays.
- Side Effects: None.
- Invariants: Odd rows are shifted by half the x spacing.
================================================================================
"""

import math

from .. import config as DEFAULTS
from ..core import BLACK, ColorModel, Null, gray8_color


class Scales(Null):
    model = ColorModel.GRAY

    def __init__(self, *options):
        self.radius = DEFAULTS.SCALE_RADIUS
        self.spacing_x = DEFAULTS.SCALE_SPACING_X
        self.spacing_y = DEFAULTS.SCALE_SPACING_Y
        super().__init__(*options)

    def set_scale_radius(self, value: int):
        self.radius = int(value)

    def set_scale_x_spacing(self, value: int):
        self.spacing_x = int(value)

    def set_scale_y_spacing(self, value: int):
        self.spacing_y = int(value)

    def height(self, x: int, y: int):
        """Returns the top disc's height at (x, y), or None between discs."""
        r = self.radius if self.radius > 0 else 20
        sx = self.spacing_x if self.spacing_x > 0 else r
        sy = self.spacing_y if self.spacing_y > 0 else r
        rad_sq = float(r * r)

        best_row = None
        best = None
        for row in range(math.floor((y - r) / sy), math.ceil((y + r) / sy) + 1):
            offset = sx / 2.0 if row % 2 != 0 else 0.0
            dy = y - row * sy
            first = math.floor((x - r - offset) / sx)
            last = math.ceil((x + r - offset) / sx)
            for col in range(first, last + 1):
                dx = x - (col * sx + offset)
                dist_sq = dx * dx + dy * dy
                if dist_sq < rad_sq and (best_row is None or row > best_row):
                    best_row = row
                    best = math.sqrt(1.0 - dist_sq / rad_sq)
        return best

    def sample(self, x: int, y: int):
        h = self.height(x, y)
        if h is None:
            return BLACK
        return gray8_color(int(h * 255))

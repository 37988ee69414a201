# texture_generator/patterns/scatter.py

"""
================================================================================
SCATTER
================================================================================
Places at most one item per grid cell at a hashed position inside the cell,
and composites every item that reaches the pixel from the surrounding cells.

Data Contract:
---------------
- Inputs:
    - seed, scatter_frequency (cell size is 1 / frequency), scatter_density
      or density (chance a cell holds an item), scatter_max_overlap
      (neighbor radius in cells), scatter_generator(u, v, hash) -> (Color, z), space_color.
- Outputs:
    - The background (default opaque black) with candidates composited
      source-over in ascending z order.
- Side Effects: None.
- Invariants:
    - Hash bits 0-15 gate density, bits 16-31 and 32-47 place the item.
    - Fully transparent candidates are discarded before sorting.
================================================================================
"""

import math

from .. import config as DEFAULTS
from ..blend import over
from ..core import BLACK, TRANSPARENT, Color, Null, as_color
from ..hashing import stable_hash
from ..options import Seeded, SpaceColor


def _empty_item(u: float, v: float, h: int):
    return TRANSPARENT, 0.0


class Scatter(Seeded, SpaceColor, Null):
    def __init__(self, *options):
        self.seed = DEFAULTS.DEFAULT_SEED
        self.frequency = DEFAULTS.SCATTER_FREQUENCY
        self.density = DEFAULTS.SCATTER_DENSITY
        self.max_overlap = DEFAULTS.SCATTER_MAX_OVERLAP
        self.generator = _empty_item
        self.space_color = BLACK
        super().__init__(*options)

    def set_scatter_frequency(self, value: float):
        self.frequency = float(value)

    def set_scatter_density(self, value: float):
        self.density = float(value)

    set_density = set_scatter_density

    def set_scatter_generator(self, fn):
        self.generator = fn

    def set_scatter_max_overlap(self, value: int):
        self.max_overlap = int(value)

    def candidates(self, x: int, y: int) -> list:
        freq = self.frequency or DEFAULTS.SCATTER_FREQUENCY
        cell = 1.0 / freq
        gx, gy = math.floor(x * freq), math.floor(y * freq)
        reach = self.max_overlap or DEFAULTS.SCATTER_MAX_OVERLAP

        items = []
        for dy in range(-reach, reach + 1):
            for dx in range(-reach, reach + 1):
                cx, cy = gx + dx, gy + dy
                h = stable_hash(cx, cy, self.seed)
                if (h & 0xFFFF) / 65535.0 > self.density:
                    continue
                center_x = (cx + ((h >> 16) & 0xFFFF) / 65535.0) * cell
                center_y = (cy + ((h >> 32) & 0xFFFF) / 65535.0) * cell
                c, z = self.generator(x - center_x, y - center_y, h)
                c = as_color(c)
                if c.a > 0:
                    items.append((z, c))
        items.sort(key=lambda item: item[0])
        return items

    def sample(self, x: int, y: int):
        result = as_color(self.space_color).to_floats() if self.space_color is not None else BLACK.to_floats()
        for _, c in self.candidates(x, y):
            result = over(result, c.to_floats())
        return Color.from_floats(*result)

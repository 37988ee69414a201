# texture_generator/patterns/brick.py

"""
================================================================================
BRICK WALLS
================================================================================
Running-bond brick layouts. `Brick` fills bricks and mortar from image
sources; `ChippedBrick` shades them procedurally with per-brick tint, chipped
edges and recessed mortar.

Data Contract:
---------------
- Inputs:
    - brick_size, mortar_size, brick_offset (fraction of a cell that odd rows
      shift by), seed.
    - Brick: brick_images (hash-selected per brick), mortar_image.
    - ChippedBrick: chip_intensity, mortar_depth, hue_jitter.
- Outputs:
    - Opaque colors; each brick image is sampled in brick-local coordinates,
      wrapping when the brick is larger than the image.
- Side Effects: None.
- Invariants:
    - A cell is (width + mortar) x (height + mortar) with the brick centered
      and mortar / 2 of joint on the leading edges.
    - The brick chosen for a cell depends only on (col, row, seed).
================================================================================
"""

import math

from .. import config as DEFAULTS
from ..core import TRANSPARENT, Color, Null, as_color
from ..hashing import MORTAR_SALT, VIA_SALT, stable_hash
from ..options import Seeded


def _clamp(v: float, lo: float, hi: float) -> float:
    return min(max(v, lo), hi)


def _byte(v: float) -> int:
    return int(_clamp(v, 0.0, 255.0))


def bond_cell(x: int, y: int, cell_w: int, cell_h: int, offset: float) -> tuple:
    """Locates (x, y) in a running bond: returns (col, row, local_x, local_y)."""
    row = y // cell_h
    local_y = y % cell_h
    eff_x = x - (offset * cell_w if row % 2 != 0 else 0.0)
    col = math.floor(eff_x / cell_w)
    local_x = math.floor(eff_x) % cell_w
    return col, row, local_x, local_y


class _BrickLayout(Seeded, Null):
    def set_brick_size(self, width: int, height: int):
        self.brick_width, self.brick_height = int(width), int(height)

    def set_mortar_size(self, value: int):
        self.mortar = int(value)

    def set_brick_offset(self, value: float):
        self.offset = float(value)


class Brick(_BrickLayout):
    def __init__(self, *options):
        self.brick_width = DEFAULTS.BRICK_WIDTH
        self.brick_height = DEFAULTS.BRICK_HEIGHT
        self.mortar = DEFAULTS.BRICK_MORTAR
        self.offset = DEFAULTS.BRICK_OFFSET
        self.brick_images = []
        self.mortar_image = None
        super().__init__(*options)

    def set_brick_images(self, nodes):
        self.brick_images = list(nodes)

    def set_mortar_image(self, node):
        self.mortar_image = node

    def sample(self, x: int, y: int) -> Color:
        width = self.brick_width if self.brick_width > 0 else DEFAULTS.BRICK_WIDTH
        height = self.brick_height if self.brick_height > 0 else DEFAULTS.BRICK_HEIGHT
        mortar = self.mortar if self.mortar >= 0 else 2
        col, row, lx, ly = bond_cell(x, y, width + mortar, height + mortar, self.offset)

        half = mortar // 2
        if lx < half or lx >= half + width or ly < half or ly >= half + height:
            if self.mortar_image is not None:
                return self.mortar_image.sample(x, y)
            return as_color(DEFAULTS.MORTAR_COLOR)

        if not self.brick_images:
            return as_color(DEFAULTS.BRICK_COLOR)
        index = 0
        if len(self.brick_images) > 1:
            index = stable_hash(col, row, self.seed) % len(self.brick_images)
        image = self.brick_images[index]
        if image is None:
            return as_color(DEFAULTS.BRICK_COLOR)

        b = image.bounds()
        if b.width == 0 or b.height == 0:
            return TRANSPARENT
        return image.sample(b.min_x + (lx - half) % b.width, b.min_y + (ly - half) % b.height)


class ChippedBrick(_BrickLayout):
    """
    Procedural weathered brick. Each brick edge is displaced per row/column by
    hashed jitter so corners look chipped; pixels close to an edge darken, and
    mortar darkens towards the bricks to read as recessed.
    """

    def __init__(self, *options):
        self.brick_width = DEFAULTS.CHIPPED_BRICK_WIDTH
        self.brick_height = DEFAULTS.CHIPPED_BRICK_HEIGHT
        self.mortar = DEFAULTS.CHIPPED_BRICK_MORTAR
        self.offset = DEFAULTS.BRICK_OFFSET
        self.chip_intensity = DEFAULTS.CHIP_INTENSITY
        self.mortar_depth = DEFAULTS.MORTAR_DEPTH
        self.hue_jitter = DEFAULTS.HUE_JITTER
        super().__init__(*options)

    def set_chip_intensity(self, value: float):
        self.chip_intensity = float(value)

    def set_mortar_depth(self, value: float):
        self.mortar_depth = float(value)

    def set_hue_jitter(self, value: float):
        self.hue_jitter = float(value)

    def _edge_jitter(self, col: int, row: int, coord: int, salt: int, scale: float) -> float:
        if scale == 0:
            return 0.0
        h = stable_hash(col * 131 + coord, row * 197 + coord, self.seed ^ salt)
        return ((h & 0xFFFF) / 65535.0 - 0.5) * scale

    def _mortar(self, x: float, y: float, box: tuple, depth: float) -> Color:
        min_x, max_x, min_y, max_y = box
        noise = ((stable_hash(int(x), int(y), self.seed ^ MORTAR_SALT) & 0xFFFF) / 65535.0 - 0.5) * 12
        edge = min(min(abs(x - min_x), abs(x - max_x)), min(abs(y - min_y), abs(y - max_y)))
        shade = -depth * 28 * (1 - _clamp(edge / 3.0, 0.0, 1.0))
        v = DEFAULTS.MORTAR_BASE_LEVEL + noise + shade - depth * 6
        return Color(_byte(v), _byte(v - 2), _byte(v - 4), 255)

    def sample(self, x: int, y: int) -> Color:
        width = self.brick_width if self.brick_width > 0 else DEFAULTS.CHIPPED_BRICK_WIDTH
        height = self.brick_height if self.brick_height > 0 else DEFAULTS.CHIPPED_BRICK_HEIGHT
        mortar = self.mortar if self.mortar >= 0 else DEFAULTS.CHIPPED_BRICK_MORTAR
        chip = _clamp(self.chip_intensity, 0.0, 1.0)
        depth = _clamp(self.mortar_depth, 0.0, 1.0)
        hue_jitter = self.hue_jitter if self.hue_jitter > 0 else DEFAULTS.HUE_JITTER
        offset = self.offset or DEFAULTS.BRICK_OFFSET

        cell_w, cell_h = width + mortar, height + mortar
        col, row, local_x, local_y = bond_cell(x, y, cell_w, cell_h, offset)

        margin = mortar / 2.0
        scale = chip * (margin + 0.5)
        left = _clamp(margin + self._edge_jitter(col, row, local_y, 0x11, scale), 0.0, mortar)
        right = _clamp(margin + self._edge_jitter(col, row, local_y, 0x23, scale), 0.0, mortar)
        top = _clamp(margin + self._edge_jitter(col, row, local_x, 0x31, scale), 0.0, mortar)
        bottom = _clamp(margin + self._edge_jitter(col, row, local_x, 0x47, scale), 0.0, mortar)
        box = (left, cell_w - right, top, cell_h - bottom)

        lx, ly = float(local_x), float(local_y)
        if not (box[0] <= lx < box[1] and box[2] <= ly < box[3]):
            return self._mortar(lx, ly, box, depth)

        tint = (stable_hash(col, row, self.seed) & 0xFFFF) / 65535.0 - 0.5
        mix = _clamp(0.5 + tint * hue_jitter, 0.0, 1.0)
        noise = ((stable_hash(x, y, self.seed ^ VIA_SALT) & 0xFFFF) / 65535.0 - 0.5) * 6
        softness = max(0.0, min(lx - box[0], box[1] - lx, ly - box[2], box[3] - ly))
        chip_shade = -chip * 25 * (1.5 - softness) / 1.5 if softness < 1.5 else 0.0

        base_a, base_b = DEFAULTS.CHIPPED_BRICK_BASE_A, DEFAULTS.CHIPPED_BRICK_BASE_B
        r = base_a[0] + (base_b[0] - base_a[0]) * mix + noise + chip_shade
        g = base_a[1] + (base_b[1] - base_a[1]) * mix + noise * 0.7 + chip_shade * 0.7
        b = base_a[2] + (base_b[2] - base_a[2]) * mix + noise * 0.5 + chip_shade * 0.6
        return Color(_byte(r), _byte(g), _byte(b), 255)

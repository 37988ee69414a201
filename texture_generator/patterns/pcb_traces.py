# texture_generator/patterns/pcb_traces.py

"""
================================================================================
PCB TRACES
================================================================================
A printed-circuit look: the bounds are cut into square cells, each cell gets a
hashed trace profile (straight, corner or tee) running from its center to the
cell edges, and some cells carry a via pad. Copper sits on a jittered solder
mask that darkens in a halo around each trace.

Data Contract:
---------------
- Inputs:
    - line_size (trace width, default 3), seed (default 1337), pad_density,
      solder_mask_tint, copper_color. Default bounds are 192x192.
- Outputs:
    - Opaque copper or solder-mask colors inside the bounds; transparent
      outside.
- Side Effects: None.
- Invariants:
    - Cell size is max(4 * line_size, 10).
    - pad_density is clamped to [0, 1]; line_size is at least 1.
================================================================================
"""

import math
from typing import NamedTuple

from .. import config as DEFAULTS
from ..core import TRANSPARENT, Color, Null, Rect, as_color
from ..hashing import MASK64, MASK_JITTER_SALT, SHINE_SALT, VIA_SALT, stable_hash
from ..options import LineSize, Seeded


class CellProfile(NamedTuple):
    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False


# Cumulative roll thresholds out of 100; the remainder is a north/south/east tee.
_PROFILES = (
    (15, CellProfile(north=True, south=True)),
    (30, CellProfile(east=True, west=True)),
    (45, CellProfile(north=True, east=True)),
    (60, CellProfile(north=True, west=True)),
    (75, CellProfile(south=True, east=True)),
    (90, CellProfile(south=True, west=True)),
)
_TEE = CellProfile(north=True, south=True, east=True)


def _channel(v: float) -> int:
    if v < 0:
        return 0
    if v > 255:
        return 255
    return int(v + 0.5)


def _mix(a: Color, b: Color, t: float) -> Color:
    t = min(max(t, 0.0), 1.0)
    return Color(*(_channel(p * (1 - t) + q * t) for p, q in zip(a, b)))


def _segment_distance(ux: float, uy: float, x2: float, y2: float) -> float:
    """Distance from (ux, uy) to the segment from the origin to (x2, y2)."""
    length_sq = x2 * x2 + y2 * y2
    if length_sq == 0:
        return math.hypot(ux, uy)
    t = min(max((ux * x2 + uy * y2) / length_sq, 0.0), 1.0)
    return math.hypot(ux - t * x2, uy - t * y2)


class PCBTraces(LineSize, Seeded, Null):
    def __init__(self, *options):
        self.line_size = DEFAULTS.PCB_LINE_SIZE
        self.seed = DEFAULTS.PCB_SEED
        self.pad_density = DEFAULTS.PCB_PAD_DENSITY
        self.mask_tint = as_color(DEFAULTS.SOLDER_MASK_TINT)
        self.copper = as_color(DEFAULTS.COPPER_COLOR)
        super().__init__(*options, default_bounds=Rect(*DEFAULTS.PCB_BOUNDS))
        if self.line_size <= 0:
            self.line_size = 1
        self.pad_density = min(max(self.pad_density, 0.0), 1.0)

    def set_pad_density(self, value: float):
        self.pad_density = float(value)

    def set_solder_mask_tint(self, color):
        self.mask_tint = as_color(color)

    def set_copper_color(self, color):
        self.copper = as_color(color)

    def cell_profile(self, cx: int, cy: int) -> CellProfile:
        roll = stable_hash(cx, cy, self.seed) % 100
        for limit, profile in _PROFILES:
            if roll < limit:
                return profile
        return _TEE

    def has_via(self, cx: int, cy: int) -> bool:
        h = stable_hash(cx, cy, self.seed ^ VIA_SALT)
        return (h % 1000) / 1000.0 < self.pad_density

    def _mask(self, x: int, y: int) -> Color:
        noise = stable_hash(x, y, self.seed ^ MASK_JITTER_SALT) / MASK64
        delta = (noise - 0.5) * 14
        c = self.mask_tint
        return Color(_channel(c.r + delta), _channel(c.g + delta * 0.8), _channel(c.b + delta * 0.6), c.a)

    def sample(self, x: int, y: int) -> Color:
        b = self.bounds()
        if not b.contains(x, y):
            return TRANSPARENT

        cell = max(self.line_size * 4, DEFAULTS.PCB_MIN_CELL)
        px, py = x - b.min_x, y - b.min_y
        cx, cy = px // cell, py // cell
        profile = self.cell_profile(cx, cy)
        via = self.has_via(cx, cy)

        half = cell / 2.0
        ux = (px % cell) + 0.5 - half
        uy = (py % cell) + 0.5 - half
        width = max(1.0, float(self.line_size))
        run = half - width

        arms = []
        if profile.north:
            arms.append((0.0, -run))
        if profile.south:
            arms.append((0.0, run))
        if profile.west:
            arms.append((-run, 0.0))
        if profile.east:
            arms.append((run, 0.0))
        trace = min((_segment_distance(ux, uy, ax, ay) for ax, ay in arms), default=math.inf)
        via_dist = math.hypot(ux, uy)

        core = trace < width / 2 or (via and via_dist < width * 1.2)
        halo = trace < width * 1.5 or (via and via_dist < width * 1.6)

        if core:
            shine = stable_hash(x, y, self.seed ^ SHINE_SALT) / MASK64
            highlight = self.copper.a / 255 * 0.15 * 255 * (shine - 0.5)
            c = self.copper
            return Color(_channel(c.r + highlight), _channel(c.g + highlight), _channel(c.b + highlight), 255)

        mask = self._mask(x, y)
        if halo:
            mask = _mix(mask, as_color(DEFAULTS.SOLDER_MASK_SHADOW), 0.35)
        return mask

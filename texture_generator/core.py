# texture_generator/core.py

"""
================================================================================
CORE NODE SUBSTRATE
================================================================================
Colors, rectangles and the base node every texture is built from. A node is a
lazy pixel function: it has a rectangular default domain and answers
`sample(x, y)` with a Color, recursively querying its children. Nothing is
materialized until a collaborator (see render.py) asks for pixels.

Data Contract:
---------------
- Inputs:
    - Integer pixel coordinates; any (x, y) is legal, inside bounds or not.
- Outputs:
    - `Color` values: 8-bit straight-alpha RGBA. Computation happens on
      normalized floats; quantization happens at the last step.
- Side Effects: None. Nodes are immutable after construction.
- Invariants:
    - Every node has non-empty bounds; the default is 255x255 at the origin.
    - `sample` is total: it never raises for a well-formed node.
================================================================================
"""

import enum
from typing import Callable, NamedTuple

from . import config as DEFAULTS
from .options import apply_options


class ColorModel(enum.Enum):
    RGBA = "rgba"
    GRAY = "gray"
    NRGBA = "nrgba"


def _clamp01(v: float) -> float:
    if v < 0.0:
        return 0.0
    if v > 1.0:
        return 1.0
    return v


def _quantize(v: float) -> int:
    return int(_clamp01(v) * 255.0 + 0.5)


class Color(NamedTuple):
    """An 8-bit, straight (non-premultiplied) RGBA color."""
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Quantizes normalized straight-alpha channels, clamping to [0, 1]."""
        return cls(_quantize(r), _quantize(g), _quantize(b), _quantize(a))

    @classmethod
    def from_premultiplied(cls, r: float, g: float, b: float, a: float) -> "Color":
        a = _clamp01(a)
        if a <= 0.0:
            return TRANSPARENT
        return cls.from_floats(r / a, g / a, b / a, a)

    def to_floats(self) -> tuple:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def premultiplied(self) -> tuple:
        a = self.a / 255.0
        return (self.r / 255.0 * a, self.g / 255.0 * a, self.b / 255.0 * a, a)

    def rgba16(self) -> tuple:
        """Premultiplied 16-bit channels, matching the usual image-library model."""
        a = self.a * 0x101
        return (
            self.r * 0x101 * a // 0xFFFF,
            self.g * 0x101 * a // 0xFFFF,
            self.b * 0x101 * a // 0xFFFF,
            a,
        )

    def gray16(self) -> int:
        """ITU-R 601 luma of the premultiplied color, 16-bit."""
        r, g, b, _ = self.rgba16()
        return (19595 * r + 38470 * g + 7471 * b + (1 << 15)) >> 16

    def gray8(self) -> int:
        r, g, b, _ = self.rgba16()
        return (19595 * r + 38470 * g + 7471 * b + (1 << 15)) >> 24

    def luminance(self) -> float:
        """Weighted luminance in [0, 1] as used by the Sobel-based filters."""
        r, g, b, _ = self.rgba16()
        wr, wg, wb = DEFAULTS.LUMA_WEIGHTS
        return (wr * r + wg * g + wb * b) / 65535.0


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)


def gray_color(level: float) -> Color:
    """An opaque gray with `level` in [0, 1]."""
    v = int(round(_clamp01(level) * 255.0))
    return Color(v, v, v, 255)


def gray8_color(value: int) -> Color:
    v = int(value) & 0xFF
    return Color(v, v, v, 255)


def as_color(value) -> Color:
    """Accepts a Color, an (r, g, b[, a]) tuple or None (transparent)."""
    if value is None:
        return TRANSPARENT
    if isinstance(value, Color):
        return value
    return Color(*value)


def lerp_color(c1, c2, t: float) -> Color:
    """Interpolates two colors in premultiplied RGBA space."""
    c1, c2 = as_color(c1), as_color(c2)
    if t <= 0.0:
        return c1
    if t >= 1.0:
        return c2
    p1 = c1.premultiplied()
    p2 = c2.premultiplied()
    mixed = [a + t * (b - a) for a, b in zip(p1, p2)]
    return Color.from_premultiplied(*mixed)


class Rect(NamedTuple):
    """An axis-aligned rectangle; `max` is exclusive."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def empty(self) -> bool:
        return self.max_x <= self.min_x or self.max_y <= self.min_y

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def intersect(self, other: "Rect") -> "Rect":
        r = Rect(max(self.min_x, other.min_x), max(self.min_y, other.min_y),
                 min(self.max_x, other.max_x), min(self.max_y, other.max_y))
        if r.empty:
            return Rect(0, 0, 0, 0)
        return r

    def translate(self, dx: int, dy: int) -> "Rect":
        return Rect(self.min_x + dx, self.min_y + dy, self.max_x + dx, self.max_y + dy)


def rect(x0: int, y0: int, x1: int, y1: int) -> Rect:
    """Builds a canonical Rect, swapping corners if they are reversed."""
    if x0 > x1:
        x0, x1 = x1, x0
    if y0 > y1:
        y0, y1 = y1, y0
    return Rect(int(x0), int(y0), int(x1), int(y1))


DEFAULT_RECT = Rect(*DEFAULTS.DEFAULT_BOUNDS)


# --- Base Node ---

class Null:
    """
    The transparent placeholder node and the base for every other node.
    Owns the domain rectangle and the option application step.
    """
    model = ColorModel.RGBA

    def __init__(self, *options, default_bounds: Rect = DEFAULT_RECT):
        self._bounds = Rect(*default_bounds)
        apply_options(self, options)

    def bounds(self) -> Rect:
        return self._bounds

    def set_bounds(self, r):
        r = Rect(*r)
        if not r.empty:
            self._bounds = r

    def color_model(self) -> ColorModel:
        return self.model

    def sample(self, x: int, y: int) -> Color:
        return TRANSPARENT

    def at(self, x: int, y: int) -> Color:
        return self.sample(x, y)


class Uniform(Null):
    """A constant color everywhere."""

    def __init__(self, color=WHITE, *options):
        self.color = as_color(color)
        super().__init__(*options)

    def sample(self, x: int, y: int) -> Color:
        return self.color


class Maths(Null):
    """Wraps a plain `(x, y) -> color` function as a node."""

    def __init__(self, fn: Callable[[int, int], object], *options):
        self.fn = fn
        super().__init__(*options)

    def sample(self, x: int, y: int) -> Color:
        if self.fn is None:
            return TRANSPARENT
        return as_color(self.fn(x, y))


# --- Programmatic Surface ---

def bounds(node) -> Rect:
    return node.bounds()


def color_model(node) -> ColorModel:
    return node.color_model()


def sample(node, x: int, y: int) -> Color:
    if node is None:
        return TRANSPARENT
    return node.sample(x, y)

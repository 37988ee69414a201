# texture_generator/transforms.py

"""
================================================================================
DOMAIN TRANSFORMS
================================================================================
Nodes that wrap a single child and rewrite the coordinates it is sampled at:
warping, scaling, right-angle rotation, mirroring, cropping, padding,
clamping, tiling and transposition.

Data Contract:
---------------
- Inputs:
    - A child node (may be None; every transform then yields transparent).
    - Per-transform geometry (rectangles, factors, margins, degrees).
- Outputs:
    - Colors sampled from the child at transformed integer coordinates.
- Side Effects: None.
- Invariants:
    - O(1) arithmetic plus at most a constant number of child samples.
    - Tile(child, r) is periodic with the tile's width and height.
    - Clamp(Clamp(n, r), r) == Clamp(n, r) over r; Clamp never samples its
      child outside the child's bounds.
    - Rotate(Rotate(n, 90), 270) == n; Rotate(n, 180) == Rotate(Rotate(n, 90), 90).
    - Mirror(Mirror(n, h, v), h, v) == n.
================================================================================
"""

import logging
import math

from . import config as DEFAULTS
from .core import TRANSPARENT, Color, Null, Rect

logger = logging.getLogger(__name__)


def _child_bounds(child) -> Rect:
    if child is None:
        return Rect(0, 0, 0, 0)
    return child.bounds()


class Transform(Null):
    """Base for single-child wrappers; the color model follows the child."""

    def __init__(self, child, *options, default_bounds=None):
        self.child = child
        if default_bounds is None:
            default_bounds = _child_bounds(child)
        if Rect(*default_bounds).empty:
            default_bounds = Rect(*DEFAULTS.DEFAULT_BOUNDS)
        super().__init__(*options, default_bounds=default_bounds)

    def color_model(self):
        if self.child is None:
            return self.model
        return self.child.color_model()


# --- Warp ---

def _signed_level(node, x: int, y: int) -> float:
    """Gray of `node` at (x, y) mapped from [0, 1] to [-1, 1]."""
    return (node.sample(x, y).gray16() / 65535.0 - 0.5) * 2.0


class Warp(Transform):
    """
    Displaces the source lookup by the gray level of distortion nodes.
    A uniform mid-gray distortion leaves the source unchanged.
    """

    def __init__(self, source, *options):
        self.distortion = None
        self.distortion_x = None
        self.distortion_y = None
        self.scale = DEFAULTS.WARP_SCALE
        self.x_scale = 0.0
        self.y_scale = 0.0
        super().__init__(source, *options)

    @property
    def source(self):
        return self.child

    def set_warp_distortion(self, node):
        self.distortion = node

    def set_warp_distortion_x(self, node):
        self.distortion_x = node

    def set_warp_distortion_y(self, node):
        self.distortion_y = node

    def set_warp_scale(self, value: float):
        self.scale = float(value)

    def set_warp_x_scale(self, value: float):
        self.x_scale = float(value)

    def set_warp_y_scale(self, value: float):
        self.y_scale = float(value)

    def offset(self, x: int, y: int) -> tuple:
        dx = dy = 0.0
        if self.distortion is not None:
            v = _signed_level(self.distortion, x, y)
            dx += v * self.scale
            dy += v * self.scale
        if self.distortion_x is not None:
            dx += _signed_level(self.distortion_x, x, y) * (self.x_scale or self.scale)
        if self.distortion_y is not None:
            dy += _signed_level(self.distortion_y, x, y) * (self.y_scale or self.scale)
        return dx, dy

    def sample(self, x: int, y: int) -> Color:
        if self.child is None:
            return TRANSPARENT
        dx, dy = self.offset(x, y)
        return self.child.sample(math.floor(x + dx + 0.5), math.floor(y + dy + 0.5))


# --- Scaling ---

class Scale(Transform):
    """Anisotropic nearest-neighbor scaling about the origin."""

    def __init__(self, child, scale_x: float = 1.0, scale_y: float = None, *options):
        self.scale_x = self._factor(scale_x)
        self.scale_y = self._factor(scale_x if scale_y is None else scale_y)
        super().__init__(child, *options, default_bounds=self._scaled_bounds(child))

    @staticmethod
    def _factor(value) -> float:
        value = float(value)
        if value <= 0.0:
            logger.warning(f"Scale factor {value} is not positive; using 1.0.")
            return 1.0
        return value

    def _scaled_bounds(self, child) -> Rect:
        b = _child_bounds(child)
        if b.empty:
            return Rect(*DEFAULTS.DEFAULT_BOUNDS)
        x0 = math.floor(b.min_x * self.scale_x)
        y0 = math.floor(b.min_y * self.scale_y)
        x1 = max(math.ceil(b.max_x * self.scale_x), x0 + 1)
        y1 = max(math.ceil(b.max_y * self.scale_y), y0 + 1)
        return Rect(x0, y0, x1, y1)

    def set_scale_x(self, value: float):
        self.scale_x = self._factor(value)
        self._bounds = self._scaled_bounds(self.child)

    def set_scale_y(self, value: float):
        self.scale_y = self._factor(value)
        self._bounds = self._scaled_bounds(self.child)

    def sample(self, x: int, y: int) -> Color:
        if self.child is None:
            return TRANSPARENT
        return self.child.sample(math.floor(x / self.scale_x), math.floor(y / self.scale_y))


def scale_to_size(child, width: int, height: int, *options) -> Scale:
    """Scales `child` so its bounds become roughly width x height."""
    b = _child_bounds(child)
    sx = width / b.width if b.width > 0 else 1.0
    sy = height / b.height if b.height > 0 else 1.0
    return Scale(child, sx, sy, *options)


class SimpleZoom(Transform):
    """Integer pixel-replicating zoom."""

    def __init__(self, child, factor: int, *options):
        self.factor = int(factor) if int(factor) > 0 else 1
        b = _child_bounds(child)
        super().__init__(child, *options,
                         default_bounds=Rect(b.min_x, b.min_y, b.max_x * self.factor, b.max_y * self.factor))

    def sample(self, x: int, y: int) -> Color:
        if self.child is None:
            return TRANSPARENT
        return self.child.sample(x // self.factor, y // self.factor)


# --- Rotation & Flips ---

class Rotate(Transform):
    def __init__(self, child, degrees: int, *options):
        d = int(degrees) % 360
        if d % 90 != 0:
            logger.warning(f"Rotation by {degrees} degrees is not a right angle; using 0.")
            d = 0
        self.degrees = d
        b = _child_bounds(child)
        if d in (90, 270):
            default_bounds = Rect(b.min_x, b.min_y, b.min_x + b.height, b.min_y + b.width)
        else:
            default_bounds = b
        super().__init__(child, *options, default_bounds=default_bounds)

    def sample(self, x: int, y: int) -> Color:
        if self.child is None:
            return TRANSPARENT
        cb = self.child.bounds()
        w, h = cb.width, cb.height
        dx = x - cb.min_x
        dy = y - cb.min_y
        if self.degrees == 90:
            sx, sy = dy, h - 1 - dx
        elif self.degrees == 180:
            sx, sy = w - 1 - dx, h - 1 - dy
        elif self.degrees == 270:
            sx, sy = w - 1 - dy, dx
        else:
            sx, sy = dx, dy
        return self.child.sample(cb.min_x + sx, cb.min_y + sy)


class Mirror(Transform):
    def __init__(self, child, horizontal: bool = True, vertical: bool = False, *options):
        self.horizontal = bool(horizontal)
        self.vertical = bool(vertical)
        super().__init__(child, *options)

    def sample(self, x: int, y: int) -> Color:
        if self.child is None:
            return TRANSPARENT
        b = self.child.bounds()
        sx = b.min_x + b.max_x - 1 - x if self.horizontal else x
        sy = b.min_y + b.max_y - 1 - y if self.vertical else y
        return self.child.sample(sx, sy)


# --- Windowing ---

class Crop(Transform):
    def __init__(self, child, rect, *options):
        self.rect = Rect(*rect)
        super().__init__(child, *options, default_bounds=self.rect)

    def sample(self, x: int, y: int) -> Color:
        if self.child is None or not self.rect.contains(x, y):
            return TRANSPARENT
        return self.child.sample(x, y)


class Padding(Transform):
    """
    Places the child inside margins. Outside the inner area the background
    node shows through, or transparent when there is none.
    """

    def __init__(self, child, *options, top: int = 0, left: int = 0, bottom: int = 0,
                 right: int = 0, margin: int = None, background=None, boundary=None):
        if margin is not None:
            top = left = bottom = right = int(margin)
        self.top, self.left, self.bottom, self.right = int(top), int(left), int(bottom), int(right)
        self.background = background
        if boundary is not None and not Rect(*boundary).empty:
            final = Rect(*boundary)
        else:
            b = _child_bounds(child)
            final = Rect(0, 0, b.width + self.left + self.right, b.height + self.top + self.bottom)
        super().__init__(child, *options, default_bounds=final)

    def sample(self, x: int, y: int) -> Color:
        b = self.bounds()
        inner_min_x = b.min_x + self.left
        inner_min_y = b.min_y + self.top
        if (self.child is not None and inner_min_x <= x < b.max_x - self.right
                and inner_min_y <= y < b.max_y - self.bottom):
            cb = self.child.bounds()
            lx = x - inner_min_x + cb.min_x
            ly = y - inner_min_y + cb.min_y
            if cb.contains(lx, ly):
                return self.child.sample(lx, ly)
        if self.background is not None:
            return self.background.sample(x, y)
        return TRANSPARENT


def center(child, width: int, height: int, background=None) -> Padding:
    """Centers `child` in a width x height canvas."""
    b = _child_bounds(child)
    mx = max((width - b.width) // 2, 0)
    my = max((height - b.height) // 2, 0)
    return Padding(child, top=my, left=mx,
                   bottom=max(height - b.height - my, 0), right=max(width - b.width - mx, 0),
                   background=background, boundary=Rect(0, 0, width, height))


def aligned(child, width: int, height: int, x_align: float, y_align: float,
            background=None, *padding: int) -> Padding:
    """
    Places `child` in a width x height canvas at fractional alignment.
    `padding` follows CSS shorthand: (all), (vertical, horizontal) or
    (top, right, bottom, left).
    """
    b = _child_bounds(child)
    pad_top = pad_right = pad_bottom = pad_left = 0
    if len(padding) >= 4:
        pad_top, pad_right, pad_bottom, pad_left = padding[:4]
    elif len(padding) >= 2:
        pad_top = pad_bottom = padding[0]
        pad_left = pad_right = padding[1]
    elif len(padding) == 1:
        pad_top = pad_right = pad_bottom = pad_left = padding[0]

    avail_w = width - b.width - pad_left - pad_right
    avail_h = height - b.height - pad_top - pad_bottom
    left = pad_left + max(int(avail_w * x_align), 0)
    top = pad_top + max(int(avail_h * y_align), 0)
    return Padding(child, top=top, left=left,
                   bottom=max(height - b.height - top, 0), right=max(width - b.width - left, 0),
                   background=background, boundary=Rect(0, 0, width, height))


class Clamp(Transform):
    """
    Edge extension: coordinates outside the child's bounds snap to its
    nearest edge pixel. `rect` is only the presented domain.
    """

    def __init__(self, child, rect=None, *options):
        self.rect = Rect(*rect) if rect is not None else _child_bounds(child)
        super().__init__(child, *options, default_bounds=self.rect if not self.rect.empty else None)

    def sample(self, x: int, y: int) -> Color:
        r = _child_bounds(self.child)
        if r.empty:
            return TRANSPARENT
        cx = min(max(x, r.min_x), r.max_x - 1)
        cy = min(max(y, r.min_y), r.max_y - 1)
        return self.child.sample(cx, cy)


class Tile(Transform):
    """
    Repeats the `tile_rect` window of the child (its bounds by default)
    across the whole plane; `bounds` is the presented domain.
    """

    def __init__(self, child, bounds, tile_rect=None, *options):
        self.tile_rect = Rect(*tile_rect) if tile_rect is not None else _child_bounds(child)
        super().__init__(child, *options, default_bounds=Rect(*bounds))

    def sample(self, x: int, y: int) -> Color:
        t = self.tile_rect
        if self.child is None or t.empty:
            return TRANSPARENT
        return self.child.sample((x - t.min_x) % t.width + t.min_x,
                                 (y - t.min_y) % t.height + t.min_y)


class Transpose(Transform):
    """Swaps the axes, with optional offsets and per-axis strides."""

    def __init__(self, child, offset_x: int = 0, offset_y: int = 0,
                 stride_x: int = 1, stride_y: int = 1, *options):
        self.offset_x, self.offset_y = int(offset_x), int(offset_y)
        self.stride_x, self.stride_y = int(stride_x), int(stride_y)
        b = _child_bounds(child)
        super().__init__(child, *options, default_bounds=Rect(b.min_y, b.min_x, b.max_y, b.max_x))

    def sample(self, x: int, y: int) -> Color:
        if self.child is None:
            return TRANSPARENT
        return self.child.sample(y * self.stride_y + self.offset_x,
                                 x * self.stride_x + self.offset_y)

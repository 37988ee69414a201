# texture_generator/blend.py

"""
================================================================================
PER-PIXEL BLENDING
================================================================================
Combines two nodes with one of a fixed set of blend modes.

Data Contract:
---------------
- Inputs:
    - a: The base node. b: The layer on top. mode: a BlendMode.
- Outputs:
    - NORMAL: standard source-over compositing of b atop a.
    - Other modes: per-channel function of the straight, normalized channels;
      the output alpha is the mean of both alphas.
- Side Effects: None.
- Invariants:
    - Blend(x, fully transparent, NORMAL) == x exactly.
    - Blend(x, black, MULTIPLY) has black RGB.
    - All outputs are clamped to [0, 1] before quantization.
================================================================================
"""

import enum

from .core import TRANSPARENT, Color, Null


class BlendMode(enum.Enum):
    NORMAL = "normal"
    ADD = "add"
    MULTIPLY = "multiply"
    AVERAGE = "average"
    SCREEN = "screen"
    OVERLAY = "overlay"


def _overlay(a: float, b: float) -> float:
    if a < 0.5:
        return 2.0 * a * b
    return 1.0 - 2.0 * (1.0 - a) * (1.0 - b)


_CHANNEL_FUNCTIONS = {
    BlendMode.ADD: lambda a, b: a + b,
    BlendMode.MULTIPLY: lambda a, b: a * b,
    BlendMode.AVERAGE: lambda a, b: (a + b) / 2.0,
    BlendMode.SCREEN: lambda a, b: 1.0 - (1.0 - a) * (1.0 - b),
    BlendMode.OVERLAY: _overlay,
}


def over(base: tuple, top: tuple) -> tuple:
    """Source-over on straight, normalized (r, g, b, a) float tuples."""
    br, bg, bb, ba = base
    tr, tg, tb, ta = top
    out_a = ta + ba * (1.0 - ta)
    if out_a <= 0.0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        (tr * ta + br * ba * (1.0 - ta)) / out_a,
        (tg * ta + bg * ba * (1.0 - ta)) / out_a,
        (tb * ta + bb * ba * (1.0 - ta)) / out_a,
        out_a,
    )


def source_over(base: Color, top: Color) -> Color:
    if top.a == 0:
        return base
    if top.a == 255:
        return top
    return Color.from_floats(*over(base.to_floats(), top.to_floats()))


def blend_colors(a: Color, b: Color, mode: BlendMode) -> Color:
    if mode is BlendMode.NORMAL:
        return source_over(a, b)
    fn = _CHANNEL_FUNCTIONS[mode]
    ar, ag, ab, aa = a.to_floats()
    br, bg, bb, ba = b.to_floats()
    return Color.from_floats(fn(ar, br), fn(ag, bg), fn(ab, bb), (aa + ba) / 2.0)


class Blend(Null):
    def __init__(self, a, b, mode: BlendMode = BlendMode.NORMAL, *options):
        self.a = a
        self.b = b
        self.mode = BlendMode(mode)
        base = a if a is not None else b
        if base is not None:
            super().__init__(*options, default_bounds=base.bounds())
        else:
            super().__init__(*options)

    def sample(self, x: int, y: int) -> Color:
        if self.a is None and self.b is None:
            return TRANSPARENT
        if self.b is None:
            return self.a.sample(x, y)
        if self.a is None:
            return self.b.sample(x, y)
        return blend_colors(self.a.sample(x, y), self.b.sample(x, y), self.mode)

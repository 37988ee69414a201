# texture_generator/color_map.py

"""
================================================================================
COLOR RAMP REMAPPING
================================================================================
Maps the 16-bit luminance of a source node through a piecewise-linear ramp of
color stops.

Data Contract:
---------------
- Inputs:
    - source: Any node (None yields transparent).
    - stops: ColorStop(position in [0, 1], color), in any order. Option
      callables (e.g. bounds) may be mixed in with the stops.
- Outputs:
    - The ramp color at t = gray16(source(x, y)) / 65535.
- Side Effects: None.
- Invariants:
    - Stops are sorted once, stably, at construction.
    - t <= first position gives the first color; t >= last gives the last.
    - With duplicate positions, the later stop wins at that position.
    - Interpolation happens in premultiplied RGBA.
    - With no stops the source color passes through unchanged.
================================================================================
"""

from typing import NamedTuple

from .core import TRANSPARENT, Color, Null, as_color, lerp_color


class ColorStop(NamedTuple):
    position: float
    color: Color


def stop(position: float, color) -> ColorStop:
    return ColorStop(float(position), as_color(color))


class ColorMap(Null):
    def __init__(self, source, *stops):
        self.source = source
        options = [s for s in stops if callable(s)]
        self.stops = sorted((stop(*s) for s in stops if not callable(s)), key=lambda s: s.position)
        default_bounds = source.bounds() if source is not None else None
        if default_bounds is not None:
            super().__init__(*options, default_bounds=default_bounds)
        else:
            super().__init__(*options)

    def color_at(self, t: float) -> Color:
        stops = self.stops
        if t < stops[0].position:
            return stops[0].color
        if t >= stops[-1].position:
            return stops[-1].color

        # Last stop whose position is <= t starts the bracketing segment.
        i = 0
        for k, s in enumerate(stops):
            if s.position <= t:
                i = k
            else:
                break
        lo, hi = stops[i], stops[i + 1]
        span = hi.position - lo.position
        if span <= 0.0:
            return hi.color
        return lerp_color(lo.color, hi.color, (t - lo.position) / span)

    def sample(self, x: int, y: int) -> Color:
        if self.source is None:
            return TRANSPARENT
        c = self.source.sample(x, y)
        if not self.stops:
            return c
        return self.color_at(c.gray16() / 65535.0)

# texture_generator/patterns/text.py

"""
================================================================================
TEXT
================================================================================
A single line of text drawn with Pillow's built-in default font.

Data Contract:
---------------
- Inputs:
    - text; options fill_color (glyphs, default black) and space_color
      (background, default transparent).
- Outputs:
    - Glyph coverage blended from the space color to the fill color.
- Side Effects:
    - The glyph mask is rasterized on first sample, once, under a lock.
- Invariants:
    - Bounds are the measured text box at the origin, at least 1x1.
================================================================================
"""

import threading

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .. import config as DEFAULTS
from ..core import Null, Rect, as_color, lerp_color
from ..options import FillColor, SpaceColor


class Text(FillColor, SpaceColor, Null):
    def __init__(self, text: str, *options):
        self.text = str(text)
        self.fill_color = DEFAULTS.TEXT_FILL_COLOR
        self._font = ImageFont.load_default()
        left, top, right, bottom = self._font.getbbox(self.text) if self.text else (0, 0, 1, 1)
        self._mask = None
        self._lock = threading.Lock()
        super().__init__(*options, default_bounds=Rect(0, 0, max(int(right), 1), max(int(bottom), 1)))

    def _generate(self) -> np.ndarray:
        if self._mask is not None:
            return self._mask
        with self._lock:
            if self._mask is None:
                b = self.bounds()
                image = Image.new("L", (b.width, b.height), 0)
                ImageDraw.Draw(image).text((0, 0), self.text, fill=255, font=self._font)
                self._mask = np.asarray(image, dtype=np.uint8)
        return self._mask

    def coverage(self, x: int, y: int) -> float:
        mask = self._generate()
        b = self.bounds()
        lx, ly = x - b.min_x, y - b.min_y
        if 0 <= ly < mask.shape[0] and 0 <= lx < mask.shape[1]:
            return mask[ly, lx] / 255.0
        return 0.0

    def sample(self, x: int, y: int):
        return lerp_color(as_color(self.space_color), as_color(self.fill_color), self.coverage(x, y))

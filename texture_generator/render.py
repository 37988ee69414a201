# texture_generator/render.py

"""
================================================================================
RASTERIZATION & PNG ENCODING
================================================================================
Turns a lazy node into pixels. This is the only place where nodes are
materialized; everything upstream is a pure per-pixel function.

Data Contract:
---------------
- Inputs:
    - node: Any node. rect: the region to render (defaults to node bounds).
- Outputs:
    - render(): a (height, width, 4) uint8 numpy array in straight RGBA.
    - encode_png(): PNG bytes via Pillow. save_png(): a file on disk.
- Side Effects: save_png() writes to the filesystem.
- Invariants:
    - Row y of the array is node row rect.min_y + y.
    - Rendering the same node twice produces identical arrays.
================================================================================
"""

import io
import logging
import os

import numpy as np
from PIL import Image

from .core import Rect

logger = logging.getLogger(__name__)


def _region(node, rect) -> Rect:
    if rect is None:
        return node.bounds()
    return Rect(*rect)


def render_rows(node, rect, y0: int, y1: int) -> np.ndarray:
    """
    Renders rows [y0, y1) of `rect`, given as offsets from rect.min_y.
    Used by bake workers that split a texture into horizontal bands.
    """
    r = _region(node, rect)
    y0 = max(0, y0)
    y1 = min(r.height, y1)
    out = np.zeros((max(0, y1 - y0), max(0, r.width), 4), dtype=np.uint8)
    for row, y in enumerate(range(r.min_y + y0, r.min_y + y1)):
        line = out[row]
        for col, x in enumerate(range(r.min_x, r.max_x)):
            line[col] = node.sample(x, y)
    return out


def render(node, rect=None) -> np.ndarray:
    r = _region(node, rect)
    return render_rows(node, r, 0, r.height)


def to_image(array: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(array, dtype=np.uint8), "RGBA")


def encode_png(node, rect=None) -> bytes:
    buffer = io.BytesIO()
    to_image(render(node, rect)).save(buffer, "PNG")
    return buffer.getvalue()


def save_png(node, path: str, rect=None) -> str:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    to_image(render(node, rect)).save(path, "PNG")
    logger.debug(f"Saved {path}")
    return path

# texture_generator/__init__.py

"""
Procedural 2D texture synthesis. Nodes are lazy pixel functions composed into
trees; `render` materializes them. Importing `texture_generator.catalog`
registers the named textures.
"""

from .blend import Blend, BlendMode
from .bluenoise import BlueNoise
from .boolean import And, Boolean, BooleanMode, BooleanOp, Not, Or, Xor
from .color_map import ColorMap, ColorStop
from .core import BLACK, TRANSPARENT, WHITE, Color, ColorModel, Maths, Null, Rect, Uniform, rect
from .hashing import stable_hash
from .noise import CryptoNoise, HashNoise, Noise, PerlinNoise, SimplexNoise
from .plasma import Plasma
from .registry import get_generator, get_references, list_names
from .render import encode_png, render, save_png
from .transforms import (
    Clamp, Crop, Mirror, Padding, Rotate, Scale, SimpleZoom, Tile, Transpose, Warp, aligned, center,
    scale_to_size,
)
from .worley import Metric, WorleyNoise, WorleyOutput

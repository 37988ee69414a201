# texture_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for every
texture node. These values are used when a node is constructed without an
option overriding them.

DO NOT MODIFY THIS FILE FOR A SPECIFIC TEXTURE.
Instead, pass options (see texture_generator.options) to the node constructor.
================================================================================
"""

# --- Domain ---
# (min_x, min_y, max_x, max_y), max exclusive.
DEFAULT_BOUNDS = (0, 0, 255, 255)
PLASMA_BOUNDS = (0, 0, 256, 256)
BLUE_NOISE_BOUNDS = (0, 0, 64, 64)
PCB_BOUNDS = (0, 0, 192, 192)
# Used by filters and dithers when their source is missing.
ORPHAN_FILTER_BOUNDS = (0, 0, 100, 100)

# --- Seeds ---
DEFAULT_SEED = 0
PLASMA_SEED = 1
BLUE_NOISE_SEED = 1
PCB_SEED = 1337

# --- Gradient Noise (fBm) ---
PERLIN_FREQUENCY = 0.02
PERLIN_OCTAVES = 3
PERLIN_PERSISTENCE = 0.5 # Amplitude ratio between octaves ("alpha")
PERLIN_LACUNARITY = 2.0 # Frequency ratio between octaves ("beta")
# Simplex output is scaled by this factor to land roughly in [-1, 1].
SIMPLEX_OUTPUT_SCALE = 70.0

# --- Cellular Noise ---
WORLEY_FREQUENCY = 0.05
WORLEY_JITTER = 1.0

# --- Diamond-Square ---
PLASMA_ROUGHNESS = 1.0

# --- Warp ---
WARP_SCALE = 20.0

# --- Geometric Patterns ---
CHECKER_SIZE = 10
LINE_SIZE = 1
LINE_SPACE = 1
CROSSHATCH_SPACE = 5
CROSSHATCH_ANGLES = (45.0,)
POLKA_RADIUS = 10
POLKA_SPACING = 40
SCREENTONE_ANGLE = 45.0
SCREENTONE_RADIUS = 2
SCREENTONE_SPACING = 10
RINGS_FREQUENCY = 1.0

# --- Scatter ---
SCATTER_FREQUENCY = 0.05
SCATTER_DENSITY = 1.0
SCATTER_MAX_OVERLAP = 1

# --- Filters ---
NORMAL_MAP_STRENGTH = 1.0
EDGE_SENSITIVITY = 1.0
# ITU-R 601 luma weights used by the Sobel filters.
LUMA_WEIGHTS = (0.299, 0.587, 0.114)
HALFTONE_SIZE = 4

# --- Brick ---
BRICK_WIDTH = 40
BRICK_HEIGHT = 20
BRICK_MORTAR = 4
BRICK_OFFSET = 0.5
BRICK_COLOR = (180, 50, 50, 255)
MORTAR_COLOR = (200, 200, 200, 255)

CHIPPED_BRICK_WIDTH = 48
CHIPPED_BRICK_HEIGHT = 22
CHIPPED_BRICK_MORTAR = 3
CHIP_INTENSITY = 0.35
MORTAR_DEPTH = 0.7
HUE_JITTER = 0.15
CHIPPED_BRICK_BASE_A = (170, 70, 55)
CHIPPED_BRICK_BASE_B = (200, 95, 70)
MORTAR_BASE_LEVEL = 190.0

# --- Scales ---
SCALE_RADIUS = 30
SCALE_SPACING_X = 30
SCALE_SPACING_Y = 20 # Less than the radius so rows overlap

# --- PCB Traces ---
PCB_LINE_SIZE = 3
PCB_PAD_DENSITY = 0.14
PCB_MIN_CELL = 10
SOLDER_MASK_TINT = (14, 82, 44, 255)
SOLDER_MASK_SHADOW = (10, 40, 20, 255)
COPPER_COLOR = (200, 140, 60, 255)

# --- Text ---
TEXT_FILL_COLOR = (0, 0, 0, 255)

# --- Bake CLI ---
BAKE_OUTPUT_DIR = "baked_textures"
BAKE_WIDTH = 255
BAKE_HEIGHT = 255
BAKE_BAND_HEIGHT = 32

# texture_generator/catalog.py

"""
================================================================================
NAMED TEXTURE CATALOG
================================================================================
Builds the named textures the bake CLI and viewer know about, and registers
them with `registry` when this module is imported.

Data Contract:
---------------
- Inputs:
    - Each generator takes the Rect the caller wants to fill.
- Outputs:
    - generators: a Node per name. references: the named sub-layers a
      composite was built from, plus their display order.
- Side Effects:
    - Importing this module populates the registry exactly once.
- Invariants:
    - Every generator is deterministic: same name and rect, same pixels.
================================================================================
"""

import math

from . import options as opt
from .blend import Blend, BlendMode
from .bluenoise import BlueNoise
from .boolean import BooleanMode, Or, Xor, fuzzy_gray
from .color_map import ColorMap
from .core import BLACK, TRANSPARENT, WHITE, Null, Rect, Uniform, lerp_color
from .noise import Noise, PerlinNoise, SimplexNoise
from .patterns import (
    Brick, Checker, ChippedBrick, Circle, ConcentricRings, ConicGradient, CrossHatch, EdgeDetect,
    Grid, Heatmap, HorizontalLine, LinearGradient, NormalMap, PCBTraces, Polka, RadialGradient,
    RandomDither, Rectangle, Scales, Scatter, ScreenTone, Text, VerticalLine, Voronoi, bayer_dither,
    halftone_dither,
)
from .plasma import Plasma
from .registry import register_generator, register_references
from .transforms import Mirror, Rotate, SimpleZoom, Tile, Warp, scale_to_size
from .worley import Metric, WorleyNoise, WorleyOutput


def perlin(rect, seed: int, **params) -> Noise:
    """A Noise node driven by fBm Perlin noise with the given parameters."""
    return Noise(opt.bounds(rect), opt.seed(seed), opt.noise_algorithm(PerlinNoise(**params)))


# --- Lava ---

def lava_layers(rect) -> dict:
    base = perlin(rect, 1234, frequency=0.03, octaves=4, persistence=0.6)
    distortion = perlin(rect, 5678, frequency=0.02, octaves=2)
    warped = Warp(base, opt.warp_distortion(distortion), opt.warp_scale(30.0))
    lava = ColorMap(
        warped,
        (0.0, (20, 0, 0)),
        (0.2, (80, 0, 0)),
        (0.4, (200, 20, 0)),
        (0.7, (255, 140, 0)),
        (0.9, (255, 255, 0)),
        (1.0, (255, 255, 200)),
    )
    return {"Lava": lava, "Base": base, "Distortion": distortion, "Warped": warped}


# --- Wood ---

def wood_layers(rect) -> dict:
    light, dark = (210, 180, 140, 255), (139, 69, 19, 255)
    steps = 12
    ramp = [lerp_color(light, dark, i / (steps - 1)) for i in range(steps)]
    rings = ConcentricRings(ramp + ramp[::-1], opt.bounds(rect), opt.center(-300, 128), opt.frequency(0.12))

    # Stretched noise gives long horizontal grain.
    grain = perlin(Rect(0, 0, 256, 32), 42, frequency=0.1, octaves=2)
    warped = Warp(rings, opt.warp_distortion(scale_to_size(grain, 256, 256)), opt.warp_scale(12.0))

    pores = WorleyNoise(opt.bounds(Rect(0, 0, 256, 64)), opt.frequency(0.2), opt.seed(101))
    pore_layer = ColorMap(
        scale_to_size(pores, 256, 256),
        (0.0, (60, 30, 0)),
        (0.25, (60, 30, 0)),
        (0.35, WHITE),
        (1.0, WHITE),
    )
    wood = Blend(warped, pore_layer, BlendMode.MULTIPLY)
    return {"Wood": wood, "Rings": warped, "Pores": pore_layer}


# --- Water ---

def water_layers(rect) -> dict:
    base = perlin(rect, 1, frequency=0.03, octaves=6, persistence=0.5, lacunarity=2.0)
    flow = perlin(rect, 2, frequency=0.01)
    warped = Warp(base, opt.warp_distortion_x(flow), opt.warp_distortion_y(flow), opt.warp_scale(20.0))
    normals = NormalMap(warped, opt.normal_map_strength(4.0))
    tint = Rectangle(opt.bounds(rect), opt.fill_color((0, 0, 100, 255)))
    water = Blend(normals, tint, BlendMode.AVERAGE)
    return {"Water": water, "Normals": normals, "Flow": flow}


def water_surface(rect):
    base = perlin(rect, 42, frequency=0.04, octaves=5, persistence=0.6, lacunarity=2.0)
    distortion = perlin(rect, 100, frequency=0.02)
    warped = Warp(base, opt.warp_distortion(distortion), opt.warp_scale(30.0))
    return NormalMap(warped, opt.normal_map_strength(8.0))


# --- Skies ---

def clouds_cumulus(rect):
    noise = perlin(rect, 42, frequency=0.015, octaves=4, persistence=0.5, lacunarity=2.0)
    return ColorMap(
        noise,
        (0.0, (100, 180, 255)),
        (0.4, (130, 200, 255)),
        (0.55, (245, 245, 255)),
        (0.7, (255, 255, 255)),
        (1.0, (230, 230, 240)),
    )


def clouds_cirrus(rect):
    noise = perlin(rect, 103, frequency=0.05, octaves=6, persistence=0.7)
    return ColorMap(
        noise,
        (0.0, (20, 50, 150)),
        (0.6, (50, 100, 200)),
        (0.7, (150, 200, 255, 100)),
        (1.0, (255, 255, 255, 200)),
    )


def clouds_storm(rect):
    base = perlin(rect, 666, frequency=0.01, octaves=3)
    detail = perlin(rect, 777, frequency=0.04, octaves=5, persistence=0.6)
    return ColorMap(
        Blend(base, detail, BlendMode.OVERLAY),
        (0.0, (20, 20, 25)),
        (0.4, (50, 50, 60)),
        (0.6, (80, 80, 90)),
        (0.8, (120, 120, 130)),
        (1.0, (160, 160, 170)),
    )


def sunset(rect):
    sky = LinearGradient(
        opt.bounds(rect),
        opt.start_color((255, 100, 50, 255)),
        opt.end_color((50, 20, 100, 255)),
        opt.gradient_vertical(),
    )
    clouds = ColorMap(
        perlin(rect, 888, frequency=0.012, octaves=4),
        (0.0, BLACK),
        (0.4, BLACK),
        (0.5, (80, 40, 60)),
        (0.7, (200, 100, 80)),
        (1.0, (255, 200, 100)),
    )
    return Blend(sky, clouds, BlendMode.SCREEN)


CLOUD_VARIANTS = {
    "Cumulus": clouds_cumulus,
    "Cirrus": clouds_cirrus,
    "Storm": clouds_storm,
    "Sunset": sunset,
}


# --- Terrain-ish ---

def islands(rect):
    shape = WorleyNoise(
        opt.bounds(rect),
        opt.frequency(0.02),
        opt.seed(555),
        opt.worley_output(WorleyOutput.F1),
        opt.worley_metric(Metric.EUCLIDEAN),
    )
    detail = perlin(rect, 123, frequency=0.1, octaves=4, persistence=0.5, lacunarity=2.0)
    return ColorMap(
        Blend(shape, detail, BlendMode.OVERLAY),
        (0.0, (250, 250, 250)),
        (0.15, (120, 120, 120)),
        (0.30, (34, 139, 34)),
        (0.50, (210, 180, 140)),
        (0.55, (64, 164, 223)),
        (1.0, (0, 0, 128)),
    )


def cells(rect):
    noise = WorleyNoise(opt.bounds(rect), opt.frequency(0.04), opt.seed(777), opt.worley_output(WorleyOutput.CELL_ID))
    return ColorMap(
        noise,
        (0.0, (255, 100, 100)),
        (0.2, (255, 150, 150)),
        (0.4, (200, 50, 50)),
        (0.6, (220, 80, 80)),
        (0.8, (180, 20, 20)),
        (1.0, (255, 120, 120)),
    )


# --- Sparkles ---

def star(u: float, v: float, h: int):
    size = 1.0 + (h % 10) / 10.0
    if math.hypot(u, v) < size:
        return WHITE, 0.0
    return TRANSPARENT, 0.0


def sparkles_layers(rect) -> dict:
    background = ColorMap(
        perlin(rect, 999, frequency=0.01),
        (0.0, (0, 0, 10)),
        (1.0, (10, 0, 20)),
    )
    stars = Scatter(
        opt.bounds(rect),
        opt.seed(1),
        opt.scatter_generator(star),
        opt.scatter_frequency(0.05),
        opt.scatter_density(0.3),
    )
    nebula = ColorMap(
        perlin(rect, 888, frequency=0.015, octaves=3),
        (0.0, TRANSPARENT),
        (0.4, TRANSPARENT),
        (0.6, (100, 0, 100, 100)),
        (0.8, (0, 0, 150, 150)),
        (1.0, (0, 100, 200, 180)),
    )
    sky = Blend(Blend(background, stars, BlendMode.SCREEN), nebula, BlendMode.SCREEN)
    return {"Sparkles": sky, "Stars": stars, "Nebula": nebula}


# --- Constructor Demos ---

def _checker(rect):
    return Checker(BLACK, WHITE, opt.bounds(rect))


def _gradient(rect):
    return LinearGradient(opt.bounds(rect))


def _worley(output: WorleyOutput):
    def build(rect):
        return WorleyNoise(opt.bounds(rect), opt.seed(1), opt.worley_output(output))
    return build


def _voronoi(rect):
    x0, y0 = rect.min_x, rect.min_y
    points = [(x0 + 50, y0 + 50), (x0 + 205, y0 + 50), (x0 + 127, y0 + 127), (x0 + 50, y0 + 205), (x0 + 205, y0 + 205)]
    colors = [(255, 100, 100), (100, 255, 100), (100, 100, 255), (255, 255, 100), (100, 255, 255)]
    return Voronoi(points, colors, opt.bounds(rect))


def _grid(rect):
    tile = Rect(0, 0, 64, 64)
    return Grid([
        [Checker(BLACK, WHITE, opt.bounds(tile)), Polka(opt.bounds(tile), opt.radius(8), opt.spacing(20))],
        [Circle(opt.bounds(tile), opt.fill_color(WHITE), opt.line_size(3)), ScreenTone(opt.bounds(tile))],
    ])


def _bool_xor(rect):
    h = HorizontalLine(opt.bounds(rect), opt.line_size(16), opt.space_size(16))
    v = VerticalLine(opt.bounds(rect), opt.line_size(16), opt.space_size(16))
    return Xor([h, v], BooleanMode.COMPONENT_WISE)


def _bool_fuzzy_or(rect):
    disc = Circle(opt.bounds(rect), opt.fill_color(WHITE), opt.space_color(BLACK))
    clouds = perlin(rect, 7, frequency=0.03, octaves=3)
    return Or([disc, clouds], BooleanMode.FUZZY, opt.predicate(fuzzy_gray))


def _dither_source(rect):
    return perlin(rect, 3, frequency=0.02, octaves=3)


DEMOS = {
    "Null": lambda rect: Null(opt.bounds(rect)),
    "Uniform": lambda rect: Uniform(WHITE, opt.bounds(rect)),
    "Rect": lambda rect: Rectangle(opt.bounds(rect), opt.line_size(4), opt.line_color((200, 0, 0, 255)), opt.fill_color(WHITE)),
    "Circle": lambda rect: Circle(opt.bounds(rect), opt.line_size(6), opt.fill_color((255, 220, 0, 255))),
    "HorizontalLine": lambda rect: HorizontalLine(opt.bounds(rect), opt.line_size(4), opt.space_size(8), opt.space_color(WHITE)),
    "VerticalLine": lambda rect: VerticalLine(opt.bounds(rect), opt.line_size(4), opt.space_size(8), opt.space_color(WHITE)),
    "Checker": _checker,
    "CrossHatch": lambda rect: CrossHatch(opt.bounds(rect), opt.angles(45, -45), opt.line_size(2), opt.space_size(10), opt.space_color(WHITE)),
    "Polka": lambda rect: Polka(opt.bounds(rect)),
    "ScreenTone": lambda rect: ScreenTone(opt.bounds(rect)),
    "Grid": _grid,
    "LinearGradient": _gradient,
    "RadialGradient": lambda rect: RadialGradient(opt.bounds(rect)),
    "ConicGradient": lambda rect: ConicGradient(opt.bounds(rect)),
    "ConcentricRings": lambda rect: ConcentricRings(None, opt.bounds(rect), opt.center(rect.min_x + rect.width // 2, rect.min_y + rect.height // 2), opt.frequency(0.1)),
    "Voronoi": _voronoi,
    "Heatmap": lambda rect: Heatmap(lambda u, v: math.sin(u * 3.0) * math.cos(v * 3.0), opt.bounds(rect)),
    "Text": lambda rect: Text("texture", opt.space_color(WHITE)),
    "Noise": lambda rect: Noise(opt.bounds(rect)),
    "Perlin": lambda rect: perlin(rect, 42, frequency=0.03, octaves=4),
    "Simplex": lambda rect: Noise(opt.bounds(rect), opt.seed(42), opt.noise_algorithm(SimplexNoise(frequency=0.03, octaves=4))),
    "Worley_F1": _worley(WorleyOutput.F1),
    "Worley_F2": _worley(WorleyOutput.F2),
    "Worley_F2_F1": _worley(WorleyOutput.F2_MINUS_F1),
    "Worley_CellID": _worley(WorleyOutput.CELL_ID),
    "Plasma": lambda rect: Plasma(opt.bounds(rect)),
    "BlueNoise": lambda rect: BlueNoise(),
    "Warp": lambda rect: Warp(_checker(rect), opt.warp_distortion(perlin(rect, 9, frequency=0.02)), opt.warp_scale(20.0)),
    "Tile": lambda rect: Tile(Checker(BLACK, WHITE, opt.bounds(Rect(0, 0, 20, 20))), rect),
    "Rotate": lambda rect: Rotate(_gradient(rect), 90),
    "Mirror": lambda rect: Mirror(_gradient(rect), True),
    "SimpleZoom": lambda rect: SimpleZoom(_checker(rect), 4),
    "Boolean_Xor": _bool_xor,
    "Boolean_FuzzyOr": _bool_fuzzy_or,
    "NormalMap": lambda rect: NormalMap(perlin(rect, 11, frequency=0.04, octaves=4), opt.normal_map_strength(4.0)),
    "EdgeDetect": lambda rect: EdgeDetect(SimpleZoom(Checker(BLACK, WHITE, opt.bounds(rect)), 20)),
    "Bayer2x2": lambda rect: bayer_dither(_dither_source(rect), 2),
    "Bayer4x4": lambda rect: bayer_dither(_dither_source(rect), 4),
    "Bayer8x8": lambda rect: bayer_dither(_dither_source(rect), 8),
    "Halftone": lambda rect: halftone_dither(_dither_source(rect), 6),
    "RandomDither": lambda rect: RandomDither(_dither_source(rect), None, 5),
    "Brick": lambda rect: Brick(opt.bounds(rect)),
    "ChippedBrick": lambda rect: ChippedBrick(opt.bounds(rect), opt.seed(7)),
    "Scales": lambda rect: Scales(opt.bounds(rect)),
    "PCBTraces": lambda rect: PCBTraces(opt.bounds(rect)),
}


# --- Registration ---

def _layer(builder, name: str):
    return lambda rect: builder(Rect(*rect))[name]


def _references(builder, names: list):
    def build(rect):
        layers = builder(Rect(*rect))
        return {n: layers[n] for n in names}, list(names)
    return build


def _variants(rect):
    r = Rect(*rect)
    return {name: fn(r) for name, fn in CLOUD_VARIANTS.items()}, list(CLOUD_VARIANTS)


COMPOSITES = {
    "Lava": (_layer(lava_layers, "Lava"), _references(lava_layers, ["Base", "Distortion", "Warped"])),
    "Wood": (_layer(wood_layers, "Wood"), _references(wood_layers, ["Rings", "Pores"])),
    "Water": (_layer(water_layers, "Water"), _references(water_layers, ["Normals", "Flow"])),
    "Water_surface": (water_surface, None),
    "Clouds": (clouds_cumulus, _variants),
    "Clouds_cumulus": (clouds_cumulus, None),
    "Clouds_cirrus": (clouds_cirrus, None),
    "Clouds_storm": (clouds_storm, None),
    "Sunset": (sunset, None),
    "Islands": (islands, None),
    "Cells": (cells, None),
    "Sparkles": (_layer(sparkles_layers, "Sparkles"), _references(sparkles_layers, ["Stars", "Nebula"])),
}


def _register_all():
    for name, (generator, references) in COMPOSITES.items():
        register_generator(name, generator)
        if references is not None:
            register_references(name, references)
    for name, generator in DEMOS.items():
        register_generator(name, generator)


_register_all()

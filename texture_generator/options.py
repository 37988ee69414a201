# texture_generator/options.py

"""
================================================================================
OPTION WIRING
================================================================================
Node constructors accept a variable sequence of options. Each option is a
first-class callable that probes its target for one capability (a `set_*`
method) and invokes it with the captured value. Targets lacking the
capability are left untouched, so any option can be passed to any node.

Data Contract:
---------------
- Inputs:
    - Every factory below captures a value and returns `option(target)`.
- Outputs:
    - None; options mutate the target in place during construction only.
- Side Effects: Only on the target being constructed.
- Invariants:
    - Options are applied in order; the last conflicting option wins.
    - An option no node understands is legal and has no effect.
================================================================================
"""

from typing import Callable, Iterable

Option = Callable[[object], None]


def probe(capability: str, *values) -> Option:
    """Builds an option calling `target.<capability>(*values)` if it exists."""
    def option(target):
        setter = getattr(target, capability, None)
        if callable(setter):
            setter(*values)
    option.__name__ = capability
    option.__qualname__ = f"probe.{capability}"
    return option


def apply_options(target, options: Iterable[Option]):
    for option in options:
        if option is not None:
            option(target)
    return target


# --- Capability Mixins ---
# Small reusable holders, mixed into nodes that share a parameter.

class LineSize:
    line_size = 0

    def set_line_size(self, value: int):
        self.line_size = int(value)


class SpaceSize:
    space_size = 0

    def set_space_size(self, value: int):
        self.space_size = int(value)


class LineColor:
    line_color = None

    def set_line_color(self, color):
        self.line_color = color


class SpaceColor:
    space_color = None

    def set_space_color(self, color):
        self.space_color = color


class FillColor:
    fill_color = None

    def set_fill_color(self, color):
        self.fill_color = color


class LineImageSource:
    line_image_source = None

    def set_line_image_source(self, node):
        self.line_image_source = node


class FillImageSource:
    fill_image_source = None

    def set_fill_image_source(self, node):
        self.fill_image_source = node


class SpaceImageSource:
    space_image_source = None

    def set_space_image_source(self, node):
        self.space_image_source = node


class Radius:
    radius = 0

    def set_radius(self, value: int):
        self.radius = int(value)


class Spacing:
    spacing = 0

    def set_spacing(self, value: int):
        self.spacing = int(value)


class Phase:
    phase = 0.0

    def set_phase(self, value: float):
        self.phase = float(value)


class Angle:
    angle = 0.0

    def set_angle(self, value: float):
        self.angle = float(value)


class Center:
    center_x = 0
    center_y = 0

    def set_center(self, x: int, y: int):
        self.center_x, self.center_y = int(x), int(y)


class StartEndColor:
    start_color = None
    end_color = None

    def set_start_color(self, color):
        self.start_color = color

    def set_end_color(self, color):
        self.end_color = color


class Seeded:
    seed = 0

    def set_seed(self, value: int):
        self.seed = int(value)


class Frequency:
    frequency = 0.0

    def set_frequency(self, value: float):
        self.frequency = float(value)


# --- Option Vocabulary ---

def bounds(rect) -> Option:
    return probe("set_bounds", rect)


def seed(value: int) -> Option:
    return probe("set_seed", value)


def frequency(value: float) -> Option:
    return probe("set_frequency", value)


def frequency_x(value: float) -> Option:
    return probe("set_frequency_x", value)


def frequency_y(value: float) -> Option:
    return probe("set_frequency_y", value)


def noise_algorithm(algorithm) -> Option:
    return probe("set_noise_algorithm", algorithm)


def octaves(value: int) -> Option:
    return probe("set_octaves", value)


def persistence(value: float) -> Option:
    return probe("set_persistence", value)


def lacunarity(value: float) -> Option:
    return probe("set_lacunarity", value)


def line_size(value: int) -> Option:
    return probe("set_line_size", value)


def space_size(value: int) -> Option:
    return probe("set_space_size", value)


def line_color(color) -> Option:
    return probe("set_line_color", color)


def space_color(color) -> Option:
    return probe("set_space_color", color)


def fill_color(color) -> Option:
    return probe("set_fill_color", color)


def line_image_source(node) -> Option:
    return probe("set_line_image_source", node)


def fill_image_source(node) -> Option:
    return probe("set_fill_image_source", node)


def space_image_source(node) -> Option:
    return probe("set_space_image_source", node)


def start_color(color) -> Option:
    return probe("set_start_color", color)


def end_color(color) -> Option:
    return probe("set_end_color", color)


def true_color(color) -> Option:
    return probe("set_true_color", color)


def false_color(color) -> Option:
    return probe("set_false_color", color)


def radius(value: int) -> Option:
    return probe("set_radius", value)


def min_radius(value: float) -> Option:
    return probe("set_min_radius", value)


def max_radius(value: float) -> Option:
    return probe("set_max_radius", value)


def spacing(value: int) -> Option:
    return probe("set_spacing", value)


def phase(value: float) -> Option:
    return probe("set_phase", value)


def angle(value: float) -> Option:
    return probe("set_angle", value)


def angles(*values: float) -> Option:
    return probe("set_angles", list(values))


def center(x: int, y: int) -> Option:
    return probe("set_center", x, y)


def density(value: float) -> Option:
    return probe("set_density", value)


def roughness(value: float) -> Option:
    return probe("set_roughness", value)


def color(enabled: bool) -> Option:
    """Switches multi-channel output on or off (plasma)."""
    return probe("set_color", enabled)


def scale_x(value: float) -> Option:
    return probe("set_scale_x", value)


def scale_y(value: float) -> Option:
    return probe("set_scale_y", value)


def predicate(fn) -> Option:
    return probe("set_predicate", fn)


# --- Worley ---

def worley_metric(metric) -> Option:
    return probe("set_worley_metric", metric)


def worley_output(output) -> Option:
    return probe("set_worley_output", output)


def worley_jitter(value: float) -> Option:
    return probe("set_worley_jitter", value)


# --- Warp ---

def warp_scale(value: float) -> Option:
    return probe("set_warp_scale", value)


def warp_x_scale(value: float) -> Option:
    return probe("set_warp_x_scale", value)


def warp_y_scale(value: float) -> Option:
    return probe("set_warp_y_scale", value)


def warp_distortion(node) -> Option:
    return probe("set_warp_distortion", node)


def warp_distortion_x(node) -> Option:
    return probe("set_warp_distortion_x", node)


def warp_distortion_y(node) -> Option:
    return probe("set_warp_distortion_y", node)


# --- Brick ---

def brick_size(width: int, height: int) -> Option:
    return probe("set_brick_size", width, height)


def mortar_size(value: int) -> Option:
    return probe("set_mortar_size", value)


def brick_offset(value: float) -> Option:
    return probe("set_brick_offset", value)


def brick_images(*nodes) -> Option:
    return probe("set_brick_images", list(nodes))


def mortar_image(node) -> Option:
    return probe("set_mortar_image", node)


def chip_intensity(value: float) -> Option:
    return probe("set_chip_intensity", value)


def mortar_depth(value: float) -> Option:
    return probe("set_mortar_depth", value)


def hue_jitter(value: float) -> Option:
    return probe("set_hue_jitter", value)


# --- Scales ---

def scale_radius(value: int) -> Option:
    return probe("set_scale_radius", value)


def scale_x_spacing(value: int) -> Option:
    return probe("set_scale_x_spacing", value)


def scale_y_spacing(value: int) -> Option:
    return probe("set_scale_y_spacing", value)


# --- PCB Traces ---

def pad_density(value: float) -> Option:
    return probe("set_pad_density", value)


def solder_mask_tint(color) -> Option:
    return probe("set_solder_mask_tint", color)


def copper_color(color) -> Option:
    return probe("set_copper_color", color)


# --- Filters ---

def normal_map_strength(value: float) -> Option:
    return probe("set_normal_map_strength", value)


def edge_sensitivity(value: float) -> Option:
    return probe("set_edge_sensitivity", value)


# --- Gradients & Heatmap ---

def gradient_vertical() -> Option:
    return probe("set_vertical", True)


def x_range(low: float, high: float) -> Option:
    return probe("set_x_range", low, high)


def y_range(low: float, high: float) -> Option:
    return probe("set_y_range", low, high)


def z_range(low: float, high: float) -> Option:
    return probe("set_z_range", low, high)


# --- Scatter ---

def scatter_frequency(value: float) -> Option:
    return probe("set_scatter_frequency", value)


def scatter_density(value: float) -> Option:
    return probe("set_scatter_density", value)


def scatter_generator(fn) -> Option:
    return probe("set_scatter_generator", fn)


def scatter_max_overlap(value: int) -> Option:
    return probe("set_scatter_max_overlap", value)

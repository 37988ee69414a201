import unittest

from texture_generator import options as opt
from texture_generator.core import BLACK, RED, TRANSPARENT, WHITE, Color, Maths, Rect, Uniform, rect
from texture_generator.patterns import Checker
from texture_generator.transforms import (
    Clamp, Crop, Mirror, Padding, Rotate, Scale, SimpleZoom, Tile, Transpose, Warp, center, scale_to_size,
)


def coords_node(width=6, height=4):
    """Encodes the coordinate in the color so lookups can be checked exactly."""
    return Maths(lambda x, y: ((x * 17) & 0xFF, (y * 29) & 0xFF, 7, 255), opt.bounds(Rect(0, 0, width, height)))


def pixels(node, r):
    return [node.sample(x, y) for y in range(r.min_y, r.max_y) for x in range(r.min_x, r.max_x)]


class TestTile(unittest.TestCase):
    def test_is_periodic_in_both_axes(self):
        tile = Tile(coords_node(7, 5), Rect(0, 0, 100, 100))
        for x, y in [(0, 0), (3, 2), (-4, 11), (50, -13)]:
            self.assertEqual(tile.sample(x, y), tile.sample(x + 7, y))
            self.assertEqual(tile.sample(x, y), tile.sample(x, y + 5))
            self.assertEqual(tile.sample(x, y), tile.sample(x - 14, y - 10))

    def test_presents_the_given_bounds(self):
        self.assertEqual(Tile(coords_node(), Rect(0, 0, 64, 32)).bounds(), Rect(0, 0, 64, 32))

    def test_tile_rect_selects_a_window(self):
        source = coords_node(20, 20)
        tile = Tile(source, Rect(0, 0, 50, 50), Rect(2, 3, 6, 5))
        self.assertEqual(tile.sample(2, 3), source.sample(2, 3))
        self.assertEqual(tile.sample(6, 3), source.sample(2, 3))
        self.assertEqual(tile.sample(0, 0), source.sample(4, 4))

    def test_empty_tile_rect_is_transparent(self):
        self.assertEqual(Tile(coords_node(), Rect(0, 0, 8, 8), Rect(0, 0, 0, 0)).sample(1, 1), TRANSPARENT)

    def test_tiled_checker_repeats_every_twenty_pixels(self):
        checker = Checker(BLACK, WHITE, opt.bounds(Rect(0, 0, 20, 20)))
        tile = Tile(checker, rect(0, 0, 200, 200))
        self.assertEqual(tile.sample(5, 5), tile.sample(25, 5))
        self.assertEqual(tile.sample(5, 5), tile.sample(25, 25))
        self.assertEqual(tile.sample(5, 5), BLACK)


class TestClamp(unittest.TestCase):
    def test_outside_snaps_to_edge(self):
        source = coords_node()
        clamp = Clamp(source)
        self.assertEqual(clamp.sample(-10, -10), source.sample(0, 0))
        self.assertEqual(clamp.sample(100, 2), source.sample(5, 2))

    def test_larger_rect_extends_the_child_edges(self):
        red = Crop(Uniform(RED), Rect(100, 100, 150, 150))
        clamp = Clamp(red, Rect(50, 50, 200, 200))
        self.assertEqual(clamp.bounds(), Rect(50, 50, 200, 200))
        for x, y in [(60, 60), (199, 60), (120, 50), (199, 199), (125, 125)]:
            self.assertEqual(clamp.sample(x, y), RED)

    def test_larger_rect_snaps_to_the_nearest_edge_pixel(self):
        source = coords_node(6, 4)
        clamp = Clamp(source, Rect(-10, -10, 20, 20))
        self.assertEqual(clamp.sample(-3, 2), source.sample(0, 2))
        self.assertEqual(clamp.sample(15, 15), source.sample(5, 3))
        self.assertEqual(clamp.sample(3, -7), source.sample(3, 0))

    def test_is_idempotent(self):
        for r in [Rect(1, 1, 5, 3), Rect(-5, -5, 12, 10)]:
            once = Clamp(coords_node(), r)
            twice = Clamp(once, r)
            self.assertEqual(pixels(once, r), pixels(twice, r))


class TestRotate(unittest.TestCase):
    def test_quarter_turn_swaps_bounds(self):
        self.assertEqual(Rotate(coords_node(6, 4), 90).bounds(), Rect(0, 0, 4, 6))

    def test_quarter_turn_then_three_quarter_turn_is_identity(self):
        source = coords_node(6, 4)
        back = Rotate(Rotate(source, 90), 270)
        self.assertEqual(back.bounds(), source.bounds())
        self.assertEqual(pixels(back, source.bounds()), pixels(source, source.bounds()))

    def test_two_quarter_turns_make_a_half_turn(self):
        source = coords_node(6, 4)
        twice = Rotate(Rotate(source, 90), 90)
        half = Rotate(source, 180)
        self.assertEqual(twice.bounds(), half.bounds())
        self.assertEqual(pixels(twice, half.bounds()), pixels(half, half.bounds()))

    def test_four_quarter_turns_are_identity(self):
        source = coords_node(6, 4)
        full = Rotate(Rotate(Rotate(Rotate(source, 90), 90), 90), 90)
        self.assertEqual(pixels(full, source.bounds()), pixels(source, source.bounds()))

    def test_negative_angles_normalize(self):
        source = coords_node(6, 4)
        r = source.bounds()
        self.assertEqual(pixels(Rotate(source, -90), Rect(0, 0, 4, 6)), pixels(Rotate(source, 270), Rect(0, 0, 4, 6)))
        self.assertEqual(pixels(Rotate(source, 360), r), pixels(source, r))

    def test_non_right_angle_falls_back_to_identity(self):
        source = coords_node()
        with self.assertLogs("texture_generator.transforms", level="WARNING"):
            rotated = Rotate(source, 45)
        self.assertEqual(rotated.degrees, 0)
        self.assertEqual(rotated.sample(2, 1), source.sample(2, 1))


class TestMirror(unittest.TestCase):
    def test_is_an_involution(self):
        source = coords_node()
        r = source.bounds()
        for horizontal, vertical in [(True, False), (False, True), (True, True)]:
            twice = Mirror(Mirror(source, horizontal, vertical), horizontal, vertical)
            self.assertEqual(pixels(twice, r), pixels(source, r))

    def test_horizontal_flip(self):
        source = coords_node(6, 4)
        self.assertEqual(Mirror(source).sample(0, 1), source.sample(5, 1))


class TestWarp(unittest.TestCase):
    def test_zero_scale_is_identity(self):
        source = coords_node()
        warp = Warp(source, opt.warp_distortion(Checker()), opt.warp_scale(0.0))
        r = source.bounds()
        self.assertEqual(pixels(warp, r), pixels(source, r))

    def test_mid_gray_distortion_is_identity(self):
        source = coords_node()
        warp = Warp(source, opt.warp_distortion(Uniform(Color(128, 128, 128))))
        r = source.bounds()
        self.assertEqual(pixels(warp, r), pixels(source, r))

    def test_white_distortion_shifts_by_scale(self):
        source = coords_node(50, 50)
        warp = Warp(source, opt.warp_distortion_x(Uniform(WHITE)), opt.warp_scale(3.0))
        self.assertEqual(warp.sample(5, 5), source.sample(8, 5))

    def test_missing_source_is_transparent(self):
        self.assertEqual(Warp(None).sample(0, 0), TRANSPARENT)


class TestScaling(unittest.TestCase):
    def test_scale_uses_nearest_neighbor(self):
        source = coords_node()
        scaled = Scale(source, 2.0)
        self.assertEqual(scaled.bounds(), Rect(0, 0, 12, 8))
        self.assertEqual(scaled.sample(5, 3), source.sample(2, 1))

    def test_scale_to_size(self):
        self.assertEqual(scale_to_size(coords_node(4, 2), 16, 16).bounds(), Rect(0, 0, 16, 16))

    def test_non_positive_factor_warns(self):
        with self.assertLogs("texture_generator.transforms", level="WARNING"):
            scaled = Scale(coords_node(), 0.0)
        self.assertEqual(scaled.scale_x, 1.0)

    def test_simple_zoom(self):
        source = coords_node()
        zoom = SimpleZoom(source, 3)
        self.assertEqual(zoom.bounds(), Rect(0, 0, 18, 12))
        self.assertEqual(zoom.sample(8, 5), source.sample(2, 1))


class TestWindowing(unittest.TestCase):
    def test_crop(self):
        source = coords_node()
        crop = Crop(source, Rect(1, 1, 3, 3))
        self.assertEqual(crop.bounds(), Rect(1, 1, 3, 3))
        self.assertEqual(crop.sample(1, 2), source.sample(1, 2))
        self.assertEqual(crop.sample(0, 0), TRANSPARENT)

    def test_padding_with_background(self):
        source = Uniform(WHITE, opt.bounds(Rect(0, 0, 2, 2)))
        padded = Padding(source, margin=1, background=Uniform(BLACK))
        self.assertEqual(padded.bounds(), Rect(0, 0, 4, 4))
        self.assertEqual(padded.sample(0, 0), BLACK)
        self.assertEqual(padded.sample(1, 1), WHITE)

    def test_center(self):
        source = Uniform(WHITE, opt.bounds(Rect(0, 0, 2, 2)))
        centered = center(source, 6, 6)
        self.assertEqual(centered.bounds(), Rect(0, 0, 6, 6))
        self.assertEqual(centered.sample(2, 2), WHITE)
        self.assertEqual(centered.sample(0, 0), TRANSPARENT)

    def test_transpose(self):
        source = coords_node(6, 4)
        t = Transpose(source)
        self.assertEqual(t.bounds(), Rect(0, 0, 4, 6))
        self.assertEqual(t.sample(1, 3), source.sample(3, 1))


if __name__ == "__main__":
    unittest.main()

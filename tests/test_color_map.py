import unittest

from texture_generator.color_map import ColorMap, stop
from texture_generator.core import BLACK, BLUE, RED, TRANSPARENT, WHITE, Color, Maths, Rect, Uniform, gray8_color
from texture_generator import options as opt


class TestColorMap(unittest.TestCase):
    def setUp(self):
        self.ramp = ColorMap(Uniform(BLACK), (0.0, BLACK), (1.0, WHITE))

    def test_endpoints(self):
        self.assertEqual(ColorMap(Uniform(BLACK), (0.0, RED), (1.0, BLUE)).sample(0, 0), RED)
        self.assertEqual(ColorMap(Uniform(WHITE), (0.0, RED), (1.0, BLUE)).sample(0, 0), BLUE)

    def test_midpoint_interpolates(self):
        self.assertEqual(self.ramp.color_at(0.5), Color(128, 128, 128, 255))

    def test_is_monotonic_on_a_gray_ramp(self):
        levels = [self.ramp.color_at(i / 50.0).r for i in range(51)]
        self.assertEqual(levels, sorted(levels))

    def test_values_outside_the_stops_clamp(self):
        cmap = ColorMap(None, (0.25, RED), (0.75, BLUE))
        self.assertEqual(cmap.color_at(0.0), RED)
        self.assertEqual(cmap.color_at(1.0), BLUE)

    def test_stops_are_sorted(self):
        cmap = ColorMap(None, (1.0, WHITE), (0.0, BLACK))
        self.assertEqual([s.position for s in cmap.stops], [0.0, 1.0])

    def test_coincident_stops_make_a_hard_edge(self):
        cmap = ColorMap(None, (0.0, RED), (0.5, RED), (0.5, BLUE), (1.0, BLUE))
        self.assertEqual(cmap.color_at(0.49), RED)
        self.assertEqual(cmap.color_at(0.5), BLUE)
        self.assertEqual(cmap.color_at(0.51), BLUE)

    def test_mid_gray_lands_on_the_middle_stop(self):
        cmap = ColorMap(Uniform(gray8_color(128)), (0.0, BLACK), (0.5, RED), (1.0, WHITE))
        c = cmap.sample(0, 0)
        self.assertEqual((c.r, c.a), (255, 255))
        self.assertLessEqual(c.g, 1)
        self.assertLessEqual(c.b, 1)

    def test_maps_source_luminance(self):
        source = Maths(lambda x, y: gray8_color(x * 51), opt.bounds(Rect(0, 0, 6, 1)))
        cmap = ColorMap(source, (0.0, BLACK), (1.0, WHITE))
        self.assertEqual([cmap.sample(x, 0).r for x in range(6)], [0, 51, 102, 153, 204, 255])

    def test_degenerate_inputs(self):
        self.assertEqual(ColorMap(None, (0.0, RED)).sample(0, 0), TRANSPARENT)
        self.assertEqual(ColorMap(Uniform(RED)).sample(0, 0), RED)

    def test_bounds_follow_source(self):
        source = Uniform(RED, opt.bounds(Rect(0, 0, 7, 3)))
        self.assertEqual(ColorMap(source, (0.0, RED)).bounds(), Rect(0, 0, 7, 3))

    def test_options_mix_with_stops(self):
        cmap = ColorMap(Uniform(BLACK), (0.0, RED), opt.bounds(Rect(0, 0, 4, 2)), (1.0, BLUE))
        self.assertEqual(cmap.bounds(), Rect(0, 0, 4, 2))
        self.assertEqual([s.position for s in cmap.stops], [0.0, 1.0])
        self.assertEqual(cmap.sample(0, 0), RED)

    def test_stop_helper(self):
        self.assertEqual(stop(1, (1, 2, 3)), (1.0, Color(1, 2, 3, 255)))


if __name__ == "__main__":
    unittest.main()

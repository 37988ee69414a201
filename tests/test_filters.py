import unittest

import numpy as np

from texture_generator import options as opt
from texture_generator.core import BLACK, WHITE, Color, Maths, Rect, Uniform
from texture_generator.patterns import (
    EdgeDetect, NormalMap, OrderedDither, RandomDither, bayer_dither, bayer_matrix, halftone_dither,
    halftone_matrix,
)
from texture_generator.patterns.filters import bayer_indices, nearest_color


def step_edge(x, y):
    return WHITE if x >= 0 else BLACK


class TestNormalMap(unittest.TestCase):
    def test_flat_source_points_straight_up(self):
        self.assertEqual(NormalMap(Uniform(Color(90, 10, 200))).sample(3, 3), Color(128, 128, 255, 255))

    def test_slope_tilts_the_normal(self):
        flat = NormalMap(Maths(step_edge), opt.normal_map_strength(1.0)).sample(0, 0)
        steep = NormalMap(Maths(step_edge), opt.normal_map_strength(4.0)).sample(0, 0)
        self.assertLess(flat.r, 128)
        self.assertLess(steep.r, flat.r)
        self.assertEqual(flat.g, 128)

    def test_bounds_follow_source(self):
        self.assertEqual(NormalMap(Uniform(WHITE, opt.bounds(Rect(0, 0, 4, 5)))).bounds(), Rect(0, 0, 4, 5))
        self.assertEqual(NormalMap(None).bounds(), Rect(0, 0, 100, 100))
        self.assertEqual(NormalMap(None).sample(0, 0), BLACK)


class TestEdgeDetect(unittest.TestCase):
    def test_flat_source_has_no_edges(self):
        self.assertEqual(EdgeDetect(Uniform(WHITE)).sample(0, 0), BLACK)

    def test_step_edge_saturates(self):
        self.assertGreaterEqual(EdgeDetect(Maths(step_edge)).sample(0, 0).r, 254)
        self.assertEqual(EdgeDetect(Maths(step_edge)).sample(5, 0), BLACK)

    def test_sensitivity_scales_response(self):
        half = EdgeDetect(Maths(step_edge), opt.edge_sensitivity(0.5)).sample(0, 0)
        self.assertIn(half.r, (126, 127))


class TestMatrices(unittest.TestCase):
    def test_bayer_2x2(self):
        np.testing.assert_array_equal(bayer_indices(2), [[0, 2], [3, 1]])

    def test_bayer_levels_are_a_permutation(self):
        for n in (2, 4, 8):
            m = bayer_matrix(n)
            self.assertEqual(m.shape, (n, n))
            np.testing.assert_allclose(np.sort(m.ravel()), np.arange(n * n) / float(n * n))

    def test_halftone_peaks_at_the_center(self):
        m = halftone_matrix(5)
        self.assertEqual(m[2, 2], 1.0)
        self.assertEqual(m[0, 0], 0.0)
        self.assertEqual(halftone_matrix(1).shape, (1, 1))


class TestDithering(unittest.TestCase):
    def test_nearest_color_prefers_first_on_ties(self):
        palette = [Color(0, 0, 0), Color(2, 2, 2)]
        self.assertEqual(nearest_color(palette, Color(1, 1, 1)), palette[0])
        self.assertEqual(nearest_color([BLACK, WHITE], Color(200, 200, 200)), WHITE)

    def test_mid_gray_bayer_is_half_white(self):
        node = bayer_dither(Uniform(Color(128, 128, 128)), 4)
        colors = [node.sample(x, y) for y in range(4) for x in range(4)]
        self.assertEqual(colors.count(WHITE), 8)
        self.assertEqual(colors.count(BLACK), 8)

    def test_output_stays_in_palette(self):
        palette = [Color(255, 0, 0), Color(0, 0, 255), Color(0, 255, 0)]
        source = Maths(lambda x, y: (x * 16, y * 16, 128))
        for node in (OrderedDither(source, bayer_matrix(2), palette), halftone_dither(source, 4, palette),
                     RandomDither(source, palette, 3)):
            for y in range(0, 16, 3):
                for x in range(0, 16, 3):
                    self.assertIn(node.sample(x, y), palette)

    def test_alpha_is_carried_into_matching(self):
        node = bayer_dither(Uniform(Color(255, 255, 255, 0)), 2, [Color(255, 255, 255, 0), WHITE])
        self.assertEqual(node.sample(0, 0).a, 0)

    def test_random_dither_depends_on_seed(self):
        source = Uniform(Color(128, 128, 128))
        a = RandomDither(source, None, 1)
        b = RandomDither(source, None, 2)
        samples = [(x, y) for y in range(8) for x in range(8)]
        self.assertEqual([a.sample(x, y) for x, y in samples], [RandomDither(source, None, 1).sample(x, y) for x, y in samples])
        self.assertNotEqual([a.sample(x, y) for x, y in samples], [b.sample(x, y) for x, y in samples])

    def test_missing_source(self):
        node = halftone_dither(None)
        self.assertEqual(node.bounds(), Rect(0, 0, 100, 100))
        self.assertEqual(node.sample(0, 0), BLACK)


if __name__ == "__main__":
    unittest.main()

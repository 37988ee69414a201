import io
import os
import tempfile
import unittest

import numpy as np
from PIL import Image

from texture_generator import options as opt
from texture_generator.core import RED, Maths, Rect, Uniform
from texture_generator.render import encode_png, render, render_rows, save_png, to_image


def coords(x, y):
    return (x & 0xFF, y & 0xFF, 9, 255)


class TestRender(unittest.TestCase):
    def test_shape_and_contents(self):
        arr = render(Uniform(RED, opt.bounds(Rect(0, 0, 3, 2))))
        self.assertEqual(arr.shape, (2, 3, 4))
        self.assertEqual(arr.dtype, np.uint8)
        self.assertTrue((arr == [255, 0, 0, 255]).all())

    def test_offset_rect(self):
        arr = render(Maths(coords), Rect(5, 7, 8, 9))
        self.assertEqual(tuple(arr[0, 0]), (5, 7, 9, 255))
        self.assertEqual(tuple(arr[1, 2]), (7, 8, 9, 255))

    def test_bands_reassemble(self):
        node = Maths(coords)
        r = Rect(0, 0, 10, 7)
        bands = [render_rows(node, r, y0, y0 + 3) for y0 in range(0, 7, 3)]
        self.assertEqual([b.shape[0] for b in bands], [3, 3, 1])
        np.testing.assert_array_equal(np.concatenate(bands), render(node, r))

    def test_rendering_is_deterministic(self):
        node = Maths(coords, opt.bounds(Rect(0, 0, 6, 6)))
        np.testing.assert_array_equal(render(node), render(node))


class TestPNG(unittest.TestCase):
    def test_encode_png(self):
        data = encode_png(Maths(coords), Rect(0, 0, 4, 3))
        self.assertTrue(data.startswith(b"\x89PNG"))
        image = Image.open(io.BytesIO(data))
        self.assertEqual(image.size, (4, 3))
        self.assertEqual(image.mode, "RGBA")
        self.assertEqual(image.getpixel((3, 2)), (3, 2, 9, 255))

    def test_to_image(self):
        image = to_image(np.zeros((2, 5, 4), dtype=np.uint8))
        self.assertEqual(image.size, (5, 2))

    def test_save_png_creates_directories(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "dir", "red.png")
            self.assertEqual(save_png(Uniform(RED, opt.bounds(Rect(0, 0, 2, 2))), path), path)
            with Image.open(path) as image:
                self.assertEqual(image.getpixel((1, 1)), (255, 0, 0, 255))


if __name__ == "__main__":
    unittest.main()

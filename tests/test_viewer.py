import json
import os
import tempfile
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from PIL import Image

import viewer
from viewer import MAX_ZOOM, MIN_ZOOM, BakedTextures, Camera


class TestCamera(unittest.TestCase):
    def setUp(self):
        self.camera = Camera(1280, 720, 256, 256)

    def test_fits_and_centers(self):
        self.assertAlmostEqual(self.camera.zoom, 720 / 256)
        self.assertEqual(self.camera.world_to_screen(128, 128), (640, 360))

    def test_screen_to_world_inverts_world_to_screen(self):
        sx, sy = self.camera.world_to_screen(17.0, 200.0)
        wx, wy = self.camera.screen_to_world(sx, sy)
        self.assertAlmostEqual(wx, 17.0)
        self.assertAlmostEqual(wy, 200.0)

    def test_pan_is_zoom_independent_on_screen(self):
        before = self.camera.world_to_screen(0, 0)
        self.camera.pan(15, 0)
        after = self.camera.world_to_screen(0, 0)
        self.assertAlmostEqual(before[0] - after[0], 15.0)

    def test_zoom_limits(self):
        for _ in range(200):
            self.camera.zoom_in()
        self.assertEqual(self.camera.zoom, MAX_ZOOM)
        for _ in range(500):
            self.camera.zoom_out()
        self.assertEqual(self.camera.zoom, MIN_ZOOM)

    def test_fit_handles_empty_images(self):
        self.camera.fit(0, 0)
        self.assertEqual(self.camera.zoom, 1.0)


class TestBakedTextures(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        Image.new("RGBA", (8, 4), (255, 0, 0, 255)).save(os.path.join(self.tmp.name, "Red.png"))
        manifest = {'width': 8, 'height': 4, 'textures': {'Red': 'Red.png', 'Gone': 'Gone.png'}}
        with open(os.path.join(self.tmp.name, "manifest.json"), "w") as f:
            json.dump(manifest, f)

    def tearDown(self):
        self.tmp.cleanup()

    def test_loads_manifest(self):
        textures = BakedTextures(self.tmp.name)
        self.assertEqual(len(textures), 2)
        self.assertEqual(textures.names, ['Gone', 'Red'])
        self.assertEqual((textures.width, textures.height), (8, 4))
        self.assertEqual(textures.name_at(3), 'Red')

    def test_surfaces_are_cached(self):
        textures = BakedTextures(self.tmp.name)
        surface = textures.get_surface('Red')
        self.assertEqual(surface.get_size(), (8, 4))
        self.assertIs(textures.get_surface('Red'), surface)

    def test_missing_images(self):
        textures = BakedTextures(self.tmp.name)
        self.assertIsNone(textures.get_surface('Unknown'))
        with self.assertLogs(viewer.__name__, level="ERROR"):
            self.assertIsNone(textures.get_surface('Gone'))

    def test_missing_manifest(self):
        with tempfile.TemporaryDirectory() as empty:
            with self.assertRaises(FileNotFoundError):
                BakedTextures(empty)


if __name__ == "__main__":
    unittest.main()

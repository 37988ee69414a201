import json
import logging
import os
import tempfile
import unittest

import numpy as np
from PIL import Image

import bake_textures
from bake_worker import render_band_job
from texture_generator.registry import list_names


class TestBakeWorker(unittest.TestCase):
    def test_renders_a_band(self):
        result = render_band_job({'name': 'Checker', 'width': 20, 'height': 20, 'y0': 0, 'y1': 10})
        self.assertEqual((result['name'], result['y0'], result['y1']), ('Checker', 0, 10))
        pixels = result['pixels']
        self.assertEqual(pixels.shape, (10, 20, 4))
        self.assertEqual(tuple(pixels[0, 0]), (0, 0, 0, 255))
        self.assertEqual(tuple(pixels[0, 10]), (255, 255, 255, 255))

    def test_unknown_name_raises(self):
        with self.assertRaises(KeyError):
            render_band_job({'name': 'no-such-texture', 'width': 4, 'height': 4, 'y0': 0, 'y1': 4})

    def test_process_band_reports_errors(self):
        result = bake_textures.process_band({'name': 'no-such-texture', 'width': 4, 'height': 4, 'y0': 0, 'y1': 4})
        self.assertIn('error', result)
        self.assertIn('KeyError', result['error'])


class TestBakeTextures(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("Baker.test")

    def test_plan_bands(self):
        bands = bake_textures.plan_bands(['A'], 10, 12, 5)
        self.assertEqual([(b['y0'], b['y1']) for b in bands], [(0, 5), (5, 10), (10, 12)])
        self.assertEqual(len(bake_textures.plan_bands(['A', 'B'], 4, 4, 0)), 8)

    def test_resolve_names(self):
        self.assertEqual(bake_textures.resolve_names("all", self.logger), list_names())
        with self.assertLogs("Baker.test", level="ERROR"):
            names = bake_textures.resolve_names(['Checker', 'no-such-texture'], self.logger)
        self.assertEqual(names, ['Checker'])

    def test_bake_writes_pngs_and_manifest(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = {
                'output_dir': tmp,
                'width': 16,
                'height': 12,
                'band_height': 5,
                'workers': 1,
                'patterns': ['Checker', 'Uniform'],
            }
            manifest = bake_textures.bake(config, self.logger)
            self.assertEqual(manifest['textures'], {'Checker': 'Checker.png', 'Uniform': 'Uniform.png'})

            with open(os.path.join(tmp, "manifest.json")) as f:
                self.assertEqual(json.load(f), manifest)

            with Image.open(os.path.join(tmp, "Checker.png")) as image:
                self.assertEqual(image.size, (16, 12))
                arr = np.asarray(image)
            self.assertEqual(tuple(arr[0, 0]), (0, 0, 0, 255))
            self.assertEqual(tuple(arr[11, 0]), (255, 255, 255, 255))

    def test_main_with_bad_config_logs_critical(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "broken.json")
            with open(path, "w") as f:
                f.write("{not json")
            with self.assertLogs("Baker", level="CRITICAL"):
                bake_textures.main(["--config", path])


if __name__ == "__main__":
    unittest.main()

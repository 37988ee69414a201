# bake_worker.py

import logging
import os

import texture_generator.catalog  # Registers the named textures
from texture_generator.core import Rect
from texture_generator.registry import get_generator
from texture_generator.render import render_rows


def render_band_job(args: dict) -> dict:
    """
    A top-level, pickle-able function designed to be run in a worker process.
    Rebuilds the named texture from the registry and renders one band of rows.
    THIS FILE MUST NOT IMPORT PYGAME.
    """
    worker_logger = logging.getLogger(f"Worker-{os.getpid()}")

    name = args['name']
    width, height = args['width'], args['height']
    y0, y1 = args['y0'], args['y1']

    generator = get_generator(name)
    if generator is None:
        raise KeyError(f"Unknown texture '{name}'")

    node = generator(Rect(0, 0, width, height))
    worker_logger.debug(f"Rendering '{name}' rows {y0}-{y1}")
    pixels = render_rows(node, Rect(0, 0, width, height), y0, y1)

    return {'name': name, 'y0': y0, 'y1': y1, 'pixels': pixels}

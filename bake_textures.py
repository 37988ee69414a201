# bake_textures.py

"""
================================================================================
OFFLINE TEXTURE BAKER SCRIPT
================================================================================
A command-line tool that renders named textures from the catalog to PNG files
("baking"). Each texture is split into horizontal bands that are rendered in
parallel worker processes, then reassembled and saved alongside a
manifest.json that the viewer reads.

Usage:
    python bake_textures.py --config path/to/bake_config.json
    python bake_textures.py --config bake_config.json --names Lava Wood
    python bake_textures.py --list
================================================================================
"""
import argparse
import json
import logging
import multiprocessing
import os
import sys
import time

import numpy as np
from tqdm import tqdm

import texture_generator.catalog  # Registers the named textures
from texture_generator import config as DEFAULTS
from texture_generator.registry import get_generator, list_names
from texture_generator.render import to_image

from bake_worker import render_band_job


def process_band(args: dict) -> dict:
    """Runs one band job, turning a failure into an error record for the main process."""
    try:
        return render_band_job(args)
    except Exception as e:
        return {'name': args['name'], 'y0': args['y0'], 'y1': args['y1'], 'error': f"{type(e).__name__}: {e}"}


def resolve_names(requested, logger: logging.Logger) -> list:
    """Expands "all" and drops names the registry does not know."""
    if requested is None or requested == "all":
        return list_names()
    names = []
    for name in requested:
        if get_generator(name) is None:
            logger.error(f"Unknown texture '{name}'; skipping. Use --list to see the catalog.")
            continue
        names.append(name)
    return names


def plan_bands(names: list, width: int, height: int, band_height: int) -> list:
    band_height = max(1, band_height)
    return [
        {'name': name, 'width': width, 'height': height, 'y0': y0, 'y1': min(height, y0 + band_height)}
        for name in names
        for y0 in range(0, height, band_height)
    ]


def bake(config: dict, logger: logging.Logger) -> dict:
    """
    Renders every requested texture and writes `<name>.png` plus manifest.json
    into the output directory. Returns the manifest.
    """
    output_dir = config.get('output_dir', DEFAULTS.BAKE_OUTPUT_DIR)
    width = int(config.get('width', DEFAULTS.BAKE_WIDTH))
    height = int(config.get('height', DEFAULTS.BAKE_HEIGHT))
    band_height = int(config.get('band_height', DEFAULTS.BAKE_BAND_HEIGHT))
    num_workers = int(config.get('workers', max(1, multiprocessing.cpu_count() - 1)))

    names = resolve_names(config.get('patterns', "all"), logger)
    os.makedirs(output_dir, exist_ok=True)
    logger.info(f"Baking {len(names)} textures at {width}x{height} into '{output_dir}'")

    buffers = {name: np.zeros((height, width, 4), dtype=np.uint8) for name in names}
    failed = {}
    tasks = plan_bands(names, width, height, band_height)

    start_time = time.perf_counter()
    if num_workers <= 1:
        results_iterator = map(process_band, tasks)
        for result in tqdm(results_iterator, total=len(tasks), desc="Baking Bands"):
            _collect(result, buffers, failed)
    else:
        logger.info(f"Using {num_workers} worker processes.")
        with multiprocessing.Pool(processes=num_workers) as pool:
            results_iterator = pool.imap_unordered(process_band, tasks)
            for result in tqdm(results_iterator, total=len(tasks), desc="Baking Bands"):
                _collect(result, buffers, failed)

    manifest = {'width': width, 'height': height, 'textures': {}}
    for name in names:
        if name in failed:
            logger.error(f"Texture '{name}' failed: {failed[name]}")
            continue
        filename = f"{name}.png"
        try:
            to_image(buffers[name]).save(os.path.join(output_dir, filename), 'PNG')
        except OSError as e:
            logger.error(f"Could not save '{filename}': {e}")
            continue
        manifest['textures'][name] = filename

    manifest_path = os.path.join(output_dir, "manifest.json")
    with open(manifest_path, 'w') as f:
        json.dump(manifest, f, indent=2)

    end_time = time.perf_counter()
    logger.info(f"Baking complete! {len(manifest['textures'])}/{len(names)} textures in {end_time - start_time:.2f} seconds.")
    logger.info(f"Textures and manifest.json saved to: {output_dir}")
    return manifest


def _collect(result: dict, buffers: dict, failed: dict):
    name = result['name']
    if 'error' in result:
        failed.setdefault(name, result['error'])
        return
    buffers[name][result['y0']:result['y1']] = result['pixels']


def main(argv=None):
    # 1. --- Setup Logging ---
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("Baker")

    parser = argparse.ArgumentParser(description="Offline texture baker for the procedural texture generator.")
    parser.add_argument("--config", type=str, help="Path to the JSON bake configuration.")
    parser.add_argument("--list", action="store_true", help="List the registered texture names and exit.")
    parser.add_argument("--names", nargs="+", help="Bake only these textures, overriding the config.")
    args = parser.parse_args(argv)

    if args.list:
        for name in list_names():
            print(name)
        return

    # 2. --- Load Configuration ---
    config = {}
    if args.config:
        logger.info(f"Loading configuration from: {args.config}")
        try:
            with open(args.config, 'r') as f:
                config = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            logger.critical(f"Failed to load or parse config file: {e}")
            return

    if args.names:
        config['patterns'] = args.names

    bake(config, logger)


# --- Command-Line Interface ---
if __name__ == "__main__":
    main()

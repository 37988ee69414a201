# viewer.py

"""
================================================================================
BAKED TEXTURE VIEWER
================================================================================
A pygame window for browsing a bake output directory (see bake_textures.py).
One texture is shown at a time.

Controls:
    WASD / arrow keys   pan
    mouse wheel         zoom
    [ and ]             previous / next texture
    ESC                 quit

Usage:
    python viewer.py [baked_textures]
================================================================================
"""

import json
import logging
import os
import sys

import pygame

from texture_generator import config as DEFAULTS

# --- Application Constants ---
PAN_SPEED_PIXELS = 15
ZOOM_SPEED = 0.1
MAX_ZOOM = 16.0
MIN_ZOOM = 0.01
SCREEN_SIZE = (1280, 720)
BACKGROUND = (10, 10, 20)


class Camera:
    """A simple camera for the viewer to handle pan and zoom."""
    def __init__(self, screen_width, screen_height, world_pixel_width, world_pixel_height):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.fit(world_pixel_width, world_pixel_height)

    def fit(self, world_pixel_width, world_pixel_height):
        """Centers on a new image and zooms so the whole of it is visible."""
        self.world_pixel_width = world_pixel_width
        self.world_pixel_height = world_pixel_height
        if world_pixel_width > 0 and world_pixel_height > 0:
            zoom = min(self.screen_width / world_pixel_width, self.screen_height / world_pixel_height)
            self.zoom = min(MAX_ZOOM, max(MIN_ZOOM, zoom))
        else:
            self.zoom = 1.0
        self.x = world_pixel_width / 2
        self.y = world_pixel_height / 2

    def world_to_screen(self, world_x, world_y):
        screen_x = (world_x - self.x) * self.zoom + self.screen_width / 2
        screen_y = (world_y - self.y) * self.zoom + self.screen_height / 2
        return screen_x, screen_y

    def screen_to_world(self, screen_x, screen_y):
        world_x = (screen_x - self.screen_width / 2) / self.zoom + self.x
        world_y = (screen_y - self.screen_height / 2) / self.zoom + self.y
        return world_x, world_y

    def pan(self, dx, dy):
        # Panning speed is independent of zoom level
        self.x += dx / self.zoom
        self.y += dy / self.zoom

    def zoom_in(self):
        self.zoom = min(MAX_ZOOM, self.zoom * (1 + ZOOM_SPEED))

    def zoom_out(self):
        self.zoom = max(MIN_ZOOM, self.zoom * (1 - ZOOM_SPEED))


class BakedTextures:
    """
    A loaded bake output directory. Reads manifest.json and loads texture
    images on demand, caching each surface once loaded.
    """
    def __init__(self, package_path: str):
        self.package_path = package_path
        self.manifest_path = os.path.join(self.package_path, "manifest.json")
        self.logger = logging.getLogger(__name__)
        self.surface_cache = {}

        if not os.path.exists(self.manifest_path):
            raise FileNotFoundError(f"Could not find manifest.json in '{package_path}'")

        with open(self.manifest_path, 'r') as f:
            manifest_data = json.load(f)

        self.width = manifest_data.get("width", DEFAULTS.BAKE_WIDTH)
        self.height = manifest_data.get("height", DEFAULTS.BAKE_HEIGHT)
        self.textures = manifest_data.get("textures", {})
        self.names = sorted(self.textures)

        self.logger.info(f"Loaded {len(self.names)} baked textures from '{package_path}' ({self.width}x{self.height} pixels).")

    def __len__(self):
        return len(self.names)

    def name_at(self, index: int) -> str:
        return self.names[index % len(self.names)]

    def get_surface(self, name: str):
        if name in self.surface_cache:
            return self.surface_cache[name]

        filename = self.textures.get(name)
        if not filename:
            return None
        filepath = os.path.join(self.package_path, filename)
        try:
            surface = pygame.image.load(filepath)
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
        except (pygame.error, FileNotFoundError):
            self.logger.error(f"Failed to load texture image '{name}' at '{filepath}'")
            return None
        self.surface_cache[name] = surface
        return surface


class ViewerApp:
    """The main application class for the baked texture viewer."""
    def __init__(self, package_path: str):
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        self.logger = logging.getLogger(__name__)

        self.logger.info("Initializing Pygame...")
        pygame.init()

        self.screen_width, self.screen_height = SCREEN_SIZE
        self.screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Baked Texture Viewer")

        self.clock = pygame.time.Clock()
        self.is_running = True
        self.index = 0

        try:
            self.textures = BakedTextures(package_path)
        except FileNotFoundError as e:
            self.logger.critical(str(e))
            self.is_running = False
            return
        if len(self.textures) == 0:
            self.logger.critical("The manifest lists no textures.")
            self.is_running = False
            return
        self.camera = Camera(self.screen_width, self.screen_height, self.textures.width, self.textures.height)

    def run(self):
        """The main application loop."""
        while self.is_running:
            self.handle_events()
            self.update()
            self.draw()
            self.clock.tick(60)

        self.logger.info("Exiting viewer.")
        pygame.quit()
        sys.exit()

    def select(self, step: int):
        self.index = (self.index + step) % len(self.textures)
        self.camera.fit(self.textures.width, self.textures.height)

    def handle_events(self):
        """Processes user input and other events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.is_running = False
                elif event.key == pygame.K_LEFTBRACKET:
                    self.select(-1)
                elif event.key == pygame.K_RIGHTBRACKET:
                    self.select(1)
            elif event.type == pygame.MOUSEWHEEL:
                if event.y > 0:
                    self.camera.zoom_in()
                elif event.y < 0:
                    self.camera.zoom_out()

    def update(self):
        """Handles continuous input like key presses for panning."""
        keys = pygame.key.get_pressed()
        if keys[pygame.K_w] or keys[pygame.K_UP]:
            self.camera.pan(0, -PAN_SPEED_PIXELS)
        if keys[pygame.K_s] or keys[pygame.K_DOWN]:
            self.camera.pan(0, PAN_SPEED_PIXELS)
        if keys[pygame.K_a] or keys[pygame.K_LEFT]:
            self.camera.pan(-PAN_SPEED_PIXELS, 0)
        if keys[pygame.K_d] or keys[pygame.K_RIGHT]:
            self.camera.pan(PAN_SPEED_PIXELS, 0)

    def draw(self):
        """Handles all rendering for the application."""
        self.screen.fill(BACKGROUND)

        name = self.textures.name_at(self.index)
        surface = self.textures.get_surface(name)
        if surface is not None:
            scaled_w = max(1, round(surface.get_width() * self.camera.zoom))
            scaled_h = max(1, round(surface.get_height() * self.camera.zoom))
            screen_pos = self.camera.world_to_screen(0, 0)
            self.screen.blit(pygame.transform.scale(surface, (scaled_w, scaled_h)), screen_pos)

        pygame.display.set_caption(
            f"Baked Texture Viewer | {name} ({self.index + 1}/{len(self.textures)}) | Zoom: {self.camera.zoom:.2f}"
        )
        pygame.display.flip()


if __name__ == '__main__':
    package_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULTS.BAKE_OUTPUT_DIR

    if not os.path.isdir(package_path):
        print(f"Error: Baked textures not found at '{package_path}'")
        print("Please run 'python bake_textures.py --config bake_config.json' first.")
    else:
        app = ViewerApp(package_path=package_path)
        app.run()

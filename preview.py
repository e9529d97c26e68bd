# FOLDER: /

# preview.py

import json
import logging
import logging.config
import os
import sys

import numpy as np
import pygame

from swamp_terrain import TerrainGrid, scatter_props, apply_tuning_key
from swamp_terrain import config as DEFAULTS

# --- Application Constants ---
CONFIG_PATH = 'config.json'
LOG_CONFIG_PATH = 'logging_config.json'
LOG_DIR = 'logs'
PROP_RADIUS_PIXELS = 5

# Marker colors for props, since the preview ships without sprite assets.
PROP_COLORS = {
    "lilypad": (40, 110, 40),
    "cattail": (120, 80, 30),
    "stone": (130, 130, 140),
}

class PreviewApp:
    """A small window for looking at and tuning generated terrain."""
    def __init__(self):
        self._setup_logging()
        self.logger.info("Preview starting.")
        self.config = self._load_config()

        grid_config = self.config.get('grid', {})
        display_config = self.config.get('display', {})

        pygame.init()
        self.terrain = TerrainGrid(
            width=grid_config.get('width', DEFAULTS.DEFAULT_GRID_WIDTH),
            height=grid_config.get('height', DEFAULTS.DEFAULT_GRID_HEIGHT),
            cell_size=grid_config.get('cell_size', DEFAULTS.DEFAULT_CELL_SIZE),
            config=self.config.get('terrain_parameters', {}),
            logger=self.logger
        )
        self.screen = pygame.display.set_mode(self.terrain.pixel_size)
        pygame.display.set_caption("Swamp Terrain Preview")

        self.clock = pygame.time.Clock()
        self.tick_rate = display_config.get('clock_tick_rate', 60)
        self.prop_count = self.config.get('prop_count', DEFAULTS.DEFAULT_PROP_COUNT)
        self.rng = np.random.default_rng()
        self.props = []

        self.terrain.generate(self.config.get('seed'))
        self._scatter_props()
        self.is_running = True

    def _setup_logging(self):
        """Initializes the logging system from a config file."""
        if not os.path.exists(LOG_DIR):
            os.makedirs(LOG_DIR)

        with open(LOG_CONFIG_PATH, 'rt') as f:
            log_config = json.load(f)

        log_config['handlers']['file']['filename'] = os.path.join(LOG_DIR, 'preview.log')
        logging.config.dictConfig(log_config)
        self.logger = logging.getLogger(__name__)

    def _load_config(self) -> dict:
        """Loads preview parameters from the config file."""
        self.logger.info(f"Loading configuration from {CONFIG_PATH}")
        try:
            with open(CONFIG_PATH, 'r') as f:
                return json.load(f)
        except FileNotFoundError:
            self.logger.critical(f"Configuration file not found at {CONFIG_PATH}. Exiting.")
            sys.exit(1)
        except json.JSONDecodeError:
            self.logger.critical(f"Error decoding JSON from {CONFIG_PATH}. Exiting.")
            sys.exit(1)

    def _scatter_props(self):
        self.props = scatter_props(self.terrain, self.prop_count, rng=self.rng)

    def run(self):
        """The main application loop."""
        try:
            while self.is_running:
                self._handle_events()
                self._draw()
                self.clock.tick(self.tick_rate)
        except Exception:
            self.logger.critical("An unhandled exception occurred!", exc_info=True)
            raise
        finally:
            self.terrain.close()
            self.logger.info("Exiting preview.")
            pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.is_running = False
                elif not apply_tuning_key(self.terrain, event.key, on_regenerate=self._scatter_props):
                    self.logger.debug(f"Unhandled key press: {pygame.key.name(event.key)}")

    def _draw(self):
        self.terrain.render(self.screen)
        for prop in self.props:
            pygame.draw.circle(self.screen, PROP_COLORS[prop.kind], (int(prop.x), int(prop.y)), PROP_RADIUS_PIXELS)

        pygame.display.set_caption(
            f"Swamp Terrain Preview | Seed: {self.terrain.seed} | "
            f"Water: {self.terrain.water_threshold:.2f} | Grass: {self.terrain.grass_threshold:.2f}"
        )
        pygame.display.flip()

if __name__ == '__main__':
    app = PreviewApp()
    app.run()

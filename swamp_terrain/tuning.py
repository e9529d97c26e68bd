# swamp_terrain/tuning.py

"""
Keyboard tuning of the terrain thresholds.

W / S raise and lower the water threshold, E / D raise and lower the grass
threshold and R regenerates the map with a fresh seed.
"""
import logging
from typing import Callable, TYPE_CHECKING

import pygame

from . import config as DEFAULTS

if TYPE_CHECKING:
    from .terrain_grid import TerrainGrid

logger = logging.getLogger(__name__)

THRESHOLD_STEP = DEFAULTS.THRESHOLD_STEP

# key -> (threshold name, signed step)
THRESHOLD_KEYS = {
    pygame.K_w: ("water", THRESHOLD_STEP),
    pygame.K_s: ("water", -THRESHOLD_STEP),
    pygame.K_e: ("grass", THRESHOLD_STEP),
    pygame.K_d: ("grass", -THRESHOLD_STEP),
}
REGENERATE_KEY = pygame.K_r

def apply_tuning_key(terrain: 'TerrainGrid', key: int, on_regenerate: Callable[[], None] = None) -> bool:
    """
    Applies the action bound to `key`. Returns False if the key is unbound.
    `on_regenerate` runs after a regeneration, e.g. to rescatter props.
    """
    if key == REGENERATE_KEY:
        logger.info("Regenerating terrain...")
        terrain.generate()
        if on_regenerate is not None:
            on_regenerate()
        return True

    binding = THRESHOLD_KEYS.get(key)
    if binding is None:
        return False

    name, step = binding
    if name == "water":
        terrain.set_water_threshold(terrain.get_water_threshold() + step)
        logger.info(f"Water threshold set to {terrain.get_water_threshold():.3f}")
    else:
        terrain.set_grass_threshold(terrain.get_grass_threshold() + step)
        logger.info(f"Grass threshold set to {terrain.get_grass_threshold():.3f}")
    return True

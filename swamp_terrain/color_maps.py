# swamp_terrain/color_maps.py

"""
================================================================================
SHARED COLOR MAPPING UTILITIES
================================================================================
This module contains the color lookup table and the function that converts a
classified biome map into an RGB pixel array at cell resolution.

It is a pure, stateless utility with no dependencies on Pygame. The arrays it
produces are laid out in surfarray order (x, y, channel) so the render cache
can blit them directly.
================================================================================
"""
import numpy as np

from . import config as DEFAULTS
from .biomes import Biome

# Palette keys in Biome ID order.
BIOME_COLOR_KEYS = {
    Biome.WATER: "water",
    Biome.SWAMP: "swamp",
    Biome.GRASS: "grass",
}

def _validate_color(name: str, color) -> tuple:
    color = tuple(color)
    if len(color) != 3 or not all(isinstance(c, (int, np.integer)) and 0 <= c <= 255 for c in color):
        raise ValueError(f"Color for '{name}' must be an (R, G, B) triple of ints in [0, 255], got {color}")
    return color

def create_biome_color_lut(colors: dict = None) -> np.ndarray:
    """Creates a LUT where the index is the Biome ID and the value is the RGB color."""
    if colors is None:
        colors = DEFAULTS.DEFAULT_COLORS
    lut = np.zeros((len(Biome), 3), dtype=np.uint8)
    for biome, key in BIOME_COLOR_KEYS.items():
        lut[biome] = _validate_color(key, colors[key])
    return lut

def get_terrain_color_array(biome_map: np.ndarray, biome_lut: np.ndarray, cell_size: int) -> np.ndarray:
    """
    Converts a (rows, cols) biome map into a pixel array where every cell
    covers a cell_size x cell_size block.

    Returns an array of shape (cols * cell_size, rows * cell_size, 3).
    """
    colors = biome_lut[biome_map]
    # Expand every cell into a solid block of pixels.
    pixels = np.repeat(np.repeat(colors, cell_size, axis=0), cell_size, axis=1)
    return np.transpose(pixels, (1, 0, 2))

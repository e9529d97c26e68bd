# swamp_terrain/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the terrain
generator. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC GAME SESSION.
Instead, pass a configuration dictionary to the TerrainGrid instance.
================================================================================
"""

# --- Grid Geometry ---
# The play area used by the game: 32x18 cells of 40 pixels (1280x720).
DEFAULT_GRID_WIDTH = 32
DEFAULT_GRID_HEIGHT = 18
DEFAULT_CELL_SIZE = 40

# --- Biome Thresholds (Normalized 0.0 to 1.0) ---
# Anything below the water threshold is water, anything at or above the
# grass threshold is grass. The band in between is swamp.
DEFAULT_WATER_THRESHOLD = 0.425
DEFAULT_GRASS_THRESHOLD = 0.55

# --- Noise Generation ---
# Spatial frequency applied to grid coordinates before sampling the noise.
# Smaller values mean larger ponds and meadows.
NOISE_SCALE = 0.05
NOISE_OCTAVES = 6
NOISE_PERSISTENCE = 0.5
NOISE_LACUNARITY = 2.0

# Every regeneration shifts the sampling window by a random offset drawn from
# [-OFFSET_RANGE, OFFSET_RANGE) on both axes.
OFFSET_RANGE = 1000.0

# Seeds are 32-bit unsigned integers.
MAX_SEED = 2**32

# --- Default Color Mappings ---
DEFAULT_COLORS = {
    "water": (8, 143, 143),    # Blue green
    "swamp": (64, 181, 173),   # Greener blue green
    "grass": (111, 210, 144),
}

# --- Interactive Tuning ---
# How much a single key press moves a threshold.
THRESHOLD_STEP = 0.05

# --- Prop Scattering ---
DEFAULT_PROP_COUNT = 100
# Number of sprite variants available for each prop kind.
PROP_VARIANTS = 3

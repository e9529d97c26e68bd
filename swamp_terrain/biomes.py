# swamp_terrain/biomes.py

"""
================================================================================
BIOME CLASSIFICATION
================================================================================
Maps continuous, normalized noise values to discrete biomes using two ordered
thresholds.

Data Contract:
---------------
- Inputs: a value (or NumPy array of values) and the water/grass thresholds.
- Outputs: a Biome, or a uint8 array of Biome IDs of the same shape.
- Side Effects: None.
- Invariants:
    - value <  water            -> WATER
    - water <= value < grass    -> SWAMP
    - value >= grass            -> GRASS
    The thresholds are NOT validated for ordering. When water >= grass, SWAMP
    is simply unreachable.
================================================================================
"""
from enum import IntEnum

import numpy as np

class Biome(IntEnum):
    """Terrain categories. The integer values double as color LUT indices."""
    WATER = 0
    SWAMP = 1
    GRASS = 2

def classify(value: float, water_threshold: float, grass_threshold: float) -> Biome:
    """Classifies a single normalized value."""
    if value < water_threshold:
        return Biome.WATER
    if value < grass_threshold:
        return Biome.SWAMP
    return Biome.GRASS

def classify_grid(values: np.ndarray, water_threshold: float, grass_threshold: float) -> np.ndarray:
    """
    Classifies a whole array at once. The result agrees element-for-element
    with classify().
    """
    values = np.asarray(values)
    return np.select(
        [values < water_threshold, values < grass_threshold],
        [Biome.WATER, Biome.SWAMP],
        default=Biome.GRASS
    ).astype(np.uint8)

# swamp_terrain/props.py

"""
================================================================================
PROP SCATTERING
================================================================================
Scatters decoration props (lilypads, cattails, stones) over the play area.
The kind of prop at a position is chosen from the biome of the terrain cell
under it, so lilypads float on water, cattails grow in the swamp and stones
lie on grass.

Data Contract:
---------------
- Inputs: a TerrainGrid (read only), a prop count, the pixel area to scatter
  over and an optional NumPy random generator.
- Outputs: a list of Prop tuples in pixel space.
- Side Effects: Advances the given random generator.
================================================================================
"""
from typing import NamedTuple, TYPE_CHECKING

import numpy as np

from . import config as DEFAULTS
from .biomes import Biome, classify

if TYPE_CHECKING:
    from .terrain_grid import TerrainGrid

PROP_KINDS = {
    Biome.WATER: "lilypad",
    Biome.SWAMP: "cattail",
    Biome.GRASS: "stone",
}

class Prop(NamedTuple):
    kind: str
    variant: int
    x: float
    y: float

def scatter_props(
    terrain: 'TerrainGrid',
    count: int = DEFAULTS.DEFAULT_PROP_COUNT,
    area_width: float = None,
    area_height: float = None,
    rng: np.random.Generator = None
) -> list[Prop]:
    """
    Places up to `count` props at uniformly random pixel positions.

    The area defaults to the terrain's own pixel size. When the area is larger
    than the terrain, positions that fall outside the grid are skipped, so
    fewer than `count` props may be returned.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if rng is None:
        rng = np.random.default_rng()

    pixel_width, pixel_height = terrain.pixel_size
    area_width = pixel_width if area_width is None else area_width
    area_height = pixel_height if area_height is None else area_height

    water = terrain.get_water_threshold()
    grass = terrain.get_grass_threshold()

    props = []
    for _ in range(count):
        x = float(rng.uniform(0, area_width))
        y = float(rng.uniform(0, area_height))

        col, row = terrain.pixel_to_cell(x, y)
        if not terrain.in_bounds(col, row):
            continue

        biome = classify(terrain.get_value_at(col, row), water, grass)
        variant = int(rng.integers(0, DEFAULTS.PROP_VARIANTS))
        props.append(Prop(PROP_KINDS[biome], variant, x, y))

    return props

# swamp_terrain/__init__.py

# This file makes the 'swamp_terrain' directory a Python package.
# It also defines the public API of the package.

from .biomes import Biome, classify, classify_grid
from .terrain_grid import TerrainGrid, GridIndexError, TerrainNotGeneratedError
from .render_cache import TerrainSurfaceCache, TerrainCacheError
from .props import Prop, scatter_props
from .tuning import apply_tuning_key

__all__ = [
    "Biome", "classify", "classify_grid",
    "TerrainGrid", "GridIndexError", "TerrainNotGeneratedError",
    "TerrainSurfaceCache", "TerrainCacheError",
    "Prop", "scatter_props",
    "apply_tuning_key",
]

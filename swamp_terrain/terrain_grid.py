# swamp_terrain/terrain_grid.py

"""
================================================================================
TERRAIN GRID
================================================================================
This module contains the TerrainGrid class, which owns the noise grid of the
play area, regenerates it, classifies it into biomes and keeps a lazily
rebuilt, cached rendering of it.

Data Contract:
---------------
- Inputs (on initialization):
    - width, height, cell_size (int): Grid dimensions in cells and the pixel
      edge length of one cell. Fixed for the grid's lifetime.
    - config (dict): A dictionary of parameters which can override the
      internal defaults (thresholds, noise tunables, colors).
    - logger: A configured Python logging object for runtime messages.
    - permutation_table (np.ndarray, optional): A pre-computed noise
      permutation table. If None, one is built from each generation's seed.
- Outputs (from methods):
    - Normalized cell values [0, 1], Biome classifications, and a cached
      pygame.Surface of size (width * cell_size, height * cell_size).
- Side Effects: Logs messages using the provided logger. Allocates a
  pygame.Surface for the render cache.
- Invariants:
    - Given the same seed (and rotation/offset), generation is deterministic.
    - Every grid value lies in [0, 1] after generation.
    - The cache is rebuilt at most once between two mutations.
    - Queries never trigger regeneration or a cache rebuild.
================================================================================
"""
import logging
import math

import numpy as np
import pygame

from . import config as DEFAULTS
from . import noise
from . import color_maps
from .biomes import Biome, classify, classify_grid
from .render_cache import TerrainSurfaceCache, TerrainCacheError

class GridIndexError(IndexError):
    """A grid query used non-integer indices or a cell outside the grid."""

class TerrainNotGeneratedError(RuntimeError):
    """The grid was queried or rendered before its first generation."""

class TerrainGrid:
    """
    The terrain of the play area. Collaborators (water effects, prop
    placement, spawning) receive the grid by reference and only read it.
    """
    def __init__(
        self,
        width: int = DEFAULTS.DEFAULT_GRID_WIDTH,
        height: int = DEFAULTS.DEFAULT_GRID_HEIGHT,
        cell_size: int = DEFAULTS.DEFAULT_CELL_SIZE,
        config: dict = None,
        logger: logging.Logger = None,
        permutation_table: np.ndarray = None
    ):
        self.logger = logger or logging.getLogger(__name__)

        for name, value in (("width", width), ("height", height), ("cell_size", cell_size)):
            if not isinstance(value, (int, np.integer)) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        self._width = int(width)
        self._height = int(height)
        self._cell_size = int(cell_size)

        # --- Consolidate Configuration ---
        self.user_config = config or {}
        self.settings = {
            'water_threshold': self.user_config.get('water_threshold', DEFAULTS.DEFAULT_WATER_THRESHOLD),
            'grass_threshold': self.user_config.get('grass_threshold', DEFAULTS.DEFAULT_GRASS_THRESHOLD),
            'noise_scale': self.user_config.get('noise_scale', DEFAULTS.NOISE_SCALE),
            'noise_octaves': self.user_config.get('noise_octaves', DEFAULTS.NOISE_OCTAVES),
            'noise_persistence': self.user_config.get('noise_persistence', DEFAULTS.NOISE_PERSISTENCE),
            'noise_lacunarity': self.user_config.get('noise_lacunarity', DEFAULTS.NOISE_LACUNARITY),
            'offset_range': self.user_config.get('offset_range', DEFAULTS.OFFSET_RANGE),
            'colors': dict(self.user_config.get('colors', DEFAULTS.DEFAULT_COLORS)),
        }
        if self.settings['noise_octaves'] < 1:
            raise ValueError(f"noise_octaves must be at least 1, got {self.settings['noise_octaves']}")

        self._water_threshold = _clamp_unit(self.settings['water_threshold'])
        self._grass_threshold = _clamp_unit(self.settings['grass_threshold'])
        self._check_threshold_order()
        self._biome_lut = color_maps.create_biome_color_lut(self.settings['colors'])

        # --- Initialize Noise ---
        if permutation_table is not None:
            permutation_table = np.asarray(permutation_table, dtype=np.int64)
            if permutation_table.shape != (2 * noise.PERMUTATION_SIZE,):
                raise ValueError(
                    f"permutation_table must have {2 * noise.PERMUTATION_SIZE} entries, got {permutation_table.shape}"
                )
            self.logger.debug("Initialized with injected permutation table.")
        self._injected_p = permutation_table
        self._p = permutation_table

        # The grid is stored row-major: _grid[row, col].
        self._grid = np.zeros((self._height, self._width), dtype=np.float64)
        self._generated = False
        self._generation_params = None

        # --- Render Cache ---
        self._cache = TerrainSurfaceCache(self.pixel_size, logger=self.logger)
        self._cache.allocate()

        self.logger.info(
            f"TerrainGrid initialized: {self._width}x{self._height} cells of "
            f"{self._cell_size}px ({self.pixel_size[0]}x{self.pixel_size[1]} px)."
        )

    # --- Geometry ---
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_size(self) -> int:
        return self._cell_size

    @property
    def pixel_size(self) -> tuple[int, int]:
        return self._width * self._cell_size, self._height * self._cell_size

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def get_cell_size(self) -> int:
        return self._cell_size

    def pixel_to_cell(self, px: float, py: float) -> tuple[int, int]:
        """Converts a pixel-space position to the (col, row) of the cell containing it."""
        return int(px // self._cell_size), int(py // self._cell_size)

    # --- Generation ---
    def generate(self, seed: int = None):
        """
        Regenerates the whole field.

        Without a seed, a fresh one is drawn from OS entropy, so every call
        produces a different map. With a seed, the rotation and offset are
        derived from it and the same map is reproduced.
        """
        if seed is None:
            seed = int(np.random.default_rng().integers(0, DEFAULTS.MAX_SEED))
        _check_seed(seed)

        rng = np.random.default_rng(seed)
        offset_range = self.settings['offset_range']
        angle = float(rng.uniform(0.0, 2.0 * math.pi))
        offset_x, offset_y = (float(v) for v in rng.uniform(-offset_range, offset_range, size=2))

        self.generate_with_parameters(seed, angle, offset_x, offset_y)

    def generate_with_parameters(self, seed: int, angle: float, offset_x: float, offset_y: float):
        """
        Deterministic generation: the same seed, rotation angle (radians) and
        offset always produce the same grid.
        """
        _check_seed(seed)
        for name, value in (("angle", angle), ("offset_x", offset_x), ("offset_y", offset_y)):
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        self.logger.info("Generating new terrain...")
        self.logger.info(f"Seed: {seed}, Angle: {angle:.4f}, Offset X: {offset_x:.2f}, Offset Y: {offset_y:.2f}")

        # 1. Rebuild the permutation table for this seed.
        if self._injected_p is not None:
            self._p = self._injected_p
        else:
            self._p = noise.create_permutation_table(seed)

        # 2. Rotate and translate the cell coordinates, then apply the spatial frequency.
        scale = self.settings['noise_scale']
        cos_angle = math.cos(angle)
        sin_angle = math.sin(angle)
        cols, rows = np.meshgrid(
            np.arange(self._width, dtype=np.float64),
            np.arange(self._height, dtype=np.float64)
        )
        rot_x = (cols * cos_angle - rows * sin_angle + offset_x) * scale
        rot_y = (cols * sin_angle + rows * cos_angle + offset_y) * scale

        # 3. Sample the fractal noise.
        raw = noise.octave_noise_grid(
            self._p, rot_x, rot_y,
            octaves=self.settings['noise_octaves'],
            persistence=self.settings['noise_persistence'],
            lacunarity=self.settings['noise_lacunarity']
        )

        # 4. Normalize [-1, 1] to [0, 1]. The noise is not strictly bounded,
        # so clip to keep the grid invariant.
        self._grid = np.clip((raw + 1.0) * 0.5, 0.0, 1.0)
        self._generated = True
        self._generation_params = (int(seed), float(angle), float(offset_x), float(offset_y))

        # 5. Destroy and recreate the cache; it is dirty until the next render.
        self._cache.recreate()
        self.logger.info("Terrain generation complete.")

    @property
    def is_generated(self) -> bool:
        return self._generated

    @property
    def generation_params(self) -> tuple | None:
        """(seed, angle, offset_x, offset_y) of the last generation, or None."""
        return self._generation_params

    @property
    def seed(self) -> int | None:
        return self._generation_params[0] if self._generation_params else None

    @property
    def permutation_table(self) -> np.ndarray | None:
        return self._p

    # --- Thresholds & Colors ---
    @property
    def water_threshold(self) -> float:
        return self._water_threshold

    @water_threshold.setter
    def water_threshold(self, value: float):
        self._water_threshold = _clamp_unit(value)
        self._check_threshold_order()
        self._cache.invalidate()

    @property
    def grass_threshold(self) -> float:
        return self._grass_threshold

    @grass_threshold.setter
    def grass_threshold(self, value: float):
        self._grass_threshold = _clamp_unit(value)
        self._check_threshold_order()
        self._cache.invalidate()

    def set_water_threshold(self, value: float):
        self.water_threshold = value

    def set_grass_threshold(self, value: float):
        self.grass_threshold = value

    def get_water_threshold(self) -> float:
        return self._water_threshold

    def get_grass_threshold(self) -> float:
        return self._grass_threshold

    def _check_threshold_order(self):
        if self._water_threshold >= self._grass_threshold:
            self.logger.warning(
                f"Water threshold {self._water_threshold:.3f} is not below grass threshold "
                f"{self._grass_threshold:.3f}; no swamp will be produced."
            )

    def set_colors(self, water: tuple, swamp: tuple, grass: tuple):
        """Replaces the biome palette. The next render repaints the cache."""
        colors = {"water": water, "swamp": swamp, "grass": grass}
        self._biome_lut = color_maps.create_biome_color_lut(colors)
        self.settings['colors'] = colors
        self._cache.invalidate()

    @property
    def colors(self) -> dict:
        return {key: tuple(int(c) for c in self._biome_lut[biome]) for biome, key in color_maps.BIOME_COLOR_KEYS.items()}

    # --- Queries ---
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _require_generated(self):
        if not self._generated:
            raise TerrainNotGeneratedError("terrain has not been generated yet; call generate() first")

    def get_value_at(self, x: int, y: int) -> float:
        """
        Raw normalized value of cell (x, y). Only integer indices are accepted;
        anything else, or a cell outside the grid, raises GridIndexError.
        """
        if not (isinstance(x, (int, np.integer)) and isinstance(y, (int, np.integer))):
            raise GridIndexError(f"cell indices must be integers, got ({x!r}, {y!r})")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise GridIndexError(f"cell ({x}, {y}) is outside the {self._width}x{self._height} grid")
        self._require_generated()
        return float(self._grid[y, x])

    def get_biome_at(self, x: int, y: int) -> Biome:
        return classify(self.get_value_at(x, y), self._water_threshold, self._grass_threshold)

    def is_water(self, x: int, y: int) -> bool:
        return self.get_value_at(x, y) < self._water_threshold

    @property
    def values(self) -> np.ndarray:
        """A read-only view of the grid, indexed [row, col]."""
        self._require_generated()
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def biome_map(self) -> np.ndarray:
        """The classified grid, indexed [row, col]."""
        self._require_generated()
        return classify_grid(self._grid, self._water_threshold, self._grass_threshold)

    # --- Rendering ---
    @property
    def is_dirty(self) -> bool:
        return self._cache.is_dirty

    @property
    def rebuild_count(self) -> int:
        return self._cache.rebuild_count

    def _rebuild_cache(self):
        self.logger.debug("Updating terrain texture...")
        color_array = color_maps.get_terrain_color_array(self.biome_map(), self._biome_lut, self._cell_size)
        self._cache.rebuild(color_array)
        self.logger.debug("Texture update complete.")

    def get_surface(self) -> pygame.Surface:
        """The cached terrain surface, repainted first if it is stale."""
        self._require_generated()
        if self._cache.is_dirty:
            self._rebuild_cache()
        return self._cache.surface

    def render(self, surface: pygame.Surface, dest: tuple[int, int] = (0, 0)):
        """Draws the terrain onto `surface`. Only repaints the cache when it is dirty."""
        surface.blit(self.get_surface(), dest)

    def close(self):
        """Releases the render cache. Rendering afterwards raises TerrainCacheError."""
        if self._cache.is_allocated:
            self._cache.release()
            self.logger.debug("Terrain surface released.")

    @property
    def closed(self) -> bool:
        return not self._cache.is_allocated

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, float(value)))

def _check_seed(seed: int):
    if not isinstance(seed, (int, np.integer)) or not 0 <= seed < DEFAULTS.MAX_SEED:
        raise ValueError(f"seed must be an integer in [0, 2**32), got {seed!r}")

__all__ = ["TerrainGrid", "GridIndexError", "TerrainNotGeneratedError", "TerrainCacheError"]

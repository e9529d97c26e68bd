# swamp_terrain/render_cache.py

"""
================================================================================
TERRAIN RENDER CACHE
================================================================================
A small resource wrapper around the pygame.Surface that holds the rasterized
terrain. It ties the surface's lifetime to its owner and tracks whether the
cached pixels still match the source data.

Data Contract:
---------------
- Inputs (on initialization):
    - size (tuple): The (width, height) of the surface in pixels.
    - logger: A configured Python logging object for runtime messages.
- Public Methods:
    - allocate(), recreate(), release(): Surface lifecycle.
    - invalidate(): Marks the cached pixels as stale.
    - rebuild(color_array): Writes new pixels and clears the dirty flag.
- Public Properties:
    - surface, is_dirty, rebuild_count, is_allocated.
- Side Effects: Allocates and frees a pygame.Surface.
- Invariants: Between two rebuilds the surface pixels are never modified.
  Allocation failures are fatal and are raised as TerrainCacheError.
================================================================================
"""
import logging

import numpy as np
import pygame

class TerrainCacheError(RuntimeError):
    """The terrain surface could not be allocated or is no longer available."""

class TerrainSurfaceCache:
    """Owns the cached terrain surface and its dirty flag."""

    def __init__(self, size: tuple[int, int], logger: logging.Logger = None):
        self.size = size
        self.logger = logger or logging.getLogger(__name__)
        self._surface = None
        self._dirty = True
        self._rebuild_count = 0

    # --- Lifecycle ---
    def allocate(self):
        """Creates the backing surface. Any failure is fatal for the cache."""
        try:
            self._surface = pygame.Surface(self.size)
        except (pygame.error, MemoryError) as e:
            self.logger.critical(f"Failed to allocate {self.size[0]}x{self.size[1]} terrain surface: {e}")
            raise TerrainCacheError(f"could not allocate terrain surface of size {self.size}") from e
        self._dirty = True
        self.logger.debug(f"Allocated terrain surface {self.size[0]}x{self.size[1]}.")

    def recreate(self):
        """Destroys the current surface and allocates a fresh, dirty one."""
        self.release()
        self.allocate()

    def release(self):
        """Drops the surface. Safe to call more than once."""
        self._surface = None
        self._dirty = True

    def __enter__(self):
        if self._surface is None:
            self.allocate()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    # --- State ---
    @property
    def surface(self) -> pygame.Surface:
        if self._surface is None:
            raise TerrainCacheError("terrain surface has been released")
        return self._surface

    @property
    def is_allocated(self) -> bool:
        return self._surface is not None

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def rebuild_count(self) -> int:
        return self._rebuild_count

    def invalidate(self):
        self._dirty = True

    def rebuild(self, color_array: np.ndarray):
        """
        Copies a (width, height, 3) uint8 color array into the surface and
        marks the cache clean.
        """
        surface = self.surface
        if color_array.shape[:2] != surface.get_size():
            raise ValueError(
                f"Color array of shape {color_array.shape[:2]} does not match surface size {surface.get_size()}"
            )
        pygame.surfarray.blit_array(surface, color_array)
        self._dirty = False
        self._rebuild_count += 1

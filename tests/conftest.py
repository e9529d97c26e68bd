import os

# Surfaces are created without a window during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from swamp_terrain import TerrainGrid


@pytest.fixture
def identity_table():
    p = np.arange(256, dtype=np.int64)
    return np.stack([p, p]).flatten()


@pytest.fixture
def terrain():
    grid = TerrainGrid(width=24, height=16, cell_size=4)
    grid.generate(seed=1234)
    yield grid
    grid.close()

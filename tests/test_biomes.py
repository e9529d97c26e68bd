import numpy as np
import pytest

from swamp_terrain.biomes import Biome, classify, classify_grid


@pytest.mark.parametrize("value, expected", [
    (0.0, Biome.WATER),
    (0.424, Biome.WATER),
    (0.425, Biome.SWAMP),
    (0.5, Biome.SWAMP),
    (0.55, Biome.GRASS),
    (1.0, Biome.GRASS),
])
def test_classify_half_open_bands(value, expected):
    assert classify(value, 0.425, 0.55) == expected


def test_degenerate_thresholds_make_swamp_unreachable():
    values = np.linspace(0.0, 1.0, 101)
    labels = {classify(v, 0.6, 0.4) for v in values}
    assert Biome.SWAMP not in labels
    assert labels == {Biome.WATER, Biome.GRASS}


def test_classify_grid_agrees_with_classify():
    rng = np.random.default_rng(0)
    values = rng.uniform(0.0, 1.0, size=(9, 13))
    values[0, 0] = 0.425
    values[0, 1] = 0.55
    labels = classify_grid(values, 0.425, 0.55)
    assert labels.dtype == np.uint8
    assert labels.shape == values.shape
    for (row, col), value in np.ndenumerate(values):
        assert labels[row, col] == classify(value, 0.425, 0.55)

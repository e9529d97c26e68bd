import numpy as np
import pytest

from swamp_terrain import color_maps
from swamp_terrain.biomes import Biome


def test_default_lut_follows_biome_ids():
    lut = color_maps.create_biome_color_lut()
    assert lut.shape == (3, 3)
    assert tuple(lut[Biome.WATER]) == (8, 143, 143)
    assert tuple(lut[Biome.SWAMP]) == (64, 181, 173)
    assert tuple(lut[Biome.GRASS]) == (111, 210, 144)


@pytest.mark.parametrize("bad", [(0, 0), (0, 0, 256), (-1, 0, 0), (0.5, 0, 0)])
def test_lut_rejects_invalid_colors(bad):
    colors = {"water": bad, "swamp": (0, 0, 0), "grass": (0, 0, 0)}
    with pytest.raises(ValueError):
        color_maps.create_biome_color_lut(colors)


def test_color_array_expands_cells_into_blocks():
    lut = color_maps.create_biome_color_lut()
    biome_map = np.array([[Biome.WATER, Biome.GRASS, Biome.SWAMP]], dtype=np.uint8)
    pixels = color_maps.get_terrain_color_array(biome_map, lut, cell_size=3)

    # surfarray order: (x, y, channel)
    assert pixels.shape == (9, 3, 3)
    assert np.all(pixels[0:3, :, :] == lut[Biome.WATER])
    assert np.all(pixels[3:6, :, :] == lut[Biome.GRASS])
    assert np.all(pixels[6:9, :, :] == lut[Biome.SWAMP])

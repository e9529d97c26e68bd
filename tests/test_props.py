import numpy as np
import pytest

from swamp_terrain import scatter_props
from swamp_terrain.biomes import Biome
from swamp_terrain.props import PROP_KINDS


def test_prop_kind_follows_cell_biome(terrain):
    props = scatter_props(terrain, 200, rng=np.random.default_rng(1))
    assert len(props) == 200
    for prop in props:
        col, row = terrain.pixel_to_cell(prop.x, prop.y)
        assert prop.kind == PROP_KINDS[terrain.get_biome_at(col, row)]
        assert 0 <= prop.variant < 3


def test_props_follow_threshold_changes(terrain):
    terrain.set_water_threshold(1.0)
    terrain.set_grass_threshold(1.0)
    props = scatter_props(terrain, 50, rng=np.random.default_rng(2))
    assert {prop.kind for prop in props} == {PROP_KINDS[Biome.WATER]}


def test_positions_outside_the_grid_are_skipped(terrain):
    width, height = terrain.pixel_size
    props = scatter_props(terrain, 400, area_width=width * 2, area_height=height, rng=np.random.default_rng(3))
    assert 0 < len(props) < 400
    assert all(prop.x < width for prop in props)


def test_scatter_is_reproducible_with_a_seeded_generator(terrain):
    a = scatter_props(terrain, 30, rng=np.random.default_rng(9))
    b = scatter_props(terrain, 30, rng=np.random.default_rng(9))
    assert a == b


def test_negative_count_is_rejected(terrain):
    with pytest.raises(ValueError):
        scatter_props(terrain, -1)
    assert scatter_props(terrain, 0) == []

import numpy as np
import pytest

from swamp_terrain import noise


def test_permutation_table_is_a_duplicated_shuffle():
    p = noise.create_permutation_table(42)
    assert p.shape == (512,)
    assert sorted(p[:256].tolist()) == list(range(256))
    assert np.array_equal(p[:256], p[256:])


def test_permutation_table_depends_only_on_seed():
    assert np.array_equal(noise.create_permutation_table(7), noise.create_permutation_table(7))
    assert not np.array_equal(noise.create_permutation_table(7), noise.create_permutation_table(8))


def test_noise_is_zero_on_lattice_points():
    p = noise.create_permutation_table(3)
    for x, y in [(0, 0), (1, 0), (5, 9), (-3, 2), (255, 256)]:
        assert noise.noise_2d(p, float(x), float(y)) == 0.0


def test_noise_stays_near_unit_range():
    p = noise.create_permutation_table(11)
    xs, ys = np.meshgrid(np.linspace(-20, 20, 60), np.linspace(-20, 20, 60))
    values = noise.octave_noise_grid(p, xs, ys, octaves=1)
    assert np.all(np.abs(values) <= 1.0)
    assert values.std() > 0.05


def test_grid_matches_point_samples():
    p = noise.create_permutation_table(5)
    xs, ys = np.meshgrid(np.linspace(0.1, 4.7, 7), np.linspace(-2.3, 1.9, 5))
    grid = noise.octave_noise_grid(p, xs, ys, octaves=4, persistence=0.6)
    assert grid.shape == xs.shape
    for i in range(xs.shape[0]):
        for j in range(xs.shape[1]):
            assert grid[i, j] == pytest.approx(noise.octave_noise(p, xs[i, j], ys[i, j], octaves=4, persistence=0.6))


def test_single_octave_equals_base_noise():
    p = noise.create_permutation_table(9)
    assert noise.octave_noise(p, 1.3, 2.7, octaves=1) == pytest.approx(noise.noise_2d(p, 1.3, 2.7))


def test_octave_sum_is_normalized_by_amplitude_mass(identity_table):
    # At x = 0.5 every octave samples a lattice point except the first one.
    base = noise.noise_2d(identity_table, 0.5, 0.0)
    total = noise.octave_noise(identity_table, 0.5, 0.0, octaves=3, persistence=0.5)
    assert total == pytest.approx(base / 1.75)


def test_rejects_zero_octaves():
    p = noise.create_permutation_table(1)
    with pytest.raises(ValueError):
        noise.octave_noise(p, 0.5, 0.5, octaves=0)
    with pytest.raises(ValueError):
        noise.octave_noise_grid(p, np.zeros((2, 2)), np.zeros((2, 2)), octaves=0)


def test_grid_rejects_mismatched_shapes():
    p = noise.create_permutation_table(1)
    with pytest.raises(ValueError):
        noise.octave_noise_grid(p, np.zeros((2, 3)), np.zeros((3, 2)))

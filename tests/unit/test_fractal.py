"""
Tests for octave compositing.

Author: B.G.
"""

import math
import warnings

import numpy as np
import pytest

from pyfastnoise import constants as cte
from pyfastnoise.errors import InvalidParameterError
from pyfastnoise.noise.fractal import fractal_bound, fractal_sample, fractal_sample_array
from pyfastnoise.noise.perlin_noise import perlin_sample


@pytest.mark.unit
def test_zero_octaves_is_zero():
    assert fractal_sample(20, 12.3, 45.6, scale=30.0, octaves=0, persistence=0.5) == 0.0
    arr = fractal_sample_array(20, np.array([1.5, 2.5]), np.array([3.5, 4.5]),
                               scale=30.0, octaves=0, persistence=0.5)
    assert np.all(arr == 0.0)


@pytest.mark.unit
def test_single_octave_is_scaled_perlin():
    for x, y in [(12.3, 45.6), (-7.1, 3.3), (100.0, -250.5)]:
        expected = perlin_sample(20, x / 30.0, y / 30.0)
        assert fractal_sample(20, x, y, scale=30.0, octaves=1, persistence=0.5) == expected


@pytest.mark.unit
def test_zero_persistence_keeps_first_octave():
    for x, y in [(12.3, 45.6), (-7.1, 3.3)]:
        first = fractal_sample(20, x, y, scale=17.0, octaves=1, persistence=0.0)
        many = fractal_sample(20, x, y, scale=17.0, octaves=5, persistence=0.0)
        assert many == first


@pytest.mark.unit
def test_scenario_single_octave_lattice_corners():
    """seed=20, scale=30: sample points on lattice corners give 0."""
    for x, y in [(0, 0), (30, 0), (0, 30)]:
        assert fractal_sample(20, x, y, scale=30, octaves=1, persistence=0.5) == 0.0


@pytest.mark.unit
def test_scenario_three_octaves_sum_of_contributions():
    """seed=20, scale=53, 3 octaves, persistence 0.5 is the sum of its octaves."""
    for x, y in [(0.0, 0.0), (17.3, 41.9), (-88.0, 5.25)]:
        expected = 0.0
        for n in range(3):
            expected += perlin_sample(20, (x / 53) * 2 ** n, (y / 53) * 2 ** n) * 0.5 ** n
        assert fractal_sample(20, x, y, scale=53, octaves=3, persistence=0.5) == expected

    assert fractal_sample(20, 0, 0, scale=53, octaves=3, persistence=0.5) == 0.0


@pytest.mark.unit
def test_lacunarity_changes_frequency():
    x, y = 17.3, 41.9
    expected = perlin_sample(20, x / 53, y / 53) + perlin_sample(20, x / 53 * 3.0, y / 53 * 3.0) * 0.5
    got = fractal_sample(20, x, y, scale=53, octaves=2, persistence=0.5, lacunarity=3.0)
    assert got == expected


@pytest.mark.unit
def test_array_matches_scalar(sample_points):
    xs, ys = sample_points
    xs, ys = xs[:200] * 5.0, ys[:200] * 5.0
    arr = fractal_sample_array(3, xs, ys, scale=40.0, octaves=4, persistence=0.6)
    for k in range(200):
        assert arr[k] == fractal_sample(3, xs[k], ys[k], scale=40.0, octaves=4, persistence=0.6)


@pytest.mark.unit
def test_bound_holds(sample_points):
    xs, ys = sample_points
    for octaves, persistence in [(1, 0.5), (3, 0.5), (5, 0.9), (4, 1.0)]:
        v = fractal_sample_array(20, xs * 10.0, ys * 10.0, scale=25.0,
                                 octaves=octaves, persistence=persistence)
        assert np.all(np.abs(v) <= fractal_bound(octaves, persistence) + 1e-9)


@pytest.mark.unit
def test_fractal_bound_values():
    assert fractal_bound(0, 0.5) == 0.0
    assert fractal_bound(1, 0.5) == cte.PERLIN_BOUND
    assert math.isclose(fractal_bound(3, 0.5), cte.PERLIN_BOUND * 1.75)
    assert math.isclose(fractal_bound(4, 1.0), cte.PERLIN_BOUND * 4)


@pytest.mark.unit
@pytest.mark.parametrize("persistence", [-0.1, 1.5, math.nan, math.inf])
def test_invalid_persistence(persistence):
    with pytest.raises(InvalidParameterError):
        fractal_sample(20, 1.0, 1.0, scale=30.0, octaves=2, persistence=persistence)
    with pytest.raises(InvalidParameterError):
        fractal_bound(2, persistence)


@pytest.mark.unit
@pytest.mark.parametrize("octaves", [-1, 2.5, "3", True])
def test_invalid_octaves(octaves):
    with pytest.raises(InvalidParameterError):
        fractal_sample(20, 1.0, 1.0, scale=30.0, octaves=octaves, persistence=0.5)


@pytest.mark.unit
@pytest.mark.parametrize("scale", [0.0, -3.0, math.inf, math.nan])
def test_invalid_scale(scale):
    with pytest.raises(InvalidParameterError):
        fractal_sample_array(20, np.zeros(3), np.zeros(3), scale=scale, octaves=1, persistence=0.5)


@pytest.mark.unit
def test_invalid_lacunarity():
    with pytest.raises(InvalidParameterError):
        fractal_sample(20, 1.0, 1.0, scale=30.0, octaves=2, persistence=0.5, lacunarity=0.0)


@pytest.mark.unit
def test_large_octave_counts_stay_finite():
    """Octaves past the float64 integer limit add nothing and never overflow."""
    many = fractal_sample(20, 1.3, 2.7, scale=30.0, octaves=1100, persistence=0.5)
    fewer = fractal_sample(20, 1.3, 2.7, scale=30.0, octaves=100, persistence=0.5)
    assert math.isfinite(many)
    assert many == fewer
    assert abs(many) <= fractal_bound(1100, 0.5)


@pytest.mark.unit
def test_large_octave_counts_vectorised_without_warnings():
    xs = np.array([[0.0, 1.3, -250.0], [17.0, 0.0, 1e6]])
    ys = np.array([[0.0, 2.7, 3.5], [0.0, -41.9, 1e6]])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        arr = fractal_sample_array(20, xs, ys, scale=30.0, octaves=1100, persistence=0.5)
    assert np.all(np.isfinite(arr))
    for (j, i), v in np.ndenumerate(arr):
        assert v == fractal_sample(20, xs[j, i], ys[j, i], scale=30.0, octaves=1100, persistence=0.5)


@pytest.mark.unit
@pytest.mark.parametrize("lacunarity", [0.5, 1.0, 1e10, 1e300])
def test_extreme_lacunarity_stays_finite(lacunarity):
    v = fractal_sample(20, 1.3, 2.7, scale=30.0, octaves=1100, persistence=0.5, lacunarity=lacunarity)
    assert math.isfinite(v)
    arr = fractal_sample_array(20, np.array([1.3, 0.0]), np.array([2.7, 5.0]), scale=30.0,
                               octaves=1100, persistence=0.5, lacunarity=lacunarity)
    assert np.all(np.isfinite(arr))
    assert arr[0] == v


@pytest.mark.unit
@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_non_finite_coordinates_rejected(bad):
    with pytest.raises(InvalidParameterError):
        fractal_sample(20, bad, 1.0, scale=30.0, octaves=3, persistence=0.5)
    with pytest.raises(InvalidParameterError):
        fractal_sample_array(20, np.array([1.0, bad]), np.zeros(2), scale=30.0, octaves=3, persistence=0.5)

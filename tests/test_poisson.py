import itertools
import math

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tubeflight.poisson import disk_sampler_2d, is_valid
from tubeflight.randomness import Random


def test_points_respect_minimum_distance():
    radius = 10.0
    points = disk_sampler_2d(radius, (100.0, 80.0), 30, Random(3))
    assert len(points) > 10
    for a, b in itertools.combinations(points, 2):
        assert np.linalg.norm(a - b) >= radius - 1e-9


def test_points_stay_inside_region():
    points = disk_sampler_2d(5.0, (60.0, 40.0), 30, Random(11))
    for x, y in points:
        assert 0 <= x < 60.0
        assert 0 <= y < 40.0


def test_same_seed_gives_same_points():
    first = disk_sampler_2d(8.0, (50.0, 50.0), 20, Random(42))
    second = disk_sampler_2d(8.0, (50.0, 50.0), 20, Random(42))
    assert len(first) == len(second)
    for a, b in zip(first, second):
        np.testing.assert_array_equal(a, b)


def test_zero_area_region_has_no_points():
    assert disk_sampler_2d(5.0, (0.0, 0.0), 30, Random(1)) == []


def test_non_positive_radius_raises():
    with pytest.raises(ValueError):
        disk_sampler_2d(0.0, (10.0, 10.0), 30, Random(1))


def _grid(size, cell):
    return [[0] * math.ceil(size[1] / cell) for _ in range(math.ceil(size[0] / cell))]


def test_is_valid_rejects_outside_region():
    size = (20.0, 20.0)
    cell = 5.0 / math.sqrt(2.0)
    grid = _grid(size, cell)
    assert not is_valid((-1.0, 5.0), size, cell, 5.0, [], grid)
    assert not is_valid((5.0, 20.0), size, cell, 5.0, [], grid)
    assert is_valid((5.0, 5.0), size, cell, 5.0, [], grid)


def test_is_valid_rejects_close_point():
    size = (20.0, 20.0)
    radius = 5.0
    cell = radius / math.sqrt(2.0)
    grid = _grid(size, cell)
    points = [np.array([10.0, 10.0])]
    grid[int(10.0 / cell)][int(10.0 / cell)] = 1
    assert not is_valid((12.0, 11.0), size, cell, radius, points, grid)
    assert is_valid((16.0, 10.0), size, cell, radius, points, grid)


@settings(max_examples=15, deadline=None)
@given(seed=st.integers(0, 10_000), radius=st.floats(3.0, 15.0))
def test_spacing_invariant_holds_for_any_seed(seed, radius):
    points = disk_sampler_2d(radius, (60.0, 60.0), 10, Random(seed))
    for a, b in itertools.combinations(points, 2):
        assert np.linalg.norm(a - b) >= radius - 1e-9
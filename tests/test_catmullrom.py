import math

import numpy as np
import pytest

from tubeflight.catmullrom import CatmullRom


def _circle(count, radius):
    return [
        (radius * math.cos(2 * math.pi * i / count), 0.0, radius * math.sin(2 * math.pi * i / count))
        for i in range(count)
    ]


SQUARE = [(0.0, 0.0, 0.0), (10.0, 0.0, 0.0), (10.0, 0.0, 10.0), (0.0, 0.0, 10.0)]


def test_sample_count_matches_request():
    spline = CatmullRom()
    spline.uniformly_sample_control_points(SQUARE, 40)
    assert len(spline.centreline_points) == 40
    assert len(spline.centreline_normals) == 40
    assert len(spline.control_points) == 40


def test_first_sample_is_first_control_point():
    spline = CatmullRom()
    spline.uniformly_sample_control_points(SQUARE, 20)
    np.testing.assert_allclose(spline.control_points[0], SQUARE[0])
    np.testing.assert_allclose(spline.centreline_points[0], SQUARE[0])


def test_sample_at_zero_returns_first_point_and_normal():
    spline = CatmullRom()
    spline.uniformly_sample_control_points(SQUARE, 16)
    point, normal = spline.sample(0.0)
    np.testing.assert_allclose(point, spline.control_points[0])
    expected = spline.control_points[0] - spline.control_points[-1]
    np.testing.assert_allclose(normal, expected / np.linalg.norm(expected))


def test_sample_wraps_around():
    spline = CatmullRom()
    spline.uniformly_sample_control_points(_circle(12, 5.0), 30)
    total = spline.distances[-1]
    first = spline.sample(3.0)
    wrapped = spline.sample(3.0 + total)
    np.testing.assert_allclose(first[0], wrapped[0], atol=1e-6)
    np.testing.assert_allclose(first[1], wrapped[1], atol=1e-6)


def test_negative_distance_gives_none():
    spline = CatmullRom()
    spline.uniformly_sample_control_points(SQUARE, 10)
    assert spline.sample(-1.0) is None


def test_sample_before_sampling_gives_none():
    assert CatmullRom().sample(1.0) is None


def test_normals_are_unit_length():
    spline = CatmullRom()
    spline.uniformly_sample_control_points(_circle(8, 20.0), 50)
    for normal in spline.centreline_normals:
        assert np.linalg.norm(normal) == pytest.approx(1.0)


def test_circle_samples_stay_near_circle():
    radius = 10.0
    spline = CatmullRom()
    spline.uniformly_sample_control_points(_circle(16, radius), 64)
    for point in spline.centreline_points:
        assert np.linalg.norm(point) == pytest.approx(radius, abs=0.5)


def test_samples_are_roughly_equidistant():
    spline = CatmullRom()
    spline.uniformly_sample_control_points(_circle(16, 10.0), 64)
    pts = spline.centreline_points
    gaps = [np.linalg.norm(b - a) for a, b in zip(pts, pts[1:] + pts[:1])]
    assert max(gaps) / min(gaps) < 1.2


def test_invalid_arguments_raise():
    spline = CatmullRom()
    with pytest.raises(ValueError):
        spline.uniformly_sample_control_points(SQUARE, 0)
    with pytest.raises(ValueError):
        spline.uniformly_sample_control_points([], 10)
    with pytest.raises(ValueError):
        spline.uniformly_sample_control_points([(1.0, 1.0, 1.0)] * 3, 10)
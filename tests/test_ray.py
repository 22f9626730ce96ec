"""
Ray projection tests.
"""

import numpy as np
import pytest

from verlet_cloth import Ray


def test_closest_point_on_infinite_line():
    ray = Ray((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    np.testing.assert_allclose(ray.closest_point((5.0, 3.0, 0.0)), [5.0, 0.0, 0.0])
    # Behind the origin is still on the line
    np.testing.assert_allclose(ray.closest_point((-2.0, 1.0, 1.0)), [-2.0, 0.0, 0.0])


def test_bounded_ray_clamps_to_segment():
    ray = Ray.through((0.0, 0.0, 0.0), (2.0, 0.0, 0.0), bounded=True)
    np.testing.assert_allclose(ray.closest_point((5.0, 1.0, 0.0)), [2.0, 0.0, 0.0])
    np.testing.assert_allclose(ray.closest_point((-1.0, 1.0, 0.0)), [0.0, 0.0, 0.0])
    np.testing.assert_allclose(ray.closest_point((1.0, 1.0, 0.0)), [1.0, 0.0, 0.0])


def test_through_builds_direction_and_end():
    ray = Ray.through((1.0, 2.0, 3.0), (1.0, 2.0, -1.0))
    np.testing.assert_array_equal(ray.direction, [0.0, 0.0, -4.0])
    np.testing.assert_array_equal(ray.end, [1.0, 2.0, -1.0])


def test_distance2():
    ray = Ray((0.0, 0.0, 10.0), (0.0, 0.0, -1.0))
    assert ray.distance2_to((3.0, 4.0, 0.0)) == pytest.approx(25.0)
    assert ray.distance2_to((0.0, 0.0, -7.0)) == 0.0


def test_zero_direction_collapses_to_origin():
    ray = Ray((1.0, 1.0, 1.0), (0.0, 0.0, 0.0))
    np.testing.assert_array_equal(ray.closest_point((4.0, 5.0, 6.0)), [1.0, 1.0, 1.0])

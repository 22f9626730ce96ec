"""
Integration step tests.
"""

import numpy as np

from verlet_cloth import Vertex, VerletGravity, no_force
from verlet_cloth.config import DAMPING


def test_verlet_step_matches_damped_formula():
    v = Vertex("a", (0.0, 0.0, 0.0))
    v.set_current_position((1.0, 2.0, 0.5))  # previous = 0, current = C
    C = v.current.copy()
    P = v.previous.copy()
    a = np.array([0.0, -0.25, 0.0])

    VerletGravity(a)([v])

    np.testing.assert_allclose(v.current, C + 0.99 * (C - P) + a, rtol=0, atol=1e-12)
    np.testing.assert_array_equal(v.previous, C)


def test_default_damping():
    assert DAMPING == 0.99
    assert VerletGravity((0.0, -1.0, 0.0)).damping == 0.99


def test_vertex_at_rest_falls_by_acceleration():
    v = Vertex("a", (0.0, 1.0, 0.0))
    VerletGravity((0.0, -0.1, 0.0))([v])
    np.testing.assert_allclose(v.current, [0.0, 0.9, 0.0])
    VerletGravity((0.0, -0.1, 0.0))([v])
    # velocity 0.1 damped to 0.099, plus another 0.1
    np.testing.assert_allclose(v.current, [0.0, 0.701, 0.0])


def test_locked_vertex_ignored():
    v = Vertex("a", (0.0, 1.0, 0.0))
    v.locked = True
    VerletGravity((0.0, -0.1, 0.0))([v])
    np.testing.assert_array_equal(v.current, [0.0, 1.0, 0.0])


def test_no_force_is_a_noop():
    v = Vertex("a", (0.0, 1.0, 0.0))
    no_force([v])
    np.testing.assert_array_equal(v.current, [0.0, 1.0, 0.0])

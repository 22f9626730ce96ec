"""
Drag controller tests.
"""

import numpy as np

from verlet_cloth import Cloth, DragController, Mesh, Ray


def vertical_ray(x, y):
    return Ray.through((x, y, 1.0), (x, y, -1.0))


def test_start_locks_and_moves_picked_vertex():
    cloth = Cloth((0.0, 0.0), 2.0, 2.0, 3, 3)
    drag = DragController(cloth)
    hit = drag.start(vertical_ray(1.1, 0.9))

    assert hit.vertex is cloth.vertex_at(1, 1)
    assert drag.dragging
    assert drag.vertex.locked
    np.testing.assert_allclose(drag.vertex.current, [1.1, 0.9, 0.0])


def test_move_follows_ray_and_resists_simulation():
    cloth = Cloth((0.0, 0.0), 2.0, 2.0, 3, 3)
    drag = DragController(cloth)
    drag.start(vertical_ray(1.0, 1.0))
    drag.move(vertical_ray(1.5, 1.2))
    np.testing.assert_allclose(drag.vertex.current, [1.5, 1.2, 0.0])

    cloth.update()
    np.testing.assert_allclose(drag.vertex.current, [1.5, 1.2, 0.0])


def test_end_restores_requested_lock_state():
    cloth = Cloth((0.0, 0.0), 2.0, 2.0, 3, 3)
    drag = DragController(cloth)
    drag.start(vertical_ray(1.0, 1.0))
    released = drag.end(pin=False)
    assert released is cloth.vertex_at(1, 1)
    assert not released.locked
    assert not drag.dragging

    drag.start(vertical_ray(1.0, 1.0))
    assert drag.end(pin=True).locked


def test_dragging_a_corner_can_unpin_it():
    cloth = Cloth((0.0, 0.0), 2.0, 2.0, 3, 3)
    drag = DragController(cloth)
    drag.start(vertical_ray(0.0, 0.0))
    corner = drag.end()
    assert corner is cloth.vertex_at(0, 0)
    assert not corner.locked


def test_idle_controller_is_inert():
    drag = DragController(Mesh())
    assert drag.start(vertical_ray(0.0, 0.0)) is None
    drag.move(vertical_ray(1.0, 1.0))
    assert drag.end() is None
    assert drag.vertex is None


def test_released_vertex_starts_at_rest():
    cloth = Cloth((0.0, 0.0), 2.0, 2.0, 3, 3)
    drag = DragController(cloth)
    drag.start(vertical_ray(1.0, 1.0))
    drag.move(vertical_ray(1.5, 1.0))
    for _ in range(3):
        cloth.update()

    released = drag.end()

    np.testing.assert_array_equal(released.previous, released.current)
    np.testing.assert_allclose(released.current, [1.5, 1.0, 0.0])

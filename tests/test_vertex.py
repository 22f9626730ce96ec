"""
Vertex tests: position bookkeeping and listener notification.
"""

import numpy as np

from verlet_cloth import MeshListener, Vertex


class Recorder(MeshListener):
    def __init__(self):
        self.moved = []
        self.locked = []

    def vertex_moved(self, vertex):
        self.moved.append(vertex.current.copy())

    def vertex_locked(self, vertex):
        self.locked.append(vertex.locked)


def test_new_vertex_has_independent_previous():
    v = Vertex("a", (1.0, 2.0, 3.0))
    np.testing.assert_array_equal(v.current, v.previous)
    v.current[0] = 10.0
    assert v.previous[0] == 1.0
    assert not v.locked


def test_set_current_position_advances_previous():
    v = Vertex("a", (0.0, 0.0, 0.0))
    v.set_current_position((1.0, 0.0, 0.0))
    v.set_current_position((3.0, 0.0, 0.0))
    np.testing.assert_array_equal(v.previous, [1.0, 0.0, 0.0])
    np.testing.assert_array_equal(v.current, [3.0, 0.0, 0.0])


def test_set_current_position_copies_input():
    v = Vertex("a", (0.0, 0.0, 0.0))
    target = np.array([1.0, 1.0, 1.0])
    v.set_current_position(target)
    target[:] = 5.0
    np.testing.assert_array_equal(v.current, [1.0, 1.0, 1.0])


def test_set_current_position_from_previous_array():
    v = Vertex("a", (0.0, 0.0, 0.0))
    v.set_current_position((2.0, 0.0, 0.0))
    v.set_current_position(v.previous)
    np.testing.assert_array_equal(v.current, [0.0, 0.0, 0.0])
    np.testing.assert_array_equal(v.previous, [2.0, 0.0, 0.0])


def test_displace_keeps_previous():
    v = Vertex("a", (0.0, 0.0, 0.0))
    v.set_current_position((1.0, 0.0, 0.0))
    v.displace(np.array([0.5, 0.5, 0.0]))
    np.testing.assert_array_equal(v.current, [1.5, 0.5, 0.0])
    np.testing.assert_array_equal(v.previous, [0.0, 0.0, 0.0])


def test_listeners_hear_moves_and_lock_changes():
    v = Vertex("a", (0.0, 0.0, 0.0))
    rec = Recorder()
    v.add_listener(rec)
    v.set_current_position((1.0, 0.0, 0.0))
    v.displace(np.array([1.0, 0.0, 0.0]))
    v.locked = True
    v.set_locked(True)  # unchanged, no notification
    v.set_locked(False)

    assert len(rec.moved) == 2
    np.testing.assert_array_equal(rec.moved[1], [2.0, 0.0, 0.0])
    assert rec.locked == [True, False]


def test_removed_listener_is_not_notified():
    v = Vertex("a", (0.0, 0.0, 0.0))
    rec = Recorder()
    v.add_listener(rec)
    v.remove_listener(rec)
    v.set_current_position((1.0, 0.0, 0.0))
    assert rec.moved == []

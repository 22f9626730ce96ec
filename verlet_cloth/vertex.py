"""
Point masses for the Verlet particle system.
"""

from typing import Hashable, Tuple

import numpy as np

from .edge import Edge


class Vertex:
    """A point mass storing its current and previous position.

    Velocity is implicit: Verlet integration uses ``current - previous``.
    Locked vertices are moved by neither integration nor relaxation (but can
    still be placed explicitly, e.g. while being dragged).

    Attributes:
        label: Diagnostic identifier; not required to be unique.
    """

    def __init__(self, label: Hashable, position):
        self.label = label
        self._current = np.array(position, dtype=float)
        if self._current.shape != (3,):
            raise ValueError(f"position must be a 3-vector, got shape {self._current.shape}")
        self._previous = self._current.copy()
        self._locked = False
        self._listeners = []

    def __repr__(self):
        return f"Vertex({self.label!r}, {self._current.tolist()}, locked={self._locked})"

    @property
    def current(self) -> np.ndarray:
        """Current position. Mutate through set_current_position() or displace()."""
        return self._current

    @property
    def previous(self) -> np.ndarray:
        """Position one integration step ago."""
        return self._previous

    @property
    def locked(self) -> bool:
        return self._locked

    @locked.setter
    def locked(self, locked: bool):
        locked = bool(locked)
        if locked == self._locked:
            return
        self._locked = locked
        for listener in tuple(self._listeners):
            listener.vertex_locked(self)

    def set_locked(self, locked: bool) -> None:
        self.locked = locked

    @property
    def edges(self) -> Tuple:
        """Edges incident on this vertex."""
        return tuple(l for l in self._listeners if isinstance(l, Edge))

    def add_listener(self, listener) -> None:
        """Register an observer (see MeshListener). The vertex does not own it."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener) -> None:
        self._listeners.remove(listener)

    def set_current_position(self, position) -> None:
        """Place the vertex, advancing ``previous`` to the old ``current``.

        This is the integration/drag path: the step from previous to current
        becomes the vertex's implicit velocity.
        """
        position = np.array(position, dtype=float)
        self._previous[:] = self._current
        self._current[:] = position
        self._notify_moved()

    def displace(self, offset) -> None:
        """Nudge ``current`` by ``offset`` without touching ``previous``.

        Used by constraint relaxation, which runs several times within one
        integration step.
        """
        self._current += offset
        self._notify_moved()

    def _notify_moved(self):
        for listener in tuple(self._listeners):
            listener.vertex_moved(self)

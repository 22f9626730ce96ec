"""
Distance constraints between pairs of vertices.
"""

from typing import Optional

import numpy as np

from .config import DEFAULT_MAX_ERROR
from .errors import DegenerateEdgeError


class Edge:
    """A distance constraint that is continuously relaxed toward its rest length.

    The edge registers itself as a listener on both endpoints so that moving
    either one marks its geometry stale. Listeners added to the edge (usually a
    renderer) are told when that happens and when the edge's satisfied state
    flips.

    Attributes:
        p1, p2: Endpoint vertices (not owned by the edge).
        target_length: Rest length enforced for the lifetime of the edge.
        target_length2: target_length squared.
        satisfied: Result of the most recent satisfy() call.
        needs_update: True when an endpoint has moved since mark_updated().
    """

    def __init__(self, p1, p2, length: Optional[float] = None):
        """
        Args:
            p1, p2: Endpoint vertices.
            length: Explicit rest length. Defaults to the current distance
                between p1 and p2.

        Raises:
            DegenerateEdgeError: if the rest length is not strictly positive.
        """
        if length is None:
            delta = p1.current - p2.current
            length2 = float(np.dot(delta, delta))
            length = float(np.sqrt(length2))
        else:
            length = float(length)
            length2 = length * length
        # A tiny length can still square to zero
        if not (length > 0 and length2 > 0):
            raise DegenerateEdgeError(
                f"edge {p1.label!r}-{p2.label!r} has rest length {length!r}"
            )

        self.p1 = p1
        self.p2 = p2
        self.target_length = length
        self.target_length2 = length2
        self.satisfied = False
        self.needs_update = True
        self._listeners = []

        p1.add_listener(self)
        p2.add_listener(self)

    def __repr__(self):
        return (
            f"Edge({self.p1.label!r}, {self.p2.label!r}, "
            f"target_length={self.target_length:g})"
        )

    def add_listener(self, listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener) -> None:
        self._listeners.remove(listener)

    @property
    def length2(self) -> float:
        delta = self.p2.current - self.p1.current
        return float(np.dot(delta, delta))

    @property
    def length(self) -> float:
        return float(np.sqrt(self.length2))

    @property
    def error(self) -> float:
        """Relative error of the squared length, |d² / target² - 1|."""
        return abs(self.length2 / self.target_length2 - 1.0)

    def mark_updated(self) -> None:
        """Acknowledge that the drawn geometry matches the endpoints again."""
        self.needs_update = False

    # Vertex listener callbacks

    def vertex_moved(self, vertex) -> None:
        self.needs_update = True
        for listener in tuple(self._listeners):
            listener.edge_moved(self)

    def vertex_locked(self, vertex) -> None:
        pass

    def satisfy(self, max_error: float = DEFAULT_MAX_ERROR) -> bool:
        """Move the endpoints one step closer to the rest length.

        The correction uses the first-order Taylor expansion of the square
        root around target_length2 (one Newton-Raphson step starting from the
        rest length), so no square root is taken. Endpoints are moved with
        Vertex.displace(), leaving ``previous`` alone.

        Args:
            max_error: Tolerance as a fraction of the squared rest length,
                e.g. 0.01 means within 1%.

        Returns:
            Whether the constraint was within tolerance before this call.
        """
        delta = self.p2.current - self.p1.current
        d2 = float(np.dot(delta, delta))

        satisfied = abs(d2 / self.target_length2 - 1.0) < max_error
        if satisfied != self.satisfied:
            self.satisfied = satisfied
            for listener in tuple(self._listeners):
                listener.edge_state_changed(self)
        if satisfied:
            return True

        m1 = 0 if self.p1.locked else 1
        m2 = 0 if self.p2.locked else 1
        if m1 + m2 == 0:
            return False

        diff = (d2 - self.target_length2) / ((self.target_length2 + d2) * (m1 + m2))
        delta *= diff
        if m1:
            self.p1.displace(delta)
        if m2:
            self.p2.displace(-delta)
        return False

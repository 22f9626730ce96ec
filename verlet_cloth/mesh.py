"""
Mesh: a collection of vertices and edge constraints with a per-frame update.
"""

from typing import Callable, NamedTuple, Optional, Sequence

import numpy as np

from .config import DEFAULT_MAX_ERROR, RELAXATION_PASSES
from .forces import no_force


class Pick(NamedTuple):
    """Result of Mesh.get_closest_vertex().

    Attributes:
        vertex: The vertex nearest to the ray.
        point: The point on the ray closest to that vertex.
        distance2: Squared distance between the two.
    """

    vertex: object
    point: np.ndarray
    distance2: float


class Mesh:
    """Vertices and edges, relaxed every frame.

    The mesh owns both collections; edges only reference their endpoints.
    Nothing validates the topology, callers are responsible for it.

    Attributes:
        force: Strategy called with the vertex list once per update().
    """

    def __init__(self, force: Optional[Callable[[Sequence], None]] = None):
        self.force = force if force is not None else no_force
        self._vertices = []
        self._edges = []
        self._listeners = []

    def __repr__(self):
        return (
            f"{type(self).__name__}(vertices={len(self._vertices)}, "
            f"edges={len(self._edges)})"
        )

    @property
    def vertices(self):
        return tuple(self._vertices)

    @property
    def edges(self):
        return tuple(self._edges)

    def add_vertex(self, vertex):
        self._vertices.append(vertex)
        for listener in self._listeners:
            vertex.add_listener(listener)
            listener.vertex_added(self, vertex)
        return vertex

    def add_edge(self, edge):
        self._edges.append(edge)
        for listener in self._listeners:
            edge.add_listener(listener)
            listener.edge_added(self, edge)
        return edge

    def add_listener(self, listener) -> None:
        """Subscribe a MeshListener to all current and future geometry.

        Existing vertices and edges are replayed through vertex_added and
        edge_added so the listener can mirror them.
        """
        if listener in self._listeners:
            return
        self._listeners.append(listener)
        for vertex in self._vertices:
            vertex.add_listener(listener)
            listener.vertex_added(self, vertex)
        for edge in self._edges:
            edge.add_listener(listener)
            listener.edge_added(self, edge)

    def remove_listener(self, listener) -> None:
        self._listeners.remove(listener)
        for vertex in self._vertices:
            vertex.remove_listener(listener)
        for edge in self._edges:
            edge.remove_listener(listener)

    def update(self, max_error: float = DEFAULT_MAX_ERROR) -> None:
        """Advance the simulation by one frame.

        Applies the force once, then makes RELAXATION_PASSES Gauss-Seidel
        passes over the edges in insertion order. All passes always run.

        Args:
            max_error: Per-edge tolerance as a fraction of the squared rest length.
        """
        self.force(self._vertices)
        for _ in range(RELAXATION_PASSES):
            for edge in self._edges:
                edge.satisfy(max_error)

    def get_closest_vertex(self, ray) -> Optional[Pick]:
        """Find the vertex nearest to ``ray``.

        Ties go to the vertex added first.

        Returns:
            A Pick, or None if the mesh has no vertices.
        """
        best = None
        for vertex in self._vertices:
            point = ray.closest_point(vertex.current)
            offset = point - vertex.current
            dist2 = float(np.dot(offset, offset))
            if best is None or dist2 < best.distance2:
                best = Pick(vertex, point, dist2)
        return best

    def positions(self) -> np.ndarray:
        """Snapshot of current positions, shape (num_vertices, 3)."""
        if not self._vertices:
            return np.zeros((0, 3))
        return np.array([v.current for v in self._vertices])

    def unsatisfied_edges(self) -> int:
        """Number of edges that were out of tolerance on their last satisfy()."""
        return sum(1 for e in self._edges if not e.satisfied)

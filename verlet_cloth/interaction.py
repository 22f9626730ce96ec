"""
Dragging vertices with a pointer.

The UI layer turns pointer events into rays and calls start/move/end; this
module keeps no reference to any windowing toolkit.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class DragController:
    """Pick a vertex with a ray and drag it along subsequent rays.

    While dragged, the vertex is locked so the simulation does not fight the
    pointer. On release its lock is set to whatever the caller asks for,
    which lets a held modifier key pin the vertex where it was dropped.
    """

    def __init__(self, mesh):
        self.mesh = mesh
        self._vertex = None

    @property
    def vertex(self):
        """The vertex being dragged, or None."""
        return self._vertex

    @property
    def dragging(self) -> bool:
        return self._vertex is not None

    def start(self, ray):
        """Grab the vertex nearest to ``ray``.

        Returns:
            The Pick from Mesh.get_closest_vertex(), or None for an empty mesh.
        """
        hit = self.mesh.get_closest_vertex(ray)
        if hit is None:
            return None
        self._vertex = hit.vertex
        self._vertex.set_current_position(hit.point)
        self._vertex.locked = True
        logger.debug("Drag started on %r", self._vertex.label)
        return hit

    def move(self, ray) -> None:
        """Move the dragged vertex to the point on ``ray`` nearest to it."""
        if self._vertex is None:
            return
        self._vertex.set_current_position(ray.closest_point(self._vertex.current))
        self._vertex.locked = True

    def end(self, pin: bool = False) -> Optional[object]:
        """Release the dragged vertex, leaving it locked iff ``pin``.

        Returns:
            The released vertex, or None if nothing was being dragged.
        """
        vertex = self._vertex
        if vertex is None:
            return None
        # Released vertices start with zero velocity
        vertex.set_current_position(vertex.current)
        vertex.locked = pin
        self._vertex = None
        logger.debug("Drag ended on %r (pinned=%s)", vertex.label, pin)
        return vertex

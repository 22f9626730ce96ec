"""
Observer interface for anything that mirrors mesh geometry (usually a renderer).

Subclass MeshListener and override the notifications you care about, then
subscribe with Mesh.add_listener(). None of these callbacks can influence the
simulation; they are purely observational.
"""


class MeshListener:
    """No-op base class for mesh observers."""

    def vertex_added(self, mesh, vertex):
        """A vertex was registered with `mesh`."""

    def edge_added(self, mesh, edge):
        """An edge was registered with `mesh`."""

    def vertex_moved(self, vertex):
        """`vertex.current` changed."""

    def vertex_locked(self, vertex):
        """`vertex.locked` changed."""

    def edge_moved(self, edge):
        """One of the endpoints of `edge` moved; its drawn geometry is stale."""

    def edge_state_changed(self, edge):
        """`edge.satisfied` flipped."""

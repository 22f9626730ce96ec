"""
Visualization utilities for cloth simulation.
"""

from typing import List, Optional

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.collections import LineCollection

from .listeners import MeshListener

LOCKED_COLOR = "gold"
UNLOCKED_COLOR = "tab:blue"
SATISFIED_COLOR = "tab:green"
UNSATISFIED_COLOR = "tab:red"


class MeshArtist(MeshListener):
    """Mirror a mesh on a matplotlib axes in the x-y plane.

    Vertices are drawn as markers coloured by lock state and edges as line
    segments coloured by whether their constraint is satisfied. Geometry is
    only pushed to matplotlib when draw() is called and something changed.
    """

    def __init__(self, ax):
        self.ax = ax
        self._vertices = []
        self._edges = []
        self._dirty = True
        self.markers = ax.scatter([], [], s=20, zorder=3)
        self.lines = LineCollection([], linewidths=1.0, zorder=2)
        ax.add_collection(self.lines)

    def vertex_added(self, mesh, vertex):
        self._vertices.append(vertex)
        self._dirty = True

    def edge_added(self, mesh, edge):
        self._edges.append(edge)
        self._dirty = True

    def vertex_moved(self, vertex):
        self._dirty = True

    def vertex_locked(self, vertex):
        self._dirty = True

    def edge_state_changed(self, edge):
        self._dirty = True

    @property
    def dirty(self) -> bool:
        return self._dirty

    def draw(self):
        """Push stale geometry to the artists. Returns the updated artists."""
        if not self._dirty:
            return self.markers, self.lines
        if self._vertices:
            xy = np.array([v.current[:2] for v in self._vertices])
            self.markers.set_offsets(xy)
        self.markers.set_color(
            [LOCKED_COLOR if v.locked else UNLOCKED_COLOR for v in self._vertices]
        )
        self.lines.set_segments(
            [[e.p1.current[:2], e.p2.current[:2]] for e in self._edges]
        )
        self.lines.set_color(
            [SATISFIED_COLOR if e.satisfied else UNSATISFIED_COLOR for e in self._edges]
        )
        for edge in self._edges:
            edge.mark_updated()
        self._dirty = False
        return self.markers, self.lines


def animate_particles(trajectory: np.ndarray, save_path: Optional[str] = None):
    """Create an animated scatter plot of vertex positions.

    Args:
        trajectory: Array of shape (frames, num_vertices, 3).
        save_path: If given, the animation is written there (the writer is
            picked by matplotlib from the extension).

    Returns:
        The matplotlib FuncAnimation.

    Raises:
        ValueError: if the trajectory has no frames.
    """
    if len(trajectory) == 0:
        raise ValueError("trajectory has no frames")
    fig, ax = plt.subplots(figsize=(10, 8))
    x_min, x_max = trajectory[:, :, 0].min(), trajectory[:, :, 0].max()
    y_min, y_max = trajectory[:, :, 1].min(), trajectory[:, :, 1].max()
    pad = 0.05 * max(x_max - x_min, y_max - y_min, 1e-9)

    def animate(frame):
        ax.clear()
        positions = trajectory[frame]
        ax.scatter(positions[:, 0], positions[:, 1], s=20, alpha=0.7)
        ax.set_xlim(x_min - pad, x_max + pad)
        ax.set_ylim(y_min - pad, y_max + pad)
        ax.set_title(f'Cloth Simulation - Frame {frame}/{len(trajectory)}')
        ax.set_xlabel('X Position')
        ax.set_ylabel('Y Position')
        ax.grid(True, alpha=0.3)

    anim = animation.FuncAnimation(fig, animate, frames=len(trajectory),
                                   interval=50, repeat=True)

    if save_path:
        anim.save(save_path)

    return anim


def plot_trajectories(
    trajectory: np.ndarray,
    vertex_indices: Optional[List[int]] = None,
    figsize: tuple = (12, 8),
) -> plt.Figure:
    """Plot the 3-D paths of selected vertices.

    The cloth hangs along -y, so y is drawn on the vertical axis and z (the
    direction a dragged vertex can be pulled out of the cloth plane) as depth.
    Each path starts at a hollow marker and ends at a filled one; the final
    frame of the whole cloth is shown faintly for reference.

    Args:
        trajectory: Array of shape (frames, num_vertices, 3) containing positions.
        vertex_indices: Indices of vertices to plot. If None, plots a sample.
        figsize: Figure size.

    Returns:
        The matplotlib figure.

    Raises:
        ValueError: if the trajectory has no frames.
    """
    if len(trajectory) == 0:
        raise ValueError("trajectory has no frames")
    if vertex_indices is None:
        num_vertices = trajectory.shape[1]
        vertex_indices = list(range(0, num_vertices, max(1, num_vertices // 10)))

    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection="3d")

    final = trajectory[-1]
    ax.scatter(final[:, 0], final[:, 2], final[:, 1], s=4, color="0.7")

    for idx in vertex_indices:
        x, y, z = trajectory[:, idx, 0], trajectory[:, idx, 1], trajectory[:, idx, 2]
        (line,) = ax.plot(x, z, y, label=f"Vertex {idx}", alpha=0.8)
        ax.scatter(x[0], z[0], y[0], facecolors="none", edgecolors=line.get_color())
        ax.scatter(x[-1], z[-1], y[-1], color=line.get_color())

    ax.set_xlabel("X")
    ax.set_ylabel("Z")
    ax.set_zlabel("Y")
    ax.set_title(f"Vertex paths over {len(trajectory)} frames")
    ax.legend(loc="upper left", fontsize="small")

    return fig

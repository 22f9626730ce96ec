"""
Cloth: a rectangular lattice of vertices hung from its four corners.
"""

import logging
from typing import Tuple

import numpy as np

from .config import GRAVITY_DIVISOR, SimConfig, validate_lattice
from .edge import Edge
from .forces import VerletGravity
from .mesh import Mesh
from .vertex import Vertex

logger = logging.getLogger(__name__)


class Cloth(Mesh):
    """A mesh built as a grid of warps (vertical threads) and wefts (rows).

    Vertices are created row by row, labelled ``(warp, weft)``. Each vertex is
    tied to its left neighbour and to the vertex above it; there are no
    diagonal or bending edges, so the cloth can shear. The four corners are
    pinned and gravity of ``height / 150`` per frame pulls along -y.
    """

    def __init__(
        self,
        origin: Tuple[float, float],
        width: float,
        height: float,
        warps: int,
        wefts: int,
    ):
        """
        Args:
            origin: (x, y) of vertex (0, 0).
            width, height: Size of the cloth.
            warps: Number of vertical threads, at least 2.
            wefts: Number of horizontal threads, at least 2.

        Raises:
            ConfigurationError: for counts below 2 or a non-positive size.
        """
        validate_lattice(width, height, warps, wefts)
        self.gravity = np.array([0.0, -height / GRAVITY_DIVISOR, 0.0])
        super().__init__(force=VerletGravity(self.gravity))

        self.origin = (float(origin[0]), float(origin[1]))
        self.width = width
        self.height = height
        self.warps = warps
        self.wefts = wefts

        x_spacing = width / (warps - 1)
        y_spacing = height / (wefts - 1)

        self._grid = []
        y = self.origin[1]
        prev_row = None
        for weft in range(wefts):
            row = []
            x = self.origin[0]
            prev = None
            for warp in range(warps):
                point = self.add_vertex(Vertex((warp, weft), (x, y, 0.0)))
                row.append(point)

                if weft in (0, wefts - 1) and warp in (0, warps - 1):
                    point.locked = True
                if prev is not None:
                    self.add_edge(Edge(prev, point))
                if prev_row is not None:
                    self.add_edge(Edge(prev_row[warp], point))

                x += x_spacing
                prev = point
            y += y_spacing
            prev_row = row
            self._grid.append(row)

        logger.debug(
            "Built %dx%d cloth: %d vertices, %d edges",
            warps,
            wefts,
            len(self._vertices),
            len(self._edges),
        )

    @classmethod
    def from_config(cls, config: SimConfig) -> "Cloth":
        return cls(config.origin, config.width, config.height, config.warps, config.wefts)

    def vertex_at(self, warp: int, weft: int) -> Vertex:
        """Vertex at grid coordinate (warp, weft)."""
        if not (0 <= warp < self.warps and 0 <= weft < self.wefts):
            raise IndexError(f"({warp}, {weft}) is outside a {self.warps}x{self.wefts} cloth")
        return self._grid[weft][warp]

    def corners(self) -> Tuple[Vertex, Vertex, Vertex, Vertex]:
        w, h = self.warps - 1, self.wefts - 1
        return (
            self.vertex_at(0, 0),
            self.vertex_at(w, 0),
            self.vertex_at(0, h),
            self.vertex_at(w, h),
        )

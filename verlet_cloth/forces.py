"""
External force strategies applied once per frame, before relaxation.

A force is any callable taking the mesh's vertices. It must move vertices
with Vertex.set_current_position() so that ``previous`` advances.
"""

import numpy as np

from .config import DAMPING


def no_force(vertices) -> None:
    """Leave every vertex where it is."""


class VerletGravity:
    """Damped Verlet step under a constant acceleration.

    For every unlocked vertex::

        new = current * (1 + damping) - previous * damping + acceleration

    i.e. the implicit velocity ``current - previous`` is scaled by
    ``damping`` and the acceleration is added.
    """

    def __init__(self, acceleration, damping: float = DAMPING):
        self.acceleration = np.array(acceleration, dtype=float)
        self.damping = damping

    def __repr__(self):
        return f"VerletGravity({self.acceleration.tolist()}, damping={self.damping})"

    def __call__(self, vertices) -> None:
        d = self.damping
        for vertex in vertices:
            if vertex.locked:
                continue
            vertex.set_current_position(
                vertex.current * (1.0 + d) - vertex.previous * d + self.acceleration
            )

"""
Rays used for picking vertices from a screen position.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Ray:
    """A line through ``origin`` along ``direction``.

    When ``bounded`` is true the ray is the finite segment from ``origin`` to
    ``origin + direction``; otherwise it extends infinitely both ways.
    """

    origin: np.ndarray
    direction: np.ndarray
    bounded: bool = False

    def __post_init__(self):
        object.__setattr__(self, "origin", np.array(self.origin, dtype=float))
        object.__setattr__(self, "direction", np.array(self.direction, dtype=float))

    @classmethod
    def through(cls, start, end, bounded: bool = False) -> "Ray":
        """Build the ray passing through two points."""
        start = np.asarray(start, dtype=float)
        return cls(start, np.asarray(end, dtype=float) - start, bounded)

    @property
    def end(self) -> np.ndarray:
        return self.origin + self.direction

    def closest_point(self, point) -> np.ndarray:
        """Orthogonal projection of ``point`` onto the ray."""
        dd = float(np.dot(self.direction, self.direction))
        if dd == 0.0:
            return self.origin.copy()
        t = float(np.dot(np.asarray(point, dtype=float) - self.origin, self.direction)) / dd
        if self.bounded:
            t = min(max(t, 0.0), 1.0)
        return self.origin + t * self.direction

    def distance2_to(self, point) -> float:
        """Squared distance from ``point`` to the nearest point on the ray."""
        offset = self.closest_point(point) - np.asarray(point, dtype=float)
        return float(np.dot(offset, offset))

"""
Simulation constants and the configuration dataclass.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Tuple

from .errors import ConfigurationError

# Fixed solver constants. Changing any of these changes how stiff and how
# bouncy the cloth feels.
DAMPING = 0.99
RELAXATION_PASSES = 5
DEFAULT_MAX_ERROR = 0.01
GRAVITY_DIVISOR = 150.0


def validate_lattice(width: float, height: float, warps: int, wefts: int) -> None:
    """Reject lattice parameters that would produce a degenerate cloth.

    Raises:
        ConfigurationError: if a thread count is not an integer >= 2, or if
            width/height is not strictly positive.
    """
    for name, count in (("warps", warps), ("wefts", wefts)):
        if isinstance(count, bool) or not isinstance(count, Integral):
            raise ConfigurationError(f"{name} must be an integer, got {count!r}")
        if count < 2:
            raise ConfigurationError(f"{name} must be at least 2, got {count}")
    for name, size in (("width", width), ("height", height)):
        if not size > 0:
            raise ConfigurationError(f"{name} must be positive, got {size!r}")


@dataclass
class SimConfig:
    """Configuration for a cloth simulation session.

    Attributes:
        origin: (x, y) of the first vertex; the cloth lies in the z = 0 plane.
        width: Extent of the cloth along x.
        height: Extent of the cloth along y. Also scales gravity.
        warps: Number of vertical threads (vertices per row).
        wefts: Number of horizontal threads (rows).
        max_error: Relaxation tolerance as a fraction of the squared rest length.
        steps: Default number of frames for ClothSimulator.run().
    """

    origin: Tuple[float, float] = (0.0, 0.0)
    width: float = 1.0
    height: float = 1.0
    warps: int = 15
    wefts: int = 15
    max_error: float = DEFAULT_MAX_ERROR
    steps: int = 300

    def __post_init__(self):
        validate_lattice(self.width, self.height, self.warps, self.wefts)
        if len(self.origin) != 2:
            raise ConfigurationError(f"origin must be (x, y), got {self.origin!r}")
        if not self.max_error > 0:
            raise ConfigurationError(
                f"max_error must be positive, got {self.max_error!r}"
            )
        if self.steps < 0:
            raise ConfigurationError(f"steps must be non-negative, got {self.steps}")

    @property
    def num_vertices(self) -> int:
        """Total number of vertices in the cloth."""
        return self.warps * self.wefts

    @property
    def num_edges(self) -> int:
        """Total number of structural edges in the cloth."""
        return (self.warps - 1) * self.wefts + self.warps * (self.wefts - 1)

    @property
    def spacing(self) -> Tuple[float, float]:
        """Grid spacing along x and y."""
        return (self.width / (self.warps - 1), self.height / (self.wefts - 1))

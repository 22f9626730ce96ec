"""
Cloth simulator class for running forward simulations.
"""

import logging
from typing import Optional

import numpy as np

from .cloth import Cloth
from .config import SimConfig

logger = logging.getLogger(__name__)


class ClothSimulator:
    """Frame driver around a Cloth.

    Each step() is one Mesh.update(): one integration pass followed by the
    fixed number of relaxation passes.

    Attributes:
        config: Simulation configuration.
        cloth: The simulated cloth.
        frame: Number of steps taken since construction or the last reset().
    """

    def __init__(self, config: SimConfig):
        """Initialize the cloth simulator.

        Args:
            config: Simulation configuration.
        """
        self.config = config
        self.cloth = Cloth.from_config(config)
        self.frame = 0

    def reset(self):
        """Rebuild the cloth in its rest state.

        Listeners subscribed to the old cloth are not carried over.
        """
        self.cloth = Cloth.from_config(self.config)
        self.frame = 0

    def step(self):
        """Perform one simulation step."""
        self.cloth.update(self.config.max_error)
        self.frame += 1

    def run(self, steps: Optional[int] = None, record: bool = True) -> Optional[np.ndarray]:
        """Run simulation for multiple steps.

        Args:
            steps: Number of steps to run. If None, uses config.steps.
            record: Whether to record trajectory.

        Returns:
            If record=True, returns trajectory array of shape
            (steps, num_vertices, 3). Otherwise returns None.
        """
        if steps is None:
            steps = self.config.steps

        logger.info(
            "Running %d steps on a %dx%d cloth",
            steps,
            self.config.warps,
            self.config.wefts,
        )
        trajectory = np.empty((steps, self.config.num_vertices, 3)) if record else None

        for i in range(steps):
            self.step()
            if record:
                trajectory[i] = self.cloth.positions()

        logger.info(
            "Finished at frame %d with %d unsatisfied edges",
            self.frame,
            self.cloth.unsatisfied_edges(),
        )
        return trajectory

    def get_positions(self) -> np.ndarray:
        """Get current positions as numpy array."""
        return self.cloth.positions()

    def get_locked_mask(self) -> np.ndarray:
        """Get mask for locked vertices.

        Returns:
            Boolean array of shape (num_vertices,), True where locked.
        """
        return np.array([v.locked for v in self.cloth.vertices], dtype=bool)

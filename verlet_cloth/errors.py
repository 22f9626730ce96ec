"""
Exceptions raised while building a cloth.

The per-frame path (integration, relaxation, picking) never raises; these
cover invalid construction parameters only.
"""


class ClothError(Exception):
    """Base class for all verlet_cloth errors."""


class ConfigurationError(ClothError, ValueError):
    """Raised for an invalid lattice or simulator configuration."""


class DegenerateEdgeError(ClothError, ValueError):
    """Raised when an edge would have a target length of zero or less."""

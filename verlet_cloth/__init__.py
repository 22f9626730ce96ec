"""
Verlet Cloth

A rectangular cloth simulated as a grid of point masses joined by distance
constraints, integrated with damped Verlet steps and relaxed toward the rest
lengths every frame. Vertices can be picked and dragged with 3-D rays.
"""

from .config import SimConfig
from .errors import ClothError, ConfigurationError, DegenerateEdgeError
from .vertex import Vertex
from .edge import Edge
from .ray import Ray
from .forces import VerletGravity, no_force
from .listeners import MeshListener
from .mesh import Mesh, Pick
from .cloth import Cloth
from .interaction import DragController
from .simulation import ClothSimulator

__all__ = [
    "SimConfig",
    "ClothError",
    "ConfigurationError",
    "DegenerateEdgeError",
    "Vertex",
    "Edge",
    "Ray",
    "VerletGravity",
    "no_force",
    "MeshListener",
    "Mesh",
    "Pick",
    "Cloth",
    "DragController",
    "ClothSimulator",
]

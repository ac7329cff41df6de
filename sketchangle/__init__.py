"""
sketchangle - Angle arithmetic for 2D drawing and CAD paths.

This package provides angle normalization, comparison, derivation from
lines and arcs, and mirroring, along with the point and path helpers
they work on.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

from . import angle, measure, paths, point

# Core geometry types
from .cad_types import Vector, Vertex

# Path primitives
from .primitives import Arc, Circle, Line

# Define what gets imported with "from sketchangle import *"
__all__ = [
    # Modules
    "angle",
    "measure",
    "paths",
    "point",
    # Geometry types
    "Vector",
    "Vertex",
    # Primitives
    "Arc",
    "Circle",
    "Line",
]

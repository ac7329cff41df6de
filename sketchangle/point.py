"""
Point helpers: arithmetic on (x, y) pairs and points derived from arcs.
"""

import math
from typing import TYPE_CHECKING, Tuple

from .cad_types import PointLike, Vector, Vertex

if TYPE_CHECKING:
    from .primitives import Arc


def subtract(a: PointLike, b: PointLike) -> Vector:
    """Component-wise a - b."""
    return Vector(a[0] - b[0], a[1] - b[1])


def add(a: PointLike, b: PointLike) -> Vertex:
    """Component-wise a + b."""
    return Vertex(a[0] + b[0], a[1] + b[1])


def from_polar(angle_in_radians: float, radius: float) -> Vertex:
    """Point at the given angle and distance from (0, 0)."""
    return Vertex(
        radius * math.cos(angle_in_radians), radius * math.sin(angle_in_radians)
    )


def from_arc(arc: "Arc") -> Tuple[Vertex, Vertex]:
    """
    Get the start and end points of an arc.

    Args:
        arc: The arc to find the end points of

    Returns:
        Tuple of (start point, end point)
    """
    from .angle import degrees_to_radians

    start = add(arc.origin, from_polar(degrees_to_radians(arc.start_angle), arc.radius))
    end = add(arc.origin, from_polar(degrees_to_radians(arc.end_angle), arc.radius))
    return start, end


def mirror(point: PointLike, mirror_x: bool, mirror_y: bool) -> Vertex:
    """Mirror a point: mirror_x negates x, mirror_y negates y."""
    return Vertex(
        -point[0] if mirror_x else point[0],
        -point[1] if mirror_y else point[1],
    )

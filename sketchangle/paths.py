"""
Operations on whole paths built from the angle and point helpers.
"""

import logging
from typing import Union

from . import point
from .angle import arc_end_angle, mirror_angle_degrees
from .primitives import Arc, Circle, Line

logger = logging.getLogger(__name__)

Path = Union[Line, Circle, Arc]


def mirror_path(path: Path, mirror_x: bool, mirror_y: bool) -> Path:
    """
    Create a mirrored copy of a path, reflected through the drawing's axes.

    Mirroring on exactly one axis reverses an arc's winding, so its start and
    end angles swap places to keep it counterclockwise.

    Args:
        path: Line, Circle or Arc to mirror
        mirror_x: Mirror so that x changes sign
        mirror_y: Mirror so that y changes sign

    Returns:
        A new path of the same type

    Raises:
        ValueError: If the path type is not supported
    """
    if isinstance(path, Line):
        mirrored = Line(
            point.mirror(path.origin, mirror_x, mirror_y),
            point.mirror(path.end, mirror_x, mirror_y),
        )
    elif isinstance(path, Circle):
        mirrored = Circle(point.mirror(path.origin, mirror_x, mirror_y), path.radius)
    elif isinstance(path, Arc):
        start_angle = mirror_angle_degrees(path.start_angle, mirror_x, mirror_y)
        end_angle = mirror_angle_degrees(arc_end_angle(path), mirror_x, mirror_y)
        xor = mirror_x != mirror_y
        mirrored = Arc(
            point.mirror(path.origin, mirror_x, mirror_y),
            path.radius,
            end_angle if xor else start_angle,
            start_angle if xor else end_angle,
        )
    else:
        raise ValueError(f"Cannot mirror path of type {type(path).__name__}")

    logger.debug(
        f"Mirrored {path!r} (mirror_x={mirror_x}, mirror_y={mirror_y}) -> {mirrored!r}"
    )
    return mirrored

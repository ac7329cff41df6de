"""
Angle arithmetic for drawing paths.

Angles are in degrees unless a function name says radians. Zero points along
+x and positive angles turn counterclockwise.
"""

import math
from typing import TYPE_CHECKING

from .cad_types import PointLike
from .constants import (
    DEFAULT_MIDDLE_RATIO,
    HALF_REVOLUTION_DEGREES,
    REVOLUTION_DEGREES,
)
from .measure import arc_angle
from .point import subtract
from .utils import round_value

if TYPE_CHECKING:
    from .primitives import Arc, Line


def normalize_angle_degrees(angle_in_degrees: float) -> float:
    """
    Reduce an angle to the range [0, 360).

    Args:
        angle_in_degrees: Angle in degrees, any magnitude or sign

    Returns:
        float: Same polar angle, not negative and less than one revolution
    """
    revolutions = math.floor(angle_in_degrees / REVOLUTION_DEGREES)
    return angle_in_degrees - REVOLUTION_DEGREES * revolutions


def degrees_to_radians(angle_in_degrees: float) -> float:
    """Convert degrees to radians. The result is always within [0, 2*pi)."""
    return normalize_angle_degrees(angle_in_degrees) * math.pi / 180.0


def radians_to_degrees(angle_in_radians: float) -> float:
    """Convert radians to degrees. The result is not normalized."""
    return angle_in_radians * 180.0 / math.pi


def angles_equal(angle1: float, angle2: float) -> bool:
    """
    Find out if two angles point the same way.

    Both angles are rounded and normalized first, so 0 and 360 are equal,
    as are values that land on either side of the 0/360 boundary.

    Args:
        angle1: First angle in degrees
        angle2: Second angle in degrees

    Returns:
        bool: True if the angles are the same
    """
    a1 = normalize_angle_degrees(round_value(angle1))
    a2 = normalize_angle_degrees(round_value(angle2))

    return (
        a1 == a2
        or a1 + REVOLUTION_DEGREES == a2
        or a1 - REVOLUTION_DEGREES == a2
    )


def arc_end_angle(arc: "Arc") -> float:
    """
    Get an arc's end angle, never less than its start angle.

    An arc that passes through 0 degrees gets a full revolution added to its
    end angle, so end - start is the sweep.
    """
    if arc.end_angle < arc.start_angle:
        return REVOLUTION_DEGREES + arc.end_angle
    return arc.end_angle


def arc_middle_angle(arc: "Arc", ratio: float = DEFAULT_MIDDLE_RATIO) -> float:
    """
    Get the angle part way between an arc's start and end angles.

    Args:
        arc: The arc
        ratio: Fraction of the sweep from the start angle (default: 0.5).
            Values outside [0, 1] land beyond the arc's ends.

    Returns:
        float: Angle in degrees
    """
    return arc.start_angle + arc_angle(arc) * ratio


def point_angle_radians(origin: PointLike, point: PointLike) -> float:
    """Angle of the line from origin through point, in radians within [0, 2*pi]."""
    d = subtract(point, origin)
    x = d[0]
    y = d[1]
    return math.atan2(-y, -x) + math.pi


def point_angle_degrees(origin: PointLike, point: PointLike) -> float:
    """Angle of the line from origin through point, in degrees. Not normalized."""
    return radians_to_degrees(point_angle_radians(origin, point))


def line_angle_degrees(line: "Line") -> float:
    """Angle of a line from its origin to its end, in degrees within [0, 360)."""
    return normalize_angle_degrees(
        radians_to_degrees(point_angle_radians(line.origin, line.end))
    )


def mirror_angle_degrees(
    angle_in_degrees: float, mirror_x: bool, mirror_y: bool
) -> float:
    """
    Mirror an angle on either or both axes.

    The y mirror is applied first, then the x mirror.

    Args:
        angle_in_degrees: The angle to mirror
        mirror_x: Mirror so that x changes sign
        mirror_y: Mirror so that y changes sign

    Returns:
        float: Mirrored angle in degrees
    """
    if mirror_y:
        angle_in_degrees = REVOLUTION_DEGREES - angle_in_degrees

    if mirror_x:
        angle_in_degrees = (
            HALF_REVOLUTION_DEGREES
            if angle_in_degrees < HALF_REVOLUTION_DEGREES
            else REVOLUTION_DEGREES + HALF_REVOLUTION_DEGREES
        ) - angle_in_degrees

    return angle_in_degrees

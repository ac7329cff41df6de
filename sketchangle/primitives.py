"""
2D path primitives for drawings.

These classes hold the geometry of a single path in drawing coordinates.
Angles are in degrees, measured counterclockwise from the +x axis.
"""

from typing import Any, Dict

from .cad_types import PointLike


def _point_text(p: PointLike) -> str:
    return f"({float(p[0])}, {float(p[1])})"


class Line:
    """A 2D line segment from origin to end."""

    def __init__(self, origin: PointLike, end: PointLike):
        self.origin = origin  # (x, y)
        self.end = end  # (x, y)

    def __repr__(self):
        return f"Line(origin={_point_text(self.origin)}, end={_point_text(self.end)})"

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": "Line",
            "origin": [float(self.origin[0]), float(self.origin[1])],
            "end": [float(self.end[0]), float(self.end[1])],
        }


class Circle:
    """A 2D circle around origin."""

    def __init__(self, origin: PointLike, radius: float):
        self.origin = origin  # (x, y)
        self.radius = radius

    def __repr__(self):
        return f"Circle(origin={_point_text(self.origin)}, radius={self.radius})"

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": "Circle",
            "origin": [float(self.origin[0]), float(self.origin[1])],
            "radius": self.radius,
        }


class Arc:
    """
    A 2D arc around origin, swept counterclockwise from start_angle to end_angle.

    The end angle may be smaller than the start angle, in which case the arc
    passes through 0 degrees.
    """

    def __init__(
        self, origin: PointLike, radius: float, start_angle: float, end_angle: float
    ):
        self.origin = origin  # (x, y)
        self.radius = radius
        self.start_angle = start_angle  # degrees
        self.end_angle = end_angle  # degrees

    def __repr__(self):
        return (
            f"Arc(origin={_point_text(self.origin)}, radius={self.radius}, "
            f"start_angle={self.start_angle}, end_angle={self.end_angle})"
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": "Arc",
            "origin": [float(self.origin[0]), float(self.origin[1])],
            "radius": self.radius,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
        }

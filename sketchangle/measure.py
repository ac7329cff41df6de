from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import Arc


def arc_angle(arc: "Arc") -> float:
    """Total sweep of an arc in degrees. Never negative."""
    from .angle import arc_end_angle

    return arc_end_angle(arc) - arc.start_angle

"""
Numeric helpers shared by the angle and point modules.
"""

from .constants import ANGLE_ROUND_DECIMALS


def round_value(value: float, decimals: int = ANGLE_ROUND_DECIMALS) -> float:
    """
    Snap a value to a fixed number of decimals to suppress floating-point noise.

    Args:
        value: Number to round
        decimals: Number of decimal places to keep (default: 7)

    Returns:
        float: The rounded value
    """
    return round(float(value), decimals)

REVOLUTION_DEGREES = 360.0
HALF_REVOLUTION_DEGREES = 180.0

# Angles are snapped to this many decimals before they are compared
ANGLE_ROUND_DECIMALS = 7

DEFAULT_MIDDLE_RATIO = 0.5  # fraction of the sweep between start and end angles

VERTEX_TOLERANCE = 1e-9
VERTEX_HASH_DECIMALS = 6

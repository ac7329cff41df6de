import math
from typing import Sequence, Tuple, Union

import numpy as np

from .constants import VERTEX_HASH_DECIMALS, VERTEX_TOLERANCE


class Vector(np.ndarray):
    def __new__(cls, x: float, y: float) -> "Vector":
        return np.asarray([float(x), float(y)]).view(cls)

    def __eq__(self, other: object) -> bool:
        return np.allclose(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    @property
    def x(self):
        return float(self[0])

    @property
    def y(self):
        return float(self[1])


class Vertex(np.ndarray):
    """A 2D position. Coordinates are always stored as floats."""

    def __new__(cls, x: float, y: float) -> "Vertex":
        return np.asarray([float(x), float(y)]).view(cls)

    def __str__(self):
        return f"Vertex(x={self.x}, y={self.y})"

    @property
    def x(self):
        return float(self[0])

    @property
    def y(self):
        return float(self[1])

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return math.isclose(
                self.x, other[0], abs_tol=VERTEX_TOLERANCE
            ) and math.isclose(self.y, other[1], abs_tol=VERTEX_TOLERANCE)
        return math.isclose(self.x, other.x, abs_tol=VERTEX_TOLERANCE) and math.isclose(
            self.y, other.y, abs_tol=VERTEX_TOLERANCE
        )

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(
            (round(self.x, VERTEX_HASH_DECIMALS), round(self.y, VERTEX_HASH_DECIMALS))
        )


PointLike = Union[Tuple[float, float], Sequence[float], Vertex, Vector]

# vector.py

import numpy as np


class Vector:
    """
    A mutable 2D vector used for positions, velocities and sample points.

    Data Contract:
    - x, y (float): Components. Treated as a value: copy with clone() before
      mutating a vector someone else holds.
    - normalize() of a zero-length vector yields NaN components instead of
      raising; callers that can produce a zero vector must guard.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y

    def clone(self) -> 'Vector':
        return Vector(self.x, self.y)

    def length(self) -> float:
        return float(np.hypot(self.x, self.y))

    def normalize(self) -> 'Vector':
        """Scales this vector to unit length in place and returns it."""
        length = np.float64(self.length())
        with np.errstate(divide='ignore', invalid='ignore'):
            self.x = float(self.x / length)
            self.y = float(self.y / length)
        return self

    def scale(self, factor: float) -> 'Vector':
        self.x *= factor
        self.y *= factor
        return self

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vector({self.x!r}, {self.y!r})"

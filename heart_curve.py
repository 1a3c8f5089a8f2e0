# heart_curve.py

import math

from vector import Vector


def point_on_heart(t: float) -> Vector:
    """
    Maps a curve parameter to a point on the heart outline.

    The curve is expressed in math coordinates (y up) around the origin; the
    +25 term lifts it so the shape is roughly centered vertically. Callers
    flip y when mapping to screen space.

    Data Contract:
    - Inputs: t (float) - Curve parameter, conventionally uniform in [-pi, pi].
    - Outputs: A new Vector. Defined for every real t.
    """
    return Vector(
        160 * math.sin(t) ** 3,
        130 * math.cos(t)
        - 50 * math.cos(2 * t)
        - 20 * math.cos(3 * t)
        - 10 * math.cos(4 * t)
        + 25
    )

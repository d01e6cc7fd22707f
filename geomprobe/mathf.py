"""
Scalar math helpers shared by the geometry code.
"""

import math

SQRT2 = math.sqrt(2.0)
PI = math.pi
TWO_PI = 2.0 * math.pi


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return PI * degrees / 180.0


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to the closed range [min_val, max_val]."""
    return max(min_val, min(value, max_val))


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into the range [0, 2*pi)."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # fmod of a tiny negative angle can round up to exactly 2*pi
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def sqrt(x: float) -> float:
    """Square root that yields NaN for negative input instead of raising.

    Lets callers test a discriminant with ``math.isnan`` the same way they
    would test the result of a float square root in other numeric code.
    """
    if x < 0.0:
        return math.nan
    return math.sqrt(x)

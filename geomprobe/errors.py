"""
Exceptions raised by the geometry primitives.

Missing an intersection is never an error; these only signal values that
would break an invariant of a ray or shape.
"""

from typing import Any


class GeometryError(Exception):
    """Base class for errors raised by geomprobe."""
    pass


class InvalidShapeParameterError(GeometryError, ValueError):
    """A shape parameter was assigned a value outside its valid range.

    Attributes:
        param_name: Name of the rejected parameter (e.g. ``"radius"``)
        value: The rejected value
    """

    def __init__(self, param_name: str, value: Any, message: str = ""):
        self.param_name = param_name
        self.value = value
        if not message:
            message = f"Invalid value for {param_name}: {value!r}"
        super().__init__(message)


class DegenerateDirectionError(GeometryError, ValueError):
    """A direction vector could not be normalized (zero or non-finite length)."""

    def __init__(self, direction: Any, message: str = ""):
        self.direction = direction
        if not message:
            message = f"Direction {direction!r} has no usable length and cannot be normalized"
        super().__init__(message)

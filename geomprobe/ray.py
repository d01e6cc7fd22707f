"""
Ray class for representing rays in 3D space.

A ray is defined by a position (anchor) point and a unit direction vector.
Ray(t) = position + t * direction, with t >= 0 lying on the ray.
"""

from __future__ import annotations
import logging

from .errors import DegenerateDirectionError
from .vec3 import Vec3, Point3

logger = logging.getLogger(__name__)


class Ray:
    """A ray with a position and a unit-length direction.

    The direction is normalized whenever it is assigned, so readers can
    rely on ``ray.direction.length() == 1`` without paying for it per read.
    """

    __slots__ = ('position', '_direction')

    def __init__(self, position: Point3, direction: Vec3):
        """Create a ray with given position and direction.

        Args:
            position: The anchor point of the ray, stored as given
            direction: Any non-zero vector; stored normalized

        Raises:
            DegenerateDirectionError: If direction has zero length
        """
        self.position = position
        self.direction = direction

    @property
    def direction(self) -> Vec3:
        return self._direction

    @direction.setter
    def direction(self, value: Vec3) -> None:
        # Scale by the largest component first so the squared length can
        # neither overflow nor underflow
        scale = max(abs(c) for c in value)
        if scale == 0.0 or not value.is_finite():
            logger.debug("Rejected ray direction %r", value)
            raise DegenerateDirectionError(value)
        scaled = value / scale
        self._direction = scaled / scaled.length()

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: Distance from the position (the direction is unit length)

        Returns:
            The point at position + t * direction
        """
        return self.position + self._direction * t

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.position == other.position and self._direction == other._direction

    def __repr__(self) -> str:
        return f"Ray(position={self.position}, direction={self._direction})"

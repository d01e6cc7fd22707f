"""
Line class: an infinite line through two anchor points.
"""

from __future__ import annotations

from .ray import Ray
from .vec3 import Point3


class Line:
    """An undirected line through point1 and point2.

    The points are stored verbatim. Rays derived from the line always start
    at point1 and are rebuilt on every call.
    """

    __slots__ = ('point1', 'point2')

    def __init__(self, point1: Point3, point2: Point3):
        self.point1 = point1
        self.point2 = point2

    def get_inner_ray(self) -> Ray:
        """Ray from point1 pointing away from point2.

        Raises:
            DegenerateDirectionError: If the two points coincide
        """
        return Ray(self.point1, self.point1 - self.point2)

    def get_outer_ray(self) -> Ray:
        """Ray from point1 pointing toward point2.

        Raises:
            DegenerateDirectionError: If the two points coincide
        """
        return Ray(self.point1, self.point2 - self.point1)

    def swap_points(self) -> None:
        """Exchange point1 and point2, flipping the inner and outer rays."""
        self.point1, self.point2 = self.point2, self.point1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.point1 == other.point1 and self.point2 == other.point2

    def __repr__(self) -> str:
        return f"Line(point1={self.point1}, point2={self.point2})"

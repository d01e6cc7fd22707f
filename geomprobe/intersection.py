"""
Intersection contracts for shapes.

Every shape that can be tested against points, rays and lines implements
IntersectionGeometry. Shapes that can also say *where* a ray or line meets
them implement DetailedIntersectionGeometry, which extends the basic
contract and derives its boolean answers from the detailed ones.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import singledispatchmethod
from typing import Optional

from .line import Line
from .ray import Ray
from .vec3 import Vec3, Point3


@dataclass(frozen=True)
class Intersection:
    """Where a ray or line meets a shape.

    Attributes:
        point: The intersection point in world space
        t: Parameter of the point along the query ray (for a line, along
            its inner ray; may be negative)
    """
    point: Point3
    t: float


class IntersectionGeometry(ABC):
    """Anything that can answer yes/no intersection queries."""

    @abstractmethod
    def intersects_point(self, point: Point3) -> bool:
        """True if the point lies inside or on the surface of this geometry."""
        pass

    @abstractmethod
    def intersects_ray(self, ray: Ray) -> bool:
        """True if the ray meets this geometry at some t >= 0."""
        pass

    @abstractmethod
    def intersects_line(self, line: Line) -> bool:
        """True if the infinite line meets this geometry anywhere."""
        pass

    @singledispatchmethod
    def intersects(self, target) -> bool:
        """Test intersection against a point (Vec3), Ray or Line."""
        raise TypeError(f"Cannot test intersection with {type(target).__name__}")

    @intersects.register(Vec3)
    def _(self, target: Vec3) -> bool:
        return self.intersects_point(target)

    @intersects.register(Ray)
    def _(self, target: Ray) -> bool:
        return self.intersects_ray(target)

    @intersects.register(Line)
    def _(self, target: Line) -> bool:
        return self.intersects_line(target)


class DetailedIntersectionGeometry(IntersectionGeometry):
    """Geometry that also reports the nearest qualifying intersection point.

    Subclasses implement ray_intersection() and line_intersection(); the
    boolean ray and line tests come for free, so only intersects_point() is
    left abstract from the basic contract.
    """

    @abstractmethod
    def ray_intersection(self, ray: Ray) -> Optional[Intersection]:
        """Nearest intersection with t >= 0, or None if the ray misses."""
        pass

    @abstractmethod
    def line_intersection(self, line: Line) -> Optional[Intersection]:
        """Intersection nearest the line's anchor point, or None on a miss."""
        pass

    def intersects_ray(self, ray: Ray) -> bool:
        return self.ray_intersection(ray) is not None

    def intersects_line(self, line: Line) -> bool:
        return self.line_intersection(line) is not None

    @singledispatchmethod
    def intersection(self, target) -> Optional[Intersection]:
        """Detailed intersection against a Ray or Line."""
        raise TypeError(f"Cannot compute intersection point with {type(target).__name__}")

    @intersection.register(Ray)
    def _(self, target: Ray) -> Optional[Intersection]:
        return self.ray_intersection(target)

    @intersection.register(Line)
    def _(self, target: Line) -> Optional[Intersection]:
        return self.line_intersection(target)

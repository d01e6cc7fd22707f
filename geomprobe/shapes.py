"""
Geometric shapes that answer intersection queries.

Each shape implements the DetailedIntersectionGeometry contract, so it can
be tested against points, rays and lines and report where rays and lines
meet it.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, Iterator, Optional, Tuple

from .errors import DegenerateDirectionError, InvalidShapeParameterError
from .intersection import DetailedIntersectionGeometry, Intersection
from .line import Line
from .mathf import sqrt
from .ray import Ray
from .vec3 import Vec3, Point3

logger = logging.getLogger(__name__)


def _inner_ray(line: Line) -> Optional[Ray]:
    """The line's inner ray, or None when its points coincide."""
    try:
        return line.get_inner_ray()
    except DegenerateDirectionError:
        logger.debug("No direction for %r", line)
        return None


class Shape(DetailedIntersectionGeometry):
    """Base class for all solid shapes."""
    pass


class Sphere(Shape):
    """A sphere defined by origin (center) and a strictly positive radius."""

    def __init__(self, origin: Point3, radius: float):
        """Create a sphere.

        Args:
            origin: Center point of the sphere
            radius: Radius of the sphere, must be greater than zero

        Raises:
            InvalidShapeParameterError: If radius is not positive
        """
        self.origin = origin
        self.radius = radius

    @classmethod
    def unit(cls) -> Sphere:
        """A fresh sphere at the origin with radius 1."""
        return cls(Vec3(0.0, 0.0, 0.0), 1.0)

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        # NaN fails this comparison as well
        if not value > 0.0:
            logger.debug("Rejected sphere radius %r", value)
            raise InvalidShapeParameterError(
                'radius', value, "Radius of a sphere must be greater than zero"
            )
        self._radius = float(value)

    def copy(self) -> Sphere:
        """Return an independent sphere with the same origin and radius."""
        return Sphere(self.origin.copy(), self._radius)

    def intersects_point(self, point: Point3) -> bool:
        """Containment test, boundary inclusive."""
        return (self.origin - point).length_squared() <= self._radius * self._radius

    def _solve(self, ray: Ray) -> Optional[Tuple[float, float]]:
        """Solve for the ray parameters where the ray meets the sphere.

        With p0 the sphere origin, r the radius, p the ray position and d
        the ray's unit direction, points p + t*d on the sphere satisfy

            |p + t*d - p0|^2 = r^2

        which expands to the quadratic a*t^2 + b*t + c = 0 with
            a = d.d = 1
            b = 2 * d.(p - p0)
            c = |p - p0|^2 - r^2

        The constant term is taken from the offset p - p0, which keeps it
        accurate far from the world origin.

        Returns:
            (t1, t2) with t1 <= t2, or None if there is no real root.
            A tangent ray gives t1 == t2.
        """
        d = ray.direction
        p = ray.position
        p0 = self.origin
        r = self._radius

        a = 1.0
        offset = p - p0
        b = 2.0 * d.dot(offset)
        c = offset.length_squared() - r * r

        sqrt_disc = sqrt(b * b - 4.0 * a * c)
        if math.isnan(sqrt_disc):
            return None

        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        return t1, t2

    def ray_intersection(self, ray: Ray) -> Optional[Intersection]:
        """Nearest point where the ray (t >= 0 only) meets the sphere.

        A ray starting inside the sphere reports its exit point.
        """
        roots = self._solve(ray)
        if roots is None:
            return None

        t1, t2 = roots
        if t1 < 0.0:
            if t2 < 0.0:
                # Sphere is entirely behind the ray
                return None
            t = t2
        elif t2 < 0.0:
            t = t1
        else:
            t = min(t1, t2)

        return Intersection(point=ray.at(t), t=t)

    def intersects_ray(self, ray: Ray) -> bool:
        roots = self._solve(ray)
        if roots is None:
            return False
        return roots[0] >= 0.0 or roots[1] >= 0.0

    def line_intersection(self, line: Line) -> Optional[Intersection]:
        """Point where the infinite line meets the sphere nearest point1.

        The line is solved along its inner ray and both directions from the
        anchor are accepted. A line whose points coincide has no direction
        and never meets the sphere.
        """
        ray = _inner_ray(line)
        if ray is None:
            return None
        roots = self._solve(ray)
        if roots is None:
            return None

        t1, t2 = roots
        t = t1 if abs(t1) < abs(t2) else t2
        return Intersection(point=ray.at(t), t=t)

    def intersects_line(self, line: Line) -> bool:
        ray = _inner_ray(line)
        return ray is not None and self._solve(ray) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.origin == other.origin and self._radius == other._radius

    def __repr__(self) -> str:
        return f"Sphere(origin={self.origin}, radius={self._radius})"


UNIT_SPHERE = Sphere.unit()


class ShapeGroup(Shape):
    """An ordered collection of shapes queried as one.

    Ray and line queries report the member hit nearest to the query's
    anchor point, which is what picking against several shapes needs.
    """

    def __init__(self, shapes: Optional[Iterable[DetailedIntersectionGeometry]] = None):
        self.shapes: list[DetailedIntersectionGeometry] = list(shapes) if shapes is not None else []

    def add(self, shape: DetailedIntersectionGeometry) -> None:
        """Add a shape to the group."""
        self.shapes.append(shape)

    def clear(self) -> None:
        """Remove all shapes."""
        self.shapes.clear()

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[DetailedIntersectionGeometry]:
        return iter(self.shapes)

    def intersects_point(self, point: Point3) -> bool:
        return any(shape.intersects_point(point) for shape in self.shapes)

    def ray_intersection(self, ray: Ray) -> Optional[Intersection]:
        """Find the closest intersection among all shapes."""
        closest: Optional[Intersection] = None

        for shape in self.shapes:
            hit = shape.ray_intersection(ray)
            if hit is not None and (closest is None or hit.t < closest.t):
                closest = hit

        return closest

    def line_intersection(self, line: Line) -> Optional[Intersection]:
        """Find the intersection closest to the line's anchor point."""
        closest: Optional[Intersection] = None

        for shape in self.shapes:
            hit = shape.line_intersection(line)
            if hit is not None and (closest is None or abs(hit.t) < abs(closest.t)):
                closest = hit

        return closest

    def __repr__(self) -> str:
        return f"ShapeGroup({len(self.shapes)} shapes)"

"""Tests for the intersection contracts."""

import pytest
from typing import Optional

from geomprobe.vec3 import Vec3, Point3
from geomprobe.ray import Ray
from geomprobe.line import Line
from geomprobe.intersection import (
    Intersection, IntersectionGeometry, DetailedIntersectionGeometry
)
from geomprobe.shapes import Sphere


class HalfSpace(DetailedIntersectionGeometry):
    """Everything with z <= 0; only used to exercise the contract."""

    def __init__(self):
        self.calls = []

    def intersects_point(self, point: Point3) -> bool:
        self.calls.append('point')
        return point.z <= 0.0

    def ray_intersection(self, ray: Ray) -> Optional[Intersection]:
        self.calls.append('ray')
        if ray.position.z <= 0.0:
            return Intersection(ray.position, 0.0)
        if ray.direction.z >= 0.0:
            return None
        t = -ray.position.z / ray.direction.z
        return Intersection(ray.at(t), t)

    def line_intersection(self, line: Line) -> Optional[Intersection]:
        self.calls.append('line')
        ray = line.get_inner_ray()
        if ray.direction.z == 0.0:
            return Intersection(ray.position, 0.0) if ray.position.z <= 0.0 else None
        t = -ray.position.z / ray.direction.z
        return Intersection(ray.at(t), t)


class TestContractShape:
    """Test the abstract contracts themselves."""

    def test_basic_contract_is_abstract(self):
        with pytest.raises(TypeError):
            IntersectionGeometry()

    def test_detailed_contract_is_abstract(self):
        with pytest.raises(TypeError):
            DetailedIntersectionGeometry()

    def test_detailed_extends_basic(self):
        assert issubclass(DetailedIntersectionGeometry, IntersectionGeometry)

    def test_sphere_satisfies_both(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        assert isinstance(sphere, IntersectionGeometry)
        assert isinstance(sphere, DetailedIntersectionGeometry)

    def test_detailed_subclass_needs_only_point_test(self):
        class Incomplete(DetailedIntersectionGeometry):
            def ray_intersection(self, ray):
                return None

            def line_intersection(self, line):
                return None

        with pytest.raises(TypeError):
            Incomplete()


class TestDefaultBooleans:
    """Boolean ray and line tests derive from the detailed ones."""

    def test_ray_boolean_uses_detailed(self):
        shape = HalfSpace()
        assert shape.intersects_ray(Ray(Point3(0, 0, 5), Vec3(0, 0, -1)))
        assert shape.calls == ['ray']

    def test_ray_boolean_miss(self):
        shape = HalfSpace()
        assert not shape.intersects_ray(Ray(Point3(0, 0, 5), Vec3(0, 0, 1)))

    def test_line_boolean_uses_detailed(self):
        shape = HalfSpace()
        assert shape.intersects_line(Line(Point3(0, 0, 5), Point3(0, 0, 6)))
        assert shape.calls == ['line']


class TestDispatch:
    """Test intersects() and intersection() dispatch on argument type."""

    def test_point_dispatch(self):
        shape = HalfSpace()
        assert shape.intersects(Point3(0, 0, -1))
        assert shape.calls == ['point']

    def test_ray_dispatch(self):
        shape = HalfSpace()
        assert shape.intersects(Ray(Point3(0, 0, 5), Vec3(0, 0, -1)))
        assert shape.calls == ['ray']

    def test_line_dispatch(self):
        shape = HalfSpace()
        assert shape.intersects(Line(Point3(0, 0, 5), Point3(1, 0, 4)))
        assert shape.calls == ['line']

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            HalfSpace().intersects((0, 0, 0))

    def test_detailed_ray_dispatch(self):
        hit = HalfSpace().intersection(Ray(Point3(0, 0, 5), Vec3(0, 0, -1)))
        assert hit is not None
        assert hit.point == Point3(0, 0, 0)
        assert abs(hit.t - 5.0) < 1e-12

    def test_detailed_line_dispatch(self):
        hit = HalfSpace().intersection(Line(Point3(0, 0, 5), Point3(0, 0, 6)))
        assert hit is not None
        assert hit.point == Point3(0, 0, 0)

    def test_detailed_point_unsupported(self):
        with pytest.raises(TypeError):
            HalfSpace().intersection(Point3(0, 0, 0))

    def test_sphere_dispatch(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        assert sphere.intersects(Point3(0, 0, 0))
        assert sphere.intersects(Ray(Point3(0, 0, -5), Vec3(0, 0, 1)))
        assert sphere.intersects(Line(Point3(-20, 0, 0), Point3(-10, 0, 0)))
        assert not sphere.intersects(Point3(2, 0, 0))


class TestIntersectionRecord:

    def test_frozen(self):
        hit = Intersection(Point3(1, 2, 3), 4.0)
        with pytest.raises(AttributeError):
            hit.t = 5.0

    def test_equality(self):
        assert Intersection(Point3(1, 2, 3), 4.0) == Intersection(Point3(1, 2, 3), 4.0)

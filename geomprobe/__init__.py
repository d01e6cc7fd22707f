"""
geomprobe - Ray, line and shape intersection testing

A small geometry library for engines that need to ask "does this hit that?":
- Rays with an always-normalized direction
- Lines through two points, with derived inner and outer rays
- Capability contracts for yes/no and point-reporting intersection queries
- Spheres with validated radius and closed-form intersection
- Shape groups for picking the nearest of several shapes
"""

__version__ = "0.1.0"
__author__ = "geomprobe Team"

from .vec3 import Vec3, Point3
from .errors import GeometryError, InvalidShapeParameterError, DegenerateDirectionError
from .ray import Ray
from .line import Line
from .intersection import Intersection, IntersectionGeometry, DetailedIntersectionGeometry
from .shapes import Shape, Sphere, ShapeGroup, UNIT_SPHERE
from .probe_parser import (
    ProbeParser, ProbeParseError, ProbeSet, Query, QueryResult, load_probes, parse_probes
)
from .logging_config import setup_logging

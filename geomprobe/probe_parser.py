"""
Probe file parser.

A probe file names a set of shapes and a list of intersection queries to run
against them. Files may be YAML or JSON.

Example probe file:
```yaml
shapes:
  ball:
    type: sphere
    origin: [0, 0, 0]
    radius: 1
  far:
    type: sphere
    origin: [10, 0, 0]
    radius: 5
  both:
    type: group
    shapes: [ball, far]

queries:
  - name: pick-from-behind
    shape: ball
    ray:
      position: [0, 0, -5]
      direction: [0, 0, 1]

  - shape: ball
    line:
      point1: [-20, 1, 0]
      point2: [-10, 1, 0]

  - shape: far
    point: [12, 1, 0]
```
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json
import logging

import yaml

from .errors import GeometryError
from .intersection import DetailedIntersectionGeometry, IntersectionGeometry
from .line import Line
from .ray import Ray
from .shapes import ShapeGroup, Sphere
from .vec3 import Vec3, Point3

logger = logging.getLogger(__name__)

QueryTarget = Union[Vec3, Ray, Line]


class ProbeParseError(Exception):
    """Error during probe file parsing."""
    pass


@dataclass
class QueryResult:
    """Outcome of a single query.

    Attributes:
        name: Query name from the probe file (or its index)
        kind: One of 'point', 'ray', 'line'
        hit: Whether the shape was intersected
        point: Reported intersection point; None for misses and point queries
    """
    name: str
    kind: str
    hit: bool
    point: Optional[Point3] = None

    def describe(self) -> str:
        status = 'hit' if self.hit else 'miss'
        if self.point is None:
            return f"{self.name} [{self.kind}]: {status}"
        return (f"{self.name} [{self.kind}]: {status} at "
                f"({self.point.x:.6g}, {self.point.y:.6g}, {self.point.z:.6g})")


@dataclass
class Query:
    """A named intersection query against one shape."""
    name: str
    kind: str
    shape: IntersectionGeometry
    target: QueryTarget

    def evaluate(self) -> QueryResult:
        """Run the query, using the detailed contract where the shape has it."""
        if self.kind != 'point' and isinstance(self.shape, DetailedIntersectionGeometry):
            found = self.shape.intersection(self.target)
            if found is None:
                return QueryResult(self.name, self.kind, False)
            return QueryResult(self.name, self.kind, True, found.point)
        return QueryResult(self.name, self.kind, self.shape.intersects(self.target))


@dataclass
class ProbeSet:
    """Shapes and queries loaded from a probe file."""
    shapes: Dict[str, IntersectionGeometry] = field(default_factory=dict)
    queries: List[Query] = field(default_factory=list)

    def evaluate(self) -> List[QueryResult]:
        """Run every query in file order."""
        return [query.evaluate() for query in self.queries]


class ProbeParser:
    """Parser for probe description files."""

    QUERY_KINDS = ('point', 'ray', 'line')

    def __init__(self):
        self.shapes: Dict[str, IntersectionGeometry] = {}
        self.queries: List[Query] = []

    def parse_file(self, filepath: Union[str, Path]) -> ProbeSet:
        """Parse a probe file.

        Args:
            filepath: Path to the probe file (YAML or JSON)

        Returns:
            The parsed ProbeSet
        """
        path = Path(filepath)
        if not path.exists():
            raise ProbeParseError(f"Probe file not found: {filepath}")

        try:
            content = path.read_text(encoding='utf-8')
        except OSError as e:
            raise ProbeParseError(f"Cannot read probe file {filepath}: {e}") from e

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON, so it covers unknown suffixes too
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ProbeParseError(f"Malformed probe file {filepath}: {e}") from e

        return self.parse_dict(data)

    def parse_dict(self, data: Any) -> ProbeSet:
        """Parse a probe set from a dictionary.

        Args:
            data: Probe description dictionary

        Returns:
            The parsed ProbeSet
        """
        if not isinstance(data, dict):
            raise ProbeParseError("Probe description must be a mapping")

        try:
            # Shapes first (queries reference them)
            shapes_data = data.get('shapes')
            queries_data = data.get('queries')
            self._parse_shapes({} if shapes_data is None else shapes_data)
            self._parse_queries([] if queries_data is None else queries_data)
        except GeometryError as e:
            raise ProbeParseError(str(e)) from e

        logger.debug("Parsed %d shapes and %d queries", len(self.shapes), len(self.queries))
        return ProbeSet(dict(self.shapes), list(self.queries))

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from a list or an x/y/z mapping."""
        try:
            if isinstance(data, (list, tuple)):
                return Vec3.from_sequence(data)
            elif isinstance(data, dict):
                return Vec3(
                    float(data.get('x', 0)),
                    float(data.get('y', 0)),
                    float(data.get('z', 0))
                )
        except (TypeError, ValueError) as e:
            raise ProbeParseError(f"Cannot parse Vec3 from {data!r}: {e}") from e
        raise ProbeParseError(f"Cannot parse Vec3 from: {data!r}")

    def _require(self, data: Any, key: str, context: str) -> Any:
        if not isinstance(data, dict):
            raise ProbeParseError(f"{context} must be a mapping")
        if key not in data:
            raise ProbeParseError(f"{context} is missing '{key}'")
        return data[key]

    def _parse_shapes(self, shapes_data: Dict[str, Any]) -> None:
        """Parse shapes section."""
        if not isinstance(shapes_data, dict):
            raise ProbeParseError("'shapes' must be a mapping of name to shape")

        for name, shape_data in shapes_data.items():
            if not isinstance(shape_data, dict):
                raise ProbeParseError(f"Shape '{name}' must be a mapping")
            shape_type = str(shape_data.get('type', 'sphere')).lower()

            if shape_type == 'sphere':
                origin = self._parse_vec3(shape_data.get('origin', [0, 0, 0]))
                radius = self._require(shape_data, 'radius', f"Sphere '{name}'")
                try:
                    radius = float(radius)
                except (TypeError, ValueError) as e:
                    raise ProbeParseError(f"Sphere '{name}' has invalid radius {radius!r}") from e
                self.shapes[name] = Sphere(origin, radius)

            elif shape_type == 'unit_sphere':
                self.shapes[name] = Sphere.unit()

            elif shape_type == 'group':
                members = self._require(shape_data, 'shapes', f"Group '{name}'")
                if not isinstance(members, list):
                    raise ProbeParseError(f"Group '{name}' must list its member shapes")
                self.shapes[name] = ShapeGroup(self._get_shape(ref) for ref in members)

            else:
                raise ProbeParseError(f"Unknown shape type: {shape_type}")

    def _get_shape(self, ref: Any) -> IntersectionGeometry:
        """Look up a previously defined shape by name."""
        if not isinstance(ref, str) or ref not in self.shapes:
            raise ProbeParseError(f"Unknown shape: {ref}")
        return self.shapes[ref]

    def _parse_queries(self, queries_data: List[Any]) -> None:
        """Parse queries section."""
        if not isinstance(queries_data, list):
            raise ProbeParseError("'queries' must be a list")

        for index, query_data in enumerate(queries_data):
            if not isinstance(query_data, dict):
                raise ProbeParseError(f"Query #{index} must be a mapping")
            name = str(query_data.get('name', f"query-{index}"))
            shape = self._get_shape(self._require(query_data, 'shape', f"Query '{name}'"))

            kinds = [kind for kind in self.QUERY_KINDS if kind in query_data]
            if len(kinds) != 1:
                raise ProbeParseError(
                    f"Query '{name}' must have exactly one of {', '.join(self.QUERY_KINDS)}"
                )
            kind = kinds[0]
            body = query_data[kind]

            if kind == 'point':
                target = self._parse_vec3(body)
            elif kind == 'ray':
                target = Ray(
                    self._parse_vec3(self._require(body, 'position', f"Ray of '{name}'")),
                    self._parse_vec3(self._require(body, 'direction', f"Ray of '{name}'"))
                )
            else:
                target = Line(
                    self._parse_vec3(self._require(body, 'point1', f"Line of '{name}'")),
                    self._parse_vec3(self._require(body, 'point2', f"Line of '{name}'"))
                )

            self.queries.append(Query(name, kind, shape, target))


def load_probes(filepath: Union[str, Path]) -> ProbeSet:
    """Convenience function to load a probe file.

    Args:
        filepath: Path to the probe file

    Returns:
        The parsed ProbeSet
    """
    parser = ProbeParser()
    return parser.parse_file(filepath)


def parse_probes(data: Dict[str, Any]) -> ProbeSet:
    """Convenience function to parse probes from a dictionary.

    Args:
        data: Probe description dictionary

    Returns:
        The parsed ProbeSet
    """
    parser = ProbeParser()
    return parser.parse_dict(data)

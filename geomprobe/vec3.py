"""
Vector3 class for 3D geometry.

The value type every geometric query is built from, used for:
- Points in 3D space (sphere origins, ray positions, line anchors)
- Direction vectors
"""

from __future__ import annotations
import math
from typing import Union
import numpy as np


class Vec3:
    """A 3D vector class supporting the operations the geometry needs.

    Uses numpy internally for storage and arithmetic while providing
    a clean, Pythonic API.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
        return v

    @classmethod
    def from_sequence(cls, values) -> Vec3:
        """Create Vec3 from any sequence of exactly three numbers."""
        components = [float(c) for c in values]
        if len(components) != 3:
            raise ValueError(f"Expected 3 components, got {len(components)}")
        return cls(*components)

    @staticmethod
    def zero() -> Vec3:
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def unit_x() -> Vec3:
        return Vec3(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> Vec3:
        return Vec3(0.0, 0.0, 1.0)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @x.setter
    def x(self, value: float):
        self._data[0] = value

    @y.setter
    def y(self, value: float):
        self._data[1] = value

    @z.setter
    def z(self, value: float):
        self._data[2] = value

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data + other._data)
        return Vec3.from_array(self._data + other)

    def __radd__(self, other: float) -> Vec3:
        return Vec3.from_array(other + self._data)

    def __sub__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data - other._data)
        return Vec3.from_array(self._data - other)

    def __rsub__(self, other: float) -> Vec3:
        return Vec3.from_array(other - self._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data / other._data)
        return Vec3.from_array(self._data / other)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __setitem__(self, index: int, value: float):
        self._data[index] = value

    def __iter__(self):
        return (float(c) for c in self._data)

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return float(np.linalg.norm(self._data))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        A zero vector has no direction; it is returned unchanged as a zero
        vector and callers that need a real direction must check for it.
        """
        length = self.length()
        if length == 0:
            return Vec3(0, 0, 0)
        return Vec3.from_array(self._data / length)

    def normalize_in_place(self) -> Vec3:
        """Scale this vector to unit length and return it.

        Components become NaN for a zero vector, matching what a plain
        division by the zero magnitude produces.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            self._data /= np.linalg.norm(self._data)
        return self

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def is_finite(self) -> bool:
        """Check that no component is NaN or infinite."""
        return bool(np.all(np.isfinite(self._data)))

    def is_close(self, other: Vec3, tolerance: float = 1e-6) -> bool:
        """Component-wise comparison with an absolute tolerance."""
        return all(math.isclose(a, b, abs_tol=tolerance) for a, b in zip(self, other))

    def copy(self) -> Vec3:
        return Vec3.from_array(self._data.copy())


# Convenience type alias
Point3 = Vec3

"""Points and vectors in three-dimensional space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from cadgeom.mathutils import (
    coords_equal,
    is_equal,
    is_negative,
    is_positive,
    is_zero,
)


@dataclass(frozen=True, eq=False)
class Point:
    """A location in space; equality uses the linear tolerance."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return coords_equal(self, other)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def to_vector(self) -> Vector3D:
        """Return the position vector of this point."""
        return Vector3D(self.x, self.y, self.z)


@dataclass(frozen=True, eq=False)
class Vector3D:
    """An immutable three-component vector; equality uses the linear tolerance."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_points(cls, point1: Point, point2: Point) -> Vector3D:
        """Return the vector from ``point1`` to ``point2``; the points must differ."""
        if point1 == point2:
            raise ValueError("points must be distinct for a valid vector")
        return cls(point2.x - point1.x, point2.y - point1.y, point2.z - point1.z)

    @property
    def modulus(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @property
    def is_unit(self) -> bool:
        """True if the length equals one within machine epsilon."""
        return is_equal(self.modulus, 1.0)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError("Index out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return coords_equal(self, other)

    def __mul__(self, scalar: float) -> Vector3D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if is_zero(scalar):
            raise ZeroDivisionError("attempting to divide by zero")
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vector3D) -> float:
        """Scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Vector product with ``other``."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )

    def normalized(self) -> Vector3D:
        """Return a unit vector with the same direction."""
        if self.is_unit:
            return self
        modulus = self.modulus
        if is_zero(modulus):
            raise ValueError("modulus is zero, cannot normalize")
        return Vector3D(self.x / modulus, self.y / modulus, self.z / modulus)

    def is_zero(self) -> bool:
        """True if every component is zero within machine epsilon."""
        return is_zero(self.x) and is_zero(self.y) and is_zero(self.z)

    def _require_nonzero(self, other: Vector3D) -> None:
        if other.is_zero() or self.is_zero():
            raise ValueError("this vector or input is a zero vector")

    def is_parallel(self, other: Vector3D) -> bool:
        """True if both vectors point the same way; neither may be zero."""
        self._require_nonzero(other)
        return self.cross(other).is_zero() and is_positive(self.dot(other))

    def is_antiparallel(self, other: Vector3D) -> bool:
        """True if the vectors point opposite ways; neither may be zero."""
        self._require_nonzero(other)
        return self.cross(other).is_zero() and is_negative(self.dot(other))

    def __str__(self) -> str:
        return f"vector coordinates are: ({self.x:g}, {self.y:g}, {self.z:g})"
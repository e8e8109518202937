"""Three-dimensional vectors and points, plus 2D texture coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 1e-3

_Number = (int, float)


@dataclass(frozen=True, slots=True)
class Vec2:
    """A pair of texture coordinates."""

    u: float = 0.0
    v: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.u
        yield self.v


@dataclass(frozen=True, slots=True)
class Vector:
    """A direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector:
        if not isinstance(factor, _Number):
            return NotImplemented
        return Vector(factor * self.x, factor * self.y, factor * self.z)

    def __rmul__(self, factor: float) -> Vector:
        return self.__mul__(factor)

    def __truediv__(self, factor: float) -> Vector:
        if not isinstance(factor, _Number):
            return NotImplemented
        return Vector(self.x / factor, self.y / factor, self.z / factor)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def norm(self) -> float:
        return math.sqrt(self.norm_sq())

    def norm_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vector:
        """Return a unit vector; a zero vector is returned unchanged."""
        length = self.norm()
        if length > 0.0:
            return self / length
        return self

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def abs(self) -> Vector:
        return Vector(abs(self.x), abs(self.y), abs(self.z))

    def max_dimension(self) -> int:
        """Index (0, 1 or 2) of the largest component."""
        if self.x > self.y:
            return 0 if self.x > self.z else 2
        return 1 if self.y > self.z else 2

    def permute(self, x: int, y: int, z: int) -> Vector:
        xyz = tuple(self)
        return Vector(xyz[x], xyz[y], xyz[z])

    def faceforward(self, other: Vector) -> Vector:
        """Flip this vector so that it lies on the same side as ``other``."""
        return -self if self.dot(other) < 0.0 else self

    def coordinate_system(self) -> tuple[Vector, Vector]:
        """Two axes orthogonal to this (normalised) vector and to each other."""
        if abs(self.x) > abs(self.y):
            v2 = Vector(-self.z, 0.0, self.x) / math.sqrt(self.x * self.x + self.z * self.z)
        else:
            v2 = Vector(0.0, self.z, -self.y) / math.sqrt(self.y * self.y + self.z * self.z)
        return v2, self.cross(v2)

    def rotate(self, rx: Vector, ry: Vector, rz: Vector) -> Vector:
        """Express this vector in the frame spanned by ``rx``, ``ry``, ``rz``."""
        return Vector(
            self.x * rx.x + self.y * ry.x + self.z * rz.x,
            self.x * rx.y + self.y * ry.y + self.z * rz.y,
            self.x * rx.z + self.y * ry.z + self.z * rz.z,
        )


@dataclass(frozen=True, slots=True)
class Point:
    """A position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Point | Vector) -> Point:
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point | Vector) -> Point:
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Point:
        if not isinstance(factor, _Number):
            return NotImplemented
        return Point(factor * self.x, factor * self.y, factor * self.z)

    def __rmul__(self, factor: float) -> Point:
        return self.__mul__(factor)

    def vec_to(self, other: Point) -> Vector:
        """The vector leading from this point to ``other``."""
        return Vector(other.x - self.x, other.y - self.y, other.z - self.z)

    def permute(self, x: int, y: int, z: int) -> Point:
        xyz = tuple(self)
        return Point(xyz[x], xyz[y], xyz[z])
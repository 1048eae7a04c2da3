"""Small vector and quaternion value types used across the simulator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Return a unit vector, or the zero vector when the length is zero."""
        length = self.magnitude()
        if length <= 0.0:
            return Vector3()
        return Vector3(self.x / length, self.y / length, self.z / length)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def is_finite(self) -> bool:
        return all(math.isfinite(value) for value in (self.x, self.y, self.z))


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Quaternion:
        """Return a unit quaternion, or the zero quaternion when the norm is zero."""
        length = self.magnitude()
        if length <= 0.0:
            return Quaternion(0.0, 0.0, 0.0, 0.0)
        return Quaternion(self.w / length, self.x / length, self.y / length, self.z / length)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quaternion(self.w * scalar, self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Quaternion:
        return self.__mul__(scalar)

    def is_finite(self) -> bool:
        return all(math.isfinite(value) for value in (self.w, self.x, self.y, self.z))


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def rotate_vector(quaternion: Quaternion, vector: Vector3) -> Vector3:
    """Rotate ``vector`` by the rotation that ``quaternion`` describes."""
    unit = quaternion.normalized()
    if unit.magnitude() <= 0.0:
        return vector
    axis = Vector3(unit.x, unit.y, unit.z)
    t = 2.0 * _cross(axis, vector)
    return vector + unit.w * t + _cross(axis, t)
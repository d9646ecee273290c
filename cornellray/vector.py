"""Immutable three-component vectors and rotations about the Y axis."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def scale(self, factor: float) -> Vector3:
        """Multiply every component by ``factor``."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def hadamard(self, other: Vector3) -> Vector3:
        """Component-wise product."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector yields NaN components."""
        length = self.length()
        if length == 0:
            return Vector3(math.nan, math.nan, math.nan)
        return self.scale(1.0 / length)


def rotate_y(vec: Vector3, angle: float, center: Vector3) -> Vector3:
    """Rotate ``vec`` by ``angle`` radians about a vertical axis through ``center``."""
    sin_a = math.sin(angle)
    cos_a = math.cos(angle)
    local = vec - center
    rotated = Vector3(
        local.x * cos_a - local.z * sin_a,
        local.y,
        local.x * sin_a + local.z * cos_a,
    )
    return rotated + center


def inverse_rotate_y(vec: Vector3, angle: float) -> Vector3:
    """Rotate ``vec`` by ``-angle`` radians about the world Y axis."""
    sin_a = math.sin(-angle)
    cos_a = math.cos(-angle)
    return Vector3(
        vec.x * cos_a - vec.z * sin_a,
        vec.y,
        vec.x * sin_a + vec.z * cos_a,
    )
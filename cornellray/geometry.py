"""Rays, spheres, rotated cubes and the optics shared by the renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Union

from .vector import Vector3, inverse_rotate_y, rotate_y

INF = 1e6


@dataclass(frozen=True)
class Ray:
    origin: Vector3
    direction: Vector3

    def point_at(self, t: float) -> Vector3:
        """Point reached after travelling ``t`` along the direction."""
        return self.direction.scale(t) + self.origin


@dataclass(frozen=True)
class Sphere:
    center: Vector3
    radius: float
    color: Vector3
    reflect: float = 0.0
    refract: float = 0.0
    emitting: bool = False

    def intersect(self, ray: Ray, limit: float = INF, square_radius: bool = True) -> float | None:
        """Distance to the nearer hit in (0, limit), or None.

        With ``square_radius`` the radius is squared unless it equals INF (the
        walls of the box); without it the radius is used as is.
        """
        from_center = self.center - ray.origin
        b = ray.direction.dot(from_center)
        if square_radius and self.radius != INF:
            c = from_center.dot(from_center) - self.radius * self.radius
        else:
            c = from_center.dot(from_center) - self.radius
        discriminant = b * b - c
        if discriminant < 0:
            return None
        solve = b - math.sqrt(discriminant)
        if 0 < solve < limit:
            return solve
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        return (point - self.center).normalized()


def _div(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _slab(low: float, high: float, origin: float, direction: float) -> tuple[float, float]:
    near = _div(low - origin, direction)
    far = _div(high - origin, direction)
    if near > far:
        near, far = far, near
    return near, far


@dataclass(frozen=True)
class Cube:
    center: Vector3
    edge_size: float
    color: Vector3
    angle_y: float = 0.0
    reflect: float = 0.0
    refract: float = 0.0
    emitting: bool = False

    def intersect(self, ray: Ray, limit: float = INF) -> float | None:
        """Distance to the entry point in (0, limit), or None.

        The ray is brought into the cube's frame by rotating it about the
        world Y axis, then tested against the axis-aligned box.
        """
        origin = inverse_rotate_y(ray.origin, self.angle_y)
        direction = inverse_rotate_y(ray.direction, self.angle_y)
        half = self.edge_size / 2
        c = self.center

        tmin, tmax = _slab(c.x - half, c.x + half, origin.x, direction.x)
        tymin, tymax = _slab(c.y - half, c.y + half, origin.y, direction.y)
        if tmin > tymax or tymin > tmax:
            return None
        if tymin > tmin:
            tmin = tymin
        if tymax < tmax:
            tmax = tymax

        tzmin, tzmax = _slab(c.z - half, c.z + half, origin.z, direction.z)
        if tmin > tzmax or tzmin > tmax:
            return None
        if tzmin > tmin:
            tmin = tzmin

        if 0 < tmin < limit:
            return tmin
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        """Normal of the face whose axis dominates the offset of ``point``."""
        local = inverse_rotate_y(point, self.angle_y)
        offset = local - self.center
        dx, dy, dz = abs(offset.x), abs(offset.y), abs(offset.z)
        if dx > dy and dx > dz:
            normal = Vector3(1.0 if local.x > self.center.x else -1.0, 0.0, 0.0)
        elif dy > dx and dy > dz:
            normal = Vector3(0.0, 1.0 if local.y > self.center.y else -1.0, 0.0)
        else:
            normal = Vector3(0.0, 0.0, 1.0 if local.z > self.center.z else -1.0)
        return rotate_y(normal, self.angle_y, self.center)


Shape = Union[Sphere, Cube]


@dataclass(frozen=True)
class Hit:
    """The nearest object struck by a ray."""

    shape: Shape
    index: int
    distance: float

    @property
    def is_cube(self) -> bool:
        return isinstance(self.shape, Cube)


def find_intersection(
    spheres: Sequence[Sphere],
    cubes: Sequence[Cube],
    ray: Ray,
    limit: float = INF,
    square_radius: bool = True,
) -> Hit | None:
    """Nearest hit closer than ``limit`` among spheres, then cubes."""
    hit: Hit | None = None
    best = limit
    for index, sphere in enumerate(spheres):
        t = sphere.intersect(ray, best, square_radius)
        if t is not None:
            best = t
            hit = Hit(sphere, index, t)
    for index, cube in enumerate(cubes):
        t = cube.intersect(ray, best)
        if t is not None:
            best = t
            hit = Hit(cube, index, t)
    return hit


def reflect(direction: Vector3, normal: Vector3) -> Vector3:
    """Mirror ``direction`` about ``normal`` and normalise."""
    return (direction + normal.scale(-2 * normal.dot(direction))).normalized()


def refract(direction: Vector3, normal: Vector3, eta: float) -> Vector3:
    """Refracted direction, or the zero vector on total internal reflection."""
    cos_i = -direction.dot(normal)
    sin2_t = eta * eta * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return Vector3(0.0, 0.0, 0.0)
    cos_t = math.sqrt(1.0 - sin2_t)
    refracted = direction.scale(eta) + normal.scale(eta * cos_i - cos_t)
    return refracted.normalized()


def to_color(value: float) -> int:
    """Clamp to [0, 1], apply gamma 0.45 and map to 0..255."""
    if math.isnan(value):
        return 0
    clamped = min(max(value, 0.0), 1.0)
    return int(clamped ** 0.45 * 255 + 0.5)
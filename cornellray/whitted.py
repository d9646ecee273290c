"""Whitted-style ray tracer with point lights, shadows and Phong highlights."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Sequence

from .geometry import INF, Cube, Ray, Sphere, find_intersection, reflect, refract, to_color
from .ppm import write_ppm
from .vector import Vector3

TRACE_DEPTH = 10
DEFAULT_SIZE = 512
DEFAULT_SAMPLES = 1
EXPOSURE = 2.0
ETA = 1.5
EPSILON = 1e-8
SHININESS = 64
WALL_OFFSET = 1003
DEFAULT_OUTPUT = "cornell_box2.ppm"

AMBIENT = Vector3(0.001, 0.001, 0.001)
_ZERO = Vector3(0.0, 0.0, 0.0)
_WHITE = Vector3(1.0, 1.0, 1.0)

Pixel = tuple[int, int, int]


@dataclass(frozen=True)
class Light:
    """A coloured point light."""

    position: Vector3
    color: Vector3


def default_scene() -> tuple[list[Sphere], list[Cube], list[Light]]:
    """The box walls, three balls, a glass cube and two coloured lights."""
    spheres = [
        Sphere(Vector3(0, -WALL_OFFSET, 0), INF, Vector3(1, 0, 1)),
        Sphere(Vector3(0, WALL_OFFSET, 0), INF, _WHITE),
        Sphere(Vector3(WALL_OFFSET, 0, 0), INF, Vector3(0, 1, 0), reflect=1),
        Sphere(Vector3(-WALL_OFFSET, 0, 0), INF, Vector3(1, 0, 0)),
        Sphere(Vector3(0, 0, -WALL_OFFSET), INF, _WHITE),
        Sphere(Vector3(0, 0, WALL_OFFSET + 3), INF, _WHITE),
        Sphere(Vector3(0, -0.2, 4), 0.2, Vector3(0.1, 0.2, 0.3), reflect=1),
        Sphere(Vector3(2, -1, 4), 1, _WHITE, reflect=0.1),
        Sphere(Vector3(0, -0.5, 3), 1, Vector3(1, 0, 1), reflect=0.4, refract=1),
    ]
    cubes = [
        Cube(Vector3(1, -1, 3), 1.0, Vector3(0.8, 0.2, 0.2), angle_y=math.pi / 4, refract=0.5),
    ]
    lights = [
        Light(Vector3(-2, 2, 3.5), Vector3(0.9, 0.5, 0.1)),
        Light(Vector3(1, -2, 4), Vector3(0.2, 0.5, 0.7)),
    ]
    return spheres, cubes, lights


def primary_ray(x: float, y: float) -> Ray:
    """A camera ray from the origin through screen point (x, y)."""
    return Ray(Vector3(0.0, 0.0, 0.0), Vector3(x, -y, 1.0).normalized())


class WhittedTracer:
    """Deterministic tracer combining reflection, refraction and direct lighting."""

    def __init__(
        self,
        spheres: Sequence[Sphere] | None = None,
        cubes: Sequence[Cube] | None = None,
        lights: Sequence[Light] | None = None,
        max_depth: int = TRACE_DEPTH,
    ) -> None:
        default_spheres, default_cubes, default_lights = default_scene()
        self.spheres = list(default_spheres if spheres is None else spheres)
        self.cubes = list(default_cubes if cubes is None else cubes)
        self.lights = list(default_lights if lights is None else lights)
        self.max_depth = max_depth

    def in_shadow(self, point: Vector3, light: Light) -> bool:
        """Whether an object lies between ``point`` and ``light``.

        The first object of each list is never counted as an occluder.
        """
        to_light = light.position - point
        distance = to_light.length()
        shadow_ray = Ray(point, to_light.normalized())
        hit = find_intersection(self.spheres, self.cubes, shadow_ray, distance)
        return hit is not None and hit.index != 0

    def trace(self, ray: Ray, depth: int = 1) -> Vector3:
        """Colour seen along ``ray``."""
        if depth > self.max_depth:
            return _ZERO
        hit = find_intersection(self.spheres, self.cubes, ray)
        if hit is None:
            return _ZERO

        shape = hit.shape
        point = ray.point_at(hit.distance)
        view_dir = -ray.direction
        normal = shape.normal_at(point)
        point = point + normal.scale(-EPSILON)

        total = _ZERO
        if shape.refract > 0:
            bent = Ray(point, refract(ray.direction, normal, ETA))
            total = total + self.trace(bent, depth + 1).scale(shape.refract)
        if shape.reflect > 0:
            bounced = Ray(point, reflect(ray.direction, normal))
            total = total + self.trace(bounced, depth + 1).scale(shape.reflect)

        for light in self.lights:
            if self.in_shadow(point, light):
                continue
            light_dir = (light.position - point).normalized()
            total = total + light.color.scale(max(0.0, normal.dot(light_dir)))
            reflect_dir = reflect(light_dir, normal)
            highlight = max(0.0, reflect_dir.dot(view_dir)) ** SHININESS
            total = total + light.color.scale(highlight)

        return (total + AMBIENT).hadamard(shape.color)

    def render(
        self,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
        samples: int = DEFAULT_SAMPLES,
    ) -> list[list[Pixel]]:
        """Rows of gamma-corrected (r, g, b) pixels."""
        if width < 1 or height < 1:
            raise ValueError("image dimensions must be positive")
        if samples < 1:
            raise ValueError("samples must be positive")
        factor = EXPOSURE / samples
        image: list[list[Pixel]] = []
        for row in range(height):
            y = row / (height / 2) - 1
            pixels: list[Pixel] = []
            for column in range(width):
                x = column / (width / 2) - 1
                total = _ZERO
                for _ in range(samples):
                    total = total + self.trace(primary_ray(x, y), 1)
                r, g, b = (to_color(channel * factor) for channel in total)
                pixels.append((r, g, b))
            image.append(pixels)
        return image


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the lit Cornell box to a PPM file.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_SIZE)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_SIZE)
    parser.add_argument("--samples", type=_positive_int, default=DEFAULT_SAMPLES)
    args = parser.parse_args(argv)

    image = WhittedTracer().render(args.width, args.height, args.samples)
    write_ppm(args.output, image)
    return 0
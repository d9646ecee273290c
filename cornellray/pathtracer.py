"""Monte Carlo path tracer for a Cornell box lit by an emitting sphere."""

from __future__ import annotations

import argparse
import math
import random
from typing import Sequence

from .geometry import INF, Cube, Ray, Sphere, find_intersection, reflect, refract, to_color
from .ppm import write_ppm
from .vector import Vector3

TRACE_DEPTH = 10
DEFAULT_SIZE = 512
DEFAULT_SAMPLES = 1000
EXPOSURE = 2.0
ETA = 1.5
WALL_OFFSET = 1003
DEFAULT_OUTPUT = "cornell_box.ppm"

_ZERO = Vector3(0.0, 0.0, 0.0)
_WHITE = Vector3(1.0, 1.0, 1.0)

Pixel = tuple[int, int, int]


def default_scene() -> tuple[list[Sphere], list[Cube]]:
    """The box walls, a glowing light sphere, three balls and a glass cube."""
    spheres = [
        Sphere(Vector3(0, 3, 4), 1, Vector3(0.9, 0.5, 0.1), emitting=True),
        Sphere(Vector3(0, -WALL_OFFSET, 0), INF, Vector3(1, 0, 1)),
        Sphere(Vector3(0, WALL_OFFSET, 0), INF, _WHITE),
        Sphere(Vector3(WALL_OFFSET, 0, 0), INF, Vector3(0, 1, 0)),
        Sphere(Vector3(-WALL_OFFSET, 0, 0), INF, Vector3(1, 0, 0)),
        Sphere(Vector3(0, 0, -WALL_OFFSET), INF, _WHITE),
        Sphere(Vector3(0, 0, WALL_OFFSET + 3), INF, _WHITE),
        Sphere(Vector3(0, -0.2, 4), 0.2, _WHITE),
        Sphere(Vector3(2, -3, 4), 1, Vector3(1, 0.9, 1), reflect=0.4),
        Sphere(Vector3(2, -1, 4), 1, Vector3(1, 0.2, 0.4), reflect=0.4),
    ]
    cubes = [
        Cube(Vector3(1, -1, 3), 1.0, Vector3(0.8, 0.2, 0.2), angle_y=math.pi / 4, refract=0.5),
    ]
    return spheres, cubes


class PathTracer:
    """Traces jittered rays, bouncing diffusely until a light or the depth limit."""

    def __init__(
        self,
        spheres: Sequence[Sphere] | None = None,
        cubes: Sequence[Cube] | None = None,
        rng: random.Random | None = None,
        max_depth: int = TRACE_DEPTH,
    ) -> None:
        default_spheres, default_cubes = default_scene()
        self.spheres = list(default_spheres if spheres is None else spheres)
        self.cubes = list(default_cubes if cubes is None else cubes)
        self.rng = rng if rng is not None else random.Random()
        self.max_depth = max_depth

    def primary_ray(self, x: float, y: float) -> Ray:
        """A camera ray through screen point (x, y) with a little jitter."""
        target = Vector3(x + self.rng.random() * 0.01, -y + self.rng.random() * 0.01, 1.0)
        return Ray(Vector3(0.01, 0.01, 0.01), target.normalized())

    def trace(self, ray: Ray, depth: int = 1) -> Vector3:
        """Radiance carried back along ``ray``."""
        hit = find_intersection(self.spheres, self.cubes, ray, INF, square_radius=False)
        if depth > self.max_depth or hit is None:
            return _ZERO

        shape = hit.shape
        if shape.emitting:
            return shape.color

        point = ray.point_at(hit.distance)
        normal = shape.normal_at(point)

        if shape.reflect > 0:
            bounced = Ray(point, reflect(ray.direction, normal))
            return self.trace(bounced, depth + 1).scale(shape.reflect)

        if shape.refract:
            bent = Ray(point, refract(ray.direction, normal, ETA))
            return self.trace(bent, depth + 1).scale(shape.refract)

        angle = 2 * math.pi * self.rng.random()
        spread = math.sqrt(self.rng.random())
        up = (-ray.direction).cross(normal).normalized()
        tangent = up.cross(normal)
        direction = (
            tangent.scale(math.cos(angle) * spread)
            + up.scale(math.sin(angle) * spread)
            + normal.scale(math.sqrt(1 - spread * spread))
        ).normalized()
        return self.trace(Ray(point, direction), depth + 1).hadamard(shape.color)

    def render(
        self,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
        samples: int = DEFAULT_SAMPLES,
    ) -> list[list[Pixel]]:
        """Rows of gamma-corrected (r, g, b) pixels, averaged over ``samples`` rays."""
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
                    total = total + self.trace(self.primary_ray(x, y), 1)
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
    parser = argparse.ArgumentParser(description="Render the path-traced Cornell box to a PPM file.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_SIZE)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_SIZE)
    parser.add_argument("--samples", type=_positive_int, default=DEFAULT_SAMPLES)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    tracer = PathTracer(rng=random.Random(args.seed))
    image = tracer.render(args.width, args.height, args.samples)
    write_ppm(args.output, image)
    return 0
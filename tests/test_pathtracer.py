import math
import random

import pytest

from cornellray.geometry import Ray, Sphere
from cornellray.pathtracer import PathTracer, default_scene, main
from cornellray.vector import Vector3

ORIGIN = Vector3(0.0, 0.0, 0.0)
FORWARD = Vector3(0.0, 0.0, 1.0)


def test_default_scene_contents():
    spheres, cubes = default_scene()
    assert len(spheres) == 10
    assert len(cubes) == 1
    light = spheres[0]
    assert light.emitting
    assert light.color == Vector3(0.9, 0.5, 0.1)
    assert sum(sphere.emitting for sphere in spheres) == 1
    assert cubes[0].refract == 0.5
    assert cubes[0].angle_y == pytest.approx(math.pi / 4)


def test_primary_ray_starts_near_camera_and_is_unit():
    tracer = PathTracer(rng=random.Random(7))
    ray = tracer.primary_ray(0.3, -0.4)
    assert ray.origin == Vector3(0.01, 0.01, 0.01)
    assert ray.direction.length() == pytest.approx(1.0)
    assert ray.direction.z > 0


def test_ray_into_light_returns_light_color():
    tracer = PathTracer(rng=random.Random(1))
    ray = Ray(ORIGIN, Vector3(0.0, 3.0, 4.0).normalized())
    assert tracer.trace(ray, 1) == Vector3(0.9, 0.5, 0.1)


def test_depth_beyond_limit_is_black():
    tracer = PathTracer(rng=random.Random(1))
    ray = Ray(ORIGIN, Vector3(0.0, 3.0, 4.0).normalized())
    assert tracer.trace(ray, tracer.max_depth + 1) == Vector3(0.0, 0.0, 0.0)


def test_ray_missing_everything_is_black():
    tracer = PathTracer(rng=random.Random(1))
    ray = Ray(Vector3(0.0, 0.0, 5000.0), FORWARD)
    assert tracer.trace(ray, 1) == Vector3(0.0, 0.0, 0.0)


def test_mirror_scales_reflected_light():
    emitter = Sphere(Vector3(0, 0, -5), 1, Vector3(0.2, 0.4, 0.6), emitting=True)
    mirror = Sphere(Vector3(0, 0, 5), 1, Vector3(1, 1, 1), reflect=0.5)
    tracer = PathTracer([mirror, emitter], [], rng=random.Random(0))
    result = tracer.trace(Ray(ORIGIN, FORWARD), 1)
    expected = emitter.color.scale(mirror.reflect)
    assert tuple(result) == pytest.approx(tuple(expected))


def test_glass_scales_transmitted_light():
    glass = Sphere(Vector3(0, 0, 5), 1, Vector3(1, 1, 1), refract=0.5)
    emitter = Sphere(Vector3(0, 0, 10), 1, Vector3(0.2, 0.4, 0.6), emitting=True)
    tracer = PathTracer([glass, emitter], [], rng=random.Random(0))
    result = tracer.trace(Ray(ORIGIN, FORWARD), 1)
    expected = emitter.color.scale(glass.refract)
    assert tuple(result) == pytest.approx(tuple(expected))


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_radiance_stays_within_unit_range(seed):
    tracer = PathTracer(rng=random.Random(seed))
    for x, y in [(0.0, 0.0), (-0.5, 0.5), (0.5, -0.5)]:
        result = tracer.trace(tracer.primary_ray(x, y), 1)
        for channel in result:
            assert 0.0 <= channel <= 1.0


def test_same_seed_gives_same_radiance():
    ray = Ray(Vector3(0.01, 0.01, 0.01), FORWARD)
    first = PathTracer(rng=random.Random(5)).trace(ray, 1)
    second = PathTracer(rng=random.Random(5)).trace(ray, 1)
    assert first == second


def test_render_shape_and_range():
    image = PathTracer(rng=random.Random(1)).render(4, 2, 2)
    assert len(image) == 2
    assert all(len(row) == 4 for row in image)
    for row in image:
        for pixel in row:
            assert len(pixel) == 3
            assert all(0 <= channel <= 255 for channel in pixel)


def test_render_is_deterministic_for_seed():
    first = PathTracer(rng=random.Random(9)).render(3, 3, 1)
    second = PathTracer(rng=random.Random(9)).render(3, 3, 1)
    assert first == second


@pytest.mark.parametrize("width, height, samples", [(0, 2, 1), (2, 0, 1), (2, 2, 0)])
def test_render_rejects_non_positive_arguments(width, height, samples):
    with pytest.raises(ValueError):
        PathTracer(rng=random.Random(0)).render(width, height, samples)


def test_main_writes_ppm(tmp_path):
    path = tmp_path / "box.ppm"
    status = main(["--width", "2", "--height", "2", "--samples", "1", "--seed", "3", "--output", str(path)])
    assert status == 0
    text = path.read_text()
    assert text.startswith("P3\n2 2\n255\n")
    assert len(text.splitlines()) == 5
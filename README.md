# cornellray

Two small ray tracers in plain Python that need nothing outside the
standard library. Both render a Cornell box scene and save it as a
plain-text PPM (`P3`) image. The box is built from very large spheres
that serve as walls. Inside it are a few spheres and one cube, rotated
about the vertical axis.

- **Path tracer** (`cornellray.pathtracer`): Monte Carlo rendering. An
  emitting sphere is the light source. Surfaces are diffuse, mirror or
  glass. Camera rays are jittered slightly, and each pixel averages many
  samples.
- **Whitted tracer** (`cornellray.whitted`): deterministic rendering.
  It uses two coloured point lights, shadow rays, diffuse shading and
  Phong highlights (exponent 64). Reflection and refraction are traced
  recursively.

In both tracers rays stop after a depth of 10. Pixel values are
multiplied by an exposure of 2, clamped to [0, 1] and gamma-corrected
with exponent 0.45.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Render with the path tracer:

```
cornellray-path
```

Render with the Whitted tracer:

```
cornellray-whitted
```

Both commands take these options:

| Option | Meaning | `cornellray-path` default | `cornellray-whitted` default |
| --- | --- | --- | --- |
| `-o`, `--output` | output file | `cornell_box.ppm` | `cornell_box2.ppm` |
| `--width` | image width in pixels | 512 | 512 |
| `--height` | image height in pixels | 512 | 512 |
| `--samples` | rays per pixel | 1000 | 1 |

`cornellray-path` also takes `--seed`, an integer that seeds its random
number generator so that renders can be repeated.

Sizes and sample counts must be positive integers. At the default
settings the path tracer is very slow, so begin with something like:

```
cornellray-path --width 64 --height 64 --samples 16 --seed 1
```

## Library use

```python
from cornellray.vector import Vector3
from cornellray.geometry import Ray, to_color
from cornellray.ppm import write_ppm
from cornellray.whitted import WhittedTracer

x = Vector3(1.0, 0.0, 0.0)
y = Vector3(0.0, 1.0, 0.0)
z = x.cross(y)                  # Vector3(0.0, 0.0, 1.0)
ray = Ray(Vector3(0.0, 0.0, 0.0), z)
print(ray.point_at(2.0))        # Vector3(x=0.0, y=0.0, z=2.0)
print(to_color(1.0))            # 255

image = WhittedTracer().render(64, 64, 1)
write_ppm("box.ppm", image)
```

### Modules

- **`cornellray.vector`**
  - `Vector3` is a frozen dataclass. It supports `+`, `-`, unary `-` and
    iteration.
  - Its methods are `scale`, `hadamard`, `dot`, `cross`, `length` and
    `normalized`. Normalising a zero vector gives NaN components.
  - `rotate_y(vec, angle, center)` rotates about a vertical axis through
    `center`.
  - `inverse_rotate_y(vec, angle)` rotates by `-angle` about the world
    Y axis.
- **`cornellray.geometry`**
  - `Ray` has `point_at`.
  - `Sphere` and `Cube` have `intersect` and `normal_at`.
  - `Hit` holds `shape`, `index`, `distance` and `is_cube`.
  - `find_intersection(spheres, cubes, ray, limit, square_radius)`
    returns the nearest `Hit` or `None`.
  - `reflect` and `refract` compute new ray directions. `refract`
    returns the zero vector on total internal reflection.
  - `to_color` turns a linear channel value into a byte.
  - `INF` (1e6) is the radius used for the wall spheres.
- **`cornellray.ppm`**
  - `format_ppm(image)` turns rows of `(r, g, b)` triples into P3 text.
    It raises `ValueError` for ragged rows, pixels without three
    channels, or values outside 0..255.
  - `write_ppm(path, image)` writes that text to a file.
- **`cornellray.pathtracer`**
  - `PathTracer(spheres, cubes, rng, max_depth)` has `primary_ray`,
    `trace` and `render`.
  - `default_scene()` returns `(spheres, cubes)`.
  - `main(argv)` is the command-line entry.
- **`cornellray.whitted`**
  - `WhittedTracer(spheres, cubes, lights, max_depth)` has `in_shadow`,
    `trace` and `render`.
  - `Light` holds `position` and `color`.
  - `primary_ray(x, y)` gives a camera ray from the origin.
  - `default_scene()` returns `(spheres, cubes, lights)`.
  - `main(argv)` is the command-line entry.

`render(width, height, samples)` on either tracer returns a list of rows
of `(r, g, b)` tuples. It raises `ValueError` for sizes or sample counts
below 1. Any scene argument left as `None` is taken from
`default_scene()`.

### Behaviour to be aware of

The two tracers test spheres differently:

- The path tracer subtracts each sphere's radius itself from the
  intersection term, not its square.
- The Whitted tracer squares every radius except `INF`.

In `WhittedTracer.in_shadow`, the first sphere and the first cube of the
scene are never counted as occluders.

## What it does not do

- Rendering runs on a single thread and is slow.
- The only output format is plain-text PPM. The package has no image
  viewer and no converter to other formats.
- The commands always render the built-in default scenes. To render a
  different scene, build the tracer objects yourself in Python.
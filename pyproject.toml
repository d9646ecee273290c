[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cornellray"
version = "0.1.0"
description = "Small pure-Python ray tracers that render a Cornell box scene to PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "whitted", "cornell box", "ppm", "rendering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cornellray-path = "cornellray.pathtracer:main"
cornellray-whitted = "cornellray.whitted:main"

[tool.hatch.build.targets.wheel]
packages = ["cornellray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

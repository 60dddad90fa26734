[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raysketch"
version = "0.1.0"
description = "A 3D vector type, a binary PPM image writer and a sketch of a ray-casting camera."
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "vector", "ppm", "graphics", "rendering"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raysketch = "raysketch.rt:main"

[tool.hatch.build.targets.wheel]
packages = ["raysketch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

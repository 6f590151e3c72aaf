[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noneuclid"
version = "0.1.0"
description = "Geometry, physics and rendering pieces for first-person non-Euclidean spaces joined by portals"
requires-python = ">=3.10"
keywords = ["game", "portals", "non-euclidean", "opengl", "3d", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["noneuclid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

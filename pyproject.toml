[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadgeom"
version = "0.1.0"
description = "Tolerance-aware 3D geometry primitives: points, vectors, lines, planes and segment intersection."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "cad", "vector", "plane", "intersection", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cadgeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

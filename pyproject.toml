[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgebound"
version = "0.1.0"
description = "Edge-weighted graphs from DIMACS files, graph transforms and generators, and the San Segundo linear-programming lower bound for a given coloring"
requires-python = ">=3.10"
keywords = ["graph", "coloring", "lower bound", "linear programming", "dimacs", "gml", "dot"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["edgebound"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

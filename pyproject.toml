[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "so_long"
version = "0.1.0"
description = "Loading and validating tile maps for a small puzzle game, with string, buffer and formatting helpers"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile-map", "flood-fill", "map-validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["so_long"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolve"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles with a small command-line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solver"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventsolve = "adventsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2022"
version = "0.1.0"
description = "Solutions to the 2022 Advent of Code puzzles, days 1 to 15"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2022"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoc2022"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

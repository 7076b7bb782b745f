[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "1.0.0"
description = "Solvers for the 2024 Advent of Code puzzles, days 1 to 11."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2024", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
advent2024-day01 = "advent2024.day01:main"
advent2024-day02 = "advent2024.day02:main"
advent2024-day03 = "advent2024.day03:main"
advent2024-day04 = "advent2024.day04:main"
advent2024-day05 = "advent2024.day05:main"
advent2024-day06 = "advent2024.day06:main"
advent2024-day07 = "advent2024.day07:main"
advent2024-day08 = "advent2024.day08:main"
advent2024-day09 = "advent2024.day09:main"
advent2024-day10 = "advent2024.day10:main"
advent2024-day11 = "advent2024.day11:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.hatch.build.targets.sdist]
include = ["advent2024", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true

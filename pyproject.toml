[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from 2023 and 2024"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
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
advent-2023-01 = "advent.year2023_day01:main"
advent-2023-02 = "advent.year2023_day02:main"
advent-2023-03 = "advent.year2023_day03:main"
advent-2023-04 = "advent.year2023_day04:main"
advent-2023-05 = "advent.year2023_day05:main"
advent-2023-06 = "advent.year2023_day06:main"
advent-2023-07 = "advent.year2023_day07:main"
advent-2023-08 = "advent.year2023_day08:main"
advent-2023-09 = "advent.year2023_day09:main"
advent-2023-10 = "advent.year2023_day10:main"
advent-2023-11 = "advent.year2023_day11:main"
advent-2023-12 = "advent.year2023_day12:main"
advent-2023-13 = "advent.year2023_day13:main"
advent-2023-14 = "advent.year2023_day14:main"
advent-2023-15 = "advent.year2023_day15:main"
advent-2023-16 = "advent.year2023_day16:main"
advent-2023-17 = "advent.year2023_day17:main"
advent-2023-18 = "advent.year2023_day18:main"
advent-2023-19 = "advent.year2023_day19:main"
advent-2023-20 = "advent.year2023_day20:main"
advent-2023-23 = "advent.year2023_day23:main"
advent-2024-01 = "advent.year2024_day01:main"
advent-2024-02 = "advent.year2024_day02:main"
advent-2024-03 = "advent.year2024_day03:main"
advent-2024-04 = "advent.year2024_day04:main"
advent-2024-05 = "advent.year2024_day05:main"
advent-2024-06 = "advent.year2024_day06:main"
advent-2024-07 = "advent.year2024_day07:main"
advent-2024-08 = "advent.year2024_day08:main"
advent-2024-09 = "advent.year2024_day09:main"
advent-2024-10 = "advent.year2024_day10:main"
advent-2024-11 = "advent.year2024_day11:main"
advent-2024-12 = "advent.year2024_day12:main"
advent-2024-13 = "advent.year2024_day13:main"
advent-2024-14 = "advent.year2024_day14:main"
advent-2024-15 = "advent.year2024_day15:main"
advent-2024-16 = "advent.year2024_day16:main"
advent-2024-17 = "advent.year2024_day17:main"
advent-2024-18 = "advent.year2024_day18:main"
advent-2024-19 = "advent.year2024_day19:main"
advent-2024-20 = "advent.year2024_day20:main"
advent-2024-21 = "advent.year2024_day21:main"

[tool.hatch.build.targets.wheel]
packages = ["advent"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

"""Solvers for Advent of Code puzzles: 2023 days 1-20 and 23, 2024 days 1-21."""

__version__ = "0.1.0"
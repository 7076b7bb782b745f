"""Solvers for the 2024 Advent of Code puzzles, days 1 to 11, one module per day."""

__version__ = "1.0.0"
"""Hoof it: score and rate hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence

from advent2024.day01 import _input_parser, _run

HEIGHT_MIN = 0
HEIGHT_MAX = 9
_IMPASSABLE = -1
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))

Point = tuple[int, int]
Grid = Sequence[Sequence[int]]


def parse_map(text: str) -> list[list[int]]:
    """Heights row by row; a cell that is not a digit can never be stepped on."""
    return [
        [int(cell) if cell.isdigit() else _IMPASSABLE for cell in line]
        for line in text.splitlines()
    ]


def trailheads(grid: Grid) -> list[Point]:
    """Cells at the lowest height, in row-major order."""
    return [
        (row, column)
        for row, line in enumerate(grid)
        for column, height in enumerate(line)
        if height == HEIGHT_MIN
    ]


def _uphill(grid: Grid, point: Point, height: int) -> Iterator[Point]:
    row, column = point
    for d_row, d_column in _STEPS:
        next_row, next_column = row + d_row, column + d_column
        if (
            0 <= next_row < len(grid)
            and 0 <= next_column < len(grid[next_row])
            and grid[next_row][next_column] == height + 1
        ):
            yield next_row, next_column


def _summits(grid: Grid, point: Point, height: int) -> Iterator[Point]:
    if height == HEIGHT_MAX:
        yield point
        return
    for step in _uphill(grid, point, height):
        yield from _summits(grid, step, height + 1)


def trail_score(grid: Grid, start: Point) -> int:
    """Number of distinct peaks reachable from start by climbing one step at a time."""
    return len(set(_summits(grid, start, HEIGHT_MIN)))


def trail_rating(grid: Grid, start: Point) -> int:
    """Number of distinct climbing trails from start to any peak."""
    return sum(1 for _ in _summits(grid, start, HEIGHT_MIN))


def _solve(text: str, _args: argparse.Namespace) -> Iterable[str]:
    grid = parse_map(text)
    starts = trailheads(grid)
    yield f"Trail Scores: {sum(trail_score(grid, start) for start in starts)}"
    yield f"Trail Ratings: {sum(trail_rating(grid, start) for start in starts)}"


def main(argv: Sequence[str] | None = None) -> int:
    return _run(argv, _input_parser("Score hiking trails."), _solve)
"""Guard patrol: cells the guard covers and obstructions that trap it in a loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from enum import Enum

OBSTRUCTION = "#"
GUARD = "^"

Point = tuple[int, int]


class Direction(Enum):
    """Heading of the guard, valued by its (row, column) step."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    def turn_right(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        headings = list(type(self))
        return headings[(headings.index(self) + 1) % len(headings)]


def parse_grid(text: str) -> list[str]:
    """The map as a list of equally long rows."""
    grid = text.splitlines()
    if not grid or not grid[0]:
        raise ValueError("the map is empty")
    if any(len(line) != len(grid[0]) for line in grid):
        raise ValueError("all rows of the map must have the same length")
    return grid


def find_start(grid: Sequence[str]) -> Point:
    """Position of the guard, scanning row by row."""
    for row, line in enumerate(grid):
        column = line.find(GUARD)
        if column >= 0:
            return row, column
    raise ValueError("start location not found")


def _patrol(grid: Sequence[str], start: Point, extra: Point | None = None) -> set[Point] | None:
    """Cells visited until the guard leaves the map, or None if it never does.

    The guard is taken to be looping once it has made more moves than the
    map has cells, or when it is boxed in on all four sides.
    """
    rows, columns = len(grid), len(grid[0])
    limit = rows * columns
    row, column = start
    direction = Direction.UP
    visited = {start}
    moves = 0
    turns = 0
    while True:
        d_row, d_column = direction.value
        next_row, next_column = row + d_row, column + d_column
        if not (0 <= next_row < rows and 0 <= next_column < columns):
            return visited
        if grid[next_row][next_column] == OBSTRUCTION or (next_row, next_column) == extra:
            direction = direction.turn_right()
            turns += 1
            if turns == len(Direction):
                return None
            continue
        turns = 0
        moves += 1
        if moves > limit:
            return None
        row, column = next_row, next_column
        visited.add((row, column))


def visited_positions(grid: Sequence[str]) -> set[Point]:
    """Distinct cells the guard stands on before walking off the map."""
    visited = _patrol(grid, find_start(grid))
    if visited is None:
        raise ValueError("the guard never leaves the map")
    return visited


def loop_obstructions(grid: Sequence[str]) -> list[Point]:
    """Cells where one new obstruction makes the guard loop, in row-major order."""
    start = find_start(grid)
    path = _patrol(grid, start)
    if path is None:
        candidates = {
            (row, column)
            for row, line in enumerate(grid)
            for column in range(len(line))
        }
    else:
        # An obstruction off the original path never changes the walk.
        candidates = path
    return sorted(
        cell
        for cell in candidates
        if grid[cell[0]][cell[1]] not in (OBSTRUCTION, GUARD)
        and _patrol(grid, start, cell) is None
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Follow the guard's patrol.")
    parser.add_argument("input", nargs="?", default="input.txt")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Cannot open file.", file=sys.stderr)
        return 1

    grid = parse_grid(text)
    print(f"Result: {len(visited_positions(grid))}")
    print(f"Result: {len(loop_obstructions(grid))}")
    return 0
"""Word search: count XMAS in every direction and MAS crosses."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from advent2024.day01 import _input_parser, _run

_DIRECTIONS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)
_TAIL = "MAS"
_ENDS = {"M", "S"}


def parse_grid(text: str) -> list[str]:
    """The grid as a list of rows."""
    return text.splitlines()


def _letter(grid: Sequence[str], row: int, column: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return None


def _cells(grid: Sequence[str], wanted: str) -> Iterable[tuple[int, int]]:
    return (
        (row, column)
        for row, line in enumerate(grid)
        for column, letter in enumerate(line)
        if letter == wanted
    )


def _spells_tail(grid: Sequence[str], row: int, column: int, d_row: int, d_column: int) -> bool:
    return all(
        _letter(grid, row + d_row * step, column + d_column * step) == letter
        for step, letter in enumerate(_TAIL, start=1)
    )


def count_xmas(grid: Sequence[str]) -> int:
    """Occurrences of XMAS horizontally, vertically, diagonally and reversed."""
    return sum(
        _spells_tail(grid, row, column, d_row, d_column)
        for row, column in _cells(grid, "X")
        for d_row, d_column in _DIRECTIONS
    )


def _is_cross(grid: Sequence[str], row: int, column: int) -> bool:
    diagonal = {_letter(grid, row - 1, column - 1), _letter(grid, row + 1, column + 1)}
    anti_diagonal = {_letter(grid, row - 1, column + 1), _letter(grid, row + 1, column - 1)}
    return diagonal == _ENDS and anti_diagonal == _ENDS


def count_x_mas(grid: Sequence[str]) -> int:
    """Number of A cells that sit at the centre of two crossing MAS words."""
    return sum(_is_cross(grid, row, column) for row, column in _cells(grid, "A"))


def _solve(text: str, _args: argparse.Namespace) -> Iterable[int]:
    grid = parse_grid(text)
    yield count_xmas(grid)
    yield count_x_mas(grid)


def main(argv: Sequence[str] | None = None) -> int:
    return _run(argv, _input_parser("Count XMAS in a word search."), _solve)
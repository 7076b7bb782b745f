"""Resonant collinearity: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from itertools import combinations

EMPTY = "."

Point = tuple[int, int]


def parse_antennas(text: str) -> tuple[dict[str, list[Point]], int, int]:
    """Antenna positions grouped by frequency, with the map's rows and columns."""
    lines = text.splitlines()
    antennas: defaultdict[str, list[Point]] = defaultdict(list)
    for row, line in enumerate(lines):
        for column, cell in enumerate(line):
            if cell != EMPTY:
                antennas[cell].append((row, column))
    columns = max((len(line) for line in lines), default=0)
    return dict(antennas), len(lines), columns


def _inside(point: Point, rows: int, columns: int) -> bool:
    return 0 <= point[0] < rows and 0 <= point[1] < columns


def collinear_points(start: Point, end: Point) -> list[Point]:
    """The two points in line with both antennas, each twice as far from one as from the other."""
    d_row, d_column = end[0] - start[0], end[1] - start[1]
    return [
        (end[0] + d_row, end[1] + d_column),
        (start[0] - d_row, start[1] - d_column),
    ]


def harmonic_points(start: Point, end: Point, rows: int, columns: int) -> list[Point]:
    """Every in-bounds grid point on the line through both antennas at whole steps."""
    if not (_inside(start, rows, columns) and _inside(end, rows, columns)):
        raise ValueError("antennas must lie on the map")
    if start == end:
        raise ValueError("antennas must be at different positions")
    d_row, d_column = end[0] - start[0], end[1] - start[1]
    points: list[Point] = []
    for (row, column), (step_row, step_column) in (
        (end, (d_row, d_column)),
        (start, (-d_row, -d_column)),
    ):
        while _inside((row, column), rows, columns):
            points.append((row, column))
            row += step_row
            column += step_column
    return points


def _antinodes(
    start: Point, end: Point, rows: int, columns: int, harmonics: bool
) -> Iterable[Point]:
    if harmonics:
        return harmonic_points(start, end, rows, columns)
    return (point for point in collinear_points(start, end) if _inside(point, rows, columns))


def count_antinodes(
    antennas: Mapping[str, Sequence[Point]], rows: int, columns: int, harmonics: bool
) -> int:
    """Distinct in-bounds cells holding an antinode of some pair of antennas."""
    cells = {
        point
        for points in antennas.values()
        for start, end in combinations(points, 2)
        for point in _antinodes(start, end, rows, columns, harmonics)
    }
    return len(cells)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Count antinode locations.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument(
        "--no-harmonics",
        action="store_true",
        help="only count the two antinodes of each pair",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Cannot open file.", file=sys.stderr)
        return 1

    antennas, rows, columns = parse_antennas(text)
    count = count_antinodes(antennas, rows, columns, harmonics=not args.no_harmonics)
    print(f"Result:{count}")
    return 0
"""Historian location lists: pairwise distance and similarity score."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

_Solver = Callable[[str, argparse.Namespace], Iterable[object]]


def _input_parser(description: str) -> argparse.ArgumentParser:
    """An argument parser taking the puzzle input file, input.txt by default."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    return parser


def _run(argv: Sequence[str] | None, parser: argparse.ArgumentParser, solve: _Solver) -> int:
    """Read the input named on the command line and print each answer solve yields."""
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError:
        print("Cannot open file.", file=sys.stderr)
        return 1
    for answer in solve(text, args):
        print(answer)
    return 0


def _leading_integers(text: str) -> list[int]:
    """The whitespace-separated integers at the start of text, up to the first non-integer."""
    numbers: list[int] = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split whitespace-separated number pairs into a left and a right list.

    Reading stops at the first token that is not an integer; a trailing
    number without a partner is dropped.
    """
    numbers = _leading_integers(text)
    paired = len(numbers) - len(numbers) % 2
    return numbers[0:paired:2], numbers[1:paired:2]


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists once both are sorted."""
    if len(left) != len(right):
        raise ValueError("both lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of each left number times how often it appears on the right."""
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in left)


def _solve(text: str, _args: argparse.Namespace) -> Iterable[str]:
    left, right = parse_lists(text)
    yield f"part 1: {total_distance(left, right)}"
    yield f"part 2: {similarity_score(left, right)}"


def main(argv: Sequence[str] | None = None) -> int:
    return _run(argv, _input_parser("Compare two location lists."), _solve)
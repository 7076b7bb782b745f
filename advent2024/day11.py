"""Plutonian pebbles: count stones after a number of blinks."""

from __future__ import annotations

import argparse
import functools
from collections.abc import Iterable, Sequence

from advent2024.day01 import _input_parser, _leading_integers, _run

DEFAULT_BLINKS = 75
_MULTIPLIER = 2024


@functools.cache
def _count(value: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    if value == 0:
        return _count(1, blinks - 1)
    digits = str(value)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _count(int(digits[:half]), blinks - 1) + _count(int(digits[half:]), blinks - 1)
    return _count(value * _MULTIPLIER, blinks - 1)


def count_stones(value: int, blinks: int) -> int:
    """Number of stones one stone engraved with value becomes after blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    if value < 0:
        raise ValueError("stone values must not be negative")
    return _count(value, blinks)


def total_stones(numbers: Iterable[int], blinks: int) -> int:
    """Number of stones a row of stones becomes after blinks."""
    return sum(count_stones(number, blinks) for number in numbers)


def _solve(text: str, args: argparse.Namespace) -> Iterable[str]:
    first_line = text.partition("\n")[0]
    yield f"Num stones: {total_stones(_leading_integers(first_line), args.blinks)}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = _input_parser("Count stones after blinking.")
    parser.add_argument("--blinks", type=int, default=DEFAULT_BLINKS)
    return _run(argv, parser, _solve)
"""Reactor reports: which level sequences are safe."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence

from advent2024.day01 import _input_parser, _run

_NUMBER = re.compile(r"-?[0-9]+")
_MAX_STEP = 3


def parse_reports(text: str) -> list[list[int]]:
    """One report per line, each a list of the integers on that line."""
    return [[int(token) for token in _NUMBER.findall(line)] for line in text.splitlines()]


def is_safe(levels: Sequence[int]) -> bool:
    """Levels strictly increase or decrease, by 1 to 3 at each step."""
    direction = 0
    for current, following in zip(levels, levels[1:]):
        step = following - current
        if step == 0 or abs(step) > _MAX_STEP:
            return False
        sign = 1 if step > 0 else -1
        if direction and sign != direction:
            return False
        direction = sign
    return True


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """Safe once some single level has been removed."""
    levels = list(levels)
    return any(
        is_safe(levels[:index] + levels[index + 1:]) for index in range(len(levels))
    )


def _solve(text: str, _args: argparse.Namespace) -> Iterable[int]:
    reports = parse_reports(text)
    yield sum(is_safe(report) for report in reports)
    yield sum(is_safe_with_dampener(report) for report in reports)


def main(argv: Sequence[str] | None = None) -> int:
    return _run(argv, _input_parser("Count safe reactor reports."), _solve)
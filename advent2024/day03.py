"""Corrupted memory: add up the products of well-formed mul instructions."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence

from advent2024.day01 import _input_parser, _run

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_ENABLED = re.compile(r"do\(\).*?don't\(\)")


def sum_multiplications(text: str) -> int:
    """Sum of a*b over every mul(a,b) in the text."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def sum_enabled_multiplications(text: str) -> int:
    """Sum of the products inside each span from do() to the next don't()."""
    return sum(sum_multiplications(match.group()) for match in _ENABLED.finditer(text))


def _solve(text: str, _args: argparse.Namespace) -> Iterable[int]:
    memory = "".join(text.splitlines())
    yield sum_multiplications(memory)
    yield sum_enabled_multiplications(memory)


def main(argv: Sequence[str] | None = None) -> int:
    return _run(argv, _input_parser("Scan memory for mul instructions."), _solve)
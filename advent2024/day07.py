"""Bridge repair: which calibration equations some choice of operators makes true."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import product


class Operator(Enum):
    """Operators placed between numbers, always evaluated left to right."""

    ADD = "+"
    MULTIPLY = "*"
    CONCAT = "||"

    def apply(self, left: int, right: int) -> int:
        """Combine two numbers with this operator."""
        if self is Operator.ADD:
            return left + right
        if self is Operator.MULTIPLY:
            return left * right
        return int(f"{left}{right}")


@dataclass(frozen=True)
class Equation:
    """A target value and the numbers that may be combined to reach it."""

    target: int
    numbers: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "numbers", tuple(self.numbers))
        if not self.numbers:
            raise ValueError("an equation needs at least one number")

    def evaluate(self, operators: Iterable[Operator]) -> int:
        """Value of the numbers joined by the given operators, left to right."""
        chosen = tuple(operators)
        if len(chosen) != len(self.numbers) - 1:
            raise ValueError(
                f"expected {len(self.numbers) - 1} operators, got {len(chosen)}"
            )
        result = self.numbers[0]
        for operator, number in zip(chosen, self.numbers[1:]):
            result = operator.apply(result, number)
        return result

    def is_solvable(self) -> bool:
        """True when some choice of operators makes the numbers equal the target."""
        return any(
            self.evaluate(operators) == self.target
            for operators in product(Operator, repeat=len(self.numbers) - 1)
        )

    def __str__(self) -> str:
        return " ? ".join(str(number) for number in self.numbers) + f" = {self.target}"


def _leading_integers(text: str) -> list[int]:
    numbers: list[int] = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def parse_equations(text: str) -> list[Equation]:
    """Equations from "target: n1 n2 ..." lines, ordered by target.

    Lines without a colon are skipped; a later line with the same target
    replaces an earlier one.
    """
    by_target: dict[int, list[int]] = {}
    for line in text.splitlines():
        head, colon, tail = line.partition(":")
        if not colon:
            continue
        by_target[int(head)] = _leading_integers(tail)
    return [Equation(target, tuple(by_target[target])) for target in sorted(by_target)]


def calibration_total(equations: Iterable[Equation]) -> int:
    """Sum of the targets of every solvable equation."""
    return sum(equation.target for equation in equations if equation.is_solvable())


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find solvable calibration equations.")
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

    print(f"Result: {calibration_total(parse_equations(text))}")
    return 0
"""Print queue: check page orderings against rules and repair bad ones."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Mapping, Sequence

_RULE = re.compile(r"([0-9]+)\|([0-9]+)")

Rules = Mapping[int, Sequence[int]]


def parse_input(text: str) -> tuple[dict[int, list[int]], list[list[int]]]:
    """Read the rules section and the updates section.

    Each rule "a|b" means page a must come before page b; it is stored as
    b in the list under key a.
    """
    rules: dict[int, list[int]] = {}
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            break
        match = _RULE.fullmatch(line)
        if match:
            rules.setdefault(int(match[1]), []).append(int(match[2]))
    updates = [[int(token) for token in line.split(",")] for line in lines if line]
    return rules, updates


def find_broken_rule(pages: Sequence[int], rules: Rules) -> tuple[int, int] | None:
    """The first (page, earlier_page) pair where a page that must come later is before it."""
    for index, page in enumerate(pages):
        must_follow = rules.get(page)
        if not must_follow:
            continue
        for earlier in pages[:index]:
            if earlier in must_follow:
                return page, earlier
    return None


def follows_rules(pages: Sequence[int], rules: Rules) -> bool:
    """True when no rule is broken by this ordering."""
    return find_broken_rule(pages, rules) is None


def fix_order(pages: Sequence[int], rules: Rules) -> list[int]:
    """Swap the pages of each broken rule until none is left; returns a new list."""
    fixed = list(pages)
    while (broken := find_broken_rule(fixed, rules)) is not None:
        first, second = (fixed.index(page) for page in broken)
        fixed[first], fixed[second] = fixed[second], fixed[first]
    return fixed


def middle_sum(updates: Iterable[Sequence[int]]) -> int:
    """Sum of the middle page of each update."""
    return sum(update[len(update) // 2] for update in updates)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check and fix page orderings.")
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

    rules, updates = parse_input(text)
    good = [update for update in updates if follows_rules(update, rules)]
    bad = [update for update in updates if not follows_rules(update, rules)]
    print(f"Result: {middle_sum(good)}")
    print(f"Result: {middle_sum(fix_order(update, rules) for update in bad)}")
    return 0
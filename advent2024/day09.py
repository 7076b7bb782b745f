"""Disk fragmenter: compact files on a disk and compute its checksum."""

from __future__ import annotations

import argparse
import bisect
import sys
from collections.abc import Sequence
from itertools import groupby
from typing import Optional

FREE = "."

Block = Optional[int]


def parse_disk_map(text: str) -> list[Block]:
    """Blocks described by the first line's digits: file id per block, None when free.

    Digits alternate between file lengths and free-space lengths; files are
    numbered from 0 in order, zero-length files included.
    """
    first_line = text.splitlines()[0] if text else ""
    digits = [int(char) for char in first_line if char.isdigit()]
    blocks: list[Block] = []
    for position, length in enumerate(digits):
        if position % 2 == 0:
            blocks.extend([position // 2] * length)
        else:
            blocks.extend([None] * length)
    return blocks


def render(blocks: Sequence[Block]) -> str:
    """The blocks as text, one character or file id per block."""
    return "".join(FREE if block is None else str(block) for block in blocks)


def compact_blocks(blocks: Sequence[Block]) -> list[Block]:
    """Move single blocks from the end into the leftmost free slots."""
    result = list(blocks)
    left, right = 0, len(result) - 1
    while True:
        while left < right and result[left] is not None:
            left += 1
        while left < right and result[right] is None:
            right -= 1
        if left >= right:
            return result
        result[left], result[right] = result[right], result[left]


def _runs(blocks: Sequence[Block]) -> list[tuple[Block, int, int]]:
    """Runs of equal blocks as (value, start, length)."""
    runs = []
    start = 0
    for value, group in groupby(blocks):
        length = sum(1 for _ in group)
        runs.append((value, start, length))
        start += length
    return runs


def compact_files(blocks: Sequence[Block]) -> list[Block]:
    """Move whole files, last first, into the leftmost free span before them that fits."""
    result = list(blocks)
    runs = _runs(result)
    files = [(start, length, file_id) for file_id, start, length in runs if file_id is not None]
    # Free space at the very end is never a destination.
    spans = [
        (start, length)
        for value, start, length in runs[:-1]
        if value is None
    ]
    for old_start, size, file_id in reversed(files):
        target = next(
            ((start, length) for start, length in spans if start < old_start and length >= size),
            None,
        )
        if target is None:
            continue
        new_start, span_length = target
        spans.remove(target)
        result[new_start:new_start + size] = [file_id] * size
        result[old_start:old_start + size] = [None] * size
        if span_length > size:
            bisect.insort(spans, (new_start + size, span_length - size))
        bisect.insort(spans, (old_start, size))
    return result


def checksum(blocks: Sequence[Block]) -> int:
    """Sum of position times file id over every file block."""
    return sum(position * block for position, block in enumerate(blocks) if block is not None)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compact a disk and print its checksum.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument(
        "--blocks",
        action="store_true",
        help="move single blocks instead of whole files",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="print the disk before and after compacting",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.readline()
    except OSError:
        print("Cannot open file.", file=sys.stderr)
        return 1

    blocks = parse_disk_map(text)
    if args.show:
        print(render(blocks))
    compacted = compact_blocks(blocks) if args.blocks else compact_files(blocks)
    if args.show:
        print(render(compacted))
    print(f"Checksum: {checksum(compacted)}")
    return 0
from collections import Counter

import pytest

from advent2024.day09 import (
    checksum,
    compact_blocks,
    compact_files,
    main,
    parse_disk_map,
    render,
)

SAMPLE = "2333133121414131402"


def _file_ids(blocks):
    return Counter(block for block in blocks if block is not None)


def _positions(blocks, file_id):
    return [position for position, block in enumerate(blocks) if block == file_id]


def test_parse_sample_renders_layout():
    assert render(parse_disk_map(SAMPLE)) == "00...111...2...333.44.5555.6666.777.888899"


def test_parse_uses_only_first_line_and_digits():
    assert parse_disk_map("1 2\n99\n") == parse_disk_map("12")
    assert parse_disk_map("12") == [0, None, None]


def test_parse_empty_text():
    assert parse_disk_map("") == []


def test_length_matches_digit_sum():
    assert len(parse_disk_map(SAMPLE)) == sum(int(char) for char in SAMPLE)


def test_compact_blocks_sample_checksum():
    assert checksum(compact_blocks(parse_disk_map(SAMPLE))) == 1928


def test_compact_blocks_leaves_no_gaps():
    compacted = compact_blocks(parse_disk_map(SAMPLE))
    used = sum(1 for block in compacted if block is not None)
    assert all(block is not None for block in compacted[:used])
    assert all(block is None for block in compacted[used:])


def test_compact_blocks_keeps_blocks_and_input():
    blocks = parse_disk_map(SAMPLE)
    original = list(blocks)
    compacted = compact_blocks(blocks)
    assert blocks == original
    assert _file_ids(compacted) == _file_ids(blocks)
    assert len(compacted) == len(blocks)


def test_compact_files_sample_checksum():
    assert checksum(compact_files(parse_disk_map(SAMPLE))) == 2858


def test_compact_files_keeps_files_whole():
    blocks = parse_disk_map(SAMPLE)
    compacted = compact_files(blocks)
    assert _file_ids(compacted) == _file_ids(blocks)
    for file_id in _file_ids(blocks):
        positions = _positions(compacted, file_id)
        assert positions == list(range(positions[0], positions[0] + len(positions)))


def test_compact_files_never_moves_right():
    blocks = parse_disk_map(SAMPLE)
    compacted = compact_files(blocks)
    for file_id in _file_ids(blocks):
        assert _positions(compacted, file_id)[0] <= _positions(blocks, file_id)[0]


def test_compact_files_leaves_unfitting_file():
    blocks = [0, None, 1, 1]
    assert compact_files(blocks) == blocks


def test_compact_files_ignores_trailing_free_space():
    blocks = [0, 0, None, None]
    assert compact_files(blocks) == blocks


def test_compaction_does_not_increase_checksum():
    blocks = parse_disk_map(SAMPLE)
    assert checksum(compact_blocks(blocks)) <= checksum(blocks)
    assert checksum(compact_files(blocks)) <= checksum(blocks)


@pytest.mark.parametrize("compact", [compact_blocks, compact_files])
def test_already_compact_disk_is_unchanged(compact):
    blocks = [0, 0, 1, 2, 2, None, None]
    assert compact(blocks) == blocks


def test_checksum_skips_free_blocks():
    assert checksum([None, None]) == 0
    assert checksum([0, None, None]) == checksum([0])


def test_main_prints_checksum(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Checksum: 2858\n"


def test_main_blocks_mode_with_show(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE + "\n", encoding="utf-8")
    assert main([str(path), "--blocks", "--show"]) == 0
    lines = capsys.readouterr().out.splitlines()
    blocks = parse_disk_map(SAMPLE)
    assert lines[0] == render(blocks)
    assert lines[1] == render(compact_blocks(blocks))
    assert lines[2] == "Checksum: 1928"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Cannot open file." in capsys.readouterr().err
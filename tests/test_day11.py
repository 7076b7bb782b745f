import pytest

from advent2024.day11 import count_stones, main, total_stones


@pytest.mark.parametrize(
    "numbers, blinks, expected",
    [
        ([125, 17], 6, 22),
        ([125, 17], 25, 55312),
        ([0, 1, 10, 99, 999], 1, 7),
    ],
)
def test_sample_totals(numbers, blinks, expected):
    assert total_stones(numbers, blinks) == expected


@pytest.mark.parametrize("value", [0, 7, 1234, 99999])
def test_zero_blinks_keeps_one_stone(value):
    assert count_stones(value, 0) == 1


@pytest.mark.parametrize(
    "value, blinks, successors",
    [
        (0, 5, [1]),
        (1234, 4, [12, 34]),
        (1000, 3, [10, 0]),
        (1, 3, [2024]),
        (123456789012345678, 2, [123456789, 12345678]),
    ],
    ids=["zero", "even-split", "leading-zeros", "multiply", "long-split"],
)
def test_one_blink_rules(value, blinks, successors):
    assert count_stones(value, blinks) == total_stones(successors, blinks - 1)


def test_total_is_sum_of_singles():
    numbers = [125, 17, 0, 9]
    assert total_stones(numbers, 10) == sum(count_stones(n, 10) for n in numbers)


def test_stone_count_never_decreases():
    counts = [count_stones(125, blinks) for blinks in range(15)]
    assert counts == sorted(counts)


@pytest.mark.parametrize("value, blinks", [(1, -1), (-5, 1)])
def test_negative_arguments_rejected(value, blinks):
    with pytest.raises(ValueError):
        count_stones(value, blinks)


def test_main_reads_first_line_only(tmp_path, capsys):
    path = tmp_path / "stones.txt"
    path.write_text("125 17\nignored 5\n")
    assert main([str(path), "--blinks", "25"]) == 0
    assert capsys.readouterr().out == "Num stones: 55312\n"


def test_main_default_blinks(tmp_path, capsys):
    path = tmp_path / "stones.txt"
    path.write_text("0\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"Num stones: {count_stones(0, 75)}\n"


def test_main_without_stones_file(tmp_path, capsys):
    assert main([str(tmp_path / "stones.txt"), "--blinks", "1"]) == 1
    assert "Cannot open file." in capsys.readouterr().err
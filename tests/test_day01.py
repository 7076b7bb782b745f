import pytest

from advent2024.day01 import main, parse_lists, similarity_score, total_distance

SAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
LEFT = [3, 4, 2, 1, 3, 3]
RIGHT = [4, 3, 5, 3, 9, 3]


@pytest.mark.parametrize(
    "text, expected",
    [
        (SAMPLE, (LEFT, RIGHT)),
        ("1 2\n3", ([1], [2])),
        ("1 2\n5 x\n7 8", ([1], [2])),
    ],
)
def test_parse_lists(text, expected):
    assert parse_lists(text) == expected


def test_sample_answers():
    assert total_distance(LEFT, RIGHT) == 11
    assert similarity_score(LEFT, RIGHT) == 31


def test_total_distance_is_symmetric():
    assert total_distance(LEFT, RIGHT) == total_distance(RIGHT, LEFT)


def test_total_distance_of_permutation_is_zero():
    assert total_distance(LEFT, list(reversed(LEFT))) == 0


def test_similarity_without_overlap_is_zero():
    assert similarity_score([1, 2], [3, 4]) == 0


def test_total_distance_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "lists.txt"
    path.write_text(SAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "part 1: 11\npart 2: 31\n"


def test_main_reports_unreadable_input(tmp_path, capsys):
    assert main([str(tmp_path / "lists.txt")]) == 1
    assert capsys.readouterr().err == "Cannot open file.\n"
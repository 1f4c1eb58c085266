import pytest

from drillbook.patterns import available_patterns, main, pattern_lines, render

ALL = list(range(1, 28))


def test_available_patterns_are_one_to_twenty_seven():
    assert available_patterns() == tuple(ALL)


@pytest.mark.parametrize("number", ALL)
def test_line_count_matches_rows(number):
    assert len(pattern_lines(number, 4)) == 4


@pytest.mark.parametrize("number", ALL)
def test_zero_rows_draw_nothing(number):
    assert pattern_lines(number, 0) == []
    assert render(number, 0) == ""


@pytest.mark.parametrize("number", ALL)
def test_render_matches_lines(number):
    text = render(number, 5)
    assert text.endswith("\n")
    assert text.splitlines() == pattern_lines(number, 5)


@pytest.mark.parametrize("number", [0, 28, -1])
def test_unknown_pattern_raises(number):
    with pytest.raises(ValueError):
        pattern_lines(number, 3)


def test_pattern1_square_of_stars():
    assert pattern_lines(1, 3) == ["***", "***", "***"]


def test_pattern10_matches_documented_example():
    assert [line.rstrip() for line in pattern_lines(10, 4)] == ["1", "2 1", "3 2 1", "4 3 2 1"]


def test_pattern17_matches_documented_example():
    assert [line.rstrip() for line in pattern_lines(17, 4)] == ["A", "B C", "C D E", "D E F G"]


def test_pattern26_matches_documented_example():
    assert pattern_lines(26, 5) == [
        "1234554321",
        "1234**4321",
        "123****321",
        "12******21",
        "1********1",
    ]


def test_items_carry_trailing_space():
    assert all(line.endswith(" ") for line in pattern_lines(2, 3))


def test_pattern5_counts_through_square():
    numbers = [int(item) for line in pattern_lines(5, 4) for item in line.split()]
    assert numbers == list(range(1, 17))


def test_pattern8_counts_through_triangle():
    numbers = [int(item) for line in pattern_lines(8, 4) for item in line.split()]
    assert numbers == list(range(1, 11))


def test_pattern27_counts_down_without_separators():
    lines = pattern_lines(27, 3)
    assert lines[0] == "987"
    assert "".join(lines) == "987654321"


def test_pattern13_letters_are_consecutive():
    letters = [item for line in pattern_lines(13, 3) for item in line.split()]
    assert [ord(ch) - ord("A") for ch in letters] == list(range(9))


@pytest.mark.parametrize("number", [19, 21])
def test_aligned_star_lines_have_full_width(number):
    assert all(len(line) == 6 for line in pattern_lines(number, 6))


def test_pattern19_and_pattern21_mirror_star_counts():
    right = [line.count("*") for line in pattern_lines(19, 5)]
    shrinking = [line.count("*") for line in pattern_lines(21, 5)]
    assert right == shrinking[::-1]


def test_pattern20_shrinks_by_one_star():
    counts = [len(line) for line in pattern_lines(20, 5)]
    assert counts == [5, 4, 3, 2, 1]


def test_pattern25_lines_are_palindromes():
    for line in pattern_lines(25, 6):
        digits = line.strip()
        assert digits == digits[::-1]


def test_pattern25_leading_spaces_shrink():
    leading = [len(line) - len(line.lstrip(" ")) for line in pattern_lines(25, 4)]
    assert leading == [3, 2, 1, 0]


def test_pattern26_lines_have_constant_width():
    assert {len(line) for line in pattern_lines(26, 7)} == {14}


def test_pattern18_last_row_is_alphabet_prefix():
    assert pattern_lines(18, 4)[-1].split() == ["A", "B", "C", "D"]
    assert pattern_lines(18, 4)[0].split() == ["D"]


def test_pattern14_rows_shift_by_one_letter():
    lines = [line.split() for line in pattern_lines(14, 3)]
    assert lines[1][:-1] == lines[0][1:]
    assert lines[2][:-1] == lines[1][1:]


def test_negative_rows_draw_nothing():
    assert pattern_lines(6, -3) == []


def test_main_draws_pattern(capsys):
    assert main(["1", "2"]) == 0
    assert capsys.readouterr().out == "**\n**\n"


def test_main_lists_patterns(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out.split()
    assert [int(item) for item in out] == ALL


def test_main_unknown_pattern_fails(capsys):
    assert main(["99", "3"]) == 1
    assert "unknown pattern" in capsys.readouterr().err


def test_main_requires_arguments():
    with pytest.raises(SystemExit) as info:
        main(["4"])
    assert info.value.code == 2
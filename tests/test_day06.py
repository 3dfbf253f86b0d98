import pytest

from aoc2022.day06 import find_marker, main, solve


@pytest.mark.parametrize(
    "signal, expected",
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 7),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11),
    ],
)
def test_part1(signal, expected):
    assert find_marker(signal, 4) == expected


@pytest.mark.parametrize(
    "signal, expected",
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 19),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 29),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 26),
    ],
)
def test_part2(signal, expected):
    assert find_marker(signal, 14) == expected


def test_marker_window_is_distinct():
    signal = "nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg"
    end = find_marker(signal, 4)
    assert len(set(signal[end - 4:end])) == 4


def test_no_marker_raises():
    with pytest.raises(ValueError):
        find_marker("aaaaaaa", 4)


def test_invalid_length_raises():
    with pytest.raises(ValueError):
        find_marker("abcd", 0)


def test_solve_uses_first_line():
    assert solve("mjqjpqmgbljsphdztnvjfqwrcgsmlb\nignored\n") == (7, 19)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("bvwbjplbgvbhsrlpgdmjqwftvncz\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "(5, 23)"
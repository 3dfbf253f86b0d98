import pytest

from aoc2022.day01 import elf_totals, main, solve, top_total

EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def test_answer_one():
    assert solve(EXAMPLE)[0] == 24000


def test_answer_two():
    assert solve(EXAMPLE)[1] == 45000


def test_short_data():
    assert solve("1000\n2000\n3000\n\n4000\n\n5000\n6000") == (11000, 21000)


def test_elf_totals_in_order():
    assert elf_totals(EXAMPLE) == [6000, 4000, 11000, 24000, 10000]


def test_windows_line_endings():
    assert elf_totals("1\r\n2\r\n\r\n3\r\n") == [3, 3]


def test_top_total_fewer_than_count():
    assert top_total([5, 7], 3) == 12


def test_top_total_empty():
    assert top_total([], 1) == 0


def test_invalid_item_raises():
    with pytest.raises(ValueError):
        elf_totals("100\nabc\n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "(24000, 45000)"
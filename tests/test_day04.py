import io

import pytest

from aoc2022.day04 import (
    Assignment,
    Section,
    SectionError,
    count_overlaps,
    count_subsets,
    main,
    parse_assignment,
    parse_section,
    read_assignments,
    solve,
)

EXAMPLE = "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n"


def test_section_construction():
    assert parse_section("2-4") == Section(2, 4)
    assert parse_section("11-24") == Section(11, 24)
    assert parse_section("1-5") == Section(1, 5)


@pytest.mark.parametrize("text", ["7-4", "2-b", "5", "", "-3", "a-b"])
def test_section_errors(text):
    with pytest.raises(SectionError):
        parse_section(text)


def test_section_error_is_value_error():
    with pytest.raises(ValueError):
        parse_section("7-4")


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [("2-4", "6-8", False), ("2-8", "3-7", True), ("4-6", "6-6", True)],
)
def test_if_contains(left, right, expected):
    assert parse_section(left).contains(parse_section(right)) is expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("2-4", "6-8", False),
        ("4-5", "2-3", False),
        ("1-10", "4-7", True),
        ("2-9", "1-10", True),
        ("1-7", "3-10", True),
        ("3-10", "1-7", True),
    ],
)
def test_if_overlaps(left, right, expected):
    assert parse_section(left).overlaps(parse_section(right)) is expected


def test_from_assignment_string():
    assert parse_assignment("12-24,23-36") == Assignment(Section(12, 24), Section(23, 36))


def test_assignment_missing_section():
    with pytest.raises(SectionError):
        parse_assignment("12-24")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("12-24,23-36", False),
        ("12-24,25-36", False),
        ("6-21,12-22", False),
        ("12-24,12-24", True),
        ("12-24,18-22", True),
        ("12-24,12-18", True),
        ("12-24,18-24", True),
    ],
)
def test_has_subset(line, expected):
    assert parse_assignment(line).has_subset() is expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("12-24,25-36", False),
        ("12-23,35-38", False),
        ("6-12,1-4", False),
        ("12-24,23-36", True),
        ("6-21,12-22", True),
        ("12-24,12-24", True),
        ("12-24,18-22", True),
        ("12-24,12-18", True),
        ("12-24,18-24", True),
    ],
)
def test_has_overlap(line, expected):
    assert parse_assignment(line).has_overlap() is expected


def test_case_1_subset():
    assert count_subsets(read_assignments(EXAMPLE.splitlines())) == 2


def test_case_1_overlap():
    assert count_overlaps(read_assignments(EXAMPLE.splitlines())) == 4


def test_read_assignments_from_stream():
    assignments = read_assignments(io.StringIO(EXAMPLE))
    assert len(assignments) == 6
    assert assignments[0] == Assignment(Section(2, 4), Section(6, 8))


def test_solve_example():
    assert solve(EXAMPLE) == (2, 4)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "(2, 4)"
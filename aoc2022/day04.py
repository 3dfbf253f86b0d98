"""Camp cleanup: compare pairs of section assignments."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass


class SectionError(ValueError):
    """A section range or an assignment line could not be parsed."""


@dataclass(frozen=True)
class Section:
    """An inclusive range of section IDs."""

    begin: int
    end: int

    def contains(self, other: Section) -> bool:
        """Whether this range fully contains ``other``."""
        return self.begin <= other.begin and self.end >= other.end

    def overlaps(self, other: Section) -> bool:
        """Whether the two ranges share at least one section."""
        if self.begin < other.begin:
            return self.end >= other.begin
        if self.begin > other.begin:
            return other.end >= self.begin
        return True


@dataclass(frozen=True)
class Assignment:
    """The sections given to a pair of elves."""

    first: Section
    second: Section

    def has_subset(self) -> bool:
        """Whether one section fully contains the other."""
        return self.first.contains(self.second) or self.second.contains(self.first)

    def has_overlap(self) -> bool:
        """Whether the two sections overlap at all."""
        return self.first.overlaps(self.second)


def _parse_id(text: str, source: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise SectionError(f"Invalid section id {text!r} in {source!r}")
    return int(text)


def parse_section(text: str) -> Section:
    """Parse a range such as ``12-24``.

    Raises SectionError when the text is malformed or the range is reversed.
    """
    bounds = [_parse_id(part, text) for part in text.split("-")]
    if len(bounds) < 2:
        raise SectionError(f"Missing end of range: {text}")
    begin, end = bounds[0], bounds[1]
    if begin > end:
        raise SectionError(f"Range starts after it ends: {text}")
    return Section(begin, end)


def parse_assignment(line: str) -> Assignment:
    """Parse a pair of ranges such as ``12-24,23-36``."""
    parts = line.split(",")
    if len(parts) < 2:
        raise SectionError(f"Missing section 2: {line}")
    return Assignment(parse_section(parts[0]), parse_section(parts[1]))


def read_assignments(lines: Iterable[str]) -> list[Assignment]:
    """Parse every line, for example of an open file, into an assignment."""
    return [parse_assignment(line.rstrip("\r\n")) for line in lines]


def count_subsets(assignments: Iterable[Assignment]) -> int:
    """Number of assignments where one section contains the other."""
    return sum(1 for assignment in assignments if assignment.has_subset())


def count_overlaps(assignments: Iterable[Assignment]) -> int:
    """Number of assignments whose sections overlap."""
    return sum(1 for assignment in assignments if assignment.has_overlap())


def solve(text: str) -> tuple[int, int]:
    """Return the number of contained pairs and of overlapping pairs."""
    assignments = read_assignments(text.splitlines())
    return count_subsets(assignments), count_overlaps(assignments)


def _read_input(argv: list[str] | None, description: str) -> str:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        return sys.stdin.read()
    with open(args.input, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the input file or standard input."""
    text = _read_input(argv, "Camp cleanup")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
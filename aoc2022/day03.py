"""Rucksack reorganization: find misplaced items and group badges."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def priority(item: str) -> int:
    """Priority of an item type.

    Lowercase ``a``-``z`` are 1-26 and uppercase ``A``-``Z`` are 27-52; any
    other character raises ValueError.
    """
    if len(item) == 1 and "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if len(item) == 1 and "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ValueError(f"Invalid item: {item!r}")


def compartments(rucksack: str) -> tuple[str, str]:
    """Split a rucksack into its two halves."""
    middle = len(rucksack) // 2
    return rucksack[:middle], rucksack[middle:]


def common_item(*args: str) -> str | None:
    """Return an item found in every given string, or None if there is none."""
    if not args:
        return None
    shared = set(args[0]).intersection(*args[1:])
    return min(shared) if shared else None


def rucksack_priority(rucksack: str) -> int:
    """Priority of the item found in both compartments, 0 if there is none."""
    item = common_item(*compartments(rucksack))
    return priority(item) if item is not None else 0


def badge_priority(group: Iterable[str]) -> int:
    """Priority of the item carried by every rucksack of a group, 0 if none."""
    item = common_item(*group)
    return priority(item) if item is not None else 0


def _groups(rucksacks: list[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(rucksacks), size):
        yield rucksacks[start:start + size]


def solve(text: str) -> tuple[int, int]:
    """Return the sum of misplaced item priorities and of badge priorities."""
    rucksacks = [line.strip() for line in text.strip().splitlines()]
    part1 = sum(rucksack_priority(rucksack) for rucksack in rucksacks)
    part2 = sum(badge_priority(group) for group in _groups(rucksacks, 3))
    return part1, part2


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
    text = _read_input(argv, "Rucksack reorganization")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
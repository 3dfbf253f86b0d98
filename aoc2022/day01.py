"""Calorie counting: sum each elf's food items and find the biggest carriers."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Iterator


def _blocks(lines: Iterable[str]) -> Iterator[list[str]]:
    block: list[str] = []
    for line in lines:
        if line.strip():
            block.append(line.strip())
        else:
            yield block
            block = []
    yield block


def elf_totals(text: str) -> list[int]:
    """Return the calorie total of every elf, in input order.

    Elves are separated by blank lines. A non-numeric item raises ValueError.
    """
    lines = text.replace("\r\n", "\n").splitlines()
    return [sum(int(item) for item in block) for block in _blocks(lines)]


def top_total(totals: Iterable[int], count: int) -> int:
    """Return the sum of the ``count`` largest totals."""
    return sum(heapq.nlargest(count, totals))


def solve(text: str) -> tuple[int, int]:
    """Return the largest total and the sum of the three largest totals."""
    totals = elf_totals(text)
    return top_total(totals, 1), top_total(totals, 3)


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
    text = _read_input(argv, "Calorie counting")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
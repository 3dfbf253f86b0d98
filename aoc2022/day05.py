"""Supply stacks: rearrange crates with two kinds of crane."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import takewhile


class MoveError(ValueError):
    """A move could not be parsed or cannot be carried out."""


@dataclass(frozen=True)
class Move:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (0-based)."""

    count: int
    source: int
    target: int


def _number(token: str, line: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MoveError(f"Invalid number {token!r} in {line!r}")
    return int(token)


def parse_move(line: str) -> Move:
    """Parse ``move <count> from <source> to <target>`` with 1-based stack numbers."""
    tokens = line.split(" ")
    if len(tokens) != 6:
        raise MoveError(f"Invalid move: {line!r}")
    count = _number(tokens[1], line)
    source = _number(tokens[3], line) - 1
    target = _number(tokens[5], line) - 1
    if source < 0 or target < 0:
        raise MoveError(f"Stacks are numbered from 1: {line!r}")
    return Move(count=count, source=source, target=target)


@dataclass
class Stacks:
    """Columns of crates, each listed from bottom to top."""

    columns: list[list[str]]

    def copy(self) -> Stacks:
        """An independent copy of these stacks."""
        return Stacks([list(column) for column in self.columns])

    def _column(self, index: int) -> list[str]:
        if not 0 <= index < len(self.columns):
            raise MoveError(f"No stack number {index + 1}")
        return self.columns[index]

    def _take(self, move: Move) -> tuple[list[str], list[str]]:
        source = self._column(move.source)
        target = self._column(move.target)
        if move.count > len(source):
            raise MoveError(
                f"Cannot take {move.count} crates from stack {move.source + 1} "
                f"holding {len(source)}"
            )
        cut = len(source) - move.count
        taken = source[cut:]
        del source[cut:]
        return taken, target

    def move_one_by_one(self, move: Move) -> None:
        """Move crates one at a time, reversing their order."""
        taken, target = self._take(move)
        target.extend(reversed(taken))

    def move_together(self, move: Move) -> None:
        """Move crates all at once, keeping their order."""
        taken, target = self._take(move)
        target.extend(taken)

    def tops(self) -> str:
        """The top crate of every stack; an empty stack shows a space."""
        return "".join(column[-1] if column else " " for column in self.columns)


def parse_stacks(lines: Iterable[str]) -> Stacks:
    """Parse the drawing of stacks; the last line holds the stack numbers."""
    rows = list(lines)
    if not rows:
        raise ValueError("Missing stack drawing")
    columns: list[list[str]] = [[] for _ in rows[-1].split()]
    for row in reversed(rows[:-1]):
        for index, start in enumerate(range(0, len(row), 4)):
            crate = row[start + 1:start + 2]
            if not crate or crate == " ":
                continue
            if index >= len(columns):
                raise ValueError(f"Crate outside the numbered stacks: {row!r}")
            columns[index].append(crate)
    return Stacks(columns)


def parse_input(text: str) -> tuple[Stacks, list[Move]]:
    """Split the input into the stack drawing and the list of moves."""
    lines = iter(text.splitlines())
    stacks = parse_stacks(takewhile(bool, lines))
    moves = [parse_move(line) for line in lines]
    return stacks, moves


def solve(text: str) -> tuple[str, str]:
    """Return the top crates after moving one by one and after moving together."""
    stacks, moves = parse_input(text)
    single, multiple = stacks.copy(), stacks.copy()
    for move in moves:
        single.move_one_by_one(move)
        multiple.move_together(move)
    return single.tops(), multiple.tops()


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
    text = _read_input(argv, "Supply stacks")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
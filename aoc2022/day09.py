"""Rope bridge: track where the tail of a knotted rope goes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    """A head movement, parsed from its letter."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> Position:
        """Change of (x, y) for one step."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def parse_motions(text: str) -> list[tuple[Direction, int]]:
    """Parse lines such as ``R 4`` into (direction, steps) pairs."""
    motions = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Invalid motion: {line!r}")
        letter, steps = parts
        try:
            direction = Direction(letter)
        except ValueError:
            raise ValueError(f"Unknown movement: {letter}") from None
        if not (steps.isascii() and steps.isdigit()):
            raise ValueError(f"Invalid step count: {line!r}")
        motions.append((direction, int(steps)))
    return motions


def step(position: Position, direction: Direction) -> Position:
    """Position after one step in ``direction``."""
    dx, dy = direction.delta
    return position[0] + dx, position[1] + dy


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(tail: Position, head: Position) -> Position:
    """Move a knot one step towards ``head`` unless they already touch."""
    dx = head[0] - tail[0]
    dy = head[1] - tail[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return tail
    return tail[0] + _sign(dx), tail[1] + _sign(dy)


def count_tail_positions(motions: Iterable[tuple[Direction, int]], knots: int) -> int:
    """Number of distinct positions the last of ``knots`` knots visits."""
    if knots < 1:
        raise ValueError("a rope needs at least one knot")
    rope: list[Position] = [(0, 0)] * knots
    visited = {rope[-1]}
    for direction, steps in motions:
        for _ in range(steps):
            moved = [step(rope[0], direction)]
            for knot in rope[1:]:
                moved.append(follow(knot, moved[-1]))
            rope = moved
            visited.add(rope[-1])
    return len(visited)


def solve(text: str) -> tuple[int, int]:
    """Return the tail positions for a rope of 2 knots and of 10 knots."""
    motions = parse_motions(text)
    return count_tail_positions(motions, 2), count_tail_positions(motions, 10)


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
    text = _read_input(argv, "Rope bridge")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
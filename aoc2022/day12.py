"""Hill climbing: find the fewest steps up a heightmap to the best signal."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

Point = tuple[int, int]

_LOWEST = ord("a")
_HIGHEST = ord("z")


@dataclass
class Heightmap:
    """Elevations indexed as ``levels[y][x]`` with the start and end points as (x, y)."""

    levels: list[list[int]]
    start: Point
    end: Point

    @property
    def width(self) -> int:
        """Number of columns."""
        return len(self.levels[0]) if self.levels else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.levels)

    def neighbours(self, point: Point) -> list[Point]:
        """Adjacent points reachable from ``point``: at most one level higher."""
        x, y = point
        limit = self.levels[y][x] + 1
        candidates = ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
        return [
            (nx, ny)
            for nx, ny in candidates
            if 0 <= nx < self.width and 0 <= ny < self.height and self.levels[ny][nx] <= limit
        ]

    def _distance(self, starts: Iterable[Point]) -> Optional[int]:
        queue: deque[tuple[Point, int]] = deque()
        seen: set[Point] = set()
        for point in starts:
            if point not in seen:
                seen.add(point)
                queue.append((point, 0))
        while queue:
            point, cost = queue.popleft()
            if point == self.end:
                return cost
            for nxt in self.neighbours(point):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append((nxt, cost + 1))
        return None

    def shortest_path(self, start: Point) -> Optional[int]:
        """Fewest steps from ``start`` to the end, or None if it cannot be reached."""
        return self._distance([start])

    def lowest_points(self) -> list[Point]:
        """Every point at the lowest elevation ``a``, column by column."""
        return [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if self.levels[y][x] == _LOWEST
        ]


def parse_heightmap(text: str) -> Heightmap:
    """Parse rows of letters; ``S`` is the start at ``a`` and ``E`` the end at ``z``."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("Empty heightmap")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("Heightmap rows differ in length")
    start: Point = (0, 0)
    end: Point = (width - 1, len(rows) - 1)
    levels: list[list[int]] = []
    for y, row in enumerate(rows):
        level_row = []
        for x, char in enumerate(row):
            if char == "S":
                start = (x, y)
                level_row.append(_LOWEST)
            elif char == "E":
                end = (x, y)
                level_row.append(_HIGHEST)
            elif "a" <= char <= "z":
                level_row.append(ord(char))
            else:
                raise ValueError(f"Invalid elevation {char!r} at ({x}, {y})")
        levels.append(level_row)
    return Heightmap(levels, start, end)


def solve(text: str) -> tuple[int, int]:
    """Return the steps from the start and the fewest steps from any lowest point."""
    heightmap = parse_heightmap(text)
    part1 = heightmap.shortest_path(heightmap.start)
    if part1 is None:
        raise ValueError("The end cannot be reached from the start")
    part2 = heightmap._distance(heightmap.lowest_points())
    if part2 is None:
        raise ValueError("The end cannot be reached from any lowest point")
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
    text = _read_input(argv, "Hill climbing")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
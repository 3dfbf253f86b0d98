"""Treetop tree house: count visible trees and find the best view."""

from __future__ import annotations

import argparse
import sys

_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def parse_grid(text: str) -> list[list[int]]:
    """Parse rows of digit heights; rows must all have the same length."""
    grid = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if not (line.isascii() and line.isdigit()):
            raise ValueError(f"Invalid tree row: {line!r}")
        grid.append([int(char) for char in line])
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("Tree rows differ in length")
    return grid


def tree_view(grid: list[list[int]], row: int, col: int) -> tuple[bool, int]:
    """Whether the tree is visible from outside, and its scenic score."""
    height = grid[row][col]
    visible = False
    score = 1
    for d_row, d_col in _DIRECTIONS:
        seen = 0
        blocked = False
        r, c = row + d_row, col + d_col
        while 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            seen += 1
            if grid[r][c] >= height:
                blocked = True
                break
            r += d_row
            c += d_col
        visible = visible or not blocked
        score *= seen
    return visible, score


def _views(grid: list[list[int]]):
    for row, heights in enumerate(grid):
        for col, _ in enumerate(heights):
            yield tree_view(grid, row, col)


def visible_count(grid: list[list[int]]) -> int:
    """Number of trees visible from outside the grid."""
    return sum(1 for visible, _ in _views(grid) if visible)


def best_scenic_score(grid: list[list[int]]) -> int:
    """Highest scenic score of any tree, 0 for an empty grid."""
    return max((score for _, score in _views(grid)), default=0)


def solve(text: str) -> tuple[int, int]:
    """Return the number of visible trees and the best scenic score."""
    grid = parse_grid(text)
    return visible_count(grid), best_scenic_score(grid)


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
    text = _read_input(argv, "Treetop tree house")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""No space left on device: rebuild a file tree from a terminal session."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

DISK_SIZE = 70_000_000
NEEDED_SPACE = 30_000_000
SMALL_LIMIT = 100_000


class TerminalError(ValueError):
    """The terminal session could not be replayed."""


@dataclass
class Directory:
    """A directory; entries map names to subdirectories or file sizes."""

    entries: dict[str, Union[Directory, int]] = field(default_factory=dict)

    def size(self) -> int:
        """Total size of every file below this directory."""
        return sum(
            entry.size() if isinstance(entry, Directory) else entry
            for entry in self.entries.values()
        )

    def walk(self) -> Iterator[Directory]:
        """Yield this directory and every directory below it."""
        yield self
        for entry in self.entries.values():
            if isinstance(entry, Directory):
                yield from entry.walk()


def _resolve(root: Directory, path: list[str], number: int) -> Directory:
    current = root
    for name in path:
        entry = current.entries.get(name)
        if not isinstance(entry, Directory):
            raise TerminalError(f"Line {number}: {name} is not a dir.")
        current = entry
    return current


def parse_terminal(lines: Iterable[str]) -> Directory:
    """Replay ``cd`` and ``ls`` output and return the root directory."""
    root = Directory()
    path: list[str] = []
    current = root
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        tokens = line.split(" ")
        if tokens[0] == "$":
            command = tokens[1] if len(tokens) > 1 else ""
            if command == "ls":
                continue
            if command != "cd":
                raise TerminalError(f"Line {number}: Invalid command `{command}`")
            if len(tokens) < 3:
                raise TerminalError(f"Line {number}: cd needs a directory")
            target = tokens[2]
            if target == "..":
                if path:
                    path.pop()
            elif target == "/":
                path.clear()
            else:
                path.append(target)
            current = _resolve(root, path, number)
        else:
            if len(tokens) < 2:
                raise TerminalError(f"Line {number}: invalid listing {line!r}")
            name = tokens[1]
            if tokens[0] == "dir":
                current.entries[name] = Directory()
            elif tokens[0].isascii() and tokens[0].isdigit():
                current.entries[name] = int(tokens[0])
            else:
                raise TerminalError(f"Line {number}: invalid file size {tokens[0]!r}")
    return root


def small_directories_total(root: Directory, limit: int = SMALL_LIMIT) -> int:
    """Sum of the sizes of all directories smaller than ``limit``."""
    return sum(size for size in (d.size() for d in root.walk()) if size < limit)


def smallest_to_delete(
    root: Directory, disk_size: int = DISK_SIZE, needed: int = NEEDED_SPACE
) -> int:
    """Size of the smallest directory whose removal frees enough space.

    Returns ``disk_size`` when no directory is big enough.
    """
    target = needed - (disk_size - root.size())
    return min(
        [disk_size, *(size for size in (d.size() for d in root.walk()) if size > target)]
    )


def solve(text: str) -> tuple[int, int]:
    """Return the total of small directories and the size to delete."""
    root = parse_terminal(text.splitlines())
    return small_directories_total(root), smallest_to_delete(root)


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
    text = _read_input(argv, "No space left on device")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
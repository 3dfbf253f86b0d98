"""Tuning trouble: find the first run of distinct characters in a signal."""

from __future__ import annotations

import argparse
import sys


def find_marker(signal: str, length: int) -> int:
    """Return the number of characters read when the first marker ends.

    A marker is ``length`` consecutive distinct characters. Raises ValueError
    if the signal holds none.
    """
    if length < 1:
        raise ValueError("marker length must be positive")
    for end in range(length, len(signal) + 1):
        if len(set(signal[end - length:end])) == length:
            return end
    raise ValueError(f"no marker of length {length} in signal")


def solve(text: str) -> tuple[int, int]:
    """Return the start-of-packet and start-of-message positions of the first line."""
    lines = text.splitlines()
    signal = lines[0] if lines else ""
    return find_marker(signal, 4), find_marker(signal, 14)


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
    text = _read_input(argv, "Tuning trouble")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Cathode-ray tube: run a tiny CPU and draw its sprite on a screen."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass

SCREEN_WIDTH = 40
SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)


class InstructionError(ValueError):
    """A program line could not be parsed."""


@dataclass(frozen=True)
class Instruction:
    """A CPU instruction: ``noop`` or ``addx`` with its argument."""

    opcode: str
    argument: int = 0


def parse_instruction(line: str) -> Instruction:
    """Parse ``noop`` or ``addx <n>``; anything else raises InstructionError."""
    tokens = line.strip().split(" ")
    opcode = tokens[0]
    if opcode == "noop":
        return Instruction("noop")
    if opcode == "addx":
        if len(tokens) < 2:
            raise InstructionError(f"addx needs an argument: {line!r}")
        try:
            return Instruction("addx", int(tokens[1]))
        except ValueError:
            raise InstructionError(f"Invalid addx argument: {line!r}") from None
    raise InstructionError(f"Unsupported opcode: {opcode!r}")


def register_history(instructions: Iterable[Instruction]) -> list[int]:
    """Value of the X register during each cycle, starting at cycle 1."""
    history: list[int] = []
    x = 1
    for instruction in instructions:
        if instruction.opcode == "addx":
            history.extend((x, x))
            x += instruction.argument
        else:
            history.append(x)
    return history


def signal_strength(history: list[int]) -> int:
    """Sum of cycle number times X at cycles 20, 60, ... 220 that were reached."""
    return sum(cycle * history[cycle - 1] for cycle in SIGNAL_CYCLES if cycle <= len(history))


def render_screen(history: list[int]) -> list[str]:
    """Rows of the screen: ``#`` where the sprite covers the pixel, ``.`` elsewhere."""
    pixels = "".join(
        "#" if abs(cycle % SCREEN_WIDTH - x) <= 1 else "."
        for cycle, x in enumerate(history)
    )
    return [pixels[start:start + SCREEN_WIDTH] for start in range(0, len(pixels), SCREEN_WIDTH)]


def solve(text: str) -> tuple[int, list[str]]:
    """Return the signal strength and the rendered screen."""
    history = register_history(parse_instruction(line) for line in text.splitlines())
    return signal_strength(history), render_screen(history)


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
    text = _read_input(argv, "Cathode-ray tube")
    strength, screen = solve(text)
    print(f"Part 1: {strength}")
    print("Part 2:")
    for row in screen:
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
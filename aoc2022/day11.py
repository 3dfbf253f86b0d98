"""Monkey in the middle: simulate monkeys throwing items by worry level."""

from __future__ import annotations

import argparse
import heapq
import math
import re
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

PART1_ROUNDS = 20
PART2_ROUNDS = 10_000
PART1_RELIEF = 3


@dataclass(frozen=True)
class Operation:
    """``new = old <operator> <operand>``; an operand of None means ``old``."""

    operator: str
    operand: Optional[int] = None

    def __post_init__(self) -> None:
        if self.operator not in ("+", "*"):
            raise ValueError(f"Unsupported arithmetic: {self.operator!r}")

    def apply(self, old: int) -> int:
        """The new worry level for an item at worry level ``old``."""
        operand = old if self.operand is None else self.operand
        return old + operand if self.operator == "+" else old * operand


@dataclass
class Monkey:
    """A monkey's starting items and its throwing rule."""

    items: list[int]
    operation: Operation
    test: int
    true_to: int
    false_to: int = field(default=0)

    def target(self, worry: int) -> int:
        """Index of the monkey an item at ``worry`` is thrown to."""
        return self.true_to if worry % self.test == 0 else self.false_to


class Token(NamedTuple):
    """One parsed line: its kind and the value it carries."""

    kind: str
    value: object = None


def _items(match: re.Match[str]) -> Token:
    parts = [part.strip() for part in match.group(1).split(",")]
    return Token("items", [int(part) for part in parts if part])


def _operation(match: re.Match[str]) -> Token:
    operand = match.group(2)
    return Token("operation", Operation(match.group(1), None if operand == "old" else int(operand)))


def _number(kind: str) -> Callable[[re.Match[str]], Token]:
    return lambda match: Token(kind, int(match.group(1)))


_GRAMMARS: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], Token]], ...] = (
    (re.compile(r"Starting items:(.*)$"), _items),
    (re.compile(r"Operation: new = old ([*+]) (\d+|old)"), _operation),
    (re.compile(r"Test:.*?(\d+)"), _number("test")),
    (re.compile(r"If true:.*?(\d+)"), _number("true_to")),
    (re.compile(r"If false:.*?(\d+)"), _number("false_to")),
)

_FIELDS = ("items", "operation", "test", "true_to", "false_to")


def tokenize(line: str) -> Token:
    """Classify one line; any line that matches no rule starts a new monkey."""
    for pattern, capture in _GRAMMARS:
        match = pattern.search(line)
        if match:
            return capture(match)
    return Token("monkey")


def _build(fields: dict[str, object], number: int) -> Monkey:
    missing = [name for name in _FIELDS if name not in fields]
    if missing:
        raise ValueError(f"Monkey {number} is missing {', '.join(missing)}")
    return Monkey(**fields)  # type: ignore[arg-type]


def parse_monkeys(lines: Iterable[str]) -> list[Monkey]:
    """Parse every monkey description in the notes."""
    monkeys: list[Monkey] = []
    fields: dict[str, object] = {}
    started = False
    for line in lines:
        if not line.strip():
            continue
        parsed = tokenize(line.rstrip("\r\n"))
        if parsed.kind == "monkey":
            if started:
                monkeys.append(_build(fields, len(monkeys)))
                fields = {}
            started = True
        else:
            if not started:
                raise ValueError(f"Line before the first monkey: {line!r}")
            fields[parsed.kind] = parsed.value
    if started:
        monkeys.append(_build(fields, len(monkeys)))
    for index, monkey in enumerate(monkeys):
        for target in (monkey.true_to, monkey.false_to):
            if not 0 <= target < len(monkeys):
                raise ValueError(f"Monkey {index} throws to unknown monkey {target}")
    return monkeys


def monkey_business(monkeys: list[Monkey], rounds: int, relief: int) -> int:
    """Product of the two highest inspection counts after ``rounds`` rounds.

    After each inspection the worry level is divided by ``relief``. With a
    relief of 1 levels are kept modulo the common multiple of every test.
    """
    if relief < 1:
        raise ValueError("relief must be positive")
    modulus = math.lcm(*(monkey.test for monkey in monkeys)) if monkeys else 1
    held = [list(monkey.items) for monkey in monkeys]
    inspected = [0] * len(monkeys)
    for _ in range(rounds):
        for index, monkey in enumerate(monkeys):
            items, held[index] = held[index], []
            inspected[index] += len(items)
            for worry in items:
                worry = monkey.operation.apply(worry) // relief
                if relief == 1:
                    worry %= modulus
                held[monkey.target(worry)].append(worry)
    return math.prod(heapq.nlargest(2, inspected))


def solve(text: str) -> tuple[int, int]:
    """Return the monkey business for both parts."""
    monkeys = parse_monkeys(text.splitlines())
    return (
        monkey_business(monkeys, PART1_ROUNDS, PART1_RELIEF),
        monkey_business(monkeys, PART2_ROUNDS, 1),
    )


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
    text = _read_input(argv, "Monkey in the middle")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
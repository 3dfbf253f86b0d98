"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from enum import Enum


class Outcome(Enum):
    """Result of a round from our side."""

    WIN = 6
    DRAW = 3
    LOSE = 0

    def points(self) -> int:
        """Points this outcome is worth."""
        return self.value


class Shape(Enum):
    """A hand shape; the value is its score."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def score(self) -> int:
        """Points for playing this shape."""
        return self.value

    @property
    def defeats(self) -> Shape:
        """The shape this one beats."""
        return _DEFEATS[self]

    @property
    def defeated_by(self) -> Shape:
        """The shape that beats this one."""
        return _DEFEATED_BY[self]

    def outcome_against(self, opponent: Shape) -> Outcome:
        """Outcome of playing this shape against ``opponent``."""
        if self is opponent:
            return Outcome.DRAW
        if self.defeats is opponent:
            return Outcome.WIN
        return Outcome.LOSE

    def compete_points(self, opponent: Shape) -> int:
        """Outcome points of playing this shape against ``opponent``."""
        return self.outcome_against(opponent).points()

    def find_match(self, expected: str) -> Shape:
        """Shape to play against this one so that the round ends as ``expected``.

        ``X`` means lose, ``Y`` draw and ``Z`` win.
        """
        if expected == "X":
            return self.defeats
        if expected == "Y":
            return self
        if expected == "Z":
            return self.defeated_by
        raise ValueError(f"Invalid strategy: {expected}")


_DEFEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}
_DEFEATED_BY = {loser: winner for winner, loser in _DEFEATS.items()}

_SHAPE_CODES = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}


def parse_shape(code: str) -> Shape:
    """Parse ``A``/``X``, ``B``/``Y`` or ``C``/``Z`` into a shape."""
    try:
        return _SHAPE_CODES[code]
    except KeyError:
        raise ValueError(f"Invalid shape: {code}") from None


def tokenize(text: str) -> list[tuple[str, str]]:
    """Split the guide into (their, our) code pairs.

    Each line holds a code, a separator and a code; a shorter line raises ValueError.
    """
    pairs = []
    for line in text.strip().split("\n"):
        chars = line.strip()
        if len(chars) < 3:
            raise ValueError("Unexpected end of line")
        pairs.append((chars[0], chars[2]))
    return pairs


def score_as_shapes(pairs: Iterable[tuple[str, str]]) -> int:
    """Total score when the second column is the shape we play."""
    total = 0
    for their_code, our_code in pairs:
        their, our = parse_shape(their_code), parse_shape(our_code)
        total += our.score() + our.compete_points(their)
    return total


def score_with_strategy(pairs: Iterable[tuple[str, str]]) -> int:
    """Total score when the second column is the outcome we must reach."""
    total = 0
    for their_code, wanted in pairs:
        their = parse_shape(their_code)
        our = their.find_match(wanted)
        total += our.score() + our.compete_points(their)
    return total


def solve(text: str) -> tuple[int, int]:
    """Return the scores for both readings of the guide."""
    pairs = tokenize(text)
    return score_as_shapes(pairs), score_with_strategy(pairs)


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
    text = _read_input(argv, "Rock paper scissors")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
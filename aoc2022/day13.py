"""Distress signal: compare nested packet lists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Union

Packet = Union[int, list["Packet"]]

_DIVIDERS = ("[[2]]", "[[6]]")


class PacketError(ValueError):
    """A packet could not be parsed."""


def _parse(text: str, pos: int) -> tuple[Packet, int]:
    if pos >= len(text):
        raise PacketError(f"Unexpected end of packet: {text!r}")
    char = text[pos]
    if char == "[":
        items: list[Packet] = []
        pos += 1
        if pos < len(text) and text[pos] == "]":
            return items, pos + 1
        while True:
            item, pos = _parse(text, pos)
            items.append(item)
            if pos >= len(text):
                raise PacketError(f"Unclosed list: {text!r}")
            if text[pos] == ",":
                pos += 1
            elif text[pos] == "]":
                return items, pos + 1
            else:
                raise PacketError(f"Unexpected {text[pos]!r} in {text!r}")
    if "0" <= char <= "9":
        end = pos
        while end < len(text) and "0" <= text[end] <= "9":
            end += 1
        return int(text[pos:end]), end
    raise PacketError(f"Unexpected {char!r} in {text!r}")


def parse_packet(text: str) -> Packet:
    """Parse a packet such as ``[1,[2,3],4]`` into nested lists of ints."""
    text = text.strip()
    packet, pos = _parse(text, 0)
    if pos != len(text):
        raise PacketError(f"Trailing text in packet: {text!r}")
    return packet


def compare_packets(left: Packet, right: Packet) -> int:
    """Return -1, 0 or 1 as ``left`` orders before, with or after ``right``."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        order = compare_packets(a, b)
        if order:
            return order
    return (len(left) > len(right)) - (len(left) < len(right))


def _pairs(lines: Iterable[str]) -> Iterator[list[str]]:
    block: list[str] = []
    for line in lines:
        if line.strip():
            block.append(line.strip())
        elif block:
            yield block
            block = []
    if block:
        yield block


def right_order_sum(lines: Iterable[str]) -> int:
    """Sum of the 1-based indices of the pairs that are in the right order."""
    total = 0
    for index, pair in enumerate(_pairs(lines), start=1):
        if len(pair) < 2:
            raise PacketError(f"Pair {index} has only one packet")
        if compare_packets(parse_packet(pair[0]), parse_packet(pair[1])) < 0:
            total += index
    return total


def decoder_key(lines: Iterable[str]) -> int:
    """Product of the positions of the divider packets once all packets are sorted."""
    packets = [parse_packet(line) for line in lines if line.strip()]
    key = 1
    for offset, divider_text in enumerate(_DIVIDERS, start=1):
        divider = parse_packet(divider_text)
        before = sum(1 for packet in packets if compare_packets(packet, divider) < 0)
        key *= before + offset
    return key


def solve(text: str) -> tuple[int, int]:
    """Return the sum of right-order indices and the decoder key."""
    lines = text.splitlines()
    return right_order_sum(lines), decoder_key(lines)


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
    text = _read_input(argv, "Distress signal")
    print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Advent of Code 2022 puzzle solutions for days 1 to 13, one module per day."""

__version__ = "0.1.0"
"""Solutions to the 2022 Advent of Code puzzles, days 1 to 15, with shared helpers."""

__version__ = "0.1.0"
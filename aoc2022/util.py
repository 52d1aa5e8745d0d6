"""Small parsing helpers shared by the puzzle solutions."""

from __future__ import annotations

import re
from collections.abc import Iterable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"-?\d+")


def map_to_int(text: str) -> int | None:
    """Parse the integer at the start of ``text``.

    Trailing characters are ignored. Returns None when ``text`` does not
    start with an integer or the value does not fit in 32 bits.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def digit_to_int(char: str) -> int | None:
    """Return the value of a single decimal digit, or None for anything else."""
    if len(char) != 1 or not "0" <= char <= "9":
        return None
    return ord(char) - ord("0")


def map_to_ints(lines: Iterable[str]) -> list[int | None]:
    """Parse every line with :func:`map_to_int`."""
    return [map_to_int(line) for line in lines]


def get_day_file_path(day: int) -> str:
    """Return the conventional location of the input file for ``day``."""
    return f"../../data/day{day}.txt"
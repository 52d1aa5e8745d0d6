"""Distress signal: compare nested list packets."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Union

from aoc2022.util import map_to_int

Entry = Union[int, list]

_LEXEME_PATTERN = re.compile(r"[\[\]]|[0-9]+")


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _compare_int_to(value: int, entry: Entry) -> int:
    if isinstance(entry, int):
        return _sign(value, entry)
    if not entry:
        return 1
    cmp = _compare_int_to(value, entry[0])
    if cmp == 0:
        return 0 if len(entry) == 1 else -1
    return cmp


def compare_entries(left: Entry, right: Entry) -> int:
    """Return -1, 0 or 1 as ``left`` orders before, with or after ``right``."""
    if isinstance(left, int) and isinstance(right, int):
        return _sign(left, right)
    if isinstance(left, int):
        return _compare_int_to(left, right)
    if isinstance(right, int):
        return -_compare_int_to(right, left)
    for a, b in zip(left, right):
        cmp = compare_entries(a, b)
        if cmp:
            return cmp
    return _sign(len(left), len(right))


def _parse_list(pieces: Iterator[str]) -> list:
    entries: list = []
    for piece in pieces:
        if piece == "]":
            return entries
        if piece == "[":
            entries.append(_parse_list(pieces))
        else:
            value = map_to_int(piece)
            if value is not None:
                entries.append(value)
    return entries


def _format(entry: Entry) -> str:
    if isinstance(entry, int):
        return str(entry)
    return "[" + ",".join(_format(e) for e in entry) + "]"


@total_ordering
@dataclass(eq=False)
class Packet:
    """A packet: a nested list of integers, or a single integer."""

    entry: Entry = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> Packet:
        """Parse a line such as ``"[1,[2,3]]"``."""
        if line == "":
            raise ValueError("empty packet line")
        body = line[1:] if line.startswith("[") else line
        if body.endswith("]"):
            body = body[:-1]
        return cls(_parse_list(iter(_LEXEME_PATTERN.findall(body))))

    def __lt__(self, other: Packet) -> bool:
        return compare_entries(self.entry, other.entry) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Packet):
            return NotImplemented
        return compare_entries(self.entry, other.entry) == 0

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return _format(self.entry)


def parse_input(lines: str | Iterable[str], show: bool = False) -> list[Packet]:
    """Parse one packet per non-empty line; optionally print them in pairs."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    packets = [
        Packet.parse(line) for line in (raw.rstrip("\n") for raw in lines) if line != ""
    ]
    if show:
        for index, packet in enumerate(packets, start=1):
            print(packet)
            if index % 2 == 0:
                print()
    return packets


def part1(packets: list[Packet]) -> int:
    """Sum the 1-based indices of pairs already in order (the final pair is not checked)."""
    if len(packets) < 3:
        return 0
    return sum(
        i // 2 + 1
        for i in range(0, len(packets) - 2, 2)
        if packets[i] < packets[i + 1]
    )


def part2(packets: Iterable[Packet]) -> int:
    """Product of the positions the divider packets 2 and 6 would take when sorted."""
    ordered = sorted(packets)
    first = bisect_left(ordered, Packet(2)) + 1
    second = bisect_left(ordered, Packet(6)) + 2
    return first * second
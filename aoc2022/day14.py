"""Regolith reservoir: simulate falling sand in a cave of rock paths."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from aoc2022.common import BoundingBox, Coordinates

WIDTH = 1000
HEIGHT = 1000

CHAR_SAND = "o"
CHAR_ROCK = "#"
CHAR_AIR = "."
CHAR_START = "+"

DEFAULT_START = Coordinates(row=0, col=500)

_POINT = re.compile(r"(-?\d+)\s*,\s*(-?\d+)")


@dataclass
class Trace:
    """Every rock cell along one scanned path, as ``Coordinates(row, col)``."""

    path: list[Coordinates] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> Trace:
        """Parse a line such as ``"498,4 -> 498,6 -> 496,6"`` (``x,y`` pairs)."""
        path: list[Coordinates] = []
        previous: tuple[int, int] | None = None
        for col_text, row_text in _POINT.findall(line):
            row, col = int(row_text), int(col_text)
            if previous is not None:
                prev_row, prev_col = previous
                if row == prev_row:
                    path.extend(
                        Coordinates(row, c)
                        for c in range(min(prev_col, col), max(prev_col, col) + 1)
                    )
                if col == prev_col:
                    path.extend(
                        Coordinates(r, col)
                        for r in range(min(prev_row, row), max(prev_row, row) + 1)
                    )
            previous = (row, col)
        return cls(path)

    def __str__(self) -> str:
        return "".join(f"{c.row}, {c.col} -> " for c in self.path)


def _key(key: Coordinates | tuple[int, int]) -> tuple[int, int]:
    return (key.row, key.col) if isinstance(key, Coordinates) else key


class Scan:
    """The cave: rock, sand and air cells on a 1000x1000 grid."""

    def __init__(self) -> None:
        self._cells: dict[tuple[int, int], str] = {}
        self.rock_traces: list[Trace] = []
        self.bounding = BoundingBox(min_row=HEIGHT, max_row=-1, min_col=WIDTH, max_col=-1)
        self.set_start(DEFAULT_START)

    @staticmethod
    def _check(row: int, col: int) -> None:
        if not (0 <= row < HEIGHT and 0 <= col < WIDTH):
            raise IndexError(f"cave position ({row}, {col}) is out of bounds")

    def _get(self, row: int, col: int) -> str:
        self._check(row, col)
        return self._cells.get((row, col), CHAR_AIR)

    def _set(self, row: int, col: int, value: str) -> None:
        self._check(row, col)
        if value == CHAR_AIR:
            self._cells.pop((row, col), None)
        else:
            self._cells[(row, col)] = value

    def __getitem__(self, key: Coordinates | tuple[int, int]) -> str:
        return self._get(*_key(key))

    def append(self, trace: Trace) -> None:
        """Mark every cell of ``trace`` as rock."""
        for coord in trace.path:
            self._set(coord.row, coord.col, CHAR_ROCK)
            self.bounding.update(coord)
        self.rock_traces.append(trace)

    def set_start(self, start: Coordinates) -> None:
        """Mark where sand enters the cave."""
        self.bounding.update(start)
        self._set(start.row, start.col, CHAR_START)

    def set_floor(self, row: int) -> None:
        """Lay an infinite-looking rock floor across the whole width at ``row``."""
        for col in range(WIDTH):
            self._set(row, col, CHAR_ROCK)
        self.bounding.max_row = max(self.bounding.max_row, row)

    def copy(self) -> Scan:
        clone = Scan()
        clone._cells = dict(self._cells)
        clone.rock_traces = list(self.rock_traces)
        clone.bounding = dataclasses.replace(self.bounding)
        return clone

    def render(self) -> str:
        """Draw the area covered by rock and the start, one line per row."""
        box = self.bounding
        return "".join(
            "".join(self._get(row, col) for col in range(box.min_col, box.max_col + 1)) + "\n"
            for row in range(box.min_row, box.max_row + 1)
        )


def parse_input(lines: str | Iterable[str], show: bool = False) -> Scan:
    """Build a scan from one rock path per line; blank lines are skipped."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    scan = Scan()
    for line in lines:
        if line.strip():
            scan.append(Trace.parse(line))
    if show:
        print(scan.render())
    scan.set_start(DEFAULT_START)
    return scan


def _fall(work: Scan, row: int, col: int, clear_start_below: bool) -> tuple[int, int] | None:
    """Move the grain one step; return its new position or None when it rests."""
    start = (DEFAULT_START.row, DEFAULT_START.col)
    for d_col in (0, -1, 1):
        if work._get(row + 1, col + d_col) == CHAR_AIR:
            if d_col != 0 or clear_start_below or (row, col) != start:
                work._set(row, col, CHAR_AIR)
            work._set(row + 1, col + d_col, CHAR_SAND)
            return row + 1, col + d_col
    return None


def part1(scan: Scan, show: bool = False) -> int:
    """Count grains that come to rest before sand starts falling into the void."""
    work = scan.copy()
    box = work.bounding
    start = (DEFAULT_START.row, DEFAULT_START.col)

    def in_void(row: int, col: int) -> bool:
        return col >= box.max_col or col < box.min_col or row > box.max_row

    sand = 0
    row, col = start
    while not in_void(row, col):
        moved = _fall(work, row, col, clear_start_below=False)
        if moved is not None:
            row, col = moved
            continue
        sand += 1
        if (row, col) == start:
            break
        row, col = start
    if show:
        print(work.render())
    return sand


def part2(scan: Scan, show: bool = False) -> int:
    """Count grains until the source is blocked, with a floor two rows below the rock."""
    work = scan.copy()
    work.set_floor(work.bounding.max_row + 2)
    start = (DEFAULT_START.row, DEFAULT_START.col)
    sand = 0
    row, col = start
    while True:
        moved = _fall(work, row, col, clear_start_below=True)
        if moved is not None:
            row, col = moved
            continue
        sand += 1
        if (row, col) == start:
            work._set(row, col, CHAR_SAND)
            break
        row, col = start
    if show:
        print(work.render())
    return sand
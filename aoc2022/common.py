"""Geometry and interval types shared by several puzzle solutions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Range:
    """Half-open interval ``[start, end)``, ordered by start then end."""

    start: int
    end: int

    def size(self) -> int:
        return self.end - self.start

    def contains(self, value: int) -> bool:
        return self.start <= value < self.end

    def is_sub_range(self, other: Range) -> bool:
        return self.start >= other.start and self.end <= other.end

    def intersects(self, other: Range) -> bool:
        return self.start < other.end and self.end > other.start

    def is_adjacent(self, other: Range) -> bool:
        return self.start == other.end or self.end == other.start

    def merge_if_adjacent_or_overlapping(self, other: Range) -> Range | None:
        """Return the union of both ranges when they touch, else None.

        Two equal ranges are not merged.
        """
        if (self.intersects(other) or self.is_adjacent(other)) and self != other:
            return Range(min(self.start, other.start), max(self.end, other.end))
        return None


class RangeSet:
    """A set of ranges that merges touching ranges on insertion."""

    def __init__(self) -> None:
        self._ranges: set[Range] = set()

    def insert(self, new_range: Range) -> None:
        if not self._merge(new_range):
            self._ranges.add(new_range)

    def erase(self, old_range: Range) -> None:
        self._ranges.discard(old_range)

    def ranges(self) -> list[Range]:
        """Return the stored ranges in order."""
        return sorted(self._ranges)

    def count_values(self) -> int:
        return sum(abs(r.end - r.start) for r in self._ranges)

    def contains(self, value: int) -> bool:
        return any(r.contains(value) for r in self._ranges)

    def _merge(self, new_range: Range) -> bool:
        for existing in sorted(self._ranges):
            merged = existing.merge_if_adjacent_or_overlapping(new_range)
            if merged is not None:
                self._ranges.discard(existing)
                self._ranges.add(merged)
                self._merge(merged)
                return True
        return False


@dataclass(frozen=True)
class Coordinates:
    row: int = 0
    col: int = 0

    def __add__(self, other: Coordinates) -> Coordinates:
        return Coordinates(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Coordinates) -> Coordinates:
        return Coordinates(self.row - other.row, self.col - other.col)


@dataclass
class BoundingBox:
    min_row: int = 0
    max_row: int = 0
    min_col: int = 0
    max_col: int = 0

    def update(self, coord: Coordinates) -> None:
        """Grow the box so that it includes ``coord``."""
        self.min_row = min(self.min_row, coord.row)
        self.max_row = max(self.max_row, coord.row)
        self.min_col = min(self.min_col, coord.col)
        self.max_col = max(self.max_col, coord.col)


class Grid(Generic[T]):
    """A fixed-size 2D grid indexed by ``Coordinates`` or ``(row, col)``.

    With ``include_negative`` the grid doubles in each direction and is
    centred on the origin, so negative indices are valid.
    """

    def __init__(self, width: int, height: int, init: T, include_negative: bool = False) -> None:
        self._include_negative = include_negative
        factor = 2 if include_negative else 1
        self._width = width * factor
        self._height = height * factor
        self._center = Coordinates(height, width) if include_negative else Coordinates(0, 0)
        self._cells: list[list[T]] = [[init] * self._width for _ in range(self._height)]

    def _locate(self, key: Coordinates | tuple[int, int]) -> tuple[int, int]:
        row, col = (key.row, key.col) if isinstance(key, Coordinates) else key
        inner_row = row + self._center.row
        inner_col = col + self._center.col
        if not (0 <= inner_row < self._height and 0 <= inner_col < self._width):
            raise IndexError(f"grid position ({row}, {col}) is out of bounds")
        return inner_row, inner_col

    def __getitem__(self, key: Coordinates | tuple[int, int]) -> T:
        row, col = self._locate(key)
        return self._cells[row][col]

    def __setitem__(self, key: Coordinates | tuple[int, int], value: T) -> None:
        row, col = self._locate(key)
        self._cells[row][col] = value

    def __iter__(self) -> Iterator[list[T]]:
        return (list(row) for row in self._cells)

    def row_indices(self) -> range:
        if self._include_negative:
            split = self._height // 2
            return range(-split, split)
        return range(self._height)

    def col_indices(self) -> range:
        if self._include_negative:
            split = self._width // 2
            return range(-split, split)
        return range(self._width)
"""Beacon exclusion zone: sensors and the rows they cover."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from aoc2022.common import Coordinates, Range, RangeSet

_SENSOR = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)


@dataclass(frozen=True)
class Sensor:
    """A sensor position and the closest beacon it detects."""

    row: int
    col: int
    beacon: Coordinates

    @property
    def distance(self) -> int:
        """Manhattan distance from the sensor to its beacon."""
        return abs(self.beacon.row - self.row) + abs(self.beacon.col - self.col)

    @classmethod
    def parse(cls, line: str) -> Sensor:
        match = _SENSOR.search(line)
        if match is None:
            raise ValueError(f"invalid sensor line: {line!r}")
        x, y, beacon_x, beacon_y = (int(group) for group in match.groups())
        return cls(row=y, col=x, beacon=Coordinates(row=beacon_y, col=beacon_x))

    def row_coverage(self, row: int) -> Range | None:
        """The columns of ``row`` within range of this sensor, if any."""
        row_distance = self.distance - abs(row - self.row)
        if row_distance < 0:
            return None
        return Range(self.col - row_distance, self.col + row_distance + 1)

    def __str__(self) -> str:
        return (
            f"Sensor at x={self.col}, y={self.row}: "
            f"closest beacon is at x={self.beacon.col}, y={self.beacon.row}"
        )


class Scan:
    """All sensors of one scan."""

    def __init__(self) -> None:
        self._sensors: list[Sensor] = []

    @property
    def sensors(self) -> list[Sensor]:
        return list(self._sensors)

    def add(self, sensor: Sensor) -> None:
        self._sensors.append(sensor)

    def get_beacons_at(self, row: int) -> set[int]:
        """Columns of the beacons lying on ``row``."""
        return {s.beacon.col for s in self._sensors if s.beacon.row == row}

    def get_line_coverage_at(self, row: int) -> RangeSet:
        coverage = RangeSet()
        for sensor in self._sensors:
            covered = sensor.row_coverage(row)
            if covered is not None:
                coverage.insert(covered)
        return coverage


def load_input(lines: str | Iterable[str]) -> Scan:
    """Parse one sensor per line; blank lines are skipped."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    scan = Scan()
    for line in lines:
        if line.strip():
            scan.add(Sensor.parse(line))
    return scan


def part1(scan: Scan, row: int) -> int:
    """Count the positions on ``row`` where no beacon can be."""
    coverage = scan.get_line_coverage_at(row)
    n_beacons = sum(1 for col in scan.get_beacons_at(row) if coverage.contains(col))
    return coverage.count_values() - n_beacons


def _first_uncovered(coverage: RangeSet) -> int:
    col = 0
    for covered in coverage.ranges():
        if covered.start > col:
            break
        col = max(col, covered.end)
    return col


def part2(scan: Scan, limit: int) -> int:
    """Tuning frequency of the one uncovered position, searching rows from ``limit`` down.

    Returns 0 when every position is covered.
    """
    for row in range(limit, 0, -1):
        if row % 1000 == 0:
            print(f"checking row {row}")
        col = _first_uncovered(scan.get_line_coverage_at(row))
        if col < limit:
            return col * 4_000_000 + row
    return 0
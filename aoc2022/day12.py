"""Hill climbing: shortest paths over an elevation map."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

INF = 2**31 - 1

_HIGHLIGHT = "\x1b[37;40m"
_DIM = "\x1b[38;2;128;128;128m"
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class ElevationPoint:
    """A map cell; two points are equal when their coordinates are."""

    x: int
    y: int
    height: int = field(compare=False)

    @classmethod
    def from_char(cls, char: str, x: int, y: int) -> ElevationPoint:
        """Build a point from a map character: ``S``, ``E`` or a letter."""
        if char == "S":
            height = -1
        elif char == "E":
            height = -2
        else:
            if len(char) != 1 or not "A" <= char <= "z":
                raise ValueError(f"Invalid elevation character: {char!r}")
            height = ord(char) - ord("A") if char <= "Z" else ord(char) - ord("a")
        return cls(x, y, height)

    def is_start(self) -> bool:
        return self.height == -1

    def is_end(self) -> bool:
        return self.height == -2

    def neighbours(self, elevation_map: ElevationMap) -> list[ElevationPoint]:
        """Adjacent points in the order up, down, left, right."""
        result = []
        if self.x > 0:
            result.append(elevation_map[self.x - 1][self.y])
        if self.x < len(elevation_map) - 1:
            result.append(elevation_map[self.x + 1][self.y])
        if self.y > 0:
            result.append(elevation_map[self.x][self.y - 1])
        if self.y < len(elevation_map[self.x]) - 1:
            result.append(elevation_map[self.x][self.y + 1])
        return result

    def __str__(self) -> str:
        if self.is_start():
            return "S"
        if self.is_end():
            return "E"
        return f"({self.x},{self.y})"


ElevationMap = Sequence[Sequence[ElevationPoint]]
Distances = list[list[int]]


class _Frontier:
    """Unvisited points, taken by smallest distance and then by map order."""

    def __init__(self, elevation_map: ElevationMap, dist: Distances) -> None:
        self._dist = dist
        self._points = [point for row in elevation_map for point in row]
        self._index = {point: k for k, point in enumerate(self._points)}
        self._remaining = set(range(len(self._points)))
        self._heap = [(dist[p.x][p.y], k) for k, p in enumerate(self._points)]
        heapq.heapify(self._heap)

    def __bool__(self) -> bool:
        return bool(self._remaining)

    def set_distance(self, point: ElevationPoint, value: int) -> None:
        self._dist[point.x][point.y] = value
        heapq.heappush(self._heap, (value, self._index[point]))

    def pop(self) -> ElevationPoint:
        while True:
            distance, k = heapq.heappop(self._heap)
            point = self._points[k]
            if k in self._remaining and distance == self._dist[point.x][point.y]:
                self._remaining.discard(k)
                return point


def parse_input(data: Iterable[str]) -> list[list[ElevationPoint]]:
    return [
        [ElevationPoint.from_char(char, x, y) for y, char in enumerate(line)]
        for x, line in enumerate(data)
    ]


def _find(elevation_map: ElevationMap, wanted) -> ElevationPoint | None:
    return next((p for row in elevation_map for p in row if wanted(p)), None)


def find_start(elevation_map: ElevationMap) -> ElevationPoint | None:
    return _find(elevation_map, ElevationPoint.is_start)


def find_end(elevation_map: ElevationMap) -> ElevationPoint | None:
    return _find(elevation_map, ElevationPoint.is_end)


def _check_map(elevation_map: ElevationMap) -> None:
    if not elevation_map or not elevation_map[0]:
        raise ValueError("elevation map is empty")


def _initial_distances(elevation_map: ElevationMap, source: ElevationPoint) -> Distances:
    return [[0 if point == source else INF for point in row] for row in elevation_map]


def _trace(
    prev: dict[ElevationPoint, ElevationPoint], target: ElevationPoint
) -> list[ElevationPoint]:
    path = []
    node = prev.get(target)
    while node is not None:
        path.append(node)
        node = prev.get(node)
    return path


def find_shortest_path(
    elevation_map: ElevationMap,
    start: ElevationPoint,
    end: ElevationPoint,
    visualise: bool = False,
) -> list[ElevationPoint]:
    """Return the path from the point before ``end`` back to ``start``.

    The list is empty when ``end`` was never reached; an unreachable end that
    borders an unreachable point raises ValueError.
    """
    _check_map(elevation_map)
    dist = _initial_distances(elevation_map, start)
    prev: dict[ElevationPoint, ElevationPoint] = {}
    visited: set[ElevationPoint] = set()
    frontier = _Frontier(elevation_map, dist)

    def end_predecessor_height() -> int:
        predecessor = prev.get(end)
        if predecessor is None:
            raise ValueError("end point is not reachable")
        return predecessor.height

    while frontier:
        u = frontier.pop()
        visited.add(u)
        here = dist[u.x][u.y]
        for v in u.neighbours(elevation_map):
            if not v.is_end():
                if v in visited:
                    continue
                if abs(v.height - u.height) > 1 and v.height > u.height:
                    continue
            alt = here + 1
            if alt < dist[v.x][v.y] or (v.is_end() and end_predecessor_height() < u.height):
                frontier.set_distance(v, alt)
                prev[v] = u

    path = _trace(prev, end)
    if visualise and path:
        print(format_map(elevation_map, start, end, dist, path[-1], path), end="")
    return path


def find_shortest_path_from_first_lowest(
    elevation_map: ElevationMap, end: ElevationPoint, visualise: bool = False
) -> list[ElevationPoint]:
    """Search downhill from ``end`` and return the path from the lowest point found.

    The path runs from the point after the lowest one up to and including ``end``.
    """
    _check_map(elevation_map)
    dist = _initial_distances(elevation_map, end)
    prev: dict[ElevationPoint, ElevationPoint] = {}
    visited: set[ElevationPoint] = set()
    frontier = _Frontier(elevation_map, dist)

    end_neighbours = end.neighbours(elevation_map)
    if not end_neighbours:
        raise ValueError("end point has no neighbours")
    highest = max(end_neighbours, key=lambda point: point.height)
    frontier.set_distance(highest, 1)
    prev[highest] = end

    lowest: ElevationPoint | None = None
    while frontier:
        u = frontier.pop()
        visited.add(u)
        if u.is_end():
            continue
        if lowest is None:
            lowest = u
        here = dist[u.x][u.y]
        for v in u.neighbours(elevation_map):
            if v.is_end() or v in visited:
                continue
            if abs(v.height - u.height) > 1 and v.height < u.height:
                continue
            alt = here + 1
            if alt < dist[v.x][v.y]:
                frontier.set_distance(v, alt)
                prev[v] = u
            if v.height < lowest.height and not v.is_start():
                lowest = v

    if lowest is None or lowest not in prev:
        return []
    path = _trace(prev, lowest)
    if visualise and path:
        print(format_map(elevation_map, end, end, dist, path[-1], path), end="")
    return path


def format_map(
    elevation_map: ElevationMap,
    start: ElevationPoint,
    end: ElevationPoint,
    dist: Sequence[Sequence[int]],
    current: ElevationPoint,
    shortest_path: Iterable[ElevationPoint],
) -> str:
    """Render the distances of every cell, highlighting the path, as coloured text."""
    on_path = set(shortest_path)
    lines = []
    for i, row in enumerate(elevation_map):
        cells = []
        for j, point in enumerate(row):
            if (i, j) == (start.x, start.y):
                cells.append(f"{_HIGHLIGHT}_S_ {_RESET}")
            elif (i, j) == (end.x, end.y):
                cells.append(f"{_HIGHLIGHT}_E_ {_RESET}")
            elif (i, j) == (current.x, current.y):
                cells.append("[X] ")
            elif dist[i][j] == INF:
                cells.append(f"{_DIM}inf {_RESET}")
            elif point in on_path:
                cells.append(f"{_HIGHLIGHT}{dist[i][j]:03} {_RESET}")
            else:
                cells.append(f"{_DIM}{dist[i][j]:03} {_RESET}")
        lines.append("".join(cells) + "\n")
    return "".join(lines) + "\n"
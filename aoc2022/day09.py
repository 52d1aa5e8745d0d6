"""Rope bridge: simulate a rope whose knots follow the head."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from aoc2022.util import map_to_int


class MotionDirection(enum.Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Motion:
    direction: MotionDirection
    magnitude: int

    @classmethod
    def parse(cls, line: str) -> Motion:
        """Parse a line such as ``"R 4"``; a missing or bad count means 0."""
        text = line.strip()
        if not text:
            raise ValueError("empty motion line")
        try:
            direction = MotionDirection(text[0])
        except ValueError:
            raise ValueError(f"invalid motion direction: {line!r}") from None
        rest = text[1:].split()
        magnitude = map_to_int(rest[0]) if rest else None
        return cls(direction, magnitude if magnitude is not None else 0)


@dataclass(frozen=True, order=True)
class Position:
    x: int
    y: int


_STEPS = {
    MotionDirection.UP: (0, -1),
    MotionDirection.DOWN: (0, 1),
    MotionDirection.LEFT: (-1, 0),
    MotionDirection.RIGHT: (1, 0),
}


def _half(delta: int) -> int:
    """Halve ``delta``, rounding toward zero."""
    return abs(delta) // 2 * (1 if delta >= 0 else -1)


def _follow(leader: Position, follower: Position) -> Position:
    dx = leader.x - follower.x
    dy = leader.y - follower.y
    if abs(dx) >= 2:
        return Position(follower.x + _half(dx), follower.y + (_half(dy) if abs(dy) >= 2 else dy))
    if abs(dy) >= 2:
        return Position(follower.x + dx, follower.y + _half(dy))
    return follower


class RopeSimulation:
    """A rope of knots starting at the origin, tracking where its tail has been."""

    def __init__(self, rope_length: int) -> None:
        if rope_length < 1:
            raise ValueError("a rope needs at least one knot")
        self._rope = [Position(0, 0)] * rope_length
        self._tail_visited: set[Position] = set()

    @property
    def rope(self) -> list[Position]:
        return list(self._rope)

    @property
    def tail_visited(self) -> frozenset[Position]:
        return frozenset(self._tail_visited)

    def move_head(self, direction: MotionDirection) -> None:
        """Move the head one step and let every other knot follow."""
        dx, dy = _STEPS[direction]
        head = self._rope[0]
        leader = Position(head.x + dx, head.y + dy)
        self._rope[0] = leader
        for index, follower in enumerate(self._rope[1:], start=1):
            leader = _follow(leader, follower)
            self._rope[index] = leader
        self._tail_visited.add(self._rope[-1])


def parse_input(lines: Iterable[str]) -> list[Motion]:
    return [Motion.parse(line) for line in lines]


def simulate_rope(motions: Iterable[Motion], rope_length: int) -> RopeSimulation:
    """Run all motions on a rope of ``rope_length`` knots (at least two)."""
    if rope_length < 2:
        raise ValueError("a rope needs at least two knots to simulate")
    simulation = RopeSimulation(rope_length)
    for motion in motions:
        for _ in range(motion.magnitude):
            simulation.move_head(motion.direction)
    return simulation
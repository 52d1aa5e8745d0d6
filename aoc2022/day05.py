"""Supply stacks: rearrange crates with a cargo crane."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_MOVE = re.compile(r"move\s+(\d+)\s+from\s+(\d+)\s+to\s+(\d+)\s*")


@dataclass(frozen=True)
class Command:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (zero-based)."""

    count: int
    source: int
    target: int

    @classmethod
    def parse(cls, line: str) -> Command:
        """Parse a line such as ``"move 1 from 2 to 1"``."""
        match = _MOVE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"invalid move command: {line!r}")
        count, source, target = (int(group) for group in match.groups())
        return cls(count, source - 1, target - 1)


def parse_input(lines: Iterable[str]) -> tuple[list[Command], list[list[str]]]:
    """Parse the drawing and the moves.

    Each stack is listed from its top crate down to its bottom crate.
    """
    stacks: list[list[str]] = []
    commands: list[Command] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line.startswith("move"):
            commands.append(Command.parse(line))
            continue
        for position, char in enumerate(line):
            if "A" <= char <= "Z":
                stack_nr = position // 4
                while len(stacks) <= stack_nr:
                    stacks.append([])
                stacks[stack_nr].append(char)
    return commands, stacks


def _check(stacks: list[list[str]], command: Command) -> None:
    if command.count > len(stacks[command.source]):
        raise IndexError(
            f"cannot move {command.count} crates from stack {command.source + 1}"
        )


def execute_crane_9000(stacks: list[list[str]], commands: Iterable[Command]) -> None:
    """Move crates one at a time; stacks are bottom-first and changed in place."""
    for command in commands:
        _check(stacks, command)
        for _ in range(command.count):
            stacks[command.target].append(stacks[command.source].pop())


def execute_crane_9001(stacks: list[list[str]], commands: Iterable[Command]) -> None:
    """Move crates several at once, keeping their order; stacks change in place."""
    for command in commands:
        _check(stacks, command)
        source = stacks[command.source]
        moved = source[len(source) - command.count:]
        del source[len(source) - command.count:]
        stacks[command.target].extend(moved)
"""No space left on device: rebuild a directory tree from a terminal log."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from aoc2022.util import map_to_int


class Command(enum.Enum):
    CD = "cd"
    LS = "ls"
    NOT_A_COMMAND = "not_a_command"


def parse_command(cmd: str) -> Command:
    if cmd.startswith("$ cd"):
        return Command.CD
    if cmd.startswith("$ ls"):
        return Command.LS
    return Command.NOT_A_COMMAND


def find_smallest_sufficient(sums: Iterable[int], threshold: int) -> int:
    """Return the smallest value at least ``threshold``, or the largest value if none is."""
    ordered = sorted(sums)
    if not ordered:
        raise ValueError("no sizes to choose from")
    return next((value for value in ordered if value >= threshold), ordered[-1])


def sum_if(sums: Iterable[int], threshold: int) -> int:
    """Sum the values that are at most ``threshold``."""
    return sum(value for value in sums if value <= threshold)


@dataclass(frozen=True)
class File:
    name: str
    size: int


class Directory:
    """A directory holding files and subdirectories by name."""

    def __init__(self, parent: Directory | None, name: str) -> None:
        self.parent = parent
        self.name = name
        self._entries: dict[str, File | Directory] = {}

    def size(self) -> int:
        """Total size of every file below this directory."""
        return sum(
            entry.size() if isinstance(entry, Directory) else entry.size
            for entry in self._entries.values()
        )

    def _add(self, entry: File | Directory, kind: type) -> File | Directory:
        stored = self._entries.setdefault(entry.name, entry)
        if not isinstance(stored, kind):
            raise TypeError(f"{entry.name!r} already exists with another type")
        return stored

    def add_directory(self, directory: Directory) -> Directory:
        """Add ``directory`` unless the name is taken; return the stored entry."""
        return self._add(directory, Directory)

    def add_file(self, file: File) -> File:
        """Add ``file`` unless the name is taken; return the stored entry."""
        return self._add(file, File)

    def add_entry(self, line: str) -> None:
        """Add an entry from an ``ls`` output line such as ``"dir a"`` or ``"584 i"``."""
        parts = line.split()
        token = parts[0] if parts else ""
        name = parts[1] if len(parts) > 1 else ""
        if token == "dir":
            self.add_directory(Directory(self, name))
            return
        size = map_to_int(token)
        if size is not None:
            self.add_file(File(name, size))

    def get_subdirectories(self) -> list[Directory]:
        return [entry for entry in self._entries.values() if isinstance(entry, Directory)]

    def get_recursive_subdirectory_sizes(self) -> list[int]:
        """Sizes of all directories below this one, in pre-order."""
        sizes = []
        for subdir in self.get_subdirectories():
            sizes.append(subdir.size())
            sizes.extend(subdir.get_recursive_subdirectory_sizes())
        return sizes

    def get_subdirectory(self, title: str) -> Directory | None:
        entry = self._entries.get(title)
        return entry if isinstance(entry, Directory) else None

    def get_file(self, title: str) -> File | None:
        entry = self._entries.get(title)
        return entry if isinstance(entry, File) else None


class DirectoryTree:
    """A directory tree with a current working directory."""

    def __init__(self, root: Directory) -> None:
        self.root = root
        self.current = root

    def cd(self, target: str) -> None:
        """Change directory; unknown names and ``..`` at the root are ignored."""
        if target == "/":
            self.current = self.root
        elif target == "..":
            if self.current is not self.root and self.current.parent is not None:
                self.current = self.current.parent
        else:
            subdir = self.current.get_subdirectory(target)
            if subdir is not None:
                self.current = subdir


def process_command_line(line: str, tree: DirectoryTree) -> None:
    """Apply one line of the terminal log to ``tree``."""
    command = parse_command(line)
    if command is Command.CD:
        parts = line.split()
        tree.cd(parts[2] if len(parts) > 2 else "")
    elif command is Command.NOT_A_COMMAND:
        tree.current.add_entry(line)
"""Reading puzzle input files in the shapes the solutions expect."""

from __future__ import annotations

import os
from typing import IO


class PuzzleFile:
    """An open puzzle input file; usable as a context manager."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        try:
            self._file: IO[str] = open(file_path, encoding="utf-8", newline="")
        except OSError as exc:
            raise OSError(f"Failed to open file at path: {file_path}") from exc

    def read_string(self) -> str:
        """Return the rest of the file as one string."""
        return self._file.read()

    def read_lines(self) -> list[str]:
        """Return the remaining lines without their newline characters."""
        lines = self._file.read().split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def read_matrix(self) -> list[list[int]]:
        """Return each line as a row of its digit values."""
        return [[ord(c) - ord("0") for c in line] for line in self.read_lines()]

    def read_pairs(self) -> list[tuple[str, str]]:
        """Return consecutive non-blank characters grouped into pairs."""
        chars = iter("".join(self._file.read().split()))
        return list(zip(chars, chars))

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> PuzzleFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
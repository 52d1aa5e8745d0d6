"""Camp cleanup: compare pairs of section assignments."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_RANGE = re.compile(r"\s*(\d+)\s*-\s*(\d+)\s*")


@dataclass(frozen=True)
class SectionRange:
    """Closed interval of section ids ``[low, high]``."""

    low: int
    high: int

    @classmethod
    def parse(cls, text: str) -> SectionRange:
        """Parse an assignment such as ``"2-4"``."""
        match = _RANGE.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid section range: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    def _holds(self, value: int) -> bool:
        return self.low <= value <= self.high

    def is_sub_range_to(self, other: SectionRange) -> bool:
        """True when both ends of this range lie inside ``other``."""
        return other._holds(self.low) and other._holds(self.high)

    def is_overlapping(self, other: SectionRange) -> bool:
        """True when either end of this range lies inside ``other``."""
        return other._holds(self.low) or other._holds(self.high)


def map_to_ranges(lines: Iterable[str]) -> list[tuple[SectionRange, SectionRange]]:
    """Parse lines such as ``"2-4,6-8"`` into pairs of ranges."""
    pairs = []
    for line in lines:
        left, sep, right = line.partition(",")
        if not sep:
            raise ValueError(f"expected two ranges separated by a comma: {line!r}")
        pairs.append((SectionRange.parse(left), SectionRange.parse(right)))
    return pairs


def num_of_fully_contained_ranges(pairs: Iterable[tuple[SectionRange, SectionRange]]) -> int:
    """Count pairs in which one range fully contains the other."""
    return sum(
        1 for first, second in pairs if first.is_sub_range_to(second) or second.is_sub_range_to(first)
    )


def num_of_overlapping_ranges(pairs: Iterable[tuple[SectionRange, SectionRange]]) -> int:
    """Count pairs whose ranges overlap at all."""
    return sum(
        1 for first, second in pairs if first.is_overlapping(second) or second.is_overlapping(first)
    )
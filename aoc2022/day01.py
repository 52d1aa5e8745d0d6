"""Calorie counting: find the elves carrying the most food."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _elf_totals(calories: Iterable[int | None]) -> Iterator[int]:
    """Yield the total of each group; None separates groups."""
    total = 0
    for value in calories:
        if value is None:
            yield total
            total = 0
        else:
            total += value
    yield total


def top_1_elf_calories(calories: Iterable[int | None]) -> int:
    """Return the largest total carried by one elf."""
    return max(0, *_elf_totals(calories))


def top_3_elf_calories(calories: Iterable[int | None]) -> int:
    """Return the sum of the three largest totals."""
    max1 = max2 = max3 = 0
    for total in _elf_totals(calories):
        if total > max1:
            if max1 > max2:
                if max2 > max3:
                    max3 = max2
                max2 = max1
            max1 = total
        elif total > max2:
            if max2 > max3:
                max3 = max2
            max2 = total
        elif total > max3:
            max3 = total
    return max1 + max2 + max3
"""Rucksack reorganisation: sum priorities of shared items."""

from __future__ import annotations

from collections.abc import Iterable


def _priority(item: str) -> int:
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    return ord(item) - ord("a") + 1


def _shared_items(first: str, *others: str) -> list[str]:
    """Items of ``first`` found in every other string, in order, without repeats."""
    return [c for c in dict.fromkeys(first) if all(c in other for other in others)]


def sum_item_priorities_of_both_compartments(lines: Iterable[str]) -> int:
    """Sum the priorities of items found in both halves of each rucksack."""
    total = 0
    for line in lines:
        half = len(line) // 2
        total += sum(_priority(c) for c in _shared_items(line[:half], line[half:]))
    return total


def sum_grouped_item_priorities_of_both_compartments(lines: Iterable[str]) -> int:
    """Sum the priorities of the items shared by each group of three rucksacks.

    A trailing incomplete group is ignored.
    """
    rucksacks = iter(lines)
    return sum(
        _priority(c)
        for first, second, third in zip(rucksacks, rucksacks, rucksacks)
        for c in _shared_items(third, first, second)
    )
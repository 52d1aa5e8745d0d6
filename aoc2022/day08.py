"""Treetop tree house: visibility and scenic scores in a square forest."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

Forest = Sequence[Sequence[int]]


@dataclass
class Tree:
    """A tree position with its scenic score; ordering compares the score only."""

    i: int
    j: int
    scenic_score: int = 0

    def __lt__(self, other: Tree) -> bool:
        return self.scenic_score < other.scenic_score

    def __le__(self, other: Tree) -> bool:
        return self.scenic_score <= other.scenic_score

    def __gt__(self, other: Tree) -> bool:
        return self.scenic_score > other.scenic_score

    def __ge__(self, other: Tree) -> bool:
        return self.scenic_score >= other.scenic_score


def _visible_along(
    forest: Forest, line: Iterable[tuple[int, int]], tallest: int
) -> Iterator[tuple[int, int]]:
    for i, j in line:
        if forest[i][j] > tallest:
            tallest = forest[i][j]
            yield i, j


def count_visible_trees(forest: Forest) -> int:
    """Count trees visible from outside the (square) forest."""
    n = len(forest)
    if n == 0:
        raise ValueError("forest is empty")
    last = n - 1
    inner = range(1, last)
    visible: set[tuple[int, int]] = set()
    for k in inner:
        visible.update(_visible_along(forest, ((k, j) for j in inner), forest[k][0]))
        visible.update(_visible_along(forest, ((k, j) for j in reversed(inner)), forest[k][last]))
        visible.update(_visible_along(forest, ((i, k) for i in inner), forest[0][k]))
        visible.update(_visible_along(forest, ((i, k) for i in reversed(inner)), forest[last][k]))
    return len(visible) + 4 * n - 4


def _viewing_distance(heights: Iterable[int], height: int) -> int:
    distance = 0
    for other in heights:
        distance += 1
        if other >= height:
            break
    return max(distance, 1)


def calculate_scenic_score(forest: Forest, tree: Tree) -> int:
    """Product of the viewing distances in four directions; 0 on the edge."""
    n = len(forest)
    if tree.i in (0, n - 1) or tree.j in (0, n - 1):
        return 0
    row = forest[tree.i]
    column = [forest[i][tree.j] for i in range(n)]
    height = row[tree.j]
    return (
        _viewing_distance(row[tree.j + 1:], height)
        * _viewing_distance(reversed(row[:tree.j]), height)
        * _viewing_distance(column[tree.i + 1:], height)
        * _viewing_distance(reversed(column[:tree.i]), height)
    )


def find_tree_with_highest_scenic_score(forest: Forest) -> Tree:
    """Return the first tree, in row order, with the highest scenic score."""
    best = Tree(0, 0, 0)
    n = len(forest)
    for i in range(n):
        for j in range(n):
            candidate = Tree(i, j)
            candidate.scenic_score = calculate_scenic_score(forest, candidate)
            if candidate > best:
                best = candidate
    return best
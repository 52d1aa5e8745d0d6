"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

from collections.abc import Iterable

# Shapes: 1 == rock, 2 == paper, 3 == scissors.


def _round_score(opponent: str, me: str) -> int:
    theirs = ord(opponent) - ord("A") + 1
    mine = ord(me) - ord("X") + 1
    if theirs == mine:
        return mine + 3
    if (mine - theirs + 3) % 3 == 1:
        return mine + 6
    return mine


def _new_round_score(opponent: str, outcome: str) -> int:
    theirs = ord(opponent) - ord("A") + 1
    wanted = ord(outcome) - ord("X") + 1  # 1 lose, 2 draw, 3 win
    if wanted == 1:
        return {1: 3, 2: 1}.get(theirs, 2)
    if wanted == 2:
        return theirs + 3
    return {1: 2, 2: 3}.get(theirs, 1) + 6


def calculate_strategy_score(rounds: Iterable[tuple[str, str]]) -> int:
    """Score rounds where the second column is the shape to play."""
    return sum(_round_score(opponent, me) for opponent, me in rounds)


def calculate_new_strategy_score(rounds: Iterable[tuple[str, str]]) -> int:
    """Score rounds where the second column is the desired outcome."""
    return sum(_new_round_score(opponent, outcome) for opponent, outcome in rounds)
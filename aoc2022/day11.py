"""Monkey in the middle: simulate monkeys throwing items around."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from aoc2022.util import map_to_int


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def _apply(op: str, a: int, b: int) -> int:
    if op == "*":
        return a * b
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "/":
        return 0 if b == 0 else _trunc_div(a, b)
    return a


def _thrown_to(line: str) -> int:
    target = map_to_int(line[line.rfind("monkey") + 7:])
    return target if target is not None else 0


class Monkey:
    """One monkey's items, worry operation and throwing rule."""

    def __init__(self, text: str) -> None:
        self.items: list[int] = []
        self.counter = 0
        self.test_divisor = 0
        self._if_true = 0
        self._if_false = 0
        self._update: Callable[[int], int] | None = None
        self._normalise: Callable[[int], int] = lambda value: _trunc_div(value, 3)

        lines = iter(text.splitlines())
        for line in lines:
            if line.startswith("  Starting items:"):
                self._init_starting_items(line)
            elif line.startswith("  Operation:"):
                self._init_operation(line)
            elif line.startswith("  Test:"):
                self._init_test(line, lines)

    def _init_starting_items(self, line: str) -> None:
        for token in line.split():
            value = map_to_int(token)
            if value is not None:
                self.items.append(value)

    def _init_operation(self, line: str) -> None:
        tokens = line.split() + [""] * 6
        op, value_str = tokens[4], tokens[5]
        operand = map_to_int(value_str)
        self._update = lambda item: _apply(op, item, item if operand is None else operand)

    def _init_test(self, line: str, lines: Iterator[str]) -> None:
        tokens = line.split() + [""] * 4
        divisor = map_to_int(tokens[3])
        self.test_divisor = divisor if divisor is not None else 0
        self._if_true = _thrown_to(next(lines, ""))
        self._if_false = _thrown_to(next(lines, ""))

    def test(self, item: int) -> int:
        """Return the monkey that ``item`` is thrown to."""
        return self._if_true if item % self.test_divisor == 0 else self._if_false

    def inspect_all_items(self) -> None:
        """Apply the operation and the normaliser to every item held."""
        if self._update is None:
            raise RuntimeError("monkey has no operation")
        update = self._update
        self.counter += len(self.items)
        self.items = [self._normalise(update(item)) for item in self.items]

    def set_worry_normaliser(self, normaliser: Callable[[int], int]) -> None:
        self._normalise = normaliser


def parse_input(data: str) -> list[Monkey]:
    """Parse monkey descriptions separated by blank lines."""
    return [Monkey(chunk) for chunk in data.split("\n\n") if chunk.strip()]


def simulate_rounds(monkeys: list[Monkey], n_rounds: int) -> None:
    for _ in range(n_rounds):
        for monkey in monkeys:
            monkey.inspect_all_items()
            thrown, monkey.items = monkey.items, []
            for item in thrown:
                monkeys[monkey.test(item)].items.append(item)


def set_normalised_worry(monkeys: list[Monkey]) -> None:
    """Keep worry levels bounded by the product of all test divisors."""
    product = 1
    for monkey in monkeys:
        product *= monkey.test_divisor
    for monkey in monkeys:
        monkey.set_worry_normaliser(lambda value: _trunc_mod(value, product))


def top_two_monkey_business(monkeys: list[Monkey]) -> int:
    """Sort ``monkeys`` by activity, busiest first, and multiply the top two counts."""
    if len(monkeys) < 2:
        raise ValueError("need at least two monkeys")
    monkeys.sort(key=lambda monkey: monkey.counter, reverse=True)
    return monkeys[0].counter * monkeys[1].counter
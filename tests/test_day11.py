import pytest

from aoc2022.day11 import (
    Monkey,
    parse_input,
    set_normalised_worry,
    simulate_rounds,
    top_two_monkey_business,
)

# (index, starting items, operation, divisor, target if true, target if false)
_MONKEYS = [
    (0, (79, 98), "* 19", 23, 2, 3),
    (1, (54, 65, 75, 74), "+ 6", 19, 2, 0),
    (2, (79, 60, 97), "* old", 13, 1, 3),
    (3, (74,), "+ 3", 17, 0, 1),
]


def _monkey_text(index, items, operation, divisor, if_true, if_false):
    indent = " " * 2
    deeper = " " * 4
    lines = [
        f"Monkey {index}:",
        f"{indent}Starting items: {', '.join(str(item) for item in items)}",
        f"{indent}Operation: new = old {operation}",
        f"{indent}Test: divisible by {divisor}",
        f"{deeper}If true: throw to monkey {if_true}",
        f"{deeper}If false: throw to monkey {if_false}",
    ]
    return "\n".join(lines) + "\n\n"


SHORT_INPUT = "".join(_monkey_text(*spec) for spec in _MONKEYS)


def test_part1_example():
    monkeys = parse_input(SHORT_INPUT)
    simulate_rounds(monkeys, 20)
    assert top_two_monkey_business(monkeys) == 10605


def test_part2_example():
    monkeys = parse_input(SHORT_INPUT)
    set_normalised_worry(monkeys)
    simulate_rounds(monkeys, 10000)
    assert top_two_monkey_business(monkeys) == 2713310158


def test_parse_input_counts_monkeys():
    monkeys = parse_input(SHORT_INPUT)
    assert len(monkeys) == 4
    assert monkeys[1].items == [54, 65, 75, 74]
    assert [monkey.test_divisor for monkey in monkeys] == [23, 19, 13, 17]


def test_monkey_test_chooses_target():
    monkey = parse_input(SHORT_INPUT)[0]
    assert monkey.test(46) == 2
    assert monkey.test(47) == 3


def test_inspect_all_items_applies_operation_and_relief():
    monkey = parse_input(SHORT_INPUT)[0]
    monkey.inspect_all_items()
    assert monkey.items == [500, 620]
    assert monkey.counter == 2


def test_square_operation():
    monkey = parse_input(SHORT_INPUT)[2]
    monkey.set_worry_normaliser(lambda value: value)
    monkey.inspect_all_items()
    assert monkey.items == [6241, 3600, 9409]


def test_top_two_needs_two_monkeys():
    with pytest.raises(ValueError):
        top_two_monkey_business([Monkey(_monkey_text(*_MONKEYS[0]))])


def test_monkey_without_operation_cannot_inspect():
    monkey = Monkey("Monkey 0:\n  Starting items: 1\n")
    with pytest.raises(RuntimeError):
        monkey.inspect_all_items()
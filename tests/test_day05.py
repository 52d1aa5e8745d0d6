import pytest

from aoc2022.day05 import Command, execute_crane_9000, execute_crane_9001, parse_input

SHORT_LINES = [
    "    [D]           \n",
    "[N] [C]           \n",
    "[Z] [M] [P]       \n",
    " 1   2   3        \n",
    "                  \n",
    "move 1 from 2 to 1\n",
    "move 3 from 1 to 3\n",
    "move 2 from 2 to 1\n",
    "move 1 from 1 to 2\n",
]


def _bottom_first():
    commands, stacks = parse_input(SHORT_LINES)
    return commands, [list(reversed(stack)) for stack in stacks]


def test_parse_input_stacks_top_first():
    commands, stacks = parse_input(SHORT_LINES)
    assert stacks == [["N", "Z"], ["D", "C", "M"], ["P"]]
    assert commands[0] == Command(count=1, source=1, target=0)
    assert len(commands) == 4


def test_part1_example():
    commands, stacks = _bottom_first()
    execute_crane_9000(stacks, commands)
    assert [stack[-1] for stack in stacks] == ["C", "M", "Z"]


def test_part2_example():
    commands, stacks = _bottom_first()
    execute_crane_9001(stacks, commands)
    assert [stack[-1] for stack in stacks] == ["M", "C", "D"]


def test_crane_9001_keeps_order():
    stacks = [["A", "B", "C"], []]
    execute_crane_9001(stacks, [Command(2, 0, 1)])
    assert stacks == [["A"], ["B", "C"]]


def test_crane_9000_reverses_order():
    stacks = [["A", "B", "C"], []]
    execute_crane_9000(stacks, [Command(2, 0, 1)])
    assert stacks == [["A"], ["C", "B"]]


def test_command_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Command.parse("move one from 2 to 1")


@pytest.mark.parametrize("crane", [execute_crane_9000, execute_crane_9001])
def test_moving_too_many_crates_raises(crane):
    stacks = [["A"], []]
    with pytest.raises(IndexError):
        crane(stacks, [Command(2, 0, 1)])
    assert stacks == [["A"], []]
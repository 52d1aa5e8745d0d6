import pytest

from aoc2022.day10 import (
    CPU,
    CRT,
    Clock,
    InstructionType,
    capture_register_x_values_if,
    generate_crt_output,
    parse_input,
    transform_to_signal_strengths,
)

SHORT_INSTRUCTIONS = """\
addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop
""".splitlines()

EXPECTED_CRT_OUTPUT = (
    "##..##..##..##..##..##..##..##..##..##..\n"
    "###...###...###...###...###...###...###.\n"
    "####....####....####....####....####....\n"
    "#####.....#####.....#####.....#####.....\n"
    "######......######......######......####\n"
    "#######.......#######.......#######.....\n"
)


def _interesting(cycle):
    return cycle == 20 or (cycle >= 20 and (cycle - 20) % 40 == 0)


def test_part1_example():
    instructions = parse_input(SHORT_INSTRUCTIONS)
    computed = capture_register_x_values_if(instructions, _interesting)
    expected = [(20, 21), (60, 19), (100, 18), (140, 21), (180, 16), (220, 18)]
    assert computed == expected
    assert sum(transform_to_signal_strengths(computed)) == sum(
        transform_to_signal_strengths(expected)
    )


def test_part2_example():
    instructions = parse_input(SHORT_INSTRUCTIONS)
    assert generate_crt_output(instructions) == EXPECTED_CRT_OUTPUT


def test_small_program_register_per_cycle():
    instructions = parse_input(["noop", "addx 3", "addx -5"])
    captured = capture_register_x_values_if(instructions, lambda cycle: True)
    assert captured == [(1, 1), (2, 1), (3, 1), (4, 4), (5, 4)]


def test_parse_input_ignores_unknown_lines():
    assert parse_input(["noop", "jump 3", "", "addx -7"]) == [
        (InstructionType.NOOP, None),
        (InstructionType.ADDX, -7),
    ]


def test_cpu_runs_to_completion():
    cpu = CPU()
    cpu.load_instructions(parse_input(["addx 3", "addx -5"]))
    steps = 0
    while not cpu.is_finished():
        cpu.advance()
        steps += 1
    assert steps == 4
    assert cpu.register_x == -1


def test_clock_reports_increasing_cycles():
    seen = []
    clock = Clock(seen.append)
    for _ in range(3):
        clock.advance()
    assert seen == [1, 2, 3]
    assert clock.cycle == 3


@pytest.mark.parametrize("sprite, expected", [(0, "#"), (1, "#"), (2, "."), (-1, "#")])
def test_crt_lights_first_pixel_near_sprite(sprite, expected):
    crt = CRT()
    crt.update(1, sprite)
    assert crt.render()[0] == expected
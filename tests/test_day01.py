from aoc2022.day01 import top_1_elf_calories, top_3_elf_calories
from aoc2022.util import map_to_ints

SHORT_LINES = [
    "1000", "2000", "3000", "",
    "4000", "",
    "5000", "6000", "",
    "7000", "8000", "9000", "",
    "10000",
]


def test_part1():
    assert top_1_elf_calories(map_to_ints(SHORT_LINES)) == 24000


def test_part2():
    assert top_3_elf_calories(map_to_ints(SHORT_LINES)) == 45000


def test_trailing_blank_line_gives_same_result():
    calories = map_to_ints(SHORT_LINES + [""])
    assert top_1_elf_calories(calories) == 24000
    assert top_3_elf_calories(calories) == 45000


def test_empty_input():
    assert top_1_elf_calories([]) == 0
    assert top_3_elf_calories([]) == 0
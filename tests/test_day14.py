import pytest

from aoc2022.common import Coordinates
from aoc2022.day14 import (
    CHAR_ROCK,
    Scan,
    Trace,
    parse_input,
    part1,
    part2,
)

EXAMPLE = """
498,4 -> 498,6 -> 496,6
503,4 -> 502,4 -> 502,9 -> 494,9
"""


@pytest.fixture
def scan():
    return parse_input(EXAMPLE)


def test_part1_example(scan):
    assert part1(scan) == 24


def test_part2_example(scan):
    assert part2(scan) == 93


def test_parts_do_not_change_the_scan(scan):
    before = scan.render()
    assert part1(scan) == 24
    assert part2(scan) == 93
    assert scan.render() == before
    assert part1(scan) == 24


def test_parse_from_lines_matches_string(scan):
    other = parse_input(EXAMPLE.splitlines())
    assert other.render() == scan.render()
    assert len(other.rock_traces) == 2


def test_trace_parse_path():
    trace = Trace.parse("498,4 -> 498,6 -> 496,6")
    assert trace.path == [
        Coordinates(4, 498),
        Coordinates(5, 498),
        Coordinates(6, 498),
        Coordinates(6, 496),
        Coordinates(6, 497),
        Coordinates(6, 498),
    ]


def test_trace_single_point_has_no_cells():
    assert Trace.parse("500,3").path == []


def test_render_example(scan):
    assert scan.render() == (
        "......+...\n"
        "..........\n"
        "..........\n"
        "..........\n"
        "....#...##\n"
        "....#...#.\n"
        "..###...#.\n"
        "........#.\n"
        "........#.\n"
        "#########.\n"
    )


def test_bounding_of_example(scan):
    box = scan.bounding
    assert (box.min_row, box.max_row, box.min_col, box.max_col) == (0, 9, 494, 503)


def test_set_floor_marks_rock_and_extends_bounds(scan):
    scan.set_floor(11)
    assert scan[(11, 0)] == CHAR_ROCK
    assert scan[Coordinates(11, 999)] == CHAR_ROCK
    assert scan.bounding.max_row == 11


def test_copy_is_independent(scan):
    clone = scan.copy()
    clone.set_floor(20)
    assert clone[(20, 500)] == CHAR_ROCK
    assert scan[(20, 500)] == "."


def test_out_of_bounds_access_raises():
    with pytest.raises(IndexError):
        Scan()[(0, 1000)]


def test_new_scan_has_start_marker():
    assert Scan()[(0, 500)] == "+"
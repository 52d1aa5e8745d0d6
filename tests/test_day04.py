import pytest

from aoc2022.day04 import (
    SectionRange,
    map_to_ranges,
    num_of_fully_contained_ranges,
    num_of_overlapping_ranges,
)

SHORT_LINES = ["2-4,6-8", "2-3,4-5", "5-7,7-9", "2-8,3-7", "6-6,4-6", "2-6,4-8"]


def test_part1_example():
    assert num_of_fully_contained_ranges(map_to_ranges(SHORT_LINES)) == 2


def test_part2_example():
    assert num_of_overlapping_ranges(map_to_ranges(SHORT_LINES)) == 4


def test_map_to_ranges_parses_pairs():
    assert map_to_ranges(["2-4,6-8"]) == [(SectionRange(2, 4), SectionRange(6, 8))]


def test_sub_range_and_overlap():
    inner = SectionRange(3, 7)
    outer = SectionRange(2, 8)
    assert inner.is_sub_range_to(outer)
    assert not outer.is_sub_range_to(inner)
    assert outer.is_overlapping(SectionRange(8, 9))
    assert not SectionRange(2, 3).is_overlapping(SectionRange(4, 5))


@pytest.mark.parametrize("text", ["2-", "a-b", "2:4"])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        SectionRange.parse(text)


def test_map_to_ranges_requires_comma():
    with pytest.raises(ValueError):
        map_to_ranges(["2-4 6-8"])
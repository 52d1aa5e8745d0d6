import io

import pytest

from aoc2022.day06 import start_of_message_marker, start_of_n_marker, start_of_packet_marker

PACKETS = [
    "mjqjpqmgbljsphdztnvjfqwrcgsmlb",
    "bvwbjplbgvbhsrlpgdmjqwftvncz",
    "nppdvjthqldpwncqszvftbrmjlhg",
    "nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg",
    "zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw",
]


@pytest.mark.parametrize("packet, expected", zip(PACKETS, [7, 5, 6, 10, 11]))
def test_packet_marker(packet, expected):
    assert start_of_packet_marker(packet) == expected


@pytest.mark.parametrize("packet, expected", zip(PACKETS, [19, 23, 23, 29, 26]))
def test_message_marker(packet, expected):
    assert start_of_message_marker(packet) == expected


def test_no_marker_returns_zero():
    assert start_of_packet_marker("aabbaabb") == 0


def test_text_stream_is_accepted():
    stream = io.StringIO("mjqj\npqmgbljsphdztnvjfqwrcgsmlb\n")
    assert start_of_packet_marker(stream) == 7
"""Tuning trouble: find the first run of distinct characters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _characters(packet: str | Iterable[str]) -> Iterable[str]:
    chunks = [packet] if isinstance(packet, str) else packet
    return (char for chunk in chunks for char in chunk if not char.isspace())


def start_of_n_marker(packet: str | Iterable[str], n_distinct: int) -> int:
    """Return the 1-based position ending the first window of ``n_distinct``
    different characters, or 0 when there is none.

    ``packet`` is a string or an iterable of strings such as a text file;
    whitespace is skipped.
    """
    window: deque[str] = deque()
    for marker, char in enumerate(_characters(packet), start=1):
        window.append(char)
        if len(window) == n_distinct:
            if len(set(window)) == n_distinct:
                return marker
            window.popleft()
    return 0


def start_of_packet_marker(packet: str | Iterable[str]) -> int:
    return start_of_n_marker(packet, 4)


def start_of_message_marker(packet: str | Iterable[str]) -> int:
    return start_of_n_marker(packet, 14)
"""Cathode-ray tube: run a tiny CPU and draw with its X register."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable, Iterable

from aoc2022.util import map_to_int

Instruction = tuple["InstructionType", "int | None"]
CapturedRegisterValue = tuple[int, int]

PIXEL_ON = "#"
PIXEL_OFF = "."
WIDTH = 40
HEIGHT = 6
N_PIXELS = WIDTH * HEIGHT


class InstructionType(enum.Enum):
    ADDX = "addx"
    NOOP = "noop"


class Clock:
    """Counts cycles and calls ``on_tick`` with each new cycle number."""

    def __init__(self, on_tick: Callable[[int], None]) -> None:
        self.on_tick = on_tick
        self.cycle = 0

    def advance(self) -> None:
        self.cycle += 1
        self.on_tick(self.cycle)


class CRT:
    """A 40x6 screen lit where the sprite covers the pixel being drawn."""

    def __init__(self) -> None:
        self._pixels = [PIXEL_OFF] * N_PIXELS

    def update(self, cycle: int, sprite_middle: int) -> None:
        pixel = cycle % (N_PIXELS + 1) - 1
        if pixel < 0:
            return
        pixel_x = pixel % WIDTH
        lit = sprite_middle - 1 <= pixel_x <= sprite_middle + 1
        self._pixels[pixel] = PIXEL_ON if lit else PIXEL_OFF

    def render(self) -> str:
        """Return the screen as text, one line per row, each ending in a newline."""
        return "".join(
            "".join(self._pixels[start:start + WIDTH]) + "\n"
            for start in range(0, N_PIXELS, WIDTH)
        )


class CPU:
    """Executes ``addx`` in two cycles and ``noop`` in one."""

    def __init__(self) -> None:
        self.register_x = 1
        self._available_in = 0
        self._queue: deque[Instruction] = deque()

    def load_instructions(self, instructions: Iterable[Instruction]) -> None:
        self._queue.extend(instructions)

    def advance(self) -> None:
        """Run one cycle of the instruction at the front of the queue."""
        if self.is_finished():
            return
        kind, value = self._queue[0]
        if self._available_in > 1:
            self._available_in -= 1
        elif self._available_in == 1:
            self._available_in -= 1
            if kind is InstructionType.ADDX:
                self.register_x += value or 0
                self._queue.popleft()
        elif kind is InstructionType.ADDX:
            self._available_in += 1
        else:
            self._queue.popleft()

    def is_finished(self) -> bool:
        return not self._queue


def parse_input(lines: Iterable[str]) -> list[Instruction]:
    """Parse ``noop`` and ``addx <n>`` lines; other lines are ignored."""
    instructions: list[Instruction] = []
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "noop":
            instructions.append((InstructionType.NOOP, None))
        elif parts[0] == "addx":
            value = map_to_int(parts[1]) if len(parts) > 1 else None
            instructions.append((InstructionType.ADDX, value))
    return instructions


def transform_to_signal_strengths(values: Iterable[CapturedRegisterValue]) -> list[int]:
    return [cycle * value for cycle, value in values]


def _run(instructions: Iterable[Instruction], observe: Callable[[int, int], None]) -> None:
    cpu = CPU()
    cpu.load_instructions(instructions)

    def on_tick(cycle: int) -> None:
        observe(cycle, cpu.register_x)
        cpu.advance()

    clock = Clock(on_tick)
    while not cpu.is_finished():
        clock.advance()


def capture_register_x_values_if(
    instructions: Iterable[Instruction], predicate: Callable[[int], bool]
) -> list[CapturedRegisterValue]:
    """Return ``(cycle, X)`` during every cycle for which ``predicate`` holds."""
    captured: list[CapturedRegisterValue] = []

    def observe(cycle: int, register_x: int) -> None:
        if predicate(cycle):
            captured.append((cycle, register_x))

    _run(instructions, observe)
    return captured


def generate_crt_output(instructions: Iterable[Instruction]) -> str:
    """Run the program and return what the screen shows."""
    crt = CRT()
    _run(instructions, crt.update)
    return crt.render()
# aoc2022

Solutions to the first fifteen days of the 2022 Advent of Code puzzles.
Each day is one module, `aoc2022.day01` to `aoc2022.day15`. A module takes
the puzzle input as Python data, usually a list of lines or a string, and
returns the answer.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Using the library

Reading an input file:

```python
from aoc2022.inputfile import PuzzleFile
from aoc2022.util import map_to_ints
from aoc2022.day01 import top_1_elf_calories, top_3_elf_calories

with PuzzleFile("day01.txt") as puzzle:
    calories = map_to_ints(puzzle.read_lines())

print(top_1_elf_calories(calories))
print(top_3_elf_calories(calories))
```

`PuzzleFile` can also read the whole file as a string (`read_string`), as a
grid of digits (`read_matrix`, used by day 8) or as pairs of non-blank
characters (`read_pairs`, used by day 2). A file that cannot be opened
raises `OSError`. `get_day_file_path(day)` in `aoc2022.util` gives the
conventional location of a day's input file.

Other days work the same way:

```python
from aoc2022 import day07, day15

tree = day07.DirectoryTree(day07.Directory(None, "/"))
for line in lines:
    day07.process_command_line(line, tree)
sums = tree.root.get_recursive_subdirectory_sizes()
print(day07.sum_if(sums, 100000))

scan = day15.load_input(sensor_lines)
print(day15.part1(scan, 2000000))
```

Day 13 (`parse_input`, `part1`, `part2`), day 14 (`parse_input`, `part1`,
`part2`) and day 15 (`load_input`, `part1`, `part2`) accept either a list of
lines or one string. Day 10's `generate_crt_output` returns the screen as
text, and day 12's `format_map` renders a distance map as coloured terminal
text.

The shared helpers in `aoc2022.common`, namely `Range`, `RangeSet`,
`Coordinates`, `BoundingBox` and `Grid`, hold half-open intervals, grid
coordinates and a two-dimensional grid that can be indexed with negative
coordinates.

## What the package does not do

There is no command-line program: the package installs no command, and
the solutions are used by importing them from Python.

## Tests

```
pytest
```
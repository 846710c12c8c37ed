# aoc2023

Solutions to a 2023 season of daily programming puzzles. Every puzzle lives
in its own module and exposes one function per part. Each of these functions
takes the puzzle input as a list of lines, without line endings, and returns
the answer as an integer.

| Module            | Puzzle                 | Entry points                                                          |
|-------------------|------------------------|-----------------------------------------------------------------------|
| `aoc2023.day03`   | Gear ratios            | `gear_ratios_part1`, `gear_ratios_part2`                              |
| `aoc2023.day04`   | Scratch cards          | `scratch_cards_part1`, `scratch_cards_part2`, `scratch_cards_part2_optimized` |
| `aoc2023.day05`   | Seed almanac           | `almanac_part1`, `almanac_part2`                                      |
| `aoc2023.day06`   | Boat races             | `wait_for_it_part1`, `wait_for_it_part2`                              |
| `aoc2023.day07`   | Camel cards            | `camel_cards_part1`, `camel_cards_part2`                              |
| `aoc2023.day08`   | Haunted wasteland      | `haunted_wasteland_part1`, `haunted_wasteland_part2`                  |
| `aoc2023.day09`   | Mirage maintenance     | `mirage_maintenance_part1`, `mirage_maintenance_part2`                |
| `aoc2023.day20`   | Pulse propagation      | `pulse_propagation_part1`, `pulse_propagation_part2`                  |
| `aoc2023.day21`   | Step counter           | `step_counter_part1`, `step_counter_part2`                            |
| `aoc2023.day22`   | Sand slabs             | `sand_slabs_part1`, `sand_slabs_part2`                                |
| `aoc2023.day23`   | A long walk            | `a_long_walk_part1`, `a_long_walk_part2`                              |
| `aoc2023.day24`   | Hailstones             | `never_tell_me_the_odds_part1`, `never_tell_me_the_odds_part2`        |
| `aoc2023.day25`   | Snowverload            | `snowverload_part1`                                                   |

The modules also expose their parsers and building blocks (for example
`day05.parse_almanac`, `day07.Hand.hand_type`, `day20.parse_modules`,
`day23.build_graph`, `day25.Graph.split`), which can be used on their own.

`never_tell_me_the_odds_part1` takes optional `min_bound` and `max_bound`
arguments for the test area; they default to 200000000000000 and
400000000000000.

## Installation

```
pip install .
```

The package has no runtime dependencies. Python 3.10 or later is required.

## Using it as a library

```python
from aoc2023.day09 import mirage_maintenance_part1, mirage_maintenance_part2

lines = [
    "0 3 6 9 12 15",
    "1 3 6 10 15 21",
    "10 13 16 21 30 45",
]

print(mirage_maintenance_part1(lines))  # 114
print(mirage_maintenance_part2(lines))  # 2
```

To work on a puzzle input stored in a file, read it with
`aoc2023.util.read_input`, which returns the file's lines:

```python
from aoc2023.util import read_input, timed
from aoc2023.day07 import camel_cards_part1

lines = read_input("input")
result = timed("camel_cards_part1", lambda: camel_cards_part1(lines))
```

`timed` runs the given function, logs its result and running time at INFO
level through the standard `logging` module, and returns the result.
`aoc2023.util.lcm` gives the least common multiple of an iterable of integers.

Bad input raises an exception (usually `ValueError`) rather than returning a
made-up answer.

## Command line

Installing the package provides the `aoc2023` command. It reads an input file
and runs every solution of the chosen day, printing one `name: result` line
per part:

```
aoc2023 9 --input input.txt
```

Options:

- `day`: the puzzle day; one of 3–9 and 20–25.
- `-i`, `--input`: the input file (default: `input` in the current directory).
- `-v`, `--verbose`: also log each solution's result and running time.

If the file cannot be read or the input is malformed, the command prints an
error to standard error and exits with status 1. See all options with:

```
aoc2023 --help
```

## What it does not do

Only the puzzles listed above are included; there are no solutions for the
other days. The package does not download puzzle inputs: they have to be
supplied as files or as lists of lines.

## Running the tests

```
pip install ".[test]"
pytest
```
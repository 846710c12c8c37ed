"""Command-line entry point: run one day's solutions against an input file."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from functools import partial

from aoc2023 import (
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)
from aoc2023.util import read_input, timed

Solution = Callable[[list[str]], int]

SOLUTIONS: dict[int, tuple[tuple[str, Solution], ...]] = {
    3: (
        ("gear_ratios_part1", day03.gear_ratios_part1),
        ("gear_ratios_part2", day03.gear_ratios_part2),
    ),
    4: (
        ("scratch_cards_part1", day04.scratch_cards_part1),
        ("scratch_cards_part2", day04.scratch_cards_part2),
        ("scratch_cards_part2_optimized", day04.scratch_cards_part2_optimized),
    ),
    5: (
        ("almanac_part1", day05.almanac_part1),
        ("almanac_part2", day05.almanac_part2),
    ),
    6: (
        ("wait_for_it_part1", day06.wait_for_it_part1),
        ("wait_for_it_part2", day06.wait_for_it_part2),
    ),
    7: (
        ("camel_cards_part1", day07.camel_cards_part1),
        ("camel_cards_part2", day07.camel_cards_part2),
    ),
    8: (
        ("haunted_wasteland_part1", day08.haunted_wasteland_part1),
        ("haunted_wasteland_part2", day08.haunted_wasteland_part2),
    ),
    9: (
        ("mirage_maintenance_part1", day09.mirage_maintenance_part1),
        ("mirage_maintenance_part2", day09.mirage_maintenance_part2),
    ),
    20: (
        ("pulse_propagation_part1", day20.pulse_propagation_part1),
        ("pulse_propagation_part2", day20.pulse_propagation_part2),
    ),
    21: (
        ("step_counter_part1", day21.step_counter_part1),
        ("step_counter_part2", day21.step_counter_part2),
    ),
    22: (
        ("sand_slabs_part1", day22.sand_slabs_part1),
        ("sand_slabs_part2", day22.sand_slabs_part2),
    ),
    23: (
        ("a_long_walk_part1", day23.a_long_walk_part1),
        ("a_long_walk_part2", day23.a_long_walk_part2),
    ),
    24: (
        ("never_tell_me_the_odds_part1", day24.never_tell_me_the_odds_part1),
        ("never_tell_me_the_odds_part2", day24.never_tell_me_the_odds_part2),
    ),
    25: (("snowverload_part1", day25.snowverload_part1),),
}


def main(argv: list[str] | None = None) -> int:
    """Run every solution of the chosen day and print each result."""
    parser = argparse.ArgumentParser(
        prog="aoc2023", description="Solve one day's puzzles from an input file."
    )
    parser.add_argument("day", type=int, choices=sorted(SOLUTIONS), help="puzzle day")
    parser.add_argument("-i", "--input", default="input", help="input file (default: input)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log running times")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        lines = read_input(args.input)
    except OSError as error:
        print(f"aoc2023: {error}", file=sys.stderr)
        return 1

    for name, solve in SOLUTIONS[args.day]:
        try:
            result = timed(name, partial(solve, lines))
        except (ValueError, KeyError, IndexError) as error:
            print(f"aoc2023: {name}: {error}", file=sys.stderr)
            return 1
        print(f"{name}: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
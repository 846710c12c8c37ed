"""Wait For It: counting the ways to beat a boat race record."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Race:
    time: int
    record: int


def _header_fields(lines: list[str]) -> tuple[list[str], list[str]]:
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    try:
        times = lines[0].split(":")[1].split()
        records = lines[1].split(":")[1].split()
    except IndexError:
        raise ValueError("missing ':' in race header") from None
    return times, records


def parse_races(lines: list[str]) -> list[Race]:
    """One race per column of the time and distance lines."""
    times, records = _header_fields(lines)
    if len(records) < len(times):
        raise ValueError("fewer records than race times")
    return [Race(time=int(time), record=int(record)) for time, record in zip(times, records)]


def parse_single_race(lines: list[str]) -> Race:
    """A single race whose numbers are the columns joined together."""
    times, records = _header_fields(lines)
    return Race(time=int("".join(times)), record=int("".join(records)))


def _wins(race: Race) -> int:
    root = math.sqrt(race.time * race.time - 4 * race.record)
    first = math.floor((-race.time + root) / -2) + 1
    last = math.ceil((-race.time - root) / -2) - 1
    return last - first + 1


def wait_for_it(races: list[Race]) -> int:
    """Product of the number of winning hold times of every race; 0 for no races."""
    result = 0
    for race in races:
        wins = _wins(race)
        result = wins if result == 0 else result * wins
    return result


def wait_for_it_part1(lines: list[str]) -> int:
    return wait_for_it(parse_races(lines))


def wait_for_it_part2(lines: list[str]) -> int:
    return wait_for_it([parse_single_race(lines)])
"""Mirage Maintenance: extrapolating sequences through repeated differences."""

from __future__ import annotations

from itertools import pairwise


def parse_histories(lines: list[str]) -> list[list[int]]:
    """One list of whitespace-separated integers per line."""
    return [[int(field) for field in line.split()] for line in lines]


def derivatives(history: list[int]) -> list[list[int]]:
    """The history followed by its successive differences, down to an all-zero row."""
    levels = [list(history)]
    source = levels[0]
    while any(value != 0 for value in source):
        source = [after - before for before, after in pairwise(source)]
        levels.append(source)
    return levels


def extrapolate(history: list[int]) -> tuple[int, int]:
    """The values one step before the first and one step after the last."""
    levels = derivatives(history)
    left = right = 0
    for level in reversed(levels[:-1]):
        right = level[-1] + right
        left = level[0] - left
    return left, right


def mirage_maintenance_part1(lines: list[str]) -> int:
    """Sum of the next value of every history."""
    return sum(extrapolate(history)[1] for history in parse_histories(lines))


def mirage_maintenance_part2(lines: list[str]) -> int:
    """Sum of the previous value of every history."""
    return sum(extrapolate(history)[0] for history in parse_histories(lines))
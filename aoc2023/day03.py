"""Gear Ratios: part numbers next to symbols and gears next to two parts."""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass

_PART_NUMBER = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class GearLocation:
    row: int
    col: int


@dataclass(frozen=True)
class GearPart:
    number: int
    row: int
    start: int
    end: int  # exclusive


def is_symbol(char: str) -> bool:
    """Whether a schematic character is a symbol (neither '.' nor a digit)."""
    return char != "." and not char.isdigit()


def extract_parts(entry: str, row: int) -> list[GearPart]:
    """All numbers on one schematic line, with their column spans."""
    return [
        GearPart(number=int(match.group()), row=row, start=match.start(), end=match.end())
        for match in _PART_NUMBER.finditer(entry)
    ]


def _neighbour_span(part: GearPart, line: str) -> tuple[int, str]:
    start = max(part.start - 1, 0)
    end = min(part.end, len(line) - 1)
    return start, line[start : end + 1]


def _symbol_in_row(part: GearPart, lines: list[str], index: int) -> bool:
    if not 0 <= index < len(lines):
        return False
    _, span = _neighbour_span(part, lines[index])
    return any(is_symbol(char) for char in span)


def _symbol_at(line: str, index: int) -> bool:
    return 0 <= index < len(line) and is_symbol(line[index])


def gear_ratios_part1(lines: list[str]) -> int:
    """Sum of all part numbers adjacent to a symbol."""
    total = 0
    for row, line in enumerate(lines):
        for part in extract_parts(line, row):
            if (
                _symbol_in_row(part, lines, row - 1)
                or _symbol_in_row(part, lines, row + 1)
                or _symbol_at(line, part.start - 1)
                or _symbol_at(line, part.end)
            ):
                total += part.number
    return total


def _gears_in_row(part: GearPart, lines: list[str], index: int) -> list[GearLocation]:
    if not 0 <= index < len(lines):
        return []
    start, span = _neighbour_span(part, lines[index])
    return [
        GearLocation(row=index, col=start + offset)
        for offset, char in enumerate(span)
        if char == "*"
    ]


def _gear_at(line: str, index: int, row: int) -> list[GearLocation]:
    if _symbol_at(line, index):
        return [GearLocation(row=row, col=index)]
    return []


def _find_gears(part: GearPart, lines: list[str]) -> list[GearLocation]:
    line = lines[part.row]
    return [
        *_gears_in_row(part, lines, part.row - 1),
        *_gears_in_row(part, lines, part.row + 1),
        *_gear_at(line, part.start - 1, part.row),
        *_gear_at(line, part.end, part.row),
    ]


def gear_ratios_part2(lines: list[str]) -> int:
    """Sum of products of the two parts touching each gear that has exactly two."""
    parts_by_gear: dict[GearLocation, list[GearPart]] = defaultdict(list)
    for row, line in enumerate(lines):
        for part in extract_parts(line, row):
            for gear in _find_gears(part, lines):
                parts_by_gear[gear].append(part)

    return sum(
        parts[0].number * parts[1].number
        for parts in parts_by_gear.values()
        if len(parts) == 2
    )
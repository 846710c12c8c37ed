"""Sand Slabs: dropping bricks and counting which can be disintegrated."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_GRID_SIZE = 10
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Coordinates:
    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Brick:
    start: Coordinates
    end: Coordinates


def _as_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"{text!r} should be an int")
    return int(text)


def _coordinates(text: str) -> Coordinates:
    fields = text.split(",")
    if len(fields) < 3:
        raise ValueError(f"expected three coordinates: {text!r}")
    return Coordinates(*(_as_int(field) for field in fields[:3]))


def parse_bricks(lines: list[str]) -> list[Brick]:
    """Parse 'x,y,z~x,y,z' lines, ordered by the lower end's height."""
    bricks = []
    for line in lines:
        parts = line.split("~")
        if len(parts) < 2:
            raise ValueError(f"missing '~' in {line!r}")
        bricks.append(Brick(_coordinates(parts[0]), _coordinates(parts[1])))
    return sorted(bricks, key=lambda brick: brick.start.z)


def _height(heights: list[list[int]], x: int, y: int) -> int:
    if not (0 <= x < _GRID_SIZE and 0 <= y < _GRID_SIZE):
        raise ValueError(f"position ({x}, {y}) outside the {_GRID_SIZE}x{_GRID_SIZE} floor")
    return heights[x][y]


def _settle(heights: list[list[int]], start: Coordinates, end: Coordinates) -> tuple[int, int]:
    """Drop one brick onto the height map; return its new lower and upper z."""
    if start.x == end.x and start.z == end.z:
        cells = [(start.x, y) for y in range(start.y, end.y + 1)]
    elif start.y == end.y and start.z == end.z:
        cells = [(x, start.y) for x in range(start.x, end.x + 1)]
    elif start.x == end.x and start.y == end.y:
        bottom = _height(heights, start.x, start.y) + 1
        top = bottom + end.z - start.z
        heights[start.x][start.y] = top
        return bottom, top
    else:
        return 0, 0

    level = max((_height(heights, x, y) for x, y in cells), default=0) + 1
    for x, y in cells:
        heights[x][y] = level
    return level, level


def settle_all(bricks: list[Brick]) -> int:
    """Let every brick fall as far as it can, in place; return how many moved."""
    heights = [[0] * _GRID_SIZE for _ in range(_GRID_SIZE)]
    moved = 0
    for index, brick in enumerate(bricks):
        bottom, top = _settle(heights, brick.start, brick.end)
        settled = Brick(replace(brick.start, z=bottom), replace(brick.end, z=top))
        if settled != brick:
            bricks[index] = settled
            moved += 1
    return moved


def _without_each(bricks: list[Brick]):
    for index in range(len(bricks)):
        yield bricks[:index] + bricks[index + 1 :]


def disintegrate_counting(bricks: list[Brick]) -> int:
    """How many bricks can be removed without any other brick falling."""
    return sum(1 for remaining in _without_each(bricks) if settle_all(remaining) == 0)


def disintegrate_summing(bricks: list[Brick]) -> int:
    """Total number of bricks that fall, summed over removing each brick in turn."""
    return sum(settle_all(remaining) for remaining in _without_each(bricks))


def sand_slabs_part1(lines: list[str]) -> int:
    bricks = parse_bricks(lines)
    settle_all(bricks)
    return disintegrate_counting(bricks)


def sand_slabs_part2(lines: list[str]) -> int:
    bricks = parse_bricks(lines)
    settle_all(bricks)
    return disintegrate_summing(bricks)
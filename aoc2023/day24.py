"""Never Tell Me The Odds: crossing hailstone paths and the rock that hits them all."""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass
from itertools import combinations

MIN_AREA_BOUND = 200000000000000
MAX_AREA_BOUND = 400000000000000
_FAR = 100000000000000
_VELOCITY_LIMIT = 1000
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Hailstone:
    x: int
    y: int
    z: int
    vx: int
    vy: int
    vz: int


def _as_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"{text!r} should be an int")
    return int(text)


def _triple(text: str) -> tuple[int, int, int]:
    fields = text.split(", ")
    if len(fields) < 3:
        raise ValueError(f"expected three values: {text!r}")
    first, second, third = (_as_int(field) for field in fields[:3])
    return first, second, third


def parse_hailstones(lines: list[str]) -> list[Hailstone]:
    """Parse 'x, y, z @ vx, vy, vz' lines."""
    stones = []
    for line in lines:
        parts = line.split(" @ ")
        if len(parts) < 2:
            raise ValueError(f"missing ' @ ' in {line!r}")
        stones.append(Hailstone(*_triple(parts[0]), *_triple(parts[1])))
    return stones


def intersect(first: Hailstone, second: Hailstone) -> tuple[float, float] | None:
    """Where the two paths cross in the x-y plane, or None if they are parallel."""
    x1, y1 = float(first.x), float(first.y)
    x2, y2 = float(first.x + _FAR * first.vx), float(first.y + _FAR * first.vy)
    x3, y3 = float(second.x), float(second.y)
    x4, y4 = float(second.x + _FAR * second.vx), float(second.y + _FAR * second.vy)

    denominator = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if denominator == 0:
        return None
    a = x1 * y2 - y1 * x2
    b = x3 * y4 - y3 * x4
    return (
        (a * (x3 - x4) - (x1 - x2) * b) / denominator,
        (a * (y3 - y4) - (y1 - y2) * b) / denominator,
    )


def _time(stone: Hailstone, x: float) -> float:
    distance = x - float(stone.x)
    if stone.vx == 0:
        return math.nan if distance == 0 else math.copysign(math.inf, distance)
    return distance / stone.vx


def never_tell_me_the_odds_part1(
    lines: list[str], min_bound: int = MIN_AREA_BOUND, max_bound: int = MAX_AREA_BOUND
) -> int:
    """Pairs whose future paths cross inside the test area."""
    stones = parse_hailstones(lines)
    count = 0
    for first, second in combinations(stones, 2):
        crossing = intersect(first, second)
        if crossing is None:
            continue
        x, y = crossing
        if not (min_bound <= x <= max_bound and min_bound <= y <= max_bound):
            continue
        if _time(first, x) >= 0 and _time(second, x) >= 0:
            count += 1
    return count


def rock_velocity(velocities: dict[int, list[int]]) -> int:
    """The first velocity in [-1000, 1000] consistent with stones sharing a velocity."""
    candidates = list(range(-_VELOCITY_LIMIT, _VELOCITY_LIMIT + 1))
    for velocity, positions in velocities.items():
        if len(positions) < 2:
            continue
        gap = positions[0] - positions[1]
        candidates = [
            v for v in candidates if v != velocity and gap % (v - velocity) == 0
        ]
    if not candidates:
        raise ValueError("no consistent rock velocity")
    return candidates[0]


def _velocity_groups(stones: list[Hailstone]) -> tuple[dict[int, list[int]], ...]:
    groups: tuple[dict[int, list[int]], ...] = ({}, {}, {})
    for stone in stones:
        axes = ((stone.x, stone.vx), (stone.y, stone.vy), (stone.z, stone.vz))
        for group, (position, velocity) in zip(groups, axes):
            group.setdefault(velocity, []).append(position)
    return groups


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def never_tell_me_the_odds_part2(lines: list[str]) -> int:
    """Sum of the rock's starting coordinates, by majority vote over stone pairs."""
    stones = parse_hailstones(lines)
    rvx, rvy, rvz = (rock_velocity(group) for group in _velocity_groups(stones))

    votes: Counter[int] = Counter()
    for a, b in combinations(stones, 2):
        a_dx, b_dx = a.vx - rvx, b.vx - rvx
        if a_dx == 0 or b_dx == 0:
            continue
        ma = (a.vy - rvy) / a_dx
        mb = (b.vy - rvy) / b_dx
        if ma == mb:
            continue
        ca = a.y - ma * a.x
        cb = b.y - mb * b.x
        rpx = int((cb - ca) / (ma - mb))
        rpy = int(ma * rpx + ca)
        time = _trunc_div(rpx - a.x, a_dx)
        rpz = a.z + (a.vz - rvz) * time
        votes[rpx + rpy + rpz] += 1

    if not votes:
        raise ValueError("no pair of hailstones determines the rock")
    return votes.most_common(1)[0][0]
"""Step Counter: garden plots reachable in an exact number of steps."""

from __future__ import annotations

ROCK = "#"
START = "S"
_STEPS_PART1 = 64
_STEPS_PART2 = 202300

# left, right, down, up
_DIRECTIONS = ((0, -1), (0, 1), (1, 0), (-1, 0))


def _wrap(value: int, size: int) -> int:
    """Fold a coordinate into the grid; a negative exact multiple lands on the last cell."""
    if value >= size:
        return value % size
    if value < 0:
        remainder = -((-value) % size)
        return size - 1 if remainder == 0 else size + remainder
    return value


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def find_start(grid: list[str]) -> tuple[int, int]:
    """The (row, col) of the 'S' tile."""
    for row, line in enumerate(grid):
        col = line.find(START)
        if col >= 0:
            return row, col
    raise ValueError("could not find start")


def traverse(grid: list[str], start: tuple[int, int], steps: int, boundless: bool) -> int:
    """Number of plots reachable in exactly ``steps`` steps.

    With ``boundless`` the grid repeats infinitely in every direction.
    """
    height, width = len(grid), len(grid[0])
    frontier = {start}
    for _ in range(steps):
        reached = set()
        for row, col in frontier:
            for d_row, d_col in _DIRECTIONS:
                new_row, new_col = row + d_row, col + d_col
                if boundless:
                    tile = grid[_wrap(new_row, height)][_wrap(new_col, width)]
                elif 0 <= new_row < height and 0 <= new_col < width:
                    tile = grid[new_row][new_col]
                else:
                    continue
                if tile != ROCK:
                    reached.add((new_row, new_col))
        frontier = reached
    return len(frontier)


def step_counter_part1(lines: list[str]) -> int:
    """Plots reachable in exactly 64 steps on the bounded grid."""
    return traverse(lines, find_start(lines), _STEPS_PART1, False)


def step_counter_part2(lines: list[str]) -> int:
    """Plots reachable on the infinite grid, from a quadratic fit over three grid widths."""
    start = find_start(lines)
    size = len(lines)
    half = size // 2
    p0, p1, p2 = (traverse(lines, start, half + k * size, True) for k in range(3))
    a = _trunc_div(p2 + p0 - 2 * p1, 2)
    n = _STEPS_PART2
    return a * n * n + (p1 - p0 - a) * n + p0
"""A Long Walk: the longest hike through a forest of trails and slopes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

PATH = "."
FOREST = "#"
SLOPE_UP = "^"
SLOPE_RIGHT = ">"
SLOPE_LEFT = "<"
SLOPE_DOWN = "v"

# Locations are (x, y): the column within a line, then the line number.
Location = tuple[int, int]


@dataclass(frozen=True)
class Edge:
    location: Location
    weight: int


def parse_island(lines: list[str]) -> dict[Location, str]:
    """Map every (column, line) position to its tile."""
    return {(x, y): char for y, line in enumerate(lines) for x, char in enumerate(line)}


def _adjacent(point: Location) -> tuple[Location, ...]:
    x, y = point
    return ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y))


def _walkable(island: dict[Location, str], point: Location) -> bool:
    return island.get(point, FOREST) != FOREST


def _against_slope(previous: Location, current: Location, tile: str) -> bool:
    (px, py), (cx, cy) = previous, current
    return (
        (cx > px and tile != SLOPE_RIGHT)
        or (cx < px and tile != SLOPE_LEFT)
        or (cy > py and tile != SLOPE_DOWN)
        or (cy < py and tile != SLOPE_UP)
    )


def _follow(
    island: dict[Location, str],
    previous: Location,
    current: Location,
    cost: int,
    cutting: bool,
) -> Edge | None:
    """Walk a corridor until a junction or dead end; None if a slope blocks the way."""
    while True:
        if _walkable(island, current):
            exits = sum(1 for n in _adjacent(current) if _walkable(island, n))
            if exits > 2:
                return Edge(current, cost)

        if cutting:
            tile = island.get(current)
            if tile is not None and tile != PATH and _against_slope(previous, current, tile):
                return None

        following = next(
            (n for n in _adjacent(current) if _walkable(island, n) and n != previous),
            None,
        )
        if following is None:
            return Edge(current, cost)
        previous, current, cost = current, following, cost + 1


def build_graph(
    island: dict[Location, str], start: Location, cutting: bool
) -> dict[Location, list[Edge]]:
    """Compress the trails into a graph of junctions with corridor lengths.

    With ``cutting`` slopes may only be walked downhill.
    """
    graph: dict[Location, list[Edge]] = {}
    remaining = deque([start])
    while remaining:
        point = remaining.popleft()
        if not _walkable(island, point):
            continue
        for neighbour in _adjacent(point):
            if not _walkable(island, neighbour):
                continue
            edge = _follow(island, point, neighbour, 1, cutting)
            if edge is not None and edge not in graph.get(point, []):
                graph.setdefault(point, []).append(edge)
                remaining.append(edge.location)
    return graph


def longest_path(
    graph: dict[Location, list[Edge]], start: Location, goal: Location, cost: int = 0
) -> int:
    """Length of the longest simple path from ``start`` to ``goal``, plus ``cost``; 0 if none."""
    visited: set[Location] = set()
    best = 0

    def walk(node: Location, total: int) -> None:
        nonlocal best
        if node == goal:
            best = max(best, total)
            return
        visited.add(node)
        for edge in graph.get(node, ()):
            if edge.location not in visited:
                walk(edge.location, total + edge.weight)
        visited.discard(node)

    walk(start, cost)
    return best


def _endpoints(island: dict[Location, str]) -> tuple[Location, Location]:
    if not island:
        raise ValueError("empty map")
    xs = [x for x, _ in island]
    ys = [y for _, y in island]
    return (min(xs) + 1, min(ys)), (max(xs) - 1, max(ys))


def a_long_walk_part1(lines: list[str]) -> int:
    """Longest hike when slopes can only be walked downhill."""
    island = parse_island(lines)
    start, end = _endpoints(island)
    graph = build_graph(island, start, True)
    return longest_path(graph, start, end)


def a_long_walk_part2(lines: list[str]) -> int:
    """Longest hike when slopes are ordinary paths."""
    island = parse_island(lines)
    start, end = _endpoints(island)
    graph = build_graph(island, start, False)

    goal, cost = end, 0
    if graph.get(end):
        goal, cost = graph[end][0].location, graph[end][0].weight
    return longest_path(graph, start, goal, cost)
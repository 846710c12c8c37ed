"""Haunted Wasteland: following left/right instructions through a network."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import cycle

from aoc2023.util import lcm

LEFT = "L"
RIGHT = "R"


@dataclass(frozen=True)
class Directions:
    left: str
    right: str


def parse_network(lines: list[str]) -> tuple[str, dict[str, Directions]]:
    """The instruction line and the node network ('AAA = (BBB, CCC)' lines)."""
    if not lines:
        raise ValueError("empty input")
    network = {}
    for line in lines[2:]:
        node, equals, rest = line.partition("=")
        if not equals:
            raise ValueError(f"missing '=' in {line!r}")
        targets = rest.strip()[1:].replace(")", "").split(",")
        if len(targets) < 2:
            raise ValueError(f"expected two targets in {line!r}")
        network[node.strip()] = Directions(targets[0].strip(), targets[1].strip())
    return lines[0], network


def path_length(
    start: str,
    instructions: str,
    network: dict[str, Directions],
    is_end: Callable[[str], bool],
) -> int:
    """Number of steps from ``start`` until ``is_end`` holds."""
    now = start
    steps = 0
    moves = cycle(instructions)
    while not is_end(now):
        instruction = next(moves, "")
        if instruction == LEFT:
            now = network[now].left
        elif instruction == RIGHT:
            now = network[now].right
        else:
            raise ValueError("illegal direction value")
        steps += 1
    return steps


def start_nodes(network: dict[str, Directions]) -> list[str]:
    """All nodes whose name ends with 'A'."""
    return [node for node in network if node.endswith("A")]


def haunted_wasteland_part1(lines: list[str]) -> int:
    instructions, network = parse_network(lines)
    return path_length("AAA", instructions, network, lambda node: node == "ZZZ")


def haunted_wasteland_part2(lines: list[str]) -> int:
    instructions, network = parse_network(lines)
    return lcm(
        path_length(node, instructions, network, lambda name: name.endswith("Z"))
        for node in start_nodes(network)
    )
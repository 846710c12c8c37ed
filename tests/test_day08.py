import pytest

from aoc2023.day08 import (
    Directions,
    haunted_wasteland_part1,
    haunted_wasteland_part2,
    parse_network,
    path_length,
    start_nodes,
)


def _lines(instructions, network):
    return [instructions, ""] + [
        f"{node} = ({dirs.left}, {dirs.right})" for node, dirs in network.items()
    ]


NETWORK_1 = {
    "AAA": Directions("BBB", "CCC"),
    "BBB": Directions("DDD", "EEE"),
    "CCC": Directions("ZZZ", "GGG"),
    "DDD": Directions("DDD", "DDD"),
    "EEE": Directions("EEE", "EEE"),
    "GGG": Directions("GGG", "GGG"),
    "ZZZ": Directions("ZZZ", "ZZZ"),
}

NETWORK_2 = {
    "AAA": Directions("BBB", "BBB"),
    "BBB": Directions("AAA", "ZZZ"),
    "ZZZ": Directions("ZZZ", "ZZZ"),
}

GHOST_NETWORK = {
    "11A": Directions("11B", "XXX"),
    "11B": Directions("XXX", "11Z"),
    "11Z": Directions("11B", "XXX"),
    "22A": Directions("22B", "XXX"),
    "22B": Directions("22C", "22C"),
    "22C": Directions("22Z", "22Z"),
    "22Z": Directions("22B", "22B"),
    "XXX": Directions("XXX", "XXX"),
}

EXAMPLE_1 = _lines("RL", NETWORK_1)
EXAMPLE_2 = _lines("LLR", NETWORK_2)
GHOSTS = _lines("LR", GHOST_NETWORK)


def test_example_line_format():
    assert EXAMPLE_2[2] == "AAA = (BBB, BBB)"


@pytest.mark.parametrize("lines, expected", [(EXAMPLE_1, 2), (EXAMPLE_2, 6)])
def test_part1(lines, expected):
    assert haunted_wasteland_part1(lines) == expected


def test_parse_example_2():
    assert parse_network(EXAMPLE_2) == ("LLR", NETWORK_2)


def test_parse_example_1():
    assert parse_network(EXAMPLE_1) == ("RL", NETWORK_1)


def test_part2():
    assert haunted_wasteland_part2(GHOSTS) == 6


def test_start_nodes():
    _, network = parse_network(GHOSTS)
    assert start_nodes(network) == ["11A", "22A"]


def test_path_length_zero_when_already_at_end():
    _, network = parse_network(EXAMPLE_2)
    assert path_length("ZZZ", "LLR", network, lambda node: node == "ZZZ") == 0


def test_path_length_rejects_illegal_direction():
    _, network = parse_network(EXAMPLE_2)
    with pytest.raises(ValueError):
        path_length("AAA", "X", network, lambda node: node == "ZZZ")
import pytest

from aoc2023.day24 import (
    Hailstone,
    intersect,
    never_tell_me_the_odds_part1,
    never_tell_me_the_odds_part2,
    parse_hailstones,
    rock_velocity,
)

EXAMPLE = [
    "19, 13, 30 @ -2, 1, -2",
    "18, 19, 22 @ -1, -1, -2",
    "20, 25, 34 @ -2, -2, -4",
    "12, 31, 28 @ -1, -2, -1",
    "20, 19, 15 @ 1, -5, -3",
]

# Four stones all hit by a rock starting at (10, 20, 30) moving (1, 1, 1).
CONSISTENT = [
    "11, 21, 31 @ 0, 0, 0",
    "12, 18, 28 @ 0, 2, 2",
    "7, 23, 27 @ 2, 0, 2",
    "6, 16, 34 @ 2, 2, 0",
]


def test_parse_hailstones():
    stones = parse_hailstones(EXAMPLE[:1])
    assert stones == [Hailstone(19, 13, 30, -2, 1, -2)]


def test_parse_rejects_non_integers():
    with pytest.raises(ValueError):
        parse_hailstones(["19, x, 30 @ -2, 1, -2"])
    with pytest.raises(ValueError):
        parse_hailstones(["19, 13, 30"])


def test_intersect_crossing_paths():
    first, second = parse_hailstones(EXAMPLE[:2])
    crossing = intersect(first, second)
    assert crossing == pytest.approx((14.333, 15.333), abs=1e-3)


def test_intersect_parallel_paths():
    first, second = parse_hailstones(EXAMPLE[1:3])
    assert intersect(first, second) is None


def test_part1_example_with_small_area():
    assert never_tell_me_the_odds_part1(EXAMPLE, 7, 27) == 2


def test_part1_default_area_excludes_small_example():
    assert never_tell_me_the_odds_part1(EXAMPLE) == 0


def test_rock_velocity_filters_by_divisibility():
    assert rock_velocity({-2: [19, 20], -1: [18, 12], 1: [20]}) == -3


def test_rock_velocity_without_groups_is_lowest():
    assert rock_velocity({}) == -1000


def test_rock_velocity_without_candidates():
    with pytest.raises(ValueError):
        rock_velocity({0: [0, 1], 1: [0, 1], 5: [0, 7], 9: [0, 11]})


def test_part2_consistent_stones():
    assert never_tell_me_the_odds_part2(CONSISTENT) == 60


def test_part2_needs_a_pair():
    with pytest.raises(ValueError):
        never_tell_me_the_odds_part2(CONSISTENT[:1])
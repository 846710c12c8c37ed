import pytest

from aoc2023.day04 import (
    Card,
    chosen_numbers,
    parse_card,
    parse_numbers,
    round_id,
    scratch_cards_part1,
    scratch_cards_part2,
    scratch_cards_part2_optimized,
    winning_numbers,
)

EXAMPLE = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]


def test_scratch_cards_part1():
    assert scratch_cards_part1(EXAMPLE) == 13


def test_scratch_cards_part2():
    assert scratch_cards_part2(EXAMPLE) == 30


def test_scratch_cards_part2_optimized():
    assert scratch_cards_part2_optimized(EXAMPLE) == 30


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (" 41 48 83 86 17 ", [41, 48, 83, 86, 17]),
        ("   41  48   83 86   17  ", [41, 48, 83, 86, 17]),
        ("  ", []),
        ("", []),
    ],
)
def test_parse_numbers(text, expected):
    assert parse_numbers(text) == expected


def test_parse_numbers_rejects_garbage():
    with pytest.raises(ValueError):
        parse_numbers("12 x4")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53", 1),
        ("Card   12: 41 48 83 86 17 | 83 86  6 31 17  9 48 53", 12),
        ("Card     1876: 41 48 83 86 17 | 83 86  6 31 17  9 48 53", 1876),
    ],
)
def test_round_id(line, expected):
    assert round_id(line) == expected


def test_round_id_rejects_missing_number():
    with pytest.raises(ValueError):
        round_id("Card: 1 2 | 3 4")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53", [41, 48, 83, 86, 17]),
        ("Card 12: 1   2   3  4   5 | 83 86  6 31 17  9 48 53", [1, 2, 3, 4, 5]),
    ],
)
def test_winning_numbers(line, expected):
    assert winning_numbers(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (
            "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
            [83, 86, 6, 31, 17, 9, 48, 53],
        ),
        (
            "Card 12: 1   2   3  4   5 | 10 11  13 15 17  90 12 12787",
            [10, 11, 13, 15, 17, 90, 12, 12787],
        ),
    ],
)
def test_chosen_numbers(line, expected):
    assert chosen_numbers(line) == expected


def test_parse_card_and_matches():
    card = parse_card(EXAMPLE[0])
    assert card == Card(
        id=1,
        winning=[41, 48, 83, 86, 17],
        chosen=[83, 86, 6, 31, 17, 9, 48, 53],
    )
    assert card.matches() == 4


def test_card_without_matches():
    assert parse_card(EXAMPLE[5]).matches() == 0
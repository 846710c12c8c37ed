"""Scratchcards: counting matching numbers and cascading card copies."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Card:
    id: int
    winning: list[int]
    chosen: list[int]

    def matches(self) -> int:
        """How many chosen numbers are among the winning ones."""
        winning = set(self.winning)
        return sum(1 for number in self.chosen if number in winning)


def _to_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError("illegal input format")
    return int(text)


def parse_numbers(text: str) -> list[int]:
    """Whitespace-separated integers."""
    return [_to_int(token) for token in text.split()]


def _halves(line: str) -> list[str]:
    try:
        return line.split(":")[1].split("|")
    except IndexError:
        raise ValueError("illegal input format") from None


def round_id(line: str) -> int:
    """The card number from a 'Card N: ...' line."""
    try:
        return _to_int(line.split(":")[0].split()[1])
    except IndexError:
        raise ValueError("illegal input format") from None


def winning_numbers(line: str) -> list[int]:
    """The numbers before the '|' separator."""
    return parse_numbers(_halves(line)[0])


def chosen_numbers(line: str) -> list[int]:
    """The numbers after the '|' separator."""
    halves = _halves(line)
    if len(halves) < 2:
        raise ValueError("illegal input format")
    return parse_numbers(halves[1])


def parse_card(line: str) -> Card:
    return Card(id=round_id(line), winning=winning_numbers(line), chosen=chosen_numbers(line))


def scratch_cards_part1(lines: list[str]) -> int:
    """Total points: each card is worth 2**(matches-1), or nothing."""
    total = 0
    for line in lines:
        matches = parse_card(line).matches()
        if matches:
            total += 2 ** (matches - 1)
    return total


def _copies(deck: list[Card], card: Card, memo: dict[int, int]) -> int:
    if card.id in memo:
        return memo[card.id]
    last = min(card.id + card.matches(), len(deck))
    total = 1 + sum(_copies(deck, deck[index], memo) for index in range(card.id, last))
    memo[card.id] = total
    return total


def scratch_cards_part2(lines: list[str]) -> int:
    """Total number of cards once all won copies are counted (memoised recursion)."""
    deck = [parse_card(line) for line in lines]
    memo: dict[int, int] = {}
    return sum(_copies(deck, card, memo) for card in deck)


def scratch_cards_part2_optimized(lines: list[str]) -> int:
    """Total number of cards, computed in a single forward pass."""
    counts: Counter[int] = Counter()
    for line in lines:
        card = parse_card(line)
        counts[card.id] += 1
        for offset in range(1, card.matches() + 1):
            counts[card.id + offset] += counts[card.id]
    return sum(counts.values())
"""Camel Cards: ranking poker-like hands, optionally with jokers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


JOKER = "J"
_HAND_SIZE = 5
_STRENGTHS = {card: value for value, card in enumerate("23456789TJQKA", start=1)}


def strength(card: str, jokers: bool) -> int:
    """Rank of a single card; jokers are the weakest when enabled, unknown cards are 0."""
    if jokers and card == JOKER:
        return 0
    return _STRENGTHS.get(card, 0)


@dataclass(frozen=True)
class Hand:
    cards: str
    bid: int = 0

    def hand_type(self, jokers: bool) -> HandType:
        """Classify the hand, letting jokers act as wildcards when enabled."""
        counts = Counter(self.cards)
        joker_count = counts[JOKER]
        distinct = len(counts)

        if distinct == 1:
            return HandType.FIVE_OF_A_KIND
        if distinct == 2:
            if jokers and joker_count in (2, 3):
                return HandType.FIVE_OF_A_KIND
            if 4 in counts.values():
                if jokers and joker_count > 0:
                    return HandType.FIVE_OF_A_KIND
                return HandType.FOUR_OF_A_KIND
            return HandType.FULL_HOUSE
        if distinct == 3:
            if 3 in counts.values():
                if jokers:
                    upgraded = {
                        3: HandType.FOUR_OF_A_KIND,
                        2: HandType.FIVE_OF_A_KIND,
                        1: HandType.FOUR_OF_A_KIND,
                    }.get(joker_count)
                    if upgraded is not None:
                        return upgraded
                return HandType.THREE_OF_A_KIND
            if jokers:
                upgraded = {
                    2: HandType.FOUR_OF_A_KIND,
                    1: HandType.FULL_HOUSE,
                }.get(joker_count)
                if upgraded is not None:
                    return upgraded
            return HandType.TWO_PAIR
        if distinct == 4:
            if jokers and joker_count > 0:
                return HandType.THREE_OF_A_KIND
            return HandType.ONE_PAIR
        if jokers:
            upgraded = {
                2: HandType.THREE_OF_A_KIND,
                1: HandType.ONE_PAIR,
            }.get(joker_count)
            if upgraded is not None:
                return upgraded
        return HandType.HIGH_CARD

    def _sort_key(self, jokers: bool) -> tuple[HandType, tuple[int, ...]]:
        return self.hand_type(jokers), tuple(strength(card, jokers) for card in self.cards)

    def less_than(self, other: Hand, jokers: bool) -> bool:
        """Whether this hand ranks strictly below ``other``."""
        return self._sort_key(jokers) < other._sort_key(jokers)


def parse_hands(lines: list[str]) -> list[Hand]:
    """Parse 'CARDS BID' lines."""
    hands = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected cards and a bid: {line!r}")
        cards, bid = fields[0], int(fields[1])
        if len(cards) != _HAND_SIZE:
            raise ValueError(f"a hand holds {_HAND_SIZE} cards: {cards!r}")
        hands.append(Hand(cards=cards, bid=bid))
    return hands


def _camel_cards(lines: list[str], jokers: bool) -> int:
    ranked = sorted(parse_hands(lines), key=lambda hand: hand._sort_key(jokers))
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))


def camel_cards_part1(lines: list[str]) -> int:
    return _camel_cards(lines, jokers=False)


def camel_cards_part2(lines: list[str]) -> int:
    return _camel_cards(lines, jokers=True)
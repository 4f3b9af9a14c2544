"""
Poker hand ranking.

See https://en.wikipedia.org/wiki/List_of_poker_hands for the rules.
"""

from collections import Counter
from enum import IntEnum
from typing import List, Tuple


class PokerRank(IntEnum):
    HighCard = 0
    OnePair = 1
    TwoPairs = 2
    ThreeOfKind = 3
    Straight = 4
    Flush = 5
    FullHouse = 6
    FourOfKind = 7
    StraightFlush = 8


CARD_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9,
    "10": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
}

HAND_SIZE = 5
ACE_LOW_STRAIGHT = [2, 3, 4, 5, 14]


def parse_card(card: str) -> Tuple[int, str]:
    """
    '10♥' → (10, '♥'), 'A♠' → (14, '♠')
    """
    rank, suit = card[:-1], card[-1:]
    if rank not in CARD_VALUES or not suit:
        raise ValueError(f"invalid card {card!r}")
    return CARD_VALUES[rank], suit


def _is_straight(values: List[int]) -> bool:
    ordered = sorted(values)
    if ordered == ACE_LOW_STRAIGHT:
        return True
    return all(b - a == 1 for a, b in zip(ordered, ordered[1:]))


def get_poker_hand_rank(hand: List[str]) -> PokerRank:
    """
    Returns the rank of a five-card hand.

    Example:
        ['4♥', '5♥', '6♥', '7♥', '8♥'] → PokerRank.StraightFlush
        ['2♥', '4♦', '5♥', 'A♦', '3♠'] → PokerRank.Straight
    """
    if len(hand) != HAND_SIZE:
        raise ValueError(f"a hand has {HAND_SIZE} cards, got {len(hand)}")

    cards = [parse_card(c) for c in hand]
    values = [v for v, _ in cards]
    suits = {s for _, s in cards}

    is_flush = len(suits) == 1
    is_straight = _is_straight(values)
    counts = sorted(Counter(values).values(), reverse=True)

    if is_flush and is_straight:
        return PokerRank.StraightFlush
    if counts[0] == 4:
        return PokerRank.FourOfKind
    if counts[:2] == [3, 2]:
        return PokerRank.FullHouse
    if is_flush:
        return PokerRank.Flush
    if is_straight:
        return PokerRank.Straight
    if counts[0] == 3:
        return PokerRank.ThreeOfKind
    if counts[:2] == [2, 2]:
        return PokerRank.TwoPairs
    if counts[0] == 2:
        return PokerRank.OnePair
    return PokerRank.HighCard

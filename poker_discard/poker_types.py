"""
poker_types.py

Poker type classes broken out to avoid circular imports
"""
from enum import IntEnum
from typing import NamedTuple


class InvalidHand(ValueError):
    """Raised when five distinct cards cannot be assembled into a Hand"""


class HandCategory(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.ONE_PAIR: 'Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
}


class HandRankKey(NamedTuple):
    """
    Total-order key for a classified hand.

    Tuples compare lexicographically, so (category, primary, secondary)
    ordering falls out of the NamedTuple itself.
    """
    category: HandCategory
    primary: int
    secondary: int = 0  # lower pair for TWO_PAIR only

    @property
    def name(self) -> str:
        return CATEGORY_NAMES[self.category]

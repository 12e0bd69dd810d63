"""
hand_classifier.py

Map five cards to a HandRankKey.

classify(Hand([Card(2, Suit.DIAMONDS), Card(2, Suit.CLUBS), Card(5, Suit.HEARTS),
               Card(2, Suit.HEARTS), Card(2, Suit.SPADES)]))
-> HandRankKey(category=FOUR_OF_A_KIND, primary=2, secondary=0)
"""
from collections import Counter
from typing import Optional, Sequence, Tuple

from poker_discard.core_poker_mechanics import Hand
from poker_discard.poker_types import HandCategory, HandRankKey

WHEEL = (2, 3, 4, 5, 14)

RANK_SUM = 'rank_sum'
RANK_ORDER = 'rank_order'
FLUSH_TIEBREAKS = (RANK_SUM, RANK_ORDER)


def rank_counts(ranks: Sequence[int]) -> Counter:
    return Counter(ranks)


def flush_rank(hand: Hand, tiebreak: str = RANK_SUM) -> Optional[int]:
    """
    Tie-break for a flush, or None when the suits differ.

    RANK_SUM adds the five ranks. Distinct flushes can collide or invert
    under it (A-7-5-4-2 sums to 32, K-Q-4-3-2 sums to 34).
    RANK_ORDER packs the descending ranks base 15 so the integer orders
    flushes card by card.
    """
    if len(set(hand.suits)) != 1:
        return None
    if tiebreak == RANK_ORDER:
        packed = 0
        for rank in sorted(hand.ranks, reverse=True):
            packed = packed * 15 + rank
        return packed
    return sum(hand.ranks)


def straight_rank(hand: Hand) -> Optional[int]:
    """High card of the run, 5 for the wheel, or None"""
    ranks = hand.ranks
    if ranks == WHEEL:
        return 5
    if len(set(ranks)) == 5 and ranks[-1] - ranks[0] == 4:
        return ranks[-1]
    return None


def x_of_a_kind_rank(counts: Counter, x: int) -> Optional[int]:
    """Lowest rank held at least ``x`` times"""
    matches = [rank for rank, count in counts.items() if count >= x]
    return min(matches) if matches else None


def full_house_rank(counts: Counter) -> Optional[int]:
    if sorted(counts.values()) != [2, 3]:
        return None
    return next(rank for rank, count in counts.items() if count == 3)


def two_pair_ranks(counts: Counter) -> Optional[Tuple[int, int]]:
    """(high pair, low pair), or None"""
    pairs = sorted((rank for rank, count in counts.items() if count == 2), reverse=True)
    if len(pairs) != 2:
        return None
    return pairs[0], pairs[1]


def high_card_rank(hand: Hand) -> int:
    return max(hand.ranks)


class HandClassifier:
    """
    Apply the category ladder to a hand.

    Detectors run independently; the first category on the ladder (highest
    first) whose detector fires decides the key.
    """

    def __init__(self, flush_tiebreak: str = RANK_SUM):
        if flush_tiebreak not in FLUSH_TIEBREAKS:
            raise ValueError(
                f"Unknown flush tie-break '{flush_tiebreak}', expected one of {FLUSH_TIEBREAKS}"
            )
        self.flush_tiebreak = flush_tiebreak

    def classify(self, hand: Hand) -> HandRankKey:
        counts = rank_counts(hand.ranks)
        straight = straight_rank(hand)
        flush = flush_rank(hand, self.flush_tiebreak)

        if straight is not None and flush is not None:
            return HandRankKey(HandCategory.STRAIGHT_FLUSH, straight)

        quads = x_of_a_kind_rank(counts, 4)
        if quads is not None:
            return HandRankKey(HandCategory.FOUR_OF_A_KIND, quads)

        full_house = full_house_rank(counts)
        if full_house is not None:
            return HandRankKey(HandCategory.FULL_HOUSE, full_house)

        if flush is not None:
            return HandRankKey(HandCategory.FLUSH, flush)

        if straight is not None:
            return HandRankKey(HandCategory.STRAIGHT, straight)

        trips = x_of_a_kind_rank(counts, 3)
        if trips is not None:
            return HandRankKey(HandCategory.THREE_OF_A_KIND, trips)

        two_pair = two_pair_ranks(counts)
        if two_pair is not None:
            high_pair, low_pair = two_pair
            return HandRankKey(HandCategory.TWO_PAIR, high_pair, low_pair)

        pair = x_of_a_kind_rank(counts, 2)
        if pair is not None:
            return HandRankKey(HandCategory.ONE_PAIR, pair)

        return HandRankKey(HandCategory.HIGH_CARD, high_card_rank(hand))

    def __repr__(self):
        return f"HandClassifier(flush_tiebreak={self.flush_tiebreak!r})"


_default_classifier = HandClassifier()


def classify(hand: Hand) -> HandRankKey:
    """Classify with the rank-sum flush tie-break"""
    return _default_classifier.classify(hand)

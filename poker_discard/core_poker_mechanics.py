"""
core_poker_mechanics.py

Card and Hand value types shared by the classifier, sampler and estimator
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple

from poker_discard.poker_types import InvalidHand

HAND_SIZE = 5
MIN_RANK = 2
MAX_RANK = 14


class Suit(Enum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def letter(self) -> str:
        return 'CDHS'[self.value]

    @classmethod
    def from_letter(cls, letter: str) -> 'Suit':
        index = 'CDHS'.find(letter)
        if len(letter) != 1 or index < 0:
            raise ValueError(f"Invalid suit: '{letter}'")
        return cls(index)


@dataclass(frozen=True)
class Card:
    rank: int  # 2-14 (2-10, J=11, Q=12, K=13, A=14)
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"Invalid rank: {self.rank!r}")

    def __str__(self):
        rank_str = {10: '0', 11: 'J', 12: 'Q', 13: 'K', 14: 'A'}.get(self.rank, str(self.rank))
        return f"{rank_str}{self.suit.letter}"


# Index order matches DeckSampler: suit-major, rank-minor
FULL_DECK: Tuple[Card, ...] = tuple(
    Card(rank, suit) for suit in Suit for rank in range(MIN_RANK, MAX_RANK + 1)
)


class Hand:
    """
    Exactly five distinct cards.

    ``dealt`` keeps the caller's order so results can be reported per input
    position; ``cards`` is the same cards sorted ascending by rank. The sort
    is stable, so cards of equal rank keep their dealt order and every suit
    stays with its rank.
    """

    __slots__ = ('_dealt', '_cards', '_ranks', '_suits')

    def __init__(self, cards: Iterable[Card]):
        dealt = tuple(cards)
        if len(dealt) != HAND_SIZE:
            raise InvalidHand(f"A hand requires exactly {HAND_SIZE} cards, got {len(dealt)}")
        for card in dealt:
            if not isinstance(card, Card):
                raise InvalidHand(f"Not a card: {card!r}")
        if len(set(dealt)) != HAND_SIZE:
            raise InvalidHand(f"Duplicate cards in hand: {' '.join(str(c) for c in dealt)}")
        self._set_cards(dealt)

    @classmethod
    def from_trusted(cls, dealt: Tuple[Card, ...]) -> 'Hand':
        """
        Build a hand from five cards already known to be distinct, skipping
        validation. Used on the estimator's per-trial path.
        """
        hand = cls.__new__(cls)
        hand._set_cards(dealt)
        return hand

    def _set_cards(self, dealt: Tuple[Card, ...]):
        self._dealt = dealt
        self._cards = tuple(sorted(dealt, key=lambda card: card.rank))
        self._ranks = tuple(card.rank for card in self._cards)
        self._suits = tuple(card.suit for card in self._cards)

    @property
    def dealt(self) -> Tuple[Card, ...]:
        return self._dealt

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def ranks(self) -> Tuple[int, ...]:
        return self._ranks

    @property
    def suits(self) -> Tuple[Suit, ...]:
        return self._suits

    def without(self, position: int) -> Tuple[Card, ...]:
        """The four cards kept when ``dealt[position]`` is discarded"""
        if not 0 <= position < HAND_SIZE:
            raise IndexError(f"Hand position out of range: {position}")
        return self._dealt[:position] + self._dealt[position + 1:]

    def replace(self, position: int, card: Card) -> 'Hand':
        """Return a new hand with ``dealt[position]`` swapped for ``card``"""
        kept = self.without(position)
        return Hand(kept[:position] + (card,) + kept[position:])

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self):
        return HAND_SIZE

    def __contains__(self, card):
        return card in self._dealt

    def __eq__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return set(self._dealt) == set(other._dealt)

    def __hash__(self):
        return hash(frozenset(self._dealt))

    def __str__(self):
        return " ".join(str(card) for card in self._dealt)

    def __repr__(self):
        return f"Hand({str(self)!r})"

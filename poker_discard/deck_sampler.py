"""
deck_sampler.py

Uniform replacement draws from the cards not already in play
"""
from typing import Collection, Optional

import numpy as np

from poker_discard.core_poker_mechanics import FULL_DECK, Card

BATCH_SIZE = 4096


class DeckSampler:
    """
    Rejection sampler over the 52-card deck.

    Each draw takes a uniform index into FULL_DECK and retries while the card
    is excluded. Against a five-card exclusion set the expected number of
    draws is 52/47. Indices are pulled from the generator ``batch_size`` at a
    time; a given generator state always yields the same sequence of cards.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, batch_size: int = BATCH_SIZE):
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size!r}")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.batch_size = batch_size
        self._indices = iter(())

    def _next_index(self) -> int:
        index = next(self._indices, None)
        if index is None:
            self._indices = iter(self.rng.integers(len(FULL_DECK), size=self.batch_size).tolist())
            index = next(self._indices)
        return index

    def draw_replacement(self, excluding: Collection[Card]) -> Card:
        if len(excluding) >= len(FULL_DECK) and all(card in excluding for card in FULL_DECK):
            raise ValueError("Every card in the deck is excluded")
        while True:
            card = FULL_DECK[self._next_index()]
            if card not in excluding:
                return card

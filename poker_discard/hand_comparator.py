"""
hand_comparator.py

Decide whether a candidate hand beats an already classified baseline
"""
from typing import Optional

from poker_discard.core_poker_mechanics import Hand
from poker_discard.hand_classifier import HandClassifier, classify
from poker_discard.poker_types import HandRankKey


def is_improvement(baseline: HandRankKey, candidate: Hand,
                   classifier: Optional[HandClassifier] = None) -> bool:
    """
    True when ``candidate`` ranks strictly above ``baseline``.

    Category decides first, then primary, then secondary (only non-zero for
    two pair). Exact ties are never an improvement. Pass the classifier that
    produced ``baseline`` so both sides use the same flush tie-break.
    """
    key = classifier.classify(candidate) if classifier is not None else classify(candidate)
    return key > baseline

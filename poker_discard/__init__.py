"""
poker_discard

Classify a five-card poker hand and estimate, card by card, how often a
single discard-and-draw improves it.
"""
from poker_discard.poker_types import HandCategory, HandRankKey, InvalidHand, CATEGORY_NAMES
from poker_discard.core_poker_mechanics import Suit, Card, Hand
from poker_discard.hand_classifier import HandClassifier, classify
from poker_discard.hand_comparator import is_improvement
from poker_discard.deck_sampler import DeckSampler
from poker_discard.probability_estimator import estimate_improvement_probabilities

__version__ = "0.1.0"

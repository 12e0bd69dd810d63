"""
hand_io.py

Text format for hands and result lines.

parse_hand('2D 2C 5H 2H 2S')
format_result('2D 2C 5H 2H 2S', key, [0.0] * 5)
-> '2D 2C 5H 2H 2S >>>Four of a Kind 0.0% 0.0% 0.0% 0.0% 0.0%'
"""
from typing import List, Sequence

from poker_discard.core_poker_mechanics import HAND_SIZE, Card, Hand, Suit
from poker_discard.poker_types import HandRankKey

RANK_CHARS = {
    '2': 2, '3': 3, '4': 4, '5': 5, '6': 6, '7': 7, '8': 8,
    '9': 9, '0': 10, 'T': 10, 'J': 11, 'Q': 12, 'K': 13, 'A': 14
}

RESULT_SEPARATOR = ' >>>'
ERROR_TEXT = 'Error'


class HandParseError(ValueError):
    """Raised when a line is not five well-formed cards"""


def parse_card(card_str: str) -> Card:
    if len(card_str) != 2:
        raise HandParseError(f"Invalid card string: '{card_str}'")
    rank = RANK_CHARS.get(card_str[0])
    if rank is None:
        raise HandParseError(f"Invalid rank in card: '{card_str}'")
    try:
        suit = Suit.from_letter(card_str[1])
    except ValueError as e:
        raise HandParseError(f"Invalid suit in card: '{card_str}'") from e
    return Card(rank, suit)


def parse_cards(line: str) -> List[Card]:
    """Cards separated by single spaces; one trailing space is tolerated"""
    body = line[:-1] if line.endswith(' ') else line
    tokens = body.split(' ')
    if '' in tokens:
        raise HandParseError(f"Cards must be separated by single spaces: '{line}'")
    if len(tokens) != HAND_SIZE:
        raise HandParseError(f"Expected {HAND_SIZE} cards, got {len(tokens)}: '{line}'")
    return [parse_card(token) for token in tokens]


def parse_hand(line: str) -> Hand:
    """
    Parse one line such as ``2D 2C 5H 2H 2S``.

    Raises HandParseError for malformed text and InvalidHand for repeated
    cards; both are ValueErrors.
    """
    return Hand(parse_cards(line))


def format_probabilities(probabilities: Sequence[float]) -> str:
    return " ".join(f"{p:.1f}%" for p in probabilities)


def format_result(line: str, key: HandRankKey, probabilities: Sequence[float]) -> str:
    return f"{line}{RESULT_SEPARATOR}{key.name} {format_probabilities(probabilities)}"


def format_error(line: str) -> str:
    return f"{line}{RESULT_SEPARATOR}{ERROR_TEXT}"

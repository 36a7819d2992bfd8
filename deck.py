"""Building, shuffling, and dealing a standard 52-card deck."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from game_types import (
    InsufficientCardsError,
    InvalidArgumentShapeError,
    InvalidArgumentTypeError,
)

Card = str

SUITS: Sequence[str] = ("♠", "♥", "♦", "♣")
VALUES: Sequence[str] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")

SUIT_COUNT = 4
VALUE_COUNT = 13


def _is_token_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def create_cards(suits: Sequence[str] = SUITS, values: Sequence[str] = VALUES) -> List[Card]:
    """Return every ``suit + value`` pairing, suit-major.

    All thirteen values of ``suits[0]`` come first, then those of ``suits[1]``
    and so on. Shape is checked before anything is built.
    """

    if not _is_token_sequence(suits) or not _is_token_sequence(values):
        raise InvalidArgumentTypeError("suits and values must be arrays")
    if len(suits) != SUIT_COUNT or len(values) != VALUE_COUNT:
        raise InvalidArgumentShapeError(
            f"inputs should be {SUIT_COUNT} suits and {VALUE_COUNT} values, "
            f"got {len(suits)} suits and {len(values)} values"
        )
    return [f"{suit}{value}" for suit in suits for value in values]


def shuffle_cards(cards: Sequence[Card], *, rng: Optional[random.Random] = None) -> List[Card]:
    """Return a Fisher-Yates shuffled copy of ``cards``; the input is untouched."""

    rng = rng or random.Random()
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def deal_cards(cards: Sequence[Card], hand_size: int, number_of_players: int) -> List[List[Card]]:
    """Deal ``hand_size`` cards to each of ``number_of_players`` players.

    Hands are filled one after another from the front of ``cards``: the first
    player takes the first ``hand_size`` cards, the second the next block, and
    so on. Cards past the last hand are ignored.
    """

    if hand_size <= 0:
        raise InvalidArgumentShapeError("hand_size must be positive")
    if number_of_players <= 0:
        raise InvalidArgumentShapeError("number_of_players must be positive")
    total_needed = hand_size * number_of_players
    if total_needed > len(cards):
        raise InsufficientCardsError(
            f"not enough cards: need {total_needed}, have {len(cards)}"
        )
    return [
        list(cards[start:start + hand_size])
        for start in range(0, total_needed, hand_size)
    ]


__all__ = [
    "Card",
    "SUITS",
    "SUIT_COUNT",
    "VALUES",
    "VALUE_COUNT",
    "create_cards",
    "deal_cards",
    "shuffle_cards",
]

"""Shared dataclasses and errors describing players, deal rules, and failures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


class DeckError(Exception):
    """Base class for every deck building or dealing failure."""


class InvalidArgumentTypeError(DeckError, TypeError):
    """An argument is not the container type the operation expects."""


class InvalidArgumentShapeError(DeckError, ValueError):
    """An argument has the right type but the wrong cardinality."""


class InsufficientCardsError(DeckError, ValueError):
    """The requested deal needs more cards than are available."""


@dataclass(frozen=True)
class DealRules:
    """How many cards each player gets and how many players sit down."""

    hand_size: int = 4
    number_of_players: int = 3

    @property
    def cards_needed(self) -> int:
        return self.hand_size * self.number_of_players


@dataclass(frozen=True)
class Player:
    """A seated player with the hand dealt to them."""

    id: int
    hand: List[str] = field(default_factory=list)
    current_turn: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "hand": list(self.hand),
            "current_turn": self.current_turn,
        }


__all__ = [
    "DealRules",
    "DeckError",
    "InsufficientCardsError",
    "InvalidArgumentShapeError",
    "InvalidArgumentTypeError",
    "Player",
]

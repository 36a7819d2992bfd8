"""Game setup: shuffle a deck, deal it, and seat the players."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from deck import Card, deal_cards, shuffle_cards
from game_types import DealRules, Player


def setup_game(
    cards: Sequence[Card],
    hand_size: int,
    number_of_players: int,
    *,
    rng: Optional[random.Random] = None,
) -> List[Player]:
    """Shuffle ``cards`` once, deal the shuffled deck, and wrap each hand.

    Seat ids are 1-based and player 1 holds the first turn. Dealing errors
    propagate unchanged; undealt cards are dropped.
    """

    shuffled = shuffle_cards(cards, rng=rng)
    hands = deal_cards(shuffled, hand_size, number_of_players)
    return [
        Player(id=index, hand=hand, current_turn=index == 1)
        for index, hand in enumerate(hands, start=1)
    ]


@dataclass
class SetupResult:
    game_id: int
    players: List[Player]
    deck_size: int
    rules: DealRules

    @property
    def current_player(self) -> Optional[Player]:
        for player in self.players:
            if player.current_turn:
                return player
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "deck_size": self.deck_size,
            "hand_size": self.rules.hand_size,
            "number_of_players": self.rules.number_of_players,
            "players": [player.to_dict() for player in self.players],
        }


class GameSetupEngine:
    """Runs repeated setups over one deck with a shared random generator."""

    def __init__(self, cards: Sequence[Card], *, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self._cards: List[Card] = list(cards)

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def setup(self, game_id: int, rules: Optional[DealRules] = None) -> SetupResult:
        rules = rules or DealRules()
        players = setup_game(
            self._cards,
            rules.hand_size,
            rules.number_of_players,
            rng=self.rng,
        )
        return SetupResult(
            game_id=game_id,
            players=players,
            deck_size=len(self._cards),
            rules=rules,
        )


__all__ = ["GameSetupEngine", "SetupResult", "setup_game"]

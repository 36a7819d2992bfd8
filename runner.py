"""Command-line interface for running repeated deck shuffles and deals."""

from __future__ import annotations

import argparse
import importlib.util
import json
import random
from typing import Any, Dict, List, Optional, Sequence

from deck import SUITS, VALUES, create_cards
from engine import GameSetupEngine, SetupResult
from game_types import (
    DealRules,
    DeckError,
    InsufficientCardsError,
    InvalidArgumentShapeError,
)
from logger import GameLogger


def _load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        if path.endswith((".yaml", ".yml")):
            spec = importlib.util.find_spec("yaml")
            if spec is None:
                raise RuntimeError("PyYAML is required to load YAML configurations")
            module = importlib.util.module_from_spec(spec)
            if spec.loader is None:  # pragma: no cover
                raise RuntimeError("Unable to import yaml module")
            spec.loader.exec_module(module)  # type: ignore[no-untyped-call]
            return module.safe_load(handle) or {}  # type: ignore[attr-defined]
        return json.load(handle)


class StatsCollector:
    """Counts, per seat, the games in which that seat held each suit."""

    def __init__(self, number_of_players: int, suits: Sequence[str]) -> None:
        self.total_games = 0
        self.cards_dealt = 0
        self.suits = list(suits)
        self.suit_games: Dict[int, Dict[str, int]] = {
            seat: {suit: 0 for suit in self.suits}
            for seat in range(1, number_of_players + 1)
        }

    def _suit_of(self, card: str) -> Optional[str]:
        for suit in self.suits:
            if card.startswith(suit):
                return suit
        return None

    def update(self, result: SetupResult) -> None:
        self.total_games += 1
        for player in result.players:
            counts = self.suit_games.setdefault(
                player.id, {suit: 0 for suit in self.suits}
            )
            held = {self._suit_of(card) for card in player.hand}
            for suit in held:
                if suit is not None:
                    counts[suit] += 1
            self.cards_dealt += len(player.hand)

    def summary(self) -> Dict[str, Any]:
        games = max(self.total_games, 1)
        rows: List[Dict[str, Any]] = []
        for seat, counts in sorted(self.suit_games.items()):
            rows.append(
                {
                    "player_id": seat,
                    "suit_games": dict(counts),
                    "suit_rate": {
                        suit: count / games for suit, count in counts.items()
                    },
                }
            )
        return {
            "total_games": self.total_games,
            "cards_dealt": self.cards_dealt,
            "players": rows,
        }


def parse_tokens(string: Optional[Any], default: Sequence[str]) -> List[str]:
    if not string:
        return list(default)
    if isinstance(string, (list, tuple)):
        # config files may give the tokens as a list already
        return [str(token) for token in string]
    return [token.strip() for token in string.split(",") if token.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shuffle and deal card hands")
    parser.add_argument("--games", type=int, default=1, help="Number of setups to run")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--hand-size", type=int, default=4, help="Cards per player")
    parser.add_argument("--players", type=int, default=3, help="Number of players")
    parser.add_argument(
        "--suits",
        type=str,
        default=None,
        help="Comma-separated suit symbols (exactly 4)",
    )
    parser.add_argument(
        "--values",
        type=str,
        default=None,
        help="Comma-separated card values (exactly 13)",
    )
    parser.add_argument("--log", type=str, default=None, help="Path to write per-game logs")
    parser.add_argument(
        "--log-format", choices=["jsonl", "csv"], default="jsonl", help="Log format"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional JSON or YAML configuration file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    parser = build_parser()
    defaults = parser.parse_args([])
    args = parser.parse_args(argv)
    if args.config:
        config = _load_config(args.config)
        for key, value in config.items():
            key = key.replace("-", "_")
            if hasattr(args, key) and getattr(args, key) == getattr(defaults, key):
                setattr(args, key, value)

    suits = parse_tokens(args.suits, SUITS)
    values = parse_tokens(args.values, VALUES)
    rules = DealRules(hand_size=args.hand_size, number_of_players=args.players)
    try:
        cards = create_cards(suits, values)
        if rules.hand_size <= 0 or rules.number_of_players <= 0:
            raise InvalidArgumentShapeError("--hand-size and --players must be positive")
        if rules.cards_needed > len(cards):
            raise InsufficientCardsError(
                f"not enough cards: need {rules.cards_needed}, have {len(cards)}"
            )
    except DeckError as exc:
        parser.error(f"{type(exc).__name__}: {exc}")

    engine = GameSetupEngine(cards, rng=random.Random(args.seed))
    stats = StatsCollector(rules.number_of_players, suits)
    logger: Optional[GameLogger] = None
    if args.log:
        logger = GameLogger(args.log, fmt=args.log_format)

    print(f"✅ Deck of {len(cards)} cards, {rules.number_of_players} players x {rules.hand_size} cards")
    try:
        for game_id in range(1, args.games + 1):
            result = engine.setup(game_id, rules)
            if logger:
                logger.log(result)
            stats.update(result)
    finally:
        if logger:
            logger.close()

    summary = stats.summary()
    print("=" * 60)
    print(f"🏁 Games: {summary['total_games']} | Cards dealt: {summary['cards_dealt']}")
    for row in summary["players"]:
        counts = " ".join(f"{suit}{count}" for suit, count in row["suit_games"].items())
        print(f"- Player {row['player_id']}: {counts}")
    print("=" * 60 + "\n")

    print(json.dumps(summary, indent=2, ensure_ascii=False))
    return summary


if __name__ == "__main__":
    main()

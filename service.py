"""Flask service exposing a REST API for building decks and setting up games."""

from __future__ import annotations

import os
import random
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from flask import Flask, abort, jsonify, request

from deck import SUITS, VALUES, create_cards
from engine import GameSetupEngine, SetupResult
from game_types import DealRules, DeckError


@dataclass
class GameSession:
    engine: GameSetupEngine
    rules: DealRules
    result: SetupResult


SESSIONS: Dict[str, GameSession] = {}
app = Flask(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        abort(400, description="Request body must be a JSON object")
    return payload


def _make_rng(seed: Optional[Any]) -> random.Random:
    if seed is None:
        return random.Random()
    if not isinstance(seed, (int, float, str, bytes)):
        abort(400, description=f"Invalid seed: {seed!r}")
    return random.Random(seed)


def _make_rules(config: Dict[str, Any]) -> DealRules:
    try:
        return DealRules(
            hand_size=int(config.get("hand_size", DealRules.hand_size)),
            number_of_players=int(
                config.get("number_of_players", DealRules.number_of_players)
            ),
        )
    except (TypeError, ValueError) as exc:
        abort(400, description=f"Invalid deal rules: {exc}")


def _build_cards(payload: Dict[str, Any]):
    return create_cards(payload.get("suits", SUITS), payload.get("values", VALUES))


def _deck_error(exc: DeckError) -> None:
    abort(400, description=f"{type(exc).__name__}: {exc}")


def _get_session(game_id: str) -> GameSession:
    session = SESSIONS.get(game_id)
    if session is None:
        abort(404, description="Game not found")
    return session


def _game_payload(game_id: str, session: GameSession) -> Dict[str, Any]:
    return {"game_id": game_id, "state": session.result.to_dict()}


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.post("/api/decks")
def create_deck():
    payload = _json_body()
    try:
        cards = _build_cards(payload)
    except DeckError as exc:
        _deck_error(exc)
    return jsonify({"cards": cards, "size": len(cards)}), 201


@app.post("/api/games")
def create_game():
    payload = _json_body()
    rules = _make_rules(payload)
    try:
        cards = _build_cards(payload)
        engine = GameSetupEngine(cards, rng=_make_rng(payload.get("seed")))
        result = engine.setup(1, rules)
    except DeckError as exc:
        _deck_error(exc)
    session_id = str(uuid.uuid4())
    SESSIONS[session_id] = GameSession(engine=engine, rules=rules, result=result)
    return jsonify(_game_payload(session_id, SESSIONS[session_id])), 201


@app.get("/api/games/<game_id>")
def get_game(game_id: str):
    session = _get_session(game_id)
    return jsonify(_game_payload(game_id, session))


@app.post("/api/games/<game_id>/reset")
def reset_game(game_id: str):
    session = _get_session(game_id)
    payload = _json_body()
    if payload.get("seed") is not None:
        session.engine.rng = _make_rng(payload["seed"])
    session.result = session.engine.setup(session.result.game_id + 1, session.rules)
    return jsonify(_game_payload(game_id, session))


if __name__ == "__main__":  # pragma: no cover
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 8000)))

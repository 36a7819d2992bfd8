"""Structured logging helpers for game setup results."""

from __future__ import annotations

import csv
import json
from typing import Dict, List, Optional

from engine import SetupResult

CSV_FIELDS = ["game_id", "seat", "current_turn", "hand_size", "hand"]


class GameLogger:
    """Writes setup results as JSON lines, or as CSV with one row per seat.

    CSV hands are space-separated card tokens, so a row reads like the
    table: ``1,1,true,4,♠A ♥9 ♣K ♦2``.
    """

    def __init__(self, path: str, *, fmt: str = "jsonl") -> None:
        self.path = path
        self.format = fmt.lower()
        if self.format not in {"jsonl", "csv"}:
            raise ValueError(f"Unsupported log format: {self.format}")
        self._handle = open(path, "w", encoding="utf-8", newline="")
        self._writer: Optional[csv.DictWriter] = None
        if self.format == "csv":
            self._writer = csv.DictWriter(self._handle, fieldnames=CSV_FIELDS)
            self._writer.writeheader()
        self.records = 0

    def __enter__(self) -> "GameLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(self, result: SetupResult) -> None:
        if self._writer is not None:
            self._writer.writerows(self._seat_rows(result))
        else:
            self._handle.write(json.dumps(result.to_dict(), ensure_ascii=False) + "\n")
        self.records += 1
        self._handle.flush()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    @staticmethod
    def _seat_rows(result: SetupResult) -> List[Dict[str, object]]:
        return [
            {
                "game_id": result.game_id,
                "seat": player.id,
                "current_turn": "true" if player.current_turn else "false",
                "hand_size": len(player.hand),
                "hand": " ".join(player.hand),
            }
            for player in result.players
        ]


__all__ = ["CSV_FIELDS", "GameLogger"]

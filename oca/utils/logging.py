"""Logging utilities for the Oca game.

The terminal belongs to the board, so log records only go to files:
- oca.jsonl: one JSON object per record (structured game events)
- oca.log: plain text, for reading with tail/less
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

# Attributes every LogRecord has; anything else came in through ``extra``
_STANDARD_ATTRS = set(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}

EVENT_LOGGER = "oca.events"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(log_dir: Path, verbose: bool = False) -> None:
    """Configure file logging under ``log_dir``.

    Args:
        log_dir: Directory for log files (created if missing)
        verbose: Log DEBUG records as well
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = logging.DEBUG if verbose else logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    # Re-running setup (tests, several games in one process) must not stack handlers
    for handler in list(root.handlers):
        if getattr(handler, "_oca_handler", False):
            root.removeHandler(handler)
            handler.close()

    json_handler = logging.FileHandler(log_dir / "oca.jsonl", encoding="utf-8")
    json_handler.setFormatter(JSONFormatter())
    text_handler = logging.FileHandler(log_dir / "oca.log", encoding="utf-8")
    text_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    for handler in (json_handler, text_handler):
        handler.setLevel(level)
        handler._oca_handler = True
        root.addHandler(handler)


def log_game_start(game_id: str, players: List[str], seed: Optional[int]) -> None:
    """Record the start of a game."""
    logging.getLogger(EVENT_LOGGER).info(
        f"Game {game_id} started",
        extra={"event": "game_start", "game_id": game_id, "players": players, "seed": seed},
    )


def log_turn(game_id: str, turn_number: int, result: Dict) -> None:
    """Record one turn outcome (a TurnResult as a dict)."""
    logging.getLogger(EVENT_LOGGER).info(
        f"Turn {turn_number}: {result['player']} rolled {result['roll']}",
        extra={"event": "turn", "game_id": game_id, "turn": turn_number, **result},
    )


def log_game_end(game_id: str, winner: Optional[str], turns: int, duration: float) -> None:
    """Record the end of a game. ``winner`` is None when the game was quit."""
    logging.getLogger(EVENT_LOGGER).info(
        f"Game {game_id} ended. Winner: {winner or 'none'}",
        extra={
            "event": "game_end",
            "game_id": game_id,
            "winner": winner,
            "turns": turns,
            "duration_sec": round(duration, 3),
        },
    )

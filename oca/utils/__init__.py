"""Utility modules for the Oca game.

- logging: file logging setup and structured game-event records
"""

from .logging import JSONFormatter, setup_logging, log_game_start, log_turn, log_game_end

__all__ = [
    "JSONFormatter",
    "setup_logging",
    "log_game_start",
    "log_turn",
    "log_game_end",
]

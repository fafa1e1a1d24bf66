"""Turn driver for El juego de la Oca.

Owns the single GameState of a run, rolls the die, maps keyboard commands
onto engine calls and redraws the screen between turns.
"""

import contextlib
import logging
import random
import time
import uuid
from dataclasses import asdict
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from oca import __version__
from oca.config import OcaSettings
from oca.display import render_frame, render_winner
from oca.game_engine import GameEngine, GameState, TurnResult
from oca.utils.logging import log_game_end, log_game_start, log_turn

console = Console()
logger = logging.getLogger(__name__)

TURN = "turn"
QUIT = "quit"


class OcaGame:
    """One game session: four players, one die, one board."""

    # Version for tracking rule/format changes in the game logs
    VERSION = __version__

    DIE_FACES = 6
    LOG_LINES = 6  # info panel height on the board screen

    def __init__(
        self,
        settings: Optional[OcaSettings] = None,
        rng: Optional[random.Random] = None,
        display_console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        self.settings = settings or OcaSettings()
        self.rng = rng or random.Random(self.settings.seed)
        self.console = display_console or console
        self._input = input_func or self.console.input

        self.state = GameState.new()
        self.turn_count = 0
        self.quit_requested = False
        self.moves_log: List[Dict] = []

        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

        self.game_id = str(uuid.uuid4())[:8]

    @property
    def prompt(self) -> str:
        if self.state.finished:
            return escape(f"[{self.settings.quit_key}] salir > ")
        return escape(f"[{self.settings.turn_key}] tirar  [{self.settings.quit_key}] salir > ")

    def roll_die(self) -> int:
        """Uniform roll in 1..6 from the session's random source."""
        return self.rng.randint(1, self.DIE_FACES)

    def parse_command(self, raw: str) -> Optional[str]:
        """Map raw input to TURN, QUIT or None (ignored)."""
        key = raw.strip().lower()
        if key == self.settings.quit_key:
            return QUIT
        if key == self.settings.turn_key:
            return TURN
        return None

    def advance_turn(self, roll: Optional[int] = None) -> Optional[TurnResult]:
        """Let the current player take their turn.

        Does nothing once the game is finished. ``roll`` overrides the die.
        """
        if self.state.finished:
            logger.debug("Turn requested after the game finished; ignoring")
            return None

        if roll is None:
            roll = self.roll_die()
        result = GameEngine.take_turn(self.state, roll)
        self.turn_count += 1

        move = asdict(result)
        self.moves_log.append(move)
        log_turn(self.game_id, self.turn_count, move)

        if result.won:
            logger.info(f"Player {result.player} reached the last cell on turn {self.turn_count}")
        return result

    def handle_input(self, raw: str) -> bool:
        """Apply one input event. Returns False when the session should end."""
        command = self.parse_command(raw)
        if command == QUIT:
            self.quit_requested = True
            return False
        if command == TURN:
            self.advance_turn()
        return True

    def read_input(self) -> str:
        """Block for the next command; EOF or Ctrl-C count as quit."""
        try:
            return self._input(self.prompt)
        except (EOFError, KeyboardInterrupt):
            return self.settings.quit_key

    def render(self) -> None:
        """Draw the current screen (board, or winner once finished)."""
        if self.console.is_terminal:
            self.console.clear()
        if self.state.finished:
            self.console.print(render_winner(self.state.winner))
        else:
            self.console.print(render_frame(self.state, max_log_lines=self.LOG_LINES))

    def _screen(self):
        if self.settings.alternate_screen and self.console.is_terminal:
            return self.console.screen()
        return contextlib.nullcontext()

    def play(self) -> Dict:
        """Run the input loop until the player quits, and return results."""
        self.start_time = time.time()
        players = [player.name for player in self.state.players]
        logger.info(f"Starting Oca game {self.game_id} (seed={self.settings.seed})")
        log_game_start(self.game_id, players, self.settings.seed)

        with self._screen():
            running = True
            while running:
                self.render()
                running = self.handle_input(self.read_input())

        self.end_time = time.time()
        duration = self.end_time - self.start_time
        log_game_end(self.game_id, self.state.winner, self.turn_count, duration)
        logger.info(f"Game {self.game_id} closed. Winner: {self.state.winner}, Turns: {self.turn_count}")

        return {
            "game_id": self.game_id,
            "version": self.VERSION,
            "winner": self.state.winner,
            "finished": self.state.finished,
            "turns": self.turn_count,
            "duration": duration,
            "positions": {player.name: player.position for player in self.state.players},
            "moves": self.moves_log,
            "log": list(self.state.log),
        }

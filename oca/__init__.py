"""El juego de la Oca: the Game of the Goose for four players in a terminal.

- Board: 64 cells (0..63) drawn as an 8x8 grid
- Each turn the current player rolls one die and advances
- Multiples of 5 send the player back 2 cells (castigo)
- Multiples of 7 move the player forward 2 cells (suerte)
- Rolls that would pass cell 63 are lost; landing exactly on 63 wins
"""

from oca.board import CellKind, classify
from oca.game_engine import GameEngine, GameState, Player, take_turn

__version__ = "1.0.0"

__all__ = ["CellKind", "classify", "GameEngine", "GameState", "Player", "take_turn"]

"""Shared game engine for El juego de la Oca.

This module holds the rules of the game and nothing else:
- The game state (players, whose turn it is, the turn log, the outcome)
- The single state transition: the current player takes their turn

The engine never reads input, draws anything or rolls dice. The die value
is passed in by the driver (game.py), so every rule can be exercised with
fixed rolls.
"""

from dataclasses import FrozenInstanceError, dataclass, field
from typing import List, Optional

from oca.board import BONUS_DIVISOR, END_CELL, SETBACK_DIVISOR

PLAYER_NAMES = ("J1", "J2", "J3", "J4")


@dataclass
class Player:
    """A player token on the track."""
    name: str
    position: int = 0

    def __setattr__(self, key, value):
        # name is fixed once set; only position moves
        if key == "name" and "name" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'name'")
        super().__setattr__(key, value)


@dataclass
class GameState:
    """Mutable state of one game, owned by the turn driver."""
    players: List[Player]
    current_turn: int = 0
    log: List[str] = field(default_factory=list)  # insertion order, never reordered
    finished: bool = False
    winner: Optional[str] = None

    @classmethod
    def new(cls) -> "GameState":
        """Create the initial state: four players on the start cell, J1 to move."""
        return cls(players=[Player(name=name) for name in PLAYER_NAMES])

    @property
    def current_player(self) -> Player:
        return self.players[self.current_turn]


@dataclass
class TurnResult:
    """Summary of what happened during one turn."""
    player: str
    roll: int
    start: int
    landed: int  # position after the roll, before any special cell
    final: int
    effect: Optional[str] = None  # "setback", "bonus" or None
    rejected: bool = False  # roll would have gone past the last cell
    won: bool = False


class GameEngine:
    """Core rules of the Oca game.

    All rule constants and message formats live here so the driver, the
    renderer and the tests agree on a single source of truth.
    """

    SETBACK_STEPS = 2
    BONUS_STEPS = 2

    ROLL_MESSAGE = " El {name} acaba de sacar el numero {roll}."
    OVERSHOOT_MESSAGE = " El {name} acaba de sacar el numero {roll}. Pero necesita un {needed} para ganar."
    WIN_MESSAGE = "El jugador {name} ganó."
    SETBACK_MESSAGE = " El {name} esta en un casillero de castigo. Retrocede 2 casilleros."
    BONUS_MESSAGE = " El {name} esta en un casillero de suerte. Avanza 2 casilleros."

    @classmethod
    def take_turn(cls, state: GameState, roll: int) -> TurnResult:
        """Play one turn for the current player with the given die roll.

        The caller must not call this once ``state.finished`` is set, and
        ``roll`` is trusted to be in 1..6.

        Args:
            state: Game state, mutated in place
            roll: Die value for this turn

        Returns:
            TurnResult describing the move
        """
        player = state.current_player
        start = player.position
        result = TurnResult(player=player.name, roll=roll, start=start, landed=start, final=start)

        target = player.position + roll
        if target > END_CELL:
            # Overshoot: stay put, the turn still passes
            state.log.append(cls.OVERSHOOT_MESSAGE.format(
                name=player.name, roll=roll, needed=END_CELL - player.position,
            ))
            result.rejected = True
        else:
            player.position = target
            result.landed = target
            state.log.append(cls.ROLL_MESSAGE.format(name=player.name, roll=roll))

            if player.position == END_CELL:
                state.winner = player.name
                state.log.append(cls.WIN_MESSAGE.format(name=player.name))
                state.finished = True
                result.final = player.position
                result.won = True
                return result

            if player.position % SETBACK_DIVISOR == 0:
                player.position -= cls.SETBACK_STEPS
                state.log.append(cls.SETBACK_MESSAGE.format(name=player.name))
                result.effect = "setback"
            elif player.position % BONUS_DIVISOR == 0:
                player.position += cls.BONUS_STEPS
                state.log.append(cls.BONUS_MESSAGE.format(name=player.name))
                result.effect = "bonus"

        result.final = player.position
        state.current_turn = (state.current_turn + 1) % len(state.players)
        return result


def take_turn(state: GameState, roll: int) -> TurnResult:
    """Module-level shortcut for :meth:`GameEngine.take_turn`."""
    return GameEngine.take_turn(state, roll)


def log_view(state: GameState) -> List[str]:
    """Turn log for display, most recent message first.

    Returns a new list; the stored log keeps insertion order.
    """
    return list(reversed(state.log))

"""Rich renderables for the Oca board.

Everything here only reads the game state; the driver decides when and
where to print.
"""

from typing import List, Optional

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from oca.board import CellKind, classify, grid_rows
from oca.game_engine import GameState, log_view

FRAME_TITLE = (
    "Presione q para salir          "
    "El juego de la OCA          "
    "Presione C para utilizar el turno"
)
INFO_TITLE = "Information"
WINNER_TITLE = "Ganador   Presione Q para salir"
WINNER_TEXT = "Ganó el jugador {winner}"

# kind -> (border color, border box)
CELL_STYLES = {
    CellKind.START: ("green", box.HEAVY),
    CellKind.END: ("red", box.DOUBLE),
    CellKind.SETBACK: ("bright_red", box.ROUNDED),
    CellKind.BONUS: ("yellow", box.SQUARE),
    CellKind.NORMAL: ("cyan", box.SQUARE),
}


def players_on(state: GameState, index: int) -> List[str]:
    """Names of the players standing on a cell, in turn order."""
    return [player.name for player in state.players if player.position == index]


def render_cell(state: GameState, index: int) -> Panel:
    """One board cell: bordered by kind, titled with its label."""
    kind, label = classify(index)
    color, border = CELL_STYLES[kind]
    names = Text(" ".join(players_on(state, index)), style="white", justify="center")
    return Panel(
        names,
        title=label,
        title_align="left",
        border_style=color,
        box=border,
        padding=(0, 0),
    )


def render_board(state: GameState) -> Table:
    """The 8x8 grid of cells."""
    rows = grid_rows()
    grid = Table.grid(expand=True)
    for _ in rows[0]:
        grid.add_column(ratio=1)
    for row in rows:
        grid.add_row(*(render_cell(state, index) for index in row))
    return grid


def render_info(state: GameState, max_lines: Optional[int] = None) -> Panel:
    """Turn log, most recent message first."""
    lines = log_view(state)
    if max_lines is not None:
        lines = lines[:max_lines]
    return Panel(Text("\n".join(lines)), title=INFO_TITLE, title_align="left", box=box.SQUARE)


def render_frame(state: GameState, max_log_lines: Optional[int] = None) -> Panel:
    """Full game screen: board on top, information panel below."""
    return Panel(
        Group(render_board(state), render_info(state, max_log_lines)),
        title=FRAME_TITLE,
        title_align="center",
        box=box.ROUNDED,
    )


def render_winner(winner: str) -> Panel:
    """Screen shown once somebody reaches the last cell."""
    return Panel(
        Text(WINNER_TEXT.format(winner=winner), style="on blue"),
        title=WINNER_TITLE,
        title_align="center",
        box=box.ROUNDED,
    )

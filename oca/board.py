"""Board layout for the Oca track.

The track is 64 linear cells (0..63) drawn as an 8x8 grid, row-major.
Every cell has a kind derived from its index; nothing about the board is
stored, it is recomputed on demand.
"""

from enum import Enum
from typing import List, NamedTuple

BOARD_SIZE = 64
ROWS = 8
COLUMNS = 8

START_CELL = 0
END_CELL = BOARD_SIZE - 1

SETBACK_DIVISOR = 5
BONUS_DIVISOR = 7


class CellKind(str, Enum):
    """Closed set of cell kinds."""

    START = "Start"
    END = "End"
    SETBACK = "Setback"
    BONUS = "Bonus"
    NORMAL = "Normal"


# Label suffixes shown on the board
LABEL_SUFFIXES = {
    CellKind.START: "-Inicio",
    CellKind.END: "-Fin",
    CellKind.SETBACK: "-Castigo",
    CellKind.BONUS: "-Suerte",
    CellKind.NORMAL: "",
}


class Cell(NamedTuple):
    """Classification of a single cell: its kind and display label."""

    kind: CellKind
    label: str


def cell_kind(index: int) -> CellKind:
    """Return the kind of the cell at ``index``.

    Checks run in a fixed order and the first match wins, so cell 0 is the
    start even though it is a multiple of 5, and cell 35 is a setback even
    though it is also a multiple of 7.
    """
    if index == START_CELL:
        return CellKind.START
    if index == END_CELL:
        return CellKind.END
    if index % SETBACK_DIVISOR == 0:
        return CellKind.SETBACK
    if index % BONUS_DIVISOR == 0:
        return CellKind.BONUS
    return CellKind.NORMAL


def classify(index: int) -> Cell:
    """Classify a cell index into its kind and label (e.g. ``"10-Castigo"``)."""
    kind = cell_kind(index)
    return Cell(kind=kind, label=f"{index}{LABEL_SUFFIXES[kind]}")


def board_cells() -> List[Cell]:
    """All 64 cells in index order."""
    return [classify(index) for index in range(BOARD_SIZE)]


def grid_rows() -> List[List[int]]:
    """Cell indices laid out as 8 rows of 8, row 0 holding cells 0..7."""
    return [
        [col + row * COLUMNS for col in range(COLUMNS)]
        for row in range(ROWS)
    ]

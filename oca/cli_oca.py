"""CLI subcommand for El juego de la Oca."""

import logging
from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from oca.board import LABEL_SUFFIXES, CellKind, board_cells
from oca.config import OcaSettings, load_settings
from oca.display import CELL_STYLES, render_board
from oca.game import OcaGame
from oca.game_engine import GameState
from oca.utils.logging import setup_logging

app = typer.Typer(help="Play El juego de la Oca in the terminal")
console = Console()


def _load_or_exit(config_file: Optional[str]) -> OcaSettings:
    """Load settings, turning config errors into a clean CLI exit."""
    try:
        return load_settings(config_file)
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {config_file}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def play(
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a settings YAML file (see inputs/oca.yml)"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible dice"),
    log_path: Optional[str] = typer.Option(None, help="Directory for log files"),
    turn_key: Optional[str] = typer.Option(None, help="Key that plays the current turn"),
    quit_key: Optional[str] = typer.Option(None, help="Key that quits the game"),
    alternate_screen: Optional[bool] = typer.Option(
        None, "--alternate-screen/--no-alternate-screen", help="Draw on the terminal's alternate screen"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Start a game for four players (J1..J4) sharing the keyboard."""
    settings = _load_or_exit(config_file)
    try:
        settings = settings.with_overrides(
            seed=seed,
            log_path=log_path,
            turn_key=turn_key,
            quit_key=quit_key,
            alternate_screen=alternate_screen,
            verbose=verbose or None,
        )
    except ValueError as e:
        console.print(f"[red]Invalid options: {e}[/red]")
        raise typer.Exit(1)

    setup_logging(Path(settings.log_path), settings.verbose)
    logger = logging.getLogger(__name__)
    if settings.seed is not None:
        logger.info(f"Random seed set to: {settings.seed}")

    game = OcaGame(settings=settings)
    result = game.play()

    if result["winner"]:
        console.print(f"[bold green]Ganó el jugador {result['winner']}[/bold green] ({result['turns']} turnos)")
    else:
        console.print(f"[dim]Partida abandonada tras {result['turns']} turnos.[/dim]")


@app.command()
def board():
    """Show the board layout and what each kind of cell does."""
    console.print(render_board(GameState.new()))

    counts = Counter(cell.kind for cell in board_cells())
    effects = {
        CellKind.START: "Todos los jugadores empiezan aquí",
        CellKind.END: "Caer justo aquí gana la partida",
        CellKind.SETBACK: "Retrocede 2 casilleros",
        CellKind.BONUS: "Avanza 2 casilleros",
        CellKind.NORMAL: "",
    }

    table = Table(title="Casilleros")
    table.add_column("Kind", style="bold")
    table.add_column("Label", style="dim")
    table.add_column("Cells", justify="right")
    table.add_column("Effect")
    for kind in CellKind:
        color, _ = CELL_STYLES[kind]
        table.add_row(
            f"[{color}]{kind.value}[/{color}]",
            LABEL_SUFFIXES[kind] or "-",
            str(counts[kind]),
            effects[kind],
        )
    console.print(table)

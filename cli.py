"""Command-line interface for Goose - terminal board games.

This is the CLI entry point:
- `goose oca play` - Play El juego de la Oca
- `goose oca board` - Show the board layout
"""

import typer
from rich.console import Console

from oca.cli_oca import app as oca_app

# Main application
app = typer.Typer(
    help="Goose - El juego de la Oca in the terminal",
    no_args_is_help=True,
)
console = Console()

# Register subcommands
app.add_typer(oca_app, name="oca", help="Play El juego de la Oca (4 players, 64 cells)")


@app.callback()
def main():
    """Goose - board games in the terminal.

    Examples:

        # Start a game (c = roll, q = quit)
        uv run goose oca play

        # Reproducible dice
        uv run goose oca play --seed 42

        # Look at the board
        uv run goose oca board
    """
    pass


@app.command()
def version():
    """Show version information."""
    from oca import __version__ as oca_version

    console.print("[bold]Goose[/bold]")
    console.print(f"  oca: {oca_version}")


if __name__ == "__main__":
    app()

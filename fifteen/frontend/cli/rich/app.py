"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.backend.engine.gameplay import Puzzle
from fifteen.backend.models.board import Board
from fifteen.backend.models.movelog import MoveLog
from fifteen.frontend.cli.input_handler import QUIT, read_tile

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _stats(puzzle: Puzzle) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(puzzle.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(puzzle.state.elapsed_time), style="bold yellow")
    return stats


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]_[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_greeting(delay: float) -> None:
    console.clear()
    panel = Panel(
        Align.center(Text("WELCOME TO GAME OF FIFTEEN", style="bold")),
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))
    time.sleep(delay * 4)


def _draw_game(puzzle: Puzzle, status: str = "") -> None:
    console.clear()

    size = puzzle.size
    panel = Panel(
        Align.center(render_board(puzzle.state.board)),
        title=f"[bold cyan]Game of Fifteen  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    controls = Text()
    controls.append("  number", style="bold cyan")
    controls.append("  move that tile   ", style="dim")
    controls.append("0", style="bold cyan")
    controls.append("  quit", style="dim")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(puzzle)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(puzzle: Puzzle) -> None:
    console.clear()

    size = puzzle.size
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("ftw!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(render_board(puzzle.state.board)),
        Align.center(congrats),
        Align.center(_stats(puzzle)),
    )

    panel = Panel(
        group,
        title=f"[bold green]Game of Fifteen  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def play(puzzle: Puzzle, log: MoveLog, delay: float = 0.5) -> None:
    """Run moves until the puzzle is solved or the player enters 0."""
    status = ""
    while True:
        log.record_board(puzzle.rows)

        if puzzle.is_solved():
            puzzle.state.pause()
            _draw_win(puzzle)
            return

        _draw_game(puzzle, status)
        status = ""

        tile = read_tile(ask=console.input)
        if tile == QUIT:
            return

        log.record_move(tile)
        if not puzzle.apply_move(tile):
            status = f"[red]Illegal move.[/red] Tile {tile} cannot slide."
            time.sleep(delay)

        time.sleep(delay)


# -- public entry point -------------------------------------------------------


def run(puzzle: Puzzle, log: MoveLog, delay: float = 0.5) -> None:
    """Greet the player, then play *puzzle* with the Rich CLI."""
    _draw_greeting(delay)
    play(puzzle, log, delay)

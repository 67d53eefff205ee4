"""Game of Fifteen.

Usage::

    fifteen 4                     # plain terminal, 4×4
    fifteen 3 -f rich             # Rich terminal, 3×3
    fifteen 3 -d 0 < moves.txt    # scripted session, no pauses
    fifteen --verify log.txt      # check a recorded session
"""

import importlib
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from fifteen.backend.engine.gameplay import Puzzle, replay
from fifteen.backend.models.board import InvalidDimension
from fifteen.backend.models.movelog import MoveLog, MoveLogError, read_log

DEFAULT_LOG = Path("log.txt")

EXIT_USAGE = 1
EXIT_DIMENSION = 2
EXIT_LOG = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "fifteen.frontend.cli.vanilla.app",
    Frontend.rich: "fifteen.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_size(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidDimension(raw) from None


def _verify(path: Path) -> None:
    try:
        session = read_log(path)
        problems = replay(session)
        solved = Puzzle.from_board(session.boards[-1]).is_solved()
    except OSError as exc:
        typer.echo(f"Cannot read {path}: {exc.strerror}", err=True)
        raise typer.Exit(code=EXIT_USAGE)
    except ValueError as exc:
        # MoveLogError, or InvalidDimension for a logged board of the wrong size
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    for problem in problems:
        typer.echo(f"{path}: {problem}", err=True)
    if problems:
        raise typer.Exit(code=EXIT_USAGE)

    typer.echo(
        f"{path}: {session.size}×{session.size} board, "
        f"moves replayed: {len(session.moves)}, "
        f"{'solved' if solved else 'not solved'}."
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    args: Optional[list[str]] = typer.Argument(
        None, metavar="D",
        help="Board dimension (3-9).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Terminal frontend to play with.",
    ),
    log: Path = typer.Option(
        DEFAULT_LOG, "-l", "--log",
        help="File that records every board and move.",
    ),
    delay: float = typer.Option(
        0.5, "-d", "--delay",
        min=0.0,
        help="Seconds to pause after each move.",
    ),
    verify: Optional[Path] = typer.Option(
        None, "--verify",
        help="Replay a move log, report whether it is consistent, and exit.",
    ),
) -> None:
    """Game of Fifteen."""
    if verify is not None:
        _verify(verify)
        return

    if not args or len(args) != 1:
        typer.echo("Usage: fifteen d")
        raise typer.Exit(code=EXIT_USAGE)

    try:
        puzzle = Puzzle(_parse_size(args[0]))
    except InvalidDimension as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=EXIT_DIMENSION)

    try:
        move_log = MoveLog(log)
    except OSError as exc:
        typer.echo(f"Cannot open {log}: {exc.strerror}", err=True)
        raise typer.Exit(code=EXIT_LOG)

    mod = importlib.import_module(_RUNNERS[frontend])
    with move_log:
        mod.run(puzzle, move_log, delay=delay)


if __name__ == "__main__":
    app()

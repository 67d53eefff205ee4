"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print and ANSI codes) for rendering, and reads one tile
number per line.
"""

from __future__ import annotations

import sys
import time

from fifteen.backend.engine.gameplay import Puzzle
from fifteen.backend.models.movelog import MoveLog
from fifteen.frontend.cli.input_handler import QUIT, read_tile


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


# -- board rendering ----------------------------------------------------------


def render_board(rows: tuple[tuple[int, ...], ...]) -> str:
    """Return the board as text, one line per row, the blank as ``_``."""
    width = len(str(len(rows) * len(rows) - 1))
    lines: list[str] = []
    for row in rows:
        cells = [f"{'_':>{width}}" if val == 0 else f"{val:>{width}}" for val in row]
        lines.append(" " + "  ".join(cells))
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _greet(delay: float) -> None:
    _clear()
    print(f"{_C}WELCOME TO GAME OF FIFTEEN{_R}")
    time.sleep(delay * 4)


def _show_board(puzzle: Puzzle) -> None:
    _clear()
    print(render_board(puzzle.rows))
    print()


def _show_win(puzzle: Puzzle) -> None:
    print(f"{_G}ftw!{_R}")
    print(
        f"Moves: {_Y}{puzzle.moves}{_R}  |  "
        f"Time: {_Y}{_format_time(puzzle.state.elapsed_time)}{_R}"
    )


# -- game loop ----------------------------------------------------------------


def play(puzzle: Puzzle, log: MoveLog, delay: float = 0.5) -> None:
    """Run moves until the puzzle is solved or the player enters 0."""
    while True:
        _show_board(puzzle)
        log.record_board(puzzle.rows)

        if puzzle.is_solved():
            puzzle.state.pause()
            _show_win(puzzle)
            return

        tile = read_tile()
        if tile == QUIT:
            return

        log.record_move(tile)
        if not puzzle.apply_move(tile):
            print("\nIllegal move.")
            time.sleep(delay)

        time.sleep(delay)


# -- public entry point -------------------------------------------------------


def run(puzzle: Puzzle, log: MoveLog, delay: float = 0.5) -> None:
    """Greet the player, then play *puzzle* in the plain terminal."""
    _greet(delay)
    play(puzzle, log, delay)

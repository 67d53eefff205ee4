"""Offline verification of a recorded session."""

from __future__ import annotations

from fifteen.backend.engine.gameplay.game import Puzzle
from fifteen.backend.models.movelog import SessionLog


def replay(session: SessionLog) -> list[str]:
    """Replay every logged move and compare against the logged boards.

    A legal move must turn board *n* into board *n + 1*; an illegal one must
    leave it unchanged. Returns one message per mismatch, so an empty list
    means the log is consistent.
    """
    problems: list[str] = []
    if not session.boards:
        return ["log holds no boards"]

    for i, tile in enumerate(session.moves):
        if i + 1 >= len(session.boards):
            # The session was interrupted before the next board was written.
            break
        puzzle = Puzzle.from_board(session.boards[i])
        legal = puzzle.apply_move(tile)
        expected = session.boards[i + 1].rows()
        if puzzle.rows != expected:
            verdict = "legal" if legal else "illegal"
            problems.append(
                f"move {i + 1} (tile {tile}, {verdict}) does not produce "
                f"the next logged board"
            )
    return problems

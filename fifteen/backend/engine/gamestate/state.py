"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from enum import StrEnum

from fifteen.backend.models.board import Board


class Status(StrEnum):
    PLAYING = "playing"
    SOLVED = "solved"


class GameState:
    """Holds the current board, move counter, and elapsed time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

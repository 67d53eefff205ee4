"""Core puzzle logic — validates moves and checks the win condition."""

from __future__ import annotations

from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gamestate import GameState, Status
from fifteen.backend.models.board import Board


class Puzzle:
    """A single d×d Game of Fifteen.

    The puzzle owns its board for its whole lifetime; the size never
    changes after ``initialize``.
    """

    def __init__(self, size: int) -> None:
        self.initialize(size)

    def initialize(self, size: int) -> None:
        """Lay out the countdown board for *size* and build the goal board.

        Raises ``InvalidDimension`` when *size* is outside [3, 9]. Calling it
        again resets the board, but only for the size the puzzle already has.
        """
        current = getattr(self, "size", size)
        if size != current:
            raise ValueError(
                f"Cannot resize a {current}×{current} puzzle to {size}×{size}."
            )
        board = GameGenerator.descending(size)
        self.size = size
        self.state = GameState(board)
        self._solved = GameGenerator.solved(size).rows()

    @classmethod
    def from_board(cls, board: Board) -> Puzzle:
        """Create a puzzle around an existing board (e.g. read back from a log)."""
        GameGenerator.check_size(board.size)
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameState(board.copy())
        obj._solved = GameGenerator.solved(board.size).rows()
        return obj

    # -- movement -------------------------------------------------------------

    def apply_move(self, tile: int) -> bool:
        """Slide *tile* into the blank if the two cells are neighbours.

        Returns True if the move was applied. Tiles that are not on the
        board, the blank itself and tiles that do not border the blank
        leave the board untouched and return False.
        """
        board = self.state.board
        pos = board.find(tile)
        if pos is None:
            return False

        row, col = pos
        br, bc = board.blank_pos
        if abs(row - br) + abs(col - bc) != 1:
            return False

        self._swap(board, pos)
        self.state.increment_moves()
        return True

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        """True iff every cell matches the goal layout."""
        return self.state.board.rows() == self._solved

    @property
    def status(self) -> Status:
        return Status.SOLVED if self.is_solved() else Status.PLAYING

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        return self.state.board.rows()

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.state.board.blank_pos

    @property
    def moves(self) -> int:
        return self.state.moves

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: tuple[int, int]) -> None:
        br, bc = board.blank_pos
        tr, tc = target
        board.tiles[br][bc], board.tiles[tr][tc] = (
            board.tiles[tr][tc],
            board.tiles[br][bc],
        )
        board.blank_pos = (tr, tc)

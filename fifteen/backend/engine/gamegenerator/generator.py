"""Builds the starting and goal layouts of the puzzle."""

from __future__ import annotations

from fifteen.backend.models.board import DIM_MAX, DIM_MIN, Board, InvalidDimension


class GameGenerator:
    """Creates boards for a given size. All methods are static."""

    @staticmethod
    def check_size(size: int) -> None:
        """Raise ``InvalidDimension`` unless DIM_MIN <= *size* <= DIM_MAX."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidDimension(size)
        if not DIM_MIN <= size <= DIM_MAX:
            raise InvalidDimension(size)

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        GameGenerator.check_size(size)
        tiles: list[list[int]] = []
        num = 1
        for r in range(size):
            row: list[int] = []
            for c in range(size):
                if r == size - 1 and c == size - 1:
                    row.append(0)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return Board(size=size, tiles=tiles, blank_pos=(size - 1, size - 1))

    @staticmethod
    def descending(size: int) -> Board:
        """Return the starting board: tiles counting down, blank bottom-right.

        With an even *size* the tile count is odd, so the plain countdown is
        an odd permutation of the goal and cannot be solved. Swapping 1 and 2
        (the two cells left of the blank) restores the parity.
        """
        GameGenerator.check_size(size)
        tiles: list[list[int]] = []
        num = size * size - 1
        for _ in range(size):
            row: list[int] = []
            for _ in range(size):
                row.append(num)
                num -= 1
            tiles.append(row)

        if size % 2 == 0:
            last = tiles[size - 1]
            last[size - 3], last[size - 2] = last[size - 2], last[size - 3]

        return Board(size=size, tiles=tiles, blank_pos=(size - 1, size - 1))

"""Board model for the Game of Fifteen."""

from __future__ import annotations

from dataclasses import dataclass

DIM_MIN = 3
DIM_MAX = 9


class InvalidDimension(ValueError):
    """Raised when a board size falls outside ``[DIM_MIN, DIM_MAX]``."""

    def __init__(self, size: object) -> None:
        self.size = size
        super().__init__(
            f"Board must be between {DIM_MIN} x {DIM_MIN} and "
            f"{DIM_MAX} x {DIM_MAX}, inclusive."
        )


@dataclass
class Board:
    """Represents the puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [8, 7, 6, 5, 4, 3, 2, 1, 0])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"A {size}×{size} board must hold each of "
                f"0..{size * size - 1} exactly once."
            )
        tiles: list[list[int]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(size):
            row = list(flat[r * size : (r + 1) * size])
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows, checking that it is square."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(f"Board rows must all have length {size}.")
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    def find(self, tile: int) -> tuple[int, int] | None:
        """Return the (row, col) holding *tile*, scanning row by row."""
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == tile:
                    return (r, c)
        return None

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Read-only snapshot of the tiles, top row first."""
        return tuple(tuple(row) for row in self.tiles)

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

"""Board model, layout generator and game state."""

from __future__ import annotations

import pytest

from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gamestate import GameState
from fifteen.backend.models.board import Board


# -- Board --------------------------------------------------------------------


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert board.blank_pos == (1, 1)
    assert board.tiles[2][0] == 6


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(ValueError, match="Expected 9 tiles"):
        Board.from_flat(3, [1, 2, 3, 0])


def test_from_flat_rejects_repeated_tiles() -> None:
    with pytest.raises(ValueError, match="exactly once"):
        Board.from_flat(3, [1, 1, 2, 3, 4, 5, 6, 7, 0])


def test_from_rows_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError, match="length 3"):
        Board.from_rows([[1, 2, 3], [4, 5], [6, 7, 0]])


def test_find() -> None:
    board = Board.from_rows([[8, 7, 6], [5, 4, 3], [2, 1, 0]])
    assert board.find(8) == (0, 0)
    assert board.find(1) == (2, 1)
    assert board.find(0) == (2, 2)
    assert board.find(9) is None


def test_is_tile_correct() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
    assert board.is_tile_correct(0, 0)
    assert board.is_tile_correct(2, 2)
    assert not board.is_tile_correct(2, 0)
    assert not board.is_tile_correct(2, 1)


def test_rows_is_a_snapshot() -> None:
    board = Board.from_rows([[8, 7, 6], [5, 4, 3], [2, 1, 0]])
    rows = board.rows()
    board.tiles[0][0] = 99
    assert rows[0][0] == 8
    assert isinstance(rows, tuple) and isinstance(rows[0], tuple)


def test_copy_is_independent() -> None:
    board = Board.from_rows([[8, 7, 6], [5, 4, 3], [2, 1, 0]])
    clone = board.copy()
    clone.tiles[2][1], clone.tiles[2][2] = 0, 1
    clone.blank_pos = (2, 1)
    assert board.tiles[2] == [2, 1, 0]
    assert board.blank_pos == (2, 2)


# -- GameGenerator ------------------------------------------------------------


def test_solved_layout() -> None:
    board = GameGenerator.solved(3)
    assert board.rows() == ((1, 2, 3), (4, 5, 6), (7, 8, 0))
    assert board.blank_pos == (2, 2)


def test_descending_layout_is_fresh_each_time() -> None:
    first = GameGenerator.descending(4)
    first.tiles[0][0] = 0
    assert GameGenerator.descending(4).tiles[0][0] == 15


# -- GameState ----------------------------------------------------------------


def test_elapsed_time_stops_while_paused(monkeypatch: pytest.MonkeyPatch) -> None:
    now = [100.0]
    monkeypatch.setattr("fifteen.backend.engine.gamestate.state.time.time", lambda: now[0])

    state = GameState(GameGenerator.solved(3))
    now[0] = 103.0
    state.pause()
    now[0] = 110.0
    assert state.elapsed_time == pytest.approx(3.0)

"""Shared fixtures for the Game of Fifteen tests."""

from __future__ import annotations

import pytest

from fifteen.backend.engine.gameplay import Puzzle
from fifteen.backend.models.board import Board


@pytest.fixture
def puzzle3() -> Puzzle:
    """A fresh 3×3 puzzle: 8 7 6 / 5 4 3 / 2 1 _."""
    return Puzzle(3)


@pytest.fixture
def near_solved() -> Puzzle:
    """A 3×3 puzzle one move (tile 8) away from the goal."""
    return Puzzle.from_board(Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8]))

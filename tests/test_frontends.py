"""Terminal frontends — rendering, tile input, and winning a session."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from fifteen.backend.engine.gameplay import Puzzle, replay
from fifteen.backend.models.movelog import MoveLog, read_log
from fifteen.frontend.cli.input_handler import QUIT, read_tile
from fifteen.frontend.cli.rich import app as rich_app
from fifteen.frontend.cli.vanilla import app as vanilla_app


# -- input handler ------------------------------------------------------------


def _scripted(answers: list[str]):
    prompts: list[str] = []
    replies = iter(answers)

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    return ask, prompts


def test_read_tile_parses_integer() -> None:
    ask, prompts = _scripted([" 12 "])
    assert read_tile(ask=ask) == 12
    assert prompts == ["Tile to move: "]


def test_read_tile_retries_until_integer() -> None:
    ask, prompts = _scripted(["", "abc", "3.5", "-4"])
    assert read_tile(ask=ask) == -4
    assert prompts == ["Tile to move: ", "Retry: ", "Retry: ", "Retry: "]


def test_read_tile_end_of_input_quits() -> None:
    ask, _ = _scripted(["nope"])
    assert read_tile(ask=ask) == QUIT


# -- rendering ----------------------------------------------------------------


def test_vanilla_render_3x3() -> None:
    assert vanilla_app.render_board(Puzzle(3).rows) == " 8  7  6\n 5  4  3\n 2  1  _"


def test_vanilla_render_pads_two_digit_tiles() -> None:
    lines = vanilla_app.render_board(Puzzle(4).rows).splitlines()
    assert lines[0] == " 15  14  13  12"
    assert lines[3] == "  3   1   2   _"


def test_rich_render_has_one_row_per_board_row() -> None:
    table = rich_app.render_board(Puzzle(5).state.board)
    assert table.row_count == 5
    assert len(table.columns) == 5


# -- winning ------------------------------------------------------------------


@pytest.mark.parametrize("frontend", [vanilla_app, rich_app], ids=["vanilla", "rich"])
def test_winning_move_ends_session(
    frontend,
    near_solved: Puzzle,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n8\n"))
    path = tmp_path / "log.txt"

    with MoveLog(path) as log:
        frontend.play(near_solved, log, delay=0)

    assert near_solved.is_solved()
    assert near_solved.moves == 1
    assert "ftw!" in capsys.readouterr().out

    session = read_log(path)
    assert session.moves == [1, 8]
    assert len(session.boards) == 3
    assert replay(session) == []
    assert Puzzle.from_board(session.boards[-1]).is_solved()

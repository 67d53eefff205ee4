"""Plain-text move log: writing it during a session and reading it back.

A log is a sequence of board snapshots, each row on its own line with the
tiles separated by ``|`` (the blank written as ``0``), and after each
snapshot but the last the tile the player entered, alone on a line::

    8|7|6
    5|4|3
    2|1|0
    1
    8|7|6
    5|4|3
    2|0|1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Sequence

from fifteen.backend.models.board import Board

SEPARATOR = "|"


class MoveLogError(ValueError):
    """Raised when a log file cannot be parsed."""

    def __init__(self, line_no: int, message: str) -> None:
        self.line_no = line_no
        super().__init__(f"line {line_no}: {message}")


class MoveLog:
    """Appends board snapshots and moves to a log file.

    The file is truncated when opened and flushed after every write so that
    a crashed session still leaves a usable log.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._file: IO[str] = open(filepath, "w", encoding="utf-8")

    def __enter__(self) -> MoveLog:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    # -- writing --------------------------------------------------------------

    def record_board(self, rows: Iterable[Sequence[int]]) -> None:
        for row in rows:
            self._file.write(SEPARATOR.join(str(v) for v in row) + "\n")
        self._file.flush()

    def record_move(self, tile: int) -> None:
        self._file.write(f"{tile}\n")
        self._file.flush()


# -- reading ------------------------------------------------------------------


@dataclass
class SessionLog:
    """A parsed log: ``boards[i]`` was on screen when ``moves[i]`` was entered."""

    size: int
    boards: list[Board] = field(default_factory=list)
    moves: list[int] = field(default_factory=list)


def parse_log(text: str) -> SessionLog:
    """Parse the contents of a move log."""
    lines = [(n, line.strip()) for n, line in enumerate(text.splitlines(), 1)]
    lines = [(n, line) for n, line in lines if line]
    if not lines:
        raise MoveLogError(0, "log is empty")

    if SEPARATOR not in lines[0][1]:
        raise MoveLogError(lines[0][0], "log must start with a board")
    size = len(lines[0][1].split(SEPARATOR))
    session = SessionLog(size=size)
    pending: list[list[int]] = []
    first_row_line = lines[0][0]

    for line_no, line in lines:
        values = _parse_ints(line_no, line)
        if SEPARATOR in line:
            if not pending:
                first_row_line = line_no
            if len(values) != size:
                raise MoveLogError(
                    line_no, f"expected {size} tiles per row, got {len(values)}"
                )
            pending.append(values)
            if len(pending) == size:
                session.boards.append(_build_board(first_row_line, pending))
                pending = []
            continue

        if pending:
            raise MoveLogError(line_no, "move entered in the middle of a board")
        if len(session.moves) != len(session.boards) - 1:
            raise MoveLogError(line_no, "two moves without a board between them")
        session.moves.append(values[0])

    if pending:
        raise MoveLogError(lines[-1][0], "log ends with an incomplete board")
    return session


def read_log(filepath: Path) -> SessionLog:
    """Read and parse the move log at *filepath*."""
    return parse_log(Path(filepath).read_text(encoding="utf-8"))


def _parse_ints(line_no: int, line: str) -> list[int]:
    try:
        return [int(v) for v in line.split(SEPARATOR)]
    except ValueError:
        raise MoveLogError(line_no, f"not a list of integers: {line!r}") from None


def _build_board(line_no: int, rows: list[list[int]]) -> Board:
    try:
        return Board.from_rows(rows)
    except ValueError as exc:
        raise MoveLogError(line_no, str(exc)) from None

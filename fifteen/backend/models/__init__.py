from fifteen.backend.models.board import DIM_MAX, DIM_MIN, Board, InvalidDimension
from fifteen.backend.models.movelog import (
    MoveLog,
    MoveLogError,
    SessionLog,
    parse_log,
    read_log,
)

__all__ = [
    "DIM_MAX",
    "DIM_MIN",
    "Board",
    "InvalidDimension",
    "MoveLog",
    "MoveLogError",
    "SessionLog",
    "parse_log",
    "read_log",
]

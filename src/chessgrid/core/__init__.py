"""Core domain layer — a 64-square chess board with zero external dependencies.

Quick start::

    from chessgrid.core import Board

    board = Board()
    board.move_piece("e1", "e2")
    print(board.codes_by_position())  # {'e2': 'WK', 'e8': 'BK'}
"""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import (
    BoardError,
    InvariantViolationError,
    MalformedEncodingError,
    NoSuchPieceError,
    UnknownSquareError,
    WrongCardinalityError,
)
from chessgrid.core.interfaces import IChessBoard
from chessgrid.core.piece import Piece, decode_square_code, piece_sort_key
from chessgrid.core.types import (
    COLUMNS,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "COLUMNS",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "IChessBoard",
    "Piece",
    "decode_square_code",
    "piece_sort_key",
    # Errors
    "BoardError",
    "InvariantViolationError",
    "MalformedEncodingError",
    "NoSuchPieceError",
    "UnknownSquareError",
    "WrongCardinalityError",
]

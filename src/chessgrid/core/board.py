"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import (
    InvariantViolationError,
    MalformedEncodingError,
    NoSuchPieceError,
    WrongCardinalityError,
)
from chessgrid.core.interfaces import IChessBoard
from chessgrid.core.piece import Piece, decode_square_code, piece_sort_key
from chessgrid.core.types import (
    COLUMNS,
    make_square,
    parse_square,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

_SQUARE_COUNT = 64
_WHITE_KING_HOME = make_square(4, 0)  # e1
_BLACK_KING_HOME = make_square(4, 7)  # e8


class Board(IChessBoard):
    """Mutable 64-square board.

    A new board holds a white king on e1 and a black king on e8. The
    one-king-per-color rule is enforced by the bulk setters only;
    :meth:`move_piece` trusts its caller.

    Not thread-safe: guard every call with one external lock when sharing a
    board between threads.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT
        self._squares[_WHITE_KING_HOME] = Piece(Color.WHITE, PieceType.KING)
        self._squares[_BLACK_KING_HOME] = Piece(Color.BLACK, PieceType.KING)

    # -- Bulk replacement ---------------------------------------------------

    def set_board_by_codes(self, codes: Sequence[str]) -> bool:
        _check_cardinality(codes)
        return self.set_board_by_pieces([decode_square_code(code) for code in codes])

    def set_board_by_pieces(self, pieces: Sequence[Piece | None]) -> bool:
        _check_cardinality(pieces)
        candidate: list[Piece | None] = list(pieces)

        kings_seen = [False, False]
        for sq, piece in enumerate(candidate):
            if piece is None:
                continue
            if not isinstance(piece, Piece):
                raise MalformedEncodingError(
                    f"Invalid entry at {square_name(sq)}: {piece!r}"
                )
            if piece.piece_type != PieceType.KING:
                continue
            if kings_seen[piece.color]:
                raise InvariantViolationError(
                    f"More than one {piece.color.name} king (second at {square_name(sq)})"
                )
            kings_seen[piece.color] = True

        for color in Color:
            if not kings_seen[color]:
                raise InvariantViolationError(f"No {color.name} king on board")

        changed = candidate != self._squares
        self._squares = candidate
        _LOGGER.debug("Board replaced (changed=%s)", changed)
        return changed

    # -- Queries ------------------------------------------------------------

    def codes_by_position(self) -> dict[str, str]:
        return {name: piece.code for name, piece in self.pieces_by_position().items()}

    def pieces_by_position(self) -> dict[str, Piece]:
        return {
            square_name(sq): piece
            for sq, piece in enumerate(self._squares)
            if piece is not None
        }

    def piece_at(self, position: str) -> Piece | None:
        return self._squares[parse_square(position)]

    def pieces_of_color(self, color: Color | str) -> frozenset[Piece]:
        return frozenset(self._pieces_of(Color.coerce(color)))

    def ordered_pieces_of_color(self, color: Color | str) -> list[Piece]:
        return sorted(self._pieces_of(Color.coerce(color)), key=piece_sort_key)

    def _pieces_of(self, color: Color) -> list[Piece]:
        return [p for p in self._squares if p is not None and p.color == color]

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, old_position: str, new_position: str) -> None:
        from_sq = parse_square(old_position)
        to_sq = parse_square(new_position)
        piece = self._squares[from_sq]
        if piece is None:
            raise NoSuchPieceError(f"No piece on {old_position!r}")

        captured = self._squares[to_sq]
        self._squares[from_sq] = None
        self._squares[to_sq] = piece
        if captured is not None and from_sq != to_sq:
            _LOGGER.debug(
                "%s %s -> %s captures %s", piece, old_position, new_position, captured
            )
        else:
            _LOGGER.debug("%s %s -> %s", piece, old_position, new_position)

    def to_codes(self) -> list[str]:
        """Row-major 64-entry code list, the input format of :meth:`set_board_by_codes`."""
        return [piece.code if piece else "" for piece in self._squares]

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Default two-king layout: white king on e1, black king on e8."""
        return cls()

    @classmethod
    def from_codes(cls, codes: Sequence[str]) -> Board:
        b = cls()
        b.set_board_by_codes(codes)
        return b

    @classmethod
    def from_pieces(cls, pieces: Sequence[Piece | None]) -> Board:
        b = cls()
        b.set_board_by_pieces(pieces)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[make_square(file, rank)]
                row.append(p.code if p else "..")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  " + "  ".join(COLUMNS))
        return "\n".join(rows)


def _check_cardinality(entries: Sequence[object]) -> None:
    if len(entries) != _SQUARE_COUNT:
        raise WrongCardinalityError(
            f"Expected {_SQUARE_COUNT} squares, got {len(entries)}"
        )


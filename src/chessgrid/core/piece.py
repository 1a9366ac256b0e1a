"""Piece value object and the two-letter piece code."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import MalformedEncodingError

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Pieces compare and hash by ``(color, piece_type)``. Their natural order
    follows the code letters: color first (``B`` before ``W``), then the
    identifying letter (``B < K < N < P < Q < R``).
    """

    color: Color
    piece_type: PieceType

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise MalformedEncodingError(f"Invalid piece color: {self.color!r}")
        if not isinstance(self.piece_type, PieceType):
            raise MalformedEncodingError(f"Invalid piece type: {self.piece_type!r}")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def make(cls, color: Color | str, kind: PieceType | str) -> Piece:
        """Build a piece from enum members or their letters, e.g. ``("W", "N")``."""
        return cls(Color.coerce(color), PieceType.coerce(kind))

    @classmethod
    def pawn(cls, color: Color | str) -> Piece:
        return cls.make(color, PieceType.PAWN)

    @classmethod
    def rook(cls, color: Color | str) -> Piece:
        return cls.make(color, PieceType.ROOK)

    @classmethod
    def knight(cls, color: Color | str) -> Piece:
        return cls.make(color, PieceType.KNIGHT)

    @classmethod
    def bishop(cls, color: Color | str) -> Piece:
        return cls.make(color, PieceType.BISHOP)

    @classmethod
    def queen(cls, color: Color | str) -> Piece:
        return cls.make(color, PieceType.QUEEN)

    @classmethod
    def king(cls, color: Color | str) -> Piece:
        return cls.make(color, PieceType.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    @classmethod
    def from_code(cls, code: str) -> Piece:
        """Create piece from a two-letter code, e.g. 'BN' → black knight."""
        if not isinstance(code, str) or len(code) != 2:
            raise MalformedEncodingError(f"Invalid piece code: {code!r}")
        return cls(Color.from_letter(code[0]), PieceType.from_letter(code[1]))

    @property
    def code(self) -> str:
        """Color letter followed by identifying letter, e.g. 'WK'."""
        return self.color.letter + self.piece_type.letter

    def __str__(self) -> str:
        return self.code

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_white(self) -> bool:
        return self.color == Color.WHITE

    @property
    def is_black(self) -> bool:
        return self.color == Color.BLACK

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return piece_sort_key(self) < piece_sort_key(other)


def piece_sort_key(piece: Piece) -> tuple[str, str]:
    """Sort key giving the natural piece order (color letter, then kind letter)."""
    return piece.color.letter, piece.piece_type.letter


def decode_square_code(entry: str) -> Piece | None:
    """Decode one bulk-input entry: '' is an empty square, otherwise a piece code."""
    if entry == "":
        return None
    return Piece.from_code(entry)

"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

from chessgrid.core.errors import MalformedEncodingError


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def letter(self) -> str:
        """Code letter: 'W' or 'B'."""
        return _COLOR_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> Color:
        try:
            return _LETTER_COLORS[letter]
        except (KeyError, TypeError):
            raise MalformedEncodingError(f"Invalid color letter: {letter!r}") from None

    @classmethod
    def coerce(cls, value: Color | str) -> Color:
        """Accept a member or its code letter."""
        if isinstance(value, Color):
            return value
        return cls.from_letter(value)


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Identifying letter, e.g. 'N' for a knight."""
        return _TYPE_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        try:
            return _LETTER_TYPES[letter]
        except (KeyError, TypeError):
            raise MalformedEncodingError(f"Invalid piece letter: {letter!r}") from None

    @classmethod
    def coerce(cls, value: PieceType | str) -> PieceType:
        if isinstance(value, PieceType):
            return value
        return cls.from_letter(value)


_COLOR_LETTERS: dict[Color, str] = {Color.WHITE: "W", Color.BLACK: "B"}
_LETTER_COLORS: dict[str, Color] = {v: k for k, v in _COLOR_LETTERS.items()}

_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}

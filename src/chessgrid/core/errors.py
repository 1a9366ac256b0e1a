"""Exceptions raised by the board layer.

Every error is a caller-input violation, so the hierarchy roots in
:class:`ValueError`.
"""

from __future__ import annotations


class BoardError(ValueError):
    """Base class for invalid arguments passed to the board layer."""


class MalformedEncodingError(BoardError):
    """A piece code, color tag or kind tag is not recognised."""


class WrongCardinalityError(BoardError):
    """A bulk board input does not hold exactly 64 entries."""


class InvariantViolationError(BoardError):
    """A board would not hold exactly one king of each color."""


class UnknownSquareError(BoardError):
    """A square name is not one of 'a1' .. 'h8'."""


class NoSuchPieceError(BoardError):
    """No piece stands on the square a move starts from."""

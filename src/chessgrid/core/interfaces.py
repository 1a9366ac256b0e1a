"""Abstract board contract.

Callers depend on :class:`IChessBoard`; :class:`chessgrid.core.board.Board`
is the concrete implementation.

Squares are named in algebraic notation: the bottom left square is "a1",
the bottom right "h1", the top left "a8".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessgrid.core.enums import Color
    from chessgrid.core.piece import Piece


class IChessBoard(ABC):
    """A 64-square board holding at most one piece per square.

    Only legal boards are accepted by the bulk setters: a board is legal iff it
    holds exactly one white king and exactly one black king.
    """

    @abstractmethod
    def set_board_by_codes(self, codes: Sequence[str]) -> bool:
        """Replace the whole board from 64 piece codes.

        Each entry is ``""`` for an empty square or two capital letters: the
        color then the identifying letter of the piece. Entries are read
        row-major starting at "a1", then "b1", ..., "h1", "a2", ... up to "h8".

        Returns ``True`` iff the board changed as a result of this call.
        """

    @abstractmethod
    def set_board_by_pieces(self, pieces: Sequence[Piece | None]) -> bool:
        """Same as :meth:`set_board_by_codes`, with already-decoded pieces."""

    @abstractmethod
    def codes_by_position(self) -> dict[str, str]:
        """Map each occupied square name to its two-letter piece code."""

    @abstractmethod
    def pieces_by_position(self) -> dict[str, Piece]:
        """Map each occupied square name to its piece."""

    @abstractmethod
    def piece_at(self, position: str) -> Piece | None:
        """Piece on *position* ("a1" .. "h8"), or ``None`` if the square is empty."""

    @abstractmethod
    def pieces_of_color(self, color: Color | str) -> frozenset[Piece]:
        """Distinct pieces of *color* on the board.

        Equal pieces collapse, so two white rooks and a single white rook give
        the same result.
        """

    @abstractmethod
    def ordered_pieces_of_color(self, color: Color | str) -> list[Piece]:
        """Every piece of *color*, duplicates kept, in natural piece order."""

    @abstractmethod
    def move_piece(self, old_position: str, new_position: str) -> None:
        """Move the piece on *old_position* to *new_position*.

        Any piece already on *new_position* disappears. The move is not checked
        against the rules of chess, only the square names and the presence of a
        piece on *old_position* are.
        """

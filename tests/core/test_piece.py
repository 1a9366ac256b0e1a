"""Tests for Piece and the piece code."""

import pytest

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import MalformedEncodingError
from chessgrid.core.piece import Piece, decode_square_code, piece_sort_key


class TestPieceConstruction:
    def test_make_from_letters(self) -> None:
        assert Piece.make("W", "N") == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_make_from_enums(self) -> None:
        assert Piece.make(Color.BLACK, PieceType.QUEEN) == Piece.queen("B")

    def test_convenience_constructors(self) -> None:
        assert Piece.pawn("W").piece_type == PieceType.PAWN
        assert Piece.rook("W").piece_type == PieceType.ROOK
        assert Piece.knight("W").piece_type == PieceType.KNIGHT
        assert Piece.bishop("W").piece_type == PieceType.BISHOP
        assert Piece.queen("W").piece_type == PieceType.QUEEN
        assert Piece.king("B").piece_type == PieceType.KING

    def test_color_queries(self) -> None:
        assert Piece.king("W").is_white
        assert not Piece.king("W").is_black
        assert Piece.king("B").is_black

    @pytest.mark.parametrize("color", ["X", "w", "", None, "WB"])
    def test_invalid_color(self, color: object) -> None:
        with pytest.raises(MalformedEncodingError, match="color"):
            Piece.make(color, "K")  # type: ignore[arg-type]

    @pytest.mark.parametrize("kind", ["X", "k", "", None])
    def test_invalid_kind(self, kind: object) -> None:
        with pytest.raises(MalformedEncodingError, match="piece"):
            Piece.make("W", kind)  # type: ignore[arg-type]

    def test_direct_construction_checks_types(self) -> None:
        with pytest.raises(MalformedEncodingError):
            Piece("W", PieceType.KING)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        piece = Piece.king("W")
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]


class TestPieceCode:
    @pytest.mark.parametrize(
        "code",
        [c + k for c in "WB" for k in "PRNBQK"],
    )
    def test_code_round_trip(self, code: str) -> None:
        assert Piece.from_code(code).code == code

    def test_str_is_code(self) -> None:
        assert str(Piece.knight("B")) == "BN"

    def test_symbol(self) -> None:
        assert Piece.king("W").symbol == "♔"
        assert Piece.knight("B").symbol == "♞"

    @pytest.mark.parametrize("code", ["W", "WKK", "XK", "WX", "wk", "KW"])
    def test_malformed_code(self, code: str) -> None:
        with pytest.raises(MalformedEncodingError):
            Piece.from_code(code)

    def test_decode_empty_square(self) -> None:
        assert decode_square_code("") is None
        assert decode_square_code("BP") == Piece.pawn("B")


class TestPieceOrdering:
    def test_equality_is_structural(self) -> None:
        assert Piece.rook("W") == Piece.make("W", "R")
        assert Piece.rook("W") != Piece.rook("B")
        assert len({Piece.rook("W"), Piece.rook("W")}) == 1

    def test_kind_order_is_alphabetical_by_letter(self) -> None:
        pieces = [Piece.make("W", k) for k in "RQPNKB"]
        assert [p.piece_type.letter for p in sorted(pieces)] == list("BKNPQR")

    def test_color_sorts_first(self) -> None:
        pieces = [Piece.pawn("W"), Piece.rook("B"), Piece.bishop("W")]
        assert sorted(pieces, key=piece_sort_key) == [
            Piece.rook("B"),
            Piece.bishop("W"),
            Piece.pawn("W"),
        ]

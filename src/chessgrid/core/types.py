"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import TypeAlias

from chessgrid.core.errors import UnknownSquareError

Square: TypeAlias = int  # 0–63

COLUMNS: tuple[str, ...] = ("a", "b", "c", "d", "e", "f", "g", "h")


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return COLUMNS[file_of(sq)] + str(rank_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if (
        not isinstance(name, str)
        or len(name) != 2
        or name[0] not in COLUMNS
        or name[1] not in "12345678"
    ):
        raise UnknownSquareError(f"Invalid square name: {name!r}")
    return make_square(COLUMNS.index(name[0]), int(name[1]) - 1)


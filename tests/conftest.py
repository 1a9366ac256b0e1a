"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

_EMPTY_ROW = ["", "", "", "", "", "", "", ""]


def rows_to_codes(*rows: list[str]) -> list[str]:
    """Join rank rows given from rank 1 upwards into one 64-entry code list."""
    return [code for row in rows for code in row]


@pytest.fixture
def rnk_codes() -> list[str]:
    """Two white rooks, a black rook and knight, plus both kings."""
    row1 = ["WR", "", "", "", "WK", "", "", "WR"]
    row8 = ["BR", "BN", "", "", "BK", "", "", ""]
    return rows_to_codes(row1, *([_EMPTY_ROW] * 6), row8)


@pytest.fixture
def default_codes() -> list[str]:
    """The layout of a freshly created board."""
    codes = [""] * 64
    codes[4] = "WK"
    codes[60] = "BK"
    return codes

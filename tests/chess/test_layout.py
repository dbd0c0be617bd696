"""Unit tests for /src/chess/layout.py"""

import pytest

from src.chess.layout import is_valid_layout, layout_row, parse_layout
from src.chess.square import Square
from src.core.exceptions import InvalidLayoutError

STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@pytest.mark.parametrize(
    "layout",
    [
        STARTING_LAYOUT,
        "/".join(["8"] * 8),
        "4k3/8/8/8/8/8/8/4K3",
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1",
    ],
)
def test_valid_layouts(layout: str) -> None:
    assert is_valid_layout(layout)


@pytest.mark.parametrize(
    "layout",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP",  # only 7 rows
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/8",  # 9 rows
        "rnbqkbnr/ppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",  # row with 7 cells
        "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR",  # row with 9 cells
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX",  # unknown piece letter
        "",
    ],
)
def test_invalid_layouts(layout: str) -> None:
    assert not is_valid_layout(layout)


def test_parse_layout_raises_on_invalid_layout() -> None:
    with pytest.raises(InvalidLayoutError):
        list(parse_layout("not a board"))


def test_parse_starting_layout() -> None:
    """32 pieces: dark on rows 0 and 1, light on rows 6 and 7"""
    pieces = list(parse_layout(STARTING_LAYOUT))
    assert len(pieces) == 32

    by_square = {piece.square: piece.symbol for piece in pieces}
    assert "".join(by_square[Square(0, col)] for col in range(8)) == "rnbqkbnr"
    assert "".join(by_square[Square(1, col)] for col in range(8)) == "pppppppp"
    assert "".join(by_square[Square(6, col)] for col in range(8)) == "PPPPPPPP"
    assert "".join(by_square[Square(7, col)] for col in range(8)) == "RNBQKBNR"


def test_parse_layout_with_gaps() -> None:
    pieces = list(parse_layout("4k3/8/8/8/8/8/8/R6K"))
    assert {(piece.symbol, piece.square) for piece in pieces} == {
        ("k", Square(0, 4)),
        ("R", Square(7, 0)),
        ("K", Square(7, 7)),
    }


@pytest.mark.parametrize(
    "symbols, expected",
    [
        ([None] * 8, "8"),
        (["r", "n", "b", "q", "k", "b", "n", "r"], "rnbqkbnr"),
        ([None, None, "p", None, None, None, None, "K"], "2p4K"),
        (["P"] + [None] * 7, "P7"),
    ],
)
def test_layout_row(symbols: list[str | None], expected: str) -> None:
    assert layout_row(symbols) == expected

"""
Type definitions used across layers
"""

from enum import StrEnum


class Side(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opponent(self) -> "Side":
        return Side.DARK if self == Side.LIGHT else Side.LIGHT

    @property
    def display_name(self) -> str:
        """Name shown on the turn indicator"""
        return "White" if self == Side.LIGHT else "Black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"

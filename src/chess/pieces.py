"""Defines the chess pieces"""

from dataclasses import dataclass, field
from typing import Self
from uuid import UUID, uuid4

from src.chess.square import Square
from src.core.shared_types import PieceType, Side

SYMBOL_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_SYMBOL: dict[PieceType, str] = {
    value: key for key, value in SYMBOL_TO_PIECE.items()
}


@dataclass
class Piece:
    type: PieceType
    side: Side
    square: Square
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_symbol(cls, character: str, square: Square) -> Self:
        # lower case: dark pieces, upper case: light pieces
        side = Side.LIGHT if character.isupper() else Side.DARK
        piece_type = SYMBOL_TO_PIECE[character.lower()]
        return cls(piece_type, side, square)

    @property
    def symbol(self) -> str:
        return (
            PIECE_TO_SYMBOL[self.type].upper()
            if self.side == Side.LIGHT
            else PIECE_TO_SYMBOL[self.type].lower()
        )

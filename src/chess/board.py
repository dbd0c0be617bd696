"""The Board owns the pieces: it knows which piece sits on which square, and creates / destroys them."""

from dataclasses import dataclass
from typing import Optional, Self
from uuid import UUID

from src.chess.layout import layout_row, parse_layout
from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.shared_types import Side


@dataclass
class Board:
    cells: dict[Square, Optional[Piece]]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: None for square in all_squares()})

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from the piece placement part of a FEN string (see `parse_layout`)."""
        board = cls.empty()
        for piece in parse_layout(layout):
            board.place_piece(piece, piece.square)
        return board

    def to_layout(self) -> str:
        """Rows are separated by slashes, top row first."""
        return "/".join(
            layout_row(self._row_symbols(row)) for row in range(BOARD_DIMENSIONS[0])
        )

    def _row_symbols(self, row: int) -> list[str | None]:
        """symbol of every cell in the row (None if empty), left to right"""
        symbols: list[str | None] = []
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece_at(Square(row, col))
            symbols.append(piece.symbol if piece is not None else None)
        return symbols

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.cells.get(square)

    def find(self, piece_id: UUID) -> Optional[Piece]:
        return next(
            (piece for piece in self.pieces() if piece.id == piece_id),
            None,
        )

    def pieces(self, side: Optional[Side] = None) -> list[Piece]:
        """All live pieces (of one side, if given)"""
        return [
            piece
            for piece in self.cells.values()
            if piece is not None and (side is None or piece.side == side)
        ]

    def is_live(self, piece: Piece) -> bool:
        """The piece is on the board (and not a stale reference to a captured one)"""
        return self.piece_at(piece.square) is piece

    def place_piece(self, piece: Piece, square: Square) -> None:
        """Put a piece on an (empty) square. Mostly for setting up positions."""
        self.cells[square] = piece
        piece.square = square

    def remove_piece(self, piece: Piece) -> None:
        """Take a piece off the board. From here on it no longer exists for the game."""
        if self.is_live(piece):
            self.cells[piece.square] = None

    def move_piece(self, piece: Piece, target: Square) -> Optional[Piece]:
        """Update the position on the board. Returns the piece that was captured on the target square, if any."""
        captured = self.piece_at(target)
        if captured is not None:
            self.remove_piece(captured)
        self.cells[piece.square] = None
        self.place_piece(piece, target)
        return captured

    def is_consistent(self) -> bool:
        """Every cell's piece refers back to that cell, and no piece appears twice."""
        pieces = self.pieces()
        if len({id(piece) for piece in pieces}) != len(pieces):
            return False
        return all(
            piece is None or piece.square == square
            for square, piece in self.cells.items()
        )

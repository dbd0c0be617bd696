"""
Default settings of the board session.

(plain module constants, override by constructing your own BoardGeometry / passing a layout)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.chess.square import BOARD_DIMENSIONS, Square

# Pixel size of one square and top-left corner of the board on the canvas
SQUARE_SIZE = 64
BOARD_OFFSET = (100, 50)

# Piece placement part of a FEN string, read from row 0 (dark back rank) down to row 7
STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

# Audio cues: (note, duration) of the move tone and the looping background progression
MOVE_TONE = ("C4", "8n")
CHORD_DURATION = "2n"
CHORD_PROGRESSION: tuple[tuple[str, ...], ...] = (
    ("C4", "E4", "G4"),  # C major
    ("F4", "A4", "C5"),  # F major
    ("G4", "B4", "D5"),  # G major
    ("C4", "E4", "G4"),  # C major
)


# Square returned for pixels that cannot be placed on any row / column
OFF_BOARD = Square(-1, -1)


@dataclass(frozen=True)
class BoardGeometry:
    """Conversion between squares and canvas pixels"""

    square_size: int = SQUARE_SIZE
    offset_x: int = BOARD_OFFSET[0]
    offset_y: int = BOARD_OFFSET[1]

    @property
    def width(self) -> int:
        return BOARD_DIMENSIONS[1] * self.square_size

    @property
    def height(self) -> int:
        return BOARD_DIMENSIONS[0] * self.square_size

    def square_center(self, square: Square) -> tuple[float, float]:
        """Pixel position a piece on this square is drawn at"""
        x = self.offset_x + square.col * self.square_size + self.square_size / 2
        y = self.offset_y + square.row * self.square_size + self.square_size / 2
        return x, y

    def square_at(self, x: float, y: float) -> Square:
        """
        Square under a pixel coordinate.
        ---
        NOTE: no bounds check here. A release next to the board gives e.g. Square(-1, 3), callers decide what to do with it.
        Non-finite coordinates (inf, nan) are off the board as well.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            return OFF_BOARD
        col = int((x - self.offset_x) // self.square_size)
        row = int((y - self.offset_y) // self.square_size)
        return Square(row, col)

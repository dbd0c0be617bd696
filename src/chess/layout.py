"""
Encoding of the piece placement on the board as a string. (The first field of a FEN string)
"""

from typing import Iterator

from src.chess.pieces import SYMBOL_TO_PIECE, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidLayoutError


def is_valid_layout(layout: str) -> bool:
    """Check if a string describes a full board: 8 rows, 8 cells each, only known piece letters."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_layouts = layout.split("/")
    if len(row_layouts) != num_rows:
        return False

    for row_layout in row_layouts:
        col_count = 0
        for character in row_layout:
            # make sure every character is valid
            if character.isdigit():
                col_count += int(character)
            elif character.lower() in SYMBOL_TO_PIECE:
                col_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if col_count != num_cols:
            return False
    return True


def parse_layout(layout: str) -> Iterator[Piece]:
    """
    Create the pieces described by a layout string.

    ex. standard starting position:
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
    means:
    * row 0 holds the dark back rank, starting with the rook on a8
    * row 1 are the dark pawns
    * rows 2 through 5 have 8 consecutive empty squares
    * row 6 are the light pawns (capital letters)
    * row 7 is the light back rank
    """
    if not is_valid_layout(layout):
        raise InvalidLayoutError(f"Cannot interpret supplied string as layout: {layout!r}")

    for row, row_layout in enumerate(layout.split("/")):
        col = 0
        for character in row_layout:
            if character.isalpha():
                # simple case: a letter directly denotes the piece that should be created
                yield Piece.from_symbol(character, Square(row, col))
                col += 1
            else:
                # A number denotes the amount of empty squares after each other
                col += int(character)


def layout_row(symbols: list[str | None]) -> str:
    """Layout of a single row, given the symbol (or None) of every cell from left to right"""
    characters: list[str] = []
    empty_count = 0
    for symbol in symbols:
        if symbol is not None:
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(symbol)
        else:
            empty_count += 1

    # if the entire row is empty, then we still place this number in the string
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)

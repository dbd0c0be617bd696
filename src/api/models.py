"""Requests and Response models"""

import math
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.layout import is_valid_layout
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Side

AlgebraicSquare = str
PieceSymbol = str


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    if not (first_character in "abcdefgh" and second_character in "12345678"):
        return False
    return True


# --- REQUEST MODELS ---
class CreateSessionRequest(BaseModel):
    layout: Optional[str] = None

    @field_validator("layout")
    @classmethod
    def validate_layout(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_layout(value):
            raise InvalidRequestError(f"Cannot interpret {value!r} as a board layout.")
        return value


class GetSessionRequest(BaseModel):
    session_id: UUID


class DeleteSessionRequest(BaseModel):
    session_id: UUID


class SelectRequest(BaseModel):
    """Pointer down on the piece standing on `square`"""

    session_id: UUID
    square: AlgebraicSquare

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class ClickSquareRequest(SelectRequest):
    """Pointer down on an (empty or occupied) square: destination of the click-click flow"""


class DragReleaseRequest(BaseModel):
    """Piece dragged from `from_square` and released at canvas pixel (x, y)"""

    session_id: UUID
    from_square: AlgebraicSquare
    x: float
    y: float

    @field_validator("from_square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret from_square: {value!r} as a valid square name."
            )
        return value

    @field_validator("x", "y")
    @classmethod
    def validate_pixel(cls, value: float) -> float:
        if not math.isfinite(value):
            raise InvalidRequestError(
                f"Pixel coordinate must be a finite number, got {value!r}."
            )
        return value


# --- RESPONSE MODELS ---
class SessionResponse(BaseModel):
    session_id: UUID
    layout: str
    turn: Side
    selected: Optional[AlgebraicSquare]
    pieces: dict[AlgebraicSquare, PieceSymbol]
    last_event: Optional[str] = None

"""
Boundary layer data model(s).

These objects are handed from the domain layer to the Service, which converts them into API responses.
(Decouples the BoardState internals from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make SessionModel easier to read
AlgebraicSquare = str
PieceSymbol = str


@dataclass
class SessionModel:
    """Transport-safe snapshot of a board session."""

    layout: str
    turn: str
    selected: Optional[AlgebraicSquare] = None
    pieces: dict[AlgebraicSquare, PieceSymbol] = field(default_factory=dict)

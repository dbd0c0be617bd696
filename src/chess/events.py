"""
Notifications emitted by BoardState.

Render / audio layers subscribe with plain callbacks. Handlers are called synchronously, in subscription order,
from inside the call that changed the state.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Side


@dataclass(frozen=True)
class BoardInitialized:
    pieces: list[Piece]
    turn: Side


@dataclass(frozen=True)
class PieceSelected:
    """Piece got picked up: bring it to the front"""

    piece: Piece


@dataclass(frozen=True)
class MoveApplied:
    piece: Piece
    source: Square
    target: Square
    captured: Optional[Piece]


@dataclass(frozen=True)
class MoveRejected:
    """Piece stays on `source`: restore any transient visual position"""

    piece: Piece
    source: Square


@dataclass(frozen=True)
class TurnChanged:
    side: Side


BoardEvent = BoardInitialized | PieceSelected | MoveApplied | MoveRejected | TurnChanged

InitializedCallback = Callable[[BoardInitialized], None]
SelectedCallback = Callable[[PieceSelected], None]
MoveAppliedCallback = Callable[[MoveApplied], None]
MoveRejectedCallback = Callable[[MoveRejected], None]
TurnCallback = Callable[[TurnChanged], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_initialized: list[InitializedCallback] = field(default_factory=list)
    on_selected: list[SelectedCallback] = field(default_factory=list)
    on_move_applied: list[MoveAppliedCallback] = field(default_factory=list)
    on_move_rejected: list[MoveRejectedCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)

    def emit(self, event: BoardEvent) -> None:
        for handler in self._handlers(event):
            handler(event)

    def _handlers(self, event: BoardEvent) -> list[Callable]:
        match event:
            case BoardInitialized():
                return list(self.on_initialized)
            case PieceSelected():
                return list(self.on_selected)
            case MoveApplied():
                return list(self.on_move_applied)
            case MoveRejected():
                return list(self.on_move_rejected)
            case TurnChanged():
                return list(self.on_turn_changed)
        raise TypeError(f"Unknown board event: {event!r}")

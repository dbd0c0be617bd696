"""Keep a render surface in sync with the board, using only the notifications of BoardState."""

from typing import Protocol
from uuid import UUID

from src.chess.events import (
    BoardEvents,
    BoardInitialized,
    MoveApplied,
    MoveRejected,
    PieceSelected,
    TurnChanged,
)
from src.core.settings import BoardGeometry
from src.core.shared_types import Side


class RenderSurface(Protocol):
    """Whatever draws the pieces. Visuals only know the id of their piece."""

    def create_piece(self, piece_id: UUID, symbol: str, x: float, y: float) -> None:
        ...

    def move_piece(self, piece_id: UUID, x: float, y: float) -> None:
        ...

    def destroy_piece(self, piece_id: UUID) -> None:
        ...

    def bring_to_front(self, piece_id: UUID) -> None:
        ...

    def show_turn(self, text: str) -> None:
        ...


def turn_text(side: Side) -> str:
    return f"Turn: {side.display_name}"


class SceneSync:
    """Subscribes to the board events and drives the surface"""

    def __init__(self, surface: RenderSurface, geometry: BoardGeometry | None = None) -> None:
        self.surface = surface
        self.geometry = geometry or BoardGeometry()

    def connect(self, events: BoardEvents) -> None:
        events.on_initialized.append(self.on_initialized)
        events.on_selected.append(self.on_selected)
        events.on_move_applied.append(self.on_move_applied)
        events.on_move_rejected.append(self.on_move_rejected)
        events.on_turn_changed.append(self.on_turn_changed)

    def on_initialized(self, event: BoardInitialized) -> None:
        for piece in event.pieces:
            x, y = self.geometry.square_center(piece.square)
            self.surface.create_piece(piece.id, piece.symbol, x, y)
        self.surface.show_turn(turn_text(event.turn))

    def on_selected(self, event: PieceSelected) -> None:
        self.surface.bring_to_front(event.piece.id)

    def on_move_applied(self, event: MoveApplied) -> None:
        if event.captured is not None:
            self.surface.destroy_piece(event.captured.id)
        # snap to the centre of the target square
        self.surface.move_piece(event.piece.id, *self.geometry.square_center(event.target))

    def on_move_rejected(self, event: MoveRejected) -> None:
        self.surface.move_piece(event.piece.id, *self.geometry.square_center(event.source))

    def on_turn_changed(self, event: TurnChanged) -> None:
        self.surface.show_turn(turn_text(event.side))

"""
Translate pointer events into BoardState calls.

Handlers never touch the board themselves: every change goes through `BoardState.select` / `BoardState.attempt_move`.
"""

from collections.abc import Callable
from logging import getLogger

from src.chess.board_state import BoardState
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.settings import BoardGeometry

logger = getLogger(__name__)


class PointerInput:
    """Click-click and drag-release flows of one board session"""

    def __init__(self, state: BoardState, geometry: BoardGeometry | None = None) -> None:
        self.state = state
        self.geometry = geometry or BoardGeometry()
        # browsers only allow audio to start after a user gesture
        self.on_first_interaction: list[Callable[[], None]] = []
        self._interacted = False

    def piece_down(self, piece: Piece) -> bool:
        self._register_interaction()
        return self.state.select(piece)

    def square_down(self, square: Square) -> bool:
        """Second click of the click-click flow: move the selected piece here"""
        self._register_interaction()
        return self.state.attempt_move(None, square)

    def drag_end(self, piece: Piece, x: float, y: float) -> bool:
        """Piece released at a pixel position. Outside the board it snaps back to where it came from."""
        self._register_interaction()
        target = self.geometry.square_at(x, y)
        if not target.is_within_bounds():
            logger.debug("Drop at (%s, %s) is off the board", x, y)
        return self.state.attempt_move(piece, target)

    def _register_interaction(self) -> None:
        if self._interacted:
            return
        self._interacted = True
        for callback in self.on_first_interaction:
            callback()

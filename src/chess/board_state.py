"""
BoardState is the entrypoint into the domain layer for the input handlers and the service layer.
It owns the board and the turn, and holds the single move-application operation, so that the board and the
turn indicator stay consistent no matter if a move came in through a click or a drag.

NOTE: there are no chess rules here. Any destination that is not occupied by one of your own pieces is accepted.
"""

from enum import Enum, auto
from logging import getLogger
from typing import Optional

from src.chess.board import Board
from src.chess.events import (
    BoardEvents,
    BoardInitialized,
    MoveApplied,
    MoveRejected,
    PieceSelected,
    TurnChanged,
)
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.models import SessionModel
from src.core.settings import STARTING_LAYOUT
from src.core.shared_types import Side

logger = getLogger(__name__)


class TurnPhase(Enum):
    LIGHT_TO_MOVE = auto()
    DARK_TO_MOVE = auto()


class BoardState:
    """Board + side to move + transient selection."""

    def __init__(self, events: Optional[BoardEvents] = None) -> None:
        self.board = Board.empty()
        self.turn = Side.LIGHT
        self.selection: Optional[Piece] = None
        self.events = events if events is not None else BoardEvents()

    @property
    def phase(self) -> TurnPhase:
        return (
            TurnPhase.LIGHT_TO_MOVE if self.turn == Side.LIGHT else TurnPhase.DARK_TO_MOVE
        )

    def initialize(self, layout: str = STARTING_LAYOUT) -> None:
        """Set up the pieces (standard starting position by default). Light side moves first."""
        self.board = Board.from_layout(layout)
        self.turn = Side.LIGHT
        self.selection = None
        self.events.emit(BoardInitialized(self.board.pieces(), self.turn))

    def select(self, piece: Piece) -> bool:
        """Pick up a piece. Ignored if it is not your turn (the selection then stays as it was)."""
        if piece.side != self.turn or not self.board.is_live(piece):
            logger.debug(
                "Ignoring selection of %s on %s: %s to move",
                piece.symbol,
                piece.square.to_algebraic(),
                self.turn,
            )
            return False
        self.selection = piece
        self.events.emit(PieceSelected(piece))
        return True

    def attempt_move(self, piece: Optional[Piece], target: Square) -> bool:
        """
        Try to move a piece (the selected piece if none given) to the target square.
        ----

        1. no piece picked up? nothing happens.
        2. landing on your own piece (or off the board) --> rejected, the piece stays where it was
        3. otherwise: capture whatever opponent piece sits on the target, move, flip the turn
        4. the selection is cleared in every case

        Returns whether the move was applied.
        """
        piece = piece if piece is not None else self.selection
        if piece is None:
            return False

        try:
            if not self._is_accepted(piece, target):
                logger.debug(
                    "Rejected %s %s -> %s",
                    piece.symbol,
                    piece.square.to_algebraic(),
                    target,
                )
                self.events.emit(MoveRejected(piece, piece.square))
                return False
            self._apply(piece, target)
            return True
        finally:
            self.selection = None

    def snapshot(self) -> SessionModel:
        """Encode into a format the Service layer uses"""
        return SessionModel(
            layout=self.board.to_layout(),
            turn=str(self.turn),
            selected=(
                self.selection.square.to_algebraic()
                if self.selection is not None
                else None
            ),
            pieces={
                piece.square.to_algebraic(): piece.symbol
                for piece in self.board.pieces()
            },
        )

    # -- PRIVATE HELPERS ---
    def _is_accepted(self, piece: Piece, target: Square) -> bool:
        if not target.is_within_bounds():
            return False
        # only the side to move can move (stale or captured pieces neither)
        if piece.side != self.turn or not self.board.is_live(piece):
            return False
        occupant = self.board.piece_at(target)
        return occupant is None or occupant.side != self.turn

    def _apply(self, piece: Piece, target: Square) -> None:
        source = piece.square
        captured = self.board.move_piece(piece, target)
        self.turn = self.turn.opponent

        logger.info(
            "%s %s -> %s%s",
            piece.symbol,
            source.to_algebraic(),
            target.to_algebraic(),
            f" captures {captured.symbol}" if captured else "",
        )
        self.events.emit(MoveApplied(piece, source, target, captured))
        self.events.emit(TurnChanged(self.turn))

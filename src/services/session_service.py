"""Orchestration of communication from the input layer to the board sessions (and the reverse direction)."""

from logging import getLogger
from uuid import UUID

from src.api.models import (
    ClickSquareRequest,
    CreateSessionRequest,
    DeleteSessionRequest,
    DragReleaseRequest,
    GetSessionRequest,
    SelectRequest,
    SessionResponse,
)
from src.chess.pieces import Piece
from src.chess.session import Session
from src.chess.square import Square
from src.core.exceptions import PieceNotFoundError, RepositoryError
from src.core.settings import STARTING_LAYOUT, BoardGeometry
from src.db.repository import SessionRepository

logger = getLogger(__name__)


class SessionService:
    """Session controller: owns the board sessions, turns requests into pointer events."""

    def __init__(
        self, repository: SessionRepository, geometry: BoardGeometry | None = None
    ) -> None:
        self.repo = repository
        self.geometry = geometry or BoardGeometry()

    # -- Input surface logic ---
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Set up a new board (standard starting position unless a layout was given)."""
        session = Session.start(request.layout or STARTING_LAYOUT, self.geometry)
        session_id = self.repo.create_session(session)
        logger.info("Created session %s", session_id)
        return self._create_response(session_id, session)

    def get_state(self, request: GetSessionRequest) -> SessionResponse:
        """Retrieve current board state."""
        session = self._fetch_session(request.session_id)
        return self._create_response(request.session_id, session)

    def select(self, request: SelectRequest) -> SessionResponse:
        """Pointer down on a piece."""
        session = self._fetch_session(request.session_id)
        piece = self._fetch_piece(session, request.square)

        session.reset_last_event()
        session.pointer.piece_down(piece)
        return self._create_response(request.session_id, session)

    def click_square(self, request: ClickSquareRequest) -> SessionResponse:
        """Pointer down on a square: moves the selected piece there (if any)."""
        session = self._fetch_session(request.session_id)

        session.reset_last_event()
        session.pointer.square_down(Square.from_algebraic(request.square))
        return self._create_response(request.session_id, session)

    def drag_release(self, request: DragReleaseRequest) -> SessionResponse:
        """A piece got dragged and dropped somewhere on the canvas."""
        session = self._fetch_session(request.session_id)
        piece = self._fetch_piece(session, request.from_square)

        session.reset_last_event()
        session.pointer.drag_end(piece, request.x, request.y)
        return self._create_response(request.session_id, session)

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to close a session."""
        if self.repo.delete_session(request.session_id) is None:
            raise RepositoryError(f"Session with {request.session_id=} not found.")
        logger.info("Deleted session %s", request.session_id)

    # -- Internal helpers --
    def _create_response(self, session_id: UUID, session: Session) -> SessionResponse:
        """Convert the session's snapshot to a SessionResponse."""
        model = session.state.snapshot()
        return SessionResponse(
            session_id=session_id,
            layout=model.layout,
            turn=model.turn,
            selected=model.selected,
            pieces=model.pieces,
            last_event=session.last_event,
        )

    def _fetch_session(self, session_id: UUID) -> Session:
        """Attempt to find the session in the repository and raise error if it fails."""
        session = self.repo.get_session(session_id)
        if session is None:
            raise RepositoryError(f"Session with {session_id=} not found.")
        return session

    def _fetch_piece(self, session: Session, square_name: str) -> Piece:
        piece = session.state.board.piece_at(Square.from_algebraic(square_name))
        if piece is None:
            raise PieceNotFoundError(f"No piece on {square_name}.")
        return piece

"""Protocol repository for live board sessions (sessions only live in memory for the lifetime of the process)"""

from typing import Protocol
from uuid import UUID

from src.chess.session import Session


class SessionRepository(Protocol):
    """Session bookkeeping"""

    def get_session(self, session_id: UUID) -> Session | None:
        """Get session by ID, if it exists."""
        ...

    def create_session(self, session: Session) -> UUID:
        """Store a new session and return its newly created ID."""
        ...

    def delete_session(self, session_id: UUID) -> Session | None:
        """Forget a session."""
        ...

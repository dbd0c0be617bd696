"""Implementation of (Session)Repository using a dictionary"""

from uuid import UUID, uuid4

from src.chess.session import Session


class InMemorySessionRepository:
    """Sessions kept in a dictionary, keyed by a fresh uuid4"""

    def __init__(self) -> None:
        self._sessions: dict[UUID, Session] = {}

    def get_session(self, session_id: UUID) -> Session | None:
        return self._sessions.get(session_id)

    def create_session(self, session: Session) -> UUID:
        new_id = uuid4()
        self._sessions[new_id] = session
        return new_id

    def delete_session(self, session_id: UUID) -> Session | None:
        return self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

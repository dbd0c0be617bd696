"""Unit tests for /src/db/memory_repository.py"""

from uuid import uuid4

from src.chess.session import Session
from src.db.memory_repository import InMemorySessionRepository


def test_create_and_get(repository: InMemorySessionRepository) -> None:
    session = Session.start()
    session_id = repository.create_session(session)
    assert repository.get_session(session_id) is session
    assert len(repository) == 1


def test_every_session_gets_a_new_id(repository: InMemorySessionRepository) -> None:
    first = repository.create_session(Session.start())
    second = repository.create_session(Session.start())
    assert first != second
    assert len(repository) == 2


def test_get_unknown_session(repository: InMemorySessionRepository) -> None:
    assert repository.get_session(uuid4()) is None


def test_delete_session(repository: InMemorySessionRepository) -> None:
    session = Session.start()
    session_id = repository.create_session(session)

    assert repository.delete_session(session_id) is session
    assert repository.get_session(session_id) is None
    assert len(repository) == 0


def test_delete_unknown_session(repository: InMemorySessionRepository) -> None:
    assert repository.delete_session(uuid4()) is None

"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from unittest.mock import Mock

import pytest

from src.chess.board_state import BoardState
from src.chess.events import BoardEvents
from src.db.memory_repository import InMemorySessionRepository


@pytest.fixture
def events() -> BoardEvents:
    return BoardEvents()


@pytest.fixture
def board_state(events: BoardEvents) -> BoardState:
    """BoardState in the standard starting position, light to move."""
    state = BoardState(events)
    state.initialize()
    return state


@pytest.fixture
def recorder(events: BoardEvents) -> Mock:
    """Mock subscribed to every notification: check `recorder.call_args_list` for the emitted events (in order)."""
    mock = Mock()
    events.on_initialized.append(mock)
    events.on_selected.append(mock)
    events.on_move_applied.append(mock)
    events.on_move_rejected.append(mock)
    events.on_turn_changed.append(mock)
    return mock


@pytest.fixture
def repository() -> InMemorySessionRepository:
    """Fresh (empty) repository for every test"""
    return InMemorySessionRepository()

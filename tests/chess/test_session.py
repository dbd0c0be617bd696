"""Unit tests for /src/chess/session.py"""

from unittest.mock import Mock, call

from src.chess.session import Session
from src.chess.square import Square
from src.core.shared_types import Side


def test_start_initializes_board() -> None:
    session = Session.start()
    assert len(session.state.board.pieces()) == 32
    assert session.state.turn == Side.LIGHT
    assert session.pointer.state is session.state
    assert session.last_event == "initialized"
    assert session.chord_loop is None


def test_start_with_layout() -> None:
    session = Session.start("4k3/8/8/8/8/8/8/4K3")
    assert session.state.board.to_layout() == "4k3/8/8/8/8/8/8/4K3"


def test_last_event_skips_turn_change() -> None:
    session = Session.start()
    pawn = session.state.board.piece_at(Square(6, 2))
    assert pawn is not None

    session.pointer.piece_down(pawn)
    assert session.last_event == "selected"

    session.pointer.square_down(Square(4, 2))
    assert session.last_event == "move_applied"


def test_last_event_after_rejection() -> None:
    session = Session.start()
    rook = session.state.board.piece_at(Square(7, 0))
    assert rook is not None
    session.pointer.drag_end(rook, 0, 0)
    assert session.last_event == "move_rejected"


def test_reset_last_event() -> None:
    session = Session.start()
    session.reset_last_event()
    assert session.last_event is None

    # an ignored click does not record anything
    session.pointer.square_down(Square(4, 4))
    assert session.last_event is None


def test_surface_is_synced() -> None:
    surface = Mock()
    session = Session.start(surface=surface)
    assert surface.create_piece.call_count == 32
    surface.show_turn.assert_called_once_with("Turn: White")

    pawn = session.state.board.piece_at(Square(6, 4))
    assert pawn is not None
    session.pointer.piece_down(pawn)
    session.pointer.square_down(Square(4, 4))

    surface.bring_to_front.assert_called_once_with(pawn.id)
    surface.move_piece.assert_called_once_with(pawn.id, 100 + 4 * 64 + 32, 50 + 4 * 64 + 32)
    surface.show_turn.assert_called_with("Turn: Black")


def test_first_pointer_event_starts_background_chords() -> None:
    synth = Mock()
    session = Session.start(synth=synth)
    assert session.chord_loop is not None

    # no music before the user touched the board
    session.chord_loop.tick()
    synth.trigger.assert_not_called()

    pawn = session.state.board.piece_at(Square(6, 0))
    assert pawn is not None
    session.pointer.piece_down(pawn)
    assert session.chord_loop.running

    session.chord_loop.tick()
    synth.trigger.assert_called_once_with(("C4", "E4", "G4"), "2n")


def test_accepted_move_plays_move_tone() -> None:
    synth = Mock()
    session = Session.start(synth=synth)
    knight = session.state.board.piece_at(Square(7, 1))
    assert knight is not None

    session.pointer.piece_down(knight)
    session.pointer.square_down(Square(5, 2))

    assert synth.trigger.call_args_list == [call(["C4"], "8n")]


def test_rejected_move_is_silent() -> None:
    synth = Mock()
    session = Session.start(synth=synth)
    rook = session.state.board.piece_at(Square(7, 0))
    assert rook is not None

    session.pointer.drag_end(rook, -10, -10)

    synth.trigger.assert_not_called()

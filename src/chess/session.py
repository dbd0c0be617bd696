"""One board session: the BoardState plus the input translation feeding it, and optionally the render / audio layers it drives."""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.audio import ChordLoop, MoveTone, Synth
from src.chess.board_state import BoardState
from src.chess.events import (
    BoardEvent,
    BoardEvents,
    BoardInitialized,
    MoveApplied,
    MoveRejected,
    PieceSelected,
)
from src.chess.input import PointerInput
from src.chess.render import RenderSurface, SceneSync
from src.core.settings import STARTING_LAYOUT, BoardGeometry

EVENT_NAMES: dict[type, str] = {
    BoardInitialized: "initialized",
    PieceSelected: "selected",
    MoveApplied: "move_applied",
    MoveRejected: "move_rejected",
}


@dataclass
class Session:
    state: BoardState
    pointer: PointerInput
    chord_loop: Optional[ChordLoop] = None
    # most recent notification, ignoring the turn change that always follows an applied move
    last_event: Optional[str] = None

    @classmethod
    def start(
        cls,
        layout: str = STARTING_LAYOUT,
        geometry: Optional[BoardGeometry] = None,
        surface: Optional[RenderSurface] = None,
        synth: Optional[Synth] = None,
    ) -> Self:
        """
        Set up a new board session.
        ----
        * surface given? it gets the pieces drawn, moved and destroyed through SceneSync
        * synth given? every accepted move plays the move tone, and the background chords start on the first pointer event
        """
        geometry = geometry or BoardGeometry()
        events = BoardEvents()
        state = BoardState(events)
        session = cls(state=state, pointer=PointerInput(state, geometry))

        if surface is not None:
            SceneSync(surface, geometry).connect(events)
        if synth is not None:
            MoveTone(synth).connect(events)
            session.chord_loop = ChordLoop(synth)
            session.pointer.on_first_interaction.append(session.chord_loop.start)

        for handlers in (
            events.on_initialized,
            events.on_selected,
            events.on_move_applied,
            events.on_move_rejected,
        ):
            handlers.append(session._record)
        state.initialize(layout)
        return session

    def reset_last_event(self) -> None:
        self.last_event = None

    def _record(self, event: BoardEvent) -> None:
        self.last_event = EVENT_NAMES[type(event)]

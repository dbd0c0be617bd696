"""Audio cues: a short tone for every move, and a looping background chord progression.

Playback is fire-and-forget. Nothing here waits for a synth, and the board never looks at the audio.
"""

from collections.abc import Sequence
from typing import Protocol

from src.chess.events import BoardEvents, MoveApplied
from src.core.settings import CHORD_DURATION, CHORD_PROGRESSION, MOVE_TONE


class Synth(Protocol):
    def trigger(self, notes: Sequence[str], duration: str) -> None:
        ...


class MoveTone:
    def __init__(self, synth: Synth, tone: tuple[str, str] = MOVE_TONE) -> None:
        self.synth = synth
        self.note, self.duration = tone

    def connect(self, events: BoardEvents) -> None:
        events.on_move_applied.append(self.on_move_applied)

    def on_move_applied(self, event: MoveApplied) -> None:
        self.synth.trigger([self.note], self.duration)


class ChordLoop:
    """
    Background music: one chord of the progression per step, wrapping around forever.
    ---
    The host's clock calls `tick` every `duration`. Ticks before `start` are ignored.
    """

    def __init__(
        self,
        synth: Synth,
        progression: Sequence[Sequence[str]] = CHORD_PROGRESSION,
        duration: str = CHORD_DURATION,
    ) -> None:
        if not progression:
            raise ValueError("Chord progression needs at least one chord")
        self.synth = synth
        self.progression = [tuple(chord) for chord in progression]
        self.duration = duration
        self.chord_index = 0
        self.running = False

    def start(self) -> None:
        # NOTE: idempotent, as it is hooked to "first interaction" which may fire from several input surfaces
        self.running = True

    def stop(self) -> None:
        self.running = False

    def tick(self) -> None:
        if not self.running:
            return
        chord = self.progression[self.chord_index % len(self.progression)]
        self.synth.trigger(chord, self.duration)
        self.chord_index += 1

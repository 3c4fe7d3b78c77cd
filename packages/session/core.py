"""
Session controller: drives one game from the first keystroke to the end.

- SessionController.dispatch: apply one input event to the engine and move
  the session state machine forward.
- SessionController.run: the blocking turn loop. Render, pull one event,
  dispatch, re-render, stop on a terminal state.

States:
  PLAYING -> PLAYING  typing, backspace, or a refused commit (no try used)
  PLAYING -> WON      accepted commit equal to the solution
  PLAYING -> LOST     accepted commit that used the last try without winning
  PLAYING -> ABORTED  abort event (any time), or the input source ran dry

WON, LOST and ABORTED are terminal: later events are ignored. A controller
built around an engine whose game is already over starts in WON or LOST.

A LINE event commits a whole typed line at its full length, so line input
reports an overlong word instead of truncating it.

Nothing here draws to the screen; `render` is any callable that receives the
engine and reads from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from packages.engine import GuessEngine, DEFAULT_MAX_TRIES

log = logging.getLogger(__name__)

Renderer = Callable[[GuessEngine], None]


def check_max_tries(max_tries: int) -> int:
    """Guardrail: a session needs at least one try."""
    if max_tries < 1:
        raise ValueError(f"max_tries must be at least 1; got {max_tries}")
    return max_tries


class SessionState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    ABORTED = "aborted"

    @property
    def terminal(self) -> bool:
        return self is not SessionState.PLAYING


class EventKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"
    LINE = "line"
    ABORT = "abort"


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    char: str = ""
    text: str = ""

    @classmethod
    def key(cls, c: str) -> "InputEvent":
        return cls(EventKind.CHAR, c)

    @classmethod
    def backspace(cls) -> "InputEvent":
        return cls(EventKind.BACKSPACE)

    @classmethod
    def confirm(cls) -> "InputEvent":
        return cls(EventKind.CONFIRM)

    @classmethod
    def line(cls, text: str) -> "InputEvent":
        """A whole typed line, committed as one guess."""
        return cls(EventKind.LINE, text=text)

    @classmethod
    def abort(cls) -> "InputEvent":
        return cls(EventKind.ABORT)


@dataclass(frozen=True)
class SessionOutcome:
    """
    How a session ended.

    `solution` is only filled in for LOST; a win needs no reveal and an
    aborted game keeps the word hidden.
    """
    state: SessionState
    attempts: int
    guesses: Tuple[str, ...]
    solution: Optional[str] = None


class SessionController:

    def __init__(self, engine: GuessEngine, *, render: Optional[Renderer] = None):
        self.engine = engine
        self._render = render
        self._state = SessionState.PLAYING
        if engine.is_won():
            self._state = SessionState.WON
        elif engine.is_over():
            self._state = SessionState.LOST

    @property
    def state(self) -> SessionState:
        return self._state

    def dispatch(self, event: InputEvent) -> SessionState:
        """Feed one event to the engine and return the resulting state."""
        if self._state.terminal:
            return self._state

        if event.kind is EventKind.ABORT:
            self._transition(SessionState.ABORTED)
        elif event.kind is EventKind.CHAR:
            self.engine.add_char(event.char)
        elif event.kind is EventKind.BACKSPACE:
            self.engine.backspace()
        elif event.kind is EventKind.CONFIRM:
            self._commit()
        elif event.kind is EventKind.LINE:
            self._commit(event.text)

        return self._state

    def _commit(self, word: Optional[str] = None) -> None:
        result = self.engine.commit(word)
        if result.won:
            self._transition(SessionState.WON)
        elif result.accepted and len(self.engine.guesses) >= self.engine.max_tries:
            self._transition(SessionState.LOST)

    def run(self, events: Iterable[InputEvent]) -> SessionOutcome:
        """
        Play until the session ends, pulling events one at a time.

        Each event is fully applied (and rendered) before the next is read.
        """
        self._draw()
        it = iter(events)
        while not self._state.terminal:
            event = next(it, None)
            if event is None:
                log.info("input exhausted; aborting session")
                self._transition(SessionState.ABORTED)
                break
            self.dispatch(event)
            self._draw()
        return self.outcome()

    def outcome(self) -> SessionOutcome:
        guesses = self.engine.guesses
        return SessionOutcome(
            state=self._state,
            attempts=len(guesses),
            guesses=guesses,
            solution=self.engine.solution if self._state is SessionState.LOST else None,
        )

    def _draw(self) -> None:
        if self._render is not None:
            self._render(self.engine)

    def _transition(self, new_state: SessionState) -> None:
        log.info("session %s -> %s after %d guess(es)",
                 self._state.value, new_state.value, len(self.engine.guesses))
        self._state = new_state


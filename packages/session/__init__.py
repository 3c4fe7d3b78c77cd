from .core import (
    DEFAULT_MAX_TRIES, check_max_tries,
    SessionState, EventKind, InputEvent, SessionOutcome, SessionController,
)
from .io import decode_key, key_events, line_events, raw_terminal

__all__ = [
    "DEFAULT_MAX_TRIES", "check_max_tries",
    "SessionState", "EventKind", "InputEvent", "SessionOutcome", "SessionController",
    "decode_key", "key_events", "line_events", "raw_terminal",
]

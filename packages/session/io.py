"""
Input sources for a session.

Both sources produce InputEvent objects one at a time, so the controller can
pull them lazily:

- key_events:   raw keystrokes, one character per read (interactive play)
- line_events:  one guess per line (pipes, scripted input, dumb terminals)

raw_terminal() puts a POSIX tty into raw mode for key_events and hands back
a read_key callable.
"""

from __future__ import annotations

import contextlib
import os
import select
from typing import Callable, Iterable, Iterator, List, Optional, TextIO

from .core import EventKind, InputEvent

ESC = "\x1b"
_ABORT_KEYS = {ESC, "\x03", "\x04"}       # Esc, Ctrl-C, Ctrl-D
_BACKSPACE_KEYS = {"\x7f", "\x08"}
_CONFIRM_KEYS = {"\r", "\n"}

# How long to wait for the rest of an escape sequence (arrow keys etc.)
_ESCAPE_SEQ_TIMEOUT = 0.05


def decode_key(ch: str) -> Optional[InputEvent]:
    """Map one character to an event; None means ignore it."""
    if ch in _ABORT_KEYS:
        return InputEvent.abort()
    if ch in _BACKSPACE_KEYS:
        return InputEvent.backspace()
    if ch in _CONFIRM_KEYS:
        return InputEvent.confirm()
    if ch.isprintable() and not ch.isspace():
        return InputEvent.key(ch)
    return None


def key_events(read_key: Callable[[], str]) -> Iterator[InputEvent]:
    """
    Yield events from successive read_key() calls.

    An empty read means end of input and stops the generator.
    """
    while True:
        ch = read_key()
        if not ch:
            return
        event = decode_key(ch)
        if event is not None:
            yield event


def line_events(lines: Iterable[str]) -> Iterator[InputEvent]:
    """
    Yield one LINE event per line, carrying everything typed on it.

    Keys are decoded as in raw mode: backspace characters edit the line and
    an abort key anywhere ends the input. Ctrl-C while waiting for a line
    becomes an abort too.
    """
    it = iter(lines)
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except KeyboardInterrupt:
            yield InputEvent.abort()
            return

        typed: List[str] = []
        for ch in line.rstrip("\r\n"):
            event = decode_key(ch)
            if event is None:
                continue
            if event.kind is EventKind.ABORT:
                yield event
                return
            if event.kind is EventKind.BACKSPACE:
                if typed:
                    typed.pop()
            elif event.kind is EventKind.CHAR:
                typed.append(event.char)
        yield InputEvent.line("".join(typed))


@contextlib.contextmanager
def raw_terminal(stream: TextIO):
    """
    Switch `stream`'s tty to raw mode for the duration of the block.

    Yields a read_key() callable returning one key per call, or "" at end of
    input. Escape sequences (arrows, function keys) are swallowed, so only a
    lone Esc press aborts.
    """
    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)

    def _pending() -> bool:
        ready, _, _ = select.select([fd], [], [], _ESCAPE_SEQ_TIMEOUT)
        return bool(ready)

    def _read_char() -> Optional[str]:
        first = os.read(fd, 1)
        if not first:
            return None
        # complete a multi-byte UTF-8 character from its lead byte
        lead = first[0]
        extra = 3 if lead >= 0xF0 else 2 if lead >= 0xE0 else 1 if lead >= 0xC0 else 0
        data = first + os.read(fd, extra) if extra else first
        return data.decode("utf-8", errors="ignore")

    def _skip_escape_sequence() -> None:
        # CSI ("ESC [" params... final) or SS3 ("ESC O" final); anything else
        # after ESC is a single Alt-modified key. Keys typed after the
        # sequence stay buffered.
        intro = os.read(fd, 1)
        if intro == b"O":
            os.read(fd, 1)
        elif intro == b"[":
            while True:
                b = os.read(fd, 1)
                if not b or 0x40 <= b[0] <= 0x7E:
                    return

    def read_key() -> str:
        while True:
            ch = _read_char()
            if ch is None:
                return ""
            if ch == ESC and _pending():
                _skip_escape_sequence()
                continue
            if ch:
                return ch

    try:
        tty.setraw(fd)
        yield read_key
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)

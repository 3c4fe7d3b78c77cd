import io
import os

import pytest
from packages.engine import GuessEngine, GameError
from packages.session import (
    SessionController, SessionState, InputEvent, EventKind,
    check_max_tries, decode_key, key_events, line_events, raw_terminal,
)


def _word(word):
    return [InputEvent.key(c) for c in word] + [InputEvent.confirm()]


def _controller(solution="hello", words=("hello", "jolly"), **kw):
    render_calls = []
    engine = GuessEngine(solution, words, **kw)
    ctl = SessionController(engine, render=render_calls.append)
    return ctl, render_calls


def test_win_on_correct_guess():
    ctl, _ = _controller()
    out = ctl.run(_word("jolly") + _word("hello"))
    assert out.state is SessionState.WON
    assert out.attempts == 2
    assert out.solution is None


def test_six_wrong_guesses_lose_and_reveal():
    words = ["crane", "slate", "pride", "ghost", "blimp", "vivid", "hello"]
    ctl, _ = _controller(words=words)
    events = []
    for w in words[:6]:
        events += _word(w)
    out = ctl.run(events)
    assert out.state is SessionState.LOST
    assert out.attempts == 6
    assert out.solution == "hello"
    assert not ctl.engine.is_won()


def test_refused_commits_do_not_count():
    ctl, _ = _controller(max_tries=1)
    assert ctl.dispatch(InputEvent.confirm()) is SessionState.PLAYING
    for c in "jello":
        ctl.dispatch(InputEvent.key(c))
    assert ctl.dispatch(InputEvent.confirm()) is SessionState.PLAYING
    assert ctl.engine.last_error is GameError.INVALID_WORD
    assert ctl.engine.guesses == ()


def test_abort_supersedes_and_is_terminal():
    ctl, _ = _controller()
    ctl.dispatch(InputEvent.key("h"))
    assert ctl.dispatch(InputEvent.abort()) is SessionState.ABORTED
    # terminal: nothing else is processed
    for e in _word("hello"):
        assert ctl.dispatch(e) is SessionState.ABORTED
    assert ctl.engine.guesses == ()
    assert ctl.outcome().solution is None


def test_events_after_win_are_not_consumed():
    ctl, _ = _controller()
    out = ctl.run(_word("hello") + _word("jolly"))
    assert out.state is SessionState.WON
    assert ctl.engine.guesses == ("hello",)


def test_exhausted_input_aborts():
    ctl, _ = _controller()
    out = ctl.run([InputEvent.key("h")])
    assert out.state is SessionState.ABORTED


def test_render_called_before_and_after_each_event():
    ctl, calls = _controller()
    ctl.run(_word("hello"))
    # initial draw + one per event (5 letters + confirm)
    assert len(calls) == 7
    assert all(c is ctl.engine for c in calls)


def test_check_max_tries():
    assert check_max_tries(6) == 6
    with pytest.raises(ValueError):
        check_max_tries(0)


# --- input sources ---
@pytest.mark.parametrize("ch,kind", [
    ("\x1b", EventKind.ABORT),
    ("\x03", EventKind.ABORT),
    ("\x7f", EventKind.BACKSPACE),
    ("\b", EventKind.BACKSPACE),
    ("\r", EventKind.CONFIRM),
    ("\n", EventKind.CONFIRM),
    ("a", EventKind.CHAR),
    ("Ü", EventKind.CHAR),
])
def test_decode_key(ch, kind):
    assert decode_key(ch).kind is kind


def test_decode_key_ignores_other_control_chars():
    assert decode_key("\t") is None
    assert decode_key(" ") is None
    assert decode_key("\x00") is None


def test_key_events_stop_on_empty_read():
    keys = iter(["h", "\t", "i", "\r", ""])
    events = list(key_events(lambda: next(keys)))
    assert [e.kind for e in events] == [EventKind.CHAR, EventKind.CHAR, EventKind.CONFIRM]
    assert events[1].char == "i"


def test_line_events_one_event_per_line():
    events = list(line_events(io.StringIO("jolly\nHELLO\n")))
    assert [e.kind for e in events] == [EventKind.LINE, EventKind.LINE]
    assert [e.text for e in events] == ["jolly", "HELLO"]


def test_line_events_apply_backspace_and_abort():
    events = list(line_events(["jolx\x7fly\n", "he\x1bllo\n", "hello\n"]))
    assert events[0].text == "jolly"
    assert events[1].kind is EventKind.ABORT
    assert len(events) == 2


def test_overlong_line_is_refused_not_truncated():
    ctl, _ = _controller()
    out = ctl.run(line_events(["hellos\n"]))
    # input ran out after the refused line
    assert out.state is SessionState.ABORTED
    assert ctl.engine.guesses == ()
    assert ctl.engine.last_error is GameError.WRONG_LENGTH

    ctl, _ = _controller()
    assert ctl.dispatch(InputEvent.line("hellos")) is SessionState.PLAYING
    assert ctl.engine.last_error is GameError.WRONG_LENGTH
    assert ctl.dispatch(InputEvent.line("hello")) is SessionState.WON


def test_controller_starts_terminal_for_finished_engine():
    won = GuessEngine("hello", ["hello"])
    won.submit("hello")
    ctl = SessionController(won)
    assert ctl.state is SessionState.WON
    assert ctl.dispatch(InputEvent.confirm()) is SessionState.WON

    lost = GuessEngine("hello", ["hello", "jolly"], max_tries=1)
    lost.submit("jolly")
    ctl = SessionController(lost)
    assert ctl.state is SessionState.LOST
    out = ctl.run([InputEvent.confirm()])
    assert out.state is SessionState.LOST
    assert out.solution == "hello"


def test_line_session_end_to_end():
    ctl, _ = _controller()
    out = ctl.run(line_events(["jelly\n", "jolly\n", "HELLO\n"]))
    assert out.state is SessionState.WON
    assert ctl.engine.guesses == ("jolly", "hello")


# --- raw terminal reads (POSIX only) ---
@pytest.fixture
def pty_pair():
    pty = pytest.importorskip("pty")
    pytest.importorskip("termios")
    master, slave = pty.openpty()
    stream = os.fdopen(slave, "r")
    yield master, stream
    stream.close()
    os.close(master)


def test_raw_terminal_skips_escape_sequences_only(pty_pair):
    master, stream = pty_pair
    with raw_terminal(stream) as read_key:
        # up arrow, then keys typed right after it
        os.write(master, b"\x1b[Ahi\r")
        assert [read_key(), read_key(), read_key()] == ["h", "i", "\r"]

        # SS3 arrow form
        os.write(master, b"\x1bOBx")
        assert read_key() == "x"

        # a lone Esc still comes through (and decodes to abort)
        os.write(master, b"\x1b")
        key = read_key()
        assert key == "\x1b"
        assert decode_key(key).kind is EventKind.ABORT

# apps/cli/play.py
"""
CLI entry point: play one game of the word-guessing game in the terminal.

This script:
  1) Picks the solution and dictionary (built-in lists or --word-file).
  2) Builds the engine and the session controller.
  3) Runs the turn loop on raw keystrokes (or lines with --line-mode / when
     stdin is not a tty), redrawing the board after every key.
  4) Prints the result: win, loss (with the word revealed) or abort.

Keys: letters type, Backspace deletes, Enter commits, Esc / Ctrl-C quits.

Exit codes: 0 won, 1 lost, 2 word list problem, 130 aborted.
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import (
    PICKED_WORDS, VALID_WORDS, WordListError, pick_word_source, pretty_summary,
    validate_wordlists,
)
from packages.engine import GuessEngine
from packages.session import (
    DEFAULT_MAX_TRIES, SessionController, SessionOutcome, SessionState, check_max_tries,
    key_events, line_events, raw_terminal,
)
from apps.cli.render import TerminalRenderer

log = logging.getLogger(__name__)

EXIT_CODES = {
    SessionState.WON: 0,
    SessionState.LOST: 1,
    SessionState.ABORTED: 130,
}
EXIT_BAD_WORDS = 2


def _max_tries_arg(value: str) -> int:
    try:
        return check_max_tries(int(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A Wordle clone for the terminal")
    ap.add_argument("-a", "--any-word", action="store_true",
                    help="allow any word to be guessed (skip the dictionary check)")
    ap.add_argument("-w", "--word-file",
                    help="use a word list from a file (one word per line)")
    ap.add_argument("-n", "--length", type=int,
                    help="only draw solutions with this many letters")
    ap.add_argument("--max-tries", type=_max_tries_arg, default=DEFAULT_MAX_TRIES,
                    help=f"number of guesses allowed (default {DEFAULT_MAX_TRIES})")
    ap.add_argument("--seed", type=int, help="RNG seed for picking the word (reproducible games)")
    ap.add_argument("--strict-scoring", action="store_true",
                    help="count repeated letters against the solution's letter counts")
    ap.add_argument("--line-mode", action="store_true",
                    help="read whole lines instead of single keystrokes")
    ap.add_argument("--no-color", action="store_true", help="draw the board without colours")
    ap.add_argument("--check-words", action="store_true",
                    help="validate the word list(s), print a summary and exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def _check_words(args) -> int:
    if args.word_file:
        rep = validate_wordlists(args.word_file, None, N=args.length)
    else:
        rep = validate_wordlists(str(PICKED_WORDS), str(VALID_WORDS), N=args.length)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    return 0 if rep["passed"] else EXIT_BAD_WORDS


def _play(controller: SessionController, *, line_mode: bool) -> SessionOutcome:
    if line_mode or not sys.stdin.isatty():
        return controller.run(line_events(sys.stdin))
    with raw_terminal(sys.stdin) as read_key:
        return controller.run(key_events(read_key))


def report(outcome: SessionOutcome) -> str:
    if outcome.state is SessionState.WON:
        return "You won!"
    if outcome.state is SessionState.LOST:
        return f"You lost! The word was: {outcome.solution}"
    return "Aborted."


def main(argv=None) -> int:
    """
    Parse CLI args, set up the session, play it, and print the result.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.check_words:
        return _check_words(args)

    try:
        source = pick_word_source(args.word_file, length=args.length, seed=args.seed)
    except WordListError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_WORDS

    engine = GuessEngine(
        source.solution,
        source.dictionary,
        allow_any_word=args.any_word,
        max_tries=args.max_tries,
        strict_scoring=args.strict_scoring,
    )
    log.debug("new session: %d letters, %d tries, dictionary of %d words",
              engine.word_length, engine.max_tries, len(engine.dictionary))

    controller = SessionController(engine, render=TerminalRenderer(color=not args.no_color))
    outcome = _play(controller, line_mode=args.line_mode)

    print(report(outcome))
    return EXIT_CODES[outcome.state]


if __name__ == "__main__":
    sys.exit(main())

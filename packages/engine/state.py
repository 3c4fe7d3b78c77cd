"""
GuessEngine: the state and rules of one game session.

Holds the solution, the dictionary, the committed guesses, the in-progress
input buffer and the last commit error. All mutation goes through add_char,
backspace and commit (or submit for whole words); renderers only read.

The engine does no I/O and draws no random numbers; the solution and the
dictionary are handed in by whoever builds it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .scoring import HitInfo, classify, to_pattern
from .validation import GameError, SessionComplete, check_guess

log = logging.getLogger(__name__)

# Turn budget used when none is given.
DEFAULT_MAX_TRIES = 6


def fold_case(text: str) -> str:
    """
    Lowercase `text` one character at a time.

    lower() can expand a character ('İ' -> 'i̇'); only the first code point is
    kept so a word folds to exactly as many characters as keys typed for it.
    """
    return "".join(c.lower()[:1] for c in text)


@dataclass(frozen=True)
class CommitResult:
    """Outcome of one commit attempt."""
    accepted: bool
    won: bool = False
    error: Optional[GameError] = None


class GuessEngine:

    def __init__(
            self,
            solution: str,
            dictionary: Iterable[str] = (),
            *,
            allow_any_word: bool = False,
            max_tries: int = DEFAULT_MAX_TRIES,
            strict_scoring: bool = False,
    ):
        solution = fold_case(solution.strip())
        if not solution:
            raise ValueError("solution must be a non-empty word")
        if max_tries < 1:
            raise ValueError(f"max_tries must be at least 1; got {max_tries}")

        self._solution = solution
        self._dictionary = frozenset(fold_case(w.strip()) for w in dictionary)
        self._allow_any_word = bool(allow_any_word)
        self._max_tries = int(max_tries)
        self._strict_scoring = bool(strict_scoring)

        self._history: List[str] = []
        self._input: List[str] = []
        self._last_error: Optional[GameError] = None

    # -----------------------------
    # Read-only state
    # -----------------------------

    @property
    def solution(self) -> str:
        return self._solution

    @property
    def dictionary(self) -> frozenset:
        return self._dictionary

    @property
    def allow_any_word(self) -> bool:
        return self._allow_any_word

    @property
    def word_length(self) -> int:
        return len(self._solution)

    @property
    def max_tries(self) -> int:
        return self._max_tries

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._history)

    @property
    def current_input(self) -> str:
        return "".join(self._input)

    @property
    def last_error(self) -> Optional[GameError]:
        return self._last_error

    @property
    def attempts_left(self) -> int:
        return self._max_tries - len(self._history)

    def is_won(self) -> bool:
        return bool(self._history) and self._history[-1] == self._solution

    def is_over(self) -> bool:
        """True once the solution was found or every try has been used."""
        return self.is_won() or len(self._history) >= self._max_tries

    def hits_for(self, position: int) -> List[HitInfo]:
        """
        Classify the guess committed at `position` (0-based attempt index).

        Raises IndexError for rows that have not been played; callers must
        only ask for rows below len(guesses).
        """
        if not 0 <= position < len(self._history):
            raise IndexError(f"no guess committed at position {position}")
        return classify(self._history[position], self._solution, strict=self._strict_scoring)

    # -----------------------------
    # Input buffer
    # -----------------------------

    def add_char(self, c: str) -> None:
        """Append `c`, lowercased, unless the buffer is already full."""
        if len(self._input) >= len(self._solution):
            return
        folded = fold_case(c[:1])
        if folded:
            self._input.append(folded)

    def backspace(self) -> None:
        if self._input:
            self._input.pop()

    # -----------------------------
    # Committing guesses
    # -----------------------------

    def submit(self, word: str) -> CommitResult:
        """
        Validate `word` and, if acceptable, record it as the next guess.

        Leaves the input buffer and last_error alone; commit() handles those.
        Raises SessionComplete if the session has already ended.
        """
        if self.is_over():
            raise SessionComplete(
                f"session is over after {len(self._history)} guess(es); no more commits")

        word = fold_case(word)
        error = check_guess(word, self._solution, self._dictionary,
                            allow_any_word=self._allow_any_word)
        if error is not None:
            log.debug("rejected %r: %s", word, error.name)
            return CommitResult(accepted=False, error=error)

        self._history.append(word)
        won = self.is_won()
        log.debug("guess %d %r -> %s", len(self._history), word,
                  to_pattern(self.hits_for(len(self._history) - 1)))
        return CommitResult(accepted=True, won=won)

    def commit(self, word: Optional[str] = None) -> CommitResult:
        """
        Try to commit the input buffer as a guess.

        `word`, when given, is committed instead of the buffer at its full
        length (line input), so an overlong entry is refused rather than cut
        down to the buffer size.

        The buffer is cleared whatever the outcome. A refused guess sets
        last_error and does not use up a try; an accepted one clears it.
        """
        if word is None:
            word = self.current_input
        result = self.submit(word)
        self._last_error = result.error
        self._input.clear()
        return result

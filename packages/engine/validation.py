"""
Guess validation.

This module answers the question: "Can this word be committed as a guess?"
A guess is acceptable iff:
  - it has exactly as many characters as the solution
  - it is in the dictionary, unless "any word" mode is on

The length check runs first, so a short or long word is never reported as
an invalid word.
"""

from enum import Enum
from typing import AbstractSet, Optional


class GameError(Enum):
    """Recoverable reasons a commit was refused. Recorded, never raised."""
    WRONG_LENGTH = "Word is not the correct length"
    INVALID_WORD = "Word is not valid"

    def __str__(self) -> str:
        return self.value


class SessionComplete(Exception):
    """A guess was committed after the session had already ended."""


def check_guess(
        word: str,
        solution: str,
        dictionary: AbstractSet[str],
        *,
        allow_any_word: bool,
) -> Optional[GameError]:
    """
    Return the reason `word` cannot be committed, or None if it can.

    Args:
      word           : candidate guess, already lowercase
      solution       : the session's solution, lowercase
      dictionary     : set of accepted guesses (lowercase)
      allow_any_word : skip the dictionary check entirely
    """
    if len(word) != len(solution):
        return GameError.WRONG_LENGTH

    if not allow_any_word and word not in dictionary:
        return GameError.INVALID_WORD

    return None

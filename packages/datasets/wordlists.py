"""
Word source: where a session's solution and dictionary come from.

Two providers:
  - built-in lists shipped in packages/datasets/data/
      picked_words.txt : words that may be drawn as the solution
      valid_words.txt  : additional words accepted as guesses
  - a user word file: one list serves as both solution pool and dictionary

Randomness lives here (seeded random.Random), never in the engine.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, List, Optional

from .io import read_lines, normalize_words

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
PICKED_WORDS = DATA_DIR / "picked_words.txt"
VALID_WORDS = DATA_DIR / "valid_words.txt"


class WordListError(ValueError):
    """A word list is missing or has no usable words."""


@dataclass(frozen=True)
class WordSource:
    solution: str
    dictionary: FrozenSet[str]


def load_words(path: Path | str) -> List[str]:
    """Read a newline-separated word list, lowercased, without blanks."""
    try:
        words = normalize_words(read_lines(path))
    except FileNotFoundError as e:
        raise WordListError(f"word list not found: {path}") from e
    log.info("loaded %d words from %s", len(words), path)
    return words


def _pick(pool: List[str], *, length: Optional[int], seed: Optional[int], origin: str) -> str:
    if length is not None:
        pool = [w for w in pool if len(w) == length]
    if not pool:
        suffix = f" with {length} letters" if length is not None else ""
        raise WordListError(f"no candidate solutions{suffix} in {origin}")
    return random.Random(seed).choice(pool)


def builtin_word_source(*, length: Optional[int] = None, seed: Optional[int] = None) -> WordSource:
    """Solution from the picked list; dictionary is picked + valid."""
    picked = load_words(PICKED_WORDS)
    valid = load_words(VALID_WORDS)
    solution = _pick(picked, length=length, seed=seed, origin="built-in word list")
    return WordSource(solution=solution, dictionary=frozenset(picked) | frozenset(valid))


def file_word_source(path: Path | str, *, length: Optional[int] = None,
                     seed: Optional[int] = None) -> WordSource:
    """Solution and dictionary both come from the file at `path`."""
    words = load_words(path)
    solution = _pick(words, length=length, seed=seed, origin=str(path))
    return WordSource(solution=solution, dictionary=frozenset(words))


def pick_word_source(word_file: Path | str | None = None, *, length: Optional[int] = None,
                     seed: Optional[int] = None) -> WordSource:
    if word_file:
        return file_word_source(word_file, length=length, seed=seed)
    return builtin_word_source(length=length, seed=seed)

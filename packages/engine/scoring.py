"""
Per-letter scoring (feedback) for a committed guess against the solution.

Classes:
  - HIT      : correct letter in the correct position
  - CONTAINS : letter appears in the solution, but somewhere else
  - MISS     : letter does not appear in the solution
  - NONE     : no guess yet (unplayed board rows; never produced by scoring)

Two algorithms are available:
  1) default, membership-based: a non-hit letter is CONTAINS whenever it occurs
     anywhere in the solution. Repeated letters in a guess can therefore show
     CONTAINS more often than the letter actually occurs.
  2) strict (opt-in), two-pass and duplicate-safe:
       - first pass marks hits and counts the solution's unmatched letters
       - second pass marks CONTAINS only while the letter has remaining count

Lengths are compared in characters (code points), so multi-byte letters such
as 'ä' count once.
"""

from collections import Counter
from enum import Enum
from typing import Iterable, List


class HitInfo(Enum):
    HIT = "hit"
    CONTAINS = "contains"
    MISS = "miss"
    NONE = "none"


# Compact one-character form per class, e.g. for log lines: "-YGG-"
_PATTERN_CHARS = {
    HitInfo.HIT: "G",
    HitInfo.CONTAINS: "Y",
    HitInfo.MISS: "-",
    HitInfo.NONE: ".",
}


def classify(guess: str, solution: str, *, strict: bool = False) -> List[HitInfo]:
    """
    Classify every letter of `guess` against `solution`.

    Preconditions:
      - len(guess) == len(solution); anything else is a caller bug.

    Examples:
      classify("jolly", "hello")              -> [MISS, CONTAINS, HIT, HIT, MISS]
      classify("lolly", "hello")              -> [CONTAINS, CONTAINS, HIT, HIT, MISS]
      classify("lolly", "hello", strict=True) -> [MISS, CONTAINS, HIT, HIT, MISS]
    """
    if len(guess) != len(solution):
        raise ValueError(
            f"guess and solution must be the same length; got {len(guess)} and {len(solution)}")

    if strict:
        return _classify_strict(guess, solution)

    hits: List[HitInfo] = []
    for g, s in zip(guess, solution):
        if g == s:
            hits.append(HitInfo.HIT)
        elif g in solution:
            hits.append(HitInfo.CONTAINS)
        else:
            hits.append(HitInfo.MISS)
    return hits


def _classify_strict(guess: str, solution: str) -> List[HitInfo]:
    hits = [HitInfo.MISS] * len(guess)

    # Pass 1: hits, plus leftover counts of the solution's unmatched letters
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, solution)):
        if g == s:
            hits[i] = HitInfo.HIT
        else:
            remaining[s] += 1

    # Pass 2: CONTAINS only while the letter still has remaining availability
    for i, g in enumerate(guess):
        if hits[i] is HitInfo.HIT:
            continue
        if remaining[g] > 0:
            hits[i] = HitInfo.CONTAINS
            remaining[g] -= 1

    return hits


def to_pattern(hits: Iterable[HitInfo]) -> str:
    """
    Render classifications as a compact string.

    Example:
      to_pattern([MISS, CONTAINS, HIT, HIT, MISS]) -> "-YGG-"
    """
    return "".join(_PATTERN_CHARS[h] for h in hits)

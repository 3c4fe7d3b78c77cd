from .scoring import HitInfo, classify, to_pattern
from .validation import GameError, SessionComplete, check_guess
from .state import CommitResult, GuessEngine, DEFAULT_MAX_TRIES, fold_case

__all__ = [
    "HitInfo", "classify", "to_pattern",
    "GameError", "SessionComplete", "check_guess",
    "CommitResult", "GuessEngine", "DEFAULT_MAX_TRIES", "fold_case",
]

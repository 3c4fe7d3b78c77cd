from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, normalize_words
from .wordlists import (
    WordSource, WordListError, load_words,
    builtin_word_source, file_word_source, pick_word_source,
    PICKED_WORDS, VALID_WORDS,
)

__all__ = [
    "validate_wordlists", "pretty_summary",
    "WordSource", "WordListError", "load_words",
    "builtin_word_source", "file_word_source", "pick_word_source",
    "PICKED_WORDS", "VALID_WORDS",
]

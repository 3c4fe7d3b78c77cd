from pathlib import Path

import pytest
from packages.datasets import (
    WordListError, builtin_word_source, file_word_source, load_words, pick_word_source,
)


def test_load_words_normalizes(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Hello\n\n  JOLLY \nhällö\n", encoding="utf-8")
    assert load_words(p) == ["hello", "jolly", "hällö"]


def test_load_words_folds_one_char_per_letter(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("İZMİR\n", encoding="utf-8")
    assert load_words(p) == ["izmir"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(WordListError):
        load_words(tmp_path / "missing.txt")


def test_file_word_source_uses_file_as_dictionary(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("hello\njolly\n", encoding="utf-8")
    src = file_word_source(p, seed=1)
    assert src.solution in {"hello", "jolly"}
    assert src.dictionary == frozenset({"hello", "jolly"})


def test_file_word_source_length_filter(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("sun\nplanet\nhello\n", encoding="utf-8")
    assert file_word_source(p, length=6).solution == "planet"
    with pytest.raises(WordListError):
        file_word_source(p, length=9)


def test_seed_makes_pick_reproducible():
    a = builtin_word_source(seed=42)
    b = builtin_word_source(seed=42)
    assert a.solution == b.solution
    assert a.solution in a.dictionary
    assert len(a.solution) == 5


def test_pick_word_source_dispatch(tmp_path: Path):
    p = tmp_path / "one.txt"
    p.write_text("hello\n", encoding="utf-8")
    assert pick_word_source(p).solution == "hello"
    assert len(pick_word_source(None, seed=3).dictionary) > 100

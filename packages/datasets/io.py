from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.engine import fold_case


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into raw lines (CR/LF stripped, nothing else).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def normalize_words(lines: Iterable[str]) -> List[str]:
    """Trim and lowercase each entry, dropping blank lines. Order is kept."""
    return [fold_case(w.strip()) for w in lines if w.strip()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line as UTF-8, with a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)

"""
Word list validator.

What this module does:
- Validate the solution pool (picked_words.txt or a user word file) and,
  optionally, the extra dictionary list (valid_words.txt).
- Enforce formatting rules (lowercase letters only, one word per line, and an
  exact length N when one is requested). Letters may be any alphabet, so
  'hällö' is fine.
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Count words present in both lists.
- Return a machine-readable dict and a one-line summary for the console.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/picked_words.txt",
                             "packages/datasets/data/valid_words.txt", N=5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (picked, valid) pair."""
    N: Optional[int]
    picked: FileReport
    valid: Optional[FileReport]
    overlap: int         # words listed in both files
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: Optional[int]) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and (N is None or len(w) == N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _report(path: Path, N: Optional[int], label: str,
            issues: List[str]) -> Tuple[FileReport, List[str]]:
    if not path.exists():
        issues.append(f"{label} file not found: {path}")
        return FileReport(str(path), False, 0, "", 0, 0), []

    words, invalid = _load_and_check(path, N)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(picked_path: str, valid_path: Optional[str] = None,
                       N: Optional[int] = None) -> Dict:
    """
    Validate the solution pool and (optionally) the extra dictionary list.

    Parameters
    ----------
    picked_path : str
        Words that may be drawn as the solution.
    valid_path : str, optional
        Additional accepted guesses.
    N : int, optional
        Required word length; when omitted, any length is accepted.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` requires every file to
        exist, be non-empty, and have no invalid lines. Duplicates are
        reported in `issues` but do not fail the check.
    """
    issues: List[str] = []

    picked_rep, picked = _report(Path(picked_path), N, "picked", issues)
    valid_rep: Optional[FileReport] = None
    overlap = 0
    if valid_path is not None:
        valid_rep, valid = _report(Path(valid_path), N, "valid", issues)
        overlap = len(set(picked) & set(valid))

    reports = [r for r in (picked_rep, valid_rep) if r is not None]
    passed = all(r.exists and r.count > 0 and r.invalid_lines == 0 for r in reports)

    rep = ValidationReport(
        N=N,
        picked=picked_rep,
        valid=valid_rep,
        overlap=overlap,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | picked=200 (uniq=200, sha=abc123...) | valid=310 (uniq=310, sha=def456...) | overlap=0 | OK
    """
    N = report["N"] if report["N"] is not None else "any"
    parts = [f"N={N}"]
    for key in ("picked", "valid"):
        r = report.get(key)
        if r is None:
            continue
        sha = (r.get("sha256") or "")[:12]
        parts.append(f"{key}={r['count']} (uniq={r['unique_count']}, sha={sha})")
    if report.get("valid") is not None:
        parts.append(f"overlap={report['overlap']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)

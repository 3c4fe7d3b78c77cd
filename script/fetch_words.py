"""
Refresh the built-in solution list from a page of past Wordle answers.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates while preserving calendar order, and writes the
  list that the game draws solutions from.
- With --keep-existing, words already in the output file are kept and new
  ones appended.

Usage:
    python -m script.fetch_words
    python -m script.fetch_words --sort --out packages/datasets/data/picked_words.txt
"""

import re
import argparse
from pathlib import Path
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

from packages.datasets import PICKED_WORDS, load_words
from packages.datasets.io import write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> List[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Refresh the built-in solution word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(PICKED_WORDS))
    ap.add_argument("--keep-existing", action="store_true",
                    help="keep words already in --out and append the new ones")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping calendar order")
    args = ap.parse_args()

    words = fetch_answers(args.url)
    if args.keep_existing and Path(args.out).exists():
        words = unique_preserve_order(load_words(args.out) + words)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()

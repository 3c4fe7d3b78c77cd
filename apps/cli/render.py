# apps/cli/render.py
"""
Board renderer for the terminal.

Reads engine state only: word length, max tries, committed guesses with their
hit classes, the input buffer and the last error. Colours come from colorama.

Layout (5 letters, 6 tries):

    -----------
    |j|o|l|l|y|     <- played row, cells coloured by hit class
    -----------
    |h|e|_|_|_|     <- active row, input padded with '_'
    -----------
    |_|_|_|_|_|     <- future rows
    ...
    Word is not valid
"""

from __future__ import annotations

import sys
from typing import List, TextIO

import colorama
from colorama import Back, Fore, Style
from colorama.ansi import Cursor, clear_screen

from packages.engine import GuessEngine, HitInfo

PLACEHOLDER = "_"

_CELL_STYLE = {
    HitInfo.HIT: Back.GREEN + Fore.BLACK,
    HitInfo.CONTAINS: Back.YELLOW + Fore.BLACK,
    HitInfo.MISS: Back.BLACK + Fore.WHITE,
    HitInfo.NONE: "",
}


def _row_cells(engine: GuessEngine, row: int) -> List[tuple]:
    """(letter, HitInfo) for every cell in `row`."""
    width = engine.word_length
    guesses = engine.guesses

    if row < len(guesses):
        return list(zip(guesses[row], engine.hits_for(row)))

    if row == len(guesses):
        letters = engine.current_input.ljust(width, PLACEHOLDER)
    else:
        letters = PLACEHOLDER * width
    return [(ch, HitInfo.NONE) for ch in letters]


def render_board(engine: GuessEngine, *, color: bool = True) -> str:
    width = engine.word_length
    separator = "-" * (width * 2 + 1)
    lines: List[str] = []

    for row in range(engine.max_tries):
        lines.append(separator)
        cells = []
        for letter, hit in _row_cells(engine, row):
            style = _CELL_STYLE[hit] if color else ""
            reset = Style.RESET_ALL if style else ""
            cells.append(f"{style}{letter}{reset}")
        lines.append("|" + "|".join(cells) + "|")
    lines.append(separator)

    if engine.last_error is not None:
        lines.append("")
        lines.append(str(engine.last_error))

    return "\n".join(lines)


class TerminalRenderer:
    """
    Redraw the whole board on every call.

    Lines end in CRLF so the board also lines up while the tty is in raw mode.
    """

    def __init__(self, stream: TextIO | None = None, *, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color
        if color:
            colorama.just_fix_windows_console()

    def __call__(self, engine: GuessEngine) -> None:
        board = render_board(engine, color=self.color)
        self.stream.write(clear_screen() + Cursor.POS(1, 1))
        self.stream.write(board.replace("\n", "\r\n") + "\r\n")
        self.stream.flush()

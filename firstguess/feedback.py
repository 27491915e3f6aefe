"""
Feedback cells and guesses for Wordle share grids.

A share grid line such as "⬛🟨⬛⬛🟩" decodes into a `Guess`: a fixed
sequence of five `Cell` values, left to right.
"""

from __future__ import annotations

import re
from collections import Counter
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional, Tuple

WORD_LENGTH = 5

# Day 0 of the answer list.
DAY_ONE = datetime(2021, 6, 19, tzinfo=timezone.utc)

_DAY_HEADER = re.compile(r"^Wordle\s+([0-9][0-9,]*)(?:\s|$)")


class Cell(Enum):
    MATCH = "match"      # right letter, right spot
    PARTIAL = "partial"  # letter is elsewhere in the answer
    NOP = "nop"          # letter is not among the unmatched answer letters

    def __str__(self) -> str:
        return _CELL_GLYPHS[self]


_CELL_GLYPHS = {
    Cell.NOP: "⬛",
    Cell.PARTIAL: "🟨",
    Cell.MATCH: "🟩",
}

_GLYPH_CELLS = {
    "⬛": Cell.NOP,      # dark theme
    "⬜": Cell.NOP,      # light theme
    "🟨": Cell.PARTIAL,
    "🟩": Cell.MATCH,
    "🟦": Cell.PARTIAL,  # high contrast
    "🟧": Cell.MATCH,    # high contrast
}


class Guess(tuple):
    """Immutable 5-cell feedback pattern for one submitted word."""

    def __new__(cls, cells: Iterable[Cell]) -> "Guess":
        cells = tuple(cells)
        if len(cells) != WORD_LENGTH:
            raise ValueError(f"a guess must have exactly {WORD_LENGTH} cells, got {len(cells)}")
        if not all(isinstance(c, Cell) for c in cells):
            raise TypeError("guess cells must be Cell values")
        return super().__new__(cls, cells)

    def __str__(self) -> str:
        return "".join(str(c) for c in self)

    def __repr__(self) -> str:
        return f"Guess({str(self)!r})"

    @property
    def solved(self) -> bool:
        return all(c is Cell.MATCH for c in self)


def parse_guess(line: str) -> Optional[Guess]:
    """
    Decode one line of share-grid glyphs into a `Guess`.

    Returns None for anything that is not exactly five feedback glyphs;
    reply bodies interleave commentary with the grid, so this is an
    expected outcome and not an error.
    """
    line = line.strip()
    if len(line) != WORD_LENGTH:
        return None
    cells = []
    for ch in line:
        cell = _GLYPH_CELLS.get(ch)
        if cell is None:
            return None
        cells.append(cell)
    return Guess(cells)


def find_first_guess(text: str) -> Optional[Guess]:
    """Return the first grid line of a reply, i.e. the first guess of the day."""
    for line in text.splitlines():
        guess = parse_guess(line)
        if guess is not None:
            return guess
    return None


def parse_day_header(text: str) -> Optional[int]:
    """Day number from a leading "Wordle 221 3/6" style header, if present."""
    lines = text.splitlines()
    if not lines:
        return None
    m = _DAY_HEADER.match(lines[0])
    if m is None:
        return None
    return int(m.group(1).replace(",", ""))


def days_since_start(posted_at: datetime) -> int:
    """Whole days between `posted_at` and DAY_ONE, truncated toward zero."""
    if posted_at.tzinfo is None:
        posted_at = posted_at.replace(tzinfo=timezone.utc)
    elapsed = (posted_at - DAY_ONE).total_seconds()
    return int(elapsed / 86400)


def resolve_day(text: str, posted_at: Optional[datetime] = None) -> int:
    """
    Day number of a reply: the "Wordle <n>" header wins, else the post date.

    Raises
    ------
    ValueError
        If the text has no header and no timestamp was given.
    """
    day = parse_day_header(text)
    if day is not None:
        return day
    if posted_at is None:
        raise ValueError("reply has no 'Wordle <day>' header and no timestamp")
    return days_since_start(posted_at)


def score_pattern(guess: str, target: str) -> Guess:
    """
    Compute the Wordle feedback for `guess` against `target`.

    Duplicate handling follows the game: greens are claimed first, then
    yellows are handed out left to right while unclaimed copies of the
    letter remain. Anything left over is gray (NOP).
    """
    if len(guess) != WORD_LENGTH or len(target) != WORD_LENGTH:
        raise ValueError(f"cannot score {guess!r} against {target!r}")

    pattern = [Cell.NOP] * WORD_LENGTH
    remaining = Counter(target)

    # Pass 1: greens
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = Cell.MATCH
            remaining[g] -= 1

    # Pass 2: yellows where counts allow
    for i, g in enumerate(guess):
        if pattern[i] is Cell.NOP and remaining[g] > 0:
            pattern[i] = Cell.PARTIAL
            remaining[g] -= 1

    return Guess(pattern)


def cells_from_codes(codes: str) -> Tuple[Cell, ...]:
    """Hand-written patterns, 'g'/'y'/'b' (or 2/1/0) per position."""
    mapping = {"g": Cell.MATCH, "y": Cell.PARTIAL, "b": Cell.NOP,
               "2": Cell.MATCH, "1": Cell.PARTIAL, "0": Cell.NOP}
    codes = codes.strip().lower()
    if len(codes) != WORD_LENGTH:
        raise ValueError("feedback must be length 5 (gybgy / 21001)")
    try:
        return tuple(mapping[ch] for ch in codes)
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b or 2/1/0") from e


if __name__ == "__main__":
    assert str(score_pattern("fluff", "foggy")) == "🟩⬛⬛⬛⬛"
    assert score_pattern("allot", "total") == Guess(cells_from_codes("yybyy"))
    assert parse_guess("not a grid") is None
    assert parse_day_header("Wordle 221 3/6\n\n...") == 221
    print("feedback.py sanity checks passed.")

"""
solver.py

Works out which first guess is consistent with a set of observed results.

Flow: observations -> per-position constraints -> resolved letter sets ->
pattern like "[a][l][i][defjqvxyz][e]" -> dictionary filter -> outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple

import numpy as np

from firstguess.constraints import ConstraintTable, first_empty_position
from firstguess.feedback import WORD_LENGTH, Guess
from firstguess.vocab import WordDictionary

# Up to this many candidates are listed; beyond it only the count is reported.
MAX_LISTED = 12


@dataclass(frozen=True)
class Observation:
    """One day's share grid paired with that day's answer."""
    guess: Guess
    answer: str
    day: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.guess, Guess):
            raise TypeError("guess must be a Guess")
        if len(self.answer) != WORD_LENGTH or not self.answer.isalpha() or not self.answer.islower():
            raise ValueError(f"answer must be a lowercase 5-letter word: {self.answer!r}")


class OutcomeKind(Enum):
    IMPOSSIBLE = "impossible"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    TOO_MANY = "too_many"


@dataclass(frozen=True)
class SolveOutcome:
    """
    Result of a solve.

    - IMPOSSIBLE: `position` is the 1-indexed letter with no possible value,
      or None when every position had letters but no word matched them all.
    - UNIQUE: `words` holds the single candidate.
    - AMBIGUOUS: `words` holds 2..12 candidates.
    - TOO_MANY: only `count` is meaningful.
    """
    kind: OutcomeKind
    words: Tuple[str, ...] = ()
    count: int = 0
    position: Optional[int] = None
    pattern: str = field(default="", compare=False)

    @property
    def word(self) -> Optional[str]:
        return self.words[0] if self.kind is OutcomeKind.UNIQUE else None


def build_pattern(resolved: Sequence[FrozenSet[str]]) -> str:
    """One sorted character class per position; letters sorted for display only."""
    return "".join(f"[{''.join(sorted(allowed))}]" for allowed in resolved)


def allowed_mask(resolved: Sequence[FrozenSet[str]]) -> np.ndarray:
    """(5, 26) boolean table: mask[i, k] is True iff letter k is allowed at i."""
    mask = np.zeros((len(resolved), 26), dtype=bool)
    for i, allowed in enumerate(resolved):
        for ch in allowed:
            mask[i, ord(ch) - 97] = True
    return mask


def filter_words(dictionary: WordDictionary, resolved: Sequence[FrozenSet[str]]) -> List[str]:
    """
    Keep the words of `valid_words + answers` whose every letter is in its
    position's resolved set. Order follows the dictionary.
    """
    if len(resolved) != WORD_LENGTH:
        raise ValueError(f"expected {WORD_LENGTH} resolved sets, got {len(resolved)}")
    if len(dictionary) == 0:
        return []
    mask = allowed_mask(resolved)
    letters = dictionary.letters
    hits = mask[np.arange(WORD_LENGTH), letters].all(axis=1)
    return dictionary.words_at(np.flatnonzero(hits))


def classify(candidates: Sequence[str], pattern: str = "") -> SolveOutcome:
    """Turn a candidate list into the outcome the caller reports on."""
    n = len(candidates)
    if n == 0:
        return SolveOutcome(OutcomeKind.IMPOSSIBLE, pattern=pattern)
    if n == 1:
        return SolveOutcome(OutcomeKind.UNIQUE, words=tuple(candidates), count=1, pattern=pattern)
    if n <= MAX_LISTED:
        return SolveOutcome(OutcomeKind.AMBIGUOUS, words=tuple(candidates), count=n, pattern=pattern)
    return SolveOutcome(OutcomeKind.TOO_MANY, count=n, pattern=pattern)


def resolve_observations(observations: Sequence[Observation]) -> List[FrozenSet[str]]:
    table = ConstraintTable()
    for obs in observations:
        table.add(obs.guess, obs.answer)
    return table.resolve()


def solve(observations: Sequence[Observation], dictionary: WordDictionary) -> SolveOutcome:
    """
    Find the first guesses consistent with every observation.

    Observation order does not matter. No observations at all leaves every
    position open, so the whole dictionary comes back as TOO_MANY (or fewer,
    for a tiny dictionary).
    """
    resolved = resolve_observations(observations)
    pattern = build_pattern(resolved)

    empty_at = first_empty_position(resolved)
    if empty_at is not None:
        return SolveOutcome(OutcomeKind.IMPOSSIBLE, position=empty_at, pattern=pattern)

    return classify(filter_words(dictionary, resolved), pattern=pattern)

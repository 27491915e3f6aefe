"""
constraints.py

Derives per-position letter constraints from (feedback, answer) pairs and
folds them into the set of letters still possible at each position.

The guessed word is the unknown here: we know the answer and the colors,
and work backwards to what the first guess could have been.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional

from firstguess.feedback import WORD_LENGTH, Cell, Guess

ALPHABET: FrozenSet[str] = frozenset(string.ascii_lowercase)


class ConstraintKind(Enum):
    ALLOWED = "+"    # letter must be one of `chars`
    FORBIDDEN = "-"  # letter must be none of `chars`


@dataclass(frozen=True)
class Constraint:
    kind: ConstraintKind
    chars: FrozenSet[str]

    @classmethod
    def allowed(cls, chars) -> "Constraint":
        return cls(ConstraintKind.ALLOWED, frozenset(chars))

    @classmethod
    def forbidden(cls, chars) -> "Constraint":
        return cls(ConstraintKind.FORBIDDEN, frozenset(chars))

    def apply(self, state: FrozenSet[str]) -> FrozenSet[str]:
        """Narrow a running allowed-set by this constraint."""
        if self.kind is ConstraintKind.ALLOWED:
            return state & self.chars
        return state - self.chars

    def __repr__(self) -> str:
        return f"{self.kind.value}[{''.join(sorted(self.chars))}]"


def derive_constraints(guess: Guess, answer: str) -> List[Constraint]:
    """
    Emit one constraint per position for a single observation.

    Parameters
    ----------
    guess : Guess
        The colors the unknown word received.
    answer : str
        The day's answer, lowercase, 5 letters.

    Rules
    -----
    - MATCH at i: the letter is exactly answer[i].
    - PARTIAL at i: the letter is one of the answer letters at positions
      j != i that were not matched themselves.
    - NOP at i: the letter is none of the answer letters at unmatched
      positions (i included). Matched positions stay out of that set since
      a surplus copy of an already matched letter scores gray, not yellow:
      "fluff" against "foggy" gives 🟩⬛⬛⬛⬛.
    """
    if len(answer) != WORD_LENGTH:
        raise ValueError(f"answer must be length {WORD_LENGTH}: {answer!r}")
    if len(guess) != WORD_LENGTH:
        raise ValueError(f"guess must have {WORD_LENGTH} cells")

    unmatched = [j for j, cell in enumerate(guess) if cell is not Cell.MATCH]

    out: List[Constraint] = []
    for i, cell in enumerate(guess):
        if cell is Cell.MATCH:
            out.append(Constraint.allowed(answer[i]))
        elif cell is Cell.PARTIAL:
            out.append(Constraint.allowed(answer[j] for j in unmatched if j != i))
        else:
            out.append(Constraint.forbidden(answer[j] for j in unmatched))
    return out


class ConstraintTable:
    """
    Per-position accumulator of constraints across all observations.

    Filled once per solve via `add`, then consumed by `resolve`.
    """

    def __init__(self, word_length: int = WORD_LENGTH) -> None:
        self.word_length = word_length
        self.positions: List[List[Constraint]] = [[] for _ in range(word_length)]

    def add(self, guess: Guess, answer: str) -> None:
        for i, constraint in enumerate(derive_constraints(guess, answer)):
            self.positions[i].append(constraint)

    def resolve(self) -> List[FrozenSet[str]]:
        """
        Fold each position's constraints over the full alphabet.

        An empty set at some position means the observations contradict each
        other; that is reported by the caller, not raised here.
        """
        resolved: List[FrozenSet[str]] = []
        for constraints in self.positions:
            state = ALPHABET
            for c in constraints:
                state = c.apply(state)
            resolved.append(state)
        return resolved


def first_empty_position(resolved: List[FrozenSet[str]]) -> Optional[int]:
    """1-indexed position of the first empty allowed-set, or None."""
    for idx, allowed in enumerate(resolved):
        if not allowed:
            return idx + 1
    return None

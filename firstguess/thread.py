"""
thread.py

Turns the replies of a conversation into observations for the solver.

Only the root author's replies count. Each one contributes its first grid
line, paired with the answer of the day the reply is about.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Set

from firstguess.feedback import find_first_guess, resolve_day
from firstguess.solver import Observation
from firstguess.vocab import WordDictionary


@dataclass(frozen=True)
class Reply:
    id: str
    author_id: str
    text: str
    created_at: Optional[datetime] = None


def root_author(replies: Iterable[Reply], root_id: str) -> str:
    for r in replies:
        if r.id == root_id:
            return r.author_id
    raise KeyError(f"root post {root_id!r} not found in thread")


def build_observations(
    replies: Iterable[Reply],
    root_id: str,
    dictionary: WordDictionary,
    excluded_days: Optional[Set[int]] = None,
) -> List[Observation]:
    """
    Collect one observation per usable reply, in thread order.

    Parameters
    ----------
    replies : iterable of Reply
        All posts of the conversation, the root included.
    root_id : str
        Id of the root post; its author is the player.
    dictionary : WordDictionary
        Source of the answer for each day.
    excluded_days : set[int] | None
        Days to drop before they reach the solver.

    Raises
    ------
    KeyError
        If the root post is missing.
    IndexError
        If a reply refers to a day with no known answer.
    """
    replies = list(replies)
    author = root_author(replies, root_id)
    excluded = excluded_days or set()

    out: List[Observation] = []
    for r in replies:
        if r.id == root_id or r.author_id != author:
            continue
        guess = find_first_guess(r.text)
        if guess is None:
            continue
        day = resolve_day(r.text, r.created_at)
        if day in excluded:
            continue
        out.append(Observation(guess=guess, answer=dictionary.answer_for_day(day), day=day))
    return out

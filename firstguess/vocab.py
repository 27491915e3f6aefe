from __future__ import annotations

from typing import List, Sequence

import numpy as np

from firstguess.feedback import WORD_LENGTH


def _check_words(words: Sequence[str], name: str) -> List[str]:
    if not isinstance(words, (list, tuple)):
        raise TypeError(f"`{name}` must be a list of strings")
    if not all(isinstance(w, str) for w in words):
        raise TypeError(f"all items in `{name}` must be str")
    for w in words:
        if len(w) != WORD_LENGTH or not (w.isascii() and w.isalpha() and w.islower()):
            raise ValueError(f"`{name}` contains an invalid word: {w!r}")
    return list(words)


class WordDictionary:
    """
    Valid guesses plus the daily answers, indexed by day starting at 0.

    Built once and shared read-only by every solve. The letter matrix
    (one row per word of `valid_words + answers`, letters as 0..25) is
    computed up front so filtering is a single vectorised lookup.
    """

    def __init__(self, valid_words: Sequence[str], answers: Sequence[str]) -> None:
        self._valid_words = _check_words(valid_words, "valid_words")
        self._answers = _check_words(answers, "answers")
        self._all = self._valid_words + self._answers

        if self._all:
            codes = np.frombuffer("".join(self._all).encode("ascii"), dtype=np.uint8)
            letters = codes.reshape(-1, WORD_LENGTH) - ord("a")
        else:
            letters = np.empty((0, WORD_LENGTH), dtype=np.uint8)
        letters.flags.writeable = False
        self._letters = letters

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Size of the combined list (valid words first, then answers)."""
        return len(self._all)

    @property
    def valid_words(self) -> List[str]:
        return list(self._valid_words)

    @property
    def answers(self) -> List[str]:
        return list(self._answers)

    @property
    def letters(self) -> np.ndarray:
        """Read-only (n, 5) uint8 array of letter indices."""
        return self._letters

    def answer_for_day(self, day: int) -> str:
        """Return the answer for `day`; raise IndexError if unknown."""
        if day < 0 or day >= len(self._answers):
            raise IndexError(f"no answer known for day {day}")
        return self._answers[day]

    def words_at(self, indices) -> List[str]:
        return [self._all[i] for i in indices]


if __name__ == "__main__":
    d = WordDictionary(["alive", "alike"], ["cigar", "rebut"])
    assert len(d) == 4
    assert d.answer_for_day(1) == "rebut"
    assert d.letters.shape == (4, 5)
    assert d.letters[2].tolist() == [2, 8, 6, 0, 17]
    print("WordDictionary sanity checks passed.")

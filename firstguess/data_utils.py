from __future__ import annotations

import argparse
import re
from typing import List, Optional, Tuple

import pandas as pd

from firstguess.thread import Reply
from firstguess.vocab import WordDictionary

# First answer of the original list; the answers array is found by it.
DAY1_ANSWER = "cigar"

_QUOTED_WORD = re.compile(r'^"([a-z]{5})"$')


def load_dictionary(csv_path: str) -> WordDictionary:
    """
    Load the dictionary from a CSV with `word` and `day` columns.

    Rows with a `day` are the daily answers and must cover days 0..n-1;
    the rest are valid guesses. Words are lowercased and trimmed.
    """
    df = pd.read_csv(csv_path)
    for col in ("word", "day"):
        if col not in df.columns:
            raise KeyError(f"column '{col}' not found in {csv_path}")

    df["word"] = df["word"].astype(str).str.strip().str.lower()
    answer_df = df[df["day"].notna()].sort_values("day")
    valid_df = df[df["day"].isna()]

    days = answer_df["day"].astype(int).tolist()
    if days != list(range(len(days))):
        raise ValueError(f"answer days in {csv_path} must run 0..{len(days) - 1} without gaps")

    return WordDictionary(valid_df["word"].tolist(), answer_df["word"].tolist())


def save_dictionary(dictionary: WordDictionary, csv_path: str) -> None:
    """Write `dictionary` in the format `load_dictionary` reads."""
    valid = dictionary.valid_words
    answers = dictionary.answers
    df = pd.DataFrame(
        {
            "word": valid + answers,
            "day": pd.Series([None] * len(valid) + list(range(len(answers))), dtype="Int64"),
        }
    )
    df.to_csv(csv_path, index=False)


def _split_words(body: str) -> List[str]:
    words: List[str] = []
    for item in body.split(","):
        m = _QUOTED_WORD.match(item.strip())
        if m is None:
            raise ValueError(f"unexpected entry in word array: {item[:20]!r}")
        words.append(m.group(1))
    return words


def extract_word_lists(script: str) -> Tuple[List[str], List[str]]:
    """
    Pull (valid_words, answers) out of the Wordle page's main script.

    The script embeds the answers as a JS array literal starting with
    ["cigar", ...] and the valid guesses as the next array literal after it.

    Raises
    ------
    ValueError
        If either array cannot be found.
    """
    start = script.find(f'["{DAY1_ANSWER}",')
    if start < 0:
        raise ValueError(f"answer list starting with {DAY1_ANSWER!r} not found in script")
    data = script[start:]
    end = data.find("]")
    if end < 0:
        raise ValueError("answer list is not terminated")
    answers = _split_words(data[1:end])

    rest = data[end + 1:]
    open_idx = rest.find("[")
    if open_idx < 0:
        raise ValueError("valid word list not found after the answer list")
    rest = rest[open_idx + 1:]
    close_idx = rest.find("]")
    if close_idx < 0:
        raise ValueError("valid word list is not terminated")
    valid_words = _split_words(rest[:close_idx])

    return valid_words, answers


def dictionary_from_script(script_path: str) -> WordDictionary:
    """Read a saved copy of the Wordle main script into a `WordDictionary`."""
    with open(script_path, "r", encoding="utf-8") as f:
        valid_words, answers = extract_word_lists(f.read())
    return WordDictionary(valid_words, answers)


def load_thread(csv_path: str) -> List[Reply]:
    """
    Load an exported conversation: columns id, author_id, created_at, text.
    The root post is one of the rows. Timestamps are read as UTC.
    """
    df = pd.read_csv(csv_path, dtype={"id": str, "author_id": str, "text": str})
    for col in ("id", "author_id", "created_at", "text"):
        if col not in df.columns:
            raise KeyError(f"column '{col}' not found in {csv_path}")
    created = pd.to_datetime(df["created_at"], utc=True, errors="coerce")
    df["text"] = df["text"].fillna("")

    replies: List[Reply] = []
    for row, ts in zip(df.itertuples(index=False), created):
        replies.append(
            Reply(
                id=row.id,
                author_id=row.author_id,
                text=row.text,
                created_at=None if pd.isna(ts) else ts.to_pydatetime(),
            )
        )
    return replies


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Convert the Wordle main script into word_list.csv")
    ap.add_argument("script", help="Saved copy of the Wordle page's main.*.js")
    ap.add_argument("--out", default="word_list.csv", help="CSV to write (word,day)")
    args = ap.parse_args(argv)

    dictionary = dictionary_from_script(args.script)
    save_dictionary(dictionary, args.out)
    print(f"Wrote {len(dictionary.valid_words)} valid words and {len(dictionary.answers)} answers to {args.out}")


if __name__ == "__main__":
    main()

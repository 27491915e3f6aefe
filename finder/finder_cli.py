"""
finder/finder_cli.py

Guess someone's favourite first word from the Wordle results they posted.

- Reads the dictionary (`word,day` CSV) and an exported reply thread
  (`id,author_id,created_at,text` CSV).
- Takes the first grid line of each of the root author's replies, pairs it
  with that day's answer, and narrows down the first guess.

Build word_list.csv from a saved copy of the Wordle script first:
  python -m firstguess.data_utils main.js --out word_list.csv

Run:
  python -m finder.finder_cli 1484263930380406785 --thread thread.csv --csv word_list.csv
  python -m finder.finder_cli 1484263930380406785 --thread thread.csv -e 216 -e 218

Exit status is 2 when no word fits the results.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from firstguess.data_utils import load_dictionary, load_thread
from firstguess.solver import Observation, OutcomeKind, SolveOutcome, solve
from firstguess.thread import build_observations


def _print_observations(observations: List[Observation]) -> None:
    for obs in observations:
        day = "?" if obs.day is None else obs.day
        print(f"[{day:>3}] {obs.guess} ({obs.answer})")


def report(outcome: SolveOutcome) -> int:
    """Print the outcome; return the process exit status."""
    if outcome.kind is OutcomeKind.IMPOSSIBLE:
        if outcome.position is not None:
            print(f":-( no possible values for letter {outcome.position}")
        else:
            print(f"Using pattern: `{outcome.pattern}`.")
            print(":-( no word matches every result")
        return 2

    print(f"Using pattern: `{outcome.pattern}`.")
    print()
    if outcome.kind is OutcomeKind.UNIQUE:
        print(f"Is your first guess.. {outcome.word}?")
    elif outcome.kind is OutcomeKind.AMBIGUOUS:
        print("Couldn't exactly figure out your preferred first guess but we have some guesses:")
        for w in outcome.words:
            print(f"  {w}")
    else:
        print(f"Couldn't figure it out! (we found {outcome.count} possibilities, too many)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Infer a player's first Wordle guess from their posted results")
    ap.add_argument("root_id", help="Id of the root post of the thread")
    ap.add_argument("--thread", required=True, help="CSV export of the thread (id,author_id,created_at,text)")
    ap.add_argument("--csv", default="word_list.csv", help="Path to word_list.csv (word,day)")
    ap.add_argument(
        "-e", "--exclude", type=int, action="append", default=None,
        help="Day to leave out (repeatable). Defaults to day 0.",
    )
    args = ap.parse_args(argv)
    excluded = set(args.exclude) if args.exclude is not None else {0}

    dictionary = load_dictionary(args.csv)
    replies = load_thread(args.thread)
    observations = build_observations(replies, args.root_id, dictionary, excluded)

    _print_observations(observations)
    return report(solve(observations, dictionary))


if __name__ == "__main__":
    raise SystemExit(main())

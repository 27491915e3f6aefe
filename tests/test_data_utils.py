import pandas as pd
import pytest

from firstguess.data_utils import extract_word_lists, load_dictionary, load_thread, main, save_dictionary
from firstguess.feedback import parse_guess
from firstguess.solver import Observation, OutcomeKind, solve
from firstguess.vocab import WordDictionary


def test_load_dictionary_splits_answers_by_day(tmp_path):
    path = tmp_path / "word_list.csv"
    pd.DataFrame(
        {
            "word": ["Rebut", "aahed", "cigar", "sissy", "zonal"],
            "day": [1, None, 0, 2, None],
        }
    ).to_csv(path, index=False)

    d = load_dictionary(str(path))
    assert d.answers == ["cigar", "rebut", "sissy"]
    assert d.valid_words == ["aahed", "zonal"]
    assert d.answer_for_day(1) == "rebut"
    assert len(d) == 5


def test_load_dictionary_rejects_day_gaps(tmp_path):
    path = tmp_path / "word_list.csv"
    pd.DataFrame({"word": ["cigar", "sissy"], "day": [0, 2]}).to_csv(path, index=False)
    with pytest.raises(ValueError):
        load_dictionary(str(path))


def test_load_dictionary_requires_columns(tmp_path):
    path = tmp_path / "word_list.csv"
    pd.DataFrame({"word": ["cigar"]}).to_csv(path, index=False)
    with pytest.raises(KeyError):
        load_dictionary(str(path))


def test_saved_dictionary_loads_back(tmp_path):
    path = tmp_path / "word_list.csv"
    d = WordDictionary(["aahed", "zonal"], ["cigar", "rebut"])
    save_dictionary(d, str(path))
    again = load_dictionary(str(path))
    assert again.valid_words == d.valid_words
    assert again.answers == d.answers


def test_extract_word_lists_from_script():
    script = (
        'var a=1;function x(){return 2}'
        'var La=["cigar","rebut","sissy"],Ta=["aahed","aalii","aargh"],Ia="present";'
    )
    valid, answers = extract_word_lists(script)
    assert answers == ["cigar", "rebut", "sissy"]
    assert valid == ["aahed", "aalii", "aargh"]


def test_extract_word_lists_missing_structure():
    with pytest.raises(ValueError):
        extract_word_lists('var Ta=["aahed","aalii"];')
    with pytest.raises(ValueError):
        extract_word_lists('var La=["cigar","rebut"];')
    with pytest.raises(ValueError):
        extract_word_lists('var La=["cigar","rebut",1234];')


def test_load_thread(tmp_path):
    path = tmp_path / "thread.csv"
    pd.DataFrame(
        {
            "id": ["100", "101", "102"],
            "author_id": ["7", "7", "8"],
            "created_at": ["2022-01-20T09:00:00Z", "2022-01-21T10:00:00Z", ""],
            "text": ["root", "Wordle 216 3/6\n⬛⬛🟩⬛⬛", None],
        }
    ).to_csv(path, index=False)

    replies = load_thread(str(path))
    assert [r.id for r in replies] == ["100", "101", "102"]
    assert replies[1].author_id == "7"
    assert replies[1].text.splitlines()[1] == "⬛⬛🟩⬛⬛"
    assert replies[1].created_at.year == 2022
    assert replies[2].created_at is None
    assert replies[2].text == ""


def test_script_converts_to_a_usable_word_list(tmp_path, capsys):
    week = ["robot", "prick", "wince", "crimp", "knoll", "sugar", "whack"]
    grids = ["⬛⬛⬛⬛⬛", "⬛⬛🟩⬛⬛", "⬛⬛🟨⬛🟩", "⬛⬛🟩⬛⬛", "⬛🟨⬛⬛⬛", "🟨⬛⬛⬛⬛", "🟨⬛⬛⬛⬛"]
    answers = ["cigar"] + ["zzzzz"] * 214 + week
    script = tmp_path / "main.js"
    script.write_text(
        "var La=[" + ",".join(f'"{w}"' for w in answers) + '],Ta=["alive","alike","alien"];',
        encoding="utf-8",
    )
    out = tmp_path / "word_list.csv"

    main([str(script), "--out", str(out)])
    assert "Wrote 3 valid words and 222 answers" in capsys.readouterr().out

    d = load_dictionary(str(out))
    assert d.answer_for_day(0) == "cigar"
    observations = [
        Observation(parse_guess(grid), d.answer_for_day(day), day)
        for day, grid in zip(range(215, 222), grids)
    ]
    outcome = solve(observations, d)
    assert outcome.kind is OutcomeKind.UNIQUE
    assert outcome.word == "alive"

import json
from pathlib import Path

import pytest

from wordseg.frequency_model import FrequencyModel
from wordseg.io_utils import load_dictionary, parse_dictionary_lines, save_results
from wordseg.types import SegmentationResult


def test_parse_dictionary_lines_skips_malformed_entries():
    model = FrequencyModel(corpus_size=1000)
    lines = [
        "the 50",
        "dog\t7",
        "lonely",
        "cat many",
        "bird -3",
        "",
        "  fox   12  extra  ",
    ]

    applied = parse_dictionary_lines(lines, model)

    assert applied == 3
    assert model.lookup("the") == 50
    assert model.lookup("dog") == 7
    assert model.lookup("fox") == 12
    assert model.lookup("cat") is None
    assert model.lookup("bird") is None


def test_parse_dictionary_lines_honours_column_indices():
    model = FrequencyModel(corpus_size=1000)

    applied = parse_dictionary_lines(["12 fox", "9 owl x", "3"], model, term_index=1, count_index=0)

    assert applied == 2
    assert model.lookup("fox") == 12
    assert model.lookup("owl") == 9


def test_parse_dictionary_lines_skips_lines_too_short_for_columns():
    model = FrequencyModel(corpus_size=1000)

    applied = parse_dictionary_lines(["fox 12", "a b 3"], model, term_index=0, count_index=2)

    assert applied == 1
    assert model.lookup("a") == 3


def test_load_dictionary_merges_and_last_count_wins(tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text("the 100\nquick 5\n", encoding="utf-8")
    second.write_text("the 200\nbrownish 1\n", encoding="utf-8")
    model = FrequencyModel(corpus_size=10_000)

    assert load_dictionary(first, model)
    assert load_dictionary(str(second), model)

    assert model.lookup("the") == 200
    assert model.lookup("quick") == 5
    assert model.max_word_length == len("brownish")
    assert len(model) == 3


def test_load_dictionary_reports_missing_file(tmp_path: Path) -> None:
    model = FrequencyModel(corpus_size=10)

    assert load_dictionary(tmp_path / "missing.txt", model) is False
    assert len(model) == 0


def test_load_dictionary_skips_lines_that_are_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"the 100\ncaf\xe9 5\ndog 7\n")
    model = FrequencyModel(corpus_size=10_000)

    assert load_dictionary(path, model) is True

    assert model.lookup("the") == 100
    assert model.lookup("dog") == 7
    assert len(model) == 2


def test_save_results_writes_expected_structure(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "results.json"
    results = [SegmentationResult("the dog", -3.5), SegmentationResult("", 0.0)]

    save_results(out_path, ["thedog", ""], results)

    data = json.loads(out_path.read_text(encoding="utf-8"))

    assert data["results"][0] == {"input": "thedog", "segmented_text": "the dog", "score": -3.5}
    assert data["results"][1]["segmented_text"] == ""


def test_save_results_rejects_mismatched_lengths(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        save_results(tmp_path / "out.json", ["a", "b"], [SegmentationResult("a", -1.0)])

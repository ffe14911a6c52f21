from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from wordsuggest.eval_spellcheck import eval_spellcheck
from wordsuggest.eval_spellcheck import main as eval_main
from wordsuggest.spellcheck import format_suggestions, main


@pytest.fixture()
def dictionary(tmp_path: Path) -> Path:
    path = tmp_path / "dictionary.txt"
    path.write_text("cat\ncat\ncut\ncut\ncats\ndog\n", encoding="utf-8")
    return path


def test_format_suggestions():
    assert format_suggestions([]) == "no similar word found"
    assert format_suggestions(["cat"]) == "suggested word is: cat"
    assert format_suggestions(["bat", "cat"]) == "suggested words are: [bat, cat]"


def test_cli_single_word(dictionary: Path, capsys):
    main(["--dictionary", str(dictionary), "--word", "cot", "--show_ranking", "2"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "suggested words are: [cat, cut]"
    assert out[1:] == ["  cat (dist=1, freq=2)", "  cut (dist=1, freq=2)"]


def test_cli_wordlist_writes_file(dictionary: Path, tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("dgo\ncats\n\n", encoding="utf-8")
    out = tmp_path / "out" / "suggestions.txt"
    main(["--dictionary", str(dictionary), "--wordlist", str(words), "--out", str(out)])
    assert out.read_text(encoding="utf-8").splitlines() == ["dgo -> dog", "cats -> cats"]
    assert "Wrote 2 suggestions" in capsys.readouterr().out


def test_cli_empty_dictionary_is_an_error(tmp_path: Path):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(empty), "--word", "cot"])
    assert exc.value.code == 2


def test_eval_spellcheck(dictionary: Path, tmp_path: Path):
    test_csv = tmp_path / "spell_test.csv"
    pd.DataFrame(
        {"misspelled": ["cot", "dgo", "cast"], "correct": ["cat", "dog", "cats"]}
    ).to_csv(test_csv, index=False)

    summary_path = tmp_path / "eval.json"
    samples_path = tmp_path / "samples.csv"
    summary = eval_spellcheck(
        test_csv=str(test_csv),
        dictionary_path=str(dictionary),
        out_summary=str(summary_path),
        out_samples=str(samples_path),
    )

    assert summary["total"] == 3
    assert summary["hit"] == pytest.approx(2 / 3)
    assert summary["exact@1"] == pytest.approx(1 / 3)
    assert summary["ambiguous"] == pytest.approx(1 / 3)
    assert json.loads(summary_path.read_text(encoding="utf-8"))["vocab_size"] == 4
    samples = pd.read_csv(samples_path, keep_default_na=False)
    assert samples["suggestions"].tolist() == ["cat|cut", "dog", "cat"]


def test_eval_requires_a_vocabulary_source(tmp_path: Path):
    with pytest.raises(ValueError):
        eval_spellcheck(test_csv=str(tmp_path / "x.csv"))


@pytest.mark.parametrize("flag", ["--dictionary", "--corpus_path"])
def test_cli_missing_vocabulary_file_is_an_error(tmp_path: Path, flag: str, capsys):
    with pytest.raises(SystemExit) as exc:
        main([flag, str(tmp_path / "missing"), "--word", "cot"])
    assert exc.value.code == 2
    assert "not found" in capsys.readouterr().err


def test_cli_missing_wordlist_is_an_error(dictionary: Path, tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(dictionary), "--wordlist", str(tmp_path / "missing.txt")])
    assert exc.value.code == 2


def test_eval_cli_reports_bad_inputs(dictionary: Path, tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        eval_main(["--dictionary", str(dictionary), "--test_csv", str(tmp_path / "missing.csv")])
    assert exc.value.code == 2

    test_csv = tmp_path / "spell_test.csv"
    pd.DataFrame({"misspelled": ["cot"], "correct": ["cat"]}).to_csv(test_csv, index=False)
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        eval_main(["--dictionary", str(empty), "--test_csv", str(test_csv)])
    assert exc.value.code == 2

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .spellcheck import build_corrector


def eval_spellcheck(
    test_csv: str,
    dictionary_path: str | None = None,
    corpus_path: str | None = None,
    out_summary: str = "outputs/spellcheck/spell_eval.json",
    out_samples: str = "outputs/spellcheck/sample_predictions.csv",
    min_freq: int = 1,
    min_len: int = 1,
) -> Dict[str, Any]:
    if not dictionary_path and not corpus_path:
        raise ValueError("Either dictionary_path or corpus_path is required.")

    df = pd.read_csv(test_csv, keep_default_na=False)
    missing = {"misspelled", "correct"} - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns {sorted(missing)}. Columns: {df.columns.tolist()}")

    corrector = build_corrector(
        dictionary=dictionary_path,
        corpus_path=corpus_path,
        min_freq=min_freq,
        min_len=min_len,
    )

    total = len(df)
    exact1 = 0
    hits = 0
    ambiguous = 0
    samples = []

    for _, row in df.iterrows():
        miss = str(row["misspelled"])
        correct = str(row["correct"])
        suggestions = corrector.suggest_similar_words(miss)
        if suggestions == [correct]:
            exact1 += 1
        if correct in suggestions:
            hits += 1
        if len(suggestions) > 1:
            ambiguous += 1
        samples.append(
            {
                "misspelled": miss,
                "correct": correct,
                "suggestions": "|".join(suggestions),
            }
        )

    summary = {
        "total": total,
        "exact@1": exact1 / total if total else 0.0,
        "hit": hits / total if total else 0.0,
        "ambiguous": ambiguous / total if total else 0.0,
        "vocab_size": len(corrector),
        "test_csv": test_csv,
        "dictionary_path": dictionary_path,
        "corpus_path": corpus_path,
    }

    out_sum_path = Path(out_summary)
    out_sum_path.parent.mkdir(parents=True, exist_ok=True)
    out_sum_path.write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding="utf-8")

    out_samp_path = Path(out_samples)
    out_samp_path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(samples, columns=["misspelled", "correct", "suggestions"]).to_csv(
        out_samp_path, index=False, encoding="utf-8"
    )

    print(f"exact@1={summary['exact@1']:.3f} hit={summary['hit']:.3f} ambiguous={summary['ambiguous']:.3f} (n={total})")
    print(f"Saved summary to {out_sum_path}")
    print(f"Saved sample predictions to {out_samp_path}")
    return summary


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(description="Evaluate suggestions on a CSV of (misspelled, correct) pairs.")
    ap.add_argument("--test_csv", type=str, default="data/processed/spell_test.csv")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--dictionary", type=str)
    source.add_argument("--corpus_path", type=str)
    ap.add_argument("--out_summary", type=str, default="outputs/spellcheck/spell_eval.json")
    ap.add_argument("--out_samples", type=str, default="outputs/spellcheck/sample_predictions.csv")
    ap.add_argument("--min_freq", type=int, default=1)
    ap.add_argument("--min_len", type=int, default=1)
    args = ap.parse_args(argv)

    try:
        eval_spellcheck(
            test_csv=args.test_csv,
            dictionary_path=args.dictionary,
            corpus_path=args.corpus_path,
            out_summary=args.out_summary,
            out_samples=args.out_samples,
            min_freq=args.min_freq,
            min_len=args.min_len,
        )
    except (OSError, ValueError) as e:
        ap.error(str(e))


if __name__ == "__main__":
    main()

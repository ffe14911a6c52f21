from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from .corrector import SpellCorrector
from .ranker import EmptyVocabulary, rank_candidates


def load_words_from_file(path: str) -> List[str]:
    return [w.strip() for w in Path(path).read_text(encoding="utf-8").splitlines() if w.strip()]


def format_suggestions(suggestions: List[str]) -> str:
    if not suggestions:
        return "no similar word found"
    if len(suggestions) == 1:
        return f"suggested word is: {suggestions[0]}"
    return f"suggested words are: [{', '.join(suggestions)}]"


def build_corrector(
    dictionary: str | None = None,
    corpus_path: str | None = None,
    min_freq: int = 1,
    min_len: int = 1,
) -> SpellCorrector:
    corrector = SpellCorrector()
    if dictionary:
        corrector.add_dictionary(dictionary)
    if corpus_path:
        corrector.add_corpus(corpus_path, min_freq=min_freq, min_len=min_len)
    return corrector


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(description="Suggest the closest, most frequent dictionary words for a misspelling.")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--dictionary", type=str, help="Plain-text dictionary, one entry per line.")
    source.add_argument("--corpus_path", type=str, help="CSV with 'text' column; token counts become the vocabulary.")
    ap.add_argument("--min_freq", type=int, default=1, help="Drop corpus tokens under this count.")
    ap.add_argument("--min_len", type=int, default=1, help="Drop corpus tokens shorter than this.")

    target = ap.add_mutually_exclusive_group(required=True)
    target.add_argument("--word", type=str, help="Single word to correct.")
    target.add_argument("--wordlist", type=str, help="File with one word per line to correct.")
    ap.add_argument("--show_ranking", type=int, default=0, help="Also print this many best candidates with distance/frequency.")
    ap.add_argument("--out", type=str, default="outputs/spellcheck/suggestions.txt", help="Where to write wordlist suggestions.")
    args = ap.parse_args(argv)

    try:
        corrector = build_corrector(
            dictionary=args.dictionary,
            corpus_path=args.corpus_path,
            min_freq=args.min_freq,
            min_len=args.min_len,
        )
        words = [args.word] if args.word is not None else load_words_from_file(args.wordlist)
    except (OSError, ValueError) as e:
        ap.error(str(e))
    if len(corrector) == 0:
        ap.error("the vocabulary source produced no words")

    try:
        if args.word is not None:
            print(format_suggestions(corrector.suggest_similar_words(args.word)))
            if args.show_ranking > 0:
                for cand in rank_candidates(corrector.vocabulary, args.word, top_k=args.show_ranking):
                    print(f"  {cand.word} (dist={cand.distance}, freq={cand.frequency})")
            return

        lines = []
        for w in words:
            suggestions = corrector.suggest_similar_words(w)
            lines.append(f"{w} -> {', '.join(suggestions) if suggestions else '(no candidates)'}")
    except EmptyVocabulary as e:
        ap.error(str(e))

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines), encoding="utf-8")
    print(f"Wrote {len(lines)} suggestions to {out_path}")


if __name__ == "__main__":
    main()

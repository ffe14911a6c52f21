from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Mapping, Optional

import pandas as pd
import regex as re

from .tokenize import iter_tokens, split_dictionary_line

WORD_CHARS_RE = re.compile(r"^[\p{L}'\-]+$", re.UNICODE)


def load_dictionary(path: str | Path, freqs: Optional[Mapping[str, int]] = None) -> Counter:
    """
    Read a plain-text dictionary into a word -> count table.

    A line holding a single entry counts one occurrence of it. Entries on a
    multi-word line are registered with their current count (0 when new) but
    not counted. Blank lines are ignored.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary not found: {path}")
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise OSError(f"Failed to read from the file at: {path}") from e

    out = Counter(freqs or {})
    for line in lines:
        if not line:
            continue
        if " " not in line:
            out[line] += 1
            continue
        for word in split_dictionary_line(line):
            out[word] = out.get(word, 0)
    return out


def load_corpus_csv(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus not found: {path}")
    df = pd.read_csv(path)
    if "text" not in df.columns:
        raise ValueError(f"'text' column not found. Columns: {df.columns.tolist()}")
    df["text"] = df["text"].fillna("").astype(str)
    return df


def load_freqs(corpus_path: str | Path, lowercase: bool = True) -> Counter:
    df = load_corpus_csv(corpus_path)
    return Counter(iter_tokens(df["text"].tolist(), lowercase=lowercase))


def filter_vocab(freqs: Mapping[str, int], min_freq: int = 1, min_len: int = 1) -> Counter:
    """
    Drop rare, too short, or non-letter tokens.
    """
    clean = Counter()
    for w, c in freqs.items():
        if len(w) < min_len:
            continue
        if c < min_freq:
            continue
        if not WORD_CHARS_RE.match(w):
            continue
        clean[w] = c
    return clean

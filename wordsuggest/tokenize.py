# wordsuggest/tokenize.py
from __future__ import annotations

import regex as re
from typing import Iterable, List

# Word pattern: letters with optional internal hyphen/apostrophe parts
WORD_RE = re.compile(r"\p{L}+(?:['\-]\p{L}+)*", re.UNICODE)

# Dictionary lines with several entries are separated by spaces and/or commas
ENTRY_SEP_RE = re.compile(r"[ ,]+")


def normalize_text(s: str) -> str:
    s = s.replace("\u00A0", " ")      # nbsp
    s = s.replace("\u2019", "'")      # right single quote
    s = s.replace("\u2018", "'")      # left single quote
    s = s.replace("\u2013", "-")      # en dash
    s = re.sub(r"\s+", " ", s).strip()
    return s


def split_dictionary_line(line: str) -> List[str]:
    """
    A line without a space is a single entry, kept verbatim.
    Otherwise the line is a list of entries separated by spaces/commas.
    """
    if " " not in line:
        return [line] if line else []
    return [w for w in ENTRY_SEP_RE.split(line) if w]


def tokenize(text: str, lowercase: bool = True) -> List[str]:
    text = normalize_text(text)
    if lowercase:
        text = text.lower()
    return [m.group(0) for m in WORD_RE.finditer(text)]


def iter_tokens(texts: Iterable[str], lowercase: bool = True) -> Iterable[str]:
    for t in texts:
        for tok in tokenize(t, lowercase=lowercase):
            yield tok

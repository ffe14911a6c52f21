from __future__ import annotations

from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional

from .dictionary import filter_vocab, load_dictionary, load_freqs
from .edit_distance import edit_distance
from .ranker import suggest


class SpellCorrector:
    """
    Owns a word -> frequency table and answers lookups against it.

    Loading never mutates the published table: a merged copy is built and
    then swapped in, so a lookup always sees one consistent snapshot.
    """

    def __init__(self, vocabulary: Optional[Mapping[str, int]] = None):
        self._vocab: Counter = Counter(vocabulary or {})

    @property
    def vocabulary(self) -> Mapping[str, int]:
        return MappingProxyType(self._vocab)

    def __len__(self) -> int:
        return len(self._vocab)

    def add_dictionary(self, path: str | Path) -> None:
        self._vocab = load_dictionary(path, freqs=self._vocab)

    def add_corpus(self, corpus_path: str | Path, min_freq: int = 1, min_len: int = 1) -> None:
        freqs = filter_vocab(load_freqs(corpus_path), min_freq=min_freq, min_len=min_len)
        merged = Counter(self._vocab)
        merged.update(freqs)
        self._vocab = merged

    def suggest_similar_words(self, word: Optional[str]) -> List[str]:
        return suggest(self.vocabulary, word)

    @staticmethod
    def edit_distance(a: str, b: str) -> int:
        return edit_distance(a, b)

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .edit_distance import UNREACHABLE, edit_distance


class EmptyVocabulary(ValueError):
    """Raised when suggestions are requested from a vocabulary with no words."""


@dataclass(frozen=True)
class Candidate:
    word: str
    frequency: int
    distance: int


def score_vocabulary(vocabulary: Mapping[str, int], query: str) -> List[Candidate]:
    """
    Distance of every vocabulary word to `query`, compared case-folded.
    Sorted by (distance, frequency, word), all ascending.
    """
    folded = query.lower()
    candidates = [
        Candidate(word=word, frequency=int(freq), distance=edit_distance(folded, word.lower()))
        for word, freq in vocabulary.items()
    ]
    candidates.sort(key=lambda c: (c.distance, c.frequency, c.word))
    return candidates


def group_candidates(candidates: List[Candidate]) -> Dict[int, Dict[int, List[str]]]:
    """
    distance -> frequency -> words, for candidates in any order.
    Keys and word lists come out ascending.
    """
    groups: Dict[int, Dict[int, List[str]]] = {}
    for c in candidates:
        groups.setdefault(c.distance, {}).setdefault(c.frequency, []).append(c.word)
    return {
        dist: {freq: sorted(groups[dist][freq]) for freq in sorted(groups[dist])}
        for dist in sorted(groups)
    }


def _check_vocabulary(vocabulary: Mapping[str, int]) -> None:
    if not vocabulary:
        raise EmptyVocabulary("Cannot rank suggestions: the vocabulary has no words.")


def suggest(vocabulary: Mapping[str, int], query: Optional[str]) -> List[str]:
    if query is None:
        return []

    # exact (case-sensitive) hit skips distance computation
    if query in vocabulary:
        return [query]

    _check_vocabulary(vocabulary)

    groups = group_candidates(score_vocabulary(vocabulary, query))
    min_dist = min(groups)
    if min_dist >= UNREACHABLE:
        raise AssertionError(f"no reachable candidate for {query!r}")

    by_freq = groups[min_dist]
    max_freq = max(by_freq)
    return sorted(by_freq[max_freq])


def rank_candidates(vocabulary: Mapping[str, int], query: str, top_k: int = 5) -> List[Candidate]:
    """
    Best-first listing: closest first, then most frequent, then alphabetical.
    The head of this list always contains suggest()'s answer for a non-exact query.
    """
    _check_vocabulary(vocabulary)
    candidates = score_vocabulary(vocabulary, query)
    candidates.sort(key=lambda c: (c.distance, -c.frequency, c.word))
    return candidates[:top_k]

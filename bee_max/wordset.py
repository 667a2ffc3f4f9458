"""
Sets of words from the word list, one bool per word index.
All candidate filtering is done with array algebra over the per-letter index; word strings are never inspected.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np

from .letters import LetterSet

if TYPE_CHECKING:
    from .index import WordIndex


class WordCandidateSet:
    """
    A mutable set of words with a cached size and total score.
    Every mutation drops the cached values; they are recomputed on the next query.
    """

    __slots__ = ("index", "bits", "_cardinality", "_score")

    def __init__(self, index: WordIndex, bits: np.ndarray | None = None) -> None:
        self.index = index
        self.bits = np.zeros(len(index), dtype=bool) if bits is None else bits
        self._cardinality: int | None = None
        self._score: int | None = None

    @classmethod
    def from_indices(cls, index: WordIndex, indices: Iterable[int]) -> WordCandidateSet:
        ws = cls(index)
        ws.bits[np.fromiter(indices, dtype=np.intp)] = True
        return ws

    def clone(self) -> WordCandidateSet:
        clone = WordCandidateSet(self.index, self.bits.copy())
        clone._cardinality = self._cardinality
        clone._score = self._score
        return clone

    def add(self, i: int) -> None:
        self.bits[i] = True
        self.modified()

    def intersect_with(self, other: WordCandidateSet) -> None:
        np.logical_and(self.bits, other.bits, out=self.bits)
        self.modified()

    def subtract(self, other: WordCandidateSet) -> None:
        # For bools, a > b is a and not b
        np.greater(self.bits, other.bits, out=self.bits)
        self.modified()

    def modified(self) -> None:
        self._cardinality = None
        self._score = None

    def cardinality(self) -> int:
        if self._cardinality is None:
            self._cardinality = int(np.count_nonzero(self.bits))
        return self._cardinality

    def is_empty(self) -> bool:
        return not self.bits.any()

    def score(self) -> int:
        if self._score is None:
            self._score = int(self.index.scores.sum(where=self.bits))
        return self._score

    def indices(self) -> list[int]:
        return np.flatnonzero(self.bits).tolist()

    def words(self) -> list[str]:
        return [self.index.word(i) for i in self.indices()]

    def __len__(self) -> int:
        return self.cardinality()

    def __repr__(self) -> str:
        return f"WordCandidateSet({self.cardinality()} words, score={self.score()})"


def words_containing_only(letter_set: LetterSet, index: WordIndex) -> WordCandidateSet:
    """
    Words whose letters all come from letter_set.
    Start with every word and remove the words containing each letter outside the set.
    """
    candidates = index.all_words()
    for c in letter_set.complement():
        candidates.subtract(index.words_containing(c))
        # Nothing left to remove from
        if candidates.is_empty():
            break
    return candidates

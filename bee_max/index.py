"""
Per-letter word index: for each of the 26 letters, which words contain it.
Built once from the filtered word list, read-only afterwards.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path

import numpy as np

from .letters import ALPHABET_SIZE, LetterSet, letter_ord
from .scoring import score
from .words import MAX_DISTINCT_LETTERS, load_words
from .wordset import WordCandidateSet


class WordIndex:
    """
    word_list[i] has score scores[i]; letter_bits[k, i] is True when word i contains letter k.
    Both arrays are frozen after construction.
    """

    def __init__(self, word_list: list[str]) -> None:
        # Words that could never fit a 7-letter puzzle are left out before indexing
        self.word_list: list[str] = [
            w for w in word_list if LetterSet.from_word(w).cardinality() <= MAX_DISTINCT_LETTERS
        ]
        n = len(self.word_list)
        self.scores = np.fromiter((score(w) for w in self.word_list), dtype=np.int64, count=n)
        self.letter_bits = np.zeros((ALPHABET_SIZE, n), dtype=bool)
        for i, word in enumerate(self.word_list):
            for c in set(word):
                self.letter_bits[letter_ord(c), i] = True
        self.scores.flags.writeable = False
        self.letter_bits.flags.writeable = False
        # One read-only view per letter, so cached scores survive between lookups
        self._containing = [WordCandidateSet(self, self.letter_bits[k]) for k in range(ALPHABET_SIZE)]
        logging.debug("Indexed %d of %d words", n, len(word_list))

    def __len__(self) -> int:
        return len(self.word_list)

    def word(self, i: int) -> str:
        return self.word_list[i]

    def score_of(self, i: int) -> int:
        return int(self.scores[i])

    def words_containing(self, c: str) -> WordCandidateSet:
        """The set of all words that contain c. Read-only: clone() it before mutating."""
        return self._containing[letter_ord(c)]

    def all_words(self) -> WordCandidateSet:
        """A new, mutable set holding every word in the list."""
        return WordCandidateSet(self, np.ones(len(self), dtype=bool))


def load_index(path: str | Path | None = None) -> WordIndex:
    """Read the word list (WORD_LIST or the system dictionary by default) and index it."""
    start = time.perf_counter()
    index = WordIndex(load_words(path))
    logging.info("Built index of %d words in %.2fs", len(index), time.perf_counter() - start)
    return index

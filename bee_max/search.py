"""
Search every pangram letter set, with each of its 7 letters as the required one, and keep four extremes:
  most words, highest score, fewest words, lowest score.
Optionally split the letter sets across worker processes and merge the partial results in order.
"""
from __future__ import annotations

import logging
import math
import os
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Callable, Sequence

from .index import WordIndex
from .letters import LetterSet, LetterSetPlusRequired
from .wordset import WordCandidateSet, words_containing_only

# Worker count when none is given: $BEE_MAX_WORKERS, else 1 (search in this process)
DEFAULT_WORKERS = 1
# More chunks than workers so a slow chunk doesn't hold up the pool
CHUNKS_PER_WORKER = 4

Comparator = Callable[[WordCandidateSet, WordCandidateSet], bool]


# ---------------------------------------------------------------------------
# Comparators: each returns True when `new` should replace `current`
# ---------------------------------------------------------------------------


def more_words(new: WordCandidateSet, current: WordCandidateSet) -> bool:
    return new.cardinality() > current.cardinality()


def higher_score(new: WordCandidateSet, current: WordCandidateSet) -> bool:
    return new.score() > current.score()


def fewer_words(new: WordCandidateSet, current: WordCandidateSet) -> bool:
    """Fewer words, or as many words but a lower score."""
    n, c = new.cardinality(), current.cardinality()
    return n < c or (n == c and new.score() < current.score())


def no_higher_score(new: WordCandidateSet, current: WordCandidateSet) -> bool:
    # Not strict: the last letter set to reach the minimum wins
    return new.score() <= current.score()


@dataclass
class Extremum:
    key: str
    label: str
    beats: Comparator
    words: WordCandidateSet
    letters: LetterSetPlusRequired | None = None

    def offer(self, letters: LetterSetPlusRequired, words: WordCandidateSet) -> bool:
        if not self.beats(words, self.words):
            return False
        logging.debug(
            "%s: %s with %d words scoring %d replaces %s",
            self.key, letters, words.cardinality(), words.score(), self.letters,
        )
        self.letters = letters
        self.words = words
        return True


@dataclass
class SearchResult:
    most_words: Extremum
    highest_score: Extremum
    fewest_words: Extremum
    lowest_score: Extremum
    letter_sets_searched: int = 0

    @classmethod
    def start(cls, index: WordIndex) -> SearchResult:
        """Most/highest start from no words at all; fewest/lowest from the whole word list."""
        return cls(
            most_words=Extremum("most_words", "Best", more_words, WordCandidateSet(index)),
            highest_score=Extremum("highest_score", "Highest-scoring", higher_score, WordCandidateSet(index)),
            fewest_words=Extremum("fewest_words", "Worst", fewer_words, index.all_words()),
            lowest_score=Extremum("lowest_score", "Lowest-scoring", no_higher_score, index.all_words()),
        )

    def extrema(self) -> list[Extremum]:
        return [self.most_words, self.highest_score, self.fewest_words, self.lowest_score]

    def offer(self, letters: LetterSetPlusRequired, words: WordCandidateSet) -> None:
        for extremum in self.extrema():
            extremum.offer(letters, words)

    def merge(self, later: SearchResult) -> None:
        """Fold in the result of searching letter sets that come after ours in enumeration order."""
        for mine, theirs in zip(self.extrema(), later.extrema()):
            if theirs.letters is not None:
                mine.offer(theirs.letters, theirs.words)
        self.letter_sets_searched += later.letter_sets_searched


def evaluate(index: WordIndex, letters: LetterSetPlusRequired) -> WordCandidateSet:
    """The words playable in one puzzle."""
    words = words_containing_only(letters.letter_set, index)
    words.intersect_with(index.words_containing(letters.required))
    return words


def search_letter_sets(index: WordIndex, letter_sets: Sequence[LetterSet]) -> SearchResult:
    result = SearchResult.start(index)
    for letter_set in letter_sets:
        candidates = words_containing_only(letter_set, index)
        for required in letter_set:
            with_required = candidates.clone()
            with_required.intersect_with(index.words_containing(required))
            result.offer(LetterSetPlusRequired(letter_set, required), with_required)
        result.letter_sets_searched += 1
    return result


# ---------------------------------------------------------------------------
# Worker processes
# ---------------------------------------------------------------------------

_WORKER_INDEX: WordIndex | None = None


def _init_worker(word_list: list[str]) -> None:
    global _WORKER_INDEX
    _WORKER_INDEX = WordIndex(word_list)


def _search_chunk(letter_bits: list[int]) -> tuple[list, int]:
    """
    Runs in a worker. Each extremum comes back as (letter bits, required letter, word indices),
    or None if never set, so results don't drag a copy of the index back.
    """
    if _WORKER_INDEX is None:
        raise RuntimeError("Worker index not built; _search_chunk must run in a pool started by search()")
    result = search_letter_sets(_WORKER_INDEX, [LetterSet(bits) for bits in letter_bits])
    packed = [
        None if e.letters is None else (e.letters.letter_set.bits, e.letters.required, e.words.indices())
        for e in result.extrema()
    ]
    return packed, result.letter_sets_searched


def _unpack(index: WordIndex, packed: list, searched: int) -> SearchResult:
    result = SearchResult.start(index)
    for extremum, p in zip(result.extrema(), packed):
        if p is None:
            continue
        bits, required, indices = p
        extremum.letters = LetterSetPlusRequired(LetterSet(bits), required)
        extremum.words = WordCandidateSet.from_indices(index, indices)
    result.letter_sets_searched = searched
    return result


def _chunks(letter_sets: Sequence[LetterSet], n: int) -> list[list[int]]:
    """Split into n contiguous runs, keeping enumeration order."""
    size = max(1, math.ceil(len(letter_sets) / n))
    return [[ls.bits for ls in letter_sets[i:i + size]] for i in range(0, len(letter_sets), size)]


def default_workers() -> int:
    """$BEE_MAX_WORKERS if it is a whole number, else DEFAULT_WORKERS."""
    value = os.environ.get("BEE_MAX_WORKERS", "").strip()
    if not value:
        return DEFAULT_WORKERS
    try:
        return int(value)
    except ValueError:
        logging.warning("Ignoring BEE_MAX_WORKERS=%r: not a number, using %d", value, DEFAULT_WORKERS)
        return DEFAULT_WORKERS


def resolve_workers(workers: int | None) -> int:
    """None = default_workers(); 0 or less = one per CPU."""
    if workers is None:
        workers = default_workers()
    if workers <= 0:
        return os.cpu_count() or 1
    return workers


def search(index: WordIndex, letter_sets: Sequence[LetterSet], *, workers: int | None = 1) -> SearchResult:
    """
    Find the four extreme puzzles among letter_sets.
    With workers > 1 the letter sets are split into contiguous chunks searched in parallel;
    merging the chunk results in order gives exactly the sequential answer, ties included.
    """
    workers = resolve_workers(workers)
    start = time.perf_counter()
    if workers == 1 or len(letter_sets) < 2:
        result = search_letter_sets(index, letter_sets)
    else:
        chunks = _chunks(letter_sets, workers * CHUNKS_PER_WORKER)
        logging.info("Searching %d letter sets in %d chunks on %d workers", len(letter_sets), len(chunks), workers)
        result = SearchResult.start(index)
        with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker, initargs=(index.word_list,)) as executor:
            # map() yields in submission order, so merging stays deterministic
            for packed, searched in executor.map(_search_chunk, chunks):
                result.merge(_unpack(index, packed, searched))
    logging.info("Searched %d letter sets in %.2fs", result.letter_sets_searched, time.perf_counter() - start)
    return result

"""
Spelling Bee word scores:
  4-letter word = 1 point, longer word = its length, pangram = length + 7.
"""
from __future__ import annotations

from .letters import LetterSet, PUZZLE_SIZE

PANGRAM_BONUS = 7


def is_pangram(word: str) -> bool:
    """True if the word uses exactly 7 distinct letters, whatever letter set it came from."""
    # Length check first: it is cheaper than building the letter set
    return len(word) >= PUZZLE_SIZE and LetterSet.from_word(word).cardinality() == PUZZLE_SIZE


def score(word: str) -> int:
    if len(word) == 4:
        return 1
    if is_pangram(word):
        return len(word) + PANGRAM_BONUS
    return len(word)

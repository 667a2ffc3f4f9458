"""
Candidate puzzles: every set of 7 letters that some pangram in the word list uses.
Every puzzle has at least one pangram, so these are the only letter sets worth searching.
That is about 10,000 sets for a typical dictionary, instead of all C(26, 7) = 657,800.
"""
from __future__ import annotations

from typing import Iterable

from .letters import LetterSet, PUZZLE_SIZE


def follows_house_rules(letter_set: LetterSet) -> bool:
    """Published puzzles never use S, and never use both E and R."""
    return not letter_set.contains("s") and not (letter_set.contains("e") and letter_set.contains("r"))


def pangram_letter_sets(words: Iterable[str]) -> list[LetterSet]:
    """Distinct letter sets of the pangrams in words, in first-seen order."""
    seen: dict[LetterSet, None] = {}
    for w in words:
        letter_set = LetterSet.from_word(w)
        if letter_set.cardinality() != PUZZLE_SIZE:
            continue
        if follows_house_rules(letter_set):
            seen.setdefault(letter_set, None)
    return list(seen)

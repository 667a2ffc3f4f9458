"""
Human-readable and JSON renderings of search results.
"""
from __future__ import annotations

from typing import Any

from .scoring import is_pangram
from .search import Extremum, SearchResult
from .wordset import WordCandidateSet


def word_count(n: int) -> str:
    """Just so we avoid saying "1 words"."""
    return f"{n} word" if n == 1 else f"{n} words"


def format_word(word: str, score: int) -> str:
    """word(score), with a trailing * for a pangram."""
    return f"{word}({score})" + ("*" if is_pangram(word) else "")


def format_words(words: WordCandidateSet) -> str:
    index = words.index
    return ", ".join(format_word(index.word(i), index.score_of(i)) for i in words.indices())


def extremum_lines(extremum: Extremum) -> list[str]:
    if extremum.letters is None:
        return [f"{extremum.label} letter set is None"]
    words = extremum.words
    return [
        f"{extremum.label} letter set is {extremum.letters}, "
        f"which has {word_count(words.cardinality())} scoring {words.score()} in total",
        f"Words for that set: {format_words(words)}",
    ]


def summary_lines(result: SearchResult) -> list[str]:
    lines: list[str] = []
    for extremum in result.extrema():
        lines.extend(extremum_lines(extremum))
    return lines


def words_payload(words: WordCandidateSet) -> dict[str, Any]:
    index = words.index
    return {
        "word_count": words.cardinality(),
        "score": words.score(),
        "words": [
            {"word": index.word(i), "score": index.score_of(i), "pangram": is_pangram(index.word(i))}
            for i in words.indices()
        ],
    }


def extremum_payload(extremum: Extremum) -> dict[str, Any]:
    letters = extremum.letters
    if letters is None:
        # Nothing searched; the starting word set isn't a real puzzle
        return {"label": extremum.label, "puzzle": None, "letters": None, "required": None,
                "word_count": 0, "score": 0, "words": []}
    return {
        "label": extremum.label,
        "puzzle": str(letters),
        "letters": str(letters.letter_set),
        "required": letters.required.upper(),
        **words_payload(extremum.words),
    }


def result_payload(result: SearchResult) -> dict[str, Any]:
    return {
        "letter_sets_searched": result.letter_sets_searched,
        **{e.key: extremum_payload(e) for e in result.extrema()},
    }

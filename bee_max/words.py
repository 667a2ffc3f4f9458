"""
Load and filter the word list the search runs over.
Uses system dict (e.g. /usr/share/dict/words) or env WORD_LIST path.
"""
from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterable

from .letters import LetterSet, PUZZLE_SIZE

# Default: system word list on macOS/Unix
DEFAULT_WORD_LIST = Path("/usr/share/dict/words")
# Four or more lowercase letters: no proper nouns, hyphens, apostrophes or short words
ALLOWED = re.compile(r"^[a-z]{4,}$")
# A word with more distinct letters can never be spelled from one puzzle
MAX_DISTINCT_LETTERS = PUZZLE_SIZE


def get_word_list_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path)
    p = os.environ.get("WORD_LIST")
    if p:
        return Path(p)
    if DEFAULT_WORD_LIST.exists():
        return DEFAULT_WORD_LIST
    raise FileNotFoundError(
        "No word list found. Set WORD_LIST to a path or install system dict (e.g. /usr/share/dict/words)."
    )


def is_allowed(word: str) -> bool:
    return bool(ALLOWED.match(word)) and LetterSet.from_word(word).cardinality() <= MAX_DISTINCT_LETTERS


def read_words(lines: Iterable[str]) -> list[str]:
    """Filter raw dictionary lines down to probable Spelling Bee words, keeping file order."""
    words: list[str] = []
    seen: set[str] = set()
    for line in lines:
        w = line.strip()
        if not w or w in seen:
            continue
        if is_allowed(w):
            words.append(w)
            seen.add(w)
    return words


def load_words(path: str | Path | None = None) -> list[str]:
    p = get_word_list_path(path)
    if not p.exists():
        raise FileNotFoundError(f"Word list not found at {p}")
    # Undecodable bytes become U+FFFD, which ALLOWED rejects, so the whole line is dropped
    with open(p, "r", encoding="utf-8", errors="replace") as f:
        words = read_words(f)
    logging.info("Loaded %d words from %s", len(words), p)
    return words

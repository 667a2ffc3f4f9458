"""
Localhost API for the letter-set search.
Run: uvicorn bee_max.app:app --reload --host 0.0.0.0
Then open http://localhost:8000/api/results (the first request runs the full search).
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path

# Load .env if present (for WORD_LIST / BEE_MAX_WORKERS) before the modules that read them
from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from fastapi import FastAPI
from pydantic import BaseModel

from .index import WordIndex, load_index
from .letters import InvalidConfiguration, LetterSet, LetterSetPlusRequired
from .pangrams import pangram_letter_sets
from .report import result_payload, words_payload
from .search import evaluate, search

app = FastAPI(title="Bee Max")

# In-memory only: index, pangram letter sets and search result live as long as the process
_STATE: dict[str, object] = {}
# Handlers run in a thread pool; only one of them fills each entry. Reentrant: _results() fills the index too
_STATE_LOCK = threading.RLock()


def _index() -> WordIndex:
    with _STATE_LOCK:
        if "index" not in _STATE:
            _STATE["index"] = load_index()
    return _STATE["index"]  # type: ignore[return-value]


def _letter_sets() -> list[LetterSet]:
    with _STATE_LOCK:
        if "letter_sets" not in _STATE:
            _STATE["letter_sets"] = pangram_letter_sets(_index().word_list)
    return _STATE["letter_sets"]  # type: ignore[return-value]


def _results() -> dict:
    with _STATE_LOCK:
        if "results" not in _STATE:
            result = search(_index(), _letter_sets(), workers=None)
            _STATE["results"] = result_payload(result)
    return _STATE["results"]  # type: ignore[return-value]


@app.get("/api/health")
def api_health():
    """Word list size and how many letter sets have a pangram."""
    try:
        index = _index()
    except FileNotFoundError as e:
        return {"ok": False, "error": str(e)}
    return {"ok": True, "word_count": len(index), "pangram_letter_sets": len(_letter_sets())}


@app.get("/api/results")
def api_results():
    """The four extreme puzzles: most words, highest score, fewest words, lowest score."""
    try:
        results = _results()
    except FileNotFoundError as e:
        return {"ok": False, "error": str(e)}
    return {"ok": True, **results}


class PuzzleRequest(BaseModel):
    letters: str = ""
    required: str = ""


@app.post("/api/puzzle")
def api_puzzle(body: PuzzleRequest):
    """Score one puzzle, e.g. {"letters": "ABCDEFG", "required": "A"}."""
    try:
        puzzle = LetterSetPlusRequired.parse(body.letters, body.required)
    except InvalidConfiguration as e:
        return {"ok": False, "error": str(e)}
    try:
        index = _index()
    except FileNotFoundError as e:
        return {"ok": False, "error": str(e)}
    words = evaluate(index, puzzle)
    logging.info("Scored %s: %d words", puzzle, words.cardinality())
    return {"ok": True, "puzzle": str(puzzle), **words_payload(words)}

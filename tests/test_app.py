import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from bee_max import app as app_module
from bee_max.index import WordIndex


@pytest.fixture
def client(words):
    app_module._STATE.clear()
    app_module._STATE["index"] = WordIndex(words)
    yield TestClient(app_module.app)
    app_module._STATE.clear()


def test_health(client):
    body = client.get("/api/health").json()
    assert body == {"ok": True, "word_count": 6, "pangram_letter_sets": 2}


def test_results(client):
    body = client.get("/api/results").json()
    assert body["ok"] is True
    assert body["most_words"]["puzzle"] == "[E]ABCDFG"
    assert body["highest_score"]["score"] == 23
    assert body["fewest_words"]["puzzle"] == "[L]HIJKMN"
    assert body["lowest_score"]["puzzle"] == "[N]HIJKLM"
    # Computed once per process
    assert client.get("/api/results").json() == body


def test_puzzle(client):
    body = client.post("/api/puzzle", json={"letters": "abcdefg", "required": "a"}).json()
    assert body["ok"] is True
    assert body["puzzle"] == "[A]BCDEFG"
    assert [w["word"] for w in body["words"]] == ["abcdefg", "face", "cabbage"]
    assert body["score"] == 22


def test_bad_puzzle(client):
    body = client.post("/api/puzzle", json={"letters": "abc", "required": "a"}).json()
    assert body["ok"] is False
    assert "7" in body["error"]


def test_missing_word_list(monkeypatch, tmp_path):
    app_module._STATE.clear()
    monkeypatch.setenv("WORD_LIST", str(tmp_path / "missing"))
    body = TestClient(app_module.app).get("/api/health").json()
    assert body["ok"] is False
    app_module._STATE.clear()


def test_concurrent_first_requests_search_once(client, monkeypatch):
    calls = []
    real_search = app_module.search

    def slow_search(*args, **kwargs):
        calls.append(1)
        time.sleep(0.05)
        return real_search(*args, **kwargs)

    monkeypatch.setattr(app_module, "search", slow_search)
    with ThreadPoolExecutor(max_workers=4) as pool:
        bodies = list(pool.map(lambda _: app_module._results(), range(4)))
    assert len(calls) == 1
    assert all(b["most_words"]["puzzle"] == "[E]ABCDFG" for b in bodies)

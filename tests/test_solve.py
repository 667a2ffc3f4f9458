import pytest

from bee_max.solve import main


@pytest.fixture
def dictionary(tmp_path, words):
    path = tmp_path / "words"
    path.write_text("\n".join(["Proper", "ab"] + words) + "\n")
    return str(path)


def test_full_search(dictionary, capsys):
    assert main(["--dictionary", dictionary]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "word list size 6"
    assert out[1] == "2 sets of letters allow at least one pangram"
    assert "Best letter set is [E]ABCDFG, which has 4 words scoring 23 in total" in out
    assert "Highest-scoring letter set is [E]ABCDFG, which has 4 words scoring 23 in total" in out
    assert out[-1].startswith("Elapsed time ")


def test_single_puzzle(dictionary, capsys):
    assert main(["--dictionary", dictionary, "--letters", "ABCDEFG", "--required", "A"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "[A]BCDEFG has 3 words scoring 22 in total"
    assert out[2] == "Words for that set: abcdefg(14)*, face(1), cabbage(7)"


def test_missing_dictionary(tmp_path, capsys):
    assert main(["--dictionary", str(tmp_path / "nope")]) == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.parametrize(
    "args",
    [["--letters", "ABCDEFG"], ["--letters", "ABCDEFG", "--required", "Z"], ["--letters", "ABC", "--required", "A"]],
)
def test_bad_puzzle_is_a_usage_error(dictionary, args):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", dictionary] + args)
    assert exc.value.code == 2


def test_bad_workers_env_still_runs(dictionary, monkeypatch, capsys):
    monkeypatch.setenv("BEE_MAX_WORKERS", "four")
    assert main(["--dictionary", dictionary]) == 0
    assert "Best letter set is [E]ABCDFG, which has 4 words scoring 23 in total" in capsys.readouterr().out

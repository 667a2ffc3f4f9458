import pytest

from bee_max.index import WordIndex, load_index
from bee_max.letters import LetterSet


def test_scores_are_precomputed(index):
    assert [index.score_of(i) for i in range(len(index))] == [14, 1, 1, 7, 14, 1]


def test_words_with_more_than_seven_letters_are_not_indexed():
    index = WordIndex(["abcdefgh", "face", "abcdefg"])
    assert index.word_list == ["face", "abcdefg"]
    assert len(index.all_words()) == 2


def test_words_containing(index):
    assert index.words_containing("e").words() == ["abcdefg", "face", "feed", "cabbage"]
    assert index.words_containing("h").words() == ["hijklmn", "hijk"]
    assert index.words_containing("z").is_empty()


def test_words_containing_is_read_only(index):
    with pytest.raises(ValueError):
        index.words_containing("a").add(2)
    copy = index.words_containing("a").clone()
    copy.add(2)
    assert "feed" in copy.words()
    assert "feed" not in index.words_containing("a").words()


def test_all_words_is_a_fresh_set(index):
    everything = index.all_words()
    everything.subtract(index.words_containing("a"))
    assert len(everything) == 3
    assert len(index.all_words()) == 6


def test_load_index(tmp_path):
    path = tmp_path / "words"
    path.write_text("Face\nface\nfeed\nab\nabcdefgh\nabcdefg\n")
    index = load_index(path)
    assert index.word_list == ["face", "feed", "abcdefg"]
    assert index.words_containing("g").words() == ["abcdefg"]
    assert LetterSet.from_word(index.word(2)).cardinality() == 7

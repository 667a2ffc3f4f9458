from bee_max.letters import LetterSet
from bee_max.pangrams import follows_house_rules, pangram_letter_sets


def test_only_seven_letter_sets_are_kept():
    sets = pangram_letter_sets(["face", "cabbage", "abcdefg", "hijklmn", "abcdefgh"])
    assert sets == [LetterSet.from_word("abcdefg"), LetterSet.from_word("hijklmn")]


def test_duplicates_keep_first_seen_order():
    sets = pangram_letter_sets(["hijklmn", "abcdefg", "gfedcba", "nmlkjih", "abcdefga"])
    assert sets == [LetterSet.from_word("hijklmn"), LetterSet.from_word("abcdefg")]


def test_house_rules():
    assert not follows_house_rules(LetterSet.from_word("abcdefs"))
    assert not follows_house_rules(LetterSet.from_word("abcdefr"))
    assert follows_house_rules(LetterSet.from_word("abcdefg"))
    assert follows_house_rules(LetterSet.from_word("abcdfgr"))


def test_enumerated_sets_follow_house_rules():
    words = ["abcdefs", "abcderf", "abcdefg", "abcdgrx", "mnopqrs"]
    sets = pangram_letter_sets(words)
    assert sets == [LetterSet.from_word("abcdefg"), LetterSet.from_word("abcdgrx")]
    for s in sets:
        assert s.cardinality() == 7
        assert not s.contains("s")
        assert not (s.contains("e") and s.contains("r"))

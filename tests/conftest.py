import pytest

from bee_max.index import WordIndex

# Two pangram letter sets: ABCDEFG and HIJKLMN
WORDS = ["abcdefg", "face", "feed", "cabbage", "hijklmn", "hijk"]


@pytest.fixture
def words() -> list[str]:
    return list(WORDS)


@pytest.fixture
def index(words) -> WordIndex:
    return WordIndex(words)

"""
Letter sets as 26-bit masks.
Bit i is set when letter chr(ord('a') + i) is a member; one letter may be marked as required.
"""
from __future__ import annotations

from typing import Iterator

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)
ALL_LETTERS_MASK = (1 << ALPHABET_SIZE) - 1
PUZZLE_SIZE = 7


class InvalidConfiguration(ValueError):
    """Letters that cannot form a puzzle: non A-Z input, or a required letter outside the set."""


def letter_ord(c: str) -> int:
    """'a' -> 0 ... 'z' -> 25. Lowercase ASCII only."""
    return ord(c) - ord("a")


def letter_chr(i: int) -> str:
    return chr(i + ord("a"))


class LetterSet:
    """An immutable set of letters."""

    __slots__ = ("bits",)

    def __init__(self, bits: int = 0) -> None:
        self.bits = bits & ALL_LETTERS_MASK

    @classmethod
    def from_word(cls, word: str) -> LetterSet:
        bits = 0
        for c in word:
            bits |= 1 << letter_ord(c)
        return cls(bits)

    @classmethod
    def from_letters(cls, letters: str) -> LetterSet:
        """Like from_word, but for user input: either case, surrounding spaces allowed, A-Z only."""
        text = letters.strip().lower()
        if not text.isalpha() or not text.isascii():
            raise InvalidConfiguration(f"Letters must be A-Z only: {letters!r}")
        return cls.from_word(text)

    def complement(self) -> LetterSet:
        return LetterSet(~self.bits & ALL_LETTERS_MASK)

    def minus(self, c: str) -> LetterSet:
        return LetterSet(self.bits & ~(1 << letter_ord(c)))

    def contains(self, c: str) -> bool:
        return bool(self.bits & (1 << letter_ord(c)))

    def cardinality(self) -> int:
        return self.bits.bit_count()

    def __contains__(self, c: str) -> bool:
        return self.contains(c)

    def __len__(self) -> int:
        return self.cardinality()

    def __iter__(self) -> Iterator[str]:
        # Lowest set bit first, so letters come out in alphabetical order
        bits = self.bits
        while bits:
            lsb = bits & -bits
            bits ^= lsb
            yield letter_chr(lsb.bit_length() - 1)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LetterSet) and other.bits == self.bits

    def __hash__(self) -> int:
        return self.bits

    def __str__(self) -> str:
        return "".join(c.upper() for c in self)

    def __repr__(self) -> str:
        return f"LetterSet({str(self)!r})"


class LetterSetPlusRequired:
    """An immutable set of letters, one of which is required in every word."""

    __slots__ = ("letter_set", "required")

    def __init__(self, letter_set: LetterSet, required: str) -> None:
        if len(required) != 1 or not required.islower() or not letter_set.contains(required):
            raise InvalidConfiguration(f"{letter_set} does not contain {required!r}")
        self.letter_set = letter_set
        self.required = required

    @classmethod
    def parse(cls, letters: str, required: str) -> LetterSetPlusRequired:
        """Build from user input such as ("ABCDEFG", "A"). Requires exactly 7 distinct letters."""
        letter_set = LetterSet.from_letters(letters)
        if letter_set.cardinality() != PUZZLE_SIZE or len(letters.strip()) != PUZZLE_SIZE:
            raise InvalidConfiguration(f"Need exactly {PUZZLE_SIZE} distinct letters: {letters!r}")
        return cls(letter_set, required.strip().lower())

    def others(self) -> LetterSet:
        return self.letter_set.minus(self.required)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, LetterSetPlusRequired)
            and other.letter_set == self.letter_set
            and other.required == self.required
        )

    def __hash__(self) -> int:
        return hash((self.letter_set.bits, self.required))

    def __str__(self) -> str:
        return f"[{self.required.upper()}]{self.others()}"

    def __repr__(self) -> str:
        return f"LetterSetPlusRequired({str(self)!r})"

"""Character classes used by BBAN structure elements."""

from enum import Enum
from string import ascii_uppercase, digits

_DIGITS = frozenset(digits)
_UPPER = frozenset(ascii_uppercase)
_ALNUM = _DIGITS | _UPPER

# Characters allowed in a normalized IBAN
IBAN_ALPHABET: frozenset[str] = _ALNUM


class CharClass(str, Enum):
    """Character class of a structure element, keyed by its grammar letter."""

    DIGIT = "n"
    UPPER = "a"
    ALNUM = "c"
    SPACE = "e"

    @classmethod
    def from_letter(cls, letter: str) -> "CharClass":
        return cls(letter)


def matches(char_class: CharClass, char: str) -> bool:
    """Check whether a single character belongs to the class (ASCII only)."""
    if char_class is CharClass.DIGIT:
        return char in _DIGITS
    if char_class is CharClass.UPPER:
        return char in _UPPER
    if char_class is CharClass.ALNUM:
        return char in _ALNUM
    return char == " "


def matches_all(char_class: CharClass, text: str) -> bool:
    return all(matches(char_class, c) for c in text)

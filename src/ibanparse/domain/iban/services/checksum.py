"""Character check and ISO 7064 mod97-10 checksum."""

from __future__ import annotations

from ibanparse.domain.iban.exceptions import (
    InvalidCharactersError,
    WrongChecksumError,
)
from ibanparse.domain.iban.value_objects.char_class import IBAN_ALPHABET

MODULUS = 97


def validate_characters(text: str) -> str:
    """Return ``text`` unchanged if it only contains A-Z and 0-9."""
    if any(char not in IBAN_ALPHABET for char in text):
        raise InvalidCharactersError
    return text


def mod97_10(text: str) -> int:
    """Calculate the reordered decimal number mod 97 using Horner's rule.

    The first 4 characters are moved to the end, then every digit
    contributes one decimal digit and every letter two (A=10 ... Z=35).
    Lower case letters count as their upper case counterpart, even though
    most validators reject them.

    Raises ValueError for any other character; callers validate characters
    first.
    """
    reordered = text[4:] + text[:4]
    remainder = 0
    for char in reordered:
        if "a" <= char <= "z":
            char = char.upper()
        if "A" <= char <= "Z":
            remainder = (remainder * 100 + 10 + ord(char) - ord("A")) % MODULUS
        elif "0" <= char <= "9":
            remainder = (remainder * 10 + int(char)) % MODULUS
        else:
            msg = f"mod97_10: invalid character {char!r}"
            raise ValueError(msg)
    return remainder


def validate_checksum(text: str) -> str:
    """Return ``text`` unchanged if its mod97-10 checksum is 1."""
    checksum = mod97_10(text)
    if checksum != 1:
        raise WrongChecksumError(checksum=checksum)
    return text


def compute_check_digits(country: str, bban: str) -> str:
    """Compute the two check digits for a country code and a BBAN.

    >>> compute_check_digits("GB", "WEST12345698765432")
    '82'
    """
    remainder = mod97_10(f"{country}00{bban}")
    return f"{MODULUS + 1 - remainder:02d}"

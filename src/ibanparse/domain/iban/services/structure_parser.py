"""Structural parsing of normalized IBANs.

Two algorithms over the same StructElement type:

- ``parse_structure`` is the validation path. Every element, strict or not,
  consumes exactly ``length`` characters of its class, and the input must
  end right after the last element.
- ``check_structure`` is a loose check. A non-strict element may match a
  shorter prefix and hands its unmatched characters on to the next element.
"""

from __future__ import annotations

from ibanparse.domain.iban.exceptions import InvalidStructureError
from ibanparse.domain.iban.value_objects.char_class import matches, matches_all
from ibanparse.domain.iban.value_objects.country_code import (
    CountryCode,
    lookup_country,
)
from ibanparse.domain.iban.value_objects.struct_element import (
    CHECK_DIGITS_ELEMENT,
    COUNTRY_CODE_ELEMENT,
    BBANStructure,
    StructElement,
)
from ibanparse.domain.iban.value_objects.validated_iban import ValidatedIBAN


class _Cursor:
    """Consumes a string element by element."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def take(self, element: StructElement) -> str:
        segment = self.text[self.pos : self.pos + element.length]
        if len(segment) != element.length:
            msg = (
                f"Expected {element.length} characters at position {self.pos}, "
                f"got {len(segment)}"
            )
            raise InvalidStructureError(msg, details={"position": self.pos})
        if not matches_all(element.char_class, segment):
            msg = f"Segment {segment!r} at position {self.pos} does not match {element}"
            raise InvalidStructureError(msg, details={"position": self.pos})
        self.pos += element.length
        return segment

    def expect_end(self) -> None:
        if self.pos != len(self.text):
            msg = f"Unexpected characters after position {self.pos}"
            raise InvalidStructureError(msg, details={"position": self.pos})


def parse_structure(structure: BBANStructure, text: str) -> ValidatedIBAN:
    """Parse a normalized IBAN against the BBAN structure of its country.

    Consumes the country code, the check digits, and then each BBAN element.

    Raises
    ------
    InvalidStructureError
        On a shortfall, a segment of the wrong class, or trailing characters.
    """
    cursor = _Cursor(text)
    country: CountryCode | None = lookup_country(cursor.take(COUNTRY_CODE_ELEMENT))
    if country is None:
        msg = f"Unknown country code {text[:2]!r}"
        raise InvalidStructureError(msg)
    check_digits = int(cursor.take(CHECK_DIGITS_ELEMENT))
    bban = tuple(cursor.take(element) for element in structure)
    cursor.expect_end()

    return ValidatedIBAN(country_code=country, check_digits=check_digits, bban=bban)


def check_structure(structure: BBANStructure, text: str) -> bool:
    """Loosely check text against a structure.

    Strict elements must match exactly ``length`` characters. A non-strict
    element matches the longest prefix (up to ``length``) of its class; the
    rest of its segment is put back in front of the remaining input, where
    the following elements (strict or not) consume it like any other input.

    Returns True if no strict element failed and nothing is left over.
    """
    remaining = text
    for element in structure:
        segment, rest = remaining[: element.length], remaining[element.length :]
        matched = 0
        while matched < len(segment) and matches(element.char_class, segment[matched]):
            matched += 1
        leftover = segment[matched:]

        if element.strict:
            if leftover or len(segment) != element.length:
                return False
            remaining = rest
        else:
            remaining = leftover + rest

    return remaining == ""

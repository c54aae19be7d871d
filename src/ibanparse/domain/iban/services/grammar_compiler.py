"""Compiler for per-country BBAN grammar strings.

A grammar is a country code followed by tokens in SWIFT registry notation::

    GB4!a6!n8!n   ->  GB, (4!a, 6!n, 8!n)

Each token is a decimal length, an optional ``!`` marking a strict (fixed
length) element, and one class letter out of ``n a c e``.
"""

from __future__ import annotations

from ibanparse.domain.iban.exceptions import StructureGrammarError
from ibanparse.domain.iban.value_objects.char_class import CharClass
from ibanparse.domain.iban.value_objects.country_code import (
    CountryCode,
    lookup_country,
)
from ibanparse.domain.iban.value_objects.struct_element import (
    BBANStructure,
    StructElement,
)

_CLASS_LETTERS = frozenset(member.value for member in CharClass)


def compile_structure(grammar: str) -> tuple[CountryCode, BBANStructure]:
    """Compile a grammar string into its country code and BBAN structure.

    Raises
    ------
    StructureGrammarError
        If the country code is unknown or the token sequence is malformed.
    """
    country = lookup_country(grammar[:2])
    if country is None:
        raise StructureGrammarError(grammar, f"unknown country code {grammar[:2]!r}")

    length = 0
    strict = False
    elements: list[StructElement] = []

    for char in grammar[2:]:
        if char == "!":
            if strict:
                raise StructureGrammarError(grammar, "unexpected '!'")
            strict = True
        elif "0" <= char <= "9":
            if strict:
                msg = f"unexpected digit {char!r} after '!'"
                raise StructureGrammarError(grammar, msg)
            length = length * 10 + int(char)
        elif char in _CLASS_LETTERS:
            if length == 0:
                raise StructureGrammarError(grammar, f"missing length before {char!r}")
            elements.append(
                StructElement(
                    char_class=CharClass.from_letter(char),
                    length=length,
                    strict=strict,
                )
            )
            length = 0
            strict = False
        else:
            raise StructureGrammarError(grammar, f"unexpected {char!r}")

    if length != 0 or strict:
        raise StructureGrammarError(grammar, "incomplete trailing token")

    return country, tuple(elements)

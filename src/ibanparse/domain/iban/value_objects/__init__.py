"""Value objects for the IBAN domain."""

from ibanparse.domain.iban.value_objects.char_class import (
    IBAN_ALPHABET,
    CharClass,
    matches,
)
from ibanparse.domain.iban.value_objects.country_code import (
    CountryCode,
    lookup_country,
)
from ibanparse.domain.iban.value_objects.struct_element import (
    CHECK_DIGITS_ELEMENT,
    COUNTRY_CODE_ELEMENT,
    BBANStructure,
    StructElement,
    format_structure,
    structure_length,
)
from ibanparse.domain.iban.value_objects.validated_iban import ValidatedIBAN

__all__ = [
    "BBANStructure",
    "CHECK_DIGITS_ELEMENT",
    "COUNTRY_CODE_ELEMENT",
    "CharClass",
    "CountryCode",
    "IBAN_ALPHABET",
    "StructElement",
    "ValidatedIBAN",
    "format_structure",
    "lookup_country",
    "matches",
    "structure_length",
]

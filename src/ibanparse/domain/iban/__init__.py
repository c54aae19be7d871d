"""IBAN domain: structure grammar, checksum, validation pipeline, IBAN value."""

from ibanparse.domain.iban.exceptions import (
    IBANError,
    IBANInvariantError,
    InvalidCharactersError,
    InvalidCountryError,
    InvalidStructureError,
    StructureGrammarError,
    StructureLookupError,
    WrongChecksumError,
)
from ibanparse.domain.iban.iban import IBAN, country, parse_iban, pretty, to_raw

__all__ = [
    # Value
    "IBAN",
    "country",
    "parse_iban",
    "pretty",
    "to_raw",
    # Validation errors
    "IBANError",
    "InvalidCharactersError",
    "InvalidCountryError",
    "InvalidStructureError",
    "StructureLookupError",
    "WrongChecksumError",
    # Internal faults
    "IBANInvariantError",
    "StructureGrammarError",
]

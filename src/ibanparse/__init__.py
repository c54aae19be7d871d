"""IBAN parsing and validation.

    >>> from ibanparse import parse_iban
    >>> iban = parse_iban("GB82 WEST 1234 5698 7654 32")
    >>> iban.country.value
    'GB'
"""

from ibanparse.domain.iban import (
    IBAN,
    IBANError,
    IBANInvariantError,
    InvalidCharactersError,
    InvalidCountryError,
    InvalidStructureError,
    StructureGrammarError,
    StructureLookupError,
    WrongChecksumError,
    country,
    parse_iban,
    pretty,
    to_raw,
)
from ibanparse.domain.iban.services import (
    check_structure,
    compile_structure,
    compute_check_digits,
    iban_error,
    is_valid_iban,
    mod97_10,
    supported_countries,
    validate_iban,
)
from ibanparse.domain.iban.value_objects import (
    CharClass,
    CountryCode,
    StructElement,
    ValidatedIBAN,
)
from ibanparse.domain.shared import DomainException, ErrorCode
from ibanparse.startup import bootstrap

__version__ = "0.1.0"

__all__ = [
    "IBAN",
    "CharClass",
    "CountryCode",
    "DomainException",
    "ErrorCode",
    "IBANError",
    "IBANInvariantError",
    "InvalidCharactersError",
    "InvalidCountryError",
    "InvalidStructureError",
    "StructElement",
    "StructureGrammarError",
    "StructureLookupError",
    "ValidatedIBAN",
    "WrongChecksumError",
    "bootstrap",
    "check_structure",
    "compile_structure",
    "compute_check_digits",
    "country",
    "iban_error",
    "is_valid_iban",
    "mod97_10",
    "parse_iban",
    "pretty",
    "supported_countries",
    "to_raw",
    "validate_iban",
]

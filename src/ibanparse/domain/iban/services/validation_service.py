"""IBAN validation pipeline.

Steps, each short-circuiting on failure:

1. remove spaces
2. character check          -> InvalidCharactersError
3. mod97-10 checksum        -> WrongChecksumError
4. country lookup           -> InvalidCountryError
5. structure lookup         -> StructureLookupError
6. structural parse         -> InvalidStructureError
"""

from __future__ import annotations

import logging

from ibanparse.domain.iban.exceptions import (
    IBANError,
    InvalidCountryError,
    StructureLookupError,
)
from ibanparse.domain.iban.services.checksum import (
    validate_characters,
    validate_checksum,
)
from ibanparse.domain.iban.services.structure_parser import parse_structure
from ibanparse.domain.iban.services.structure_registry import find_structure
from ibanparse.domain.iban.value_objects.country_code import lookup_country
from ibanparse.domain.iban.value_objects.validated_iban import ValidatedIBAN

logger = logging.getLogger(__name__)


def normalize(text: str) -> str:
    """Remove all space characters. Other whitespace is kept."""
    return text.replace(" ", "")


def validate_iban(text: str) -> ValidatedIBAN:
    """Run the full validation pipeline on raw input.

    Raises
    ------
    IBANError
        The first failing step, as one of its subclasses.
    """
    try:
        return _validate(text)
    except IBANError as e:
        logger.debug("IBAN rejected: %s", e.code.value)
        raise


def _validate(text: str) -> ValidatedIBAN:
    normalized = validate_checksum(validate_characters(normalize(text)))

    prefix = normalized[:2]
    country = lookup_country(prefix)
    if country is None:
        raise InvalidCountryError(prefix)

    structure = find_structure(country)
    if structure is None:
        raise StructureLookupError(country.value)

    return parse_structure(structure, normalized)


def iban_error(text: str) -> IBANError | None:
    """Return the error ``validate_iban`` would raise, or None if valid."""
    try:
        validate_iban(text)
    except IBANError as e:
        return e
    return None


def is_valid_iban(text: str) -> bool:
    return iban_error(text) is None

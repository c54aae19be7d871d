"""IBAN domain services."""

from ibanparse.domain.iban.services.checksum import (
    compute_check_digits,
    mod97_10,
    validate_characters,
    validate_checksum,
)
from ibanparse.domain.iban.services.grammar_compiler import compile_structure
from ibanparse.domain.iban.services.structure_registry import (
    clear_registry_cache,
    country_name,
    find_structure,
    get_country_structures,
    iban_length,
    supported_countries,
)
from ibanparse.domain.iban.services.structure_parser import (
    check_structure,
    parse_structure,
)
from ibanparse.domain.iban.services.validation_service import (
    iban_error,
    is_valid_iban,
    normalize,
    validate_iban,
)

__all__ = [
    "check_structure",
    "clear_registry_cache",
    "compile_structure",
    "compute_check_digits",
    "country_name",
    "find_structure",
    "get_country_structures",
    "iban_error",
    "iban_length",
    "is_valid_iban",
    "mod97_10",
    "normalize",
    "parse_structure",
    "supported_countries",
    "validate_characters",
    "validate_checksum",
    "validate_iban",
]

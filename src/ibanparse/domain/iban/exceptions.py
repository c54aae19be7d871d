"""IBAN domain exceptions.

Validation failures are raised as subclasses of IBANError, one per step of
the validation pipeline. The pipeline checks characters, then the checksum,
then the country, then the structure, and raises the first failure only.

Internal faults (a malformed grammar table, a broken invariant on an IBAN
that was already validated) derive from DomainException directly, never from
IBANError, so that ``except IBANError`` cannot swallow them.
"""

from ibanparse.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

# =============================================================================
# Validation Exceptions
# =============================================================================


class IBANError(ValidationError):
    """Base exception for IBAN validation failures."""

    def __init__(
        self,
        message: str = "Invalid IBAN",
        code: ErrorCode = ErrorCode.INVALID_IBAN,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidCharactersError(IBANError):
    """Raised when the IBAN contains characters other than A-Z and 0-9."""

    def __init__(
        self,
        message: str = "IBAN contains invalid characters",
    ) -> None:
        super().__init__(message=message, code=ErrorCode.INVALID_CHARACTERS)


class WrongChecksumError(IBANError):
    """Raised when the mod97-10 checksum of the IBAN is not 1."""

    def __init__(
        self,
        checksum: int | None = None,
        message: str = "IBAN checksum does not match",
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.WRONG_CHECKSUM,
            details={"checksum": checksum} if checksum is not None else None,
        )
        self.checksum = checksum


class InvalidCountryError(IBANError):
    """Raised when the 2-character prefix is not a known country code.

    Carries the offending prefix in ``country``.
    """

    def __init__(self, country: str) -> None:
        super().__init__(
            message=f"Invalid IBAN country code '{country}'",
            code=ErrorCode.INVALID_COUNTRY,
            details={"country": country},
        )
        self.country = country


class InvalidStructureError(IBANError):
    """Raised when the IBAN does not match the structure of its country.

    Covers wrong length, a segment of the wrong character class, leftover
    characters, and shortfall.
    """

    def __init__(
        self,
        message: str = "IBAN does not match the structure of its country",
        details: dict | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_STRUCTURE,
            details=details,
        )


class StructureLookupError(InvalidStructureError):
    """Raised when a known country has no registered BBAN structure.

    This happens for valid ISO 3166 countries that do not issue IBANs.
    Handled like any other structure error.
    """

    def __init__(self, country: str) -> None:
        super().__init__(
            message=f"No IBAN structure registered for country '{country}'",
            details={"country": country},
        )
        self.country = country


# =============================================================================
# Internal Faults
# =============================================================================


class StructureGrammarError(DomainException):
    """Raised when a BBAN grammar string in the static table is malformed.

    Indicates a bad table, not bad user input. Aborts registry construction.
    """

    def __init__(self, grammar: str, reason: str) -> None:
        super().__init__(
            message=f"Malformed IBAN structure grammar {grammar!r}: {reason}",
            code=ErrorCode.INTERNAL_ERROR,
            details={"grammar": grammar, "reason": reason},
        )
        self.grammar = grammar
        self.reason = reason


class IBANInvariantError(DomainException):
    """Raised when an already validated IBAN turns out to be inconsistent."""

    def __init__(self, iban: str, reason: str) -> None:
        super().__init__(
            message=f"IBAN internal inconsistency for {iban!r}: {reason}",
            code=ErrorCode.INTERNAL_ERROR,
            details={"iban": iban, "reason": reason},
        )

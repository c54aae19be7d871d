"""Tests for the exception hierarchy."""

import pytest

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
from ibanparse.domain.shared import DomainException, ErrorCode, ValidationError


class TestDomainException:
    """Test cases for DomainException."""

    def test_defaults(self):
        """Test the default code and details."""
        error = DomainException("Something broke")

        assert error.message == "Something broke"
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}
        assert str(error) == "Something broke"

    def test_repr(self):
        """Test the repr includes message, code and details."""
        error = DomainException("Bad", ErrorCode.VALIDATION_ERROR, {"field": "x"})

        assert repr(error) == (
            "DomainException(message='Bad', code='VALIDATION_ERROR', "
            "details={'field': 'x'})"
        )

    def test_validation_error_code(self):
        """Test the default code of ValidationError."""
        assert ValidationError("Bad").code == ErrorCode.VALIDATION_ERROR

    def test_error_codes_are_strings(self):
        """Test that error codes compare equal to their names."""
        assert ErrorCode.WRONG_CHECKSUM == "WRONG_CHECKSUM"


class TestIBANExceptions:
    """Test cases for the IBAN exception hierarchy."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (InvalidCharactersError(), ErrorCode.INVALID_CHARACTERS),
            (WrongChecksumError(checksum=5), ErrorCode.WRONG_CHECKSUM),
            (InvalidCountryError("ZZ"), ErrorCode.INVALID_COUNTRY),
            (InvalidStructureError(), ErrorCode.INVALID_STRUCTURE),
            (StructureLookupError("US"), ErrorCode.INVALID_STRUCTURE),
        ],
    )
    def test_validation_failures_are_iban_errors(self, error, code):
        """Test that every pipeline failure is an IBANError with its code."""
        assert isinstance(error, IBANError)
        assert isinstance(error, ValidationError)
        assert error.code == code

    def test_wrong_checksum_without_value(self):
        """Test that the checksum detail is optional."""
        error = WrongChecksumError()

        assert error.checksum is None
        assert error.details == {}

    def test_invalid_country_message(self):
        """Test that the offending prefix is reported."""
        error = InvalidCountryError("ZZ")

        assert error.country == "ZZ"
        assert error.details == {"country": "ZZ"}
        assert "'ZZ'" in str(error)

    def test_structure_lookup_is_structure_error(self):
        """Test that a missing structure is handled as a structure error."""
        error = StructureLookupError("US")

        assert isinstance(error, InvalidStructureError)
        assert error.country == "US"
        assert "'US'" in str(error)

    @pytest.mark.parametrize(
        "error",
        [
            StructureGrammarError("GB4!x", "unexpected 'x'"),
            IBANInvariantError("ZZ00", "country code not recognized"),
        ],
    )
    def test_internal_faults_are_not_iban_errors(self, error):
        """Test that internal faults cannot be caught as IBANError."""
        assert isinstance(error, DomainException)
        assert not isinstance(error, IBANError)
        assert error.code == ErrorCode.INTERNAL_ERROR

    def test_grammar_error_details(self):
        """Test the attributes of StructureGrammarError."""
        error = StructureGrammarError("GB4!x", "unexpected 'x'")

        assert error.grammar == "GB4!x"
        assert error.reason == "unexpected 'x'"
        assert str(error) == "Malformed IBAN structure grammar 'GB4!x': unexpected 'x'"

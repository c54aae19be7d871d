"""Tests for the structural parser and the loose structure check."""

import pytest

from ibanparse.domain.iban.exceptions import InvalidStructureError
from ibanparse.domain.iban.services import (
    check_structure,
    compile_structure,
    parse_structure,
)
from ibanparse.domain.iban.value_objects import (
    CharClass,
    CountryCode,
    StructElement,
)
from ibanparse.domain.shared import ErrorCode
from tests.shared.fixtures.ibans import GB_IBAN


def _element(char_class: CharClass, length: int, strict: bool) -> StructElement:
    return StructElement(char_class=char_class, length=length, strict=strict)


@pytest.fixture
def gb_structure():
    _, structure = compile_structure("GB4!a6!n8!n")
    return structure


class TestParseStructure:
    """Test cases for parse_structure (the validation path)."""

    def test_parses_segments(self, gb_structure):
        """Test that a valid IBAN is split into its segments."""
        validated = parse_structure(gb_structure, GB_IBAN)

        assert validated.country_code is CountryCode.GB
        assert validated.check_digits == 82
        assert validated.bban == ("WEST", "123456", "98765432")
        assert validated.to_string() == GB_IBAN

    def test_shortfall(self, gb_structure):
        """Test that a missing character is a structure error."""
        with pytest.raises(InvalidStructureError, match="Expected 8 characters"):
            parse_structure(gb_structure, GB_IBAN[:-1])

    def test_trailing_characters(self, gb_structure):
        """Test that input after the last element is a structure error."""
        with pytest.raises(
            InvalidStructureError, match="Unexpected characters"
        ) as exc_info:
            parse_structure(gb_structure, GB_IBAN + "1")

        assert exc_info.value.details == {"position": 22}

    def test_wrong_segment_class(self, gb_structure):
        """Test that a digit in a letters-only segment fails."""
        with pytest.raises(InvalidStructureError, match="does not match 4!a"):
            parse_structure(gb_structure, "GB82WES112345698765432")

    def test_check_digits_must_be_digits(self, gb_structure):
        """Test that the check digit segment only accepts digits."""
        with pytest.raises(InvalidStructureError):
            parse_structure(gb_structure, "GBA2WEST12345698765432")

    def test_country_must_be_upper_case(self, gb_structure):
        """Test that the country segment only accepts upper case letters."""
        with pytest.raises(InvalidStructureError):
            parse_structure(gb_structure, "gb82WEST12345698765432")

    def test_unknown_country(self, gb_structure):
        """Test that an unknown country prefix fails the structure."""
        with pytest.raises(InvalidStructureError, match="Unknown country code"):
            parse_structure(gb_structure, "ZZ82WEST12345698765432")

    def test_non_strict_elements_are_parsed_exactly(self):
        """Test that non-strict elements still need their full length."""
        structure = (_element(CharClass.DIGIT, 4, strict=False),)

        assert parse_structure(structure, "DE001234").bban == ("1234",)
        with pytest.raises(InvalidStructureError):
            parse_structure(structure, "DE0012")

    def test_space_element(self):
        """Test that a space element consumes exactly one space."""
        structure = (
            _element(CharClass.DIGIT, 2, strict=True),
            _element(CharClass.SPACE, 1, strict=True),
            _element(CharClass.DIGIT, 2, strict=True),
        )

        assert parse_structure(structure, "DE0012 34").bban == ("12", " ", "34")

    def test_error_code(self, gb_structure):
        """Test the error code of structure errors."""
        with pytest.raises(InvalidStructureError) as exc_info:
            parse_structure(gb_structure, "GB82")

        assert exc_info.value.code == ErrorCode.INVALID_STRUCTURE


class TestCheckStructure:
    """Test cases for the loose check_structure utility."""

    def test_exact_match(self, gb_structure):
        """Test that a BBAN matching every strict element passes."""
        assert check_structure(gb_structure, "WEST12345698765432") is True

    def test_strict_class_mismatch(self, gb_structure):
        """Test that a strict element with a wrong character fails."""
        assert check_structure(gb_structure, "WES112345698765432") is False

    def test_strict_shortfall(self, gb_structure):
        """Test that a strict element with too few characters fails."""
        assert check_structure(gb_structure, "WEST1234569876543") is False

    def test_leftover(self, gb_structure):
        """Test that characters after the last element fail."""
        assert check_structure(gb_structure, "WEST123456987654321") is False

    def test_empty(self):
        """Test that an empty structure accepts only empty input."""
        assert check_structure((), "") is True
        assert check_structure((), "1") is False

    def test_non_strict_shorter_prefix(self):
        """Test that a non-strict element may match fewer characters."""
        structure = (_element(CharClass.DIGIT, 4, strict=False),)

        assert check_structure(structure, "12") is True
        assert check_structure(structure, "1234") is True

    def test_non_strict_without_any_match(self):
        """Test that unmatched input of a lone non-strict element is leftover."""
        structure = (_element(CharClass.DIGIT, 2, strict=False),)

        assert check_structure(structure, "AB") is False

    def test_leftover_carried_into_strict_element(self):
        """Test that carried characters can satisfy a following strict element."""
        structure = (
            _element(CharClass.DIGIT, 4, strict=False),
            _element(CharClass.UPPER, 2, strict=True),
        )

        assert check_structure(structure, "12AB") is True

    def test_leftover_failing_strict_element(self):
        """Test that carried characters are checked by a strict element."""
        structure = (
            _element(CharClass.DIGIT, 4, strict=False),
            _element(CharClass.DIGIT, 2, strict=True),
        )

        assert check_structure(structure, "12AB") is False

    def test_leftover_carried_into_non_strict_element(self):
        """Test that carried characters flow into a following non-strict element."""
        structure = (
            _element(CharClass.DIGIT, 3, strict=False),
            _element(CharClass.UPPER, 3, strict=False),
        )

        assert check_structure(structure, "1ABC") is True

    def test_loose_check_differs_from_parser(self):
        """Test that input accepted loosely can still fail the parser."""
        structure = (_element(CharClass.DIGIT, 4, strict=False),)

        assert check_structure(structure, "12") is True
        with pytest.raises(InvalidStructureError):
            parse_structure(structure, "DE0012")

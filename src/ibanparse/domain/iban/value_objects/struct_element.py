"""Structure element value object."""

from pydantic import BaseModel, ConfigDict, Field

from ibanparse.domain.iban.value_objects.char_class import CharClass


class StructElement(BaseModel):
    """One segment of an IBAN: character class, fixed length, strictness.

    A strict element (``!`` in the grammar) must be matched by exactly
    ``length`` characters of its class. A non-strict element only matters to
    the loose structure check, which lets it match a shorter prefix.
    """

    char_class: CharClass
    length: int = Field(..., gt=0)
    strict: bool = False

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        marker = "!" if self.strict else ""
        return f"{self.length}{marker}{self.char_class.value}"


BBANStructure = tuple[StructElement, ...]

COUNTRY_CODE_ELEMENT = StructElement(char_class=CharClass.UPPER, length=2, strict=True)
CHECK_DIGITS_ELEMENT = StructElement(char_class=CharClass.DIGIT, length=2, strict=True)


def structure_length(structure: BBANStructure) -> int:
    """Total number of characters consumed by a structure."""
    return sum(element.length for element in structure)


def format_structure(structure: BBANStructure) -> str:
    """Render a structure back into grammar notation, e.g. ``4!a6!n8!n``."""
    return "".join(str(element) for element in structure)

"""Validated IBAN value object."""

from pydantic import BaseModel, ConfigDict, Field

from ibanparse.domain.iban.value_objects.country_code import CountryCode


class ValidatedIBAN(BaseModel):
    """Result of a successful structural parse.

    Concatenating the country code, the zero padded check digits and the
    BBAN segments reproduces the normalized IBAN.
    """

    country_code: CountryCode
    check_digits: int = Field(..., ge=0, le=99)
    bban: tuple[str, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def bban_text(self) -> str:
        return "".join(self.bban)

    def to_string(self) -> str:
        return f"{self.country_code.value}{self.check_digits:02d}{self.bban_text}"

    def __str__(self) -> str:
        return self.to_string()

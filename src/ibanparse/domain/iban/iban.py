"""IBAN value object.

An IBAN can only be constructed through the validation pipeline, so every
instance holds a normalized (space free, upper case) and fully valid IBAN::

    >>> iban = IBAN("GB82 WEST 1234 5698 7654 32")
    >>> iban.raw
    'GB82WEST12345698765432'
    >>> iban.pretty()
    'GB82 WEST 1234 5698 7654 32'

Serialization goes through ``to_raw``/``pretty`` and ``from_string``, or
pydantic's ``model_dump``/``model_validate``, which re-run the pipeline.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ibanparse.domain.iban.exceptions import IBANInvariantError
from ibanparse.domain.iban.services.structure_registry import (
    country_name,
    find_structure,
)
from ibanparse.domain.iban.services.structure_parser import parse_structure
from ibanparse.domain.iban.services.validation_service import validate_iban
from ibanparse.domain.iban.value_objects.country_code import (
    CountryCode,
    lookup_country,
)
from ibanparse.domain.iban.value_objects.validated_iban import ValidatedIBAN

GROUP_SIZE = 4


class IBAN(BaseModel):
    """Value object representing a validated IBAN."""

    raw: str

    model_config = ConfigDict(frozen=True)

    # overriding pydantic init to allow positional arguments IBAN("DE89...")
    def __init__(self, raw: str | None = None, **data: Any):
        if "raw" not in data:
            data["raw"] = raw
        super().__init__(**data)

    @field_validator("raw", mode="before")
    @classmethod
    def validate_and_normalize(cls, v: Any) -> str:
        if not isinstance(v, str):
            msg = "IBAN must be a string"
            raise ValueError(msg)
        return validate_iban(v).to_string()

    @classmethod
    def from_string(cls, text: str) -> IBAN:
        return cls(text)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> IBAN:
        """Copy the IBAN. A replacement ``raw`` goes through the pipeline again."""
        if update and "raw" in update:
            return type(self)(update["raw"])
        return super().model_copy(update=update, deep=deep)

    @property
    def country(self) -> CountryCode:
        """Country of the IBAN, read from its first two characters."""
        code = lookup_country(self.raw[:2])
        if code is None:
            raise IBANInvariantError(self.raw, "country code not recognized")
        return code

    @property
    def country_name(self) -> str | None:
        return country_name(self.country)

    @property
    def check_digits(self) -> str:
        return self.raw[2:4]

    @property
    def bban(self) -> str:
        return self.raw[4:]

    def validated(self) -> ValidatedIBAN:
        """Re-derive the parsed segments of this IBAN."""
        structure = find_structure(self.country)
        if structure is None:
            raise IBANInvariantError(self.raw, "no structure registered")
        return parse_structure(structure, self.raw)

    def pretty(self) -> str:
        """Format in space separated blocks of four characters."""
        return " ".join(
            self.raw[i : i + GROUP_SIZE] for i in range(0, len(self.raw), GROUP_SIZE)
        )

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"IBAN({self.pretty()!r})"


def parse_iban(text: str) -> IBAN:
    """Validate text and return it as an IBAN.

    Raises an IBANError subclass describing the first failed check.
    """
    return IBAN(text)


def country(iban: IBAN) -> CountryCode:
    return iban.country


def pretty(iban: IBAN) -> str:
    return iban.pretty()


def to_raw(iban: IBAN) -> str:
    return iban.raw

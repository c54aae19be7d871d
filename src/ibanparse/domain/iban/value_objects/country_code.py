"""Country code enumeration.

One member per ISO 3166-1 alpha-2 code, e.g. ``CountryCode.DE``. The value
of each member is the code itself, so ``CountryCode("DE") is CountryCode.DE``.
"""

from enum import Enum

from ibanparse.data.countries import ISO3166_ALPHA2

CountryCode = Enum(  # type: ignore[misc]
    "CountryCode",
    [(code, code) for code in sorted(ISO3166_ALPHA2)],
    type=str,
    module=__name__,
)
CountryCode.__doc__ = "ISO 3166-1 alpha-2 country code."


def lookup_country(text: str) -> "CountryCode | None":
    """Return the country for an exact 2-character code, or None."""
    if len(text) != 2:
        return None
    try:
        return CountryCode(text)
    except ValueError:
        return None

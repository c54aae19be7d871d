"""Static lookup data: ISO 3166 country codes and the IBAN structure table."""

from ibanparse.data.countries import ISO3166_ALPHA2
from ibanparse.data.structures import IBAN_STRUCTURES, CountryStructure

__all__ = [
    "IBAN_STRUCTURES",
    "ISO3166_ALPHA2",
    "CountryStructure",
]

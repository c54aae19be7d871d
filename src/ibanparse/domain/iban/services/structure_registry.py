"""Read-only registry of compiled BBAN structures.

Built once from the static structure table on first use and cached for the
lifetime of the process. A malformed table entry aborts construction.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from ibanparse.data.structures import IBAN_STRUCTURES, CountryStructure
from ibanparse.domain.iban.exceptions import StructureGrammarError
from ibanparse.domain.iban.services.grammar_compiler import compile_structure
from ibanparse.domain.iban.value_objects.country_code import CountryCode
from ibanparse.domain.iban.value_objects.struct_element import BBANStructure

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_country_structures() -> Mapping[CountryCode, BBANStructure]:
    """Return the mapping of country code to compiled BBAN structure."""
    structures: dict[CountryCode, BBANStructure] = {}
    for entry in IBAN_STRUCTURES:
        try:
            country, structure = compile_structure(entry.grammar)
        except StructureGrammarError:
            logger.error("Invalid IBAN structure table entry for %s", entry.code)
            raise
        structures[country] = structure

    logger.debug("Compiled IBAN structures for %d countries", len(structures))
    return MappingProxyType(structures)


@lru_cache(maxsize=1)
def _country_entries() -> Mapping[CountryCode, CountryStructure]:
    return MappingProxyType({CountryCode(e.code): e for e in IBAN_STRUCTURES})


def find_structure(country: CountryCode) -> BBANStructure | None:
    """Return the BBAN structure of a country, or None if it has no IBAN."""
    return get_country_structures().get(country)


def supported_countries() -> tuple[CountryCode, ...]:
    """All countries with a registered IBAN structure, sorted by code."""
    return tuple(sorted(get_country_structures(), key=lambda c: c.value))


def country_name(country: CountryCode) -> str | None:
    entry = _country_entries().get(country)
    return entry.name if entry else None


def iban_length(country: CountryCode) -> int | None:
    """Total IBAN length of a country as declared in the structure table."""
    entry = _country_entries().get(country)
    return entry.length if entry else None


def clear_registry_cache() -> None:
    """Drop the compiled registry (useful for tests)."""
    get_country_structures.cache_clear()
    _country_entries.cache_clear()

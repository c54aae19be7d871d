"""Root pytest configuration.

Test Structure:
    tests/
    ├── ibanparse/             # Library tests
    │   └── unit/              # Fast, isolated tests
    └── shared/                # Shared fixtures and sample data
"""

import pytest

from ibanparse.domain.iban.services import clear_registry_cache
from ibanparse_config import clear_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings derived from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def fresh_registry():
    """Rebuild the structure registry before and after the test."""
    clear_registry_cache()
    yield
    clear_registry_cache()

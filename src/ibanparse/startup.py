"""Process startup for applications embedding ibanparse.

Calling ``bootstrap()`` is optional. It configures logging from the settings
and, unless disabled, compiles the structure registry right away so that a
malformed structure table fails at startup instead of on the first parse.
"""

import logging
import sys

from ibanparse.domain.iban.services.structure_registry import get_country_structures
from ibanparse_config.settings import get_settings

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging.

    - Console output with timestamps and module names
    - Configurable log level for ibanparse modules (from settings)
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=settings.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("ibanparse").setLevel(log_level)


def bootstrap(*, configure_logging: bool = True) -> None:
    """Prepare the library for use in a process.

    Logging is reconfigured from the current settings on every call, so a call
    after ``clear_settings_cache()`` picks up a changed log level.
    """
    if configure_logging:
        _configure_logging()

    if get_settings().preload_registry:
        structures = get_country_structures()
        logger.info("IBAN structure registry ready (%d countries)", len(structures))

"""Configuration, constants and logging setup."""

import logging
from typing import Optional

from formhandler.config.settings import (
    LOG_LEVEL,
    VERBOSE,
    DEFAULT_FORMATTER,
    EMAIL_CHECK_DOMAIN,
)
from formhandler.config.constants import (
    ERROR_SEPARATOR,
    BANK_NUMBER_LENGTH,
    POSTBANK_MIN_LENGTH,
    POSTBANK_MAX_LENGTH,
    UPLOAD_ERR_OK,
    DEFAULT_ERROR_MESSAGE,
    EMAIL_ERROR_MESSAGE,
    BANK_NUMBER_ERROR_MESSAGE,
    NUMBER_ERROR_MESSAGE,
    STRING_ERROR_MESSAGE,
)


def configure_logging(level: Optional[str] = None):
    """Configure root logging for applications embedding formhandler."""
    level = level or ("DEBUG" if VERBOSE else LOG_LEVEL)
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


__all__ = [
    # Settings
    "LOG_LEVEL",
    "VERBOSE",
    "DEFAULT_FORMATTER",
    "EMAIL_CHECK_DOMAIN",
    # Constants
    "ERROR_SEPARATOR",
    "BANK_NUMBER_LENGTH",
    "POSTBANK_MIN_LENGTH",
    "POSTBANK_MAX_LENGTH",
    "UPLOAD_ERR_OK",
    "DEFAULT_ERROR_MESSAGE",
    "EMAIL_ERROR_MESSAGE",
    "BANK_NUMBER_ERROR_MESSAGE",
    "NUMBER_ERROR_MESSAGE",
    "STRING_ERROR_MESSAGE",
    # Logging
    "configure_logging",
]

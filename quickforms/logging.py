"""
Logging for quickforms.

Everything logs through the "quickforms" logger. Factories log widget
construction and dialogs log state transitions at DEBUG; rejected
configuration is logged at WARNING. The logger starts at WARNING unless
QUICKFORMS_DEBUG is set to a true value.
"""

import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger("quickforms")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

DEBUG_ENV_VAR = "QUICKFORMS_DEBUG"
_TRUE_VALUES = ("1", "true", "yes", "on")


def debug_from_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether QUICKFORMS_DEBUG asks for debug output."""
    environ = os.environ if environ is None else environ
    return environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUE_VALUES


def configure_logging(
    level: Optional[int] = None,
    format_str: Optional[str] = None,
    date_format: Optional[str] = None,
) -> logging.Logger:
    """
    Give the quickforms logger a single stderr handler.

    Args:
        level: Logging level. None picks DEBUG when QUICKFORMS_DEBUG is set,
            WARNING otherwise
        format_str: Record format, defaults to LOG_FORMAT
        date_format: Timestamp format, defaults to LOG_DATE_FORMAT

    Returns:
        The configured logger
    """
    if level is None:
        level = logging.DEBUG if debug_from_env() else logging.WARNING

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(format_str or LOG_FORMAT, datefmt=date_format or LOG_DATE_FORMAT)
    )

    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def set_debug_enabled(enabled: bool):
    """Switch between DEBUG and WARNING without touching the handler."""
    logger.setLevel(logging.DEBUG if enabled else logging.WARNING)


def is_debug_enabled() -> bool:
    return logger.isEnabledFor(logging.DEBUG)


configure_logging()

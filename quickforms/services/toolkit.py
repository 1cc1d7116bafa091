"""
ToolkitService - One-time Qt application initialization.

Qt needs exactly one QApplication per process before any widget can be
built. The factories call ``ensure_application()`` lazily on first use;
repeated calls return the same instance.
"""

import sys
from typing import Optional

from ..errors import ToolkitUnavailable
from ..logging import logger

_application = None
_initialized = False


def ensure_application(argv: Optional[list] = None):
    """
    Return the process-wide QApplication, creating it on first call.

    Args:
        argv: Arguments for the QApplication constructor (first call only)

    Returns:
        The QApplication instance

    Raises:
        ToolkitUnavailable: If PyQt5 cannot be imported or the application
            cannot be created (e.g. no display available)
    """
    global _application, _initialized

    if _initialized and _application is not None:
        return _application

    try:
        from PyQt5.QtWidgets import QApplication
    except ImportError as e:
        logger.error(f"PyQt5 is not available: {e}")
        raise ToolkitUnavailable(f"PyQt5 is not available: {e}") from e

    app = QApplication.instance()
    if app is None:
        try:
            app = QApplication(list(argv) if argv is not None else sys.argv[:1])
        except Exception as e:
            logger.error(f"Failed to initialize Qt application: {e}", exc_info=True)
            raise ToolkitUnavailable(f"Failed to initialize Qt application: {e}") from e
        logger.debug("Created QApplication")
    else:
        logger.debug("Reusing existing QApplication")

    _application = app
    _initialized = True
    return _application


def is_initialized() -> bool:
    """Check whether ensure_application() has completed."""
    return _initialized


def reset() -> None:
    """Forget the cached application so the next call re-checks. Used by tests."""
    global _application, _initialized
    _application = None
    _initialized = False

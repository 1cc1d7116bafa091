"""
Exception types raised by quickforms.

Configuration problems are always raised synchronously at factory-call
time, before any window is shown.
"""

from typing import Optional


class QuickFormsError(Exception):
    """Base class for all quickforms errors."""


class InvalidConfiguration(QuickFormsError, ValueError):
    """Raised when a widget, panel or window configuration is rejected."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class PresetParseError(InvalidConfiguration):
    """Exception raised when parsing a YAML dialog preset fails."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        location = f" in {source}" if source else ""
        super().__init__(f"{message}{location}")


class ToolkitUnavailable(QuickFormsError, RuntimeError):
    """Raised when the Qt toolkit cannot be imported or initialized."""

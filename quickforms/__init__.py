"""
quickforms

Simplified Qt widget factories and three prebuilt dialogs:
- show_notification: message with a dismiss button
- prompt_for_input: message, text field and confirm button
- ask_confirmation: message with confirm/deny buttons

Widget and panel factories live in ``quickforms.factories``; the dialog
classes in ``quickforms.dialogs``.
"""

from .errors import (
    QuickFormsError,
    InvalidConfiguration,
    PresetParseError,
    ToolkitUnavailable,
)
from .logging import logger, configure_logging, set_debug_enabled, is_debug_enabled
from .models import (
    DialogOutcome,
    DialogState,
    StartPosition,
    WindowOptions,
    WindowState,
)
from .api import show_notification, prompt_for_input, ask_confirmation

__version__ = "1.0.0"

__all__ = [
    "QuickFormsError",
    "InvalidConfiguration",
    "PresetParseError",
    "ToolkitUnavailable",
    "logger",
    "configure_logging",
    "set_debug_enabled",
    "is_debug_enabled",
    "DialogOutcome",
    "DialogState",
    "StartPosition",
    "WindowOptions",
    "WindowState",
    "show_notification",
    "prompt_for_input",
    "ask_confirmation",
]

"""
Public dialog entry points.

Each call builds one dialog, shows it modally and returns once the user
has acted; the dialog is then scheduled for deletion. Invalid
configuration raises before any window is shown.
"""

from typing import Any, Mapping, Optional, Union

from .errors import InvalidConfiguration
from .logging import logger
from .models import DialogOutcome, WindowOptions
from .services.toolkit import ensure_application

WindowOptionsLike = Union[WindowOptions, Mapping[str, Any], None]


def _options(window_options: WindowOptionsLike) -> WindowOptions:
    try:
        return WindowOptions.coerce(window_options)
    except InvalidConfiguration as e:
        logger.warning(f"Rejected window options: {e}")
        raise


def _run(dialog):
    """Run a dialog modally, then schedule it for deletion."""
    try:
        return dialog.run()
    finally:
        dialog.deleteLater()


def show_notification(
    title: str,
    message: str,
    button_text: str = "OK",
    window_options: WindowOptionsLike = None,
    parent=None,
) -> None:
    """
    Show a message with a single dismiss button.

    Args:
        title: Window title
        message: Message text (may be empty)
        button_text: Dismiss button text
        window_options: WindowOptions or a mapping with windowState,
            startPosition, hideInTaskbar
        parent: Optional owner window

    Raises:
        InvalidConfiguration: On invalid options or texts
        ToolkitUnavailable: If Qt cannot be initialized
    """
    options = _options(window_options)
    ensure_application()
    from .dialogs import MessageBox

    _run(MessageBox(title, message, button_text, options, parent))


def prompt_for_input(
    title: str,
    message: str,
    button_text: str = "OK",
    window_options: WindowOptionsLike = None,
    parent=None,
) -> str:
    """
    Ask the user for a line of text.

    Returns:
        The text in the input field when the confirm action fired, or ""
    """
    options = _options(window_options)
    ensure_application()
    from .dialogs import InputBox

    return _run(InputBox(title, message, button_text, options, parent))


def ask_confirmation(
    title: str,
    message: str,
    confirm_text: str = "Yes",
    deny_text: str = "No",
    window_options: WindowOptionsLike = None,
    parent=None,
) -> DialogOutcome:
    """
    Ask the user to accept or decline.

    Returns:
        DialogOutcome.ACCEPTED or DialogOutcome.DECLINED
    """
    options = _options(window_options)
    ensure_application()
    from .dialogs import ChoiceBox

    return _run(ChoiceBox(title, message, confirm_text, deny_text, options, parent))

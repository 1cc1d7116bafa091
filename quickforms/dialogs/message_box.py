"""
MessageBox - Notify the user and wait for dismissal.

Layout: one grid panel, message row takes all remaining space, the
dismiss button row fits its content.
"""

from typing import Any, Mapping, Optional, Union

from PyQt5.QtWidgets import QPushButton, QWidget

from ..factories import PrimitiveFactory
from ..models import GridCell, GridLayout, PanelConfig, SizeRule, WindowOptions
from .base import (
    DEFAULT_PANEL_PADDING,
    PANEL_NAME,
    ComposedDialog,
    button_config,
    message_config,
    require_text,
)

DISMISS_NAME = "dismiss"


class MessageBox(ComposedDialog):
    """
    Dialog showing a message with a single dismiss button.

    Example:
        MessageBox("Saved", "All changes were written.").run()
    """

    def __init__(
        self,
        title: str,
        message: str,
        button_text: str = "OK",
        window_options: Union[WindowOptions, Mapping[str, Any], None] = None,
        parent: Optional[QWidget] = None,
    ):
        panel_config = PanelConfig(
            layout=GridLayout(
                rows=(SizeRule.percent(100), SizeRule.auto()),
                columns=(SizeRule.percent(100),),
            ),
            padding=DEFAULT_PANEL_PADDING,
            name=PANEL_NAME,
        )
        children = [
            (PrimitiveFactory.create_textbox,
             message_config(require_text(message, "message"), GridCell(0, 0))),
            (PrimitiveFactory.create_button,
             button_config(button_text, DISMISS_NAME, GridCell(1, 0))),
        ]

        super().__init__(title, window_options, parent)
        self._build(panel_config, children)

        self.dismiss_button: QPushButton = self.findChild(QPushButton, DISMISS_NAME)
        self._make_default(self.dismiss_button)
        self.dismiss_button.clicked.connect(self._handle_dismiss)

    def _handle_dismiss(self) -> None:
        """Handle dismiss button click."""
        self.accept()

"""
ChoiceBox - Ask the user to accept or decline.

Layout: two 50% columns. The message spans both columns; the confirm
and deny buttons share the second row. Enter reaches the confirm handler
(default button), Escape and closing the window reach the deny handler.
"""

from typing import Any, Mapping, Optional, Union

from PyQt5.QtWidgets import QPushButton, QWidget

from ..factories import PrimitiveFactory
from ..models import (
    DialogOutcome,
    GridCell,
    GridLayout,
    PanelConfig,
    SizeRule,
    WindowOptions,
)
from .base import (
    DEFAULT_PANEL_PADDING,
    PANEL_NAME,
    ComposedDialog,
    button_config,
    message_config,
    require_text,
)

CONFIRM_NAME = "confirm"
DENY_NAME = "deny"


class ChoiceBox(ComposedDialog):
    """
    Confirm/deny dialog.

    Example:
        if ChoiceBox("Delete", "Delete this file?", "Delete", "Keep").run():
            ...
    """

    def __init__(
        self,
        title: str,
        message: str,
        confirm_text: str = "Yes",
        deny_text: str = "No",
        window_options: Union[WindowOptions, Mapping[str, Any], None] = None,
        parent: Optional[QWidget] = None,
    ):
        panel_config = PanelConfig(
            layout=GridLayout(
                rows=(SizeRule.percent(100), SizeRule.auto()),
                columns=(SizeRule.percent(50), SizeRule.percent(50)),
            ),
            padding=DEFAULT_PANEL_PADDING,
            name=PANEL_NAME,
        )
        children = [
            (PrimitiveFactory.create_textbox,
             message_config(require_text(message, "message"), GridCell(0, 0, column_span=2))),
            (PrimitiveFactory.create_button,
             button_config(confirm_text, CONFIRM_NAME, GridCell(1, 0))),
            (PrimitiveFactory.create_button,
             button_config(deny_text, DENY_NAME, GridCell(1, 1))),
        ]

        super().__init__(title, window_options, parent)
        self._outcome: Optional[DialogOutcome] = None
        self._build(panel_config, children)

        self.confirm_button: QPushButton = self.findChild(QPushButton, CONFIRM_NAME)
        self.deny_button: QPushButton = self.findChild(QPushButton, DENY_NAME)
        self._make_default(self.confirm_button)
        self.confirm_button.clicked.connect(self._handle_confirm)
        self.deny_button.clicked.connect(self._handle_deny)

    def _handle_confirm(self) -> None:
        """Handle confirm button click (or Enter)."""
        self._outcome = DialogOutcome.ACCEPTED
        self.accept()

    def _handle_deny(self) -> None:
        """Handle deny button click (or Escape / window close)."""
        if self._outcome is None:
            self._outcome = DialogOutcome.DECLINED
        super().reject()

    def reject(self) -> None:
        # QDialog routes Escape and the close button through reject()
        self._handle_deny()

    @property
    def outcome(self) -> Optional[DialogOutcome]:
        """DialogOutcome once closed, None while still open."""
        return self._outcome

    def result_value(self) -> DialogOutcome:
        return self._outcome or DialogOutcome.DECLINED

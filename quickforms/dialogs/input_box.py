"""
InputBox - Prompt the user for a line of text.

Layout: three grid rows. The read-only message takes the remaining
space; the input field and the confirm button each get a fixed-height row.
"""

from typing import Any, Mapping, Optional, Union

from PyQt5.QtWidgets import QLineEdit, QPushButton, QWidget

from ..factories import PrimitiveFactory
from ..models import (
    GridCell,
    GridLayout,
    PanelConfig,
    SizeRule,
    TextBoxConfig,
    WindowOptions,
)
from .base import (
    BUTTON_ROW_HEIGHT,
    DEFAULT_PANEL_PADDING,
    PANEL_NAME,
    ComposedDialog,
    button_config,
    message_config,
    require_text,
)

INPUT_NAME = "input"
CONFIRM_NAME = "confirm"

INPUT_ROW_HEIGHT = 28


class InputBox(ComposedDialog):
    """
    Dialog with a message, a text field and a confirm button.

    The captured value is read from the text field at the moment the
    confirm action fires. An empty field yields ``""``, never None.

    Example:
        name = InputBox("Name", "Enter name").run()
    """

    def __init__(
        self,
        title: str,
        message: str,
        button_text: str = "OK",
        window_options: Union[WindowOptions, Mapping[str, Any], None] = None,
        parent: Optional[QWidget] = None,
        default_text: str = "",
    ):
        panel_config = PanelConfig(
            layout=GridLayout(
                rows=(
                    SizeRule.percent(100),
                    SizeRule.absolute(INPUT_ROW_HEIGHT),
                    SizeRule.absolute(BUTTON_ROW_HEIGHT),
                ),
                columns=(SizeRule.percent(100),),
            ),
            padding=DEFAULT_PANEL_PADDING,
            name=PANEL_NAME,
        )
        children = [
            (PrimitiveFactory.create_textbox,
             message_config(require_text(message, "message"), GridCell(0, 0))),
            (PrimitiveFactory.create_textbox,
             TextBoxConfig(
                 placement=GridCell(1, 0),
                 name=INPUT_NAME,
                 text=require_text(default_text, "default_text"),
             )),
            (PrimitiveFactory.create_button,
             button_config(button_text, CONFIRM_NAME, GridCell(2, 0))),
        ]

        super().__init__(title, window_options, parent)
        self._value: Optional[str] = None
        self._build(panel_config, children)

        self.input_field: QLineEdit = self.findChild(QLineEdit, INPUT_NAME)
        self.confirm_button: QPushButton = self.findChild(QPushButton, CONFIRM_NAME)
        self._make_default(self.confirm_button)
        self.confirm_button.clicked.connect(self._handle_confirm)
        self.input_field.setFocus()

    def _handle_confirm(self) -> None:
        """Capture the input field text, then close."""
        field = self.findChild(QLineEdit, INPUT_NAME)
        self._value = field.text() if field is not None else ""
        self.accept()

    @property
    def value(self) -> str:
        """Captured text; empty until the confirm action fires."""
        return self._value or ""

    def result_value(self) -> str:
        return self.value

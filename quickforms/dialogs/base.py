"""
ComposedDialog - Shared lifecycle for the prebuilt dialogs.

Every composed dialog moves through CONSTRUCTING -> DISPLAYED -> CLOSED.
The window itself carries no padding; the inner grid panel does.
"""

from typing import Any, Mapping, Optional, Union

from PyQt5.QtWidgets import QDialog, QPushButton, QWidget

from ..errors import InvalidConfiguration
from ..factories import ContainerFactory
from ..logging import logger
from ..models import (
    ButtonConfig,
    DialogState,
    FormConfig,
    GridCell,
    PanelConfig,
    TextBoxConfig,
    WindowOptions,
)
from ..services.toolkit import ensure_application

# Object names used to look up the composed widgets
MESSAGE_NAME = "message"
PANEL_NAME = "panel"

DEFAULT_PANEL_PADDING = 9
BUTTON_ROW_HEIGHT = 30


def require_text(value: Any, name: str) -> str:
    """Reject non-string dialog texts before anything is built."""
    if not isinstance(value, str):
        raise InvalidConfiguration(f"must be a string, got {type(value).__name__}", field=name)
    return value


def message_config(message: str, cell: GridCell) -> TextBoxConfig:
    """Read-only multi-line region holding the dialog message."""
    return TextBoxConfig(
        placement=cell,
        name=MESSAGE_NAME,
        text=message,
        multiline=True,
        read_only=True,
        word_wrap=True,
    )


def button_config(text: str, name: str, cell: GridCell) -> ButtonConfig:
    return ButtonConfig(placement=cell, name=name, text=require_text(text, name))


class ComposedDialog(QDialog):
    """
    Base class for MessageBox, InputBox and ChoiceBox.

    Subclasses build their configs first (so invalid input raises before any
    widget exists), then call ``_build()`` with the panel and child configs.
    """

    def __init__(
        self,
        title: str,
        window_options: Union[WindowOptions, Mapping[str, Any], None] = None,
        parent: Optional[QWidget] = None,
    ):
        form_config = FormConfig(
            title=require_text(title, "title"),
            options=WindowOptions.coerce(window_options),
            auto_size=True,
            padding=0,
        )
        ensure_application()
        super().__init__(parent)
        self._form_config = form_config
        self._state = DialogState.CONSTRUCTING
        ContainerFactory.configure_form(self, self._form_config)

    @property
    def state(self) -> DialogState:
        return self._state

    def _transition(self, state: DialogState) -> None:
        if state == self._state:
            return
        logger.debug(f"{type(self).__name__} {self._state.value} -> {state.value}")
        self._state = state

    def _build(self, panel_config: PanelConfig, children) -> QWidget:
        """
        Create the inner panel and its children.

        Args:
            panel_config: Grid panel configuration
            children: Sequence of (factory_method, config) pairs

        Returns:
            The panel, already hosted in the window
        """
        panel = ContainerFactory.create_panel(panel_config)
        for create, config in children:
            ContainerFactory.add_to_panel(panel, create(config))
        ContainerFactory.add_panel(self, panel)
        self.adjustSize()
        return panel

    def _make_default(self, button: QPushButton) -> None:
        """Mark the single accept action reachable with Enter."""
        button.setAutoDefault(False)
        button.setDefault(True)

    def message_widget(self) -> QWidget:
        return self.findChild(QWidget, MESSAGE_NAME)

    def showEvent(self, event):
        self._transition(DialogState.DISPLAYED)
        super().showEvent(event)

    def done(self, result: int):
        self._transition(DialogState.CLOSED)
        super().done(result)

    def run(self):
        """
        Show the dialog modally and return its result.

        Returns:
            Whatever ``result_value()`` yields for this dialog kind
        """
        ContainerFactory.place_window(self)
        self.exec_()
        return self.result_value()

    def result_value(self):
        return None

"""
Primitive Factory

Creates individual Qt widgets from widget configuration models.
The factory only constructs and configures: it never parents a widget
or connects a signal.
"""

from typing import Any

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QComboBox,
    QLabel,
    QLineEdit,
    QListWidget,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QSizePolicy,
    QWidget,
)

from ..logging import logger
from ..models.flags import normalize_flags
from ..models.placement import Docked, Manual, resolve_placement
from ..models.widgets import (
    Alignment,
    ButtonConfig,
    CheckBoxConfig,
    DropdownConfig,
    LabelConfig,
    ListBoxConfig,
    RadioButtonConfig,
    SelectionMode,
    SortOrder,
    TextBoxConfig,
    WidgetConfig,
)
from ..services.toolkit import ensure_application

# Attribute holding the placement a widget was built with
PLACEMENT_ATTR = "_quickforms_placement"

_HORIZONTAL = {
    "left": Qt.AlignLeft,
    "center": Qt.AlignHCenter,
    "right": Qt.AlignRight,
}

_VERTICAL = {
    "top": Qt.AlignTop,
    "middle": Qt.AlignVCenter,
    "bottom": Qt.AlignBottom,
}

_SELECTION_MODES = {
    SelectionMode.NONE: QAbstractItemView.NoSelection,
    SelectionMode.SINGLE: QAbstractItemView.SingleSelection,
    SelectionMode.MULTI_SIMPLE: QAbstractItemView.MultiSelection,
    SelectionMode.MULTI_EXTENDED: QAbstractItemView.ExtendedSelection,
}


def qt_alignment(alignment: Alignment):
    """Convert an Alignment to Qt alignment flags."""
    return _HORIZONTAL[alignment.horizontal] | _VERTICAL[alignment.vertical]


def placement_of(widget: QWidget):
    """Get the placement a widget was created with (None for foreign widgets)."""
    return getattr(widget, PLACEMENT_ATTR, None)


def get_value(widget: QWidget) -> Any:
    """
    Get the current value of a factory-built widget.

    Returns:
        Text for labels, text boxes, buttons and dropdowns; list of selected
        texts for list boxes; bool for checkboxes and radio buttons
    """
    if isinstance(widget, QLineEdit):
        return widget.text()
    elif isinstance(widget, QPlainTextEdit):
        return widget.toPlainText()
    elif isinstance(widget, QComboBox):
        return widget.currentText()
    elif isinstance(widget, QListWidget):
        return [item.text() for item in widget.selectedItems()]
    elif isinstance(widget, (QCheckBox, QRadioButton)):
        return widget.isChecked()
    elif isinstance(widget, (QLabel, QPushButton)):
        return widget.text()
    return None


class PrimitiveFactory:
    """
    Factory for creating widgets from configuration models.
    """

    @staticmethod
    def create_label(config: LabelConfig) -> QLabel:
        """Create a read-only text label."""
        ensure_application()
        widget = QLabel(config.text)
        widget.setAlignment(qt_alignment(config.alignment))
        widget.setWordWrap(config.word_wrap)
        return _finish(widget, config, "label")

    @staticmethod
    def create_textbox(config: TextBoxConfig) -> QWidget:
        """
        Create a text box.

        Single-line boxes are QLineEdit; multi-line boxes are QPlainTextEdit.
        """
        ensure_application()
        if config.multiline:
            widget = QPlainTextEdit()
            widget.setPlainText(config.text)
            widget.setReadOnly(config.read_only)
            widget.setLineWrapMode(
                QPlainTextEdit.WidgetWidth if config.word_wrap else QPlainTextEdit.NoWrap
            )
            if config.placeholder:
                widget.setPlaceholderText(config.placeholder)
        else:
            widget = QLineEdit()
            widget.setText(config.text)
            widget.setReadOnly(config.read_only)
            widget.setAlignment(_HORIZONTAL[config.alignment.horizontal] | Qt.AlignVCenter)
            if config.placeholder:
                widget.setPlaceholderText(config.placeholder)
            if config.password:
                widget.setEchoMode(QLineEdit.Password)
            if config.max_length:
                widget.setMaxLength(config.max_length)
        return _finish(widget, config, "textbox")

    @staticmethod
    def create_button(config: ButtonConfig) -> QPushButton:
        """Create a push button. Default/escape roles are assigned by the caller."""
        ensure_application()
        widget = QPushButton(config.text)
        widget.setFlat(config.flat)
        # Only the button explicitly marked default may react to Enter
        widget.setAutoDefault(False)
        return _finish(widget, config, "button")

    @staticmethod
    def create_listbox(config: ListBoxConfig) -> QListWidget:
        """Create a list box. Selected indices refer to config.items order."""
        ensure_application()
        widget = QListWidget()
        widget.setSelectionMode(_SELECTION_MODES[config.selection_mode])
        widget.addItems(list(config.items))

        for index in config.selected:
            widget.item(index).setSelected(True)

        if config.sort_order == SortOrder.ASCENDING:
            widget.sortItems(Qt.AscendingOrder)
        elif config.sort_order == SortOrder.DESCENDING:
            widget.sortItems(Qt.DescendingOrder)

        return _finish(widget, config, "listbox")

    @staticmethod
    def create_dropdown(config: DropdownConfig) -> QComboBox:
        """Create a dropdown. selected_index refers to config.items order."""
        ensure_application()
        widget = QComboBox()
        widget.setEditable(config.editable)

        items = list(config.items)
        if config.sort_order == SortOrder.ASCENDING:
            items.sort()
        elif config.sort_order == SortOrder.DESCENDING:
            items.sort(reverse=True)
        widget.addItems(items)

        if config.selected_index is not None:
            widget.setCurrentIndex(items.index(config.items[config.selected_index]))

        return _finish(widget, config, "dropdown")

    @staticmethod
    def create_checkbox(config: CheckBoxConfig) -> QCheckBox:
        ensure_application()
        widget = QCheckBox(config.text)
        widget.setTristate(config.tri_state)
        widget.setChecked(config.checked)
        return _finish(widget, config, "checkbox")

    @staticmethod
    def create_radio_button(config: RadioButtonConfig) -> QRadioButton:
        ensure_application()
        widget = QRadioButton(config.text)
        widget.setAutoExclusive(config.auto_exclusive)
        widget.setChecked(config.checked)
        return _finish(widget, config, "radio button")


def _finish(widget: QWidget, config: WidgetConfig, kind: str) -> QWidget:
    """Apply the options shared by every widget kind."""
    if config.name:
        widget.setObjectName(config.name)

    style = []
    if config.foreground is not None:
        style.append(f"color: {config.foreground.to_hex()};")
    if config.background is not None:
        style.append(f"background-color: {config.background.to_hex()};")
    if style:
        widget.setStyleSheet(" ".join(style))

    if config.font_size:
        font = widget.font()
        font.setPointSize(config.font_size)
        widget.setFont(font)

    if config.tooltip:
        widget.setToolTip(config.tooltip)

    widget.setEnabled(config.enabled)
    if not config.visible:
        # Never call show() here: the widget has no parent yet
        widget.setHidden(True)

    placement = config.placement
    if isinstance(placement, Manual):
        width = placement.width or widget.sizeHint().width()
        height = placement.height or widget.sizeHint().height()
        widget.setGeometry(placement.x, placement.y, width, height)
    elif isinstance(placement, Docked):
        widget.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
    # GridCell is read by the panel when the widget is added

    setattr(widget, PLACEMENT_ATTR, placement)
    logger.debug(f"Created {kind} ({type(placement).__name__}) name={config.name!r}")
    return widget


# ============================================================================
# Keyword shortcuts
# ============================================================================

def _build(config_cls, options: dict):
    """Map public flags, resolve the placement parameter set, build the config."""
    options = normalize_flags(options)
    placement = resolve_placement(
        x=options.pop("x", None),
        y=options.pop("y", None),
        height=options.pop("height", None),
        width=options.pop("width", None),
        docked=options.pop("docked", False),
        cell=options.pop("cell", None),
    )
    return config_cls(placement=placement, **options)


def new_label(text: str = "", **options) -> QLabel:
    """
    Create a label from keyword options.

    Accepts every LabelConfig field plus x/y/height/width, docked=True or
    cell=(row, column[, row_span, column_span]), and the inverted public
    flags disabled/hidden.
    """
    return PrimitiveFactory.create_label(_build(LabelConfig, dict(options, text=text)))


def new_textbox(text: str = "", **options) -> QWidget:
    return PrimitiveFactory.create_textbox(_build(TextBoxConfig, dict(options, text=text)))


def new_button(text: str = "", **options) -> QPushButton:
    return PrimitiveFactory.create_button(_build(ButtonConfig, dict(options, text=text)))


def new_listbox(items=(), **options) -> QListWidget:
    return PrimitiveFactory.create_listbox(_build(ListBoxConfig, dict(options, items=tuple(items))))


def new_dropdown(items=(), **options) -> QComboBox:
    return PrimitiveFactory.create_dropdown(_build(DropdownConfig, dict(options, items=tuple(items))))


def new_checkbox(text: str = "", **options) -> QCheckBox:
    return PrimitiveFactory.create_checkbox(_build(CheckBoxConfig, dict(options, text=text)))


def new_radio_button(text: str = "", **options) -> QRadioButton:
    return PrimitiveFactory.create_radio_button(_build(RadioButtonConfig, dict(options, text=text)))

"""
Container Factory

Creates top-level windows ("forms") and the layout panels that host
primitive widgets. Supports grid panels with per-row/column sizing rules,
wrapping flow panels and manual (absolute) panels.
"""

from typing import Optional

from PyQt5.QtCore import QPoint, QRect, QSize, Qt
from PyQt5.QtGui import QColor, QFont, QPalette
from PyQt5.QtWidgets import (
    QApplication,
    QDialog,
    QGridLayout,
    QLayout,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from ..errors import InvalidConfiguration
from ..logging import logger
from ..models.placement import Docked, GridCell, Manual, resolve_placement
from ..models.widgets import Color
from ..models.window import (
    FormConfig,
    PanelConfig,
    SizeKind,
    SizeRule,
    StartPosition,
    WindowState,
)
from ..services.toolkit import ensure_application
from .primitives import PLACEMENT_ATTR, placement_of

FORM_ATTR = "_quickforms_form"
PANEL_ATTR = "_quickforms_panel"

_WINDOW_STATES = {
    WindowState.NORMAL: Qt.WindowNoState,
    WindowState.MAXIMIZED: Qt.WindowMaximized,
    WindowState.MINIMIZED: Qt.WindowMinimized,
}


def _qcolor(color: Color) -> QColor:
    return QColor(color.red, color.green, color.blue, color.alpha)


class FlowPanelLayout(QLayout):
    """
    Layout that places items left to right and wraps at the panel bounds.
    """

    def __init__(self, parent: Optional[QWidget] = None, margin: int = 0, spacing: int = 6):
        super().__init__(parent)
        self.setContentsMargins(margin, margin, margin, margin)
        self.setSpacing(spacing)
        self._items = []

    def addItem(self, item):
        self._items.append(item)

    def count(self) -> int:
        return len(self._items)

    def itemAt(self, index: int):
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def takeAt(self, index: int):
        if 0 <= index < len(self._items):
            return self._items.pop(index)
        return None

    def expandingDirections(self):
        return Qt.Orientations()

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return self._do_layout(QRect(0, 0, width, 0), test_only=True)

    def setGeometry(self, rect: QRect):
        super().setGeometry(rect)
        self._do_layout(rect, test_only=False)

    def sizeHint(self) -> QSize:
        return self.minimumSize()

    def minimumSize(self) -> QSize:
        size = QSize()
        for item in self._items:
            size = size.expandedTo(item.minimumSize())
        margins = self.contentsMargins()
        size += QSize(margins.left() + margins.right(), margins.top() + margins.bottom())
        return size

    def _do_layout(self, rect: QRect, test_only: bool) -> int:
        """Position items (unless test_only) and return the height used."""
        margins = self.contentsMargins()
        area = rect.adjusted(margins.left(), margins.top(), -margins.right(), -margins.bottom())
        spacing = max(self.spacing(), 0)
        x = area.x()
        y = area.y()
        line_height = 0

        for item in self._items:
            if item.isEmpty():
                continue
            hint = item.sizeHint()
            next_x = x + hint.width() + spacing
            # Wrap when the item would cross the right edge, unless the line is empty
            if next_x - spacing > area.right() + 1 and line_height > 0:
                x = area.x()
                y = y + line_height + spacing
                next_x = x + hint.width() + spacing
                line_height = 0

            if not test_only:
                item.setGeometry(QRect(QPoint(x, y), hint))

            x = next_x
            line_height = max(line_height, hint.height())

        return y + line_height - rect.y() + margins.bottom()


class ContainerFactory:
    """
    Factory for windows and layout panels.
    """

    @staticmethod
    def create_form(config: FormConfig, parent: Optional[QWidget] = None) -> QDialog:
        """
        Create a top-level window.

        The window gets a vertical outer layout (margins = config.padding)
        that hosts panels added with add_panel().

        Args:
            config: Window configuration
            parent: Optional owner window, used for CenterParent placement

        Returns:
            Configured, not yet shown QDialog
        """
        ensure_application()
        window = QDialog(parent)
        ContainerFactory.configure_form(window, config)
        return window

    @staticmethod
    def configure_form(window: QDialog, config: FormConfig) -> None:
        """Apply a FormConfig to an existing (possibly subclassed) QDialog."""
        window.setWindowTitle(config.title)
        window.setModal(config.modal)

        options = config.options
        if not options.show_in_taskbar:
            window.setWindowFlags(window.windowFlags() | Qt.Tool)

        window.setWindowState(_WINDOW_STATES[options.window_state])

        if config.font_family or config.font_size:
            font = QFont(window.font())
            if config.font_family:
                font.setFamily(config.font_family)
            if config.font_size:
                font.setPointSize(config.font_size)
            window.setFont(font)

        if config.foreground is not None:
            palette = window.palette()
            palette.setColor(QPalette.WindowText, _qcolor(config.foreground))
            palette.setColor(QPalette.Text, _qcolor(config.foreground))
            palette.setColor(QPalette.ButtonText, _qcolor(config.foreground))
            window.setPalette(palette)

        layout = QVBoxLayout(window)
        layout.setContentsMargins(config.padding, config.padding, config.padding, config.padding)
        layout.setSpacing(0)

        if config.auto_size:
            layout.setSizeConstraint(QLayout.SetMinimumSize)
            if config.width and config.height:
                window.resize(config.width, config.height)
        else:
            window.resize(config.width, config.height)

        setattr(window, FORM_ATTR, config)
        logger.debug(
            f"Configured form title={config.title!r} state={options.window_state.value} "
            f"start={options.start_position.value} show_in_taskbar={options.show_in_taskbar}"
        )

    @staticmethod
    def create_panel(config: PanelConfig) -> QWidget:
        """
        Create a layout panel.

        Args:
            config: Panel configuration (grid, flow or manual layout)

        Returns:
            Unparented QWidget with the requested layout installed
        """
        ensure_application()
        panel = QWidget()
        if config.name:
            panel.setObjectName(config.name)

        if config.background is not None:
            palette = panel.palette()
            palette.setColor(QPalette.Window, _qcolor(config.background))
            panel.setPalette(palette)
            panel.setAutoFillBackground(True)

        padding = config.padding
        if config.is_grid:
            layout = QGridLayout(panel)
            layout.setContentsMargins(padding, padding, padding, padding)
            for index, rule in enumerate(config.layout.rows):
                _apply_rule(layout.setRowStretch, layout.setRowMinimumHeight, index, rule)
            for index, rule in enumerate(config.layout.columns):
                _apply_rule(layout.setColumnStretch, layout.setColumnMinimumWidth, index, rule)
        elif config.is_flow:
            FlowPanelLayout(panel, margin=padding, spacing=config.layout.spacing)

        placement = config.placement
        if isinstance(placement, Manual):
            panel.setGeometry(
                placement.x,
                placement.y,
                placement.width or panel.sizeHint().width(),
                placement.height or panel.sizeHint().height(),
            )
        elif isinstance(placement, Docked):
            panel.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        setattr(panel, PANEL_ATTR, config)
        setattr(panel, PLACEMENT_ATTR, placement)
        logger.debug(f"Created {type(config.layout).__name__} panel name={config.name!r}")
        return panel

    @staticmethod
    def add_to_panel(panel: QWidget, widget: QWidget, cell: Optional[GridCell] = None) -> None:
        """
        Add a widget to a panel according to the panel kind.

        Grid panels place the widget in its GridCell (or the explicit ``cell``);
        flow panels append it; manual panels keep its absolute geometry.

        Raises:
            InvalidConfiguration: If the widget's placement conflicts with the
                panel kind or the cell falls outside the grid
        """
        config = getattr(panel, PANEL_ATTR, None)
        if config is None:
            raise InvalidConfiguration("target is not a panel created by ContainerFactory", field="panel")

        placement = placement_of(widget)
        if cell is not None:
            cell = resolve_placement(cell=cell)

        if config.is_grid:
            if cell is None:
                if isinstance(placement, GridCell):
                    cell = placement
                elif isinstance(placement, Manual):
                    raise InvalidConfiguration(
                        "manual X/Y/Height/Width cannot be used inside a grid panel; "
                        "pick exactly one parameter set",
                        field="placement",
                    )
                else:
                    raise InvalidConfiguration("grid panels need a cell for each child", field="cell")
            config.layout.check_cell(cell)
            panel.layout().addWidget(widget, cell.row, cell.column, cell.row_span, cell.column_span)
            return

        if cell is not None or isinstance(placement, GridCell):
            raise InvalidConfiguration("grid cells are only valid inside a grid panel", field="cell")

        if config.is_flow:
            if isinstance(placement, Manual) and placement.has_extent:
                widget.setFixedSize(placement.width, placement.height)
            panel.layout().addWidget(widget)
            return

        explicitly_hidden = (
            widget.testAttribute(Qt.WA_WState_ExplicitShowHide)
            and widget.testAttribute(Qt.WA_WState_Hidden)
        )
        widget.setParent(panel)
        if isinstance(placement, Docked):
            widget.setGeometry(panel.rect())
        if panel.isVisible() and not explicitly_hidden:
            widget.show()

    @staticmethod
    def add_panel(window: QDialog, panel: QWidget) -> None:
        """Host a panel in a window's outer layout."""
        window.layout().addWidget(panel)

    @staticmethod
    def place_window(window: QDialog) -> None:
        """
        Move a window according to its start position.

        Call after the content is laid out so the window size is final.
        WindowsDefaultLocation/Bounds leave placement to the window manager.
        """
        config = getattr(window, FORM_ATTR, None)
        if config is None:
            return

        options = config.options
        start = options.start_position
        if start == StartPosition.MANUAL:
            if options.location is not None:
                window.move(*options.location)
            return

        if start == StartPosition.CENTER_PARENT and window.parentWidget() is not None:
            target = window.parentWidget().window().frameGeometry()
        elif start in (StartPosition.CENTER_SCREEN, StartPosition.CENTER_PARENT):
            screen = QApplication.primaryScreen()
            if screen is None:
                return
            target = screen.availableGeometry()
        else:
            return

        frame = window.frameGeometry()
        frame.moveCenter(target.center())
        window.move(frame.topLeft())


def _apply_rule(set_stretch, set_minimum, index: int, rule: SizeRule):
    """Translate a SizeRule into Qt stretch/minimum settings."""
    if rule.kind == SizeKind.PERCENT:
        set_stretch(index, rule.value)
    elif rule.kind == SizeKind.ABSOLUTE:
        set_stretch(index, 0)
        set_minimum(index, rule.value)
    else:
        set_stretch(index, 0)

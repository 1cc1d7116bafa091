"""
Models - Pure Python dataclasses describing widgets, windows and results.

No Qt dependencies in this package.
"""

from .placement import Manual, Docked, GridCell, Placement, resolve_placement
from .flags import INVERTED_FLAGS, normalize_flags
from .widgets import (
    Alignment,
    SelectionMode,
    SortOrder,
    Color,
    WidgetConfig,
    LabelConfig,
    TextBoxConfig,
    ButtonConfig,
    ListBoxConfig,
    DropdownConfig,
    CheckBoxConfig,
    RadioButtonConfig,
)
from .window import (
    WindowState,
    StartPosition,
    WindowOptions,
    FormConfig,
    SizeKind,
    SizeRule,
    GridLayout,
    FlowLayout,
    ManualLayout,
    PanelConfig,
)
from .results import DialogState, DialogOutcome

__all__ = [
    "Manual",
    "Docked",
    "GridCell",
    "Placement",
    "resolve_placement",
    "INVERTED_FLAGS",
    "normalize_flags",
    "Alignment",
    "SelectionMode",
    "SortOrder",
    "Color",
    "WidgetConfig",
    "LabelConfig",
    "TextBoxConfig",
    "ButtonConfig",
    "ListBoxConfig",
    "DropdownConfig",
    "CheckBoxConfig",
    "RadioButtonConfig",
    "WindowState",
    "StartPosition",
    "WindowOptions",
    "FormConfig",
    "SizeKind",
    "SizeRule",
    "GridLayout",
    "FlowLayout",
    "ManualLayout",
    "PanelConfig",
    "DialogState",
    "DialogOutcome",
]

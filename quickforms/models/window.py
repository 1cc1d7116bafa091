"""
Window and panel configuration models.

These models describe top-level forms and the panels they host.
Public "hide in taskbar" semantics are normalized to the positive-sense
``show_in_taskbar`` flag as soon as a WindowOptions is built.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..errors import InvalidConfiguration
from .flags import check_flag, normalize_flags
from .placement import Docked, GridCell, Manual, Placement, check_non_negative
from .widgets import Color


def _parse_enum(enum_cls, value, field_name: str):
    """Accept an enum member, its value or its name (case-insensitive)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = value.replace("_", "").replace(" ", "").lower()
        for member in enum_cls:
            if wanted in (member.value.lower(), member.name.replace("_", "").lower()):
                return member
    allowed = ", ".join(member.value for member in enum_cls)
    raise InvalidConfiguration(
        f"unknown value {value!r}; expected one of: {allowed}", field=field_name
    )


class WindowState(str, Enum):
    """Initial window state."""
    NORMAL = "Normal"
    MAXIMIZED = "Maximized"
    MINIMIZED = "Minimized"


class StartPosition(str, Enum):
    """Where a window first appears."""
    CENTER_SCREEN = "CenterScreen"
    MANUAL = "Manual"
    WINDOWS_DEFAULT_LOCATION = "WindowsDefaultLocation"
    WINDOWS_DEFAULT_BOUNDS = "WindowsDefaultBounds"
    CENTER_PARENT = "CenterParent"


# Public option key -> WindowOptions attribute
_OPTION_KEYS = {
    "windowState": "window_state",
    "window_state": "window_state",
    "startPosition": "start_position",
    "start_position": "start_position",
    "hideInTaskbar": "hide_in_taskbar",
    "hide_in_taskbar": "hide_in_taskbar",
    "showInTaskbar": "show_in_taskbar",
    "show_in_taskbar": "show_in_taskbar",
    "location": "location",
}


@dataclass(frozen=True)
class WindowOptions:
    """
    Window options recognized by the dialog entry points.

    Use ``WindowOptions.create(hide_in_taskbar=True)`` or ``from_dict`` to
    build one from public-facing names.
    """
    window_state: WindowState = WindowState.NORMAL
    start_position: StartPosition = StartPosition.CENTER_SCREEN
    show_in_taskbar: bool = True
    location: Optional[Tuple[int, int]] = None  # Only used with StartPosition.MANUAL

    def __post_init__(self):
        object.__setattr__(
            self, "window_state", _parse_enum(WindowState, self.window_state, "windowState")
        )
        object.__setattr__(
            self, "start_position", _parse_enum(StartPosition, self.start_position, "startPosition")
        )
        check_flag(self.show_in_taskbar, "show_in_taskbar")
        if self.location is not None:
            try:
                x, y = self.location
            except (TypeError, ValueError):
                raise InvalidConfiguration(
                    f"expected (x, y), got {self.location!r}", field="location"
                )
            object.__setattr__(
                self, "location", (check_non_negative(x, "location.x"), check_non_negative(y, "location.y"))
            )
            if self.start_position != StartPosition.MANUAL:
                raise InvalidConfiguration(
                    "a location requires startPosition=Manual", field="location"
                )

    @property
    def hide_in_taskbar(self) -> bool:
        return not self.show_in_taskbar

    @classmethod
    def create(cls, **options) -> "WindowOptions":
        """Build options from keyword arguments using public flag names."""
        return cls(**normalize_flags(options))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "WindowOptions":
        """
        Build options from a public configuration bundle.

        Args:
            data: Mapping with windowState, startPosition, hideInTaskbar
                (snake_case aliases accepted)

        Raises:
            InvalidConfiguration: On unknown keys or values
        """
        if data is None:
            return cls()
        options: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in _OPTION_KEYS:
                raise InvalidConfiguration(
                    "unknown window option; expected one of: windowState, startPosition, hideInTaskbar",
                    field=key,
                )
            if _OPTION_KEYS[key] == "location" and value is not None:
                value = tuple(value)
            options[_OPTION_KEYS[key]] = value
        return cls.create(**options)

    @classmethod
    def coerce(cls, value: Union["WindowOptions", Mapping[str, Any], None]) -> "WindowOptions":
        if isinstance(value, WindowOptions):
            return value
        if value is None or isinstance(value, Mapping):
            return cls.from_dict(value)
        raise InvalidConfiguration(
            f"expected WindowOptions or a mapping, got {type(value).__name__}",
            field="window_options",
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "windowState": self.window_state.value,
            "startPosition": self.start_position.value,
            "hideInTaskbar": self.hide_in_taskbar,
        }
        if self.location is not None:
            data["location"] = list(self.location)
        return data


@dataclass(frozen=True)
class FormConfig:
    """Top-level window configuration."""
    title: str = ""
    options: WindowOptions = field(default_factory=WindowOptions)
    width: int = 0  # 0 with auto_size lets the content decide
    height: int = 0
    auto_size: bool = True
    font_family: Optional[str] = None
    font_size: int = 0
    foreground: Optional[Color] = None
    padding: int = 0
    modal: bool = True

    def __post_init__(self):
        check_non_negative(self.width, "width")
        check_non_negative(self.height, "height")
        check_non_negative(self.font_size, "font_size")
        check_non_negative(self.padding, "padding")
        object.__setattr__(self, "options", WindowOptions.coerce(self.options))
        object.__setattr__(self, "foreground", Color.coerce(self.foreground))
        if not self.auto_size and (self.width == 0 or self.height == 0):
            raise InvalidConfiguration(
                "width and height are required when auto_size is disabled", field="auto_size"
            )


# ============================================================================
# Panel Layouts
# ============================================================================

class SizeKind(str, Enum):
    PERCENT = "percent"
    AUTO = "auto"
    ABSOLUTE = "absolute"


@dataclass(frozen=True)
class SizeRule:
    """Sizing rule for one grid row or column."""
    kind: SizeKind = SizeKind.AUTO
    value: int = 0

    def __post_init__(self):
        object.__setattr__(self, "kind", _parse_enum(SizeKind, self.kind, "size_rule"))
        check_non_negative(self.value, "size_rule")
        if self.kind == SizeKind.PERCENT and not 0 < self.value <= 100:
            raise InvalidConfiguration(
                f"percentage must be in 1..100, got {self.value}", field="size_rule"
            )

    @classmethod
    def percent(cls, value: int) -> "SizeRule":
        return cls(SizeKind.PERCENT, value)

    @classmethod
    def auto(cls) -> "SizeRule":
        return cls(SizeKind.AUTO, 0)

    @classmethod
    def absolute(cls, pixels: int) -> "SizeRule":
        return cls(SizeKind.ABSOLUTE, pixels)


@dataclass(frozen=True)
class GridLayout:
    """Rows and columns, each with a sizing rule."""
    rows: Tuple[SizeRule, ...] = (SizeRule(),)
    columns: Tuple[SizeRule, ...] = (SizeRule(),)

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(self.rows))
        object.__setattr__(self, "columns", tuple(self.columns))
        if not self.rows or not self.columns:
            raise InvalidConfiguration("a grid needs at least one row and one column", field="layout")
        for rule in self.rows + self.columns:
            if not isinstance(rule, SizeRule):
                raise InvalidConfiguration(f"expected SizeRule, got {rule!r}", field="layout")

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def check_cell(self, cell: GridCell):
        """Raise InvalidConfiguration if cell (with spans) falls outside the grid."""
        if cell.row + cell.row_span > self.row_count:
            raise InvalidConfiguration(
                f"row {cell.row} with span {cell.row_span} exceeds {self.row_count} rows",
                field="cell",
            )
        if cell.column + cell.column_span > self.column_count:
            raise InvalidConfiguration(
                f"column {cell.column} with span {cell.column_span} exceeds {self.column_count} columns",
                field="cell",
            )


@dataclass(frozen=True)
class FlowLayout:
    """Sequential placement that wraps at the panel bounds."""
    spacing: int = 6

    def __post_init__(self):
        check_non_negative(self.spacing, "spacing")


@dataclass(frozen=True)
class ManualLayout:
    """No layout manager; children use absolute placement."""


PanelLayout = Union[GridLayout, FlowLayout, ManualLayout]


@dataclass(frozen=True)
class PanelConfig:
    """
    Layout panel configuration.

    A layout-managed panel (grid or flow) sizes itself from its parent, so
    combining it with Manual placement is rejected.
    """
    layout: PanelLayout = field(default_factory=ManualLayout)
    placement: Placement = field(default_factory=Docked)
    padding: int = 0
    name: Optional[str] = None
    background: Optional[Color] = None

    def __post_init__(self):
        if not isinstance(self.layout, (GridLayout, FlowLayout, ManualLayout)):
            raise InvalidConfiguration(
                f"expected GridLayout, FlowLayout or ManualLayout, got {self.layout!r}",
                field="layout",
            )
        if not isinstance(self.placement, (Manual, Docked, GridCell)):
            raise InvalidConfiguration(
                f"expected Manual, Docked or GridCell, got {self.placement!r}",
                field="placement",
            )
        if isinstance(self.placement, Manual) and not isinstance(self.layout, ManualLayout):
            raise InvalidConfiguration(
                "manual X/Y/Height/Width cannot be combined with a layout-managed panel; "
                "pick exactly one parameter set",
                field="placement",
            )
        check_non_negative(self.padding, "padding")
        object.__setattr__(self, "background", Color.coerce(self.background))

    @property
    def is_grid(self) -> bool:
        return isinstance(self.layout, GridLayout)

    @property
    def is_flow(self) -> bool:
        return isinstance(self.layout, FlowLayout)

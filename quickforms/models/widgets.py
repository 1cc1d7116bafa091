"""
Widget configuration models.

One immutable dataclass per widget kind. The factories consume these to
build Qt widgets; nothing here imports Qt.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..errors import InvalidConfiguration
from .flags import check_flag
from .placement import DEFAULT_PLACEMENT, Docked, GridCell, Manual, Placement


class Alignment(str, Enum):
    """Content alignment inside a widget."""
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    MIDDLE_LEFT = "middle_left"
    MIDDLE_CENTER = "middle_center"
    MIDDLE_RIGHT = "middle_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def horizontal(self) -> str:
        return self.value.split("_", 1)[1]

    @property
    def vertical(self) -> str:
        return self.value.split("_", 1)[0]


class SelectionMode(str, Enum):
    """List box selection modes."""
    NONE = "none"
    SINGLE = "single"
    MULTI_SIMPLE = "multi_simple"
    MULTI_EXTENDED = "multi_extended"


class SortOrder(str, Enum):
    """Item ordering for list boxes and dropdowns."""
    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"


# Subset of CSS color names accepted by Color.named
_NAMED_COLORS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
}


@dataclass(frozen=True)
class Color:
    """RGBA color, components 0..255."""
    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self):
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise InvalidConfiguration(
                    f"color component must be an integer in 0..255, got {value!r}",
                    field=name,
                )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse '#RRGGBB' or '#RRGGBBAA'."""
        text = value.lstrip("#")
        if len(text) not in (6, 8):
            raise InvalidConfiguration(f"invalid hex color {value!r}", field="color")
        try:
            components = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError:
            raise InvalidConfiguration(f"invalid hex color {value!r}", field="color")
        return cls(*components)

    @classmethod
    def named(cls, name: str) -> "Color":
        try:
            return cls(*_NAMED_COLORS[name.lower()])
        except KeyError:
            raise InvalidConfiguration(f"unknown color name {name!r}", field="color")

    @classmethod
    def coerce(cls, value) -> Optional["Color"]:
        """Accept a Color, a hex string, a color name or an (r, g, b[, a]) tuple."""
        if value is None or isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value) if value.startswith("#") else cls.named(value)
        if isinstance(value, (tuple, list)):
            return cls(*value)
        raise InvalidConfiguration(f"cannot interpret {value!r} as a color", field="color")

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


# ============================================================================
# Widget Configurations
# ============================================================================

@dataclass(frozen=True)
class WidgetConfig:
    """Options shared by every widget kind."""
    placement: Placement = DEFAULT_PLACEMENT
    name: Optional[str] = None  # Qt objectName, used to look widgets up
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    font_size: int = 0  # 0 keeps the inherited font size
    tooltip: Optional[str] = None
    enabled: bool = True
    visible: bool = True

    def __post_init__(self):
        if not isinstance(self.placement, (Manual, Docked, GridCell)):
            raise InvalidConfiguration(
                f"expected Manual, Docked or GridCell, got {self.placement!r}",
                field="placement",
            )
        if isinstance(self.font_size, bool) or not isinstance(self.font_size, int) or self.font_size < 0:
            raise InvalidConfiguration(
                f"must be a non-negative integer, got {self.font_size!r}",
                field="font_size",
            )
        # Accept loose color specs but store Color instances
        object.__setattr__(self, "foreground", Color.coerce(self.foreground))
        check_flag(self.enabled, "enabled")
        check_flag(self.visible, "visible")
        object.__setattr__(self, "background", Color.coerce(self.background))

    @property
    def is_docked(self) -> bool:
        return isinstance(self.placement, Docked)


@dataclass(frozen=True)
class LabelConfig(WidgetConfig):
    text: str = ""
    alignment: Alignment = Alignment.TOP_LEFT
    word_wrap: bool = False


@dataclass(frozen=True)
class TextBoxConfig(WidgetConfig):
    text: str = ""
    multiline: bool = False
    read_only: bool = False
    word_wrap: bool = True
    placeholder: Optional[str] = None
    password: bool = False
    max_length: int = 0  # 0 = unlimited
    alignment: Alignment = Alignment.MIDDLE_LEFT

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int) or self.max_length < 0:
            raise InvalidConfiguration(
                f"must be a non-negative integer, got {self.max_length!r}",
                field="max_length",
            )
        if self.multiline and self.password:
            raise InvalidConfiguration(
                "password masking is only available for single-line text boxes",
                field="password",
            )
        if self.multiline and self.max_length:
            raise InvalidConfiguration(
                "max_length is only available for single-line text boxes",
                field="max_length",
            )


@dataclass(frozen=True)
class ButtonConfig(WidgetConfig):
    text: str = ""
    flat: bool = False


def _check_selection(items: Tuple[str, ...], indices, field_name: str):
    for index in indices:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(items):
            raise InvalidConfiguration(
                f"index {index!r} out of range for {len(items)} items",
                field=field_name,
            )


@dataclass(frozen=True)
class ListBoxConfig(WidgetConfig):
    items: Tuple[str, ...] = field(default_factory=tuple)
    selection_mode: SelectionMode = SelectionMode.SINGLE
    sort_order: SortOrder = SortOrder.NONE
    selected: Tuple[int, ...] = field(default_factory=tuple)  # indices into items

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "items", tuple(str(item) for item in self.items))
        object.__setattr__(self, "selected", tuple(self.selected))
        _check_selection(self.items, self.selected, "selected")
        if self.selection_mode == SelectionMode.NONE and self.selected:
            raise InvalidConfiguration(
                "cannot preselect items when selection mode is none", field="selected"
            )
        if self.selection_mode == SelectionMode.SINGLE and len(self.selected) > 1:
            raise InvalidConfiguration(
                "single selection mode allows at most one selected item", field="selected"
            )


@dataclass(frozen=True)
class DropdownConfig(WidgetConfig):
    items: Tuple[str, ...] = field(default_factory=tuple)
    editable: bool = False
    sort_order: SortOrder = SortOrder.NONE
    selected_index: Optional[int] = None

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "items", tuple(str(item) for item in self.items))
        if self.selected_index is not None:
            _check_selection(self.items, (self.selected_index,), "selected_index")


@dataclass(frozen=True)
class CheckBoxConfig(WidgetConfig):
    text: str = ""
    checked: bool = False
    tri_state: bool = False


@dataclass(frozen=True)
class RadioButtonConfig(WidgetConfig):
    text: str = ""
    checked: bool = False
    auto_exclusive: bool = True

"""
Placement variants for widgets.

A widget is positioned in exactly one way, chosen once when its
configuration is built:

- Manual: absolute X/Y/Height/Width inside a parent without a layout manager
- Docked: fills its parent container cell, explicit extent is ignored
- GridCell: occupies a row/column (with optional spans) of a grid panel
"""

from dataclasses import dataclass
from typing import Union

from ..errors import InvalidConfiguration


def check_non_negative(value, name: str) -> int:
    """
    Validate a coordinate or extent value.

    Args:
        value: Value to check
        name: Field name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidConfiguration: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(
            f"must be a non-negative integer, got {value!r}", field=name
        )
    if value < 0:
        raise InvalidConfiguration(
            f"must be a non-negative integer, got {value}", field=name
        )
    return value


@dataclass(frozen=True)
class Manual:
    """Absolute placement. Zero width/height keeps the widget's size hint."""
    x: int = 0
    y: int = 0
    height: int = 0
    width: int = 0

    def __post_init__(self):
        check_non_negative(self.x, "x")
        check_non_negative(self.y, "y")
        check_non_negative(self.height, "height")
        check_non_negative(self.width, "width")

    @property
    def has_extent(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Docked:
    """Fill the parent container cell."""


@dataclass(frozen=True)
class GridCell:
    """Cell of a grid panel. Spans must be at least 1."""
    row: int = 0
    column: int = 0
    row_span: int = 1
    column_span: int = 1

    def __post_init__(self):
        check_non_negative(self.row, "row")
        check_non_negative(self.column, "column")
        check_non_negative(self.row_span, "row_span")
        check_non_negative(self.column_span, "column_span")
        if self.row_span < 1:
            raise InvalidConfiguration("must be at least 1", field="row_span")
        if self.column_span < 1:
            raise InvalidConfiguration("must be at least 1", field="column_span")


Placement = Union[Manual, Docked, GridCell]

DEFAULT_PLACEMENT = Manual()


def resolve_placement(
    x=None,
    y=None,
    height=None,
    width=None,
    docked: bool = False,
    cell=None,
) -> Placement:
    """
    Build a placement from keyword-style arguments.

    Exactly one parameter set may be supplied: coordinates, ``docked=True``
    or a ``cell`` tuple of (row, column[, row_span, column_span]).

    Raises:
        InvalidConfiguration: If more than one parameter set is given
    """
    manual_given = any(v is not None for v in (x, y, height, width))
    chosen = [name for name, given in (
        ("manual coordinates", manual_given),
        ("docked", docked),
        ("cell", cell is not None),
    ) if given]

    if len(chosen) > 1:
        raise InvalidConfiguration(
            f"conflicting placement parameters: {', '.join(chosen)}; pick exactly one",
            field="placement",
        )

    if docked:
        return Docked()
    if cell is not None:
        if isinstance(cell, GridCell):
            return cell
        try:
            return GridCell(*cell)
        except TypeError:
            raise InvalidConfiguration(
                f"expected (row, column[, row_span, column_span]), got {cell!r}",
                field="cell",
            )
    if manual_given:
        return Manual(
            x=0 if x is None else x,
            y=0 if y is None else y,
            height=0 if height is None else height,
            width=0 if width is None else width,
        )
    return DEFAULT_PLACEMENT

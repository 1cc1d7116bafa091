"""
Factories - Build Qt widgets, windows and panels from configuration models.
"""

from .primitives import (
    PrimitiveFactory,
    get_value,
    placement_of,
    new_label,
    new_textbox,
    new_button,
    new_listbox,
    new_dropdown,
    new_checkbox,
    new_radio_button,
)
from .containers import ContainerFactory, FlowPanelLayout

__all__ = [
    "PrimitiveFactory",
    "ContainerFactory",
    "FlowPanelLayout",
    "get_value",
    "placement_of",
    "new_label",
    "new_textbox",
    "new_button",
    "new_listbox",
    "new_dropdown",
    "new_checkbox",
    "new_radio_button",
]

"""
Prebuilt dialog compositions.
"""

from .base import ComposedDialog
from .message_box import MessageBox
from .input_box import InputBox
from .choice_box import ChoiceBox

__all__ = [
    "ComposedDialog",
    "MessageBox",
    "InputBox",
    "ChoiceBox",
]

"""
Dialog lifecycle and result types.
"""

from enum import Enum


class DialogState(str, Enum):
    """Lifecycle of a composed dialog."""
    CONSTRUCTING = "constructing"
    DISPLAYED = "displayed"
    CLOSED = "closed"


class DialogOutcome(str, Enum):
    """Result of a confirm/deny dialog."""
    ACCEPTED = "accepted"
    DECLINED = "declined"

    def __bool__(self) -> bool:
        return self is DialogOutcome.ACCEPTED

"""
Services - Toolkit lifecycle management.
"""

from .toolkit import ensure_application, is_initialized

__all__ = [
    "ensure_application",
    "is_initialized",
]

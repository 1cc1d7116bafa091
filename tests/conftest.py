"""
Pytest configuration and shared fixtures.
"""

import os

import pytest

# Widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from quickforms.services.toolkit import ensure_application

    app = ensure_application([])
    yield app


@pytest.fixture
def preset_yaml():
    """YAML text with one preset of each type."""
    return """
dialogs:
  saved:
    type: notify
    title: Saved
    message: All changes were written.
    button_text: Close
  ask_name:
    type: prompt
    title: Name
    message: Enter name
  delete_file:
    type: confirm
    title: Delete
    message: Delete this file?
    confirm_text: Delete
    deny_text: Keep
    window:
      windowState: Normal
      startPosition: CenterParent
      hideInTaskbar: true
"""

"""
Unit tests for the public dialog entry points.

The modal loop is replaced by a stub that performs the user action, so
the tests exercise the real dialogs without blocking.
"""

from unittest.mock import patch

import pytest
from PyQt5.QtCore import QEvent, Qt
from PyQt5.QtWidgets import QApplication, QDialog, QWidget

from quickforms import (
    DialogOutcome,
    InvalidConfiguration,
    StartPosition,
    WindowOptions,
    ask_confirmation,
    prompt_for_input,
    show_notification,
)
from quickforms.dialogs import ChoiceBox, InputBox, MessageBox


class TestShowNotification:
    """Tests for show_notification."""

    def test_returns_after_dismiss(self, qapp, monkeypatch):
        seen = {}

        def fake_exec(self):
            seen["title"] = self.windowTitle()
            seen["button"] = self.dismiss_button.text()
            self.dismiss_button.click()
            return self.result()

        monkeypatch.setattr(MessageBox, "exec_", fake_exec)

        assert show_notification("Saved", "Done", button_text="Close") is None
        assert seen == {"title": "Saved", "button": "Close"}

    def test_window_options_mapping(self, qapp, monkeypatch):
        """Test public window option names reach the window."""
        seen = {}

        def fake_exec(self):
            seen["type"] = int(self.windowFlags() & Qt.WindowType_Mask)
            self.accept()
            return self.result()

        monkeypatch.setattr(MessageBox, "exec_", fake_exec)

        show_notification("t", "m", window_options={"hideInTaskbar": True})
        assert seen["type"] == int(Qt.Tool)

    def test_string_taskbar_flag_rejected(self, qapp):
        with patch("quickforms.dialogs.MessageBox") as box_cls:
            with pytest.raises(InvalidConfiguration):
                show_notification("t", "m", window_options={"hideInTaskbar": "false"})
            box_cls.assert_not_called()

    def test_invalid_options_build_nothing(self, qapp):
        """Test invalid options raise before any dialog is created."""
        with patch("quickforms.dialogs.MessageBox") as box_cls:
            with pytest.raises(InvalidConfiguration):
                show_notification("t", "m", window_options={"windowState": "Huge"})
            box_cls.assert_not_called()


class TestPromptForInput:
    """Tests for prompt_for_input."""

    def test_returns_typed_text(self, qapp, monkeypatch):
        def fake_exec(self):
            self.input_field.setText("Alice")
            self.confirm_button.click()
            return self.result()

        monkeypatch.setattr(InputBox, "exec_", fake_exec)
        assert prompt_for_input("Name", "Enter name") == "Alice"

    def test_empty_confirm(self, qapp, monkeypatch):
        def fake_exec(self):
            self.confirm_button.click()
            return self.result()

        monkeypatch.setattr(InputBox, "exec_", fake_exec)
        assert prompt_for_input("Name", "Enter name") == ""

    def test_closed_without_confirm(self, qapp, monkeypatch):
        def fake_exec(self):
            self.input_field.setText("typed")
            self.reject()
            return self.result()

        monkeypatch.setattr(InputBox, "exec_", fake_exec)
        assert prompt_for_input("Name", "Enter name") == ""


class TestAskConfirmation:
    """Tests for ask_confirmation."""

    def test_accept(self, qapp, monkeypatch):
        def fake_exec(self):
            self.confirm_button.click()
            return self.result()

        monkeypatch.setattr(ChoiceBox, "exec_", fake_exec)
        result = ask_confirmation("Delete", "Delete this file?", "Delete", "Keep")
        assert result == DialogOutcome.ACCEPTED
        assert result

    def test_deny(self, qapp, monkeypatch):
        def fake_exec(self):
            self.deny_button.click()
            return self.result()

        monkeypatch.setattr(ChoiceBox, "exec_", fake_exec)
        assert ask_confirmation("Delete", "Delete this file?") == DialogOutcome.DECLINED

    def test_texts_reach_buttons(self, qapp, monkeypatch):
        seen = {}

        def fake_exec(self):
            seen["texts"] = (self.confirm_button.text(), self.deny_button.text())
            self.reject()
            return self.result()

        monkeypatch.setattr(ChoiceBox, "exec_", fake_exec)
        options = WindowOptions(start_position=StartPosition.CENTER_PARENT)
        assert ask_confirmation("t", "m", "Proceed", "Cancel", window_options=options) == DialogOutcome.DECLINED
        assert seen["texts"] == ("Proceed", "Cancel")

    def test_rejects_non_mapping_options(self, qapp):
        with pytest.raises(InvalidConfiguration):
            ask_confirmation("t", "m", window_options=["Maximized"])


class TestDialogCleanup:
    """Tests that finished dialogs do not linger on their parent."""

    def test_dialog_deleted_after_result(self, qapp, monkeypatch):
        deleted = []

        def fake_exec(self):
            self.input_field.setText("kept")
            self.confirm_button.click()
            return self.result()

        monkeypatch.setattr(InputBox, "exec_", fake_exec)
        monkeypatch.setattr(InputBox, "deleteLater", lambda self: deleted.append(self))

        assert prompt_for_input("Name", "Enter name") == "kept"
        assert len(deleted) == 1

    def test_no_dialog_left_on_parent(self, qapp, monkeypatch):
        """Test the parent has no dialog children once the call returns."""
        parent = QWidget()

        def fake_exec(self):
            self.confirm_button.click()
            return self.result()

        monkeypatch.setattr(ChoiceBox, "exec_", fake_exec)

        for _ in range(3):
            assert ask_confirmation("t", "m", parent=parent) == DialogOutcome.ACCEPTED
        QApplication.sendPostedEvents(None, QEvent.DeferredDelete)

        assert parent.findChildren(QDialog) == []

    def test_dialog_deleted_when_run_fails(self, qapp, monkeypatch):
        deleted = []

        def fake_exec(self):
            raise RuntimeError("event loop failed")

        monkeypatch.setattr(MessageBox, "exec_", fake_exec)
        monkeypatch.setattr(MessageBox, "deleteLater", lambda self: deleted.append(self))

        with pytest.raises(RuntimeError):
            show_notification("t", "m")
        assert len(deleted) == 1

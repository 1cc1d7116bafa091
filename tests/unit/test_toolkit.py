"""
Unit tests for the toolkit service and logging setup.
"""

import logging
import sys

import pytest
from PyQt5.QtWidgets import QApplication

from quickforms import logging as qf_logging
from quickforms.errors import ToolkitUnavailable
from quickforms.services import toolkit


@pytest.fixture
def fresh_toolkit():
    """Forget the cached application before and after the test."""
    toolkit.reset()
    yield toolkit
    toolkit.reset()
    toolkit.ensure_application()


class TestEnsureApplication:
    """Tests for ensure_application."""

    def test_idempotent(self, qapp):
        """Test repeated calls return the same instance."""
        first = toolkit.ensure_application()
        second = toolkit.ensure_application()
        assert first is second
        assert first is QApplication.instance()
        assert toolkit.is_initialized()

    def test_reuses_existing_instance(self, qapp, fresh_toolkit):
        assert not fresh_toolkit.is_initialized()
        assert fresh_toolkit.ensure_application() is qapp
        assert fresh_toolkit.is_initialized()

    def test_missing_pyqt(self, qapp, fresh_toolkit, monkeypatch):
        """Test an unavailable toolkit raises ToolkitUnavailable."""
        monkeypatch.setitem(sys.modules, "PyQt5.QtWidgets", None)

        with pytest.raises(ToolkitUnavailable):
            fresh_toolkit.ensure_application()
        assert not fresh_toolkit.is_initialized()

    def test_error_is_runtime_error(self):
        assert issubclass(ToolkitUnavailable, RuntimeError)


class TestLogging:
    """Tests for the quickforms logger."""

    def test_logger_name(self):
        assert qf_logging.logger.name == "quickforms"

    def test_set_debug_enabled(self):
        try:
            qf_logging.set_debug_enabled(True)
            assert qf_logging.is_debug_enabled()
            qf_logging.set_debug_enabled(False)
            assert not qf_logging.is_debug_enabled()
        finally:
            qf_logging.set_debug_enabled(False)

    def test_configure_logging_single_handler(self):
        try:
            qf_logging.configure_logging(logging.INFO)
            qf_logging.configure_logging(logging.INFO)
            assert len(qf_logging.logger.handlers) == 1
            assert qf_logging.logger.level == logging.INFO
        finally:
            qf_logging.configure_logging(logging.WARNING)

    @pytest.mark.parametrize("value,expected", [
        ("1", True),
        ("true", True),
        ("ON", True),
        ("0", False),
        ("", False),
    ])
    def test_debug_env_var(self, value, expected):
        assert qf_logging.debug_from_env({qf_logging.DEBUG_ENV_VAR: value}) is expected

    def test_env_var_picks_default_level(self, monkeypatch):
        """Test configure_logging() without a level follows QUICKFORMS_DEBUG."""
        try:
            monkeypatch.setenv(qf_logging.DEBUG_ENV_VAR, "1")
            qf_logging.configure_logging()
            assert qf_logging.is_debug_enabled()

            monkeypatch.delenv(qf_logging.DEBUG_ENV_VAR)
            qf_logging.configure_logging()
            assert qf_logging.logger.level == logging.WARNING
        finally:
            qf_logging.configure_logging(logging.WARNING)

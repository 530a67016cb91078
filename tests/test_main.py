"""
Tests for application startup.
"""

import importlib
import unittest.mock as mock

from fastapi.testclient import TestClient

import src.api.main as main


class TestLogging:
    """Logging is configured on startup, not on import."""

    def test_import_does_not_configure_logging(self):
        with mock.patch("logging.basicConfig") as basic_config:
            importlib.reload(main)
        basic_config.assert_not_called()

    def test_startup_configures_logging(self):
        with mock.patch.object(main, "setup_logging") as setup_logging:
            with TestClient(main.app):
                pass
        setup_logging.assert_called_once_with(main.get_settings().log_level)

"""Tests for podsmith.utils.logging module."""

import importlib
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import podsmith.utils.logging as logging_module


@pytest.fixture(autouse=True)
def reset_logger():
    """Each test configures the logger from scratch."""
    logging_module._logger = None
    yield
    logger = logging.getLogger("podsmith")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logging_module._logger = None


class TestLoggingConfiguration:
    """Tests for environment-driven configuration."""

    def test_log_disabled_by_default(self):
        """Logging is disabled when PODSMITH_LOG is not set."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is False

        importlib.reload(logging_module)

    def test_log_enabled_with_env_var(self):
        """Logging is enabled when PODSMITH_LOG=true."""
        with patch.dict(os.environ, {"PODSMITH_LOG": "true"}):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is True

        importlib.reload(logging_module)

    def test_log_file_custom_path(self):
        """Custom log file path from environment."""
        with patch.dict(os.environ, {"PODSMITH_LOG_FILE": "/tmp/custom-podsmith.log"}):
            importlib.reload(logging_module)

            assert str(logging_module.LOG_FILE) == "/tmp/custom-podsmith.log"

        importlib.reload(logging_module)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_null_handler_when_disabled(self):
        """Nothing is written unless enabled."""
        with patch.object(logging_module, "LOG_ENABLED", False):
            logger = logging_module.setup_logging()

        assert logger.name == "podsmith"
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_returns_same_logger(self):
        """setup_logging is idempotent."""
        assert logging_module.setup_logging() is logging_module.setup_logging()

    def test_writes_to_file_when_enabled(self, tmp_path: Path):
        """Messages and commands are written to the log file."""
        log_file = tmp_path / "logs" / "podsmith.log"

        with (
            patch.object(logging_module, "LOG_ENABLED", True),
            patch.object(logging_module, "LOG_FILE", log_file),
        ):
            logging_module.log_message("hello")
            logging_module.log_command("pod spec lint Kiwi.podspec", 1)

        content = log_file.read_text()
        assert "hello" in content
        assert "COMMAND: pod spec lint Kiwi.podspec | EXIT_CODE: 1" in content

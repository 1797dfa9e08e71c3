"""File logging for podsmith.

Nothing is logged unless PODSMITH_LOG=true. The log records status lines
printed to the console and every external command (``git``, ``pod``)
run on the user's behalf, with its exit status.

Environment Variables:
    PODSMITH_LOG: "true" enables the log file
    PODSMITH_LOG_FILE: where to write it (default: ~/.podsmith.log)
"""

import logging
import os
from pathlib import Path

LOGGER_NAME = "podsmith"
LOG_ENABLED = os.environ.get("PODSMITH_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("PODSMITH_LOG_FILE", str(Path.home() / ".podsmith.log")))

_logger: logging.Logger | None = None


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging() -> logging.Logger:
    """Attach the podsmith handler once and return the package logger.

    Module loggers created with ``logging.getLogger(__name__)`` propagate
    to this logger, so they land in the same file.
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    if LOG_ENABLED:
        logger.addHandler(_file_handler(LOG_FILE))
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def log_message(message: str) -> None:
    setup_logging().info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Record an external command and its exit status (-1 if it never ran)."""
    setup_logging().info(f"COMMAND: {command} | EXIT_CODE: {exit_code}")


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "LOGGER_NAME",
    "setup_logging",
    "log_message",
    "log_command",
]

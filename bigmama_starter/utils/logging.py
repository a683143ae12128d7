"""File logging for bigmama-starter, off unless BIGMAMA_LOG=true.

Environment Variables:
    BIGMAMA_LOG: Set to "true" to enable logging (default: "false")
    BIGMAMA_LOG_FILE: Path to log file (default: ~/.bigmama-starter.log)
"""

import logging
import os
from pathlib import Path

LOG_ENABLED = os.environ.get("BIGMAMA_LOG", "false").lower() == "true"
LOG_FILE = Path(
    os.environ.get("BIGMAMA_LOG_FILE", str(Path.home() / ".bigmama-starter.log"))
)

_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Attach a file handler (or a NullHandler when disabled) to the package logger.

    Only the first call configures anything; later calls return the same logger.
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger("bigmama_starter")
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(LOG_FILE)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Record one line in the log file, if logging is on."""
    get_logger().info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Record how a CLI command finished."""
    get_logger().info(f"COMMAND: {command} | EXIT_CODE: {exit_code}")


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_command",
]

"""Utility modules for bigmama-starter.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from bigmama_starter.utils.console import (
    console,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from bigmama_starter.utils.errors import (
    ExitCode,
    MissingDirectoryError,
    StarterError,
    UserCancelledError,
)
from bigmama_starter.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_step",
    # Errors
    "ExitCode",
    "StarterError",
    "MissingDirectoryError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]

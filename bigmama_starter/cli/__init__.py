"""Command-line interface for bigmama-starter.

This package contains:
- app: Typer application, version flag and command registration
- init: The init command and its prompt flow
"""

from bigmama_starter.cli.app import app, version_callback
from bigmama_starter.cli.init import prompt_config, resolve_target_directory

__all__ = [
    "app",
    "prompt_config",
    "resolve_target_directory",
    "version_callback",
]

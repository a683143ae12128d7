"""Static configuration templates.

This package contains:
- languages: LanguageChoice enum
- vscode: Editor settings per language
- prettier: Formatter config and ignore list (typescript)
- gitlint: Commit-lint config (python)
"""

import json
from typing import Any

from bigmama_starter.templates.gitlint import GITLINT_CONFIG, GITLINT_FILE
from bigmama_starter.templates.languages import LanguageChoice
from bigmama_starter.templates.prettier import (
    PRETTIER_CONFIG,
    PRETTIER_CONFIG_FILE,
    PRETTIER_IGNORE,
    PRETTIER_IGNORE_FILE,
)
from bigmama_starter.templates.vscode import (
    VSCODE_DIR,
    VSCODE_SETTINGS,
    VSCODE_SETTINGS_FILE,
    get_vscode_settings,
)


def render_json(payload: dict[str, Any]) -> str:
    """Serialize a template with two-space indentation and no trailing newline."""
    return json.dumps(payload, indent=2)


__all__ = [
    "LanguageChoice",
    "render_json",
    # Editor
    "VSCODE_DIR",
    "VSCODE_SETTINGS",
    "VSCODE_SETTINGS_FILE",
    "get_vscode_settings",
    # Formatter
    "PRETTIER_CONFIG",
    "PRETTIER_CONFIG_FILE",
    "PRETTIER_IGNORE",
    "PRETTIER_IGNORE_FILE",
    # Lint
    "GITLINT_CONFIG",
    "GITLINT_FILE",
]

"""VS Code workspace settings, one template per language."""

from typing import Any

from bigmama_starter.templates.languages import LanguageChoice

VSCODE_DIR = ".vscode"
VSCODE_SETTINGS_FILE = "settings.json"

VSCODE_SETTINGS: dict[LanguageChoice, dict[str, Any]] = {
    LanguageChoice.PYTHON: {
        "python.analysis.typeCheckingMode": "strict",
        "python.analysis.autoImportCompletions": True,
        "editor.formatOnSave": True,
        "editor.defaultFormatter": "charliermarsh.ruff",
        "editor.codeActionsOnSave": {
            "source.organizeImports": True,
            "source.fixAll": True,
        },
        "[jsonc]": {
            "editor.defaultFormatter": "vscode.json-language-features",
        },
    },
    LanguageChoice.TYPESCRIPT: {
        "editor.defaultFormatter": "esbenp.prettier-vscode",
        "editor.formatOnSave": True,
        "editor.codeActionsOnSave": {
            "source.organizeImports": True,
            "source.fixAll.eslint": True,
            "source.fixAll": True,
        },
    },
    LanguageChoice.GOLANG: {},
}


def get_vscode_settings(language: LanguageChoice) -> dict[str, Any]:
    """Return the settings template for a language."""
    return VSCODE_SETTINGS[language]


__all__ = [
    "VSCODE_DIR",
    "VSCODE_SETTINGS",
    "VSCODE_SETTINGS_FILE",
    "get_vscode_settings",
]

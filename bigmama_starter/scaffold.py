"""Configuration file writers.

Every writer checks whether its target already exists and, if so, asks
before replacing it. Declining leaves the target untouched. Filesystem
errors are not caught here and propagate to the caller. Files are always
written with LF line endings.
"""

import shutil
from enum import Enum
from pathlib import Path

from bigmama_starter.templates import (
    GITLINT_CONFIG,
    GITLINT_FILE,
    PRETTIER_CONFIG,
    PRETTIER_CONFIG_FILE,
    PRETTIER_IGNORE,
    PRETTIER_IGNORE_FILE,
    VSCODE_DIR,
    VSCODE_SETTINGS_FILE,
    LanguageChoice,
    get_vscode_settings,
    render_json,
)
from bigmama_starter.ui.prompts import prompt_confirm
from bigmama_starter.utils.logging import log_message


class WriteResult(Enum):
    """Outcome of writing one configuration target."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"


def _confirm_overwrite(path: Path, assume_yes: bool) -> bool:
    """Ask whether an existing path may be replaced."""
    return prompt_confirm(
        f"{path.name} already exists. Overwrite?",
        default=False,
        assume_yes=assume_yes,
    )


def _write_text(path: Path, content: str, assume_yes: bool) -> WriteResult:
    """Write a single file, asking first if it already exists."""
    existed = path.exists()
    if existed and not _confirm_overwrite(path, assume_yes):
        log_message(f"Skipped {path}")
        return WriteResult.SKIPPED

    path.write_text(content, encoding="utf-8", newline="")
    log_message(f"Wrote {path}")
    return WriteResult.OVERWRITTEN if existed else WriteResult.CREATED


def write_editor_settings(
    cwd: Path,
    language: LanguageChoice,
    *,
    assume_yes: bool = False,
) -> WriteResult:
    """Write .vscode/settings.json for a language.

    An existing .vscode directory is removed entirely before the new
    settings are written, so no stale files survive an overwrite.

    Args:
        cwd: Project directory
        language: Language whose settings template is written
        assume_yes: Overwrite without asking

    Returns:
        WriteResult for the .vscode directory
    """
    vscode_path = cwd / VSCODE_DIR
    existed = vscode_path.exists() or vscode_path.is_symlink()

    if existed:
        if not _confirm_overwrite(vscode_path, assume_yes):
            log_message(f"Skipped {vscode_path}")
            return WriteResult.SKIPPED
        if vscode_path.is_dir() and not vscode_path.is_symlink():
            shutil.rmtree(vscode_path)
        else:
            vscode_path.unlink()
        log_message(f"Removed {vscode_path}")

    vscode_path.mkdir(parents=True, exist_ok=True)
    settings_path = vscode_path / VSCODE_SETTINGS_FILE
    settings_path.write_text(
        render_json(get_vscode_settings(language)), encoding="utf-8", newline=""
    )
    log_message(f"Wrote {settings_path}")
    return WriteResult.OVERWRITTEN if existed else WriteResult.CREATED


def write_formatter_config(cwd: Path, *, assume_yes: bool = False) -> list[WriteResult]:
    """Write .prettierrc and .prettierignore.

    Each file is checked and confirmed on its own.

    Returns:
        Results for .prettierrc and .prettierignore, in that order
    """
    return [
        _write_text(cwd / PRETTIER_CONFIG_FILE, render_json(PRETTIER_CONFIG), assume_yes),
        _write_text(cwd / PRETTIER_IGNORE_FILE, PRETTIER_IGNORE, assume_yes),
    ]


def write_lint_config(cwd: Path, *, assume_yes: bool = False) -> WriteResult:
    """Write .gitlint."""
    return _write_text(cwd / GITLINT_FILE, GITLINT_CONFIG, assume_yes)


def write_language_config(
    cwd: Path,
    language: LanguageChoice,
    *,
    assume_yes: bool = False,
) -> dict[str, WriteResult]:
    """Write every configuration file for a language.

    Editor settings are always written. TypeScript adds the prettier
    files and Python adds the gitlint config.

    Returns:
        Results keyed by output path relative to cwd
    """
    results: dict[str, WriteResult] = {
        f"{VSCODE_DIR}/{VSCODE_SETTINGS_FILE}": write_editor_settings(
            cwd, language, assume_yes=assume_yes
        ),
    }

    if language == LanguageChoice.TYPESCRIPT:
        config_result, ignore_result = write_formatter_config(cwd, assume_yes=assume_yes)
        results[PRETTIER_CONFIG_FILE] = config_result
        results[PRETTIER_IGNORE_FILE] = ignore_result
    elif language == LanguageChoice.PYTHON:
        results[GITLINT_FILE] = write_lint_config(cwd, assume_yes=assume_yes)

    return results


__all__ = [
    "WriteResult",
    "write_editor_settings",
    "write_formatter_config",
    "write_lint_config",
    "write_language_config",
]

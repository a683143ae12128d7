"""The init command and its prompt flow.

Asks for the project language, confirms the target directory and writes
the matching configuration files.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from bigmama_starter.config.manager import ConfigManager
from bigmama_starter.scaffold import WriteResult, write_language_config
from bigmama_starter.templates.languages import LanguageChoice
from bigmama_starter.ui.menus import show_language_menu
from bigmama_starter.ui.prompts import prompt_confirm
from bigmama_starter.utils.console import (
    highlight,
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

_RESULT_LABELS: dict[WriteResult, str] = {
    WriteResult.CREATED: "[green]created[/green]",
    WriteResult.OVERWRITTEN: "[yellow]overwritten[/yellow]",
    WriteResult.SKIPPED: "[dim]skipped[/dim]",
}


def _validate_language(language: str | None) -> LanguageChoice | None:
    """Convert the --language flag to a LanguageChoice.

    Raises:
        typer.BadParameter: If the language is unknown or not supported yet
    """
    if language is None:
        return None

    try:
        choice = LanguageChoice.parse(language)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    if choice.disabled:
        raise typer.BadParameter(f"{choice.value} is not supported yet")
    return choice


def resolve_target_directory(cwd: Path | None = None) -> Path:
    """Resolve the directory configuration is written to.

    Args:
        cwd: Explicit directory, or None for the process working directory

    Returns:
        Absolute path of an existing directory

    Raises:
        MissingDirectoryError: If the directory does not exist
    """
    if cwd is None:
        try:
            cwd = Path.cwd()
        except FileNotFoundError as e:
            raise MissingDirectoryError(None) from e

    target = cwd.expanduser().resolve()
    if not target.is_dir():
        raise MissingDirectoryError(target)
    return target


def prompt_config(
    cwd: Path,
    language: LanguageChoice | None = None,
    *,
    assume_yes: bool = False,
) -> dict[str, WriteResult]:
    """Run the interactive init flow against a directory.

    Args:
        cwd: Existing target directory
        language: Language highlighted in the menu (used directly with assume_yes)
        assume_yes: Skip the language menu and answer every confirmation with yes

    Returns:
        Write results keyed by output path relative to cwd

    Raises:
        UserCancelledError: If the user cancels a prompt or declines to proceed
    """
    if assume_yes:
        selected = language if language is not None else LanguageChoice.default()
        print_info(f"Using language: {selected.value}")
    else:
        selected = show_language_menu(language)

    if not prompt_confirm(
        f"Write configuration to {cwd}. Proceed?",
        default=True,
        assume_yes=assume_yes,
    ):
        raise UserCancelledError("Aborted, no files were written")

    print_step(f"Writing {highlight(selected.value)} configuration to {highlight(str(cwd))}")
    results = write_language_config(cwd, selected, assume_yes=assume_yes)

    for path, result in results.items():
        print_step(f"{path} {_RESULT_LABELS[result]}")

    if all(result is WriteResult.SKIPPED for result in results.values()):
        print_warning("Nothing was written, existing configuration kept")
    else:
        print_success("Project configuration ready")
    return results


def init(
    language: Annotated[
        str | None,
        typer.Option(
            "--language",
            "-l",
            help="Language to use (python, typescript)",
        ),
    ] = None,
    cwd: Annotated[
        Path | None,
        typer.Option(
            "--cwd",
            "-c",
            help="Directory to write configuration to (default: current directory)",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip the language prompt and overwrite existing files without asking",
        ),
    ] = False,
) -> None:
    """Initialize your project and add config files."""
    setup_logging()
    language_choice = _validate_language(language)

    try:
        target = resolve_target_directory(cwd)

        settings = ConfigManager().load()
        if language_choice is None:
            language_choice = settings.get_default_language()

        prompt_config(target, language_choice, assume_yes=yes or settings.assume_yes)

    except UserCancelledError as e:
        print_info(escape(str(e)))
        log_command("init", e.exit_code)
        raise typer.Exit(e.exit_code) from e

    except StarterError as e:
        print_error(escape(str(e)))
        log_command("init", e.exit_code)
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("Operation cancelled by user")
        log_command("init", ExitCode.SUCCESS)
        raise typer.Exit(ExitCode.SUCCESS) from e

    log_message(f"Initialized {target}")
    log_command("init", ExitCode.SUCCESS)

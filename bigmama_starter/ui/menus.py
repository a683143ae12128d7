"""Interactive menus for bigmama-starter."""

import questionary

from bigmama_starter.templates.languages import LanguageChoice
from bigmama_starter.ui.prompts import prompt_select
from bigmama_starter.utils.logging import log_message

DISABLED_LABEL = "coming soon"


def build_language_choices() -> list[questionary.Choice]:
    """Build menu entries for every language, disabling unavailable ones."""
    return [
        questionary.Choice(
            language.title,
            value=language,
            disabled=DISABLED_LABEL if language.disabled else None,
        )
        for language in LanguageChoice
    ]


def show_language_menu(default: LanguageChoice | None = None) -> LanguageChoice:
    """Ask which language the project uses.

    Args:
        default: Language highlighted initially. Falls back to the first
            selectable language when None or not selectable.

    Returns:
        Selected LanguageChoice

    Raises:
        UserCancelledError: If user cancels
    """
    if default is None or default.disabled:
        default = LanguageChoice.default()

    result: LanguageChoice = prompt_select(
        "What language are you using?",
        choices=build_language_choices(),
        default=default,
    )
    log_message(f"Language selection: {result.value}")
    return result


__all__ = [
    "DISABLED_LABEL",
    "build_language_choices",
    "show_language_menu",
]

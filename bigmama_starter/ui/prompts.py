"""Questionary prompts used by the init flow.

A prompt that is cancelled (Ctrl+C, Escape, EOF) raises UserCancelledError
instead of returning None.
"""

from typing import Any, Optional

import questionary
from questionary import Style

from bigmama_starter.utils.errors import UserCancelledError
from bigmama_starter.utils.logging import log_message

custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def prompt_confirm(
    message: str,
    default: bool = True,
    *,
    assume_yes: bool = False,
) -> bool:
    """Ask a yes/no question.

    With ``assume_yes`` the question is not shown and the answer is yes,
    whatever ``default`` says.
    """
    log_message(f"Prompt confirm: {message}")

    if assume_yes:
        log_message("Assume yes: returning True")
        return True

    try:
        result = questionary.confirm(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled confirmation prompt")

        log_message(f"User response: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_select(
    message: str,
    choices: list[Any],
    default: Optional[Any] = None,
) -> Any:
    """Ask for one entry from a list.

    ``choices`` may mix plain strings and ``questionary.Choice`` objects;
    the value of the chosen entry is returned.
    """
    log_message(f"Prompt select: {message}")

    try:
        result = questionary.select(
            message,
            choices=choices,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled selection prompt")

        log_message(f"User selected: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "custom_style",
    "prompt_confirm",
    "prompt_select",
]

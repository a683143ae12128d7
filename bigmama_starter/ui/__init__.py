"""UI components for bigmama-starter.

This package contains:
- prompts: Questionary-based user input prompts
- menus: Interactive menu functions
"""

from bigmama_starter.ui.menus import build_language_choices, show_language_menu
from bigmama_starter.ui.prompts import custom_style, prompt_confirm, prompt_select

__all__ = [
    # Prompts
    "custom_style",
    "prompt_confirm",
    "prompt_select",
    # Menus
    "build_language_choices",
    "show_language_menu",
]

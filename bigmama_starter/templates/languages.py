"""Supported project languages.

Each language selects one editor settings template and, optionally, an
extra formatter or commit-lint configuration.
"""

from enum import Enum

# Nerd Font glyphs shown in front of the language name
_ICONS: dict[str, str] = {
    "python": "\ue73c",
    "typescript": "\U000f06e6",
    "golang": "\ue627",
}

_TITLES: dict[str, str] = {
    "python": "Python",
    "typescript": "Typescript",
    "golang": "Golang",
}

# Languages listed in the menu but not selectable yet
_DISABLED: frozenset[str] = frozenset({"golang"})


class LanguageChoice(Enum):
    """Target project language."""

    PYTHON = "python"
    TYPESCRIPT = "typescript"
    GOLANG = "golang"

    @property
    def title(self) -> str:
        """Menu title including the language icon."""
        return f"{_ICONS[self.value]} {_TITLES[self.value]}"

    @property
    def disabled(self) -> bool:
        return self.value in _DISABLED

    @classmethod
    def enabled(cls) -> list["LanguageChoice"]:
        """Selectable languages, in menu order."""
        return [lang for lang in cls if not lang.disabled]

    @classmethod
    def default(cls) -> "LanguageChoice":
        """First selectable language."""
        return cls.enabled()[0]

    @classmethod
    def parse(cls, value: str) -> "LanguageChoice":
        """Look up a language by name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the name is not a known language
        """
        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(lang.value for lang in cls.enabled())
            raise ValueError(f"Unknown language: {value}. Valid options: {valid}") from None


__all__ = ["LanguageChoice"]

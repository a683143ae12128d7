"""Settings dataclass for bigmama-starter configuration.

This module defines the Settings dataclass that holds the user's
preferences for the init command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from bigmama_starter.templates.languages import LanguageChoice


@dataclass
class Settings:
    """Configuration settings for bigmama-starter.

    All settings have defaults and can be loaded from the configuration
    file (~/.bigmama-starter) or from environment variables.

    Attributes:
        default_language: Language preselected in the language menu
        assume_yes: Skip the language prompt and answer every confirmation with yes
    """

    default_language: str = ""
    assume_yes: bool = False

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "BIGMAMA_DEFAULT_LANGUAGE": "default_language",
            "BIGMAMA_ASSUME_YES": "assume_yes",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "BIGMAMA_DEFAULT_LANGUAGE")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    def get_default_language(self) -> LanguageChoice | None:
        """Get default language as LanguageChoice, or None if not configured.

        Logs a warning if the configured value is unknown or names a
        language that is not available yet.

        Returns:
            LanguageChoice if default_language is set and selectable, None otherwise
        """
        if not self.default_language:
            return None

        logger = logging.getLogger(__name__)
        try:
            language = LanguageChoice.parse(self.default_language)
        except ValueError:
            valid = ", ".join(lang.value for lang in LanguageChoice.enabled())
            logger.warning(
                f"Invalid BIGMAMA_DEFAULT_LANGUAGE value '{self.default_language}', ignoring. "
                f"Valid options: {valid}"
            )
            return None

        if language.disabled:
            logger.warning(
                f"BIGMAMA_DEFAULT_LANGUAGE '{language.value}' is not supported yet, ignoring."
            )
            return None
        return language


# Default configuration file path
CONFIG_FILE = Path.home() / ".bigmama-starter"

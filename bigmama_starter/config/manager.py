"""Configuration manager for bigmama-starter.

Configuration is loaded with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Global Config (~/.bigmama-starter)
    3. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from bigmama_starter.config.settings import CONFIG_FILE, Settings
from bigmama_starter.utils.logging import log_message


class ConfigManager:
    """Loads configuration with cascading precedence.

    Security features:
    - Safe line-by-line parsing (no eval/exec)
    - Key name validation

    Attributes:
        settings: Current settings instance
        global_config_path: Path to global ~/.bigmama-starter file
    """

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.bigmama-starter.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources.

        Each call starts from clean defaults so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self._raw_values = {}

        if self.global_config_path.is_file():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path)

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path) -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        with path.open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()

                # Skip empty lines and comments
                if not line or line.startswith("#"):
                    continue

                match = pattern.match(line)
                if match:
                    key, value = match.groups()

                    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                        value = value[1:-1]

                    self._raw_values[key] = value

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys only."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value from file or environment
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.strip().lower() in ("true", "1", "yes"))
        else:
            setattr(self.settings, attr, value.strip())


__all__ = ["ConfigManager"]

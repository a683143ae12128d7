"""Configuration management for bigmama-starter.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration

Configuration Format
====================
Flat KEY=VALUE (environment variable style), e.g.:

    BIGMAMA_DEFAULT_LANGUAGE=typescript
    BIGMAMA_ASSUME_YES=false
"""

from bigmama_starter.config.manager import ConfigManager
from bigmama_starter.config.settings import CONFIG_FILE, Settings

__all__ = [
    "CONFIG_FILE",
    "ConfigManager",
    "Settings",
]

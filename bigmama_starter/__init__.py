"""bigmama-starter - Bootstrap new projects with ease.

This package provides a small CLI that writes editor, formatter and
commit-lint configuration files for a chosen project language.
"""

__version__ = "0.1.0"
SCRIPT_NAME = "bigmama-starter"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
]

"""Prettier configuration written for TypeScript projects."""

from typing import Any

PRETTIER_CONFIG_FILE = ".prettierrc"
PRETTIER_IGNORE_FILE = ".prettierignore"

PRETTIER_CONFIG: dict[str, Any] = {
    "jsxSingleQuote": True,
    "singleQuote": True,
    "semi": False,
    "tabWidth": 2,
    "trailingComma": "all",
    "printWidth": 100,
    "bracketSameLine": False,
    "useTabs": False,
    "arrowParens": "always",
    "endOfLine": "auto",
}

PRETTIER_IGNORE = ".yarn\n.next\ndist\nnode_modules"

__all__ = [
    "PRETTIER_CONFIG",
    "PRETTIER_CONFIG_FILE",
    "PRETTIER_IGNORE",
    "PRETTIER_IGNORE_FILE",
]

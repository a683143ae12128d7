"""Themed Rich output shared by every command.

Messages passed to the ``print_*`` helpers are Rich markup. Text that comes
from the user or the filesystem goes through ``highlight`` or
``rich.markup.escape`` first.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from bigmama_starter import SCRIPT_NAME, __version__
from bigmama_starter.utils.logging import log_message

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "step": "bold cyan",
        "highlight": "bold cyan",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def highlight(text: str) -> str:
    """Wrap text in the highlight style, escaping any markup it contains."""
    return f"[highlight]{escape(text)}[/highlight]"


def print_error(message: str) -> None:
    """Print to stderr with an [ERROR] tag."""
    console_err.print(f"[error][[ERROR]][/error] [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    console.print(f"[success][[SUCCESS]][/success] [green]{message}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    console.print(f"[warning][[WARNING]][/warning] [yellow]{message}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    console.print(f"[info][[INFO]][/info] [cyan]{message}[/cyan]")
    log_message(f"INFO: {message}")


def print_step(message: str) -> None:
    """Print one progress line, prefixed with an arrow."""
    console.print(f"[step]➜[/step] {message}")


def show_version() -> None:
    console.print(f"[bold]{SCRIPT_NAME}[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "highlight",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_step",
    "show_version",
]

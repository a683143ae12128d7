"""Exit codes and the exceptions that map onto them."""

from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    Declined confirmations and cancelled prompts are benign and map to
    SUCCESS; anything that prevents scaffolding maps to GENERAL_ERROR.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1


class StarterError(Exception):
    """Error that ends the init command with a known exit code.

    The CLI prints the message and exits with ``exit_code``, which is the
    class default unless a specific code was passed in.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class MissingDirectoryError(StarterError):
    """The target working directory does not exist.

    Attributes:
        path: The directory that could not be found (None if the process
            working directory itself was removed)
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(
        self,
        path: Path | None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.path = path
        if path is None:
            message = "Current working directory no longer exists"
        else:
            message = f"Directory does not exist: {path}"
        super().__init__(message, exit_code)


class UserCancelledError(StarterError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C or Escape inside a prompt
    - User answers 'no' to the proceed confirmation
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.SUCCESS


__all__ = [
    "ExitCode",
    "StarterError",
    "MissingDirectoryError",
    "UserCancelledError",
]

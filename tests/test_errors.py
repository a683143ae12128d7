"""Tests for bigmama_starter.utils.errors module."""

from pathlib import Path

from bigmama_starter.utils.errors import (
    ExitCode,
    MissingDirectoryError,
    StarterError,
    UserCancelledError,
)


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_exit_code_values(self):
        """Exit codes are 0 and 1."""
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1


class TestStarterError:
    """Tests for base StarterError exception."""

    def test_default_exit_code(self):
        """Base exception has GENERAL_ERROR exit code."""
        assert StarterError("Test error").exit_code == ExitCode.GENERAL_ERROR

    def test_custom_exit_code(self):
        """Can override exit code in constructor."""
        error = StarterError("Test error", exit_code=ExitCode.SUCCESS)
        assert error.exit_code == ExitCode.SUCCESS

    def test_message(self):
        """Exception message is accessible."""
        assert str(StarterError("Test error message")) == "Test error message"


class TestMissingDirectoryError:
    """Tests for MissingDirectoryError."""

    def test_exit_code(self):
        """Missing directory exits with 1."""
        assert MissingDirectoryError(Path("/nope")).exit_code == 1

    def test_message_includes_path(self):
        """Message names the missing path."""
        error = MissingDirectoryError(Path("/nope"))

        assert error.path == Path("/nope")
        assert "/nope" in str(error)

    def test_removed_cwd_message(self):
        """Without a path the message mentions the working directory."""
        assert "working directory" in str(MissingDirectoryError(None))

    def test_inherits_from_starter_error(self):
        """Is a StarterError subclass."""
        assert isinstance(MissingDirectoryError(None), StarterError)


class TestUserCancelledError:
    """Tests for UserCancelledError."""

    def test_exit_code_is_success(self):
        """Cancelling is benign."""
        assert UserCancelledError("cancelled").exit_code == ExitCode.SUCCESS

    def test_inherits_from_starter_error(self):
        """Is a StarterError subclass."""
        assert isinstance(UserCancelledError("cancelled"), StarterError)

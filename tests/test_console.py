"""Tests for bigmama_starter.utils.console module."""

import io
from unittest.mock import patch

from rich.console import Console

from bigmama_starter.utils.console import (
    custom_theme,
    highlight,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_version,
)


class TestCustomTheme:
    """Tests for custom Rich theme."""

    def test_theme_styles(self):
        """Theme defines every style used by the print helpers."""
        for name in ("error", "success", "warning", "info", "step", "highlight"):
            assert name in custom_theme.styles


class TestPrintFunctions:
    """Tests for print functions."""

    @patch("bigmama_starter.utils.console.console_err")
    @patch("bigmama_starter.utils.console.log_message")
    def test_print_error(self, mock_log, mock_console_err):
        """print_error writes to stderr console."""
        print_error("Test error")

        mock_console_err.print.assert_called_once()
        call_args = mock_console_err.print.call_args
        assert "[ERROR]" in call_args[0][0]
        assert "Test error" in call_args[0][0]
        mock_log.assert_called_once_with("ERROR: Test error")

    @patch("bigmama_starter.utils.console.console")
    @patch("bigmama_starter.utils.console.log_message")
    def test_print_success(self, mock_log, mock_console):
        """print_success outputs success message."""
        print_success("Test success")

        call_args = mock_console.print.call_args
        assert "[SUCCESS]" in call_args[0][0]
        mock_log.assert_called_once_with("SUCCESS: Test success")

    @patch("bigmama_starter.utils.console.console")
    @patch("bigmama_starter.utils.console.log_message")
    def test_print_warning(self, mock_log, mock_console):
        """print_warning outputs warning message."""
        print_warning("Test warning")

        call_args = mock_console.print.call_args
        assert "[WARNING]" in call_args[0][0]
        mock_log.assert_called_once_with("WARNING: Test warning")

    @patch("bigmama_starter.utils.console.console")
    @patch("bigmama_starter.utils.console.log_message")
    def test_print_info(self, mock_log, mock_console):
        """print_info outputs info message."""
        print_info("Test info")

        call_args = mock_console.print.call_args
        assert "[INFO]" in call_args[0][0]
        mock_log.assert_called_once_with("INFO: Test info")

    @patch("bigmama_starter.utils.console.console")
    def test_print_step(self, mock_console):
        """print_step outputs step with arrow."""
        print_step("Test step")

        assert "Test step" in mock_console.print.call_args[0][0]

    def test_highlight_wraps_markup(self):
        """highlight wraps text in the theme style."""
        assert highlight("python") == "[highlight]python[/highlight]"

    def test_highlight_escapes_markup(self):
        """Markup inside highlighted text renders literally."""
        output = Console(theme=custom_theme, file=io.StringIO(), width=200)

        output.print(highlight("/tmp/a[/red]/[bold]"))

        assert output.file.getvalue().strip() == "/tmp/a[/red]/[bold]"


class TestVersion:
    """Tests for version display."""

    @patch("bigmama_starter.utils.console.console")
    def test_show_version(self, mock_console):
        """show_version prints name and version."""
        show_version()

        output = mock_console.print.call_args[0][0]
        assert "bigmama-starter" in output
        assert "0.1.0" in output

"""Tests for the native folder picker wrappers."""

import subprocess
from unittest.mock import MagicMock, patch

from disklens.scanning.picker import (
    AppleScriptFolderPicker,
    ZenityFolderPicker,
    get_folder_picker,
)
from disklens.utils.shell import CommandResult


class TestGetFolderPicker:
    """Tests for platform selection."""

    def test_linux_uses_zenity(self) -> None:
        """Linux desktops get the zenity picker."""
        assert isinstance(get_folder_picker("linux"), ZenityFolderPicker)

    def test_macos_uses_applescript(self) -> None:
        """macOS gets the osascript picker."""
        assert isinstance(get_folder_picker("darwin"), AppleScriptFolderPicker)

    def test_unknown_platform_has_none(self) -> None:
        """Platforms without a known dialog tool get no picker."""
        assert get_folder_picker("win32") is None


class TestZenityFolderPicker:
    """Tests for ZenityFolderPicker."""

    @patch("disklens.scanning.picker.run_command")
    def test_returns_chosen_folder(self, mock_run: MagicMock) -> None:
        """The dialog's output is the chosen path."""
        mock_run.return_value = CommandResult(stdout="/home/user/Videos\n", stderr="", returncode=0)

        assert ZenityFolderPicker().pick_folder() == "/home/user/Videos"
        args = mock_run.call_args.args[0]
        assert args[:3] == ["zenity", "--file-selection", "--directory"]
        assert "timeout" not in mock_run.call_args.kwargs

    @patch("disklens.scanning.picker.run_command")
    def test_dismissed_dialog_returns_none(self, mock_run: MagicMock) -> None:
        """Cancelling the dialog yields None."""
        mock_run.return_value = CommandResult(stdout="", stderr="", returncode=1)

        assert ZenityFolderPicker().pick_folder() is None

    @patch("disklens.scanning.picker.run_command")
    def test_empty_output_returns_none(self, mock_run: MagicMock) -> None:
        """A successful exit without a path yields None."""
        mock_run.return_value = CommandResult(stdout="\n", stderr="", returncode=0)

        assert ZenityFolderPicker().pick_folder() is None

    @patch("disklens.scanning.picker.run_command", side_effect=FileNotFoundError("zenity"))
    def test_missing_tool_returns_none(self, _mock_run: MagicMock) -> None:
        """A missing dialog tool is treated like a dismissed dialog."""
        assert ZenityFolderPicker().pick_folder() is None

    @patch(
        "disklens.scanning.picker.run_command",
        side_effect=subprocess.SubprocessError("broken"),
    )
    def test_subprocess_error_returns_none(self, _mock_run: MagicMock) -> None:
        """Subprocess failures do not escape."""
        assert ZenityFolderPicker().pick_folder() is None

    @patch("disklens.scanning.picker.command_exists", return_value=False)
    def test_is_available_checks_path(self, mock_exists: MagicMock) -> None:
        """Availability depends on the tool being installed."""
        assert ZenityFolderPicker().is_available() is False
        mock_exists.assert_called_once_with("zenity")


class TestAppleScriptFolderPicker:
    """Tests for AppleScriptFolderPicker."""

    @patch("disklens.scanning.picker.run_command")
    def test_builds_osascript_call(self, mock_run: MagicMock) -> None:
        """The prompt is embedded in the AppleScript expression."""
        mock_run.return_value = CommandResult(stdout="/Users/me/\n", stderr="", returncode=0)

        assert AppleScriptFolderPicker().pick_folder(title='Pick "one"') == "/Users/me/"
        args = mock_run.call_args.args[0]
        assert args[:2] == ["osascript", "-e"]
        assert "choose folder with prompt \"Pick 'one'\"" in args[2]

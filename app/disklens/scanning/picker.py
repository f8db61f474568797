"""Interactive folder selection.

The native folder dialog belongs to the host desktop. disklens only
launches it through an external tool and consumes the chosen path, or
None when the user dismisses the dialog.
"""

import logging
import subprocess
import sys
from abc import ABC, abstractmethod

from disklens.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class FolderPicker(ABC):
    """Abstract base class for native folder pickers."""

    @property
    @abstractmethod
    def command(self) -> str:
        """Name of the external tool that shows the dialog."""

    @abstractmethod
    def _build_args(self, title: str) -> list[str]:
        """Build the command line that shows the dialog."""

    def is_available(self) -> bool:
        """Check if the dialog tool is installed.

        Returns:
            True if the tool is found in PATH.
        """
        return command_exists(self.command)

    def pick_folder(self, title: str = "Select Folder to Analyze") -> str | None:
        """Show the dialog and wait for the user.

        Args:
            title: Dialog title.

        Returns:
            The chosen directory, or None if the dialog was dismissed or
            could not be shown.
        """
        try:
            result = run_command(self._build_args(title))
        except (FileNotFoundError, OSError, subprocess.SubprocessError) as e:
            logger.warning("Cannot show folder picker via %s: %s", self.command, e)
            return None

        if not result.success:
            logger.debug("Folder picker dismissed (exit code %d)", result.returncode)
            return None

        return result.answer


class ZenityFolderPicker(FolderPicker):
    """GTK folder dialog through zenity."""

    @property
    def command(self) -> str:
        return "zenity"

    def _build_args(self, title: str) -> list[str]:
        return ["zenity", "--file-selection", "--directory", f"--title={title}"]


class AppleScriptFolderPicker(FolderPicker):
    """macOS folder dialog through osascript."""

    @property
    def command(self) -> str:
        return "osascript"

    def _build_args(self, title: str) -> list[str]:
        prompt = title.replace('"', "'")
        return ["osascript", "-e", f'POSIX path of (choose folder with prompt "{prompt}")']


def get_folder_picker(platform: str | None = None) -> FolderPicker | None:
    """Select the folder picker for a platform.

    Args:
        platform: A ``sys.platform`` value. Defaults to the running host.

    Returns:
        FolderPicker for the platform, or None if there is none.
    """
    platform = platform or sys.platform

    if platform == "darwin":
        return AppleScriptFolderPicker()
    if platform.startswith(("linux", "freebsd", "openbsd")):
        return ZenityFolderPicker()
    return None

"""Host volume enumeration.

This module defines the DiskEnumerator interface and one variant per
supported platform. Call sites obtain an enumerator through
:func:`get_disk_enumerator` and never branch on the platform themselves.
"""

import logging
import os
import string
import sys
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class DiskEnumerator(ABC):
    """Abstract base class for volume enumerators.

    Enumeration is best-effort: candidate locations that cannot be read
    are left out and no error is raised.

    Example:
        >>> enumerator = get_disk_enumerator()
        >>> for volume in enumerator.list_volumes():
        ...     print(volume)
    """

    @abstractmethod
    def list_volumes(self) -> list[str]:
        """Return the mount points available on this host.

        Returns:
            Ordered list of mount point paths, primary volume first.
        """

    def is_available(self) -> bool:
        """Check if this enumerator supports the current host.

        Returns:
            True unless the enumerator is the unsupported fallback.
        """
        return True


def _list_children(parent: Path) -> list[str]:
    """List the entries of a mount parent such as /media, sorted by name."""
    try:
        return sorted(str(child) for child in parent.iterdir())
    except OSError as e:
        logger.debug("Cannot list mount parent %s: %s", parent, e)
        return []


class PosixDiskEnumerator(DiskEnumerator):
    """Root volume plus everything mounted under the given parents.

    Args:
        mount_parents: Directories whose children are mount points.
    """

    def __init__(self, mount_parents: tuple[Path, ...]) -> None:
        self._mount_parents = mount_parents

    def list_volumes(self) -> list[str]:
        volumes = ["/"]
        for parent in self._mount_parents:
            volumes.extend(_list_children(parent))
        return volumes


class LinuxDiskEnumerator(PosixDiskEnumerator):
    """Linux: ``/`` plus removable media and manual mounts."""

    def __init__(self, mount_parents: tuple[Path, ...] = (Path("/media"), Path("/mnt"))) -> None:
        super().__init__(mount_parents)


class MacDiskEnumerator(PosixDiskEnumerator):
    """macOS: ``/`` plus every entry of ``/Volumes``."""

    def __init__(self, mount_parents: tuple[Path, ...] = (Path("/Volumes"),)) -> None:
        super().__init__(mount_parents)


class WindowsDiskEnumerator(DiskEnumerator):
    """Windows: every drive letter whose root exists."""

    def list_volumes(self) -> list[str]:
        return [
            drive
            for drive in (f"{letter}:\\" for letter in string.ascii_uppercase)
            if os.path.exists(drive)
        ]


class UnsupportedDiskEnumerator(DiskEnumerator):
    """Fallback for platforms without a known volume layout."""

    def list_volumes(self) -> list[str]:
        return []

    def is_available(self) -> bool:
        return False


def get_disk_enumerator(platform: str | None = None) -> DiskEnumerator:
    """Select the enumerator for a platform.

    Args:
        platform: A ``sys.platform`` value. Defaults to the running host.

    Returns:
        DiskEnumerator for the platform, or UnsupportedDiskEnumerator.
    """
    platform = platform or sys.platform

    if platform.startswith("linux"):
        return LinuxDiskEnumerator()
    if platform == "darwin":
        return MacDiskEnumerator()
    if platform in ("win32", "cygwin"):
        return WindowsDiskEnumerator()

    logger.info("Volume enumeration is not supported on %s", platform)
    return UnsupportedDiskEnumerator()

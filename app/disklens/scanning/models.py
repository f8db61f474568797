"""Scan domain models.

This module defines the immutable records a scan produces (discovered
entries and progress snapshots), the per-path outcome of a deletion,
and the payload rendering used by consumers that expect the stable
camelCase field names.
"""

from dataclasses import dataclass
from typing import Any

# currentPath of the terminal snapshot of a scan that ran to completion
SCAN_COMPLETE = "Scan complete"


@dataclass(frozen=True, slots=True)
class FileSystemEntry:
    """An immediate child of a scan root.

    Attributes:
        path: Absolute filesystem path of the entry.
        name: Final path component.
        size: Size in bytes. For directories this is the recursive sum of
            all regular files below it at measurement time.
        is_directory: True if the entry is a real directory (not a symlink).
    """

    path: str
    name: str
    size: int
    is_directory: bool

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Size cannot be negative, got {self.size}"
            raise ValueError(msg)

    def to_payload(self) -> dict[str, Any]:
        """Render the entry with its stable external field names."""
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "isDirectory": self.is_directory,
        }


@dataclass(frozen=True, slots=True)
class ScanProgress:
    """Snapshot of an in-flight scan.

    Attributes:
        current_path: Path of the last processed entry, the completion
            sentinel, or the point at which the scan was cancelled.
        files_scanned: Number of top-level entries processed so far.
        total_size: Sum of the sizes of the processed entries.
        is_complete: True only for the single terminal snapshot.
    """

    current_path: str
    files_scanned: int
    total_size: int
    is_complete: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Render the snapshot with its stable external field names."""
        return {
            "currentPath": self.current_path,
            "filesScanned": self.files_scanned,
            "totalSize": self.total_size,
            "isComplete": self.is_complete,
        }


# A scan yields discovered entries interleaved with progress snapshots
ScanEvent = FileSystemEntry | ScanProgress


def event_payload(event: ScanEvent) -> dict[str, Any]:
    """Wrap an event in its tagged payload.

    Args:
        event: A discovered entry or a progress snapshot.

    Returns:
        ``{"discovered": {...}}`` for entries, ``{"progress": {...}}``
        for snapshots.
    """
    if isinstance(event, FileSystemEntry):
        return {"discovered": event.to_payload()}
    return {"progress": event.to_payload()}


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Outcome of deleting a single requested path.

    Attributes:
        path: Path as it was requested.
        succeeded: Whether the path was removed.
        error_message: OS error text or "not found" message on failure.
        dry_run: Whether this was a dry-run (nothing was removed).
    """

    path: str
    succeeded: bool
    error_message: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return not self.succeeded

    def to_payload(self) -> dict[str, Any]:
        """Render the outcome with its stable external field names."""
        return {
            "path": self.path,
            "succeeded": self.succeeded,
            "errorMessage": self.error_message,
            "dryRun": self.dry_run,
        }

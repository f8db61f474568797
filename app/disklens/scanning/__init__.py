"""Directory scanning, sizing, deletion and volume enumeration.

This package holds the scan engine and the stateless filesystem
operations that the command line front end drives.
"""

from disklens.scanning.deletion import DeletionService
from disklens.scanning.engine import (
    BackgroundScan,
    ScanCancellationToken,
    ScanEngine,
    ScanHandle,
)
from disklens.scanning.exceptions import DiskLensError, ScanPathNotFoundError
from disklens.scanning.models import (
    SCAN_COMPLETE,
    DeletionResult,
    FileSystemEntry,
    ScanEvent,
    ScanProgress,
    event_payload,
)
from disklens.scanning.picker import FolderPicker, ZenityFolderPicker, get_folder_picker
from disklens.scanning.sizes import compute_size
from disklens.scanning.volumes import DiskEnumerator, get_disk_enumerator

__all__ = [
    "SCAN_COMPLETE",
    "BackgroundScan",
    "DeletionResult",
    "DeletionService",
    "DiskEnumerator",
    "DiskLensError",
    "FileSystemEntry",
    "FolderPicker",
    "ScanCancellationToken",
    "ScanEngine",
    "ScanEvent",
    "ScanHandle",
    "ScanPathNotFoundError",
    "ScanProgress",
    "ZenityFolderPicker",
    "compute_size",
    "event_payload",
    "get_disk_enumerator",
    "get_folder_picker",
]

"""Tests for scan domain models."""

import dataclasses

import pytest
from disklens.scanning.models import (
    SCAN_COMPLETE,
    DeletionResult,
    FileSystemEntry,
    ScanProgress,
    event_payload,
)


class TestFileSystemEntry:
    """Tests for FileSystemEntry."""

    def test_payload_uses_stable_field_names(self) -> None:
        """Consumers rely on the camelCase payload keys."""
        entry = FileSystemEntry(path="/tmp/x/b", name="b", size=50, is_directory=True)

        assert entry.to_payload() == {
            "path": "/tmp/x/b",
            "name": "b",
            "size": 50,
            "isDirectory": True,
        }

    def test_is_immutable(self) -> None:
        """Entries cannot be changed after construction."""
        entry = FileSystemEntry(path="/tmp/a", name="a", size=1, is_directory=False)

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.size = 2  # type: ignore[misc]

    def test_rejects_empty_path(self) -> None:
        """An entry needs a path."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            FileSystemEntry(path="", name="", size=0, is_directory=False)

    def test_rejects_negative_size(self) -> None:
        """Sizes are byte counts."""
        with pytest.raises(ValueError, match="negative"):
            FileSystemEntry(path="/tmp/a", name="a", size=-1, is_directory=False)


class TestScanProgress:
    """Tests for ScanProgress."""

    def test_defaults_to_incomplete(self) -> None:
        """Snapshots are non-terminal unless stated otherwise."""
        assert ScanProgress(current_path="/tmp", files_scanned=0, total_size=0).is_complete is False

    def test_payload_uses_stable_field_names(self) -> None:
        """Consumers rely on the camelCase payload keys."""
        progress = ScanProgress(
            current_path=SCAN_COMPLETE,
            files_scanned=2,
            total_size=150,
            is_complete=True,
        )

        assert progress.to_payload() == {
            "currentPath": "Scan complete",
            "filesScanned": 2,
            "totalSize": 150,
            "isComplete": True,
        }


class TestEventPayload:
    """Tests for event_payload."""

    def test_entry_is_tagged_discovered(self) -> None:
        """Entries are wrapped under "discovered"."""
        entry = FileSystemEntry(path="/tmp/a.txt", name="a.txt", size=100, is_directory=False)

        assert event_payload(entry) == {"discovered": entry.to_payload()}

    def test_progress_is_tagged_progress(self) -> None:
        """Snapshots are wrapped under "progress"."""
        progress = ScanProgress(current_path="/tmp/a.txt", files_scanned=20, total_size=9)

        assert event_payload(progress) == {"progress": progress.to_payload()}


class TestDeletionResult:
    """Tests for DeletionResult."""

    def test_failed_is_inverse_of_succeeded(self) -> None:
        """failed mirrors succeeded."""
        assert DeletionResult(path="/a", succeeded=True).failed is False
        assert DeletionResult(path="/a", succeeded=False, error_message="x").failed is True

    def test_payload(self) -> None:
        """Deletion outcomes render with camelCase keys."""
        result = DeletionResult(path="/a", succeeded=False, error_message="Path not found: /a")

        assert result.to_payload() == {
            "path": "/a",
            "succeeded": False,
            "errorMessage": "Path not found: /a",
            "dryRun": False,
        }

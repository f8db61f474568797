"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with a 100 byte file and a subdirectory holding 50 bytes.

    Layout::

        x/
            a.txt       (100 bytes)
            b/
                c.txt   (50 bytes)
    """
    root = tmp_path / "x"
    root.mkdir()
    (root / "a.txt").write_bytes(b"a" * 100)
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_bytes(b"c" * 50)
    return root


@pytest.fixture
def flat_tree(tmp_path: Path) -> Path:
    """Directory with 45 files of 10 bytes each."""
    root = tmp_path / "flat"
    root.mkdir()
    for i in range(45):
        (root / f"file{i:02d}.bin").write_bytes(b"0" * 10)
    return root

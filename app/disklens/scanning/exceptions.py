"""Exceptions raised by the scanning package."""


class DiskLensError(Exception):
    """Base exception for disklens errors."""


class ScanPathNotFoundError(DiskLensError, FileNotFoundError):
    """Raised when a scan root does not exist or is not a directory.

    This is the only failure a scan reports to its caller. Every
    per-entry problem during the walk is absorbed instead.

    Attributes:
        path: The rejected scan root.
    """

    def __init__(self, path: str, reason: str = "Path does not exist") -> None:
        self.path = path
        super().__init__(f"{reason}: {path}")

"""Batch deletion of files and directory trees.

Every requested path is attempted independently and gets exactly one
outcome; a failure on one path never stops the rest of the batch.
"""

import logging
import os
import shutil
import stat
from collections.abc import Sequence

from disklens.scanning.models import DeletionResult

logger = logging.getLogger(__name__)


class DeletionService:
    """Removes files and directory trees, reporting per-path outcomes.

    Attributes:
        _dry_run: If True, report what would be deleted without deleting.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the DeletionService.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    def delete(self, paths: Sequence[str]) -> list[DeletionResult]:
        """Delete multiple paths and return one result per path.

        Returns only after every path has been attempted. Errors are
        recorded in the results, never raised.

        Args:
            paths: Filesystem paths to delete.

        Returns:
            List of DeletionResult in request order.
        """
        results = [self._delete_single(path) for path in paths]

        failed = sum(1 for r in results if r.failed)
        if results:
            logger.info("Deleted %d of %d path(s)", len(results) - failed, len(results))
        return results

    def _delete_single(self, path: str) -> DeletionResult:
        """Delete a single path.

        Directories (but not symlinks to directories) are removed with
        shutil.rmtree as one outcome; files and symlinks are unlinked.
        Any OS error, including one raised while looking the path up,
        becomes a failed outcome.

        Args:
            path: Filesystem path to delete.

        Returns:
            DeletionResult indicating success or failure.
        """
        # lstat sees dangling symlinks, which can still be removed
        try:
            st = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError):
            logger.warning("Cannot delete %s: path not found", path)
            return DeletionResult(
                path=path,
                succeeded=False,
                error_message=f"Path not found: {path}",
                dry_run=self._dry_run,
            )
        except OSError as e:
            logger.warning("Cannot delete %s: %s", path, e)
            return DeletionResult(
                path=path,
                succeeded=False,
                error_message=str(e),
                dry_run=self._dry_run,
            )

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return DeletionResult(path=path, succeeded=True, dry_run=True)

        try:
            if stat.S_ISDIR(st.st_mode):
                shutil.rmtree(path)
            else:
                os.unlink(path)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return DeletionResult(path=path, succeeded=False, error_message=str(e))

        logger.debug("Deleted %s", path)
        return DeletionResult(path=path, succeeded=True)

"""Recursive directory size aggregation."""

import logging
import os
import stat

logger = logging.getLogger(__name__)


def compute_size(path: str | os.PathLike[str]) -> int:
    """Sum the sizes of all regular files below a path.

    Walks the tree with an explicit stack instead of recursion so deep
    trees cannot exhaust the interpreter stack. Symlinks are never
    followed and, like directories and special files, contribute
    nothing themselves. Anything that cannot be listed or stat'ed
    (permission denied, removed during the walk) is skipped.

    The function keeps no state between calls, so independent subtrees
    can be sized concurrently.

    Args:
        path: Directory (or file) to measure.

    Returns:
        Total size in bytes. A regular file yields its own size, a
        missing or unreadable path yields 0.
    """
    try:
        st = os.lstat(path)
    except OSError:
        return 0

    if stat.S_ISREG(st.st_mode):
        return st.st_size
    if not stat.S_ISDIR(st.st_mode):
        return 0

    total = 0
    pending: list[str] = [os.fspath(path)]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(entry.path)
                        elif entry.is_file(follow_symlinks=False):
                            total += entry.stat(follow_symlinks=False).st_size
                    except OSError:
                        logger.debug("Skipping unreadable entry: %s", entry.path)
        except OSError:
            logger.debug("Skipping unreadable directory: %s", current)

    return total

"""Streaming scan engine.

Lists the immediate children of a scan root, sizes each one (files
directly, directories through the size aggregator) and yields one
discovered entry per child, interleaved with periodic progress
snapshots and closed by exactly one terminal snapshot.

Each scan owns its own cancellation token and counters. The engine
only remembers the most recent scan so that ``cancel()`` can reach it.
"""

import logging
import os
import queue
import stat
import threading
from collections import deque
from collections.abc import Callable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from disklens.scanning.exceptions import ScanPathNotFoundError
from disklens.scanning.models import SCAN_COMPLETE, FileSystemEntry, ScanEvent, ScanProgress
from disklens.scanning.sizes import compute_size

logger = logging.getLogger(__name__)

# Emit a progress snapshot after this many top-level entries
DEFAULT_PROGRESS_INTERVAL = 20

SizeFunc = Callable[[str], int]
EventCallback = Callable[[ScanEvent], None]


class ScanCancellationToken:
    """Single-writer cancellation flag for one scan.

    Set by the requester, polled by the walk loop between entries.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Calling it more than once is harmless."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """Check whether cancellation has been requested."""
        return self._event.is_set()


@dataclass(slots=True)
class _PendingEntry:
    """A classified child whose size may still be computing."""

    path: str
    name: str
    is_directory: bool
    size: int | Future[int]

    def resolve(self) -> FileSystemEntry:
        size = self.size
        if isinstance(size, Future):
            try:
                size = size.result()
            except OSError:
                logger.debug("Size computation failed for %s", self.path)
                size = 0
        return FileSystemEntry(
            path=self.path,
            name=self.name,
            size=size,
            is_directory=self.is_directory,
        )


class ScanHandle:
    """One scan invocation: a lazy event stream plus its cancel capability.

    Iterating the handle drives the walk. Nothing touches the filesystem
    until the first event is requested, and a handle can only be
    iterated once.

    Args:
        root: Absolute path of an existing directory.
        progress_interval: Entries between non-terminal progress snapshots.
        size_workers: Number of threads sizing directories concurrently.
            With 1, sizing happens inline on the walking thread.
        size_func: Function used to size subdirectories.
    """

    def __init__(
        self,
        root: str,
        *,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        size_workers: int = 1,
        size_func: SizeFunc = compute_size,
    ) -> None:
        self.root = root
        self.token = ScanCancellationToken()
        self._progress_interval = progress_interval
        self._size_workers = size_workers
        self._size_func = size_func

        # Counters live here, never derived from delivered events
        self._files_scanned = 0
        self._total_size = 0
        self._stop_path: str | None = None
        self._finished = False
        self._events = self._walk()

    def __iter__(self) -> Iterator[ScanEvent]:
        return self._events

    def cancel(self) -> None:
        """Stop the scan before its next entry.

        Already emitted events stay emitted; the terminal snapshot is
        still produced.
        """
        self.token.cancel()

    @property
    def cancelled(self) -> bool:
        """Check whether cancellation was requested for this scan."""
        return self.token.cancelled

    @property
    def interrupted(self) -> bool:
        """Check whether the walk stopped before listing every child."""
        return self._stop_path is not None

    @property
    def finished(self) -> bool:
        """Check whether the terminal snapshot has been produced."""
        return self._finished

    @property
    def files_scanned(self) -> int:
        """Number of top-level entries processed so far."""
        return self._files_scanned

    @property
    def total_size(self) -> int:
        """Sum of the sizes of the processed entries."""
        return self._total_size

    def _walk(self) -> Iterator[ScanEvent]:
        executor = (
            ThreadPoolExecutor(max_workers=self._size_workers, thread_name_prefix="disklens-size")
            if self._size_workers > 1
            else None
        )
        try:
            if self.token.cancelled:
                self._stop_path = self.root
            else:
                for pending in self._prepared(executor):
                    if self.token.cancelled:
                        self._stop_path = pending.path
                        break

                    entry = pending.resolve()
                    self._files_scanned += 1
                    self._total_size += entry.size
                    yield entry

                    if self._files_scanned % self._progress_interval == 0:
                        yield ScanProgress(
                            current_path=entry.path,
                            files_scanned=self._files_scanned,
                            total_size=self._total_size,
                        )
        finally:
            if executor is not None:
                executor.shutdown(wait=False, cancel_futures=True)

        if self._stop_path is not None:
            logger.info(
                "Scan of %s cancelled at %s after %d entries",
                self.root,
                self._stop_path,
                self._files_scanned,
            )
        else:
            logger.info(
                "Scan of %s complete: %d entries, %d bytes",
                self.root,
                self._files_scanned,
                self._total_size,
            )

        self._finished = True
        yield ScanProgress(
            current_path=self._stop_path if self._stop_path is not None else SCAN_COMPLETE,
            files_scanned=self._files_scanned,
            total_size=self._total_size,
            is_complete=True,
        )

    def _prepared(self, executor: ThreadPoolExecutor | None) -> Iterator[_PendingEntry]:
        """Yield classified children in listing order.

        With an executor, up to ``size_workers`` directory sizes are in
        flight ahead of the entry being emitted.
        """
        window: deque[_PendingEntry] = deque()
        for dir_entry in self._iter_children():
            if self.token.cancelled:
                # Buffered entries were listed first, so the stop point is the oldest one
                self._stop_path = window[0].path if window else dir_entry.path
                return

            pending = self._classify(dir_entry, executor)
            if pending is None:
                continue

            window.append(pending)
            if len(window) >= self._size_workers:
                yield window.popleft()

        while window:
            yield window.popleft()

    def _iter_children(self) -> Iterator[os.DirEntry[str]]:
        try:
            with os.scandir(self.root) as it:
                yield from it
        except OSError as e:
            logger.warning("Cannot list %s: %s", self.root, e)

    def _classify(
        self,
        dir_entry: os.DirEntry[str],
        executor: ThreadPoolExecutor | None,
    ) -> _PendingEntry | None:
        """Classify a child and start sizing it.

        Returns None when the child's metadata cannot be read; such
        entries are neither emitted nor counted.
        """
        try:
            st = dir_entry.stat(follow_symlinks=False)
        except OSError:
            logger.debug("Skipping entry with unreadable metadata: %s", dir_entry.path)
            return None

        size: int | Future[int]
        is_directory = stat.S_ISDIR(st.st_mode)
        if is_directory:
            if executor is not None:
                size = executor.submit(self._size_func, dir_entry.path)
            else:
                try:
                    size = self._size_func(dir_entry.path)
                except OSError:
                    logger.debug("Size computation failed for %s", dir_entry.path)
                    size = 0
        elif stat.S_ISREG(st.st_mode):
            size = st.st_size
        else:
            # Symlinks and special files hold no file data of their own
            size = 0

        return _PendingEntry(
            path=dir_entry.path,
            name=dir_entry.name,
            is_directory=is_directory,
            size=size,
        )


_DONE = object()


class BackgroundScan:
    """Runs a scan on a daemon thread and delivers its events.

    Events go to an unbounded queue drained with :meth:`events`, or to
    ``on_event`` when a callback is given. A failing callback only drops
    that event; the scan and its counters carry on.

    Args:
        handle: The scan to drive.
        on_event: Optional callback invoked on the scan thread per event.
    """

    def __init__(self, handle: ScanHandle, on_event: EventCallback | None = None) -> None:
        self.handle = handle
        self._on_event = on_event
        self._queue: queue.Queue[object] = queue.Queue()
        self._thread = threading.Thread(
            target=self._run,
            name=f"disklens-scan:{handle.root}",
            daemon=True,
        )

    def start(self) -> None:
        """Start the scan thread."""
        self._thread.start()

    def cancel(self) -> None:
        """Request cancellation of the underlying scan."""
        self.handle.cancel()

    @property
    def running(self) -> bool:
        """Check whether the scan thread is still alive."""
        return self._thread.is_alive()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the scan thread to finish.

        Args:
            timeout: Seconds to wait, or None to wait indefinitely.

        Returns:
            True if the scan thread has finished.
        """
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def events(self, poll_interval: float = 0.1) -> Iterator[ScanEvent]:
        """Drain queued events until the scan thread is done.

        Polls the queue so that the consuming thread stays responsive to
        signals such as Ctrl-C.

        Args:
            poll_interval: Seconds to block on the queue per poll.

        Yields:
            Events in the order the scan produced them.
        """
        while True:
            try:
                item = self._queue.get(timeout=poll_interval)
            except queue.Empty:
                continue
            if item is _DONE:
                # Leave the marker for any other consumer
                self._queue.put(_DONE)
                return
            yield item  # type: ignore[misc]

    def _run(self) -> None:
        try:
            for event in self.handle:
                self._deliver(event)
        except Exception:
            logger.exception("Scan of %s failed", self.handle.root)
        finally:
            self._queue.put(_DONE)

    def _deliver(self, event: ScanEvent) -> None:
        if self._on_event is None:
            self._queue.put(event)
            return
        try:
            self._on_event(event)
        except Exception:
            logger.exception("Event consumer failed, dropping %s", type(event).__name__)


class ScanEngine:
    """Starts scans and cancels the most recent one.

    Scans of different roots may run concurrently; they share nothing
    but this engine's reference to the latest handle.

    Args:
        progress_interval: Entries between non-terminal progress snapshots.
        size_workers: Threads used to size subdirectories per scan.
        size_func: Function used to size subdirectories.

    Example:
        >>> engine = ScanEngine()
        >>> for event in engine.scan("/tmp"):
        ...     print(event)
    """

    def __init__(
        self,
        *,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        size_workers: int = 1,
        size_func: SizeFunc = compute_size,
    ) -> None:
        if progress_interval < 1:
            msg = f"progress_interval must be at least 1, got {progress_interval}"
            raise ValueError(msg)
        if size_workers < 1:
            msg = f"size_workers must be at least 1, got {size_workers}"
            raise ValueError(msg)

        self._progress_interval = progress_interval
        self._size_workers = size_workers
        self._size_func = size_func
        self._lock = threading.Lock()
        self._latest: ScanHandle | None = None

    def scan(self, root: str | os.PathLike[str]) -> ScanHandle:
        """Prepare a scan of a directory.

        The root is validated immediately; the walk itself runs lazily
        as the returned handle is iterated.

        Args:
            root: Directory to scan.

        Returns:
            ScanHandle yielding the scan's events.

        Raises:
            ScanPathNotFoundError: If root does not exist or is not a directory.
        """
        root_path = os.path.abspath(os.fspath(root))
        if not os.path.exists(root_path):
            raise ScanPathNotFoundError(root_path)
        if not os.path.isdir(root_path):
            raise ScanPathNotFoundError(root_path, reason="Not a directory")

        handle = ScanHandle(
            root_path,
            progress_interval=self._progress_interval,
            size_workers=self._size_workers,
            size_func=self._size_func,
        )
        with self._lock:
            self._latest = handle
        logger.debug("Prepared scan of %s", root_path)
        return handle

    def start(
        self,
        root: str | os.PathLike[str],
        on_event: EventCallback | None = None,
    ) -> BackgroundScan:
        """Scan a directory on a background thread.

        Validation happens on the calling thread, so a missing root
        raises here and no thread is started.

        Args:
            root: Directory to scan.
            on_event: Optional callback receiving each event.

        Returns:
            The running BackgroundScan.

        Raises:
            ScanPathNotFoundError: If root does not exist or is not a directory.
        """
        background = BackgroundScan(self.scan(root), on_event)
        background.start()
        return background

    def cancel(self) -> bool:
        """Cancel the most recently started scan.

        Returns:
            False if this engine has not started any scan yet.
        """
        with self._lock:
            handle = self._latest
        if handle is None:
            return False
        handle.cancel()
        return True

import logging
import os
import time
from collections.abc import Callable
from pathlib import Path

from .metadata import read_metadata
from .models import EntryKind, EntryRecord, ScanResult
from .walker import iter_entries

logger: logging.Logger = logging.getLogger(__name__)

# (current_path, files, dirs, bytes_scanned)
ProgressCb = Callable[[str, int, int, int], None]

PROGRESS_INTERVAL_SEC: float = 0.10


def scan(root: str | os.PathLike[str] | None = None, progress: ProgressCb | None = None) -> ScanResult:
    """
    Scan everything reachable from `root` and return a fresh result.

    Nothing is kept between calls: every scan builds its own records and
    counters, so independent scans never interfere.

    Parameters
    ----------
    root : str | PathLike | None
        Directory to scan. Defaults to the current working directory.
    progress : ProgressCb | None
        Called with running counters, at most every
        `PROGRESS_INTERVAL_SEC` seconds.

    Raises
    ------
    RootUnreadable
        If the root does not exist or cannot be listed.
    MetadataUnavailable
        If an enumerated entry cannot be stat-ed.
    """
    root_path: str = os.path.abspath(os.fspath(root) if root else Path.cwd())

    t0: float = time.perf_counter()
    logger.info("Starting directory scan of %s", root_path)

    records: list[EntryRecord] = []
    files: int = 0
    dirs: int = 0
    others: int = 0
    bytes_scanned: int = 0

    last_emit: float = float("-inf")
    last_path: str = root_path

    for path in iter_entries(root_path):
        record: EntryRecord = read_metadata(path)
        records.append(record)
        last_path = path

        if record.kind is EntryKind.FILE:
            files += 1
            bytes_scanned += record.size
        elif record.kind is EntryKind.DIRECTORY:
            dirs += 1
        else:
            others += 1

        if progress is not None:
            now: float = time.perf_counter()
            if now - last_emit >= PROGRESS_INTERVAL_SEC:
                last_emit = now
                progress(path, files, dirs, bytes_scanned)

    # Final totals, whatever the throttle let through
    if progress is not None:
        progress(last_path, files, dirs, bytes_scanned)

    elapsed: float = time.perf_counter() - t0
    logger.info("Scan completed in %.2f seconds. Found %d items.", elapsed, len(records))

    return ScanResult(
        root=root_path,
        records=tuple(records),
        file_count=files,
        dir_count=dirs,
        other_count=others,
        total_bytes=bytes_scanned,
        elapsed_sec=elapsed,
    )

import heapq
import os

from .models import EntryRecord, ExtensionStats, ScanResult

NO_EXTENSION: str = "no_extension"


def file_extension(path: str) -> str:
    """
    Lowercase extension of the filename component of `path`.

    Follows `os.path.splitext`: leading dots do not start an extension, so
    `.gitignore` has none. Names without an extension, and names ending in
    a bare dot, map to `NO_EXTENSION`.
    """
    ext: str = os.path.splitext(os.path.basename(path))[1]
    ext = ext[1:].lower()
    return ext or NO_EXTENSION


def total_size(result: ScanResult) -> int:
    return sum(record.size for record in result.records if record.is_file)


def extension_summary(result: ScanResult) -> dict[str, ExtensionStats]:
    counts: dict[str, tuple[int, int]] = {}

    for record in result.records:
        if not record.is_file:
            continue
        ext: str = file_extension(record.path)
        count, size = counts.get(ext, (0, 0))
        counts[ext] = (count + 1, size + record.size)

    return {ext: ExtensionStats(count=count, total_size=size) for ext, (count, size) in counts.items()}


def sorted_extensions(summary: dict[str, ExtensionStats]) -> list[tuple[str, ExtensionStats]]:
    """Order for display: most files first, then most bytes, then name."""
    return sorted(summary.items(), key=lambda item: (-item[1].count, -item[1].total_size, item[0]))


def largest_files(result: ScanResult, limit: int) -> list[EntryRecord]:
    # nlargest keeps traversal order among equal sizes
    if limit <= 0:
        return []
    return heapq.nlargest(limit, (record for record in result.records if record.is_file), key=lambda r: r.size)

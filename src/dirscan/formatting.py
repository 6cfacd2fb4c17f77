import os

from .models import ScanResult
from .stats import extension_summary, largest_files, sorted_extensions, total_size

KB: int = 1024
MB: int = KB * 1024
GB: int = MB * 1024

DEFAULT_TOP_FILES: int = 10


def format_size(num: int) -> str:
    if num >= GB:
        return f"{num / GB:.2f} GB"
    if num >= MB:
        return f"{num / MB:.2f} MB"
    if num >= KB:
        return f"{num / KB:.2f} KB"
    return f"{num} bytes"


def display_path(path: str, root: str) -> str:
    """Show `path` relative to the scan root when it lies beneath it."""
    if not root:
        return path
    try:
        if os.path.commonpath([os.path.abspath(path), os.path.abspath(root)]) != os.path.abspath(root):
            return path
    except ValueError:
        # Different drives on Windows
        return path
    return os.path.relpath(path, root)


def render_report(result: ScanResult, top: int = DEFAULT_TOP_FILES) -> list[str]:
    lines: list[str] = []

    lines.append("Scan summary")
    lines.append("------------")
    lines.append(f"Elapsed:             {result.elapsed_sec:.2f} seconds")
    lines.append(f"Directories:         {result.dir_count}")
    lines.append(f"Files:               {result.file_count}")
    lines.append(f"Total size:          {format_size(total_size(result))}")

    lines.append("")
    lines.append("File types")
    lines.append("----------")
    by_extension = sorted_extensions(extension_summary(result))
    if not by_extension:
        lines.append("(none)")
    for ext, ext_stats in by_extension:
        lines.append(f"{ext}: {ext_stats.count} files ({format_size(ext_stats.total_size)})")

    lines.append("")
    lines.append(f"Largest files (top {top})")
    lines.append("-" * len(lines[-1]))
    largest = largest_files(result, top)
    if not largest:
        lines.append("(none)")
    for record in largest:
        # A file given as the root would otherwise render as "."
        shown: str = os.path.basename(record.path) if record.path == result.root else display_path(record.path, result.root)
        lines.append(f"{format_size(record.size):>12}  {shown}")

    return lines

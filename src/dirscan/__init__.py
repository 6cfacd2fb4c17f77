from .errors import MetadataUnavailable, RootUnreadable, ScanError
from .models import EntryKind, EntryRecord, ExtensionStats, ScanResult
from .scanner import scan
from .stats import extension_summary, largest_files, total_size

__all__ = [
    "EntryKind",
    "EntryRecord",
    "ExtensionStats",
    "MetadataUnavailable",
    "RootUnreadable",
    "ScanError",
    "ScanResult",
    "extension_summary",
    "largest_files",
    "scan",
    "total_size",
]

import os
import stat as statmod
from datetime import datetime

from .errors import MetadataUnavailable
from .models import EntryKind, EntryRecord


def classify(mode: int) -> EntryKind:
    if statmod.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if statmod.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def read_metadata(path: str) -> EntryRecord:
    """Stat one entry without following symlinks and build its record."""
    try:
        st: os.stat_result = os.lstat(path)
    except OSError as e:
        raise MetadataUnavailable(path, e.strerror or str(e)) from e

    kind: EntryKind = classify(st.st_mode)
    size: int = st.st_size if kind is EntryKind.FILE else 0

    return EntryRecord(
        path=path,
        size=size,
        kind=kind,
        modified_at=datetime.fromtimestamp(st.st_mtime),
    )

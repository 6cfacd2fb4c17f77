from datetime import datetime
from pathlib import Path

import pytest

from dirscan.models import EntryKind, EntryRecord, ScanResult


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    root/
        NOTES        50 bytes
        sub/
            a.txt   100 bytes
            b.txt   300 bytes
    """
    root: Path = tmp_path / "root"
    sub: Path = root / "sub"
    sub.mkdir(parents=True)
    (sub / "a.txt").write_bytes(b"a" * 100)
    (sub / "b.txt").write_bytes(b"b" * 300)
    (root / "NOTES").write_bytes(b"n" * 50)
    return root


def make_record(path: str, size: int, kind: EntryKind = EntryKind.FILE) -> EntryRecord:
    return EntryRecord(path=path, size=size, kind=kind, modified_at=datetime(2024, 1, 1))


def make_result(*records: EntryRecord, root: str = "/data") -> ScanResult:
    files: list[EntryRecord] = [r for r in records if r.kind is EntryKind.FILE]
    return ScanResult(
        root=root,
        records=tuple(records),
        file_count=len(files),
        dir_count=sum(1 for r in records if r.kind is EntryKind.DIRECTORY),
        other_count=sum(1 for r in records if r.kind is EntryKind.OTHER),
        total_bytes=sum(r.size for r in files),
    )

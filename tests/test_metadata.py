from pathlib import Path

import pytest

from dirscan.errors import MetadataUnavailable
from dirscan.metadata import read_metadata
from dirscan.models import EntryKind


def test_regular_file(sample_tree: Path):
    record = read_metadata(str(sample_tree / "sub" / "b.txt"))

    assert record.kind is EntryKind.FILE
    assert record.size == 300
    assert record.path == str(sample_tree / "sub" / "b.txt")
    assert record.modified_at.year >= 2000


def test_directory_has_zero_size(sample_tree: Path):
    record = read_metadata(str(sample_tree / "sub"))

    assert record.kind is EntryKind.DIRECTORY
    assert record.size == 0


def test_symlink_is_other(sample_tree: Path):
    link = sample_tree / "link.txt"
    try:
        link.symlink_to(sample_tree / "sub" / "b.txt")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")

    record = read_metadata(str(link))

    assert record.kind is EntryKind.OTHER
    assert record.size == 0


def test_vanished_entry_raises(tmp_path: Path):
    gone = str(tmp_path / "gone.txt")

    with pytest.raises(MetadataUnavailable) as excinfo:
        read_metadata(gone)

    assert excinfo.value.path == gone
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)

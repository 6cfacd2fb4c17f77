from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class EntryRecord:
    path: str
    size: int
    kind: EntryKind
    modified_at: datetime

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE


@dataclass(frozen=True, slots=True)
class ExtensionStats:
    count: int
    total_size: int


@dataclass(frozen=True)
class ScanResult:
    root: str
    records: tuple[EntryRecord, ...] = field(default_factory=tuple)

    # Running counters, collected during traversal
    file_count: int = 0
    dir_count: int = 0
    other_count: int = 0
    total_bytes: int = 0

    elapsed_sec: float = 0.0

    @classmethod
    def empty(cls, root: str = "") -> "ScanResult":
        """A result for a scan that never ran."""
        return cls(root=root)

    def files(self) -> list[EntryRecord]:
        return [record for record in self.records if record.is_file]

    def __len__(self) -> int:
        return len(self.records)

class ScanError(Exception):
    """Base class for errors that abort a scan."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path: str = path
        self.reason: str = reason


class RootUnreadable(ScanError):
    """The scan root does not exist or cannot be opened for traversal."""


class MetadataUnavailable(ScanError):
    """Metadata of an enumerated entry could not be read."""

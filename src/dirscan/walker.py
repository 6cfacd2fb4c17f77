import logging
import os
import stat as statmod
from collections.abc import Iterator

from .errors import RootUnreadable

logger: logging.Logger = logging.getLogger(__name__)


def _skip_unreadable(error: OSError) -> None:
    logger.debug("Skipping unreadable entry %s: %s", error.filename, error.strerror or error)


def check_root(root: str) -> None:
    """
    Make sure `root` can be traversed.

    Raises
    ------
    RootUnreadable
        If the root does not exist, cannot be stat-ed, or is a directory
        whose listing cannot be opened.
    """
    try:
        st: os.stat_result = os.stat(root)
    except OSError as e:
        raise RootUnreadable(root, e.strerror or str(e)) from e

    if not statmod.S_ISDIR(st.st_mode):
        return

    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise RootUnreadable(root, e.strerror or str(e)) from e


def _walk(root: str) -> Iterator[str]:
    yield root

    if not os.path.isdir(root):
        return

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_skip_unreadable, followlinks=False):
        for name in dirnames:
            yield os.path.join(dirpath, name)
        for name in filenames:
            yield os.path.join(dirpath, name)


def iter_entries(root: str) -> Iterator[str]:
    """
    Lazily yield every entry reachable from `root`, the root included.

    The root is validated before the iterator is handed out, so an
    unreadable root fails here and not on the first `next()`. Listing
    errors below the root are skipped.
    """
    check_root(root)
    return _walk(root)

import logging
import sys

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.StreamHandler | None = None


def resolve_level(level: str | int) -> int:
    """Turn a level name such as "info" into its number."""
    if isinstance(level, int):
        return level

    resolved: object = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Send the package's log records to the current stderr at the given level.

    Calling it again replaces the previous handler, so there is only ever
    one and it never writes to a stream that has since been closed.
    """
    global _handler

    numeric_level: int = resolve_level(level)

    logger: logging.Logger = logging.getLogger("dirscan")
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

    logger.setLevel(numeric_level)
    return logger

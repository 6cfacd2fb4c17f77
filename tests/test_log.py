import logging

import pytest

from dirscan.log import configure_logging, resolve_level


def test_reconfigure_keeps_one_handler():
    configure_logging("INFO")
    logger = configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        resolve_level("LOUD")

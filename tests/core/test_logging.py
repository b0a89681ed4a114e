"""
Tests for the logging helpers.
"""

import logging

import pytest
from core.logging import LOGGER_NAME, log_debug, log_info, logger, setup_logging
from rich.logging import RichHandler


@pytest.fixture
def restore_logger():
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_context_appended(caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        log_debug("hero attacks", {"damage": 5, "outcome": "regular"})
        log_info("battle won")
    assert caplog.messages == ["hero attacks [damage=5 outcome=regular]", "battle won"]


def test_setup_logging_single_handler(restore_logger):
    setup_logging(logging.DEBUG)
    setup_logging("WARNING", show_time=False)
    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING
    assert not logger.propagate

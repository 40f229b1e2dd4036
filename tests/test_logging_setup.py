"""Tests for logging setup."""

import logging

import pytest

from cheatproxy.logging import LOG_FORMAT, LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_level():
    yield
    setup_logging(logging.INFO)


def test_setup_logging_installs_single_stdout_handler():
    setup_logging()
    logger = setup_logging()
    assert logger.name == LOGGER_NAME == "cheat-proxy"
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert logger.propagate is True


@pytest.mark.parametrize("level,expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("bogus", logging.INFO)])
def test_setup_logging_accepts_level_names(level, expected):
    assert setup_logging(level).level == expected

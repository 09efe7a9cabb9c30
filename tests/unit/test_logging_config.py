"""Unit tests for console logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from termlinks.logging_config import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    setup_logging,
)


def make_record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_prefix_filter():
    flt = ThirdPartyPrefixFilter()
    ours = make_record("termlinks.services.link_opener")
    theirs = make_record("urllib3.connectionpool")
    assert flt.filter(ours) is True
    assert flt.filter(theirs) is True
    assert ours.prefix == ""
    assert theirs.prefix == "[urllib3]"


def test_console_handler_defaults():
    handler = config_console_handler(level=logging.WARNING, color=False)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode():
    handler = config_console_handler(level=logging.WARNING, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_setup_logging_replaces_previous_handler(restore_root_logger):
    first = setup_logging(level=logging.INFO, color=False)
    second = setup_logging(level=logging.ERROR, color=False)
    rich_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RichHandler)]
    assert rich_handlers == [second]
    assert first not in restore_root_logger.handlers
    assert restore_root_logger.level == logging.ERROR

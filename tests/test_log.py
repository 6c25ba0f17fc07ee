"""Tests for the sparseblade logging hierarchy."""

import logging
import sys

import log


def test_logger_lives_under_project_hierarchy():
    logger = log.get_logger("core.algebra")
    assert logger.name == "sparseblade.core.algebra"


def test_root_configured_once():
    log.get_logger("a")
    log.get_logger("b")
    root = logging.getLogger(log.ROOT_LOGGER)
    consoles = [h for h in root.handlers if type(h) is logging.StreamHandler]
    assert len(consoles) == 1
    assert root.propagate is False


def test_color_formatter_leaves_record_untouched():
    formatter = log._ColorFormatter("%(levelname)s %(message)s", use_color=True)
    record = logging.LogRecord("sparseblade.x", logging.INFO, __file__, 1, "hello", None, None)
    text = formatter.format(record)
    assert "hello" in text
    assert "\033[32m" in text
    assert record.levelname == "INFO"


def test_console_handler_writes_to_stderr():
    root = logging.getLogger(log.ROOT_LOGGER)
    consoles = [h for h in root.handlers if type(h) is logging.StreamHandler]
    assert consoles[0].stream is not sys.stdout

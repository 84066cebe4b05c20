"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

from todolite.utils.logger import get_logger


def test_get_logger_creates_log_file(isolated_logger):
    logger = get_logger()
    assert (isolated_logger / "todolite.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_logger):
    logger = get_logger()
    logger.info("hello from test")
    for handler in logger.handlers:
        handler.flush()

    content = (isolated_logger / "todolite.log").read_text(encoding="utf-8")
    assert "hello from test" in content


def test_get_logger_creates_parent_dirs(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    with patch("todolite.utils.logger.user_log_dir", return_value=str(nested)):
        get_logger()
    assert nested.is_dir()


def test_logger_does_not_propagate():
    assert get_logger().propagate is False


def test_file_handler_added_alongside_existing_handlers(isolated_logger):
    other = logging.NullHandler()
    logging.getLogger("todolite").addHandler(other)
    try:
        logger = get_logger()
        logger.info("reaches the file")
        for handler in logger.handlers:
            handler.flush()
        content = (isolated_logger / "todolite.log").read_text(encoding="utf-8")
        assert "reaches the file" in content
        assert other in logger.handlers
    finally:
        logging.getLogger("todolite").removeHandler(other)


def test_reinitialising_keeps_a_single_file_handler():
    import todolite.utils.logger as logger_mod

    get_logger()
    logger_mod._logger = None
    logger = get_logger()
    file_handlers = [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1

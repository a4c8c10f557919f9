from __future__ import annotations

import logging

from rich.logging import RichHandler

from tetromino_game.utils.logging import setup_logger


def test_setup_logger_uses_rich_handler() -> None:
    logger = setup_logger(name="tests.logging.rich", use_rich=True, level="debug")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_setup_logger_plain_handler_and_unknown_level() -> None:
    logger = setup_logger(name="tests.logging.plain", use_rich=False, level="nonsense")
    assert logger.level == logging.INFO
    assert type(logger.handlers[0]) is logging.StreamHandler


def test_setup_logger_replaces_previous_handlers() -> None:
    setup_logger(name="tests.logging.again", use_rich=False)
    logger = setup_logger(name="tests.logging.again", use_rich=False)
    assert len(logger.handlers) == 1

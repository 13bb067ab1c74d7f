"""Tests for logging configuration."""

import logging

from sugar_counter.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("sugar_counter")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_applies_level_to_package_logger() -> None:
    logger = logging.getLogger("sugar_counter")
    logger.handlers.clear()

    configure_logging(logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert not logger.propagate
    assert logging.getLogger("sugar_counter.services.insights").isEnabledFor(
        logging.DEBUG
    )

    configure_logging(logging.WARNING)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    configure_logging()

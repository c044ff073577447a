"""Tests for logging configuration."""

import logging

from nutritrack.api.app import create_app
from nutritrack.app_logging import LOGGER_NAME, configure_logging
from nutritrack.config import Settings
from nutritrack.containers import build_container


def test_configure_logging_adds_single_handler() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_configure_logging_updates_level() -> None:
    logger = logging.getLogger(LOGGER_NAME)

    configure_logging("debug")
    assert logger.level == logging.DEBUG

    configure_logging("WARNING")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_create_app_applies_configured_level(settings: Settings) -> None:
    settings.log_level = "ERROR"

    create_app(build_container(settings))

    assert logging.getLogger(LOGGER_NAME).level == logging.ERROR
    configure_logging()

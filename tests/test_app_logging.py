"""Tests for logging configuration."""

import asyncio
import logging

from blog_client.app_logging import configure_logging
from blog_client.config import Settings
from blog_client.containers import build_container


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("blog_client")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_container_applies_configured_level(settings: Settings) -> None:
    settings.log_level = "DEBUG"

    container = build_container(settings)

    assert logging.getLogger("blog_client").level == logging.DEBUG
    asyncio.run(container.close_resources())

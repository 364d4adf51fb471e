"""Shared pytest fixtures for the full Naturalize test suite."""

from __future__ import annotations

from typing import Iterator

import pytest
from loguru import logger


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Enable package logging and collect emitted messages for one test."""

    messages: list[str] = []
    logger.enable("naturalize")
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        format="{message}",
        level="DEBUG",
    )
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable("naturalize")

"""Shared test fixtures."""

from collections.abc import Callable
from datetime import datetime

import pytest
from loguru import logger

from tests.fakes import NOW


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Frozen wall clock so ages (and whole analyses) are reproducible."""
    return lambda: NOW


@pytest.fixture
def log_messages():
    """Capture loguru output for assertions on provider tags."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)

"""Shared pytest fixtures for huelog tests."""

import io

import pytest
from loguru import logger

from huelog.registry import Registry


@pytest.fixture(autouse=True)
def disable_loguru():
    """Disable loguru output during tests for cleaner output."""
    logger.disable("huelog")
    # huelog keeps itself disabled outside tests too, so nothing to restore
    yield


@pytest.fixture
def registry():
    """An isolated registry so broadcasts only reach this test's loggers."""
    return Registry()


@pytest.fixture
def buffer():
    """In-memory text sink."""
    return io.StringIO()

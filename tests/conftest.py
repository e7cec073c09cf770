"""Pytest configuration and fixtures."""

import logging

import pytest

from expectkit.spec import Spec


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up expectkit loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("expectkit")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def spec():
    """Fresh result sink for a single test."""
    return Spec("under test")

"""Shared test fixtures for planar."""

import logging

import pytest

from planar.config import LOGGER_NAME
from planar.model.geometry_primitives import Point


@pytest.fixture
def origin() -> Point:
    return Point.origin()


@pytest.fixture
def package_logger():
    """Package logger, restored to a handler-less NOTSET state afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

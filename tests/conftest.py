"""Pytest configuration and fixtures."""

import io
import logging

import pytest
from rich.console import Console


@pytest.fixture
def half_recorded():
    """Weights and grades covering half of the course."""
    return [20, 30], [70, 90]


@pytest.fixture
def buffer_console():
    """Return a (console, buffer) pair that renders into memory."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return console, buffer


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers the CLI attached so later tests never log to a closed stream."""
    yield
    logger = logging.getLogger("grade_calculator")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)

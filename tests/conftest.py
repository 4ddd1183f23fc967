"""Pytest configuration and shared fixtures."""

import pytest

from lazybox.core.container import Container
from lazybox.logging_config import configure_logging


def pytest_configure(config):
    """Keep container debug events out of test output."""
    configure_logging("WARNING")


@pytest.fixture
def container():
    return Container()


@pytest.fixture
def counter():
    """Definition that counts its calls and returns a fresh object each time."""

    class Counter:
        def __init__(self):
            self.calls = 0

        def __call__(self, c):
            self.calls += 1
            return {"call": self.calls}

    return Counter()

"""Pytest configuration and fixtures for all tests."""

import pytest

from powerplant.core.logging_system import initialize_logging, shutdown_logging


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep the package console handler out of test output.

    Records still propagate to the root logger, so ``caplog`` sees them.
    """
    initialize_logging(config={"console": {"enabled": False}})

    yield

    shutdown_logging()

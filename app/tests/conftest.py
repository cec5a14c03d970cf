"""Shared pytest configuration for the langfall test suite."""

import pytest

from langfall.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Install the test-silent logging configuration for the whole session."""
    configure_logging()

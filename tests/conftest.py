"""Shared fixtures."""

import logging

import pytest
import structlog
from fakes import FakeBackend


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence structlog as the CLI's default log level does."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield
    structlog.reset_defaults()


@pytest.fixture
def backend() -> FakeBackend:
    """Create an empty in-memory backend."""
    return FakeBackend()

"""
Shared fixtures for signed_request tests.
"""

import pytest
import structlog

NOW = 1_700_000_000
SECRET = "shared-secret"


def fixed_clock(at: int = NOW):
    """Clock that always returns the given epoch second."""
    return lambda: at


@pytest.fixture
def ctx():
    """Signing context with a 30 second TTL and a frozen clock."""
    from signed_request import new_context

    return new_context(SECRET, ttl=30, clock=fixed_clock())


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

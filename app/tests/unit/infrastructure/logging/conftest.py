"""Fixtures for infrastructure.logging tests."""

import pytest


@pytest.fixture
def force_non_test_environment(monkeypatch):
    """Make configure_logging() take the regular (non-test) branch."""
    monkeypatch.setattr(
        "infrastructure.logging.setup._is_test_environment", lambda: False
    )
    yield
    # Restore the silenced test configuration for the following tests
    monkeypatch.undo()
    from infrastructure.logging.setup import configure_logging

    configure_logging()

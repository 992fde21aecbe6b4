"""Shared pytest fixtures and configuration."""

import logging
from datetime import datetime

import pytest

from release_notes.tracker import ResolvedTicket


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: tests against a real local git repository")


@pytest.fixture(autouse=True)
def reset_release_notes_logger():
    """Drop handlers added by setup_logging so tests don't leak log files."""
    yield
    logger = logging.getLogger("release_notes")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed generation timestamp."""
    return datetime(2024, 3, 5, 14, 30, 12)


@pytest.fixture
def resolved_tickets() -> list[ResolvedTicket]:
    """Two resolved tickets in first-seen order."""
    return [
        ResolvedTicket("GCW-10", "Fix login redirect"),
        ResolvedTicket("GCW-22", "Add donor export"),
    ]

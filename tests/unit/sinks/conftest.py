"""Fixtures for sink tests."""

from datetime import datetime

import pytest

from release_notes.report import Report, assemble_report
from release_notes.tracker import ResolvedTicket


@pytest.fixture
def report(fixed_time: datetime, resolved_tickets: list[ResolvedTicket]) -> Report:
    """An assembled report for a repo whose name contains spaces."""
    return assemble_report(
        repo_name="Good City App",
        version="2.0.0",
        remote_url="git@github.com:crossroads/app.goodcity.git",
        generated_at=fixed_time,
        tickets=resolved_tickets,
        tracker_host="jira.example.com",
    )

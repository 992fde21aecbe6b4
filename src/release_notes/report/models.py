"""Data models for the release notes report."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from release_notes.tracker.models import ResolvedTicket


@dataclass(frozen=True)
class Report:
    """A fully rendered release notes document."""

    repo_name: str
    version: str
    remote_url: str
    generated_at: datetime
    tracker_host: str
    tickets: tuple[ResolvedTicket, ...]
    markdown: str

    @property
    def title(self) -> str:
        """Human-readable title, also used as the default email subject."""
        return f"Release notes {self.repo_name} v{self.version}"

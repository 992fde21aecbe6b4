"""Data models for the Jira tracker."""

from dataclasses import dataclass

# Summary used when the tracker has no such ticket
UNAVAILABLE_SUMMARY = "_Ticket information unavailable_"


@dataclass(frozen=True)
class ResolvedTicket:
    """A ticket identifier paired with its summary."""

    id: str  # e.g. GCW-123
    summary: str
    found: bool = True

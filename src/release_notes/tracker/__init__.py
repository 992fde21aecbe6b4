"""Tracker - Resolves ticket summaries from Jira."""

from release_notes.tracker.client import JiraClient
from release_notes.tracker.exceptions import (
    TicketNotFoundError,
    TrackerAuthError,
    TrackerError,
    TrackerLookupError,
)
from release_notes.tracker.models import UNAVAILABLE_SUMMARY, ResolvedTicket
from release_notes.tracker.resolver import TicketResolver

__all__ = [
    "UNAVAILABLE_SUMMARY",
    "JiraClient",
    "ResolvedTicket",
    "TicketNotFoundError",
    "TicketResolver",
    "TrackerAuthError",
    "TrackerError",
    "TrackerLookupError",
]

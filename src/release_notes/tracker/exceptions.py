"""Custom exceptions for the Jira tracker."""

from release_notes.exceptions import ReleaseNotesError


class TrackerError(ReleaseNotesError):
    """Base exception for tracker errors."""


class TrackerAuthError(TrackerError):
    """Credentials were rejected by the tracker."""


class TrackerLookupError(TrackerError):
    """A ticket lookup failed (server error, network failure, bad response)."""


class TicketNotFoundError(TrackerLookupError):
    """Ticket with given ID does not exist."""

"""Custom exceptions for output sinks."""

from release_notes.exceptions import ReleaseNotesError


class SinkError(ReleaseNotesError):
    """Base exception for output sink errors."""


class RenderError(SinkError):
    """Markdown could not be converted to PDF."""


class MailConfigError(SinkError):
    """Email sink is missing required configuration."""


class MailSendError(SinkError):
    """Email provider rejected or failed to deliver the message."""

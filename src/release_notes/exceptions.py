"""Base exception shared by every release-notes component."""


class ReleaseNotesError(Exception):
    """Base exception for all fatal release-notes errors."""

"""Custom exceptions for Git Reader."""

from release_notes.exceptions import ReleaseNotesError


class SourceControlError(ReleaseNotesError):
    """Git is unavailable, the directory is not a repository, or a ref is invalid."""

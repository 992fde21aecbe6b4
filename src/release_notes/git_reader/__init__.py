"""Git Reader - Reads commit history and repository metadata."""

from release_notes.git_reader.exceptions import SourceControlError
from release_notes.git_reader.models import RepoInfo
from release_notes.git_reader.reader import GitReader

__all__ = [
    "GitReader",
    "RepoInfo",
    "SourceControlError",
]

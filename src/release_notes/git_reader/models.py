"""Data models for Git Reader."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoInfo:
    """Display metadata for the repository being released."""

    name: str
    version: str
    remote_url: str
